"""
Carbie carb absorption modeling.
"""
__version__ = "0.1.0"
