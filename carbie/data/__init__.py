"""
Data loading for analysis results.
"""
from .analysis_loader import AnalysisLoader
from .sample_data import SAMPLES, list_samples, get_sample

__all__ = [
    'AnalysisLoader',
    'SAMPLES',
    'list_samples',
    'get_sample',
]
