"""
Reporting utilities for carb analysis.
"""
from .report_builder import ReportBuilder, Report, curve_frame, export_curves
from .chart_builder import ChartBuilder

__all__ = [
    'ReportBuilder',
    'Report',
    'curve_frame',
    'export_curves',
    'ChartBuilder',
]
