"""
Analysis modules for computed schedules.
"""

from .critical_path import analyze_critical_path, print_critical_path_report

__all__ = [
    'analyze_critical_path',
    'print_critical_path_report',
]
