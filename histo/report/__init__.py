"""
Report module: fixed-width textual dumps of breaks, counts and centers.
"""

from .formatting import (
    format_breaks,
    format_counts,
    format_centers,
    format_breaks_and_counts,
    format_centers_and_counts,
    print_report
)

__all__ = [
    'format_breaks',
    'format_counts',
    'format_centers',
    'format_breaks_and_counts',
    'format_centers_and_counts',
    'print_report'
]
