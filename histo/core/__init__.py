"""
Core module: the histogram and its analytic views.
"""

from .histogram import Histogram, count_limit
from .analysis import mean, weighted_mean, normalize_by_area

__all__ = [
    'Histogram',
    'count_limit',
    'mean',
    'weighted_mean',
    'normalize_by_area'
]
