"""
Breaks module: computation of the frontiers between bins.

This module provides:
- Generation of equidistant breaks from a range and a number of bins or a width
- Scott's rule bin width and breaks
- Validation (monotonicity, equidistance)
- Balancing of equidistant breaks with a required range
"""

from .generate import (
    generate_breaks_from_range_and_bins,
    generate_breaks_from_range_and_width,
    generate_breaks_from_range
)
from .validation import check_monotonically_increasing, are_equidistant
from .balance import balance_breaks_with_range
from .scott import scott_bin_width, scott_breaks
from .methods import BreaksMethod, calculate_breaks

__all__ = [
    # Generation
    'generate_breaks_from_range_and_bins',
    'generate_breaks_from_range_and_width',
    'generate_breaks_from_range',
    # Validation
    'check_monotonically_increasing',
    'are_equidistant',
    # Balancing
    'balance_breaks_with_range',
    # Methods
    'scott_bin_width',
    'scott_breaks',
    'BreaksMethod',
    'calculate_breaks',
]
