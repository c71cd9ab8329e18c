"""
One-dimensional histograms with automatically optimized breaks.

This package computes histograms of numeric samples, inspired by R's ``hist``:
the breaks between bins are derived with Scott's rule and balanced with the
requested range, then the sample is bucketed into counts.

Modules:
- breaks: break generation, Scott's rule, validation and balancing
- core: the Histogram, its mean and area normalization
- estimator: Welford sample variance
- report: fixed-width textual dumps
- io: saving histograms as .histo files
- plot: line and bar charts
- data_generator: synthetic samples
- utils: floating-point comparison and path helpers
- experiments: command-line experiment scripts

Example usage:
    from histo import Histogram, print_report
    h = Histogram([1.0, 1.0, 2.0, 3.0, 19.0])
    print_report(h)
"""

__version__ = "1.0.0"

# Main imports for convenience
from .errors import (
    HistogramError, InvalidInputError, OutOfRangeError,
    PrecondViolationError, CountBoundsError
)
from .utils import is_approximately_equal
from .estimator import WelfordVariance, estimate_variance
from .breaks import (
    generate_breaks_from_range_and_bins, generate_breaks_from_range_and_width,
    generate_breaks_from_range, check_monotonically_increasing, are_equidistant,
    balance_breaks_with_range, scott_bin_width, scott_breaks,
    BreaksMethod, calculate_breaks
)
from .core import Histogram, mean, weighted_mean, normalize_by_area
from .report import (
    format_breaks, format_counts, format_centers,
    format_breaks_and_counts, format_centers_and_counts, print_report
)
from .io import HistogramIOError, save_histogram, load_histogram

__all__ = [
    # Errors
    'HistogramError', 'InvalidInputError', 'OutOfRangeError',
    'PrecondViolationError', 'CountBoundsError', 'HistogramIOError',
    # Utils
    'is_approximately_equal',
    # Estimator
    'WelfordVariance', 'estimate_variance',
    # Breaks
    'generate_breaks_from_range_and_bins', 'generate_breaks_from_range_and_width',
    'generate_breaks_from_range', 'check_monotonically_increasing', 'are_equidistant',
    'balance_breaks_with_range', 'scott_bin_width', 'scott_breaks',
    'BreaksMethod', 'calculate_breaks',
    # Core
    'Histogram', 'mean', 'weighted_mean', 'normalize_by_area',
    # Report
    'format_breaks', 'format_counts', 'format_centers',
    'format_breaks_and_counts', 'format_centers_and_counts', 'print_report',
    # IO
    'save_histogram', 'load_histogram',
]
