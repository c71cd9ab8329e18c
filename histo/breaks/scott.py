"""
Scott's normal reference rule for the bin width.

    width = 3.5 * sigma / n^(1/3)

Scott, D. W. (1979). On optimal and data-based histograms. Biometrika, 66(3).
"""

import numpy as np

from ..errors import InvalidInputError
from ..estimator import estimate_variance
from .balance import balance_breaks_with_range

SCOTT_FACTOR = 3.5


def scott_bin_width(samples, sample_size=None, dtype=np.float64):
    """
    Compute the Scott bin width of a sample.

    Parameters
    ----------
    samples : array-like
        Input data.
    sample_size : int, optional
        Size used in the cubic root, default: number of samples.
    dtype : numpy dtype, optional
        Precision of the computation (default: float64).

    Returns
    -------
    float
        ``3.5 * sqrt(variance) / cbrt(sample_size)``
    """
    samples = np.asarray(samples).ravel()
    if sample_size is None:
        sample_size = len(samples)
    variance = estimate_variance(samples, dtype=dtype)
    scalar = np.dtype(dtype).type
    return scalar(SCOTT_FACTOR) * np.sqrt(variance) / np.cbrt(scalar(sample_size))


def scott_breaks(samples, input_range, dtype=np.float64, verbose=False):
    """
    Compute breaks with Scott's bin width, balanced with ``input_range``.

    The number of bins is ``ceil((upper - low) / width)`` before balancing;
    balancing may add or remove bins, so the number of bins of the result is
    ``len(breaks) - 1``.

    Parameters
    ----------
    samples : array-like
        Input data.
    input_range : tuple
        (low, upper) values of the breaks.
    dtype : numpy dtype, optional
        Precision of the breaks (default: float64).
    verbose : bool, optional
        Print the breaks before and after balancing.

    Returns
    -------
    ndarray
        Balanced breaks, ``breaks[0] == low`` and ``breaks[-1] == upper``.
    """
    scalar = np.dtype(dtype).type
    low, upper = scalar(input_range[0]), scalar(input_range[1])
    if not (np.isfinite(low) and np.isfinite(upper) and low < upper):
        raise InvalidInputError(
            f"Scott breaks need a finite range with low < upper, got ({low}, {upper})"
        )

    width = scott_bin_width(samples, dtype=dtype)
    if not (np.isfinite(width) and width > 0):
        raise InvalidInputError(
            f"Scott bin width is {width}: samples must have a positive finite variance"
        )

    bins = int(np.ceil((upper - low) / width))
    breaks = low + np.arange(bins + 1, dtype=dtype) * width
    breaks, _ = balance_breaks_with_range(breaks, (low, upper), verbose=verbose)
    return breaks
