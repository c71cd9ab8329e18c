"""
Generation of equidistant breaks from a range and a number of bins or a width.

These helpers are also the way to force breaks where you want them. For
integer data in [0, ..., 10] for example, centering every bin on an integer is
``generate_breaks_from_range_and_bins(-0.5, 10.5, 11)``.
"""

import numpy as np

from ..errors import InvalidInputError


def _check_range(low, upper):
    if not (np.isfinite(low) and np.isfinite(upper)):
        raise InvalidInputError(f"Range must be finite, got ({low}, {upper})")
    if not low < upper:
        raise InvalidInputError(
            f"Range low must be smaller than upper, got ({low}, {upper})"
        )


def generate_breaks_from_range_and_bins(low, upper, bins, dtype=np.float64):
    """
    Generate ``bins + 1`` equidistant breaks between ``low`` and ``upper``.

    Parameters
    ----------
    low : float
        First break.
    upper : float
        Last break.
    bins : int
        Number of bins, at least 1.
    dtype : numpy dtype, optional
        Precision of the breaks (default: float64).

    Returns
    -------
    ndarray, shape (bins + 1,)
        ``breaks[i] = low + i * (upper - low) / bins``

    Examples
    --------
    >>> generate_breaks_from_range_and_bins(0.0, 20.0, 10)
    array([ 0.,  2.,  4.,  6.,  8., 10., 12., 14., 16., 18., 20.])
    """
    if int(bins) != bins or bins < 1:
        raise InvalidInputError(f"Number of bins must be an integer >= 1, got {bins}")
    _check_range(low, upper)
    bins = int(bins)

    low = np.asarray(low, dtype=dtype)
    width = (np.asarray(upper, dtype=dtype) - low) / np.asarray(bins, dtype=dtype)
    return low + np.arange(bins + 1, dtype=dtype) * width


def generate_breaks_from_range_and_width(low, upper, width, dtype=np.float64):
    """
    Generate breaks of fixed ``width`` starting at ``low`` and covering ``upper``.

    Breaks are accumulated (``br += width``) while ``br < upper + width``, so
    the last break can be greater than ``upper``:
    ``upper <= breaks[-1] < upper + width``.

    Parameters
    ----------
    low : float
        First break.
    upper : float
        Value that the last break must reach.
    width : float
        Fixed distance between consecutive breaks, strictly positive.
    dtype : numpy dtype, optional
        Precision of the breaks (default: float64).

    Returns
    -------
    ndarray
        Equidistant breaks.

    Examples
    --------
    >>> generate_breaks_from_range_and_width(0.0, 4.5, 1.0)
    array([0., 1., 2., 3., 4., 5.])
    """
    if not (np.isfinite(width) and width > 0):
        raise InvalidInputError(f"Width must be a finite positive number, got {width}")
    _check_range(low, upper)

    scalar = np.dtype(dtype).type
    width = scalar(width)
    upper_limit = scalar(upper) + width
    br = scalar(low)
    breaks = []
    while br < upper_limit:
        breaks.append(br)
        br = br + width
    return np.array(breaks, dtype=dtype)


def generate_breaks_from_range(input_range, bins=None, width=None, dtype=np.float64):
    """
    Generate breaks from a ``(low, upper)`` pair and either ``bins`` or ``width``.

    Parameters
    ----------
    input_range : tuple
        (low, upper) values of the breaks.
    bins : int, optional
        Number of bins, see :func:`generate_breaks_from_range_and_bins`.
    width : float, optional
        Bin width, see :func:`generate_breaks_from_range_and_width`.
    dtype : numpy dtype, optional
        Precision of the breaks.

    Returns
    -------
    ndarray
        Equidistant breaks.
    """
    low, upper = input_range
    if (bins is None) == (width is None):
        raise InvalidInputError("Exactly one of bins or width must be given")
    if bins is not None:
        return generate_breaks_from_range_and_bins(low, upper, bins, dtype=dtype)
    return generate_breaks_from_range_and_width(low, upper, width, dtype=dtype)
