"""
Analytic views of a histogram: mean and area normalization.
"""

import numpy as np

from ..errors import InvalidInputError
from .histogram import Histogram


def mean(histogram):
    """
    Mean of the bin centers weighted by the counts, divided by the number of bins.

    Notes
    -----
    This is ``sum(centers * counts) / bins``, not the conventional weighted
    mean ``sum(centers * counts) / sum(counts)``. The division by the number
    of bins is kept for compatibility with existing results.

    Parameters
    ----------
    histogram : Histogram

    Returns
    -------
    float
    """
    centers = histogram.compute_bin_centers()
    counts = histogram.counts.astype(np.float64)
    return float(np.dot(centers, counts) / histogram.bins)


def weighted_mean(histogram):
    """
    Conventional weighted mean of the bin centers, ``sum(centers * counts) / sum(counts)``.
    """
    counts = histogram.counts.astype(np.float64)
    total = counts.sum()
    if total == 0:
        raise InvalidInputError("Cannot compute the weighted mean of an empty histogram")
    return float(np.dot(histogram.compute_bin_centers(), counts) / total)


def normalize_by_area(histogram):
    """
    Normalize the histogram by area, useful for probability density functions.

    The counts of the output are ``count[i] * width[i] / sum(count * width)``
    and have the precision of the breaks instead of an integer type.

    Parameters
    ----------
    histogram : Histogram
        Histogram to normalize, not modified.

    Returns
    -------
    Histogram
        New histogram with the same breaks, range and name.
    """
    widths = np.abs(histogram.bin_widths())
    areas = histogram.counts.astype(histogram.dtype) * widths
    total_area = areas.sum()
    if total_area == 0:
        raise InvalidInputError("Cannot normalize by area a histogram with no counts")
    return Histogram._from_parts(histogram.breaks, areas / total_area,
                                 name=histogram.name, dtype=histogram.dtype,
                                 count_dtype=histogram.dtype, input_range=histogram.range)
