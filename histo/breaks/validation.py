"""
Checks on break sequences.
"""

import numpy as np

from ..errors import InvalidInputError
from ..utils import is_approximately_equal, magnitude

# Error accumulates over many edges, so gaps are compared with a wide tolerance.
EQUIDISTANCE_TOLERANCE = 100


def _as_breaks(breaks):
    breaks = np.asarray(breaks)
    if breaks.ndim != 1 or len(breaks) < 2:
        raise InvalidInputError(
            f"Breaks must be a 1D sequence of at least 2 values, got shape {breaks.shape}"
        )
    return breaks


def check_monotonically_increasing(breaks):
    """
    Check that every break is strictly greater than the previous one.

    Parameters
    ----------
    breaks : array-like
        Candidate breaks.

    Returns
    -------
    bool
    """
    breaks = _as_breaks(breaks)
    return bool(np.all(np.diff(breaks) > 0))


def are_equidistant(breaks, tolerance_factor=EQUIDISTANCE_TOLERANCE):
    """
    Check that every gap between consecutive breaks equals the first one.

    Parameters
    ----------
    breaks : array-like
        Breaks to check, floating dtype.
    tolerance_factor : int, optional
        Number of epsilons allowed between two gaps (default: 100).

    Returns
    -------
    bool
    """
    breaks = _as_breaks(breaks)
    dtype = breaks.dtype if np.issubdtype(breaks.dtype, np.floating) else np.float64
    scale = magnitude(breaks[0], breaks[-1])
    gaps = np.diff(breaks)
    return all(
        is_approximately_equal(gap, gaps[0], tolerance_factor, dtype=dtype, scale=scale)
        for gap in gaps
    )
