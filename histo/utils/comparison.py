"""
Floating-point comparison helpers.

Every equality test on breaks goes through these functions instead of ``==``:
edges are produced by repeated additions and scalings, so exact equality is
almost never what is wanted.
"""

import numpy as np


def machine_epsilon(dtype=np.float64):
    """Return the machine epsilon of a floating dtype."""
    return np.finfo(dtype).eps


def magnitude(*values):
    """
    Scale factor for epsilon comparisons around ``values``.

    Returns ``max(1, |v| for v in values)``, so values inside [-1, 1] are
    compared against the plain machine epsilon.
    """
    scale = 1.0
    for v in values:
        scale = max(scale, float(np.max(np.abs(v))))
    return scale


def is_approximately_equal(a, b, tolerance_factor=1, dtype=np.float64, scale=1.0):
    """
    Compare two floats within a number of machine epsilons.

    Parameters
    ----------
    a, b : float
        Values to compare.
    tolerance_factor : int, optional
        Number of epsilons allowed between ``a`` and ``b`` (default: 1).
    dtype : numpy dtype, optional
        Floating type whose epsilon is used (default: float64).
    scale : float, optional
        Multiplier of the tolerance (default: 1.0, an absolute comparison).
        Use :func:`magnitude` to compare values far from zero.

    Returns
    -------
    bool
        ``|a - b| <= tolerance_factor * eps(dtype) * scale``
    """
    return bool(abs(a - b) <= tolerance_factor * machine_epsilon(dtype) * scale)
