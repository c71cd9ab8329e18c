"""
Selection of the method used to calculate breaks from data and range.
"""

from enum import Enum

import numpy as np

from ..errors import PrecondViolationError
from .scott import scott_breaks


class BreaksMethod(Enum):
    """Methods to calculate optimal breaks from the input data and range."""
    SCOTT = "scott"


def resolve_method(method):
    """
    Turn a method name or member into a :class:`BreaksMethod`.

    Raises
    ------
    PrecondViolationError
        If ``method`` does not name a valid method.
    """
    if isinstance(method, BreaksMethod):
        return method
    try:
        return BreaksMethod(str(method).lower())
    except ValueError:
        valid = [m.value for m in BreaksMethod]
        raise PrecondViolationError(
            f"No valid method selected to calculate breaks: {method!r}. Use one of {valid}"
        ) from None


def calculate_breaks(samples, input_range, method=BreaksMethod.SCOTT,
                     dtype=np.float64, verbose=False):
    """
    Calculate breaks for ``samples`` covering ``input_range``.

    Parameters
    ----------
    samples : array-like
        Input data.
    input_range : tuple
        (low, upper) values of the breaks.
    method : BreaksMethod or str
        Method to calculate the breaks (default: Scott).
    dtype : numpy dtype, optional
        Precision of the breaks.
    verbose : bool, optional
        Print intermediate breaks.

    Returns
    -------
    ndarray
        Breaks covering ``input_range``.
    """
    method = resolve_method(method)
    if method is BreaksMethod.SCOTT:
        return scott_breaks(samples, input_range, dtype=dtype, verbose=verbose)
    raise PrecondViolationError(f"Breaks method {method} is not implemented")
