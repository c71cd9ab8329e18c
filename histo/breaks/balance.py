"""
Reconciliation of equidistant breaks with a required range.

Breaks generated from a bin width rarely land on the range they are meant to
cover: the first break may be off the range low value and the last break
usually overshoots (or falls short of) the range upper value.
:func:`balance_breaks_with_range` moves, stretches and extends the breaks until
``breaks[0] == low`` and ``breaks[-1] == upper``, keeping them equidistant.
"""

import numpy as np

from ..errors import InvalidInputError, PrecondViolationError
from ..utils import is_approximately_equal, magnitude
from .validation import are_equidistant

# Removing the last bin must beat adding bins by this factor (1 is no bias).
BIAS_TO_ADD_BIN = 0.8


def shift_breaks(breaks, offset):
    """Translate every break by ``offset``."""
    return breaks + offset


def shrink_or_expand_breaks(breaks, offset):
    """
    Add ``i * offset`` to the i-th break.

    The first break stays where it is and the width of every bin changes by
    ``offset``: the sequence expands for a positive offset and shrinks for a
    negative one.
    """
    return breaks + np.arange(len(breaks), dtype=breaks.dtype) * offset


def balance_breaks_with_range(breaks, input_range, verbose=False):
    """
    Fit equidistant breaks to ``input_range``.

    Steps:

    1. Shift every break so that the first one is ``low``.
    2. If the last break overshoots ``upper`` and dropping it leaves the
       previous break closer to ``upper`` (with a bias towards adding bins),
       drop it and expand the remaining bins until the last one is ``upper``.
    3. While the last break is below ``upper``, append a break at the
       current bin width.
    4. If the last break now overshoots ``upper``, shrink every bin by the
       same amount so that the last break is ``upper``.

    Parameters
    ----------
    breaks : array-like
        Equidistant, increasing breaks. Not modified.
    input_range : tuple
        (low, upper) values that the balanced breaks must start and end at.
    verbose : bool, optional
        Print the breaks before and after balancing.

    Returns
    -------
    balanced : ndarray
        New breaks, same dtype as the input.
    changed : bool
        False when the input already matched the range.

    Raises
    ------
    PrecondViolationError
        If the breaks are not equidistant.
    InvalidInputError
        If the breaks are not increasing or the range is empty.
    """
    breaks = np.array(breaks, dtype=np.result_type(np.asarray(breaks).dtype, np.float16))
    if breaks.ndim != 1 or len(breaks) < 2:
        raise InvalidInputError("Balancing needs at least 2 breaks")
    if not are_equidistant(breaks):
        raise PrecondViolationError(
            f"Cannot balance non-equidistant breaks: {np.array2string(breaks, separator=', ')}"
        )

    dtype = breaks.dtype
    low, upper = dtype.type(input_range[0]), dtype.type(input_range[1])
    if not low < upper:
        raise InvalidInputError(f"Cannot balance breaks with empty range ({low}, {upper})")

    nbins = len(breaks) - 1
    width = breaks[1] - breaks[0]
    if not width > 0:
        raise InvalidInputError(f"Cannot balance non-increasing breaks, width is {width}")

    scale = magnitude(breaks[0], breaks[-1], low, upper)

    def is_zero(diff):
        return is_approximately_equal(diff, 0, dtype=dtype, scale=scale)

    if verbose:
        print(f"Non balanced breaks: bins={nbins}, width={width}, "
              f"first={breaks[0]}, last={breaks[-1]}")

    # diff_low > 0 when the breaks start after low, < 0 when they start before.
    diff_low = breaks[0] - low
    # diff_upper < 0 when the breaks do not reach upper, > 0 when they go beyond.
    diff_upper = breaks[nbins] - upper
    if is_zero(diff_low) and is_zero(diff_upper):
        return breaks, False

    if not is_zero(diff_low):
        breaks = shift_breaks(breaks, -diff_low)
    diff_upper = breaks[nbins] - upper
    if is_zero(diff_upper):
        return _report(breaks, verbose), True

    diff_upper_before = breaks[nbins - 1] - upper
    if (nbins > 1 and diff_upper_before < 0 and diff_upper > 0
            and abs(diff_upper_before) < BIAS_TO_ADD_BIN * abs(diff_upper)):
        nbins -= 1
        breaks = breaks[:-1]
        breaks = shrink_or_expand_breaks(breaks, -diff_upper_before / nbins)
        width = breaks[1] - breaks[0]
        diff_upper = breaks[nbins] - upper
        if is_zero(diff_upper):
            return _report(breaks, verbose), True

    # width > 0, so every append moves the last break closer to upper.
    appended = []
    while diff_upper < 0:
        nbins += 1
        last = low + nbins * width
        appended.append(last)
        diff_upper = last - upper
    if appended:
        breaks = np.concatenate([breaks, np.array(appended, dtype=dtype)])
    if is_zero(diff_upper):
        return _report(breaks, verbose), True

    breaks = shrink_or_expand_breaks(breaks, -(diff_upper / nbins))
    return _report(breaks, verbose), True


def _report(breaks, verbose):
    if verbose:
        print(f"Balanced breaks: bins={len(breaks) - 1}, width={breaks[1] - breaks[0]}, "
              f"first={breaks[0]}, last={breaks[-1]}")
    return breaks
