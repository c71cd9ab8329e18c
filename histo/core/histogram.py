"""
One-dimensional histogram with automatically optimized breaks.
"""

import numpy as np

from ..breaks import BreaksMethod, calculate_breaks, check_monotonically_increasing
from ..errors import CountBoundsError, InvalidInputError, OutOfRangeError
from ..utils import machine_epsilon, magnitude

# Values this many epsilons above the last break still belong to the last bin.
LAST_BREAK_TOLERANCE = 100


def count_limit(count_dtype):
    """Largest count representable by ``count_dtype``."""
    count_dtype = np.dtype(count_dtype)
    if np.issubdtype(count_dtype, np.integer):
        return int(np.iinfo(count_dtype).max)
    return float(np.finfo(count_dtype).max)


class Histogram:
    """
    Histogram of a 1D sample, inspired by R's ``hist``.

    Bin ``i`` counts the values in ``[breaks[i], breaks[i + 1])``; the last bin
    also includes ``breaks[-1]``.

    The histogram is built in one of three ways:

    - from data only: the range is ``(min(data), max(data))`` and the breaks
      are calculated with ``method``;
    - from data and ``input_range``: the breaks are calculated with ``method``
      to cover the given range;
    - from data and ``breaks``: the breaks are used as they are, they only need
      to be strictly increasing.

    Parameters
    ----------
    data : array-like, optional
        Sample used to fill the counts. Required unless ``breaks`` is given.
    breaks : array-like, optional
        Strictly increasing breaks, see :mod:`histo.breaks` for generators.
    input_range : tuple, optional
        (low, upper) range that the calculated breaks must cover.
    method : BreaksMethod or str
        Method to calculate the breaks (default: Scott).
    name : str
        Name or description of the histogram.
    dtype : numpy floating dtype
        Precision of the breaks (default: float64).
    count_dtype : numpy dtype
        Type of the counts (default: uint64).
    verbose : bool
        Print intermediate breaks while they are calculated.

    Examples
    --------
    >>> h = Histogram([1.0, 1.0, 2.0, 3.0, 19.0], breaks=[1.0, 2.0, 15.0, 20.0])
    >>> h.counts
    array([2, 2, 1], dtype=uint64)
    """

    def __init__(self, data=None, breaks=None, input_range=None,
                 method=BreaksMethod.SCOTT, name="", dtype=np.float64,
                 count_dtype=np.uint64, verbose=False):
        self._dtype = np.dtype(dtype)
        if not np.issubdtype(self._dtype, np.floating):
            raise InvalidInputError(f"Breaks precision must be a floating dtype, got {self._dtype}")
        self._count_dtype = np.dtype(count_dtype)
        self.name = name

        if data is not None:
            data = self._as_values(data)

        if breaks is not None:
            if input_range is not None:
                raise InvalidInputError("Give either breaks or input_range, not both")
            breaks = np.array(breaks, dtype=self._dtype)
            if breaks.ndim != 1 or len(breaks) < 2:
                raise InvalidInputError("Input breaks need at least 2 values")
            if not check_monotonically_increasing(breaks):
                raise InvalidInputError(
                    f"Input breaks are not monotonically increasing: {breaks}"
                )
            self._breaks = breaks
            self._range = (breaks[0], breaks[-1])
        else:
            if data is None:
                raise InvalidInputError("Data is required when breaks are not given")
            if input_range is None:
                if len(data) == 0 or not np.all(np.isfinite(data)):
                    raise InvalidInputError("Cannot derive a range from empty or non-finite data")
                input_range = (data.min(), data.max())
            low, upper = input_range
            self._range = (self._dtype.type(low), self._dtype.type(upper))
            self._breaks = calculate_breaks(data, self._range, method,
                                            dtype=self._dtype, verbose=verbose)

        self.reset_counts()
        if data is not None:
            self.fill_counts(data)

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_data(cls, data, method=BreaksMethod.SCOTT, **kwargs):
        """Histogram whose range is the minimum and maximum of ``data``."""
        return cls(data, method=method, **kwargs)

    @classmethod
    def from_range(cls, data, input_range, method=BreaksMethod.SCOTT, **kwargs):
        """Histogram whose breaks are calculated to cover ``input_range``."""
        return cls(data, input_range=input_range, method=method, **kwargs)

    @classmethod
    def from_breaks(cls, data, breaks, **kwargs):
        """Histogram with the given ``breaks``."""
        return cls(data, breaks=breaks, **kwargs)

    @classmethod
    def _from_parts(cls, breaks, counts, name="", dtype=np.float64, count_dtype=None,
                    input_range=None):
        histogram = cls(breaks=breaks, name=name, dtype=dtype,
                        count_dtype=count_dtype if count_dtype is not None else np.asarray(counts).dtype)
        counts = np.array(counts, dtype=histogram._count_dtype)
        if counts.shape != (histogram.bins,):
            raise InvalidInputError(
                f"Expected {histogram.bins} counts, got shape {counts.shape}"
            )
        histogram._counts = counts
        if input_range is not None:
            histogram._range = input_range
        return histogram

    # ------------------------------------------------------------------
    # Data members
    # ------------------------------------------------------------------
    @property
    def range(self):
        """(low, upper) limits of the breaks."""
        return self._range

    @property
    def breaks(self):
        """Copy of the breaks, ``len(breaks) == bins + 1``."""
        return self._breaks.copy()

    @property
    def bins(self):
        return len(self._breaks) - 1

    @property
    def counts(self):
        """Copy of the counts, one per bin."""
        return self._counts.copy()

    @property
    def dtype(self):
        return self._dtype

    @property
    def count_dtype(self):
        return self._count_dtype

    @property
    def total(self):
        """Sum of the counts."""
        return self._counts.sum()

    def __len__(self):
        return self.bins

    def __eq__(self, other):
        if not isinstance(other, Histogram):
            return NotImplemented
        return (self.name == other.name
                and np.array_equal(self._breaks, other._breaks)
                and np.array_equal(self._counts, other._counts))

    __hash__ = None

    def __repr__(self):
        return (f"Histogram(name='{self.name}', bins={self.bins}, "
                f"range=({self._range[0]}, {self._range[1]}), total={self.total})")

    def copy(self):
        """Independent copy of the histogram."""
        return Histogram._from_parts(self._breaks, self._counts, name=self.name,
                                     dtype=self._dtype, count_dtype=self._count_dtype,
                                     input_range=self._range)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def _last_break_tolerance(self):
        return (LAST_BREAK_TOLERANCE * machine_epsilon(self._dtype)
                * magnitude(self._breaks[-1]))

    def index_from_value(self, value):
        """
        Return the index of the bin that contains ``value``.

        Binary search over the breaks. The last bin includes its upper break.

        Raises
        ------
        OutOfRangeError
            If ``value`` is below ``breaks[0]`` or above ``breaks[-1]``.
        """
        b = self._breaks
        lo, hi = 0, self.bins
        inside = value >= b[lo] and (
            value < b[hi] or abs(value - b[hi]) <= self._last_break_tolerance()
        )
        if not inside:
            raise OutOfRangeError(
                f"index_from_value: {value} is out of bounds [{b[0]}, {b[-1]}]", value=value
            )
        while hi - lo >= 2:
            mid = (hi + lo) // 2
            if value >= b[mid]:
                lo = mid
            else:
                hi = mid
        return lo

    def indices_from_values(self, values):
        """
        Vectorized :meth:`index_from_value`.

        All values are checked before any index is returned.
        """
        values = self._as_values(values)
        b = self._breaks
        # NaN fails every comparison and lands in outside.
        outside = ~(values >= b[0]) | (
            (values > b[-1]) & ~(np.abs(values - b[-1]) <= self._last_break_tolerance())
        )
        if np.any(outside):
            bad = values[outside][0]
            raise OutOfRangeError(
                f"{np.count_nonzero(outside)} value(s) out of bounds [{b[0]}, {b[-1]}], "
                f"first: {bad}", value=bad
            )
        indices = np.searchsorted(b, values, side='right') - 1
        return np.minimum(indices, self.bins - 1)

    # ------------------------------------------------------------------
    # Counts
    # ------------------------------------------------------------------
    def reset_counts(self):
        """Resize counts to the number of bins and set them to zero."""
        self._counts = np.zeros(self.bins, dtype=self._count_dtype)

    def fill_counts(self, data):
        """
        Add ``data`` to the counts.

        Counts are not reset first, so filling twice accumulates. If any value
        is out of range, or any count would overflow, nothing is added.

        Returns
        -------
        ndarray
            Copy of the updated counts.
        """
        indices = self.indices_from_values(data)
        increments = np.bincount(indices, minlength=self.bins)
        overflow = self._would_overflow(increments)
        if np.any(overflow):
            index = int(np.flatnonzero(overflow)[0])
            raise CountBoundsError(
                f"fill_counts would exceed {self._count_dtype} capacity. "
                f"Index: {index} Value: {self._counts[index]} Increment: {increments[index]}",
                index=index
            )
        self._counts = self._counts + increments.astype(self._count_dtype)
        return self.counts

    def increase(self, index):
        """Increase the count of bin ``index`` by one."""
        index = self._check_index(index, "increase")
        if self._counts[index] >= count_limit(self._count_dtype):
            raise CountBoundsError(
                f"increase has exceeded {self._count_dtype}. "
                f"Index: {index} Value: {self._counts[index]}", index=index
            )
        self._counts[index] += self._count_dtype.type(1)

    def decrease(self, index):
        """Decrease the count of bin ``index`` by one, never below zero."""
        index = self._check_index(index, "decrease")
        if self._counts[index] <= 0:
            raise CountBoundsError(
                f"decrease has reached negative value. "
                f"Index: {index} Value: {self._counts[index]}", index=index
            )
        self._counts[index] -= self._count_dtype.type(1)

    def set_count(self, index, value):
        """Set the count of bin ``index`` to ``value``."""
        index = self._check_index(index, "set_count")
        if not 0 <= value <= count_limit(self._count_dtype):
            raise CountBoundsError(
                f"set_count value {value} is outside [0, {count_limit(self._count_dtype)}]. "
                f"Index: {index}", index=index
            )
        if np.issubdtype(self._count_dtype, np.integer) and int(value) != value:
            raise CountBoundsError(
                f"set_count value {value} is not an integer count. Index: {index}", index=index
            )
        self._counts[index] = value

    def _check_index(self, index, operation):
        if int(index) != index or not 0 <= index < self.bins:
            raise CountBoundsError(
                f"Index is out of bounds in {operation}. Index: {index} Bins: {self.bins}",
                index=index
            )
        return int(index)

    def _would_overflow(self, increments):
        room = count_limit(self._count_dtype) - self._counts
        if np.issubdtype(self._count_dtype, np.integer):
            return increments.astype(np.uint64) > room.astype(np.uint64)
        return increments > room

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------
    def compute_bin_centers(self):
        """Middle point of every bin."""
        return (self._breaks[:-1] + self._breaks[1:]) / 2

    def bin_widths(self):
        """Width of every bin."""
        return np.diff(self._breaks)

    @staticmethod
    def _as_values(data):
        values = np.asarray(data).ravel()
        if values.size and not np.issubdtype(values.dtype, np.number):
            raise InvalidInputError(f"Data must be numeric, got dtype {values.dtype}")
        return values
