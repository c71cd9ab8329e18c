"""
Exceptions raised by the histogram package.

Every failure is raised to the caller synchronously. Nothing is retried and
no operation commits partially: a failed fill leaves the counts untouched and
a failed balance leaves the input breaks untouched.
"""


class HistogramError(ValueError):
    """Base class of all histogram errors."""


class InvalidInputError(HistogramError):
    """
    Input rejected before any computation.

    Raised for breaks that are not strictly increasing, non-positive bin
    counts or widths, samples too small to estimate a variance, and empty
    ranges.
    """


class OutOfRangeError(HistogramError):
    """A value falls outside ``[breaks[0], breaks[-1]]``."""

    def __init__(self, message, value=None):
        super().__init__(message)
        self.value = value


class PrecondViolationError(HistogramError):
    """An algorithm was called on input that breaks its precondition."""


class CountBoundsError(HistogramError):
    """A count mutation would leave the representable range of the counts."""

    def __init__(self, message, index=None):
        super().__init__(message)
        self.index = index
