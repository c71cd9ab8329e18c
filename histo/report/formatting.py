"""
Fixed-width text dumps of a histogram.

Every function returns a string; ``print_report`` writes them all to a stream.
Breaks use ``precision`` significant digits, other floating values use
``precision`` digits after the decimal point. Every field is right-aligned on
``width`` characters.
"""

import sys

import numpy as np

DEFAULT_PRECISION = 9
DEFAULT_WIDTH = 18


def _format_value(value, precision, width):
    return f"{value:>{width}.{precision}f}"


def _format_count(count, precision, width):
    if np.issubdtype(np.asarray(count).dtype, np.integer):
        return f"{int(count):>{width}d}"
    return _format_value(count, precision, width)


def format_breaks(histogram, precision=DEFAULT_PRECISION, width=DEFAULT_WIDTH):
    """Breaks on a single line, ``precision`` significant digits."""
    return " ".join(f"{b:>{width}.{precision}g}" for b in histogram.breaks)


def format_counts(histogram, precision=DEFAULT_PRECISION, width=DEFAULT_WIDTH):
    """Counts on a single line."""
    return " ".join(_format_count(c, precision, width) for c in histogram.counts)


def format_centers(histogram, precision=DEFAULT_PRECISION, width=DEFAULT_WIDTH):
    """Bin centers on a single line."""
    return " ".join(_format_value(c, precision, width)
                    for c in histogram.compute_bin_centers())


def format_breaks_and_counts(histogram, precision=DEFAULT_PRECISION, width=DEFAULT_WIDTH):
    """
    One line per bin: ``[low, upper) count``.

    The interval of the last bin is closed, ``[low, upper] count``.
    """
    breaks = histogram.breaks
    counts = histogram.counts
    lines = []
    for i, count in enumerate(counts):
        closing = "]" if i == len(counts) - 1 else ")"
        lines.append(
            f"[{_format_value(breaks[i], precision, width)},"
            f"{_format_value(breaks[i + 1], precision, width)}{closing} "
            f"{_format_count(count, precision, width)}"
        )
    return "\n".join(lines)


def format_centers_and_counts(histogram, precision=DEFAULT_PRECISION, width=DEFAULT_WIDTH):
    """One line per bin: ``center count``."""
    return "\n".join(
        f"{_format_value(center, precision, width)} {_format_count(count, precision, width)}"
        for center, count in zip(histogram.compute_bin_centers(), histogram.counts)
    )


def print_report(histogram, file=None, precision=DEFAULT_PRECISION, width=DEFAULT_WIDTH):
    """
    Print every dump of ``histogram``.

    Parameters
    ----------
    histogram : Histogram
    file : file-like, optional
        Output stream (default: sys.stdout).
    precision : int
        Digits of the floating values.
    width : int
        Width of every field.
    """
    file = sys.stdout if file is None else file
    title = histogram.name or "histogram"
    print("=" * 80, file=file)
    print(f"{title}: {histogram.bins} bins, range [{histogram.range[0]}, {histogram.range[1]}]",
          file=file)
    print("=" * 80, file=file)
    print(format_breaks_and_counts(histogram, precision, width), file=file)
    print("\ncenters and counts:", file=file)
    print(format_centers_and_counts(histogram, precision, width), file=file)
    print(f"\nbreaks:  {format_breaks(histogram, precision, width)}", file=file)
    print(f"counts:  {format_counts(histogram, precision, width)}", file=file)
    print(f"centers: {format_centers(histogram, precision, width)}", file=file)
