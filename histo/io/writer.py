"""
Saving histograms to text files.

A saved histogram is a ``<name>.histo`` file with one ``<bin center> <count>``
pair per line.
"""

import numpy as np

from ..utils import setup_output_dir, histogram_file_path


class HistogramIOError(OSError):
    """A histogram file could not be written or read."""


def save_histogram(histogram, name=None, output_dir="./", verbose=False):
    """
    Save bin centers and counts of ``histogram`` to ``<output_dir>/<name>.histo``.

    Parameters
    ----------
    histogram : Histogram
        Histogram to save.
    name : str, optional
        File stem, default: the name of the histogram.
    output_dir : str or Path
        Output directory, created if needed (default: current directory).
    verbose : bool
        Print the path of the saved file.

    Returns
    -------
    Path
        Path of the written file.

    Raises
    ------
    HistogramIOError
        If the directory cannot be created or the file cannot be written.
    """
    name = name or histogram.name
    file_path = histogram_file_path(name, output_dir)
    centers = histogram.compute_bin_centers()
    counts = histogram.counts
    to_python = int if np.issubdtype(counts.dtype, np.integer) else float
    try:
        setup_output_dir(output_dir)
        with open(file_path, "w") as output_file:
            for center, count in zip(centers, counts):
                output_file.write(f"{float(center)!r} {to_python(count)!r}\n")
    except OSError as e:
        raise HistogramIOError(f"Error saving histogram file in {file_path}: {e}") from e

    if verbose:
        print(f"Histogram saved: {file_path}")
    return file_path


def load_histogram(file_path):
    """
    Read a file written by :func:`save_histogram`.

    Parameters
    ----------
    file_path : str or Path

    Returns
    -------
    centers : ndarray
        Bin centers.
    counts : ndarray
        Counts, one per center.
    """
    try:
        table = np.loadtxt(file_path, ndmin=2)
    except OSError as e:
        raise HistogramIOError(f"Error reading histogram file {file_path}: {e}") from e
    if table.size == 0:
        return np.empty(0), np.empty(0)
    return table[:, 0], table[:, 1]
