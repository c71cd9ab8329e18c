"""
I/O module: save histograms as ``.histo`` text files and read them back.
"""

from .writer import HistogramIOError, save_histogram, load_histogram

__all__ = ['HistogramIOError', 'save_histogram', 'load_histogram']
