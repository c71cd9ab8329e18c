"""
Plotting module for visualization of histograms.

This module provides visualization functions for:
- Line and bar charts of counts against bin centers
"""

from .histogram_plots import PLOT_KINDS, plot_histogram, create_histogram_figure

__all__ = [
    'PLOT_KINDS',
    'plot_histogram',
    'create_histogram_figure'
]
