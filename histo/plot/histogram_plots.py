"""
Histogram visualization functions.
"""

import matplotlib.pyplot as plt
from pathlib import Path

PLOT_KINDS = ('line', 'bar')


def plot_histogram(ax, histogram, kind='line', color='blue', label=None):
    """
    Plot the counts of a histogram against its bin centers.

    Parameters
    ----------
    ax : matplotlib axis
        Axis to plot on
    histogram : Histogram
        Histogram to plot
    kind : str
        'line' (default) or 'bar'
    color : str
        Color of the line or bars
    label : str, optional
        Legend label, default: the histogram name
    """
    if kind not in PLOT_KINDS:
        raise ValueError(f"Unknown plot kind: {kind}. Use one of {PLOT_KINDS}")

    centers = histogram.compute_bin_centers()
    counts = histogram.counts
    label = label if label is not None else (histogram.name or None)

    if kind == 'bar':
        ax.bar(centers, counts, width=histogram.bin_widths(), align='center',
               color=color, alpha=0.6, edgecolor='black', linewidth=0.5, label=label)
    else:
        ax.plot(centers, counts, 'o-', color=color, linewidth=2, markersize=4, label=label)

    ax.set_title(histogram.name)
    ax.set_xlabel('bins')
    ax.set_ylabel('#')
    if label:
        ax.legend(fontsize=9, loc='best')
    ax.grid(True, alpha=0.3)


def create_histogram_figure(histogram, kind='line', output_path=None, figsize=(6.4, 4.8)):
    """
    Create a figure with a single histogram chart.

    Parameters
    ----------
    histogram : Histogram
        Histogram to plot
    kind : str
        'line' (default) or 'bar'
    output_path : str or Path, optional
        Path to save the figure
    figsize : tuple
        Figure size in inches (default: 640x480 pixels at 100 dpi)

    Returns
    -------
    fig : matplotlib figure
        The created figure
    """
    fig, ax = plt.subplots(figsize=figsize)
    plot_histogram(ax, histogram, kind=kind)
    fig.tight_layout()

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        print(f"Figure saved: {output_path}")

    return fig
