#!/usr/bin/env python3
"""
Histogram experiment on synthetic samples.

Builds a histogram of random samples with one of the three construction modes:
- Scott breaks over the sample range (default)
- Scott breaks balanced with a fixed range (--low and --upper)
- Equidistant breaks with a fixed number of bins (--low, --upper and --bins)

Prints the fixed-width report, the mean and the area-normalized counts, saves
the histogram as a .histo file and optionally plots it.
"""

import argparse
import time
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from histo.breaks import generate_breaks_from_range_and_bins
from histo.core import Histogram, mean, normalize_by_area
from histo.data_generator import DISTRIBUTIONS, generate_samples
from histo.io import save_histogram
from histo.plot import PLOT_KINDS, create_histogram_figure
from histo.report import format_counts, print_report


def build_histogram(samples, low=None, upper=None, bins=None, name="", verbose=False):
    """
    Build a histogram of ``samples`` with the mode selected by the arguments.

    Parameters
    ----------
    samples : array
        Input data
    low, upper : float, optional
        Fixed range. Samples outside the range are discarded.
    bins : int, optional
        Number of equidistant bins, requires ``low`` and ``upper``
    name : str
        Histogram name
    verbose : bool
        Print the breaks while balancing

    Returns
    -------
    Histogram
    """
    if (low is None) != (upper is None):
        raise ValueError("--low and --upper must be given together")

    if low is None:
        if bins is not None:
            raise ValueError("--bins requires --low and --upper")
        return Histogram.from_data(samples, name=name, verbose=verbose)

    inside = (samples >= low) & (samples <= upper)
    if not np.all(inside):
        print(f"  Discarding {np.count_nonzero(~inside)} samples outside [{low}, {upper}]")
    samples = samples[inside]

    if bins is not None:
        breaks = generate_breaks_from_range_and_bins(low, upper, bins)
        return Histogram.from_breaks(samples, breaks, name=name)
    return Histogram.from_range(samples, (low, upper), name=name, verbose=verbose)


def main():
    parser = argparse.ArgumentParser(
        description="Histogram of synthetic samples with Scott breaks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Scott breaks over the sample range
  python -m histo.experiments.scott_histogram --distribution normal

  # Scott breaks balanced with a fixed range
  python -m histo.experiments.scott_histogram --low -3 --upper 3

  # 20 equidistant bins, bar chart
  python -m histo.experiments.scott_histogram --low -3 --upper 3 --bins 20 --plot-kind bar
        """
    )

    # Data arguments
    parser.add_argument(
        "--distribution", type=str, choices=list(DISTRIBUTIONS), default="normal",
        help="Distribution of the synthetic samples"
    )
    parser.add_argument(
        "--n-samples", type=int, default=10000,
        help="Number of samples"
    )
    parser.add_argument(
        "--random-seed", type=int, default=42,
        help="Random seed for reproducibility"
    )

    # Breaks arguments
    parser.add_argument(
        "--low", type=float, default=None,
        help="Lower limit of a fixed range"
    )
    parser.add_argument(
        "--upper", type=float, default=None,
        help="Upper limit of a fixed range"
    )
    parser.add_argument(
        "--bins", type=int, default=None,
        help="Number of equidistant bins (requires --low and --upper)"
    )

    # Output arguments
    parser.add_argument(
        "--name", type=str, default="scott_histogram",
        help="Histogram name, also used as output file stem"
    )
    parser.add_argument(
        "--output-dir", type=str,
        default=str(Path.cwd() / "results" / "histograms"),
        help="Output directory for the .histo file and the figure"
    )
    parser.add_argument(
        "--precision", type=int, default=9,
        help="Digits of the floating values in the report"
    )
    parser.add_argument(
        "--plot-kind", type=str, choices=list(PLOT_KINDS), default="line",
        help="Chart type"
    )
    parser.add_argument(
        "--no-plot", action="store_true",
        help="Do not create the figure"
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Print the breaks before and after balancing"
    )

    args = parser.parse_args()

    print("=" * 80)
    print("HISTOGRAM EXPERIMENT")
    print("=" * 80)
    start_time = time.time()

    print(f"\n[1/4] Generating {args.n_samples} {args.distribution} samples...")
    samples = generate_samples(args.distribution, args.n_samples, random_seed=args.random_seed)
    print(f"  Sample range: [{samples.min():.4f}, {samples.max():.4f}]")

    print("\n[2/4] Building histogram...")
    try:
        histogram = build_histogram(samples, args.low, args.upper, args.bins,
                                    name=args.name, verbose=args.verbose)
    except ValueError as e:
        parser.error(str(e))
    print(f"  {histogram}")

    print("\n[3/4] Report")
    print_report(histogram, precision=args.precision)
    print(f"\nMean (sum of centers * counts / bins): {mean(histogram):.{args.precision}f}")
    normalized = normalize_by_area(histogram)
    print(f"Area-normalized counts: {format_counts(normalized, precision=args.precision)}")

    print("\n[4/4] Saving results...")
    save_histogram(histogram, output_dir=args.output_dir, verbose=True)
    if not args.no_plot:
        figure_path = Path(args.output_dir) / f"{args.name}_{args.plot_kind}.png"
        fig = create_histogram_figure(histogram, kind=args.plot_kind, output_path=figure_path)
        plt.close(fig)

    print(f"\nTotal time: {time.time() - start_time:.2f} seconds")


if __name__ == "__main__":
    main()
