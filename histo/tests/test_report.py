"""
Tests for the fixed-width text dumps.
"""
import io

import pytest

from histo.core import Histogram
from histo.report import (format_breaks, format_breaks_and_counts, format_centers,
                          format_centers_and_counts, format_counts, print_report)


@pytest.fixture
def histogram(small_data, irregular_breaks):
    return Histogram(small_data, breaks=irregular_breaks, name="outlier")


class TestFormatting:
    """Test the single and multi line dumps."""

    def test_breaks_and_counts(self, histogram):
        """Test half-open intervals and the closed last bin."""
        lines = format_breaks_and_counts(histogram, precision=2, width=6).splitlines()

        assert lines == [
            "[  1.00,  2.00)      2",
            "[  2.00, 15.00)      2",
            "[ 15.00, 20.00]      1",
        ]

    def test_centers_and_counts(self, histogram):
        """Test one center and count per line."""
        lines = format_centers_and_counts(histogram, precision=1, width=5).splitlines()
        assert lines == ["  1.5     2", "  8.5     2", " 17.5     1"]

    def test_single_line_dumps(self, histogram):
        """Test breaks, counts and centers on one line each."""
        assert format_breaks(histogram, precision=3, width=4).split() == ["1", "2", "15", "20"]
        assert format_counts(histogram).split() == ["2", "2", "1"]
        assert format_centers(histogram, precision=1).split() == ["1.5", "8.5", "17.5"]

    def test_floating_counts(self, histogram):
        """Test that floating counts use the precision."""
        h = Histogram._from_parts(histogram.breaks, [0.25, 0.5, 0.25])
        assert format_counts(h, precision=2, width=5).split() == ["0.25", "0.50", "0.25"]

    def test_print_report(self, histogram):
        """Test that the report holds the header and every dump."""
        stream = io.StringIO()

        print_report(histogram, file=stream, precision=2, width=6)

        output = stream.getvalue()
        assert "outlier: 3 bins" in output
        assert "[ 15.00, 20.00]      1" in output
        assert "centers:" in output

    def test_print_report_stdout(self, histogram, capsys):
        """Test that the report goes to stdout by default."""
        print_report(histogram)
        assert "=" * 80 in capsys.readouterr().out
