"""
Tests for saving and loading histogram files.
"""
import numpy as np
import pytest

from histo.core import Histogram
from histo.io import HistogramIOError, load_histogram, save_histogram


@pytest.fixture
def histogram(small_data, irregular_breaks):
    return Histogram(small_data, breaks=irregular_breaks, name="outlier")


class TestSaveHistogram:
    """Test the .histo text format."""

    def test_save_and_load(self, histogram, tmp_path):
        """Test that centers and counts are written one bin per line."""
        file_path = save_histogram(histogram, output_dir=tmp_path)

        assert file_path == tmp_path / "outlier.histo"
        assert file_path.read_text().splitlines() == ["1.5 2", "8.5 2", "17.5 1"]

        centers, counts = load_histogram(file_path)
        assert np.allclose(centers, histogram.compute_bin_centers())
        assert np.array_equal(counts, histogram.counts)

    def test_explicit_name_and_new_directory(self, histogram, tmp_path, capsys):
        """Test that the directory is created and the name overridden."""
        output_dir = tmp_path / "results" / "histograms"

        file_path = save_histogram(histogram, name="other", output_dir=output_dir, verbose=True)

        assert file_path == output_dir / "other.histo"
        assert file_path.exists()
        assert "Histogram saved" in capsys.readouterr().out

    def test_floating_counts_round_trip(self, tmp_path):
        """Test that floating counts are written at full precision."""
        h = Histogram._from_parts([0.0, 1.0, 3.0], [0.1, 0.9], name="density")

        centers, counts = load_histogram(save_histogram(h, output_dir=tmp_path))

        assert np.array_equal(centers, [0.5, 2.0])
        assert np.array_equal(counts, [0.1, 0.9])

    def test_missing_name(self, irregular_breaks, tmp_path):
        """Test that an unnamed histogram needs an explicit name."""
        with pytest.raises(ValueError):
            save_histogram(Histogram(breaks=irregular_breaks), output_dir=tmp_path)

    def test_unwritable_directory(self, histogram, tmp_path):
        """Test that a failed write raises HistogramIOError."""
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")

        with pytest.raises(HistogramIOError):
            save_histogram(histogram, output_dir=blocker / "sub")

    def test_load_missing_file(self, tmp_path):
        """Test that reading a missing file raises HistogramIOError."""
        with pytest.raises(HistogramIOError):
            load_histogram(tmp_path / "missing.histo")
