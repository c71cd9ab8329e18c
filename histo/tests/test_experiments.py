"""
Tests for the histogram experiment script.
"""
import sys

import numpy as np
import pytest

from histo.experiments.scott_histogram import build_histogram, main


class TestBuildHistogram:
    """Test the construction mode selected by the arguments."""

    def test_data_only(self, small_data):
        h = build_histogram(small_data, name="data")
        assert h.range == (1.0, 19.0)
        assert h.name == "data"

    def test_fixed_range_discards_outside(self, small_data, capsys):
        """Test that samples outside the range are dropped."""
        h = build_histogram(small_data, low=0.0, upper=10.0)

        assert h.total == 4
        assert h.breaks[0] == 0.0
        assert h.breaks[-1] == pytest.approx(10.0)
        assert "Discarding 1 samples" in capsys.readouterr().out

    def test_fixed_bins(self, small_data):
        h = build_histogram(small_data, low=0.0, upper=20.0, bins=10)
        assert h.bins == 10
        assert h.total == 5

    @pytest.mark.parametrize("kwargs", [
        {"low": 0.0},
        {"upper": 1.0},
        {"bins": 3},
    ])
    def test_inconsistent_arguments(self, small_data, kwargs):
        with pytest.raises(ValueError):
            build_histogram(small_data, **kwargs)


class TestMain:
    """Test the command line entry point."""

    def test_without_plot(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", [
            "scott_histogram", "--n-samples", "500", "--name", "run",
            "--output-dir", str(tmp_path), "--no-plot",
        ])

        main()

        output = capsys.readouterr().out
        assert "HISTOGRAM EXPERIMENT" in output
        assert "Mean" in output
        assert (tmp_path / "run.histo").exists()
        assert not (tmp_path / "run_line.png").exists()

        centers, counts = np.loadtxt(tmp_path / "run.histo", unpack=True, ndmin=2)
        assert counts.sum() == 500

    def test_with_bar_plot(self, tmp_path, monkeypatch):
        monkeypatch.setattr(sys, "argv", [
            "scott_histogram", "--distribution", "uniform", "--n-samples", "300",
            "--low", "0", "--upper", "1", "--bins", "5", "--name", "bars",
            "--plot-kind", "bar", "--output-dir", str(tmp_path),
        ])

        main()

        assert (tmp_path / "bars.histo").exists()
        assert (tmp_path / "bars_bar.png").exists()

    def test_invalid_combination_exits(self, tmp_path, monkeypatch):
        monkeypatch.setattr(sys, "argv", [
            "scott_histogram", "--bins", "5", "--output-dir", str(tmp_path),
        ])
        with pytest.raises(SystemExit):
            main()
