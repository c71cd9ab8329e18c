"""
Tests for the mean and area normalization of a histogram.
"""
import numpy as np
import pytest

from histo.breaks import generate_breaks_from_range_and_width
from histo.core import Histogram, mean, normalize_by_area, weighted_mean
from histo.errors import InvalidInputError


class TestMean:
    """Test the two means of a histogram."""

    def test_mean_divides_by_bins(self, small_data, irregular_breaks):
        """Test sum(centers * counts) / bins."""
        h = Histogram(small_data, breaks=irregular_breaks)
        # centers [1.5, 8.5, 17.5], counts [2, 2, 1]
        assert mean(h) == pytest.approx(37.5 / 3)

    def test_weighted_mean(self, small_data, irregular_breaks):
        """Test sum(centers * counts) / sum(counts)."""
        h = Histogram(small_data, breaks=irregular_breaks)
        assert weighted_mean(h) == pytest.approx(7.5)

    def test_mean_of_empty_histogram(self, irregular_breaks):
        """Test that the mean of empty counts is zero and the weighted mean fails."""
        h = Histogram(breaks=irregular_breaks)
        assert mean(h) == 0.0
        with pytest.raises(InvalidInputError):
            weighted_mean(h)


class TestNormalizeByArea:
    """Test the area normalization."""

    def test_unit_width(self, small_data):
        """Test that unit width bins normalize to frequencies."""
        breaks = generate_breaks_from_range_and_width(0.0, 20.0, 1.0)
        h = Histogram(small_data, breaks=breaks, name="unit")

        normalized = normalize_by_area(h)

        assert normalized.counts[1] == pytest.approx(0.4)
        assert normalized.counts[2] == pytest.approx(0.2)
        assert normalized.counts[3] == pytest.approx(0.2)
        assert normalized.counts[19] == pytest.approx(0.2)
        assert normalized.counts.sum() == pytest.approx(1.0)

    def test_non_uniform_widths(self):
        """Test that every count is weighted by the width of its bin."""
        h = Histogram([0.5, 2.0, 2.5], breaks=[0.0, 1.0, 3.0])

        normalized = normalize_by_area(h)

        assert np.allclose(normalized.counts, [0.2, 0.8])

    def test_metadata_preserved(self, small_data, irregular_breaks):
        """Test that breaks, range and name are kept and input is untouched."""
        h = Histogram(small_data, breaks=irregular_breaks, name="outlier")

        normalized = normalize_by_area(h)

        assert normalized is not h
        assert normalized.name == "outlier"
        assert normalized.range == h.range
        assert np.array_equal(normalized.breaks, h.breaks)
        assert normalized.count_dtype == np.float64
        assert np.array_equal(h.counts, [2, 2, 1])

    def test_empty_histogram(self, irregular_breaks):
        """Test that a histogram with no counts cannot be normalized."""
        with pytest.raises(InvalidInputError):
            normalize_by_area(Histogram(breaks=irregular_breaks))
