"""
Tests for the Welford variance estimator.
"""
import numpy as np
import pytest
from scipy.stats import norm

from histo.errors import InvalidInputError
from histo.estimator import WelfordVariance, estimate_variance


class TestWelfordVariance:
    """Test the one-pass variance estimation."""

    def test_matches_numpy_sample_variance(self):
        """Test that the estimate is the Bessel-corrected variance."""
        data = norm.rvs(loc=3.0, scale=2.0, size=1000, random_state=42)

        variance = estimate_variance(data)

        assert variance == pytest.approx(np.var(data, ddof=1), rel=1e-10)

    def test_small_known_sample(self, small_data):
        """Test the variance of a small sample computed by hand."""
        # mean 5.2, squared deviations sum to 240.8
        assert estimate_variance(small_data) == pytest.approx(240.8 / 4)
        assert estimate_variance([1, 2, 3, 4]) == pytest.approx(5.0 / 3.0)

    def test_estimator_class(self):
        """Test the fit/get_params interface."""
        estimator = WelfordVariance()
        result = estimator.fit([2.0, 4.0, 6.0])

        assert result is estimator
        assert estimator.n_samples == 3
        assert estimator.mean == pytest.approx(4.0)
        assert estimator.get_params() == pytest.approx(4.0)
        assert WelfordVariance.estimate([2.0, 4.0, 6.0]) == pytest.approx(4.0)

    def test_precision_follows_dtype(self):
        """Test that the accumulators use the requested precision."""
        variance = estimate_variance([1.0, 2.0, 3.0], dtype=np.float32)
        assert isinstance(variance, np.float32)
        assert variance == pytest.approx(1.0)

    def test_constant_sample_has_zero_variance(self):
        """Test that identical values give a zero variance."""
        assert estimate_variance([7.0] * 10) == 0.0

    @pytest.mark.parametrize("data", [[], [1.0]])
    def test_too_few_samples(self, data):
        """Test that N <= 1 is rejected instead of dividing by zero."""
        with pytest.raises(InvalidInputError, match="at least 2 samples"):
            estimate_variance(data)
