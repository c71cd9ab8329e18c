"""
Tests for the synthetic sample generators.
"""
import numpy as np
import pytest

from histo.data_generator import DISTRIBUTIONS, generate_integer_samples, generate_samples


class TestGenerateSamples:
    """Test the scipy.stats based generators."""

    @pytest.mark.parametrize("distribution", DISTRIBUTIONS)
    def test_shape_and_reproducibility(self, distribution):
        a = generate_samples(distribution, n_samples=500, random_seed=42)
        b = generate_samples(distribution, n_samples=500, random_seed=42)

        assert a.shape == (500,)
        assert np.array_equal(a, b)

    def test_uniform_support(self):
        """Test that uniform samples stay in [loc, loc + scale]."""
        samples = generate_samples('uniform', n_samples=1000, random_seed=0, loc=-1.0, scale=2.0)
        assert samples.min() >= -1.0
        assert samples.max() <= 1.0

    def test_normal_moments(self):
        samples = generate_samples('normal', n_samples=20000, random_seed=0, loc=5.0, scale=2.0)
        assert samples.mean() == pytest.approx(5.0, abs=0.1)
        assert samples.std() == pytest.approx(2.0, abs=0.1)

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            generate_samples('cauchy')
        with pytest.raises(ValueError):
            generate_samples('normal', scale=0.0)


class TestGenerateIntegerSamples:
    """Test the integer generator."""

    def test_bounds_are_inclusive(self):
        samples = generate_integer_samples(-2, 2, n_samples=2000, random_seed=42)

        assert np.issubdtype(samples.dtype, np.integer)
        assert set(np.unique(samples)) == {-2, -1, 0, 1, 2}
