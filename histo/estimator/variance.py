"""
Sample variance estimation with Welford's one-pass algorithm.
"""

import numpy as np

from ..errors import InvalidInputError


class WelfordVariance:
    """
    One-pass sample variance estimator.

    Keeps a running mean ``M`` and a running sum of squared deviations ``S``:

    - M_k = M_{k-1} + (x_k - M_{k-1}) / k
    - S_k = S_{k-1} + (x_k - M_{k-1}) * (x_k - M_k)

    The estimate is the Bessel-corrected ``S / (N - 1)``.
    """

    def __init__(self, dtype=np.float64):
        self.dtype = np.dtype(dtype)
        self.params = None
        self.mean = None
        self.n_samples = 0

    def fit(self, data):
        """
        Estimate the variance of a sample.

        Parameters
        ----------
        data : array-like
            Observed samples, flattened before use.

        Returns
        -------
        self : WelfordVariance
            The fitted estimator
        """
        data = np.asarray(data).ravel()
        if len(data) <= 1:
            raise InvalidInputError(
                f"Variance needs at least 2 samples, got {len(data)}"
            )

        n = 0
        m = self.dtype.type(0)
        s = self.dtype.type(0)
        for x in data.astype(self.dtype):
            n += 1
            m_prev = m
            m = m + (x - m_prev) / n
            s = s + (x - m_prev) * (x - m)

        self.n_samples = n
        self.mean = m
        self.params = s / (n - 1)
        return self

    def get_params(self):
        """
        Get the estimated variance.

        Returns
        -------
        float : Estimated variance
        """
        return self.params

    @staticmethod
    def estimate(data, dtype=np.float64):
        """
        Static method for quick estimation.

        Parameters
        ----------
        data : array-like
            Observed samples
        dtype : numpy dtype
            Floating type used for the accumulators

        Returns
        -------
        float : Estimated variance
        """
        estimator = WelfordVariance(dtype)
        estimator.fit(data)
        return estimator.params


def estimate_variance(samples, dtype=np.float64):
    """Bessel-corrected sample variance of ``samples``."""
    return WelfordVariance.estimate(samples, dtype=dtype)
