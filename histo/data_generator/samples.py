"""
Random sample generation from common distributions.
"""

import numpy as np
from scipy.stats import expon, norm, uniform

DISTRIBUTIONS = ('normal', 'uniform', 'exponential')


def generate_samples(distribution='normal', n_samples=10000, random_seed=None,
                     loc=0.0, scale=1.0):
    """
    Generate samples from a scipy.stats distribution.

    Parameters
    ----------
    distribution : str
        'normal' (mean ``loc``, standard deviation ``scale``), 'uniform'
        (on ``[loc, loc + scale]``) or 'exponential' (starting at ``loc``,
        mean ``loc + scale``)
    n_samples : int
        Number of samples to generate
    random_seed : int, optional
        Seed for reproducibility
    loc : float
        Location parameter
    scale : float
        Scale parameter, strictly positive

    Returns
    -------
    samples : ndarray, shape (n_samples,)
    """
    if scale <= 0:
        raise ValueError(f"Scale must be positive, got {scale}")

    if distribution == 'normal':
        rv = norm(loc=loc, scale=scale)
    elif distribution == 'uniform':
        rv = uniform(loc=loc, scale=scale)
    elif distribution == 'exponential':
        rv = expon(loc=loc, scale=scale)
    else:
        raise ValueError(f"Unsupported distribution: {distribution}. Use one of {DISTRIBUTIONS}")

    return rv.rvs(size=n_samples, random_state=random_seed)


def generate_integer_samples(low, upper, n_samples=1000, random_seed=None):
    """
    Generate integer samples uniformly in ``[low, upper]``.

    Returns
    -------
    samples : ndarray of int, shape (n_samples,)
    """
    rng = np.random.default_rng(random_seed)
    return rng.integers(low, upper, size=n_samples, endpoint=True)
