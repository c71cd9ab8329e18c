"""
Estimator module for sample statistics.

This module provides estimation methods including:
- Welford one-pass sample variance
"""

from .variance import WelfordVariance, estimate_variance

__all__ = [
    'WelfordVariance',
    'estimate_variance'
]
