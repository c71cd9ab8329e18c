"""
Data generation module for synthetic samples.

This module provides functions for generating random samples used to
exercise the histogram breaks methods.
"""

from .samples import DISTRIBUTIONS, generate_samples, generate_integer_samples

__all__ = ['DISTRIBUTIONS', 'generate_samples', 'generate_integer_samples']
