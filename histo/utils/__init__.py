"""
Utility module for histogram computations.

This module provides floating-point comparison helpers and output path setup.
"""

from .comparison import machine_epsilon, magnitude, is_approximately_equal
from .paths import setup_output_dir, histogram_file_path

__all__ = [
    'machine_epsilon', 'magnitude', 'is_approximately_equal',
    'setup_output_dir', 'histogram_file_path',
]
