"""
Experiments module.

This module contains experiment scripts:
- scott_histogram: histogram of synthetic samples from the command line
"""
