"""
Percolation Stats - Site percolation and Monte Carlo threshold estimation.

This package provides tools for:
- Incremental connectivity on an n-by-n grid of open/blocked sites
- Detecting when the top row connects to the bottom row (percolation)
- Estimating the percolation threshold over many independent random trials
"""

__version__ = "1.0.0"
