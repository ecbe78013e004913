"""Site percolation core and Monte Carlo trial runner."""

from .union_find import UnionFind
from .errors import InvalidArgument
from .site_percolation import SitePercolation
from .stats import (
    PercolationStats, UniformRandomSource, run_trials, run_single_trial, validate_trial_args,
)

__all__ = [
    'UnionFind', 'SitePercolation', 'InvalidArgument',
    'PercolationStats', 'UniformRandomSource', 'run_trials', 'run_single_trial',
    'validate_trial_args',
]
