"""
Monte Carlo estimation of the site percolation threshold.

Each trial opens uniformly random sites on a fresh grid until it percolates
and records the fraction of open sites at that moment. PercolationStats
aggregates those fractions into a sample mean, standard deviation and 95%
confidence interval.
"""

from typing import Callable, Optional, Sequence

import numpy as np

from .errors import InvalidArgument, is_integer
from .site_percolation import SitePercolation

CONFIDENCE_95 = 1.96


class UniformRandomSource:
    """
    Uniform integer source backed by numpy's default Generator.

    Any object with a uniform(lo, hi) method returning an integer in
    [lo, hi] inclusive can stand in for this class.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def __repr__(self) -> str:
        return f"UniformRandomSource(seed={self.seed!r})"

    def uniform(self, lo: int, hi: int) -> int:
        """Draw an integer uniformly from [lo, hi] inclusive."""
        return int(self._rng.integers(lo, hi, endpoint=True))


def run_single_trial(n: int, random_source) -> float:
    """
    Open random sites on a fresh n-by-n grid until it percolates.

    Args:
        n: Grid side length
        random_source: Object with uniform(lo, hi) -> int

    Returns:
        Fraction of open sites at the moment of percolation
    """
    percolation = SitePercolation(n)

    while not percolation.percolates():
        row = random_source.uniform(1, n)
        col = random_source.uniform(1, n)
        percolation.open(row, col)

    return percolation.number_of_open_sites() / (n * n)


def validate_trial_args(n: int, trials: int) -> None:
    """Raise InvalidArgument unless n and trials are positive integers."""
    if not is_integer(n) or n <= 0:
        raise InvalidArgument(f"Grid size must be a positive integer, got {n!r}")
    if not is_integer(trials) or trials <= 0:
        raise InvalidArgument(f"Number of trials must be a positive integer, got {trials!r}")


def run_trials(
    n: int,
    trials: int,
    random_source,
    progress: Optional[Callable[[int, int, float], None]] = None,
) -> 'PercolationStats':
    """
    Run independent percolation trials on n-by-n grids.

    Args:
        n: Grid side length (must be positive)
        trials: Number of trials (must be positive)
        random_source: Object with uniform(lo, hi) -> int
        progress: Optional callback called as progress(i, trials, fraction)
            after each trial, with i counting from 1

    Returns:
        PercolationStats over the recorded open fractions
    """
    validate_trial_args(n, trials)

    thresholds = np.empty(trials, dtype=np.float64)
    for i in range(trials):
        thresholds[i] = run_single_trial(n, random_source)
        if progress is not None:
            progress(i + 1, trials, float(thresholds[i]))

    return PercolationStats(thresholds)


class PercolationStats:
    """
    Sample statistics over per-trial percolation thresholds.

    Example:
        stats = PercolationStats.from_simulation(200, 100, seed=0)
        print(stats.mean(), stats.stddev())
        print(stats.confidence_lo(), stats.confidence_hi())
    """

    def __init__(self, thresholds: Sequence[float]):
        """
        Args:
            thresholds: Open-site fraction at percolation, one per trial
        """
        values = np.array(thresholds, dtype=np.float64).ravel()
        if values.size == 0:
            raise InvalidArgument("At least one trial result is required")
        values.setflags(write=False)
        self._thresholds = values

    @classmethod
    def from_simulation(cls, n: int, trials: int, seed: Optional[int] = None) -> 'PercolationStats':
        """Run `trials` independent trials on an n-by-n grid with a seeded uniform source."""
        return run_trials(n, trials, UniformRandomSource(seed))

    @property
    def trials(self) -> int:
        return int(self._thresholds.size)

    @property
    def thresholds(self) -> np.ndarray:
        return self._thresholds

    def mean(self) -> float:
        """Sample mean of percolation threshold."""
        return float(np.mean(self._thresholds))

    def stddev(self) -> float:
        """
        Sample standard deviation of percolation threshold.

        Uses the n - 1 denominator. With a single trial the value is
        undefined and NaN is returned.
        """
        if self.trials < 2:
            return float('nan')
        return float(np.std(self._thresholds, ddof=1))

    def _half_width(self) -> float:
        return CONFIDENCE_95 * self.stddev() / np.sqrt(self.trials)

    def confidence_lo(self) -> float:
        """Low endpoint of 95% confidence interval."""
        return self.mean() - self._half_width()

    def confidence_hi(self) -> float:
        """High endpoint of 95% confidence interval."""
        return self.mean() + self._half_width()

    def summary(self) -> dict:
        return {
            'n_trials': self.trials,
            'mean': self.mean(),
            'stddev': self.stddev(),
            'confidence_lo': self.confidence_lo(),
            'confidence_hi': self.confidence_hi(),
        }
