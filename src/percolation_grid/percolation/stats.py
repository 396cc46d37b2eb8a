"""
Monte-Carlo estimation of the site percolation threshold.

Each trial opens uniformly random blocked sites of a fresh PercolationModel
until the system percolates. The fraction of open sites at that moment is one
sample of the threshold; repeating the experiment gives its mean, spread and
a normal-approximation confidence interval.
"""

import time
from numbers import Integral
import numpy as np
import pandas as pd
from typing import Dict, Any, Optional, Tuple
from scipy.stats import norm

from .model import PercolationModel


def run_trial(n: int, rng: np.random.Generator) -> Tuple[int, float]:
    """
    Run a single percolation experiment.

    Args:
        n: Grid side length
        rng: Random generator used to order the sites

    Returns:
        Tuple of (open_sites, threshold) at the moment the grid percolates
    """
    model = PercolationModel(n)

    # Opening sites along a random permutation never picks an open site twice
    for site in rng.permutation(n * n):
        row, col = divmod(int(site), n)
        model.open(row + 1, col + 1)
        if model.percolates():
            break

    open_sites = model.number_of_open_sites()
    return open_sites, open_sites / (n * n)


def _z_value(confidence: float) -> float:
    if not 0.0 < confidence < 1.0:
        raise ValueError(f"confidence must be in (0, 1), got {confidence}")
    return float(norm.ppf((1.0 + confidence) / 2.0))


class PercolationStats:
    """
    Repeated percolation trials on an n-by-n grid.

    Example:
        stats = PercolationStats(n=200, trials=100, seed=42)
        stats.run()
        print(stats.mean(), stats.confidence_lo(), stats.confidence_hi())
    """

    def __init__(self, n: int, trials: int, seed: Optional[int] = None,
                 confidence: float = 0.95):
        """
        Initialize the experiment.

        Args:
            n: Grid side length
            trials: Number of independent trials
            seed: Seed for numpy's default generator (None = fresh entropy)
            confidence: Confidence level of the interval around the mean
        """
        for name, value in (('Grid size', n), ('Number of trials', trials)):
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

        self.n = int(n)
        self.trials = int(trials)
        self.seed = seed
        self.confidence = confidence
        self._z = _z_value(confidence)

        self.thresholds = None
        self.open_sites = None
        self.durations = None

    def run(self) -> np.ndarray:
        """
        Execute all trials.

        Returns:
            Array of per-trial threshold estimates, shape (trials,)
        """
        rng = np.random.default_rng(self.seed)
        thresholds = np.empty(self.trials, dtype=np.float64)
        open_sites = np.empty(self.trials, dtype=np.int64)
        durations = np.empty(self.trials, dtype=np.float64)

        for t in range(self.trials):
            start = time.time()
            open_sites[t], thresholds[t] = run_trial(self.n, rng)
            durations[t] = time.time() - start

        self.thresholds = thresholds
        self.open_sites = open_sites
        self.durations = durations
        return thresholds

    def _require_results(self) -> np.ndarray:
        if self.thresholds is None:
            raise ValueError("Run run() first to compute thresholds.")
        return self.thresholds

    def mean(self) -> float:
        return float(np.mean(self._require_results()))

    def stddev(self) -> float:
        """Sample standard deviation of the threshold (NaN for one trial)."""
        thresholds = self._require_results()
        if len(thresholds) < 2:
            return float('nan')
        return float(np.std(thresholds, ddof=1))

    def _half_width(self) -> float:
        return self._z * self.stddev() / np.sqrt(self.trials)

    def confidence_lo(self) -> float:
        return self.mean() - self._half_width()

    def confidence_hi(self) -> float:
        return self.mean() + self._half_width()

    def summary(self) -> Dict[str, Any]:
        """Summary statistics of the completed run."""
        return {
            'n': self.n,
            'trials': self.trials,
            'mean': self.mean(),
            'stddev': self.stddev(),
            'confidence': self.confidence,
            'confidence_lo': self.confidence_lo(),
            'confidence_hi': self.confidence_hi(),
        }

    def to_dataframe(self) -> pd.DataFrame:
        """Per-trial results as a DataFrame."""
        thresholds = self._require_results()
        return pd.DataFrame({
            'n': self.n,
            'trial': np.arange(self.trials),
            'open_sites': self.open_sites,
            'threshold': thresholds,
            'time_seconds': self.durations,
        })


def summarize_trials(df: pd.DataFrame, confidence: float = 0.95) -> pd.DataFrame:
    """
    Recompute per-grid-size summary statistics from a trials table.

    Args:
        df: DataFrame with at least 'n' and 'threshold' columns
        confidence: Confidence level of the interval around the mean

    Returns:
        DataFrame with one row per grid size
    """
    missing = [col for col in ('n', 'threshold') if col not in df.columns]
    if missing:
        raise ValueError(f"Trials table is missing columns: {missing}")

    z = _z_value(confidence)
    rows = []
    for n, group in df.groupby('n', sort=True):
        thresholds = group['threshold'].to_numpy(dtype=np.float64)
        trials = len(thresholds)
        mean = float(np.mean(thresholds))
        stddev = float(np.std(thresholds, ddof=1)) if trials > 1 else float('nan')
        half_width = z * stddev / np.sqrt(trials)
        rows.append({
            'n': int(n),
            'trials': trials,
            'mean': mean,
            'stddev': stddev,
            'confidence': confidence,
            'confidence_lo': mean - half_width,
            'confidence_hi': mean + half_width,
        })

    return pd.DataFrame(rows, columns=['n', 'trials', 'mean', 'stddev', 'confidence',
                                       'confidence_lo', 'confidence_hi'])
