"""Site percolation model and Monte-Carlo threshold estimation."""

from .union_find import WeightedQuickUnionUF
from .model import PercolationModel
from .stats import PercolationStats, run_trial, summarize_trials

__all__ = ['WeightedQuickUnionUF', 'PercolationModel', 'PercolationStats', 'run_trial', 'summarize_trials']
