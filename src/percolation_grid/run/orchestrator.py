"""
Run orchestrator - executes a threshold sweep described by a RunConfig.

For every configured grid size it runs the Monte-Carlo trials, then writes:
  - a trials CSV with one row per trial
  - a summary CSV with one row per grid size

Usage:
    orchestrator = RunOrchestrator(config)
    summary = orchestrator.run()
"""

import numpy as np
import pandas as pd
from typing import List, Optional

from .config import RunConfig
from ..percolation.stats import PercolationStats


class RunOrchestrator:
    """
    Runs every grid size of a sweep and saves the results.

    Example:
        config = RunConfig.from_yaml('config/threshold_sweep.yaml')
        orch = RunOrchestrator(config)
        orch.run()
    """

    def __init__(self, config: RunConfig):
        self.config = config
        self.stats: List[PercolationStats] = []

    def _seed_for(self, index: int) -> Optional[int]:
        # Each size gets its own stream so adding a size does not change the others
        if self.config.seed is None:
            return None
        return int(np.random.SeedSequence([self.config.seed, index]).generate_state(1)[0])

    def run(self) -> pd.DataFrame:
        """
        Run all grid sizes and write the trials and summary CSVs.

        Returns:
            Summary DataFrame, one row per grid size
        """
        config = self.config

        print(f"{'=' * 70}")
        print(f"Running: {config.run_name}")
        print(f"{'=' * 70}")
        print(f"  Grid sizes: {config.grid_sizes}")
        print(f"  Trials per size: {config.trials}")

        self.stats = []
        trial_frames = []
        summaries = []

        for index, n in enumerate(config.grid_sizes):
            stats = PercolationStats(n, config.trials, seed=self._seed_for(index),
                                     confidence=config.confidence)
            stats.run()
            self.stats.append(stats)

            trial_frames.append(stats.to_dataframe())
            summary = stats.summary()
            summaries.append(summary)

            print(f"  n={n}: mean={summary['mean']:.6f} stddev={summary['stddev']:.6f} "
                  f"CI=[{summary['confidence_lo']:.6f}, {summary['confidence_hi']:.6f}]")

        trials_df = pd.concat(trial_frames, ignore_index=True)
        trials_df.insert(0, 'run_name', config.run_name)
        summary_df = pd.DataFrame(summaries)
        summary_df.insert(0, 'run_name', config.run_name)

        config.base_dir.mkdir(parents=True, exist_ok=True)
        trials_df.to_csv(config.trials_csv, index=False)
        summary_df.to_csv(config.summary_csv, index=False)

        print(f"✓ Saved {len(trials_df)} trials to {config.trials_csv}")
        print(f"✓ Saved summary to {config.summary_csv}")

        return summary_df


def run_from_config(config: RunConfig) -> pd.DataFrame:
    """Run the sweep described by config and return its summary."""
    return RunOrchestrator(config).run()
