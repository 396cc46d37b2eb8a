"""
Run configuration for threshold sweeps.

The RunConfig loads a YAML run definition listing the grid sizes to simulate,
the number of trials per size and where to write the results.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional


def _is_positive_int(value: Any) -> bool:
    # YAML booleans load as bool, a subclass of int
    return not isinstance(value, bool) and isinstance(value, int) and value > 0


class RunConfig:
    """
    Loads and validates a run configuration YAML.

    Example:
        config = RunConfig.from_yaml('config/threshold_sweep.yaml')
        print(config.run_name)
        print(config.grid_sizes)
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'RunConfig':
        """Load run config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Run config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Run config must be a mapping: {path}")

        return cls(data)

    def _validate(self):
        """Validate required config sections and values."""
        required_sections = ['run_name', 'grid', 'simulation', 'output']
        for section in required_sections:
            if section not in self._data:
                raise ValueError(f"Missing required config section: '{section}'")
        for section in ['grid', 'simulation', 'output']:
            if not isinstance(self._data[section], dict):
                raise ValueError(f"Config section '{section}' must be a mapping, "
                                 f"got {self._data[section]!r}")

        grid = self._data['grid']
        if 'sizes' not in grid and 'n' not in grid:
            raise ValueError("Config section 'grid' must define 'sizes' or 'n'")
        if 'sizes' in grid and not isinstance(grid['sizes'], list):
            raise ValueError(f"Grid sizes must be a list, got {grid['sizes']!r}")
        if not self.grid_sizes:
            raise ValueError("Config section 'grid' must list at least one size")
        for n in self.grid_sizes:
            if not _is_positive_int(n):
                raise ValueError(f"Grid sizes must be positive integers, got {n!r}")

        if 'trials' not in self._data['simulation']:
            raise ValueError("Config section 'simulation' must define 'trials'")
        if not _is_positive_int(self.trials):
            raise ValueError(f"Number of trials must be a positive integer, got {self.trials!r}")

        seed = self.seed
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise ValueError(f"seed must be an integer, got {seed!r}")

        confidence = self._data['simulation'].get('confidence', 0.95)
        if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
            raise ValueError(f"confidence must be a number, got {confidence!r}")
        if not 0.0 < confidence < 1.0:
            raise ValueError(f"confidence must be in (0, 1), got {confidence}")

        if 'base_dir' not in self._data['output']:
            raise ValueError("Config section 'output' must define 'base_dir'")

    # --- Properties ---

    @property
    def run_name(self) -> str:
        return self._data['run_name']

    @property
    def description(self) -> str:
        return self._data.get('description', '')

    # --- Grid / simulation ---

    @property
    def grid_sizes(self) -> List[int]:
        grid = self._data['grid']
        if 'sizes' in grid:
            return list(grid['sizes'])
        return [grid['n']]

    @property
    def trials(self) -> int:
        return self._data['simulation']['trials']

    @property
    def seed(self) -> Optional[int]:
        return self._data['simulation'].get('seed')

    @property
    def confidence(self) -> float:
        return float(self._data['simulation'].get('confidence', 0.95))

    # --- Output paths ---

    @property
    def base_dir(self) -> Path:
        return Path(self._data['output']['base_dir'])

    @property
    def trials_csv(self) -> Path:
        return self.base_dir / self._data['output'].get('trials_csv', 'trials.csv')

    @property
    def summary_csv(self) -> Path:
        return self.base_dir / self._data['output'].get('summary_csv', 'summary.csv')
