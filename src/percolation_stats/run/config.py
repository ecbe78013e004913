"""
Run configuration.

The RunConfig loads a YAML run definition describing the grid size, the
number of trials and an optional seed for one threshold estimation run.

Example YAML:
    run_name: threshold_200
    simulation:
      n: 200
      trials: 100
      seed: 42
    output:
      verbose: false
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional


class RunConfig:
    """
    Loads and validates a run configuration YAML.

    Example:
        config = RunConfig.from_yaml('config/run.yaml')
        print(config.n, config.trials, config.seed)
    """

    def __init__(self, data: Dict[str, Any]):
        if not isinstance(data, dict):
            raise ValueError("Run config must be a mapping")
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

        return cls(data)

    def _validate(self):
        """Validate required config sections and values."""
        if 'simulation' not in self._data:
            raise ValueError("Missing required config section: 'simulation'")

        simulation = self._data['simulation']
        if not isinstance(simulation, dict):
            raise ValueError("Config section 'simulation' must be a mapping")

        for key in ('n', 'trials'):
            if key not in simulation:
                raise ValueError(f"Missing required config key: 'simulation.{key}'")
            value = simulation[key]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"'simulation.{key}' must be a positive integer, got {value!r}")

        seed = simulation.get('seed')
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int) or seed < 0):
            raise ValueError(f"'simulation.seed' must be a non-negative integer, got {seed!r}")

    # --- Properties ---

    @property
    def run_name(self) -> str:
        return self._data.get('run_name', 'percolation')

    @property
    def n(self) -> int:
        return self._data['simulation']['n']

    @property
    def trials(self) -> int:
        return self._data['simulation']['trials']

    @property
    def seed(self) -> Optional[int]:
        return self._data['simulation'].get('seed')

    @property
    def verbose(self) -> bool:
        return bool((self._data.get('output') or {}).get('verbose', False))
