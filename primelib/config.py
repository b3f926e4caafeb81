"""
Configuration loading.

Settings come from a YAML file (config/default.yaml by default). A
missing file means defaults; unknown keys are ignored.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml

from .primes import DEFAULT_MAX_SIEVE_LIMIT, check_sieve_ceiling


DEFAULT_CONFIG_PATH = Path("config/default.yaml")


@dataclass(frozen=True)
class PrimeLibConfig:
    max_sieve_limit: int = DEFAULT_MAX_SIEVE_LIMIT
    verify_limit: int = 100_000
    pair_samples: int = 10_000
    goldbach_limit: int = 10_000
    seed: int = 123
    output_dir: Path = Path("data/results")

    def __post_init__(self):
        check_sieve_ceiling(self.max_sieve_limit)
        for name in ("verify_limit", "pair_samples", "goldbach_limit"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        for name in ("verify_limit", "goldbach_limit"):
            if getattr(self, name) > self.max_sieve_limit:
                raise ValueError(f"{name} must not exceed max_sieve_limit "
                                 f"({self.max_sieve_limit})")


def load_config(path: Optional[Union[str, Path]] = None) -> PrimeLibConfig:
    """
    Load configuration from YAML.

    Parameters
    ----------
    path : str or Path, optional
        Config file. Defaults to config/default.yaml; if that file does
        not exist the built-in defaults are used. An explicitly given
        path must exist.

    Returns
    -------
    PrimeLibConfig
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return PrimeLibConfig()
    path = Path(path)

    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at top level")

    verify = raw.get("verify") or {}
    defaults = PrimeLibConfig()
    return PrimeLibConfig(
        max_sieve_limit=raw.get("max_sieve_limit", defaults.max_sieve_limit),
        verify_limit=verify.get("limit", defaults.verify_limit),
        pair_samples=verify.get("pair_samples", defaults.pair_samples),
        goldbach_limit=verify.get("goldbach_limit", defaults.goldbach_limit),
        seed=verify.get("seed", defaults.seed),
        output_dir=Path(verify.get("output_dir", defaults.output_dir)),
    )
