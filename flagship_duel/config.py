"""
Run configuration for duel simulations.

Settings are layered, later sources winning:
- Built-in defaults
- A JSON config file (DuelConfig.from_json)
- Environment variables, including a local .env file
- Command line flags (applied by the CLI via DuelConfig.override)
"""

import json
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .command import COMMAND_CENTER_REGISTRY
from .trials import DEFAULT_TRIALS


# Environment variable -> (config field, parser)
ENV_VARS = {
    "FLAGSHIP_DUEL_TRIALS": ("trials", int),
    "FLAGSHIP_DUEL_SEED": ("seed", int),
    "FLAGSHIP_DUEL_YOU": ("your_command_center", str),
    "FLAGSHIP_DUEL_ENEMY": ("enemy_command_center", str),
}


@dataclass
class DuelConfig:
    """Configuration for a duel run."""
    trials: int = DEFAULT_TRIALS
    your_command_center: str = "counter_fire"
    enemy_command_center: str = "hidden_flagship"
    seed: Optional[int] = None
    record_path: Optional[str] = None
    record_max_matches: int = 100
    progress_interval: int = 0  # 0 disables progress output

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if isinstance(self.trials, bool) or not isinstance(self.trials, int) or self.trials <= 0:
            raise ValueError(f"trials must be a positive integer, got {self.trials!r}")
        for side in ("your_command_center", "enemy_command_center"):
            name = getattr(self, side)
            if name not in COMMAND_CENTER_REGISTRY:
                raise ValueError(
                    f"Unknown command center '{name}' for {side}. "
                    f"Available: {', '.join(COMMAND_CENTER_REGISTRY)}"
                )
        for name in ("record_max_matches", "progress_interval"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f"seed must be an integer, got {self.seed!r}")

    @classmethod
    def from_json(cls, path: str) -> 'DuelConfig':
        """Load configuration from JSON file."""
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Duel config not found: {path}")

        with open(config_path) as f:
            data = json.load(f)

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DuelConfig':
        """Create configuration from dictionary. Unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def with_environment(self, env: Optional[Dict[str, str]] = None) -> 'DuelConfig':
        """
        Apply FLAGSHIP_DUEL_* environment overrides.

        Args:
            env: Mapping to read from (defaults to os.environ after loading .env)

        Returns:
            A new DuelConfig with the overrides applied
        """
        if env is None:
            load_dotenv()
            env = dict(os.environ)

        overrides: Dict[str, Any] = {}
        for var, (field_name, parse) in ENV_VARS.items():
            raw = env.get(var)
            if raw is None or raw == "":
                continue
            try:
                overrides[field_name] = parse(raw)
            except ValueError as e:
                raise ValueError(f"Invalid value for {var}: {raw!r}") from e

        return self.override(**overrides)

    def override(self, **changes: Any) -> 'DuelConfig':
        """Return a copy with the non-None changes applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_config(
    path: Optional[str] = None,
    env: Optional[Dict[str, str]] = None
) -> DuelConfig:
    """
    Build the effective configuration from file and environment.

    Args:
        path: Optional JSON config file
        env: Environment mapping (defaults to os.environ plus .env)

    Returns:
        The merged DuelConfig
    """
    config = DuelConfig.from_json(path) if path else DuelConfig()
    return config.with_environment(env)
