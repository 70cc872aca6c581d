from __future__ import annotations

from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator


class GauntletConfig(BaseModel):
    """Settings for the pytest integration, read from a YAML file."""

    model_config = ConfigDict(extra="forbid")

    verbose: bool = False
    debug_log: str | None = None
    collect_garbage: bool = True
    fail_on_issues: bool = True

    @field_validator("debug_log")
    @classmethod
    def expand_debug_log(cls, v: str | None) -> str | None:
        """Expand ${VAR} references, rejecting unset variables without defaults."""
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(f"debug_log has a missing environment variable: {e}") from e


def load_config(path: Path) -> GauntletConfig:
    """Load and validate a gauntlet config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    config = GauntletConfig(**raw)

    # Resolve a relative debug log path relative to the config file location
    if config.debug_log is not None:
        debug_log_path = Path(config.debug_log)
        if not debug_log_path.is_absolute():
            config.debug_log = str((config_dir / debug_log_path).resolve())

    return config
