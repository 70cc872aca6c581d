"""Generate JSON Schema for the gauntlet YAML config."""

from __future__ import annotations

import json
from pathlib import Path

from gauntlet.config import GauntletConfig


def generate_json_schema() -> dict:
    return GauntletConfig.model_json_schema()


def write_json_schema(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")
