from __future__ import annotations

import json
from pathlib import Path

import typer

app = typer.Typer(name="gauntlet", help="Fluent, chainable test assertions")
config_app = typer.Typer(name="config", help="Check and describe gauntlet config files")
app.add_typer(config_app, name="config")


@app.callback()
def main() -> None:
    """Fluent, chainable test assertions."""


@config_app.command("check")
def config_check(
    path: str = typer.Argument(help="Path to a gauntlet YAML config"),
):
    """Validate a config file and print the settings it resolves to."""
    import yaml
    from pydantic import ValidationError

    from gauntlet.config import load_config

    config_path = Path(path)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {path}", err=True)
        raise typer.Exit(1)

    try:
        config = load_config(config_path)
    except (ValidationError, ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Config OK: {config_path}")
    for key, value in config.model_dump().items():
        typer.echo(f"  {key}: {value}")


@config_app.command("schema")
def config_schema(
    out: str | None = typer.Option(
        None, "--out", help="Write the JSON Schema here instead of stdout"
    ),
):
    """Print or write the JSON Schema of the config file."""
    from gauntlet.schema import generate_json_schema, write_json_schema

    if out is None:
        typer.echo(json.dumps(generate_json_schema(), indent=2))
        return

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Wrote schema: {out_path}")
