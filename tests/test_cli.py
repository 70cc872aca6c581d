import json

from typer.testing import CliRunner

from gauntlet.cli import app

runner = CliRunner()


def test_config_check_valid(tmp_path):
    path = tmp_path / "gauntlet.yaml"
    path.write_text("fail_on_issues: false\n")
    result = runner.invoke(app, ["config", "check", str(path)])
    assert result.exit_code == 0
    assert "Config OK" in result.output
    assert "fail_on_issues: False" in result.output


def test_config_check_missing_file():
    result = runner.invoke(app, ["config", "check", "nonexistent.yaml"])
    assert result.exit_code == 1


def test_config_check_invalid_key(tmp_path):
    path = tmp_path / "gauntlet.yaml"
    path.write_text("unknown: 1\n")
    result = runner.invoke(app, ["config", "check", str(path)])
    assert result.exit_code == 1


def test_config_check_invalid_yaml(tmp_path):
    path = tmp_path / "gauntlet.yaml"
    path.write_text("verbose: [unclosed\n")
    result = runner.invoke(app, ["config", "check", str(path)])
    assert result.exit_code == 1


def test_config_schema_prints_json():
    result = runner.invoke(app, ["config", "schema"])
    assert result.exit_code == 0
    schema = json.loads(result.output)
    assert "debug_log" in schema["properties"]


def test_config_schema_writes_file(tmp_path):
    out = tmp_path / "out" / "schema.json"
    result = runner.invoke(app, ["config", "schema", "--out", str(out)])
    assert result.exit_code == 0
    assert out.exists()
    assert f"Wrote schema: {out}" in result.output
