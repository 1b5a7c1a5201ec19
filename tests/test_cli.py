"""Tests for the CLI."""

from pathlib import Path

import tomli
from typer.testing import CliRunner

from validation_report.cli import app


runner = CliRunner()


def _write_config(tmp_path: Path, module: str, *, strict: bool = False) -> Path:
    path = tmp_path / "validators.toml"
    path.write_text(
        f"strict = {'true' if strict else 'false'}\n"
        "\n"
        "[[validators]]\n"
        'name = "files"\n'
        f'class = "{module}:RequiredFilesValidator"\n'
        "\n"
        "[[validators]]\n"
        'name = "fixme"\n'
        f'class = "{module}:FixmeValidator"\n'
    )
    return path


class TestCLI:
    """Tests for CLI commands."""

    def test_help(self):
        """Help command should work."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "validate" in result.stdout

    def test_version(self):
        """Version flag should work."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.stdout

    def test_validate_help(self):
        result = runner.invoke(app, ["validate", "--help"])
        assert result.exit_code == 0
        assert "configured validators" in result.stdout

    def test_decode_warn(self):
        result = runner.invoke(app, ["decode", "WARNcheck logs"])
        assert result.exit_code == 0
        assert "WARN: check logs" in result.stdout

    def test_decode_untagged(self):
        result = runner.invoke(app, ["decode", "plain"])
        assert result.exit_code == 0
        assert "PASS: plain" in result.stdout


class TestValidateCommand:
    """Tests for the validate command."""

    def test_warnings_exit_zero(self, tmp_path: Path, plugin_module, project_dir: Path):
        """Warnings alone should not fail the run."""
        config = _write_config(tmp_path, plugin_module)
        result = runner.invoke(app, ["validate", str(project_dir), "--config", str(config)])

        assert result.exit_code == 0
        assert "FIXME in notes.txt" in result.stdout

    def test_strict_fails_on_warnings(self, tmp_path: Path, plugin_module, project_dir: Path):
        config = _write_config(tmp_path, plugin_module)
        result = runner.invoke(app, ["validate", str(project_dir), "-c", str(config), "--strict"])
        assert result.exit_code == 1

    def test_strict_from_config(self, tmp_path: Path, plugin_module, project_dir: Path):
        config = _write_config(tmp_path, plugin_module, strict=True)
        result = runner.invoke(app, ["validate", str(project_dir), "-c", str(config)])
        assert result.exit_code == 1

    def test_errors_exit_one(self, tmp_path: Path, plugin_module, project_dir: Path):
        (project_dir / "README.md").unlink()
        config = _write_config(tmp_path, plugin_module)
        result = runner.invoke(app, ["validate", str(project_dir), "-c", str(config)])

        assert result.exit_code == 1
        assert "Missing README.md" in result.stdout

    def test_output_written(self, tmp_path: Path, plugin_module, project_dir: Path):
        config = _write_config(tmp_path, plugin_module)
        output = tmp_path / "report.toml"
        result = runner.invoke(app, ["validate", str(project_dir), "-c", str(config), "-o", str(output)])

        assert result.exit_code == 0
        with open(output, "rb") as f:
            assert tomli.load(f)["status"] == "WARN"

    def test_bad_validator_exits_two(self, tmp_path: Path, project_dir: Path):
        config = tmp_path / "validators.toml"
        config.write_text('[[validators]]\nname = "bad"\nclass = "vr_does_not_exist:Thing"\n')
        result = runner.invoke(app, ["validate", str(project_dir), "-c", str(config)])

        assert result.exit_code == 2
        assert "Cannot import" in result.stdout

    def test_malformed_config_exits_two(self, tmp_path: Path, project_dir: Path):
        config = tmp_path / "validators.toml"
        config.write_text("[[validators]\nname = ")
        result = runner.invoke(app, ["validate", str(project_dir), "-c", str(config)])

        assert result.exit_code == 2
        assert "Invalid TOML" in result.stdout

    def test_unsupported_config_exits_two(self, tmp_path: Path, project_dir: Path):
        config = tmp_path / "validators.json"
        config.write_text("{}")
        result = runner.invoke(app, ["validate", str(project_dir), "-c", str(config)])

        assert result.exit_code == 2
        assert "Unsupported config format" in result.stdout

    def test_all_validators_disabled(self, tmp_path: Path, plugin_module, project_dir: Path):
        config = tmp_path / "validators.toml"
        config.write_text(
            "[[validators]]\n"
            'name = "files"\n'
            f'class = "{plugin_module}:RequiredFilesValidator"\n'
            "enabled = false\n"
        )
        result = runner.invoke(app, ["validate", str(project_dir), "-c", str(config)])

        assert result.exit_code == 0
        assert "No enabled validators" in result.stdout

    def test_missing_project_dir(self, tmp_path: Path):
        result = runner.invoke(app, ["validate", str(tmp_path / "missing")])
        assert result.exit_code == 2

    def test_no_validators(self, tmp_path: Path, project_dir: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["validate", str(project_dir)])
        assert result.exit_code == 0
        assert "No validators configured" in result.stdout


class TestValidatorsCommand:
    """Tests for the validators command."""

    def test_lists_validators(self, tmp_path: Path, plugin_module):
        config = _write_config(tmp_path, plugin_module)
        result = runner.invoke(app, ["validators", "-c", str(config)])

        assert result.exit_code == 0
        assert "files" in result.stdout
        assert "fixme" in result.stdout

    def test_malformed_config_exits_two(self, tmp_path: Path):
        config = tmp_path / "validators.yaml"
        config.write_text("validators: [unclosed\n")
        result = runner.invoke(app, ["validators", "-c", str(config)])

        assert result.exit_code == 2
        assert "Invalid YAML" in result.stdout
