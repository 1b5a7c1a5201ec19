"""Shared fixtures: a throwaway plug-in module with sample validators."""

from pathlib import Path

import pytest


PLUGIN_MODULE = "vr_sample_validators"

PLUGIN_SOURCE = '''
from validation_report import ProjectValidator, ValidationReport


class RequiredFilesValidator(ProjectValidator):
    """Checks that required files exist."""

    def validate_project(self, project_dir):
        report = ValidationReport()
        required = self.options.get("required", ["README.md"])
        missing = {f"Missing {name}" for name in required if not (project_dir / name).exists()}
        report.add_error_msgs(missing)
        if missing:
            report.add_error_level_info_msg("Add the missing files")
        return report


class FixmeValidator(ProjectValidator):
    """Warns about FIXME markers in text files."""

    def validate_project(self, project_dir):
        report = ValidationReport()
        hits = {
            f"FIXME in {path.name}"
            for path in project_dir.glob("*.txt")
            if "FIXME" in path.read_text()
        }
        report.add_warning_msgs(hits)
        if hits:
            report.add_warn_level_info_msg("Resolve FIXME markers before release")
        return report


class BrokenValidator(ProjectValidator):
    def validate_project(self, project_dir):
        raise RuntimeError("boom")


class BadOptionsValidator(ProjectValidator):
    def initialize(self, options):
        raise ValueError("bad options")

    def validate_project(self, project_dir):
        return ValidationReport()


NOT_A_VALIDATOR = 42

SHARED_FIXME = FixmeValidator()
'''


@pytest.fixture
def plugin_module(tmp_path_factory, monkeypatch) -> str:
    """Make the sample validators importable and return the module name."""
    plugin_dir = tmp_path_factory.mktemp("plugins")
    (plugin_dir / f"{PLUGIN_MODULE}.py").write_text(PLUGIN_SOURCE)
    monkeypatch.syspath_prepend(str(plugin_dir))
    return PLUGIN_MODULE


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project with a README and one FIXME marker."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "README.md").write_text("# demo\n")
    (project / "notes.txt").write_text("FIXME: tidy up\n")
    return project
