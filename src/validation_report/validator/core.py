"""
Core validation logic: the validator contract and the manager that runs them.
"""

import importlib
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import tomli_w
from rich.console import Console
from rich.markup import escape

from validation_report.config import ValidatorConfig, ValidatorSpec
from validation_report.errors import ValidatorManagerError
from validation_report.validator.report import ValidationReport, merge_reports
from validation_report.validator.types import ValidationStatus


logger = logging.getLogger(__name__)


class ProjectValidator(ABC):
    """
    A check run against a project directory.

    Subclasses implement validate_project() and report their findings
    through a ValidationReport.
    """

    name: str = ""

    def __init__(self) -> None:
        self.options: dict[str, Any] = {}

    def initialize(self, options: dict[str, Any]) -> None:
        """Receive the options configured for this validator."""
        self.options = dict(options)

    @abstractmethod
    def validate_project(self, project_dir: Path) -> ValidationReport:
        ...

    def validator_info(self) -> str:
        """Human-readable description of what this validator checks."""
        doc = (type(self).__doc__ or "").strip()
        if doc:
            return doc.splitlines()[0]
        return self.name or type(self).__name__


def load_validator(spec: ValidatorSpec) -> ProjectValidator:
    """
    Import, instantiate and initialize a configured validator.

    Args:
        spec: Validator entry from the config

    Returns:
        The initialized validator

    Raises:
        ValidatorManagerError: If any step fails
    """
    module_name, sep, attr = spec.path.partition(":")
    if not sep or not module_name or not attr:
        raise ValidatorManagerError(spec.name, f"Invalid validator path '{spec.path}', expected 'module:Attribute'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValidatorManagerError(spec.name, f"Cannot import module '{module_name}': {e}") from e

    try:
        factory = getattr(module, attr)
    except AttributeError as e:
        raise ValidatorManagerError(spec.name, f"Module '{module_name}' has no attribute '{attr}'") from e

    # Each config entry gets its own object; shared module-level instances are refused
    if not callable(factory) or isinstance(factory, ProjectValidator):
        raise ValidatorManagerError(spec.name, f"'{spec.path}' is not a validator class or factory")

    try:
        validator = factory()
    except Exception as e:
        raise ValidatorManagerError(spec.name, f"Cannot instantiate '{spec.path}': {e}") from e

    if not isinstance(validator, ProjectValidator):
        raise ValidatorManagerError(spec.name, f"'{spec.path}' is not a ProjectValidator")

    if not validator.name:
        validator.name = spec.name

    try:
        validator.initialize(spec.options)
    except Exception as e:
        raise ValidatorManagerError(spec.name, f"Initialization failed: {e}") from e

    return validator


class ValidatorManager:
    """
    Loads the configured validators and runs them against a project.

    Validators run one after another; each gets its own report.
    """

    def __init__(self, config: ValidatorConfig):
        self.config = config
        self._validators: dict[str, ProjectValidator] = {}

    def load_validators(self) -> None:
        """Load every enabled validator, in configuration order."""
        self._validators = {}
        for spec in self.config.validators:
            if not spec.enabled:
                logger.debug("Skipping disabled validator %s", spec.name)
                continue
            self._validators[spec.name] = load_validator(spec)
            logger.info("Loaded validator %s from %s", spec.name, spec.path)

    @property
    def validators(self) -> Mapping[str, ProjectValidator]:
        return MappingProxyType(self._validators)

    def validators_info(self) -> list[str]:
        return [f"{name}: {v.validator_info()}" for name, v in self._validators.items()]

    def validate(self, project_dir: Path) -> dict[str, ValidationReport]:
        """
        Run all loaded validators.

        Args:
            project_dir: Directory of the project to validate

        Returns:
            One report per validator, keyed by configured name
        """
        reports: dict[str, ValidationReport] = {}
        for name, validator in self._validators.items():
            try:
                report = validator.validate_project(project_dir)
            except Exception as e:
                logger.exception("Validator %s raised while validating %s", name, project_dir)
                report = ValidationReport()
                report.add_error_msgs({f"Validator {name} failed: {e}"})

            if report is None:
                report = ValidationReport()
            logger.debug("Validator %s finished with %s", name, report.status.value)
            reports[name] = report
        return reports


_STYLES = {
    ValidationStatus.PASS: ("[green]✓[/green]", "green"),
    ValidationStatus.WARN: ("[yellow]⚠[/yellow]", "yellow"),
    ValidationStatus.ERROR: ("[red]✗[/red]", "red"),
}


def format_results(reports: Mapping[str, ValidationReport], console: Console) -> None:
    """Format validation reports for display."""
    for name, report in reports.items():
        icon, style = _STYLES[report.status]
        console.print(f"{icon} [bold]{escape(name)}[/bold] [{style}]{report.status.value}[/{style}]")

        for msg in sorted(report.error_msgs):
            console.print(f"  [red]error:[/red] {escape(msg)}", highlight=False)
        for msg in sorted(report.warning_msgs):
            console.print(f"  [yellow]warning:[/yellow] {escape(msg)}", highlight=False)
        for entry in report.info_entries():
            entry_style = _STYLES[entry.level][1]
            console.print(f"  [{entry_style}]→[/{entry_style}] [dim]{escape(entry.text)}[/dim]", highlight=False)

    # Summary
    merged = merge_reports(reports.values())
    errors = len(merged.error_msgs)
    warnings = len(merged.warning_msgs)

    if merged.status is ValidationStatus.ERROR:
        console.print(f"\n[red]ERROR: {errors} error(s), {warnings} warning(s)[/red]")
    elif merged.status is ValidationStatus.WARN:
        console.print(f"\n[yellow]WARN: {warnings} warning(s)[/yellow]")
    else:
        console.print("\n[green]PASS: all checks passed[/green]")


def write_report(reports: Mapping[str, ValidationReport], path: Path) -> None:
    """
    Export reports as TOML.

    The top-level status is the merged verdict; each validator gets its own
    table under [validators].
    """
    merged = merge_reports(reports.values())
    data = {
        "status": merged.status.value,
        "validators": {name: report.to_dict() for name, report in reports.items()},
    }

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        tomli_w.dump(data, f)
