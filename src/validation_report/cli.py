"""
validation-report CLI - run project validators and report one verdict.

Commands:
    validate      Run the configured validators against a project
    validators    List the configured validators
    decode        Decode a tagged info message
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

app = typer.Typer(
    name="validation-report",
    help="Aggregate project validator results into one verdict",
    no_args_is_help=True,
)

console = Console()


def _load_manager(config_path: Optional[Path]):
    from validation_report.config import ValidatorConfig
    from validation_report.errors import ConfigError, ValidatorManagerError
    from validation_report.validator import ValidatorManager

    try:
        config = ValidatorConfig.load(config_path)
        manager = ValidatorManager(config)
        manager.load_validators()
    except (ConfigError, ValidatorManagerError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(2)

    return config, manager


@app.command()
def validate(
    project_dir: Path = typer.Argument(..., help="Project directory to validate"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Validator config (.toml or .yaml)"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Fail on warnings"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the report as TOML"),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase log verbosity"),
) -> None:
    """
    Run the configured validators against a project.

    Each validator reports warnings, errors and info messages. The
    aggregate verdict is ERROR if any validator reported an error, WARN
    if any reported a warning, PASS otherwise.

    Example:
        validation-report validate ./my-project -c validators.toml
    """
    from validation_report.log import configure_logging
    from validation_report.validator import ValidationStatus, format_results, merge_reports, write_report

    configure_logging(verbose)

    if not project_dir.is_dir():
        console.print(f"[red]Project directory not found: {escape(str(project_dir))}[/red]")
        raise typer.Exit(2)

    config, manager = _load_manager(config_path)

    if not manager.validators:
        if config.validators:
            console.print("[yellow]No enabled validators[/yellow]")
        else:
            console.print("[yellow]No validators configured[/yellow]")
        return

    console.print(f"[bold]Validating[/bold] {escape(str(project_dir))}")

    reports = manager.validate(project_dir)
    format_results(reports, console)

    if output is not None:
        write_report(reports, output)
        console.print(f"[green]Report written to[/green] {escape(str(output))}")

    status = merge_reports(reports.values()).status
    if status is ValidationStatus.ERROR or ((strict or config.strict) and status is ValidationStatus.WARN):
        raise typer.Exit(1)


@app.command()
def validators(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Validator config (.toml or .yaml)"),
) -> None:
    """List the configured validators."""
    config, manager = _load_manager(config_path)

    if not config.validators:
        console.print("[yellow]No validators configured[/yellow]")
        return

    table = Table(title="Validators")
    table.add_column("Name")
    table.add_column("Class")
    table.add_column("Enabled")
    table.add_column("Info")

    for spec in config.validators:
        validator = manager.validators.get(spec.name)
        info = validator.validator_info() if validator else ""
        table.add_row(spec.name, spec.path, "yes" if spec.enabled else "no", info)

    console.print(table)


@app.command()
def decode(
    message: str = typer.Argument(..., help="Tagged info message, e.g. WARNcheck logs"),
) -> None:
    """Decode a tagged info message into its level and text."""
    from validation_report.validator import ValidationReport

    level = ValidationReport.get_info_msg_level(message)
    text = ValidationReport.get_info_msg(message)
    console.print(f"{level.value}: {escape(text)}", highlight=False)


def _version_callback(value: bool) -> None:
    if value:
        from validation_report import __version__
        console.print(f"validation-report {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """validation-report: aggregate project validator results."""


if __name__ == "__main__":
    app()
