"""CLI entry point for licence-compliance-checker."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from licence_compliance_checker import __version__
from licence_compliance_checker.checker import ComplianceChecker
from licence_compliance_checker.config import (
    DEFAULT_DETECTOR,
    build_compliance_config,
    load_config,
)
from licence_compliance_checker.constants import EXIT_ERROR, EXIT_ISSUES, EXIT_SUCCESS
from licence_compliance_checker.detection import (
    ExternalLicenceDetector,
    FilesystemLicenceDetector,
    LicenceDetector,
)
from licence_compliance_checker.detection.external import DEFAULT_COMMAND
from licence_compliance_checker.exceptions import LicenceCheckerError
from licence_compliance_checker.log import LOG_LEVELS, configure_logging
from licence_compliance_checker.models.compliance import ComplianceResults
from licence_compliance_checker.output.results_json import ComplianceJsonFormatter
from licence_compliance_checker.output.terminal import TerminalFormatter

logger = logging.getLogger(__name__)

# Module-level console for consistent output
_console = Console()
# Separate console for errors and log records (writes to stderr)
_error_console = Console(stderr=True)


def _split_values(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> list[str]:
    """Accept both repeated options and comma separated values."""
    return [item for value in values for item in value.split(",") if item]


def _parse_overrides(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str]:
    """Parse PROJECT=LICENCE pairs into a mapping."""
    overrides: dict[str, str] = {}
    for value in _split_values(ctx, param, values):
        project, separator, licence = value.partition("=")
        if not separator or not project or not licence:
            raise click.BadParameter(
                f"'{value}' must be formatted as PROJECT=LICENCE"
            )
        overrides[project] = licence
    return overrides


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--restricted-licence",
    "-r",
    "restricted_licences",
    multiple=True,
    callback=_split_values,
    help="Licence that will fail the compliance check if found for a project. "
    "Repeat this option to specify multiple values.",
)
@click.option(
    "--ignore-project",
    "-i",
    "ignored_projects",
    multiple=True,
    callback=_split_values,
    help="Project whose licence will not be checked for compliance. "
    "Repeat this option to specify multiple values.",
)
@click.option(
    "--override-licence",
    "-o",
    "overridden_licences",
    multiple=True,
    callback=_parse_overrides,
    help="Override the licence detected for a project, "
    "e.g. vendor/github.com/spf13/cobra=MIT. "
    "Repeat this option to specify multiple values.",
)
@click.option(
    "--log-level",
    "-L",
    type=click.Choice(list(LOG_LEVELS), case_sensitive=False),
    default=None,
    help="(output) Log level. Logging is disabled when not set.",
)
@click.option(
    "--show-compliance-all",
    "-A",
    "show_all",
    is_flag=True,
    default=False,
    help="(output) Show compliance check results regardless of outcome.",
)
@click.option(
    "--show-compliance-errors",
    "-E",
    "show_errors",
    is_flag=True,
    default=False,
    help="(output) Show compliance check results only in case of errors.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "terminal"], case_sensitive=False),
    default="json",
    help="(output) Format of shown results (default: json).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.option(
    "--detector",
    "detector_name",
    type=click.Choice(["filesystem", "license-detector"]),
    default=None,
    help="Licence detector to use (default: filesystem).",
)
@click.option(
    "--detector-command",
    default=DEFAULT_COMMAND,
    show_default=True,
    help="Executable run by the license-detector detector.",
)
@click.option(
    "--threshold",
    type=click.FloatRange(0.0, 1.0),
    default=None,
    help="Minimum similarity for the filesystem detector to report a licence.",
)
@click.argument("paths", nargs=-1)
def main(
    restricted_licences: list[str],
    ignored_projects: list[str],
    overridden_licences: dict[str, str],
    log_level: Optional[str],
    show_all: bool,
    show_errors: bool,
    output_format: str,
    config_path: Optional[str],
    detector_name: Optional[str],
    detector_command: str,
    threshold: Optional[float],
    paths: tuple[str, ...],
) -> None:
    """Check licences compliance based on list of restricted licences.

    Detects the licence of each project directory in PATHS and fails when
    a project's most probable licence is restricted or when no licence can
    be identified.

    \b
    Examples:
        licence-compliance-checker -r GPL-3.0 -r AGPL-3.0 vendor/*
        licence-compliance-checker -r GPL-3.0 -i vendor/internal -A vendor/*
        licence-compliance-checker -r MIT -o vendor/foo=BSD-3-Clause vendor/foo
        licence-compliance-checker --config .licence-compliance.yaml vendor/*
    """
    configure_logging(log_level, _error_console)

    if not paths:
        raise click.UsageError("requires at least 1 project path (received 0)")

    try:
        file_config = load_config(config_path)
        config = build_compliance_config(
            file_config, restricted_licences, ignored_projects, overridden_licences
        )
        if not config.restricted_licences:
            raise click.UsageError(
                "at least one restricted licence is required: use "
                "--restricted-licence or restricted_licences in the config file"
            )

        detector = _build_detector(
            detector_name or file_config.detector or DEFAULT_DETECTOR,
            detector_command,
            threshold if threshold is not None else file_config.confidence_threshold,
        )

        checker = ComplianceChecker(config, detector)
        logger.info("Validating licence compliance with config: %s", checker.config)
        results = checker.validate(paths)
        logger.debug("Licence compliance results: %s", results)

    except LicenceCheckerError as e:
        logger.error("Error validating licence compliance: %s", e)
        _display_error(e)
        sys.exit(EXIT_ERROR)

    format_value = output_format.lower()
    if results.has_failures:
        if show_errors or show_all:
            _display_results(results, format_value)
        logger.error(
            "Some licences are not compliant and/or cannot be identified: "
            "restricted: %s, unidentifiable: %s",
            [r.project for r in results.restricted],
            [r.project for r in results.unidentifiable],
        )
        sys.exit(EXIT_ISSUES)

    if show_all:
        _display_results(results, format_value)

    logger.info("Licences are compliant")
    sys.exit(EXIT_SUCCESS)


def _build_detector(
    name: str, command: str, threshold: Optional[float]
) -> LicenceDetector:
    """Create the licence detector selected by name.

    Args:
        name: Detector name, "filesystem" or "license-detector".
        command: Executable for the license-detector detector.
        threshold: Optional match threshold for the filesystem detector.

    Returns:
        The licence detector.
    """
    if name == "license-detector":
        return ExternalLicenceDetector(command=command)
    if threshold is not None:
        return FilesystemLicenceDetector(threshold=threshold)
    return FilesystemLicenceDetector()


def _display_results(results: ComplianceResults, format_type: str) -> None:
    """Display compliance results in the specified format.

    Args:
        results: The compliance results to display.
        format_type: Output format (json, terminal).
    """
    if format_type == "terminal":
        TerminalFormatter(console=_console).format_results(results)
        return
    click.echo(ComplianceJsonFormatter().format_results(results))


def _display_error(error: LicenceCheckerError) -> None:
    """Display error message to user on stderr.

    Args:
        error: The exception that occurred.
    """
    error_type = type(error).__name__
    message = f"Error: {error_type}: {escape(str(error))}"
    _error_console.print(f"[red bold]{message}[/red bold]")


if __name__ == "__main__":
    main()
