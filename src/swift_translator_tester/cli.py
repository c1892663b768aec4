"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
import textwrap
from dataclasses import replace
from pathlib import Path

import click

from swift_translator_tester.case_ingestion import CaseIngestionError, read_test_cases
from swift_translator_tester.configuration import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_SHEET_NAME,
    Configuration,
    ConfigurationError,
    default_configuration,
    load_configuration,
    write_placeholder_configuration,
)
from swift_translator_tester.page_driving import open_translator_page
from swift_translator_tester.run_execution import (
    CaseOutcome,
    WorkbookResultSink,
    run_test_cases,
)
from swift_translator_tester.template_generation import generate_case_workbook


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="swift-translator-tester")
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity for workbook and browser activity",
)
def cli(log_level: str) -> None:
    """Workbook-driven UI tester for the Singlish to Sinhala translator."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML test configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML test configuration with the default settings and guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate-workbook")
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the blank test-case workbook to write",
)
@click.option(
    "--sheet-name",
    default=DEFAULT_SHEET_NAME,
    show_default=True,
    help="Name of the test-case sheet",
)
def generate_workbook(output_path: str, sheet_name: str) -> None:
    """Generate a blank test-case workbook with the required header row."""
    try:
        resolved_output = generate_case_workbook(output_path, sheet_name)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="run")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML test configuration file (defaults are used when omitted)",
)
@click.option(
    "--workbook",
    "workbook_path",
    required=False,
    type=click.Path(path_type=str),
    help="Override the test-case workbook path from the configuration",
)
@click.option(
    "--headed",
    is_flag=True,
    default=False,
    help="Show the browser window instead of running headless.",
)
def run_tests(config_path: str | None, workbook_path: str | None, headed: bool) -> None:
    """Run every workbook test case against the translator and record the results."""
    configuration = _resolve_configuration(config_path, workbook_path, headed)
    workbook = configuration.workbook
    try:
        testcases = read_test_cases(workbook.path, workbook.sheet_name).testcases
    except (CaseIngestionError, OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"Loaded {len(testcases)} test cases from {workbook.path}")

    try:
        with open_translator_page(configuration) as translator:
            summary = run_test_cases(
                testcases,
                translator,
                result_sink=WorkbookResultSink(workbook.path, workbook.sheet_name),
                before_each=translator.navigate,
                pause=translator.page.wait_for_timeout,
                between_tests_ms=configuration.timing.between_tests_ms,
                on_outcome=_echo_outcome,
            )
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise CliError(f"Browser session failed: {exc}") from exc

    click.echo(f"{summary.passed} passed, {summary.failed} failed, {summary.total} total")
    if summary.failed:
        raise CliError(f"{summary.failed} of {summary.total} test cases failed.")


def _resolve_configuration(
    config_path: str | None, workbook_path: str | None, headed: bool
) -> Configuration:
    try:
        configuration = (
            load_configuration(config_path) if config_path else default_configuration()
        )
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    if workbook_path:
        configuration = replace(
            configuration,
            workbook=replace(configuration.workbook, path=Path(workbook_path).resolve()),
        )
    if headed:
        configuration = replace(
            configuration, browser=replace(configuration.browser, headless=False)
        )
    return configuration


def _echo_outcome(outcome: CaseOutcome) -> None:
    line = f"{outcome.tc_id} - {outcome.name}: {outcome.status.value}"
    if not outcome.passed and outcome.error_message:
        line = f"{line} ({outcome.error_message})"
    click.echo(line)
    if not outcome.passed and outcome.diagnostics:
        click.echo(textwrap.indent(outcome.diagnostics.rstrip("\n"), "    "))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
