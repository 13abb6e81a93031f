"""CLI principal (Typer).

Uso:
    daia-test DE-7 123456789
    daia-test opac-de-7:ppn:123456789
    daia-test --from tests.csv --tap
    daia-test --from https://example.org/tests.csv --coverage
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import click
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from daia_test import __version__
from daia_test.adapters.case_source import InputSourceError
from daia_test.adapters.http_client import build_client
from daia_test.adapters.json_exporter import export_run_json
from daia_test.cli.reporting import format_plan, make_listener
from daia_test.core.config import (
    EXIT_FATAL,
    EXIT_OK,
    EXIT_USAGE,
    AppSettings,
    LogLevel,
    normalize_base_url,
)
from daia_test.core.domain.models import TestCase, TestRun
from daia_test.core.services.runner import RunRequest, run_checks
from daia_test.logging_setup import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Check DAIA availability responses against expected test cases.",
)

_stderr = Console(stderr=True)


def _usage_error(ctx: typer.Context, message: str) -> typer.Exit:
    _stderr.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
    typer.echo(ctx.get_usage(), err=True)
    return typer.Exit(code=EXIT_USAGE)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"daia-test {__version__}")
        raise typer.Exit()


@app.command()
def check(
    ctx: typer.Context,
    identifiers: Optional[List[str]] = typer.Argument(
        None,
        metavar="[ISIL PPN | FULL_ID]",
        help="ISIL and PPN of a single test case, or one full identifier.",
        show_default=False,
    ),
    base: Optional[str] = typer.Option(None, "--base", help="DAIA base URL."),
    source: Optional[str] = typer.Option(
        None,
        "--from",
        help="CSV file or URL with test cases (first line is a header).",
    ),
    coverage: bool = typer.Option(
        False,
        "--coverage",
        help="Report registry databases without any test case (needs --from).",
    ),
    tap: bool = typer.Option(False, "--tap", help="Print every assertion and a summary line."),
    code: Optional[int] = typer.Option(
        None,
        "--code",
        min=0,
        max=255,
        help="Exit code if any assertion fails (0 disables). Default: 2.",
    ),
    registry: Optional[str] = typer.Option(
        None,
        "--registry",
        help="JSON-LD registry of databases used by --coverage.",
    ),
    json_output: Optional[Path] = typer.Option(
        None,
        "--json-output",
        help="Also write all results as JSON to this path.",
    ),
    log_level: Optional[LogLevel] = typer.Option(
        None,
        "--log-level",
        case_sensitive=False,
        help="Logging level (stderr).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Query a DAIA server for each test case and check the reported availability."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _stderr.print(f"[red]Error:[/red] invalid configuration: {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=EXIT_FATAL)
    configure_logging(log_level or settings.log_level)

    identifiers = identifiers or []
    if len(identifiers) > 2 and not coverage:
        raise _usage_error(ctx, "expected ISIL PPN or a single FULL_ID")
    if coverage and not source:
        raise _usage_error(ctx, "--coverage requires --from")
    if not identifiers and not source:
        raise _usage_error(ctx, "no test case given")

    case: TestCase | None = None
    if coverage:
        if identifiers:
            logger.warning("--coverage ignores direct arguments %s", " ".join(identifiers))
    elif identifiers:
        if len(identifiers) == 2:
            case = TestCase(isil=identifiers[0], ppn=identifiers[1])
        else:
            case = TestCase(full_id=identifiers[0])
        if source:
            logger.warning("direct test case given, ignoring --from %s", source)
            source = None

    request = RunRequest(
        base_url=normalize_base_url(base) if base else settings.base_url,
        registry_url=registry or settings.registry_url,
        source=source,
        case=case,
        coverage=coverage,
        delay=settings.request_delay_seconds,
    )

    test_run = TestRun(listener=make_listener(typer.echo, tap=tap))
    try:
        with build_client(settings) as client:
            run_checks(request, client, test_run)
    except InputSourceError as exc:
        _stderr.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=EXIT_FATAL)

    if tap:
        typer.echo(format_plan(test_run))

    if json_output is not None:
        out = export_run_json(run=test_run, output_path=json_output)
        logger.info("results written to %s", out)

    failure_code = settings.failure_exit_code if code is None else code
    if not test_run.passed and failure_code:
        raise typer.Exit(code=failure_code)


def run() -> None:
    """Entry point del script de consola.

    Ejecuta la app en modo no-standalone para mapear los errores de uso
    de click (opción desconocida, valor inválido) al código reservado.
    """

    try:
        result = app(standalone_mode=False)
    except click.UsageError as exc:
        exc.show()
        sys.exit(EXIT_USAGE)
    except click.ClickException as exc:
        exc.show()
        sys.exit(EXIT_FATAL)
    except click.Abort:
        _stderr.print("Aborted.")
        sys.exit(EXIT_FATAL)
    sys.exit(result if isinstance(result, int) else EXIT_OK)
