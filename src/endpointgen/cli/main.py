"""Command line entry point for endpointgen."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from endpointgen.adapters.endpoints_model import decode_model
from endpointgen.cli.ui_components import build_partitions_table
from endpointgen.core.config import AppSettings
from endpointgen.core.errors import CodeGenError
from endpointgen.core.options import DecodeModelOptions
from endpointgen.core.services.codegen_pipeline import code_gen_model, with_options

app = typer.Typer(
    no_args_is_help=True,
    help="Generate Python endpoint tables from an endpoints model document.",
)

# Generated source goes to stdout; diagnostics go to stderr.
_console = Console()
_err_console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _fail(exc: Exception) -> typer.Exit:
    _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    return typer.Exit(1)


@app.command()
def generate(
    model_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Endpoints model document (JSON, version 3).",
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output module (default: stdout)."),
    disable_service_ids: bool = typer.Option(
        False,
        "--disable-service-ids",
        help="Do not generate the service ID constants.",
    ),
    skip_customizations: bool = typer.Option(
        False,
        "--skip-customizations",
        help="Do not apply the post-decode model customizations.",
    ),
    namespace_region_consts: bool = typer.Option(
        False,
        "--namespace-region-consts",
        help="Prefix region constants with their partition symbol.",
    ),
    model_import: Optional[str] = typer.Option(
        None,
        "--model-import",
        help="Module the generated code imports the model types from.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Generate the endpoints module from MODEL_PATH."""

    settings = AppSettings()
    _configure_logging("DEBUG" if verbose else settings.log_level)

    options = settings.codegen_options()
    options.disable_generate_service_ids = options.disable_generate_service_ids or disable_service_ids
    options.namespace_region_consts = options.namespace_region_consts or namespace_region_consts
    if skip_customizations:
        options.decode_model_options.skip_customizations = True
    if model_import:
        options.model_import = model_import

    buffer = io.StringIO()
    try:
        with model_path.open("rb") as model_file:
            resolver = code_gen_model(model_file, buffer, with_options(options))
    except CodeGenError as exc:
        raise _fail(exc) from exc

    if output is None:
        typer.echo(buffer.getvalue(), nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(buffer.getvalue(), encoding="utf-8")
    _err_console.print(f"[green]Wrote[/green] {escape(str(output))} ({len(resolver)} partitions)")


@app.command()
def inspect(
    model_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Endpoints model document (JSON, version 3).",
    ),
    skip_customizations: bool = typer.Option(
        False,
        "--skip-customizations",
        help="Do not apply the post-decode model customizations.",
    ),
) -> None:
    """Show the partitions of MODEL_PATH and the symbols they generate."""

    settings = AppSettings()
    _configure_logging(settings.log_level)

    decode_options = DecodeModelOptions(
        skip_customizations=settings.skip_customizations or skip_customizations,
    )
    try:
        with model_path.open("rb") as model_file:
            resolver = decode_model(model_file, decode_options)
    except CodeGenError as exc:
        raise _fail(exc) from exc

    _console.print(build_partitions_table(resolver))


def run() -> None:
    app()
