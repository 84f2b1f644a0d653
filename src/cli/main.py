"""CLI entry point (Typer).

Usage:
- `cdn-bundle-drop`
- `cdn-bundle-drop --debug`
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as dist_version

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from cli.ui_components import build_report_table, build_summary_text, print_banner
from core.config import AppSettings
from core.services.cdn_drop import create_cdn_drop
from core.services.hooks import DropHooks

app = typer.Typer(
    add_completion=False,
    help="Copy package bundles into the versioned CDN drop folder.",
)

_console = Console()


def _tool_version() -> str | None:
    try:
        return dist_version("cdn-bundle-drop")
    except PackageNotFoundError:
        return None


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def build_console_hooks(console: Console) -> DropHooks:
    return DropHooks(
        status=lambda message: console.print(Text(message, style="green")),
        error=lambda message: console.print(Text(message, style="red")),
        debug=lambda label, value: console.print(Text.assemble((label, "yellow"), " ", value)),
    )


@app.command()
def drop(
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Print version and source/destination paths for every package.",
    ),
) -> None:
    """Copy every package bundle into `<destination>/<package>/<version>/`."""

    settings = AppSettings()
    if debug:
        settings = settings.model_copy(update={"debug": True})

    _configure_logging(settings.debug)
    print_banner(_console, version=_tool_version())

    report = create_cdn_drop(settings=settings, hooks=build_console_hooks(_console))

    if report.outcomes:
        _console.print(build_report_table(report))
    _console.print(build_summary_text(report))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
