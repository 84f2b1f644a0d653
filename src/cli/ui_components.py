"""Rich components for the CLI."""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import BatchReport, CopyStage


def print_banner(console: Console, *, version: str | None = None) -> None:
    title = Text("CDN Bundle Drop", style="bold cyan")
    subtitle = Text("Package bundles -> versioned CDN drop folder", style="dim")
    parts: list[Text | str] = [title, "\n", subtitle]
    if version:
        parts.extend(["\n", Text(f"v{version}", style="dim")])
    body = Align.center(Text.assemble(*parts), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_report_table(report: BatchReport) -> Table:
    """One row per package, in processing order."""

    table = Table(title=f"CDN drop {report.version}")
    table.add_column("Package", style="cyan", no_wrap=True)
    table.add_column("Stage", style="white")
    table.add_column("Destination", style="magenta")
    table.add_column("Error", style="red")

    for outcome in report.outcomes:
        stage_style = "green" if outcome.stage is CopyStage.REPORTED else "red"
        table.add_row(
            Text(outcome.package.package_name),
            Text(outcome.stage.value, style=stage_style),
            Text(str(outcome.layout.dest_dir)),
            Text(outcome.error or ""),
        )
    return table


def build_summary_text(report: BatchReport) -> Text:
    if not report.outcomes:
        return Text("No package bundles were found.", style="yellow")
    ok = len(report.succeeded)
    failed = len(report.failed)
    text = Text()
    text.append(f"{ok} copied", style="green")
    text.append(", ")
    text.append(f"{failed} failed", style="red" if failed else "dim")
    return text
