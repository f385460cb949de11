"""
Analyze CLI Command

Runs the full pipeline on a Google Takeout export and prints the
statistics: a summary panel, the top channels, the hourly histogram and
the monthly series.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from ...config.settings import Settings
from ...exceptions import WatchlensError
from ...models import AnalysisResult
from ...services import Dashboard, TakeoutAnalysisService, open_archive
from ..charts import RichChartSink
from ..errors import (
    display_settings_error,
    display_success_panel,
    display_watchlens_error,
)

console = Console()


def analyze_takeout(
    takeout_path: Path = typer.Argument(
        ..., help="Takeout .zip archive or extracted Takeout folder"
    ),
    timezone: Optional[str] = typer.Option(
        None,
        "--timezone",
        "-z",
        help="IANA time zone for hour/day/month bucketing (default: local)",
    ),
    top: Optional[int] = typer.Option(
        None, "--top", "-n", min=1, help="Number of channels in the ranking"
    ),
    save_report: bool = typer.Option(
        False, "--save", "-s", help="Save detailed report to a JSON file"
    ),
) -> None:
    """
    📊 Analyze your YouTube watch history from a Takeout export.

    Examples:
        watchlens analyze takeout-20240105T101532Z-001.zip
        watchlens analyze ./Takeout --timezone Europe/Berlin --top 20
    """
    overrides: Dict[str, Any] = {}
    if timezone is not None:
        overrides["timezone"] = timezone
    if top is not None:
        overrides["top_channels_limit"] = top

    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        raise typer.Exit(display_settings_error(e))

    try:
        result = _run_analysis(takeout_path, settings)
    except WatchlensError as e:
        raise typer.Exit(display_watchlens_error(e))

    _display_summary(result)
    Dashboard(RichChartSink(console)).show(result.aggregates)

    if save_report:
        report_path = _save_report(result, settings)
        display_success_panel(
            f"Detailed report saved to: {report_path}", title="💾 Report"
        )


def _run_analysis(takeout_path: Path, settings: Settings) -> AnalysisResult:
    """Open the export and run one analysis pass behind a spinner."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("📦 Reading Takeout archive...", total=None)

        with open_archive(takeout_path) as reader:
            progress.update(task, description="🔬 Parsing and analyzing...")
            return TakeoutAnalysisService(settings).analyze(reader)


def _display_summary(result: AnalysisResult) -> None:
    """Display the headline numbers and the parse report."""
    aggregates = result.aggregates
    report = result.parse_report

    date_line = "   • Date Range: n/a"
    if aggregates.date_range is not None:
        date_range = aggregates.date_range
        date_line = (
            f"   • Date Range: {date_range.start:%Y-%m-%d} → "
            f"{date_range.end:%Y-%m-%d} ({date_range.total_days:,} days)"
        )

    stats_text = f"""
📊 Data Overview:
   • Videos Watched: {aggregates.total_videos:,}
   • Subscriptions: {aggregates.total_subscriptions:,}
   • Unique Channels: {aggregates.unique_channels:,}
   • Most Active Day: {aggregates.most_active_day or "N/A"}
{date_line}

🧹 Parsing:
   • Entries Found: {report.candidates:,}
   • Entries Skipped: {report.total_rejected:,}
   • Time Zone: {aggregates.timezone}
    """

    console.print(
        Panel(stats_text.strip(), title="📈 Watch History Summary", border_style="blue")
    )

    if report.rejected:
        table = Table(
            title="🧹 Skipped Entries", show_header=True, header_style="bold yellow"
        )
        table.add_column("Reason", style="cyan")
        table.add_column("Entries", style="yellow", justify="right")
        for reason, total in sorted(
            report.rejected.items(), key=lambda item: item[1], reverse=True
        ):
            table.add_row(reason.value.replace("_", " "), f"{total:,}")
        console.print(table)


def _save_report(result: AnalysisResult, settings: Settings) -> Path:
    """Write aggregates and the parse report as JSON under the export dir."""
    settings.create_directories()
    stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    report_path = settings.export_dir / f"watchlens_report_{stamp}.json"
    payload = result.model_dump_json(
        include={"aggregates", "parse_report"}, indent=2
    )
    report_path.write_text(payload, encoding="utf-8")
    return report_path
