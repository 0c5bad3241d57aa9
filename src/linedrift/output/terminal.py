"""Rich terminal reporter — coloured markers and a summary block."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.text import Text

from linedrift.detector.models import DetectionReport, LineRecord, Marker

_MARKER_STYLE = {
    Marker.FLAGGED: "bold red",
    Marker.CONTEXT: "dim",
}


def _record_text(record: LineRecord, width: int) -> Text:
    line = Text()
    line.append(str(record.line_no).rjust(width), style="green")
    line.append(record.marker.value, style=_MARKER_STYLE[record.marker])
    line.append(" ")
    line.append(record.text, style=None if record.is_flagged else "dim")
    if record.ratio is not None:
        line.append(f"  ({record.ratio:.0%})", style="yellow")
    return line


def render(
    report: DetectionReport,
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print detection results using Rich."""
    console = console or Console(highlight=False)

    if report.records:
        width = len(str(report.records[-1].line_no))
        previous: Optional[int] = None
        for record in report.records:
            # gap between non-adjacent groups, like grep's "--"
            if previous is not None and record.line_no != previous + 1:
                console.print(Text("--", style="dim"))
            console.print(_record_text(record, width))
            previous = record.line_no
    else:
        console.print("[bold green]No changed lines.[/bold green]")

    if show_summary:
        _print_summary(console, report)


def _print_summary(console: Console, report: DetectionReport) -> None:
    console.print()
    console.print(f"[dim]Lines read:[/dim]  {report.total_lines}")
    console.print(f"[dim]Flagged:[/dim]     {len(report.flagged)}")
    console.print(f"[dim]Context:[/dim]     {len(report.context)}")
    console.print(f"[dim]Duration:[/dim]    {report.duration_ms:.0f}ms")
