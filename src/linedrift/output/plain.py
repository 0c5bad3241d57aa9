"""Plain streaming reporter — ``<n><marker>\\t<text>`` per line."""

from __future__ import annotations

from typing import Iterable, TextIO, Union

from linedrift.detector.models import LineRecord, Summary


def format_record(record: LineRecord) -> str:
    return f"{record.line_no}{record.marker.value}\t{record.text}"


def format_summary(summary: Summary) -> str:
    return f"{summary.total_lines} lines processed"


def stream(
    items: Iterable[Union[LineRecord, Summary]],
    out: TextIO,
    *,
    show_summary: bool = True,
) -> Summary:
    """Write each item to *out* as it arrives. Returns the final Summary."""
    summary = Summary(total_lines=0)
    for item in items:
        if isinstance(item, Summary):
            summary = item
            if show_summary:
                out.write(format_summary(item) + "\n")
        else:
            out.write(format_record(item) + "\n")
        out.flush()
    return summary
