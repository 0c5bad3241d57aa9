"""Tests for the plain, JSON and terminal reporters."""

import io
import json

from rich.console import Console

from linedrift.detector.models import DetectionReport, LineRecord, Marker, Summary
from linedrift.output import json_report, plain, terminal


def _make_report(records=None) -> DetectionReport:
    if records is None:
        records = [
            LineRecord(2, Marker.CONTEXT, "abc"),
            LineRecord(3, Marker.FLAGGED, "xyz", 1.0),
            LineRecord(9, Marker.FLAGGED, "[bold]markup[/bold]", 0.5),
        ]
    return DetectionReport(records=records, total_lines=12, duration_ms=1.5)


class TestPlain:
    def test_record_format(self):
        assert plain.format_record(LineRecord(3, Marker.FLAGGED, "xyz")) == "3!\txyz"
        assert plain.format_record(LineRecord(2, Marker.CONTEXT, "a\tb")) == "2.\ta\tb"

    def test_summary_format(self):
        assert plain.format_summary(Summary(3)) == "3 lines processed"

    def test_stream(self):
        out = io.StringIO()
        items = [LineRecord(3, Marker.FLAGGED, "xyz"), Summary(3)]
        summary = plain.stream(items, out)
        assert out.getvalue() == "3!\txyz\n3 lines processed\n"
        assert summary == Summary(3)

    def test_stream_without_summary(self):
        out = io.StringIO()
        plain.stream([LineRecord(1, Marker.FLAGGED, "a"), Summary(1)], out, show_summary=False)
        assert out.getvalue() == "1!\ta\n"

    def test_stream_stops_without_summary_on_error(self):
        def items():
            yield LineRecord(1, Marker.FLAGGED, "a")
            raise OSError("boom")

        out = io.StringIO()
        try:
            plain.stream(items(), out)
        except OSError:
            pass
        assert out.getvalue() == "1!\ta\n"


class TestJsonReport:
    def test_structure(self):
        data = json_report.to_dict(_make_report())
        assert data["total_lines"] == 12
        assert data["flagged"] == 2
        assert data["context"] == 1
        assert len(data["records"]) == 3

    def test_records(self):
        first, second, _ = json_report.to_dict(_make_report())["records"]
        assert first == {"line": 2, "marker": ".", "kind": "context", "text": "abc"}
        assert second["kind"] == "flagged"
        assert second["ratio"] == 1.0

    def test_render_is_valid_json(self):
        parsed = json.loads(json_report.render(_make_report()))
        assert parsed["version"] == "1.0"


class TestTerminal:
    def _render(self, report, **kw) -> str:
        buf = io.StringIO()
        console = Console(file=buf, width=120, color_system=None)
        terminal.render(report, console=console, **kw)
        return buf.getvalue()

    def test_records_and_gap(self):
        text = self._render(_make_report())
        assert "2. abc" in text
        assert "3! xyz" in text
        assert "--" in text
        # record text is never parsed as markup
        assert "[bold]markup[/bold]" in text
        assert "Lines read:" in text

    def test_no_records(self):
        text = self._render(_make_report([]), show_summary=False)
        assert "No changed lines." in text
        assert "Lines read:" not in text
