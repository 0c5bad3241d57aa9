"""JSON reporter for pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from linedrift.detector.models import DetectionReport


def to_dict(report: DetectionReport) -> Dict[str, Any]:
    """Convert a DetectionReport to a JSON-serialisable dict."""
    records: List[Dict[str, Any]] = []
    for r in report.records:
        records.append({
            "line": r.line_no,
            "marker": r.marker.value,
            "kind": "flagged" if r.is_flagged else "context",
            "text": r.text,
            **({"ratio": round(r.ratio, 4)} if r.ratio is not None else {}),
        })

    return {
        "version": "1.0",
        "total_lines": report.total_lines,
        "flagged": len(report.flagged),
        "context": len(report.context),
        "records": records,
        "duration_ms": report.duration_ms,
    }


def render(report: DetectionReport) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(report), indent=2)
