"""Change detector — compares each line with its predecessor and manages
before/after context.

Per line, in order: reduce → compare → flush/emit → update previous →
buffer if not emitted. All state lives on one ``ChangeDetector`` instance.
"""

from __future__ import annotations

import logging
import time
from typing import Iterable, Iterator, List, Optional, Union

from linedrift.detector.models import (
    DetectionReport,
    DetectorSettings,
    InputLine,
    LineRecord,
    Marker,
    Summary,
)
from linedrift.detector.ring import BeforeBuffer
from linedrift.errors import ConfigError, InputError
from linedrift.extract.reducer import reduce

log = logging.getLogger(__name__)


class DetectError(Exception):
    """Raised on an internal detector failure."""


def mismatch_ratio(previous: str, current: str) -> Optional[float]:
    """Fraction of positions that differ, over the longer vector.

    A position past the end of the shorter vector counts as a mismatch.
    Returns None when both vectors are empty.
    """
    max_len = max(len(previous), len(current))
    if max_len == 0:
        return None
    shared = min(len(previous), len(current))
    mismatch = max_len - shared
    mismatch += sum(1 for a, b in zip(previous, current) if a != b)
    return mismatch / max_len


class ChangeDetector:
    """Stateful one-line-lookback filter."""

    def __init__(self, settings: DetectorSettings) -> None:
        self.settings = settings
        self._previous = ""
        self._before: BeforeBuffer[InputLine] = BeforeBuffer(settings.before)
        self._after_remaining = 0
        self._lines_read = 0

    @property
    def lines_read(self) -> int:
        return self._lines_read

    def feed(self, line_no: int, text: str) -> List[LineRecord]:
        """Process one line; return what it causes to be emitted, in order."""
        self._lines_read += 1
        vector = reduce(text, self.settings.mode)
        ratio = mismatch_ratio(self._previous, vector)
        changed = ratio is not None and ratio > self.settings.threshold

        emitted: List[LineRecord] = []
        if changed:
            for held in self._before.drain():
                emitted.append(LineRecord(held.line_no, Marker.CONTEXT, held.text))
            emitted.append(LineRecord(line_no, Marker.FLAGGED, text, ratio))
            self._after_remaining = self.settings.after
            log.debug("line %d flagged (ratio %.3f)", line_no, ratio)
        elif self._after_remaining > 0:
            emitted.append(LineRecord(line_no, Marker.CONTEXT, text))
            self._after_remaining -= 1

        self._previous = vector

        if not emitted:
            self._before.push(InputLine(line_no, text))
        return emitted

    def finish(self) -> Summary:
        """End of stream. Unflushed before-lines are discarded."""
        self._before.clear()
        return Summary(total_lines=self._lines_read)


def iter_records(
    lines: Iterable[InputLine],
    settings: DetectorSettings,
) -> Iterator[Union[LineRecord, Summary]]:
    """Yield records as soon as they are decided, then the Summary."""
    detector = ChangeDetector(settings)
    try:
        for line in lines:
            yield from detector.feed(line.line_no, line.text)
    except (DetectError, ConfigError, InputError):
        raise
    except Exception as exc:
        raise DetectError(
            f"Internal detector error after {detector.lines_read} lines: {exc}"
        ) from exc
    yield detector.finish()


def run(lines: Iterable[InputLine], settings: DetectorSettings) -> DetectionReport:
    """Run the detector over *lines* and collect a DetectionReport."""
    start = time.perf_counter()
    report = DetectionReport()

    try:
        for item in iter_records(lines, settings):
            if isinstance(item, Summary):
                report.total_lines = item.total_lines
            else:
                report.records.append(item)
    except (DetectError, ConfigError, InputError):
        raise
    except Exception as exc:
        raise DetectError(
            f"Internal detector error after {len(report.records)} records: {exc}"
        ) from exc

    report.duration_ms = round((time.perf_counter() - start) * 1000, 2)
    log.info(
        "%d lines, %d flagged, %d context",
        report.total_lines,
        len(report.flagged),
        len(report.context),
    )
    return report
