"""Detector data models — settings in, records and report out."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from linedrift.extract.modes import ExtractionMode, WholeLine


class Marker(str, Enum):
    FLAGGED = "!"
    CONTEXT = "."


@dataclass(frozen=True)
class DetectorSettings:
    """Validated configuration consumed by the change detector."""

    threshold: float
    mode: ExtractionMode = field(default_factory=WholeLine)
    before: int = 0
    after: int = 0


@dataclass(frozen=True, slots=True)
class InputLine:
    """One raw input line with its global 1-based line number."""

    line_no: int
    text: str


@dataclass(frozen=True, slots=True)
class LineRecord:
    """A line emitted by the detector."""

    line_no: int
    marker: Marker
    text: str
    ratio: Optional[float] = None  # set on flagged lines only

    @property
    def is_flagged(self) -> bool:
        return self.marker is Marker.FLAGGED


@dataclass(frozen=True, slots=True)
class Summary:
    total_lines: int


@dataclass
class DetectionReport:
    """Complete result of a detection run."""

    records: List[LineRecord] = field(default_factory=list)
    total_lines: int = 0
    duration_ms: float = 0.0

    @property
    def flagged(self) -> List[LineRecord]:
        return [r for r in self.records if r.is_flagged]

    @property
    def context(self) -> List[LineRecord]:
        return [r for r in self.records if not r.is_flagged]

    @property
    def changed(self) -> bool:
        return any(r.is_flagged for r in self.records)
