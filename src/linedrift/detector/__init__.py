"""Change detection — ring buffer, detector engine, records."""

from linedrift.detector.engine import (
    ChangeDetector,
    DetectError,
    iter_records,
    mismatch_ratio,
    run,
)
from linedrift.detector.models import (
    DetectionReport,
    DetectorSettings,
    InputLine,
    LineRecord,
    Marker,
    Summary,
)
from linedrift.detector.ring import BeforeBuffer

__all__ = [
    "BeforeBuffer",
    "ChangeDetector",
    "DetectError",
    "DetectionReport",
    "DetectorSettings",
    "InputLine",
    "LineRecord",
    "Marker",
    "Summary",
    "iter_records",
    "mismatch_ratio",
    "run",
]
