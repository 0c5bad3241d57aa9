"""Line reduction — extraction modes, index specs, reducer."""

from linedrift.extract.indexspec import IndexSpec
from linedrift.extract.modes import (
    CharList,
    ExtractionMode,
    FieldList,
    Offset,
    WholeLine,
    build_mode,
)
from linedrift.extract.reducer import reduce

__all__ = [
    "CharList",
    "ExtractionMode",
    "FieldList",
    "IndexSpec",
    "Offset",
    "WholeLine",
    "build_mode",
    "reduce",
]
