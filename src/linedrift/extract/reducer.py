"""Line reducer — turn a raw line into the vector that gets compared."""

from __future__ import annotations

from typing import List

from linedrift.extract.modes import CharList, ExtractionMode, FieldList, Offset, WholeLine


def split_fields(raw_line: str, mode: FieldList) -> List[str]:
    """Split *raw_line* on the mode's delimiter, dropping trailing empty fields."""
    fields = mode.delimiter.split(raw_line)
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def reduce(raw_line: str, mode: ExtractionMode) -> str:
    """Return the comparable vector for *raw_line* under *mode*.

    Pure and total: indices or fields that do not exist in this particular
    line contribute nothing rather than failing.
    """
    if isinstance(mode, WholeLine):
        return raw_line
    if isinstance(mode, Offset):
        return raw_line[mode.count:]
    if isinstance(mode, CharList):
        return "".join(mode.spec.select(raw_line[mode.offset:]))
    if isinstance(mode, FieldList):
        return "".join(mode.spec.select(split_fields(raw_line, mode)))
    raise TypeError(f"unknown extraction mode: {mode!r}")
