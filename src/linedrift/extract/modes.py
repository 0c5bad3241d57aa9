"""Extraction modes — exactly one is active per run."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

from linedrift.errors import (
    ConflictingExtractionModes,
    InvalidCharSpec,
    InvalidFieldSpec,
    InvalidOffset,
)
from linedrift.extract.indexspec import IndexSpec

DEFAULT_DELIMITER = r"\s+"


@dataclass(frozen=True)
class WholeLine:
    """Compare the raw line as-is."""


@dataclass(frozen=True)
class Offset:
    """Drop the first *count* characters."""

    count: int


@dataclass(frozen=True)
class CharList:
    """Select/reorder characters, after dropping *offset* leading ones."""

    spec: IndexSpec
    offset: int = 0


@dataclass(frozen=True)
class FieldList:
    """Split on *delimiter*, select/reorder fields, join them back."""

    spec: IndexSpec
    delimiter: re.Pattern[str]


ExtractionMode = Union[WholeLine, Offset, CharList, FieldList]


def parse_offset(value: object) -> int:
    """Coerce *value* to a non-negative int or raise InvalidOffset."""
    if isinstance(value, bool):
        raise InvalidOffset(f"offset must be a non-negative integer, got {value!r}")
    if isinstance(value, int):
        n = value
    else:
        text = str(value).strip()
        if not text.isdigit():
            raise InvalidOffset(f"offset must be a non-negative integer, got {value!r}")
        n = int(text)
    if n < 0:
        raise InvalidOffset(f"offset must be a non-negative integer, got {value!r}")
    return n


def compile_delimiter(pattern: Optional[str]) -> re.Pattern[str]:
    try:
        return re.compile(pattern or DEFAULT_DELIMITER)
    except re.error as exc:
        raise InvalidFieldSpec(f"invalid delimiter pattern {pattern!r}: {exc}") from exc


def build_mode(
    offset: object = None,
    chars: Optional[str] = None,
    fields: Optional[str] = None,
    delimiter: Optional[str] = None,
) -> ExtractionMode:
    """Validate the raw extraction options and assemble one mode.

    Offset and chars compose (offset runs first). Fields is terminal and
    conflicts with either of the others.
    """
    if fields is not None:
        if offset is not None or chars is not None:
            other = "offset" if offset is not None else "chars"
            raise ConflictingExtractionModes(
                f"field selection cannot be combined with {other}"
            )
        spec = IndexSpec.parse(fields, error=InvalidFieldSpec)
        return FieldList(spec=spec, delimiter=compile_delimiter(delimiter))

    count = parse_offset(offset) if offset is not None else 0

    if chars is not None:
        return CharList(spec=IndexSpec.parse(chars, error=InvalidCharSpec), offset=count)
    if offset is not None:
        return Offset(count)
    return WholeLine()


def describe(mode: ExtractionMode) -> str:
    """Short human description, used in verbose output."""
    if isinstance(mode, Offset):
        return f"offset {mode.count}"
    if isinstance(mode, CharList):
        if mode.offset:
            return f"chars {mode.spec} after offset {mode.offset}"
        return f"chars {mode.spec}"
    if isinstance(mode, FieldList):
        return f"fields {mode.spec} split on /{mode.delimiter.pattern}/"
    return "whole line"
