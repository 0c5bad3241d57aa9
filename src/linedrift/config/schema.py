"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Union

OutputFormat = Literal["plain", "json", "terminal"]

OUTPUT_FORMATS = ("plain", "json", "terminal")


@dataclass
class DetectConfig:
    threshold: Optional[Union[str, float]] = None  # fraction, or "NN%"
    fail_on_change: bool = False  # exit 1 when any line is flagged


@dataclass
class ExtractConfig:
    offset: Optional[int] = None
    chars: Optional[str] = None
    fields: Optional[str] = None
    delimiter: Optional[str] = None  # regex; whitespace when unset

    def is_set(self) -> bool:
        return any(
            v is not None for v in (self.offset, self.chars, self.fields, self.delimiter)
        )


@dataclass
class ContextConfig:
    context: Optional[int] = None  # sets both sides
    before: Optional[int] = None
    after: Optional[int] = None


@dataclass
class OutputConfig:
    format: OutputFormat = "plain"
    show_summary: bool = True


@dataclass
class LineDriftConfig:
    version: str = "1.0"
    profile: Optional[str] = None
    detect: DetectConfig = field(default_factory=DetectConfig)
    extract: ExtractConfig = field(default_factory=ExtractConfig)
    context: ContextConfig = field(default_factory=ContextConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
