"""Profile data model — a named bundle of detection defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from linedrift.config.schema import ExtractConfig, LineDriftConfig


@dataclass
class Profile:
    """A named preset.

    Any field left as None leaves the underlying config untouched. If the
    profile sets any extraction option, it replaces the whole extraction
    section so layered options can never conflict.
    """

    id: str
    description: str = ""
    threshold: Optional[Union[str, float]] = None
    offset: Optional[int] = None
    chars: Optional[str] = None
    fields: Optional[str] = None
    delimiter: Optional[str] = None
    context: Optional[int] = None
    before: Optional[int] = None
    after: Optional[int] = None

    @property
    def extract(self) -> ExtractConfig:
        return ExtractConfig(
            offset=self.offset,
            chars=self.chars,
            fields=self.fields,
            delimiter=self.delimiter,
        )

    def apply(self, cfg: LineDriftConfig) -> None:
        """Layer this profile onto *cfg* in place."""
        if self.threshold is not None:
            cfg.detect.threshold = self.threshold
        if self.extract.is_set():
            cfg.extract = self.extract
        if self.context is not None:
            cfg.context.context = self.context
        if self.before is not None:
            cfg.context.before = self.before
        if self.after is not None:
            cfg.context.after = self.after

    @classmethod
    def from_dict(cls, entry: Dict[str, Any]) -> "Profile":
        return cls(
            id=entry["id"],
            description=entry.get("description", ""),
            threshold=entry.get("threshold"),
            offset=entry.get("offset"),
            chars=entry.get("chars"),
            fields=entry.get("fields"),
            delimiter=entry.get("delimiter"),
            context=entry.get("context"),
            before=entry.get("before"),
            after=entry.get("after"),
        )
