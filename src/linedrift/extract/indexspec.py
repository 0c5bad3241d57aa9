"""Index/range spec parser — ``"1,2,5..8"`` style selectors.

Grammar (whitespace around items is ignored)::

    spec  := item ("," item)*
    item  := INT | [INT] ".." [INT]

Indices are 0-based; negative indices count from the end. A range includes
its start and excludes its stop. An omitted start means 0, an omitted stop
means "to the end of the sequence being indexed".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Type, TypeVar, Union

from linedrift.errors import ConfigError, InvalidCharSpec

T = TypeVar("T")

_INDEX_RE = re.compile(r"^[+-]?\d+$")
_SPAN_RE = re.compile(r"^([+-]?\d+)?\s*\.\.\s*([+-]?\d+)?$")


@dataclass(frozen=True, slots=True)
class Index:
    value: int


@dataclass(frozen=True, slots=True)
class Span:
    start: Optional[int] = None
    stop: Optional[int] = None


Node = Union[Index, Span]


def _resolve(i: int, length: int) -> Optional[int]:
    if i < 0:
        i += length
    if 0 <= i < length:
        return i
    return None


@dataclass(frozen=True)
class IndexSpec:
    """A parsed selector. Parse once, evaluate against any sequence."""

    source: str
    nodes: Tuple[Node, ...]

    @classmethod
    def parse(cls, text: str, error: Type[ConfigError] = InvalidCharSpec) -> "IndexSpec":
        """Parse *text*, raising *error* on anything malformed."""
        if text is None or not str(text).strip():
            raise error("empty index spec")
        nodes: List[Node] = []
        for raw in str(text).split(","):
            item = raw.strip()
            if _INDEX_RE.match(item):
                nodes.append(Index(int(item)))
                continue
            m = _SPAN_RE.match(item)
            if m:
                start = int(m.group(1)) if m.group(1) is not None else None
                stop = int(m.group(2)) if m.group(2) is not None else None
                nodes.append(Span(start, stop))
                continue
            raise error(f"cannot parse {item!r} in index spec {text!r}")
        return cls(source=str(text), nodes=tuple(nodes))

    def indices(self, length: int) -> List[int]:
        """Concrete in-range positions for a sequence of *length*, in spec order."""
        out: List[int] = []
        for node in self.nodes:
            if isinstance(node, Index):
                resolved = _resolve(node.value, length)
                if resolved is not None:
                    out.append(resolved)
            else:
                # bounds normalised like a Python slice
                out.extend(range(*slice(node.start, node.stop).indices(length)))
        return out

    def select(self, items: Sequence[T]) -> List[T]:
        """Pick *items* by this spec; out-of-range positions are dropped."""
        return [items[i] for i in self.indices(len(items))]

    def __str__(self) -> str:
        return self.source
