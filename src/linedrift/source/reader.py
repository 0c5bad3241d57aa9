"""Input line source — files and stdin, numbered globally across inputs."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO, Iterable, Iterator, Optional, Sequence

from linedrift.detector.models import InputLine
from linedrift.errors import InputError

log = logging.getLogger(__name__)

STDIN = "-"


def _chomp(raw: str) -> str:
    """Strip one trailing LF or CRLF."""
    if raw.endswith("\n"):
        raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
    return raw


def _stdin_text() -> IO[str]:
    """Switch stdin in place to UTF-8 with replacement, LF-only newlines."""
    reconfigure = getattr(sys.stdin, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding="utf-8", errors="replace", newline="\n")
    return sys.stdin


def number_lines(streams: Iterable[IO[str]], start: int = 1) -> Iterator[InputLine]:
    """Yield InputLines from already-open text *streams*, one global counter."""
    line_no = start
    for stream in streams:
        for raw in stream:
            yield InputLine(line_no=line_no, text=_chomp(raw))
            line_no += 1


def _open_all(paths: Sequence[str]) -> Iterator[IO[str]]:
    for name in paths:
        if name == STDIN:
            log.debug("reading stdin")
            yield _stdin_text()
            continue
        path = Path(name)
        try:
            handle = open(path, encoding="utf-8", errors="replace", newline="\n")
        except FileNotFoundError as exc:
            raise InputError(f"No such file: {name}") from exc
        except OSError as exc:
            raise InputError(f"Cannot read {name}: {exc.strerror or exc}") from exc
        log.debug("reading %s", path)
        with handle:
            yield handle


def iter_lines(paths: Optional[Sequence[str]] = None) -> Iterator[InputLine]:
    """Yield every line of *paths* in order; no paths means stdin."""
    names = list(paths) if paths else [STDIN]
    try:
        yield from number_lines(_open_all(names))
    except UnicodeError as exc:
        raise InputError(f"Cannot decode input: {exc}") from exc
    except OSError as exc:
        raise InputError(f"Read failed: {exc}") from exc
