"""Shared test fixtures — line builders, detector settings, isolated env."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Sequence

import pytest

from linedrift.detector.models import DetectorSettings, InputLine
from linedrift.extract.modes import ExtractionMode, WholeLine

_ENV_VARS = (
    "LINEDRIFT_THRESHOLD",
    "LINEDRIFT_FORMAT",
    "LINEDRIFT_PROFILE",
    "LINEDRIFT_CONTEXT",
    "LINEDRIFT_BEFORE",
    "LINEDRIFT_AFTER",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the developer's LINEDRIFT_* variables out of every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def numbered(texts: Sequence[str]) -> List[InputLine]:
    return [InputLine(line_no=i, text=t) for i, t in enumerate(texts, 1)]


@pytest.fixture
def make_lines() -> Callable[[Sequence[str]], List[InputLine]]:
    return numbered


@pytest.fixture
def make_settings() -> Callable[..., DetectorSettings]:
    def _make(
        threshold: float = 0.5,
        mode: ExtractionMode = WholeLine(),
        before: int = 0,
        after: int = 0,
    ) -> DetectorSettings:
        return DetectorSettings(threshold=threshold, mode=mode, before=before, after=after)

    return _make


@pytest.fixture
def scenario_abc() -> List[str]:
    """Two identical lines then a completely different one."""
    return ["abc", "abc", "xyz"]


@pytest.fixture
def scenario_spike() -> List[str]:
    """A single outlier in a run of identical lines."""
    return ["aaaa", "aaaa", "bbbb", "aaaa", "aaaa"]


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """An empty working directory with no config file."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
