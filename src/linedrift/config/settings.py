"""Turn a loaded config into validated detector settings."""

from __future__ import annotations

from typing import Optional, Tuple, Union

from linedrift.config.schema import LineDriftConfig
from linedrift.detector.models import DetectorSettings
from linedrift.errors import ConfigError, InvalidThreshold, MissingThreshold
from linedrift.extract.modes import build_mode


def parse_threshold(value: Optional[Union[str, float, int]]) -> float:
    """Normalise a threshold to a fraction.

    ``"25%"`` and bare numbers above 1 are read as percentages, so ``25``,
    ``"25%"`` and ``0.25`` are equivalent.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingThreshold("a threshold is required (e.g. --threshold 0.5 or 50%)")
    if isinstance(value, bool):
        raise InvalidThreshold(f"threshold must be numeric, got {value!r}")

    percent = False
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("%"):
            percent = True
            text = text[:-1].strip()
        try:
            number = float(text)
        except ValueError:
            raise InvalidThreshold(f"threshold must be numeric, got {value!r}") from None
    else:
        number = float(value)

    if number != number:  # NaN
        raise InvalidThreshold(f"threshold must be numeric, got {value!r}")
    if percent or number > 1:
        number /= 100
    if number <= 0:
        raise InvalidThreshold(f"threshold must be greater than 0, got {value!r}")
    return number


def resolve_context(
    context: Optional[int] = None,
    before: Optional[int] = None,
    after: Optional[int] = None,
) -> Tuple[int, int]:
    """Return (before, after): *context* sets both, then each side overrides."""
    lines_before = lines_after = 0
    if context is not None:
        lines_before = lines_after = context
    if before is not None:
        lines_before = before
    if after is not None:
        lines_after = after
    for name, n in (("before", lines_before), ("after", lines_after)):
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ConfigError(f"context {name} must be a non-negative integer, got {n!r}")
    return lines_before, lines_after


def build_settings(cfg: LineDriftConfig) -> DetectorSettings:
    """Validate *cfg* and return the settings the detector consumes."""
    threshold = parse_threshold(cfg.detect.threshold)
    ext = cfg.extract
    mode = build_mode(
        offset=ext.offset,
        chars=ext.chars,
        fields=ext.fields,
        delimiter=ext.delimiter,
    )
    before, after = resolve_context(
        cfg.context.context, cfg.context.before, cfg.context.after
    )
    return DetectorSettings(threshold=threshold, mode=mode, before=before, after=after)
