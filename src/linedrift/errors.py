"""Error hierarchy.

Every error here is terminal: the run aborts, nothing is retried, and no
summary line is produced.
"""

from __future__ import annotations


class ConfigError(Exception):
    """Raised when config is malformed, unreadable or inconsistent."""


class MissingThreshold(ConfigError):
    """No threshold was configured anywhere."""


class InvalidThreshold(ConfigError):
    """Threshold is non-numeric or not greater than zero."""


class ConflictingExtractionModes(ConfigError):
    """Field extraction combined with an offset or a character list."""


class InvalidOffset(ConfigError):
    """Offset is not a non-negative integer."""


class InvalidCharSpec(ConfigError):
    """Character index spec could not be parsed."""


class InvalidFieldSpec(ConfigError):
    """Field index spec or delimiter pattern could not be parsed."""


class InputError(Exception):
    """Raised when an input source cannot be opened or read."""
