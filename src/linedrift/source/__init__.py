"""Input line source."""

from linedrift.errors import InputError
from linedrift.source.reader import iter_lines, number_lines

__all__ = ["InputError", "iter_lines", "number_lines"]
