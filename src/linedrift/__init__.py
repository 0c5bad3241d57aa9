"""linedrift — flag lines that drift from the line before them."""

__version__ = "0.3.0"
