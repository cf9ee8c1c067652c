# timestamper/core/__init__.py
from .timestamp import Timestamp, TimestampsReader
from .precision import DEFAULT_PRECISION, resolve_precision
from .output import render, render_lines, write

__all__ = [
    "Timestamp",
    "TimestampsReader",
    "DEFAULT_PRECISION",
    "resolve_precision",
    "render",
    "render_lines",
    "write",
]
