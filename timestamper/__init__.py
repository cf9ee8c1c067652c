#!filepath: timestamper/__init__.py

__version__ = "0.1.0"

from .utils.logger import Logging, logs
from .config.app_config import AppConfig
from .core.timestamp import Timestamp
from .core.precision import resolve_precision
from .core.output import render, write

__all__ = [
    "__version__",
    "logs", "Logging",
    "AppConfig",
    "Timestamp",
    "resolve_precision",
    "render",
    "write",
]
