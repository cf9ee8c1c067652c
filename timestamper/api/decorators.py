# timestamper/api/decorators.py
from __future__ import annotations

from functools import wraps
from typing import Any, Callable

from flask import jsonify

from timestamper.utils.errors import BuildNotFoundError, CorruptTimestampsError
from timestamper.utils.logger import logs


def handle_build_errors(func: Callable[..., Any]):
    """
    Decorator: convert timestamps lookup/read errors into JSON responses.

    - BuildNotFoundError      → 404 {error, build_id}
    - CorruptTimestampsError  → 500 {error, build_id}
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        # convention: build_id is always a path parameter
        build_id = kwargs.get("build_id")
        try:
            return func(*args, **kwargs)
        except BuildNotFoundError:
            return jsonify({
                "error": "build not found",
                "build_id": build_id,
            }), 404
        except CorruptTimestampsError as e:
            logs.error(f"[API] corrupt timestamps for build {build_id}: {e}")
            return jsonify({
                "error": "corrupt timestamps",
                "build_id": build_id,
            }), 500

    return wrapper
