# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger

from timestamper.core.timestamp import Timestamp
from timestamper.io.writer import TimestampsFileWriter

# 0ms / 1ms / 10ms / 100ms / 1s / 10s
ELAPSED_MILLIS = [0, 1, 10, 100, 1000, 10000]


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture
def elapsed_millis() -> list[int]:
    return list(ELAPSED_MILLIS)


@pytest.fixture
def timestamps(elapsed_millis) -> list[Timestamp]:
    return [Timestamp(millis, 0) for millis in elapsed_millis]


@pytest.fixture
def write_timestamps(tmp_path: Path):
    """
    Factory: write elapsed millis into <tmp_path>/<build_id>/timestamps.

    Usage:
        path = write_timestamps("42", [0, 1, 10])
    """

    def _write(build_id: str, elapsed: list[int]) -> Path:
        path = tmp_path / build_id / "timestamps"
        with TimestampsFileWriter(path) as writer:
            writer.write_all(elapsed)
        return path

    return _write
