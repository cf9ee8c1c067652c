# timestamper/io/reader.py
from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, Optional

from timestamper.core.timestamp import Timestamp
from timestamper.io import varint


class _ReaderIterMixin:
    def __iter__(self) -> Iterator[Timestamp]:
        while True:
            timestamp = self.read()
            if timestamp is None:
                return
            yield timestamp


class TimestampsFileReader(_ReaderIterMixin):
    """
    TimestampsFileReader

    职责：
      - 顺序读取 timestamps 文件（每条记录 = 与上一条的毫秒差 varint）
      - 累加为 Timestamp(elapsed_millis, millis_since_previous)
      - 持有文件句柄，close() / with 负责释放
    """

    def __init__(self, path: Path | str):
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(path)

        self.path = path
        self._stream: Optional[BinaryIO] = path.open("rb")
        self._elapsed = 0

    def read(self) -> Optional[Timestamp]:
        if self._stream is None:
            return None

        delta = varint.read(self._stream)
        if delta is None:
            return None

        self._elapsed += delta
        return Timestamp(self._elapsed, delta)

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def __enter__(self) -> "TimestampsFileReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class SequenceReader(_ReaderIterMixin):
    """
    In-memory reader over an iterable of Timestamp.
    """

    def __init__(self, timestamps: Iterable[Timestamp]):
        self._it = iter(timestamps)

    def read(self) -> Optional[Timestamp]:
        return next(self._it, None)

    @classmethod
    def from_millis(cls, elapsed: Iterable[int]) -> "SequenceReader":
        timestamps = []
        previous = 0
        for millis in elapsed:
            timestamps.append(Timestamp(millis, millis - previous))
            previous = millis
        return cls(timestamps)
