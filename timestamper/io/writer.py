# timestamper/io/writer.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable

from timestamper.io import varint
from timestamper.io.reader import TimestampsFileReader


class TimestampsFileWriter:
    """
    追加写 timestamps 文件。

    write(elapsed_millis) 接收距参考点的毫秒数，落盘为与上一条的差值；
    已有文件时从最后一条记录继续累加。
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._last = self._last_elapsed(self.path)
        self._stream = self.path.open("ab")

    @staticmethod
    def _last_elapsed(path: Path) -> int:
        if not path.exists():
            return 0

        last = 0
        with TimestampsFileReader(path) as reader:
            for timestamp in reader:
                last = timestamp.elapsed_millis
        return last

    def write(self, elapsed_millis: int) -> None:
        if elapsed_millis < self._last:
            raise ValueError(
                f"elapsed time goes backwards: {elapsed_millis} < {self._last}"
            )
        self._stream.write(varint.encode(elapsed_millis - self._last))
        self._last = elapsed_millis

    def write_all(self, elapsed: Iterable[int]) -> None:
        """
        先整体校验再写入：任一条倒退则一个字节都不写
        """
        elapsed = list(elapsed)
        previous = self._last
        for millis in elapsed:
            if millis < previous:
                raise ValueError(
                    f"elapsed time goes backwards: {millis} < {previous}"
                )
            previous = millis

        for millis in elapsed:
            self.write(millis)

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> "TimestampsFileWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
