# timestamper/core/timestamp.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class Timestamp:
    """
    一条耗时记录（毫秒）

    - elapsed_millis:         距参考点的毫秒数
    - millis_since_previous:  距上一条记录的毫秒数（输出时不使用）
    """

    elapsed_millis: int
    millis_since_previous: int = 0


class TimestampsReader(Protocol):
    """
    顺序读取 Timestamp；read() 返回 None 表示已读完。
    """

    def read(self) -> Optional[Timestamp]:
        ...


class TextSink(Protocol):
    def write(self, s: str, /) -> object:
        ...
