# timestamper/io/varint.py
"""
Unsigned LEB128 varints: 7 bits per byte, low group first,
high bit set on every byte except the last.
"""
from __future__ import annotations

from typing import BinaryIO, Optional

from timestamper.utils.errors import CorruptTimestampsError


def encode(value: int) -> bytes:
    if value < 0:
        raise ValueError(f"varint must be non-negative, got {value}")

    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def read(stream: BinaryIO) -> Optional[int]:
    """
    读取一个 varint；流在记录边界结束时返回 None。
    """
    value = 0
    shift = 0
    while True:
        b = stream.read(1)
        if not b:
            if shift == 0:
                return None
            raise CorruptTimestampsError("timestamps file ends inside a varint")
        byte = b[0]
        value |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return value
        shift += 7
