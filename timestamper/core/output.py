# timestamper/core/output.py
from __future__ import annotations

from typing import Iterator, Optional

from loguru import logger

from timestamper.core.precision import resolve_precision
from timestamper.core.timestamp import TextSink, Timestamp, TimestampsReader

MILLIS_PER_SECOND = 1000
MILLIS_DIGITS = 3


def render(timestamp: Timestamp, precision: int) -> str:
    """
    Render elapsed time as decimal seconds with ``precision`` fraction digits.

    Integer arithmetic on milliseconds only: digits beyond the millisecond
    are zero padded, digits below it are truncated, never rounded.
    """
    millis = timestamp.elapsed_millis
    seconds, remainder = divmod(abs(millis), MILLIS_PER_SECOND)

    if precision >= MILLIS_DIGITS:
        fraction = f"{remainder:03d}" + "0" * (precision - MILLIS_DIGITS)
    else:
        fraction = f"{remainder:03d}"[:precision]

    # truncated toward zero: no "-0" / "-0.00"
    sign = "-" if millis < 0 and (seconds or fraction.strip("0")) else ""

    if precision == 0:
        return f"{sign}{seconds}"
    return f"{sign}{seconds}.{fraction}"


def render_lines(reader: TimestampsReader, precision: int) -> Iterator[str]:
    """
    逐条读取并渲染，每条一行；reader 返回 None 即结束。
    """
    while True:
        timestamp = reader.read()
        if timestamp is None:
            return
        yield render(timestamp, precision) + "\n"


def write(reader: TimestampsReader, sink: TextSink, query_string: Optional[str]) -> None:
    """
    Stream every remaining timestamp of ``reader`` to ``sink``.

    Precision is resolved once from ``query_string``. Each line is written as
    soon as it is rendered; a failing ``sink.write`` propagates and stops the
    loop. Neither ``reader`` nor ``sink`` is closed.
    """
    precision = resolve_precision(query_string)

    count = 0
    for line in render_lines(reader, precision):
        sink.write(line)
        count += 1

    logger.debug(f"[TimestampsOutput] precision={precision} lines={count}")
