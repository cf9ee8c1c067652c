# timestamper/core/precision.py
from __future__ import annotations

import re
from typing import Optional
from urllib.parse import parse_qsl

from loguru import logger

PRECISION_PARAM = "precision"
DEFAULT_PRECISION = 3

PRECISION_ALIASES = {
    "seconds": 0,
    "milliseconds": 3,
    "microseconds": 6,
    "nanoseconds": 9,
}

# 与 32 位有符号整数一致：超出范围视为无法解析
_MAX_PRECISION = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


def first_param(query_string: Optional[str], name: str) -> Optional[str]:
    """
    Return the first value of ``name`` in a raw query string, or None.

    Pairs are kept in order and scanned linearly, so repeated keys resolve to
    their first occurrence. A pair without ``=`` counts as an empty value.
    """
    for key, value in parse_qsl(query_string or "", keep_blank_values=True):
        if key == name:
            return value
    return None


def parse_precision(value: Optional[str]) -> int:
    if not value:
        return DEFAULT_PRECISION

    if value in PRECISION_ALIASES:
        return PRECISION_ALIASES[value]

    if _INTEGER.fullmatch(value):
        number = int(value)
        if 0 <= number <= _MAX_PRECISION:
            return number

    logger.debug(f"[Precision] unrecognized value {value!r}, using {DEFAULT_PRECISION}")
    return DEFAULT_PRECISION


def resolve_precision(query_string: Optional[str]) -> int:
    """
    query string → 小数位数

    规则：
      - 缺失 / 空 / 无法识别 / 负数 → 3
      - seconds=0, milliseconds=3, microseconds=6, nanoseconds=9
      - 非负整数 → 原值（不截断到 9）
      - 多次出现只取第一个
    """
    return parse_precision(first_param(query_string, PRECISION_PARAM))
