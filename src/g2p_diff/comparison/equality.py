#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
音素等价策略 - 精确相等与ASCII大小写不敏感相等
"""

from enum import Enum

# 只折叠ASCII字母，非ASCII标记保持原样
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


class Severity(Enum):
    MATCH = "match"  # 完全相同
    LIGHT = "light"  # 仅大小写不同
    FATAL = "fatal"  # 忽略大小写后仍不同

    @property
    def rank(self) -> int:
        return _RANKS[self]


_RANKS = {Severity.MATCH: 0, Severity.LIGHT: 1, Severity.FATAL: 2}


def ascii_lower(token: str) -> str:
    return token.translate(_ASCII_LOWER)


def exactly_equal(a: str, b: str) -> bool:
    return a == b


def case_insensitively_equal(a: str, b: str) -> bool:
    """忽略ASCII字母大小写比较两个音素

    与 str.lower()/casefold() 不同，不会折叠非ASCII字符。
    """
    return ascii_lower(a) == ascii_lower(b)


def classify(a: str, b: str) -> Severity:
    """判断两个音素的差异等级

    Args:
        a: 流水线A的音素
        b: 流水线B的音素

    Returns:
        MATCH、LIGHT 或 FATAL
    """
    if exactly_equal(a, b):
        return Severity.MATCH
    if case_insensitively_equal(a, b):
        return Severity.LIGHT
    return Severity.FATAL
