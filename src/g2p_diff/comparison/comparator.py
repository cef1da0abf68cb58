#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
单句比较器 - 根据两个音素序列给出唯一的比较结论
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from .aligned import compare_aligned
from .boundary import BoundaryVerdict, localize_boundaries
from .equality import Severity


@dataclass(frozen=True)
class AllMatch:
    """两个序列完全一致"""

    @property
    def is_fatal(self) -> bool:
        return False


@dataclass(frozen=True)
class PositionalMismatch:
    """等长但存在差异，逐位记录等级"""

    severities: Tuple[Severity, ...]

    @property
    def is_fatal(self) -> bool:
        return Severity.FATAL in self.severities


@dataclass(frozen=True)
class LengthMismatch:
    """长度不同，一律视为致命差异"""

    boundaries: BoundaryVerdict

    @property
    def is_fatal(self) -> bool:
        return True


SentenceVerdict = Union[AllMatch, PositionalMismatch, LengthMismatch]


def compare(seq_a: Sequence[str], seq_b: Sequence[str]) -> SentenceVerdict:
    """比较同一句子在两条流水线上的音素序列

    Args:
        seq_a: 流水线A的音素序列
        seq_b: 流水线B的音素序列

    Returns:
        AllMatch、PositionalMismatch 或 LengthMismatch 之一
    """
    seq_a = list(seq_a)
    seq_b = list(seq_b)

    if seq_a == seq_b:
        return AllMatch()

    if len(seq_a) == len(seq_b):
        severities = compare_aligned(seq_a, seq_b)
        if all(s is Severity.MATCH for s in severities):
            return AllMatch()
        return PositionalMismatch(severities)

    return LengthMismatch(localize_boundaries(seq_a, seq_b))
