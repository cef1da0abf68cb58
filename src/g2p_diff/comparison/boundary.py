#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
不等长序列的边界定位

两个序列长度不同时无法逐位对齐，这里分别从左端和右端向内扫描，
找出两侧仍然一致的范围，把不一致的区域框出来供人工检查。
不做插入/删除的重新对齐：一个多出来的音素会让之后的所有位置
都落在致命区域内，即使尾部其实重新对齐了。
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from .equality import Severity, case_insensitively_equal, exactly_equal

SIDE_A = "a"
SIDE_B = "b"


@dataclass(frozen=True)
class BoundaryVerdict:
    """左右两次扫描得到的边界

    左侧边界是从序列开头起的下标；右侧边界是距序列末尾的距离。
    两侧都满足 light_bound <= fatal_bound <= min(length_a, length_b)。
    """

    left_light_bound: int
    left_fatal_bound: int
    right_light_bound: int
    right_fatal_bound: int
    length_a: int
    length_b: int

    def length_of(self, side: str) -> int:
        if side == SIDE_A:
            return self.length_a
        if side == SIDE_B:
            return self.length_b
        raise ValueError(f"未知的序列: {side!r}")

    def severity_at(self, side: str, index: int) -> Severity:
        """用于渲染的单个音素等级

        任一侧扫描确认一致的位置不高亮；轻微区取两侧中较轻的判断；
        只有同时越过左右两个致命边界的内部区域才算致命。
        左右两次扫描在较长序列上重叠时，从左侧致命边界起的多出的
        |m-n| 个音素标为致命，保证长度不一致时至少有一处被标出。
        """
        length = self.length_of(side)
        if not 0 <= index < length:
            raise IndexError(f"下标越界: {index} (长度 {length})")

        if self.left_fatal_bound <= index < self.left_fatal_bound + self._surplus(length):
            return Severity.FATAL

        from_left = _scan_severity(index, self.left_light_bound, self.left_fatal_bound)
        from_right = _scan_severity(
            length - 1 - index, self.right_light_bound, self.right_fatal_bound
        )
        return min(from_left, from_right, key=lambda s: s.rank)

    def _surplus(self, length: int) -> int:
        """两侧扫描重叠时较长序列多出的音素数，否则为0"""
        shortest = min(self.length_a, self.length_b)
        if length == shortest or self.left_fatal_bound + self.right_fatal_bound <= shortest:
            return 0
        return length - shortest


def _scan_severity(offset: int, light_bound: int, fatal_bound: int) -> Severity:
    if offset >= fatal_bound:
        return Severity.FATAL
    if offset >= light_bound:
        return Severity.LIGHT
    return Severity.MATCH


def _scan(pairs) -> Tuple[int, int]:
    """扫描一侧，返回 (light_bound, fatal_bound)

    遇到第一个忽略大小写仍不同的位置即停止；在此之前持续记录
    最近一个不完全相同的位置。
    """
    light_bound = None
    fatal_bound = 0
    for offset, (a, b) in enumerate(pairs):
        if not case_insensitively_equal(a, b):
            fatal_bound = offset
            break
        if not exactly_equal(a, b):
            light_bound = offset
        fatal_bound = offset + 1

    if light_bound is None:
        light_bound = fatal_bound
    return light_bound, fatal_bound


def localize_boundaries(seq_a: Sequence[str], seq_b: Sequence[str]) -> BoundaryVerdict:
    """定位两个不等长序列的不一致区域

    Args:
        seq_a: 流水线A的音素序列
        seq_b: 流水线B的音素序列

    Returns:
        BoundaryVerdict
    """
    if len(seq_a) == len(seq_b):
        raise ValueError("边界定位只适用于不等长序列")

    left_light, left_fatal = _scan(zip(seq_a, seq_b))
    right_light, right_fatal = _scan(zip(reversed(seq_a), reversed(seq_b)))

    return BoundaryVerdict(
        left_light_bound=left_light,
        left_fatal_bound=left_fatal,
        right_light_bound=right_light,
        right_fatal_bound=right_fatal,
        length_a=len(seq_a),
        length_b=len(seq_b),
    )
