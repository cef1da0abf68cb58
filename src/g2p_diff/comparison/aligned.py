#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
等长序列的逐位比较
"""

from typing import Sequence, Tuple

from .equality import Severity, classify


def compare_aligned(seq_a: Sequence[str], seq_b: Sequence[str]) -> Tuple[Severity, ...]:
    """逐位置分类两个等长音素序列

    Args:
        seq_a: 流水线A的音素序列
        seq_b: 流水线B的音素序列

    Returns:
        与输入等长的差异等级序列
    """
    if len(seq_a) != len(seq_b):
        raise ValueError(f"序列长度不一致: {len(seq_a)} != {len(seq_b)}")
    return tuple(classify(a, b) for a, b in zip(seq_a, seq_b))
