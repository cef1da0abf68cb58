#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
比较结果的纯文本渲染

只生成文本和强调区间，不依赖任何终端/颜色库；着色由 console 模块完成。
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from ..comparison import (
    AllMatch,
    LengthMismatch,
    PositionalMismatch,
    SentenceVerdict,
    Severity,
)
from ..comparison.boundary import SIDE_A, SIDE_B

Span = Tuple[int, int, Severity]


@dataclass
class RenderedRow:
    """一行音素文本及其强调区间 (start, end, severity)"""

    text: str
    spans: List[Span] = field(default_factory=list)


class _RowBuilder:
    def __init__(self):
        self.parts: List[str] = []
        self.spans: List[Span] = []
        self.length = 0

    def add(self, cell: str, severity: Severity) -> None:
        if self.parts:
            self.parts.append(" ")
            self.length += 1
        start = self.length
        self.parts.append(cell)
        self.length += len(cell)
        if severity is not Severity.MATCH:
            # 相邻且同级的区间合并成一个
            if self.spans and self.spans[-1][1] == start - 1 and self.spans[-1][2] is severity:
                self.spans[-1] = (self.spans[-1][0], self.length, severity)
            else:
                self.spans.append((start, self.length, severity))

    def build(self) -> RenderedRow:
        return RenderedRow("".join(self.parts), self.spans)


def render_label(verdict: SentenceVerdict, name_a: str = "A", name_b: str = "B") -> Tuple[str, Severity]:
    """生成差异标题及其等级"""
    if isinstance(verdict, LengthMismatch):
        b = verdict.boundaries
        return (
            f"Fatal mismatch (length mismatch: {name_a}={b.length_a}, {name_b}={b.length_b}):",
            Severity.FATAL,
        )
    if isinstance(verdict, PositionalMismatch):
        if verdict.is_fatal:
            return "Fatal mismatch:", Severity.FATAL
        return "Light mismatch:", Severity.LIGHT
    return "Match:", Severity.MATCH


def render_positional(
    seq_a: Sequence[str], seq_b: Sequence[str], severities: Sequence[Severity]
) -> Tuple[RenderedRow, RenderedRow]:
    """等长序列按列右对齐渲染"""
    row_a = _RowBuilder()
    row_b = _RowBuilder()
    for a, b, severity in zip(seq_a, seq_b, severities):
        width = max(len(a), len(b))
        row_a.add(f"{a:>{width}}", severity)
        row_b.add(f"{b:>{width}}", severity)
    return row_a.build(), row_b.build()


def render_length(
    seq_a: Sequence[str], seq_b: Sequence[str], verdict: LengthMismatch
) -> Tuple[RenderedRow, RenderedRow]:
    """不等长序列各自渲染，按边界标记轻微区与致命区"""
    rows = []
    for side, seq in ((SIDE_A, seq_a), (SIDE_B, seq_b)):
        row = _RowBuilder()
        for i, token in enumerate(seq):
            row.add(token, verdict.boundaries.severity_at(side, i))
        rows.append(row.build())
    return rows[0], rows[1]


def render_rows(
    seq_a: Sequence[str], seq_b: Sequence[str], verdict: SentenceVerdict
) -> Tuple[RenderedRow, RenderedRow]:
    """渲染两条流水线的音素行

    Args:
        seq_a: 流水线A的音素序列
        seq_b: 流水线B的音素序列
        verdict: compare() 的结果

    Returns:
        (A行, B行)
    """
    if isinstance(verdict, PositionalMismatch):
        return render_positional(seq_a, seq_b, verdict.severities)
    if isinstance(verdict, LengthMismatch):
        return render_length(seq_a, seq_b, verdict)
    if isinstance(verdict, AllMatch):
        return render_positional(seq_a, seq_b, [Severity.MATCH] * len(seq_a))
    raise TypeError(f"未知的比较结果类型: {type(verdict).__name__}")
