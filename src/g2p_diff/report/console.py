#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
控制台报告输出 - 把渲染结果着色后写到标准输出
"""

from typing import IO, Optional, Sequence

import click

from ..comparison import SentenceVerdict, Severity
from .counters import RunCounters
from .render import RenderedRow, render_label, render_rows

SEVERITY_COLORS = {
    Severity.LIGHT: "yellow",
    Severity.FATAL: "red",
}


def colorize(row: RenderedRow) -> str:
    """按强调区间给文本加上颜色"""
    pieces = []
    cursor = 0
    for start, end, severity in row.spans:
        pieces.append(row.text[cursor:start])
        pieces.append(click.style(row.text[start:end], fg=SEVERITY_COLORS[severity]))
        cursor = end
    pieces.append(row.text[cursor:])
    return "".join(pieces)


class ConsoleReporter:
    """逐句输出差异，并输出文件与总计汇总行"""

    def __init__(
        self,
        name_a: str,
        name_b: str,
        color: Optional[bool] = None,
        file: Optional[IO] = None,
    ):
        """
        Args:
            name_a: 流水线A的显示名
            name_b: 流水线B的显示名
            color: True强制着色，False不着色，None由click根据终端自动判断
            file: 输出流，默认标准输出
        """
        self.name_a = name_a
        self.name_b = name_b
        self.color = color
        self.file = file
        self._label_width = max(len("Original"), len(name_a), len(name_b)) + 4

    def _echo(self, message: str) -> None:
        click.echo(message, file=self.file, color=self.color)

    def _field(self, label: str, value: str) -> str:
        return f"{label:>{self._label_width}}: {value}"

    @staticmethod
    def prefix(file_label: str, index: int, total: int) -> str:
        return f"[{file_label} : {index} / {total}]: "

    def report_verdict(
        self,
        prefix: str,
        sentence: str,
        seq_a: Sequence[str],
        seq_b: Sequence[str],
        verdict: SentenceVerdict,
    ) -> None:
        label, severity = render_label(verdict, self.name_a, self.name_b)
        row_a, row_b = render_rows(seq_a, seq_b, verdict)

        self._echo(prefix + click.style(label, fg=SEVERITY_COLORS.get(severity)))
        self._echo(self._field("Original", sentence))
        self._echo(self._field(self.name_a, colorize(row_a)))
        self._echo(self._field(self.name_b, colorize(row_b)))

    def report_error(
        self,
        prefix: str,
        sentence: str,
        error_a: Optional[Exception],
        error_b: Optional[Exception],
    ) -> None:
        self._echo(prefix + click.style("Error:", fg="red"))
        self._echo(self._field("Original", sentence))
        self._echo(self._field(self.name_a, "Ok" if error_a is None else f"Err({error_a})"))
        self._echo(self._field(self.name_b, "Ok" if error_b is None else f"Err({error_b})"))

    def report_summary(self, label: str, counters: RunCounters) -> None:
        self._echo(counters.summary_line(label))
