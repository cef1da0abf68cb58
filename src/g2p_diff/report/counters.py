#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
运行计数器 - 按文件统计并汇总到总计
"""

from dataclasses import dataclass

from ..comparison import AllMatch, SentenceVerdict


@dataclass
class RunCounters:
    """匹配/轻微差异/致命差异/错误 四类计数，只增不减"""

    matches: int = 0
    light_mismatches: int = 0
    fatal_mismatches: int = 0
    errors: int = 0

    def record(self, verdict: SentenceVerdict) -> None:
        if isinstance(verdict, AllMatch):
            self.matches += 1
        elif verdict.is_fatal:
            self.fatal_mismatches += 1
        else:
            self.light_mismatches += 1

    def record_error(self) -> None:
        self.errors += 1

    def merge(self, other: "RunCounters") -> None:
        """把另一组计数累加进来（用于文件计数汇总到总计）"""
        self.matches += other.matches
        self.light_mismatches += other.light_mismatches
        self.fatal_mismatches += other.fatal_mismatches
        self.errors += other.errors

    @property
    def total(self) -> int:
        return self.matches + self.light_mismatches + self.fatal_mismatches + self.errors

    def summary_line(self, label: str) -> str:
        return (
            f"{label}: {self.matches} matches, "
            f"{self.light_mismatches} light mismatches, "
            f"{self.fatal_mismatches} fatal mismatches, "
            f"{self.errors} errors"
        )
