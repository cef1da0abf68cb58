#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
g2p-diff: 比较两条G2P流水线在同一批句子上的音素输出
"""

from .comparison import (
    Severity,
    AllMatch,
    PositionalMismatch,
    LengthMismatch,
    BoundaryVerdict,
    compare,
    classify,
)
from .report import RunCounters, ConsoleReporter
from .runner import ComparisonRunner, SentenceResult

__version__ = "0.1.0"

__all__ = [
    'Severity',
    'AllMatch',
    'PositionalMismatch',
    'LengthMismatch',
    'BoundaryVerdict',
    'compare',
    'classify',
    'RunCounters',
    'ConsoleReporter',
    'ComparisonRunner',
    'SentenceResult',
]
