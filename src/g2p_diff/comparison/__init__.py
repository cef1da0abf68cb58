#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
音素序列比较核心
"""

from .equality import Severity, exactly_equal, case_insensitively_equal, classify
from .aligned import compare_aligned
from .boundary import BoundaryVerdict, localize_boundaries
from .comparator import AllMatch, PositionalMismatch, LengthMismatch, SentenceVerdict, compare

__all__ = [
    'Severity', 'exactly_equal', 'case_insensitively_equal', 'classify',
    'compare_aligned', 'BoundaryVerdict', 'localize_boundaries',
    'AllMatch', 'PositionalMismatch', 'LengthMismatch', 'SentenceVerdict', 'compare',
]
