#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
文本预处理模块 - 包含句子切分、声调变化等功能
"""

from .segmenter import SentenceSegmenter, DEFAULT_DELIMITERS
from .tone_sandhi import ToneSandhi, tone_of, with_tone

__all__ = ['SentenceSegmenter', 'DEFAULT_DELIMITERS', 'ToneSandhi', 'tone_of', 'with_tone']
