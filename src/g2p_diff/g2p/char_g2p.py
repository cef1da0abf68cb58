#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
逐字G2P - 不考虑上下文，逐个汉字查拼音
"""

import logging
from typing import List

from ..errors import PhonemizationError
from .base_g2p import (
    BaseG2P,
    PAUSE_PUNCTUATION,
    PAUSE_TOKEN,
    SILENT_CHARS,
    initials_finals,
    is_han,
    syllable_tokens,
)

logger = logging.getLogger(__name__)


class CharPinyinG2P(BaseG2P):
    """逐字拼音音素转换器

    每个汉字单独查询pypinyin，不做分词、多音字消歧或变调，
    作为带上下文流水线的对照基线。
    """

    name = "char"

    def __init__(self, pause_token: str = PAUSE_TOKEN):
        """
        Args:
            pause_token: 句内停顿标点对应的音素
        """
        super().__init__()
        self.pause_token = pause_token

    def _phonemize(self, sentence: str) -> List[str]:
        tokens: List[str] = []
        for char in sentence:
            if is_han(char):
                initials, finals = initials_finals(char)
                tokens.extend(syllable_tokens(initials, finals))
            elif char in PAUSE_PUNCTUATION:
                tokens.append(self.pause_token)
            elif char in SILENT_CHARS or char.isspace():
                continue
            else:
                raise PhonemizationError(f"{self.name}: 无法转换的字符 {char!r}")

        logger.debug(f"{self.name}: {sentence} -> {' '.join(tokens)}")
        return tokens
