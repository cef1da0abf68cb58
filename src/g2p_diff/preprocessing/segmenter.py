#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
句子分段器 - 按句末标点切分文本
"""

import re
import logging
from typing import List

logger = logging.getLogger(__name__)

DEFAULT_DELIMITERS = "。！？；「」“”"


class SentenceSegmenter:
    """按句末标点切句，并去掉句内所有空白"""

    def __init__(self, delimiters: str = DEFAULT_DELIMITERS):
        """
        初始化句子分段器

        Args:
            delimiters: 句末标点集合，每个字符都是一个分隔符
        """
        if not delimiters:
            raise ValueError("分隔符集合不能为空")
        self.delimiters = delimiters
        self.split_pattern = re.compile("[" + re.escape(delimiters) + "]")
        self.space_pattern = re.compile(r"\s+")

    def segment(self, text: str) -> List[str]:
        """将文本切分成句子

        Args:
            text: 输入文本

        Returns:
            去除空白后的非空句子列表
        """
        if not text:
            return []

        sentences = []
        for piece in self.split_pattern.split(text):
            sentence = self.space_pattern.sub("", piece)
            if sentence:
                sentences.append(sentence)

        logger.debug(f"切分得到 {len(sentences)} 个句子")
        return sentences
