#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
中文声调变化处理模块
ADAPTED from https://github.com/PaddlePaddle/PaddleSpeech/blob/develop/paddlespeech/t2s/frontend/zh_frontend.py
"""

import logging
from typing import List, Tuple

logger = logging.getLogger(__name__)


def tone_of(final: str) -> str:
    return final[-1] if final and final[-1].isdigit() else ""


def with_tone(final: str, tone: str) -> str:
    if tone_of(final):
        return final[:-1] + tone
    return final + tone


class ToneSandhi:
    """中文声调变化处理类"""

    def __init__(self):
        """初始化声调变化处理类"""
        # 在这些词性下，词尾字读轻声
        self.neural_tone_pos = {"u", "ul", "uj", "uz", "ug", "uv", "ud", "y", "e"}
        self.must_neural_tone_words = {
            "们", "了", "过", "的", "地", "得", "着", "吧", "呢", "啊", "呀", "嘛", "么"
        }
        self.punc = frozenset("，。！？；：、,.!?;:")

    def pre_merge_for_modify(self, seg_cut: List[Tuple[str, str]]) -> List[Tuple[str, str]]:
        """合并"不"、"一"与后一个词，使变调规则能看到后字的声调

        Args:
            seg_cut: 分词结果，每个元素是(词语, 词性)元组

        Returns:
            处理后的分词结果
        """
        merged: List[Tuple[str, str]] = []
        pending = None
        for word, pos in seg_cut:
            if pending is not None:
                if word in self.punc:
                    merged.append(pending)
                else:
                    word = pending[0] + word
                pending = None
            if word in ("不", "一"):
                pending = (word, pos)
                continue
            merged.append((word, pos))
        if pending is not None:
            merged.append(pending)
        return merged

    def _neural_sandhi(self, word: str, pos: str, finals: List[str]) -> List[str]:
        """处理轻声音节"""
        if word and word[-1] in self.must_neural_tone_words and pos in self.neural_tone_pos:
            finals[-1] = with_tone(finals[-1], "5")
        return finals

    def _bu_sandhi(self, word: str, finals: List[str]) -> List[str]:
        """处理"不"的变调

        'bu4' -> 'bu5' in A不A, 'bu4' -> 'bu2' before a 4th tone character
        """
        if len(word) == 3 and word[1] == "不":
            finals[1] = with_tone(finals[1], "5")
            return finals

        for i, char in enumerate(word[:-1]):
            if char == "不" and tone_of(finals[i + 1]) == "4":
                finals[i] = with_tone(finals[i], "2")
        return finals

    def _yi_sandhi(self, word: str, finals: List[str]) -> List[str]:
        """处理"一"的变调

        'yi1' -> 'yi5' in A一A, 'yi1' kept in 第一 and numbers,
        'yi1' -> 'yi2' before a 4th tone, 'yi1' -> 'yi4' before other tones
        """
        if "一" not in word:
            return finals
        if all(c.isdigit() or c in "一二三四五六七八九十零百千万亿" for c in word):
            return finals
        if len(word) == 3 and word[1] == "一" and word[0] == word[-1]:
            finals[1] = with_tone(finals[1], "5")
            return finals
        if word.startswith("第一"):
            finals[1] = with_tone(finals[1], "1")
            return finals

        for i, char in enumerate(word[:-1]):
            if char != "一" or word[i + 1] in self.punc:
                continue
            if tone_of(finals[i + 1]) == "4":
                finals[i] = with_tone(finals[i], "2")
            else:
                finals[i] = with_tone(finals[i], "4")
        return finals

    def _third_tone_sandhi(self, finals: List[str]) -> List[str]:
        """处理上声连读变调

        3rd tone + 3rd tone -> 2nd tone + 3rd tone
        """
        for i in range(len(finals) - 1):
            if tone_of(finals[i]) == "3" and tone_of(finals[i + 1]) == "3":
                finals[i] = with_tone(finals[i], "2")
        return finals

    def modified_tone(self, word: str, pos: str, finals: List[str]) -> List[str]:
        """声调变化主函数

        Args:
            word: 词语
            pos: 词性
            finals: 韵母列表，与词中的字一一对应

        Returns:
            处理后的韵母列表
        """
        if not finals or len(finals) != len(word):
            return finals

        finals = list(finals)
        finals = self._bu_sandhi(word, finals)
        finals = self._yi_sandhi(word, finals)
        finals = self._neural_sandhi(word, pos, finals)
        finals = self._third_tone_sandhi(finals)
        return finals
