#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
G2P基类 - 所有音素转换流水线的统一接口
"""

import re
import logging
import threading
from abc import ABC, abstractmethod
from typing import List, Tuple

from pypinyin import lazy_pinyin, Style

from ..errors import PhonemizationError

logger = logging.getLogger(__name__)

PAUSE_TOKEN = "pau"

# 句内停顿标点，转换为停顿音素
PAUSE_PUNCTUATION = frozenset("，、；：,;:…—")

# 不发音的括号、引号等，直接跳过
SILENT_CHARS = frozenset("（）()《》【】[]〈〉‘’'\"·~～")

_HAN_PATTERN = re.compile(r"[\u3400-\u4dbf\u4e00-\u9fff]")


def is_han(char: str) -> bool:
    return bool(_HAN_PATTERN.fullmatch(char))


def initials_finals(text: str) -> Tuple[List[str], List[str]]:
    """获取汉字串的声母和韵母（韵母带数字声调，轻声为5）

    Args:
        text: 只包含汉字的字符串

    Returns:
        (声母列表, 韵母列表)，与输入的字一一对应
    """
    initials = lazy_pinyin(text, neutral_tone_with_five=True, style=Style.INITIALS)
    finals = lazy_pinyin(text, neutral_tone_with_five=True, style=Style.FINALS_TONE3)

    # 特殊处理"嗯"
    for i, char in enumerate(text):
        if char == "嗯" and i < len(finals):
            finals[i] = "n2"

    result_finals = []
    for c, v in zip(initials, finals):
        if re.match(r"i\d", v):
            if c in ("z", "c", "s"):
                # zi, ci, si
                v = "ii" + v[1:]
            elif c in ("zh", "ch", "sh", "r"):
                # zhi, chi, shi, ri
                v = "iii" + v[1:]
        result_finals.append(v)
    return list(initials), result_finals


def syllable_tokens(initials: List[str], finals: List[str]) -> List[str]:
    """把声母韵母展开为音素序列，零声母不输出"""
    tokens = []
    for c, v in zip(initials, finals):
        if c:
            tokens.append(c)
        if v:
            tokens.append(v)
    return tokens


class BaseG2P(ABC):
    """文本到音素转换的抽象基类

    实例持有可变的工作缓冲区，同一实例可以被顺序复用：每次调用
    phonemize() 都会先 refresh()，并用实例锁保证同一时间只有一个调用。
    """

    name = "base"

    def __init__(self):
        self._lock = threading.Lock()

    def refresh(self) -> None:
        """清空上一句留下的中间状态"""

    @abstractmethod
    def _phonemize(self, sentence: str) -> List[str]:
        """将一个句子转换为音素序列"""

    def phonemize(self, sentence: str) -> List[str]:
        """将一个句子转换为音素序列

        Args:
            sentence: 已切分、去除空白的句子

        Returns:
            音素列表

        Raises:
            PhonemizationError: 无法转换该句子
        """
        with self._lock:
            self.refresh()
            try:
                return self._phonemize(sentence)
            except PhonemizationError:
                raise
            except Exception as e:
                logger.debug(f"{self.name} 转换失败: {sentence}", exc_info=True)
                raise PhonemizationError(f"{self.name}: {e}") from e

    def get_language(self) -> str:
        """
        获取语言代码

        Returns:
            语言代码
        """
        return "zh"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
