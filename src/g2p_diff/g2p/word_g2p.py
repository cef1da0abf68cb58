#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
分词G2P - jieba分词 + 词级拼音 + 变调 + 儿化
ADAPTED from https://github.com/PaddlePaddle/PaddleSpeech/blob/develop/paddlespeech/t2s/frontend/zh_frontend.py
"""

import os
import logging
from typing import Dict, List, Optional, Tuple

import jieba
import jieba.posseg
from pypinyin import load_phrases_dict

from ..errors import InitializationError, PhonemizationError
from ..preprocessing.tone_sandhi import ToneSandhi, tone_of, with_tone
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

# 多音字和固定发音词典（TONE2格式）
PHRASES_DICT = {
    '开户行': [['ka1i'], ['hu4'], ['hang2']],
    '发卡行': [['fa4'], ['ka3'], ['hang2']],
    '放款行': [['fa4ng'], ['kua3n'], ['hang2']],
    '茧行': [['jia3n'], ['hang2']],
    '行号': [['hang2'], ['ha4o']],
    '各地': [['ge4'], ['di4']],
    '借还款': [['jie4'], ['hua2n'], ['kua3n']],
    '时间为': [['shi2'], ['jia1n'], ['we2i']],
    '为准': [['we2i'], ['zhu3n']],
    '色差': [['se4'], ['cha1']],
    '掺和': [['cha1n'], ['huo']],
}

# 儿化音词集
MUST_ERHUA = {
    "小院儿", "胡同儿", "范儿", "老汉儿", "撒欢儿", "寻老礼儿", "妥妥儿", "媳妇儿"
}
NOT_ERHUA = {
    "虐儿", "为儿", "护儿", "瞒儿", "救儿", "替儿", "有儿", "一儿", "我儿", "俺儿", "妻儿",
    "拐儿", "聋儿", "乞儿", "患儿", "幼儿", "孤儿", "婴儿", "婴幼儿", "连体儿", "脑瘫儿",
    "流浪儿", "体弱儿", "混血儿", "蜜雪儿", "舫儿", "祖儿", "美儿", "应采儿", "可儿", "侄儿",
    "孙儿", "侄孙儿", "女儿", "男儿", "红孩儿", "花儿", "虫儿", "马儿", "鸟儿", "猪儿", "猫儿",
    "狗儿", "少儿"
}


class WordPinyinG2P(BaseG2P):
    """分词拼音音素转换器

    持有独立的 jieba 分词器实例（不使用 jieba 的全局默认分词器），
    词典在构造时加载，加载失败抛出 InitializationError。
    """

    name = "word"

    def __init__(
        self,
        dictionary: Optional[str] = None,
        user_dict: Optional[str] = None,
        phrases_dict: Optional[Dict[str, List[List[str]]]] = None,
        with_erhua: bool = True,
        pause_token: str = PAUSE_TOKEN,
    ):
        """
        初始化分词G2P

        Args:
            dictionary: jieba主词典路径，None使用jieba自带词典
            user_dict: jieba用户词典路径
            phrases_dict: 追加的拼音短语词典（TONE2格式，如 [['ka1i'], ['hu4']]）
            with_erhua: 是否合并儿化音
            pause_token: 句内停顿标点对应的音素
        """
        super().__init__()
        self.with_erhua = with_erhua
        self.pause_token = pause_token
        self.tone_modifier = ToneSandhi()

        self.tokenizer, self.pos_tokenizer = self._load_tokenizer(dictionary, user_dict)

        load_phrases_dict(PHRASES_DICT, style='tone2')
        if phrases_dict:
            load_phrases_dict(phrases_dict, style='tone2')

        # 当前句子的 (声母, 韵母) 序列，停顿以空声母记录
        self._buffer: List[Tuple[str, str]] = []

    def _load_tokenizer(self, dictionary: Optional[str], user_dict: Optional[str]):
        for path in (dictionary, user_dict):
            if path and not os.path.isfile(path):
                raise InitializationError(f"{self.name}: 词典文件不存在: {path}")

        try:
            tokenizer = jieba.Tokenizer(dictionary) if dictionary else jieba.Tokenizer()
            tokenizer.initialize()
            if user_dict:
                tokenizer.load_userdict(user_dict)
            pos_tokenizer = jieba.posseg.POSTokenizer(tokenizer)
        except Exception as e:
            raise InitializationError(f"{self.name}: 词典加载失败: {e}") from e

        logger.info(f"{self.name}: 已加载分词词典 {dictionary or 'jieba默认词典'}"
                    + (f"，用户词典 {user_dict}" if user_dict else ""))
        return tokenizer, pos_tokenizer

    def refresh(self) -> None:
        self._buffer.clear()

    def _merge_erhua(self, initials: List[str], finals: List[str], word: str, pos: str) -> Tuple[List[str], List[str]]:
        """把词尾的"儿"并入前一个音节，如 院儿 van4 er2 -> vanr4"""
        if len(finals) != len(word) or not word.endswith("儿"):
            return initials, finals

        # 词尾"儿"不读阴平
        if finals[-1] == "er1":
            finals = finals[:-1] + ["er2"]

        if word not in MUST_ERHUA and (word in NOT_ERHUA or pos in {"a", "j", "nr"}):
            return initials, finals
        if len(finals) < 2 or finals[-1] not in {"er2", "er5"} or word[-2:] in NOT_ERHUA:
            return initials, finals

        prev = finals[-2]
        return initials[:-1], finals[:-2] + [with_tone(prev, "r" + tone_of(prev))]

    def _segment(self, sentence: str) -> List[Tuple[str, str]]:
        return [(pair.word, pair.flag) for pair in self.pos_tokenizer.lcut(sentence)]

    def _phonemize(self, sentence: str) -> List[str]:
        seg_cut = self.tone_modifier.pre_merge_for_modify(self._segment(sentence))

        for word, pos in seg_cut:
            if all(c in SILENT_CHARS or c.isspace() for c in word):
                continue
            if all(c in PAUSE_PUNCTUATION for c in word):
                self._buffer.extend(("", self.pause_token) for _ in word)
                continue

            bad = [c for c in word if not is_han(c)]
            if bad:
                raise PhonemizationError(f"{self.name}: 无法转换的字符 {bad[0]!r} (词: {word})")

            initials, finals = initials_finals(word)
            finals = self.tone_modifier.modified_tone(word, pos, finals)
            if self.with_erhua:
                initials, finals = self._merge_erhua(initials, finals, word, pos)
            self._buffer.extend(zip(initials, finals))

        tokens = syllable_tokens([c for c, _ in self._buffer], [v for _, v in self._buffer])
        logger.debug(f"{self.name}: {sentence} -> {' '.join(tokens)}")
        return tokens
