#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
比较流程编排 - 逐文件、逐句调用两条流水线并汇总结果
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .comparison import AllMatch, SentenceVerdict, compare
from .errors import InputReadError, PhonemizationError
from .g2p import BaseG2P
from .preprocessing import SentenceSegmenter
from .report import ConsoleReporter, RunCounters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SentenceResult:
    """单句的比较结果：要么有结论，要么有错误，二者不会同时存在"""

    sentence: str
    phonemes_a: Optional[List[str]] = None
    phonemes_b: Optional[List[str]] = None
    verdict: Optional[SentenceVerdict] = None
    error_a: Optional[PhonemizationError] = None
    error_b: Optional[PhonemizationError] = None

    @property
    def failed(self) -> bool:
        return self.verdict is None


class ComparisonRunner:
    """按输入顺序逐句比较两条G2P流水线

    计数器只由本类的循环更新。文件读取失败时中止整个运行：
    先输出已完成文件的总计行，再抛出 InputReadError。
    """

    def __init__(
        self,
        pipeline_a: BaseG2P,
        pipeline_b: BaseG2P,
        segmenter: Optional[SentenceSegmenter] = None,
        reporter: Optional[ConsoleReporter] = None,
        encoding: str = "utf-8",
    ):
        self.pipeline_a = pipeline_a
        self.pipeline_b = pipeline_b
        self.segmenter = segmenter or SentenceSegmenter()
        self.reporter = reporter or ConsoleReporter(pipeline_a.name, pipeline_b.name)
        self.encoding = encoding

    @staticmethod
    def _call(pipeline: BaseG2P, sentence: str):
        try:
            return pipeline.phonemize(sentence), None
        except PhonemizationError as e:
            return None, e

    def compare_sentence(self, sentence: str) -> SentenceResult:
        """比较一个句子

        Args:
            sentence: 已切分的句子

        Returns:
            SentenceResult
        """
        phonemes_a, error_a = self._call(self.pipeline_a, sentence)
        phonemes_b, error_b = self._call(self.pipeline_b, sentence)

        if error_a is not None or error_b is not None:
            return SentenceResult(sentence, phonemes_a, phonemes_b, error_a=error_a, error_b=error_b)

        return SentenceResult(sentence, phonemes_a, phonemes_b, verdict=compare(phonemes_a, phonemes_b))

    def compare_text(self, name: str, text: str) -> RunCounters:
        """比较一段文本中的所有句子并输出文件汇总行

        Args:
            name: 报告中显示的文件名
            text: 文本内容

        Returns:
            该文件的计数
        """
        sentences = self.segmenter.segment(text)
        counters = RunCounters()

        for index, sentence in enumerate(sentences, start=1):
            prefix = self.reporter.prefix(name, index, len(sentences))
            result = self.compare_sentence(sentence)

            if result.failed:
                logger.warning(
                    f"{name} 第{index}句转换失败: "
                    f"{self.pipeline_a.name}={result.error_a}, {self.pipeline_b.name}={result.error_b}"
                )
                counters.record_error()
                self.reporter.report_error(prefix, sentence, result.error_a, result.error_b)
                continue

            counters.record(result.verdict)
            if not isinstance(result.verdict, AllMatch):
                self.reporter.report_verdict(
                    prefix, sentence, result.phonemes_a, result.phonemes_b, result.verdict
                )

        self.reporter.report_summary(name, counters)
        return counters

    def read_file(self, path: Union[str, Path]) -> str:
        path = Path(path)
        try:
            return path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(path, str(e)) from e

    def compare_file(self, path: Union[str, Path]) -> RunCounters:
        path = Path(path)
        logger.info(f"开始比较文件: {path}")
        return self.compare_text(path.name, self.read_file(path))

    def run(self, paths: Iterable[Union[str, Path]]) -> RunCounters:
        """依次比较多个文件并输出总计行

        Args:
            paths: 输入文件路径

        Returns:
            所有文件的总计

        Raises:
            InputReadError: 某个文件无法读取，此前已完成文件的总计行已输出
        """
        totals = RunCounters()
        for path in paths:
            try:
                counters = self.compare_file(path)
            except InputReadError:
                logger.error(f"读取失败，中止运行: {path}")
                self.reporter.report_summary("Total", totals)
                raise
            totals.merge(counters)

        self.reporter.report_summary("Total", totals)
        return totals
