import io
import sys
import logging

import pytest

from g2p_diff.errors import PhonemizationError
from g2p_diff.g2p import BaseG2P
from g2p_diff.report import ConsoleReporter

# 配置日志
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
    stream=sys.stdout
)
logger = logging.getLogger("test_utils")


class FakeG2P(BaseG2P):
    """按预设表返回音素的模拟流水线

    表中没有的句子按字拆分；值为异常实例时抛出该异常。
    """

    def __init__(self, name, table=None):
        super().__init__()
        self.name = name
        self.table = dict(table or {})
        self.calls = []
        self.refresh_count = 0

    def refresh(self):
        self.refresh_count += 1

    def _phonemize(self, sentence):
        self.calls.append(sentence)
        value = self.table.get(sentence, list(sentence))
        if isinstance(value, Exception):
            raise value
        return list(value)


@pytest.fixture
def fake_g2p_factory():
    """返回 FakeG2P 的构造函数"""
    return FakeG2P


@pytest.fixture
def output():
    """收集报告输出的缓冲区"""
    return io.StringIO()


@pytest.fixture
def reporter(output):
    """不着色的报告器"""
    return ConsoleReporter("A", "B", color=False, file=output)


@pytest.fixture
def failing():
    """构造转换失败异常"""
    def make(message="analysis failed"):
        return PhonemizationError(message)
    return make
