#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
异常类型定义
"""

from pathlib import Path
from typing import Optional, Union


class G2PDiffError(Exception):
    """g2p-diff 所有异常的基类"""


class PhonemizationError(G2PDiffError):
    """单句音素转换失败，记录为错误后继续处理下一句"""


class InitializationError(G2PDiffError):
    """流水线初始化失败（如词典无法加载），在处理任何句子之前中止运行"""


class InputReadError(G2PDiffError):
    """输入文件无法读取或解码"""

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None):
        self.path = Path(path)
        self.reason = reason
        message = f"无法读取输入文件 {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class CorpusError(G2PDiffError):
    """语料预处理失败"""
