#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
日志配置
"""

import logging
from typing import Iterable, Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# 第三方库的日志默认压低，避免淹没比较报告
QUIET_LOGGERS = ('jieba',)


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    debug_modules: Optional[Iterable[str]] = None,
) -> None:
    """配置日志输出

    Args:
        level: 根日志级别
        debug_modules: 需要单独开启DEBUG级别的模块名
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    for module in debug_modules or ():
        logging.getLogger(module).setLevel(logging.DEBUG)
