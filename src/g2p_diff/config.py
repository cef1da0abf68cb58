#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
运行配置 - 从 .env 文件和环境变量读取，命令行参数可覆盖
"""

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv, find_dotenv

from .preprocessing.segmenter import DEFAULT_DELIMITERS

logger = logging.getLogger(__name__)

ENV_PREFIX = "G2P_DIFF_"

COLOR_CHOICES = ("auto", "always", "never")


@dataclass
class CompareSettings:
    pipeline_a: str = "word"
    pipeline_b: str = "char"
    delimiters: str = DEFAULT_DELIMITERS
    encoding: str = "utf-8"
    user_dict: Optional[str] = None
    jieba_dict: Optional[str] = None
    color: str = "auto"
    log_level: str = "WARNING"

    @property
    def color_flag(self) -> Optional[bool]:
        """转换为 click.echo 的 color 参数"""
        if self.color == "always":
            return True
        if self.color == "never":
            return False
        return None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, use_dotenv: bool = True) -> "CompareSettings":
        """从环境变量构造配置

        Args:
            environ: 环境变量映射，默认 os.environ
            use_dotenv: 是否先加载 .env 文件

        Returns:
            CompareSettings
        """
        if use_dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)
        if environ is None:
            environ = os.environ

        def get(key: str, default: Optional[str]) -> Optional[str]:
            value = environ.get(ENV_PREFIX + key)
            if value is None or value.strip() == "":
                return default
            return value.strip()

        settings = cls(
            pipeline_a=get("PIPELINE_A", cls.pipeline_a),
            pipeline_b=get("PIPELINE_B", cls.pipeline_b),
            delimiters=get("DELIMITERS", cls.delimiters),
            encoding=get("ENCODING", cls.encoding),
            user_dict=get("USER_DICT", None),
            jieba_dict=get("JIEBA_DICT", None),
            color=get("COLOR", cls.color).lower(),
            log_level=get("LOG_LEVEL", cls.log_level).upper(),
        )
        if settings.color not in COLOR_CHOICES:
            logger.warning(f"无效的 {ENV_PREFIX}COLOR={settings.color}，使用 auto")
            settings.color = "auto"
        return settings
