#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
配置与日志测试
"""

import logging
import unittest

from g2p_diff.config import CompareSettings
from g2p_diff.preprocessing import DEFAULT_DELIMITERS
from g2p_diff.utils.logging_config import configure_logging


class TestCompareSettings(unittest.TestCase):
    """测试从环境变量读取配置"""

    def test_defaults(self):
        settings = CompareSettings.from_env(environ={}, use_dotenv=False)
        self.assertEqual(settings.pipeline_a, "word")
        self.assertEqual(settings.pipeline_b, "char")
        self.assertEqual(settings.delimiters, DEFAULT_DELIMITERS)
        self.assertEqual(settings.encoding, "utf-8")
        self.assertIsNone(settings.user_dict)
        self.assertIsNone(settings.color_flag)

    def test_environment(self):
        settings = CompareSettings.from_env(environ={
            "G2P_DIFF_PIPELINE_A": "char",
            "G2P_DIFF_PIPELINE_B": "word",
            "G2P_DIFF_ENCODING": "shift_jis",
            "G2P_DIFF_USER_DICT": "user.dict",
            "G2P_DIFF_COLOR": "Never",
            "G2P_DIFF_LOG_LEVEL": "debug",
        }, use_dotenv=False)
        self.assertEqual((settings.pipeline_a, settings.pipeline_b), ("char", "word"))
        self.assertEqual(settings.encoding, "shift_jis")
        self.assertEqual(settings.user_dict, "user.dict")
        self.assertIs(settings.color_flag, False)
        self.assertEqual(settings.log_level, "DEBUG")

    def test_blank_values_use_defaults(self):
        settings = CompareSettings.from_env(environ={"G2P_DIFF_PIPELINE_A": "  "}, use_dotenv=False)
        self.assertEqual(settings.pipeline_a, "word")

    def test_invalid_color(self):
        settings = CompareSettings.from_env(environ={"G2P_DIFF_COLOR": "rainbow"}, use_dotenv=False)
        self.assertEqual(settings.color, "auto")

    def test_color_always(self):
        self.assertIs(CompareSettings(color="always").color_flag, True)


class TestLoggingConfig(unittest.TestCase):
    """测试日志配置"""

    def tearDown(self):
        logging.getLogger("g2p_diff.runner").setLevel(logging.NOTSET)

    def test_level_and_debug_modules(self):
        configure_logging("error", debug_modules=["g2p_diff.runner"])
        self.assertEqual(logging.getLogger().level, logging.ERROR)
        self.assertEqual(logging.getLogger("g2p_diff.runner").level, logging.DEBUG)
        self.assertGreaterEqual(logging.getLogger("jieba").level, logging.WARNING)

    def test_unknown_level_falls_back(self):
        configure_logging("loud")
        self.assertEqual(logging.getLogger().level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
