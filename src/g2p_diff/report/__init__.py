#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
结果统计与报告输出
"""

from .counters import RunCounters
from .render import RenderedRow, render_label, render_rows
from .console import ConsoleReporter, colorize

__all__ = ['RunCounters', 'RenderedRow', 'render_label', 'render_rows', 'ConsoleReporter', 'colorize']
