#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
计数与报告输出测试
"""

import io
import unittest

import click

from g2p_diff.comparison import AllMatch, Severity, compare
from g2p_diff.errors import PhonemizationError
from g2p_diff.report import ConsoleReporter, RenderedRow, RunCounters, colorize, render_label, render_rows


class TestRunCounters(unittest.TestCase):
    """测试计数器"""

    def test_record(self):
        counters = RunCounters()
        counters.record(compare(["k", "a"], ["k", "a"]))
        counters.record(compare(["k", "a"], ["K", "a"]))
        counters.record(compare(["k", "a"], ["s", "a"]))
        counters.record(compare(["k", "a"], ["k"]))
        counters.record_error()

        self.assertEqual(counters.matches, 1)
        self.assertEqual(counters.light_mismatches, 1)
        self.assertEqual(counters.fatal_mismatches, 2)
        self.assertEqual(counters.errors, 1)
        self.assertEqual(counters.total, 5)

    def test_light_and_fatal_positions_count_as_fatal(self):
        counters = RunCounters()
        counters.record(compare(["k", "a"], ["K", "o"]))
        self.assertEqual((counters.light_mismatches, counters.fatal_mismatches), (0, 1))

    def test_merge(self):
        totals = RunCounters(1, 2, 3, 4)
        totals.merge(RunCounters(10, 20, 30, 40))
        self.assertEqual(totals, RunCounters(11, 22, 33, 44))

    def test_summary_line(self):
        self.assertEqual(
            RunCounters(3, 1, 2, 0).summary_line("a.txt"),
            "a.txt: 3 matches, 1 light mismatches, 2 fatal mismatches, 0 errors",
        )
        self.assertEqual(
            RunCounters().summary_line("Total"),
            "Total: 0 matches, 0 light mismatches, 0 fatal mismatches, 0 errors",
        )


class TestRender(unittest.TestCase):
    """测试纯文本渲染"""

    def test_positional_light(self):
        row_a, row_b = render_rows(["k", "a"], ["K", "a"], compare(["k", "a"], ["K", "a"]))
        self.assertEqual(row_a.text, "k a")
        self.assertEqual(row_b.text, "K a")
        self.assertEqual(row_a.spans, [(0, 1, Severity.LIGHT)])
        self.assertEqual(row_b.spans, [(0, 1, Severity.LIGHT)])

    def test_positional_column_width(self):
        row_a, row_b = render_rows(["sh", "a"], ["s", "a"], compare(["sh", "a"], ["s", "a"]))
        self.assertEqual(row_a.text, "sh a")
        self.assertEqual(row_b.text, " s a")
        self.assertEqual(row_b.spans, [(0, 2, Severity.FATAL)])

    def test_adjacent_spans_merged(self):
        row_a, _ = render_rows(["x", "y", "z"], ["X", "Y", "z"], compare(["x", "y", "z"], ["X", "Y", "z"]))
        self.assertEqual(row_a.spans, [(0, 3, Severity.LIGHT)])

    def test_length_mismatch_rows(self):
        seq_a, seq_b = ["a", "i", "u"], ["a", "i"]
        row_a, row_b = render_rows(seq_a, seq_b, compare(seq_a, seq_b))
        self.assertEqual(row_a.text, "a i u")
        self.assertEqual(row_a.spans, [(4, 5, Severity.FATAL)])
        self.assertEqual(row_b.text, "a i")
        self.assertEqual(row_b.spans, [])

    def test_length_mismatch_overlapping_scans(self):
        seq_a, seq_b = ["a", "b"], ["a", "b", "b"]
        row_a, row_b = render_rows(seq_a, seq_b, compare(seq_a, seq_b))
        self.assertEqual(row_b.text, "a b b")
        self.assertEqual(row_b.spans, [(4, 5, Severity.FATAL)])
        self.assertEqual(row_a.spans, [])

    def test_all_match_rows(self):
        row_a, row_b = render_rows(["k", "a"], ["k", "a"], AllMatch())
        self.assertEqual((row_a.text, row_b.text), ("k a", "k a"))
        self.assertEqual(row_a.spans, [])

    def test_labels(self):
        self.assertEqual(render_label(compare(["k"], ["K"])), ("Light mismatch:", Severity.LIGHT))
        self.assertEqual(render_label(compare(["k"], ["s"])), ("Fatal mismatch:", Severity.FATAL))
        self.assertEqual(
            render_label(compare(["a", "i"], ["a"]), "word", "char"),
            ("Fatal mismatch (length mismatch: word=2, char=1):", Severity.FATAL),
        )

    def test_colorize(self):
        row = RenderedRow("k a s", [(0, 1, Severity.LIGHT), (4, 5, Severity.FATAL)])
        colored = colorize(row)
        self.assertEqual(click.unstyle(colored), "k a s")
        self.assertIn(click.style("k", fg="yellow"), colored)
        self.assertIn(click.style("s", fg="red"), colored)


class TestConsoleReporter(unittest.TestCase):
    """测试控制台输出格式"""

    def setUp(self):
        self.output = io.StringIO()
        self.reporter = ConsoleReporter("word", "char", color=False, file=self.output)

    def lines(self):
        return self.output.getvalue().splitlines()

    def test_prefix(self):
        self.assertEqual(ConsoleReporter.prefix("a.txt", 3, 10), "[a.txt : 3 / 10]: ")

    def test_report_verdict(self):
        verdict = compare(["k", "a"], ["K", "a"])
        self.reporter.report_verdict("[a.txt : 1 / 1]: ", "ka", ["k", "a"], ["K", "a"], verdict)
        lines = self.lines()
        self.assertEqual(lines[0], "[a.txt : 1 / 1]: Light mismatch:")
        self.assertEqual(lines[1], "    Original: ka")
        self.assertEqual(lines[2], "        word: k a")
        self.assertEqual(lines[3], "        char: K a")

    def test_report_length_mismatch(self):
        verdict = compare(["a", "i", "u"], ["a", "i"])
        self.reporter.report_verdict("[a.txt : 1 / 1]: ", "aiu", ["a", "i", "u"], ["a", "i"], verdict)
        lines = self.lines()
        self.assertEqual(lines[0], "[a.txt : 1 / 1]: Fatal mismatch (length mismatch: word=3, char=2):")
        self.assertEqual(lines[2], "        word: a i u")

    def test_report_error(self):
        self.reporter.report_error("[a.txt : 2 / 2]: ", "abc", None, PhonemizationError("bad char"))
        lines = self.lines()
        self.assertEqual(lines[0], "[a.txt : 2 / 2]: Error:")
        self.assertEqual(lines[2], "        word: Ok")
        self.assertEqual(lines[3], "        char: Err(bad char)")

    def test_plain_output_has_no_escape_codes(self):
        verdict = compare(["k"], ["s"])
        self.reporter.report_verdict("", "k", ["k"], ["s"], verdict)
        self.assertNotIn("\x1b[", self.output.getvalue())

    def test_forced_color(self):
        output = io.StringIO()
        reporter = ConsoleReporter("word", "char", color=True, file=output)
        reporter.report_verdict("", "k", ["k"], ["s"], compare(["k"], ["s"]))
        self.assertIn("\x1b[31m", output.getvalue())

    def test_report_summary(self):
        self.reporter.report_summary("Total", RunCounters(1, 0, 0, 0))
        self.assertEqual(self.lines(), ["Total: 1 matches, 0 light mismatches, 0 fatal mismatches, 0 errors"])


if __name__ == "__main__":
    unittest.main()
