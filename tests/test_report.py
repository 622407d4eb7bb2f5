"""Tests for call-site formatting and the streaming reporter."""

from __future__ import annotations

import io

from canal.report import Reporter, format_call_site
from canal.tokens import CallSite


def _site(line: int, depth: int, name: str) -> CallSite:
    return CallSite(line=line, column=0, depth=depth, name=name, symbol_id=40)


class TestFormat:
    def test_top_level(self) -> None:
        assert format_call_site(_site(0, 0, "main")) == "0\tmain"

    def test_depth_indentation(self) -> None:
        assert format_call_site(_site(3, 2, "foo")) == "3\t\t\tfoo"

    def test_custom_indent(self) -> None:
        assert format_call_site(_site(1, 2, "foo"), indent="  ") == "1\t    foo"

    def test_negative_depth_not_indented(self) -> None:
        assert format_call_site(_site(5, -1, "bar")) == "5\tbar"


class TestReporter:
    def test_writes_in_order(self) -> None:
        out = io.StringIO()
        reporter = Reporter(out)
        reporter.report(_site(0, 0, "a"))
        reporter.report(_site(1, 1, "b"))
        assert out.getvalue() == "0\ta\n1\t\tb\n"
        assert reporter.count == 2
