"""Tests for brace depth tracking."""

from __future__ import annotations

from canal.lexer import Scanner

from .conftest import feed_all


def _depth(source: str) -> int:
    scanner = Scanner()
    feed_all(scanner, source)
    return scanner.finish().depth


class TestDepth:
    def test_balanced(self) -> None:
        assert _depth("int f() { if (x) { y(); } }") == 0

    def test_open_minus_close(self) -> None:
        assert _depth("{ { { }") == 2

    def test_negative_depth_allowed(self) -> None:
        assert _depth("} }") == -2

    def test_braces_in_comments_ignored(self) -> None:
        assert _depth("/* { { */ {") == 1

    def test_braces_in_literals_ignored(self) -> None:
        assert _depth("s = \"{{\"; c = '}'; {") == 1

    def test_brace_terminating_identifier(self) -> None:
        assert _depth("if (x) {} else{ y(); }") == 0
        assert _depth("do{") == 1

    def test_call_depth_nested(self, calls) -> None:
        assert calls("void f() { if (a) { g(); } h(); }") == [
            ("f", 0),
            ("g", 2),
            ("h", 1),
        ]

    def test_call_after_unmatched_close(self, calls) -> None:
        assert calls("}} f();") == [("f", -2)]

    def test_summary_balanced(self) -> None:
        scanner = Scanner()
        feed_all(scanner, "{")
        assert not scanner.finish().balanced
