"""Tests for the --debug scan dump."""

from __future__ import annotations

import io

from canal.debug import dump_scan
from canal.lexer import Scanner
from canal.symbols import KEYWORDS

from .conftest import feed_all


class TestDumpScan:
    def test_lists_identifiers_with_ids(self) -> None:
        scanner = Scanner()
        feed_all(scanner, "alpha(); beta;")
        out = io.StringIO()
        dump_scan(scanner.symbols, scanner.finish(), file=out)
        text = out.getvalue()
        assert f"keywords: {len(KEYWORDS)}" in text
        assert "identifiers: 2" in text
        assert f"{len(KEYWORDS)}  alpha" in text
        assert "lines: 0" in text
        assert "warning" not in text

    def test_reports_unterminated_literal(self) -> None:
        scanner = Scanner()
        feed_all(scanner, 'x = "open')
        out = io.StringIO()
        dump_scan(scanner.symbols, scanner.finish(), file=out)
        assert "input ends inside string literal" in out.getvalue()
        assert "final state: STRING_LITERAL" in out.getvalue()
