"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from canal.lexer import Scanner
from canal.tokens import CallSite


@pytest.fixture
def scanner():
    """Return a fresh unrestricted Scanner."""
    return Scanner()


@pytest.fixture
def calls():
    """Return a helper that scans source and returns (name, depth) pairs."""
    from canal.lexer import scan

    def _calls(source: str, follow: str | None = None) -> list[tuple[str, int]]:
        return [(s.name, s.depth) for s in scan(source, follow)]

    return _calls


def assert_names(sites: list[CallSite], expected: list[str]) -> None:
    """Assert that the call-site names match the expected list."""
    actual = [s.name for s in sites]
    assert actual == expected, f"Expected {expected}, got {actual}"


def feed_all(scanner: Scanner, source: str) -> list[CallSite]:
    """Feed source to scanner and signal end of input."""
    sites = scanner.feed_text(source)
    scanner.finish()
    return sites
