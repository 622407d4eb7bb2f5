"""canal: list the function calls in C-style source text."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from canal.tokens import CallSite

__version__ = "0.1.0"


def scan(source: str, follow: str | None = None) -> list[CallSite]:
    """Scan source text and return its call sites in discovery order."""
    from canal.lexer import scan as _scan

    return _scan(source, follow)
