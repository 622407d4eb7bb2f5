"""Call-site records, source positions, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Scanner position, 0-based line and column."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class CallSite:
    """An identifier used as a function-call target."""

    line: int
    column: int  # column of the first identifier character
    depth: int
    name: str
    symbol_id: int


_IDENT_START = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz_")
_DIGITS = frozenset("0123456789")


def is_ident_start(ch: str) -> bool:
    """Return True if ch can begin an identifier (ASCII letter or underscore)."""
    return ch in _IDENT_START


def is_ident_char(ch: str) -> bool:
    """Return True if ch can continue an identifier."""
    return ch in _IDENT_START or ch in _DIGITS
