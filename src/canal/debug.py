"""--debug dump of the symbol table and final scanner state to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from canal.lexer import ScanSummary
from canal.symbols import SymbolTable


def dump_scan(symbols: SymbolTable, summary: ScanSummary, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable summary of a finished scan to *file*."""
    k = len(symbols.keywords)
    file.write(f"keywords: {k} (ids 0..{k - 1})\n")
    file.write(f"identifiers: {summary.identifiers}\n")
    for i, name in enumerate(symbols.identifiers):
        file.write(f"  {k + i:>5}  {name}\n")
    file.write(f"lines: {summary.lines}\n")
    file.write(f"final depth: {summary.depth}\n")
    file.write(f"final state: {summary.state.name}\n")
    if summary.unterminated is not None:
        file.write(f"warning: input ends inside {summary.unterminated}\n")
    if not summary.balanced:
        file.write(f"warning: unbalanced braces (depth {summary.depth})\n")
