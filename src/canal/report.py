"""Call-site reporter: one output line per call site, in discovery order."""

from __future__ import annotations

import sys
from typing import TextIO

from canal.tokens import CallSite

DEFAULT_INDENT = "\t"


def format_call_site(site: CallSite, indent: str = DEFAULT_INDENT) -> str:
    """Return ``<line>\\t<indent * depth><name>``.

    Negative depths (unbalanced input) produce no indentation.
    """
    return f"{site.line}\t{indent * max(site.depth, 0)}{site.name}"


class Reporter:
    """Write formatted call sites to a text stream as they are found."""

    def __init__(self, file: TextIO | None = None, indent: str = DEFAULT_INDENT) -> None:
        self._file = file if file is not None else sys.stdout
        self.indent = indent
        self.count = 0

    def report(self, site: CallSite) -> None:
        self._file.write(format_call_site(site, self.indent) + "\n")
        self.count += 1
