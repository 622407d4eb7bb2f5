"""Streaming scanner: a character-at-a-time state machine that finds call sites."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import TextIO

from canal.follow import FollowFilter
from canal.symbols import SymbolTable
from canal.tokens import CallSite, Position, is_ident_char, is_ident_start


class State(Enum):
    NORMAL = auto()
    COMMENT_START = auto()  # seen '/'
    COMMENT_BODY = auto()  # inside /* ... */
    COMMENT_ENDING = auto()  # seen '*' inside a comment
    SKIP_TO_EOL = auto()  # '#' line
    IDENTIFIER = auto()
    CHAR_LITERAL = auto()
    STRING_LITERAL = auto()


_LITERAL_QUOTES = {State.CHAR_LITERAL: "'", State.STRING_LITERAL: '"'}

_UNTERMINATED = {
    State.COMMENT_BODY: "comment",
    State.COMMENT_ENDING: "comment",
    State.CHAR_LITERAL: "character literal",
    State.STRING_LITERAL: "string literal",
}


@dataclass(frozen=True, slots=True)
class ScanSummary:
    """Scanner state at end of input."""

    lines: int
    depth: int
    state: State
    identifiers: int

    @property
    def unterminated(self) -> str | None:
        """Name of the construct the input ended inside, if any."""
        return _UNTERMINATED.get(self.state)

    @property
    def balanced(self) -> bool:
        return self.depth == 0


class Scanner:
    """Scan C-style source one character at a time, reporting call sites.

    All scanning state is owned by the instance, so independent scans need
    independent scanners (or a ``reset()`` between them).
    """

    def __init__(self, follow: str | None = None, symbols: SymbolTable | None = None) -> None:
        self._extra_keywords = symbols.keywords if symbols is not None else ()
        self.symbols = symbols if symbols is not None else SymbolTable()
        self.follow = FollowFilter(follow)
        self.line = 0
        self.column = 0
        self.depth = 0
        self.state = State.NORMAL
        self._escape = False
        self._buffer: list[str] = []
        self._ident_start = Position(0, 0)

    def reset(self) -> None:
        """Return to the initial state with a fresh symbol table."""
        self.symbols = SymbolTable(self._extra_keywords)
        self.follow.reset()
        self.line = 0
        self.column = 0
        self.depth = 0
        self.state = State.NORMAL
        self._escape = False
        self._buffer.clear()

    @property
    def position(self) -> Position:
        return Position(self.line, self.column)

    # ------------------------------------------------------------------
    # Feeding
    # ------------------------------------------------------------------

    def feed(self, ch: str) -> CallSite | None:
        """Consume one character; return the call site it completes, if any."""
        if self.column == 0 and ch == "#":
            self.state = State.SKIP_TO_EOL

        site = self._step(ch)

        if ch == "\n":
            self.line += 1
            self.column = 0
            if self.state == State.SKIP_TO_EOL:
                self.state = State.NORMAL
        else:
            self.column += 1
        return site

    def feed_text(self, text: str) -> list[CallSite]:
        """Consume a chunk of text and return the call sites found in it."""
        sites = []
        for ch in text:
            site = self.feed(ch)
            if site is not None:
                sites.append(site)
        return sites

    def finish(self) -> ScanSummary:
        """Signal end of input. A pending identifier is discarded."""
        if self.state == State.IDENTIFIER:
            self._buffer.clear()
            self.state = State.NORMAL
        return ScanSummary(
            lines=self.line,
            depth=self.depth,
            state=self.state,
            identifiers=len(self.symbols.identifiers),
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _step(self, ch: str) -> CallSite | None:
        state = self.state

        if state == State.NORMAL:
            self._step_normal(ch)
        elif state == State.IDENTIFIER:
            if is_ident_char(ch):
                self._buffer.append(ch)
            else:
                site = self._finish_identifier(ch)
                self.state = State.NORMAL
                # The terminator still counts as a Normal-state character.
                self._step_normal(ch)
                return site
        elif state == State.COMMENT_START:
            self.state = State.COMMENT_BODY if ch == "*" else State.NORMAL
        elif state == State.COMMENT_BODY:
            if ch == "*":
                self.state = State.COMMENT_ENDING
        elif state == State.COMMENT_ENDING:
            if ch == "/":
                self.state = State.NORMAL
            elif ch != "*":
                self.state = State.COMMENT_BODY
        elif state in _LITERAL_QUOTES:
            if self._escape:
                self._escape = False
            elif ch == "\\":
                self._escape = True
            elif ch == _LITERAL_QUOTES[state]:
                self.state = State.NORMAL
        # SKIP_TO_EOL ignores everything; the newline is handled by feed()
        return None

    def _step_normal(self, ch: str) -> None:
        if ch == "/":
            self.state = State.COMMENT_START
        elif is_ident_start(ch):
            self._buffer = [ch]
            self._ident_start = self.position
            self.state = State.IDENTIFIER
        elif ch == "'":
            self._escape = False
            self.state = State.CHAR_LITERAL
        elif ch == '"':
            self._escape = False
            self.state = State.STRING_LITERAL
        elif ch == "{":
            self.depth += 1
        elif ch == "}":
            self.depth -= 1

    def _finish_identifier(self, terminator: str) -> CallSite | None:
        """Intern the buffered identifier and decide whether it is a reportable call."""
        text = "".join(self._buffer)
        self._buffer = []
        idn = self.symbols.intern(text)

        if terminator != "(" or self.symbols.is_keyword(idn):
            return None
        if not self.follow.evaluate(text, self.depth):
            return None
        return CallSite(
            line=self._ident_start.line,
            column=self._ident_start.column,
            depth=self.depth,
            name=self.symbols.resolve(idn),
            symbol_id=idn,
        )


def scan(
    source: str,
    follow: str | None = None,
    symbols: SymbolTable | None = None,
) -> list[CallSite]:
    """Convenience function: scan source text and return its call sites in order."""
    scanner = Scanner(follow, symbols)
    sites = scanner.feed_text(source)
    scanner.finish()
    return sites


def scan_stream(stream: TextIO, scanner: Scanner) -> Iterator[CallSite]:
    """Read stream one character at a time until end of input, yielding call sites.

    The caller signals end of input with ``scanner.finish()``.
    """
    while ch := stream.read(1):
        site = scanner.feed(ch)
        if site is not None:
            yield site
