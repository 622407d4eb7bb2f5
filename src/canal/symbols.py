"""Symbol table: interns identifier spellings to stable numeric IDs."""

from __future__ import annotations

from collections.abc import Iterable

KEYWORDS: tuple[str, ...] = (
    # Type specifiers
    "static", "const", "volatile", "register", "extern", "restrict",
    "char", "short", "int", "long", "float", "double", "void",
    "unsigned", "signed", "size_t", "ssize_t",
    "enum", "struct", "union", "typedef",
    # Constructs
    "for", "switch", "if", "else", "do", "while",
    # Labels
    "case",
    # Construct controls
    "break", "continue",
    # Function control
    "return", "goto",
    # Built-in functions
    "sizeof",
    # Misc
    "bool", "NULL",
)


class SymbolTable:
    """Keyword IDs occupy ``[0, K)``; user identifiers get ``K, K+1, ...`` in first-seen order.

    Lookups are exact and case-sensitive. Entries are never removed.
    """

    def __init__(self, extra_keywords: Iterable[str] = ()) -> None:
        keywords = list(KEYWORDS)
        for word in extra_keywords:
            if word not in keywords:
                keywords.append(word)
        self._keywords: tuple[str, ...] = tuple(keywords)
        self._identifiers: list[str] = []
        self._ids: dict[str, int] = {word: i for i, word in enumerate(self._keywords)}

    def intern(self, text: str) -> int:
        """Return the ID for text, allocating a new one on first sight."""
        idn = self._ids.get(text)
        if idn is None:
            idn = len(self._keywords) + len(self._identifiers)
            self._identifiers.append(text)
            self._ids[text] = idn
        return idn

    def is_keyword(self, idn: int) -> bool:
        return 0 <= idn < len(self._keywords)

    def resolve(self, idn: int) -> str:
        """Return the spelling for idn. Raises IndexError for IDs never handed out."""
        if self.is_keyword(idn):
            return self._keywords[idn]
        if idn < 0:
            raise IndexError(f"symbol id out of range: {idn}")
        return self._identifiers[idn - len(self._keywords)]

    @property
    def keywords(self) -> tuple[str, ...]:
        return self._keywords

    @property
    def identifiers(self) -> tuple[str, ...]:
        """User identifiers in first-seen order."""
        return tuple(self._identifiers)

    def __len__(self) -> int:
        return len(self._keywords) + len(self._identifiers)

    def __contains__(self, text: object) -> bool:
        return text in self._ids
