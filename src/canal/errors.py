"""Error types for the command surface and configuration layer."""

from __future__ import annotations

from pathlib import Path

USAGE_LINES = (
    "usage: {prog} [-i FILE] [--config FILE] [--debug]",
    "       {prog} [-i FILE] [--config FILE] [--debug] follow FUNCTION",
)


class UsageError(Exception):
    """Raised when the command line does not match a supported form."""

    def __init__(self, message: str, prog: str = "canal") -> None:
        self.message = message
        self.prog = prog
        super().__init__(message)

    def format(self) -> str:
        return "\n".join(line.format(prog=self.prog) for line in USAGE_LINES)


class ConfigError(Exception):
    """Raised when a config file cannot be parsed or holds a value of the wrong type."""

    def __init__(self, message: str, path: Path) -> None:
        self.message = message
        self.path = path
        super().__init__(self.format())

    def format(self) -> str:
        return f"error: {self.path}: {self.message}"
