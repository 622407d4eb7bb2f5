"""Command-line interface for canal."""

from __future__ import annotations

import argparse
import contextlib
import io
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, NoReturn, TextIO

from canal.errors import ConfigError, UsageError
from canal.lexer import ScanSummary, Scanner, scan_stream
from canal.report import DEFAULT_INDENT, Reporter
from canal.symbols import SymbolTable

CONFIG_NAME = "canal.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    follow: str | None
    extra_keywords: list[str]
    indent: str
    debug: bool


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises UsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, self.prog)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = _ArgumentParser(
        prog="canal",
        description="List the function calls in C-style source read from stdin",
    )
    p.add_argument("command", nargs="?", metavar="follow", help="Restrict output to one function")
    p.add_argument("function", nargs="?", metavar="FUNCTION", help="Function to follow")
    p.add_argument("-i", "--input", metavar="FILE", help="Input file (default: stdin)")
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--debug", action="store_true", help="Dump symbol table to stderr")
    return p


def resolve_follow(args: argparse.Namespace, prog: str = "canal") -> str | None:
    """Validate the positional form and return the follow target, if any."""
    if args.command is None:
        return None
    if args.command != "follow":
        raise UsageError(f"unknown command: {args.command}", prog)
    if args.function is None:
        raise UsageError("follow requires a function name", prog)
    return args.function


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(str(exc), path) from exc


def resolve_options(args: argparse.Namespace, search_dir: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    follow = resolve_follow(args)

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir if search_dir is not None else Path("."))
    source = config_path if config_path is not None else Path(CONFIG_NAME)

    # Extra keywords: config only
    extra_keywords: list[str] = []
    cfg_scanner = config.get("scanner")
    if isinstance(cfg_scanner, dict):
        cfg_keywords = cfg_scanner.get("extra_keywords", [])
        if not isinstance(cfg_keywords, list) or not all(isinstance(k, str) for k in cfg_keywords):
            raise ConfigError("scanner.extra_keywords must be a list of strings", source)
        extra_keywords.extend(cfg_keywords)

    # Indent marker: config only
    indent = DEFAULT_INDENT
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict) and "indent" in cfg_output:
        if not isinstance(cfg_output["indent"], str):
            raise ConfigError("output.indent must be a string", source)
        indent = cfg_output["indent"]

    # Follow target: config < CLI
    if follow is None:
        cfg_follow = config.get("follow")
        if isinstance(cfg_follow, dict) and "function" in cfg_follow:
            if not isinstance(cfg_follow["function"], str):
                raise ConfigError("follow.function must be a string", source)
            follow = cfg_follow["function"]

    input_file = Path(args.input) if args.input else None

    return CliOptions(
        input_file=input_file,
        follow=follow,
        extra_keywords=extra_keywords,
        indent=indent,
        debug=args.debug,
    )


def _open_input(options: CliOptions) -> contextlib.AbstractContextManager[TextIO]:
    if options.input_file is None:
        # Decode stdin the same way as an input file.
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(encoding="utf-8", errors="replace", newline="")
        return contextlib.nullcontext(sys.stdin)
    return open(options.input_file, encoding="utf-8", errors="replace", newline="")


def run_scan(options: CliOptions, out: TextIO) -> ScanSummary:
    """Scan the configured input, writing one line per call site to *out*."""
    from canal.debug import dump_scan

    scanner = Scanner(options.follow, SymbolTable(options.extra_keywords))
    reporter = Reporter(out, options.indent)

    with _open_input(options) as stream:
        for site in scan_stream(stream, scanner):
            reporter.report(site)

    summary = scanner.finish()
    if options.debug:
        dump_scan(scanner.symbols, summary, file=sys.stderr)
    return summary


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
        options = resolve_options(args)
    except UsageError as exc:
        print(exc.format(), file=sys.stderr)
        return 1
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    try:
        run_scan(options, sys.stdout)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    return 0
