"""Minimal LSP server for canal: call sites and scan warnings as diagnostics."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from canal import __version__
from canal.lexer import Scanner

server = LanguageServer("canal-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _end_position(scanner: Scanner) -> Range:
    pos = Position(line=scanner.line, character=scanner.column)
    return Range(start=pos, end=pos)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    scanner = Scanner()
    diagnostics: list[Diagnostic] = []

    for site in scanner.feed_text(doc.source):
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=site.line, character=site.column),
                    end=Position(line=site.line, character=site.column + len(site.name)),
                ),
                message=f"call to {site.name} at depth {site.depth}",
                severity=DiagnosticSeverity.Hint,
                source="canal",
            )
        )

    summary = scanner.finish()
    if summary.unterminated is not None:
        diagnostics.append(
            Diagnostic(
                range=_end_position(scanner),
                message=f"input ends inside {summary.unterminated}",
                severity=DiagnosticSeverity.Warning,
                source="canal",
            )
        )
    if not summary.balanced:
        diagnostics.append(
            Diagnostic(
                range=_end_position(scanner),
                message=f"unbalanced braces: final depth {summary.depth}",
                severity=DiagnosticSeverity.Warning,
                source="canal",
            )
        )

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
