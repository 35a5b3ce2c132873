"""Minimal LSP server for PostScript, diagnostics only."""

from __future__ import annotations

import logging

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

from psscan import __version__
from psscan.errors import FormatError, ScanError
from psscan.scanner import Scanner
from psscan.tokens import TokenType

logger = logging.getLogger(__name__)

server = LanguageServer("psscan-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _position(data: bytes, offset: int) -> Position:
    """Convert a byte offset in UTF-8 data to a 0-based LSP position."""
    offset = min(offset, len(data))
    line = data.count(b"\n", 0, offset)
    line_start = data.rfind(b"\n", 0, offset) + 1
    character = len(data[line_start:offset].decode("utf-8", errors="replace"))
    return Position(line=line, character=character)


def collect_diagnostics(source: str) -> list[Diagnostic]:
    """Scan source to the end, reporting every scan error and bad radix number."""
    data = source.encode("utf-8")
    scanner = Scanner.from_bytes(data)
    diagnostics: list[Diagnostic] = []

    while True:
        try:
            if not scanner.advance():
                break
        except ScanError as exc:
            # Errors are not sticky; scanning resumes after the bad byte
            offset = exc.position.offset
            diagnostics.append(
                Diagnostic(
                    range=Range(
                        start=_position(data, offset),
                        end=_position(data, offset + 1),
                    ),
                    message=exc.message,
                    severity=DiagnosticSeverity.Error,
                    source="psscan",
                )
            )
            continue

        if scanner.type == TokenType.RADIX:
            try:
                scanner.int_value()
            except FormatError as exc:
                diagnostics.append(
                    Diagnostic(
                        range=Range(
                            start=_position(data, scanner.pos),
                            end=_position(data, scanner.end),
                        ),
                        message=str(exc),
                        severity=DiagnosticSeverity.Warning,
                        source="psscan",
                    )
                )

    return diagnostics


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics = collect_diagnostics(doc.source)
    logger.debug("%s: %d diagnostic(s)", uri, len(diagnostics))
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
