"""Lexical scanner for PostScript source text."""

from __future__ import annotations

from psscan.errors import FormatError, ScanError
from psscan.scanner import Scanner, tokenize
from psscan.spacing import need_space_between
from psscan.tokens import Position, Span, Token, TokenType

__version__ = "0.1.0"

__all__ = [
    "FormatError",
    "Position",
    "ScanError",
    "Scanner",
    "Span",
    "Token",
    "TokenType",
    "need_space_between",
    "tokenize",
]
