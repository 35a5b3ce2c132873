"""Shared test fixtures and helpers."""

from __future__ import annotations

import io

import pytest

from psscan.scanner import Scanner, tokenize
from psscan.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the token list."""

    def _lex(source: bytes | str) -> list[Token]:
        return tokenize(source)

    return _lex


@pytest.fixture
def scanner():
    """Return a helper that builds a Scanner over in-memory source."""

    def _scanner(source: bytes | str) -> Scanner:
        data = source.encode("latin-1") if isinstance(source, str) else source
        return Scanner(io.BytesIO(data))

    return _scanner


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_raw(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the verbatim token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the decoded token values match the expected list."""
    actual = [t.string_value() for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
