"""Which adjacent token pairs must stay separated by white space."""

from __future__ import annotations

from psscan.tokens import TokenType

_MERGING = frozenset([TokenType.DECIMAL, TokenType.RADIX, TokenType.REAL, TokenType.NAME])

# prev type -> next types that would merge with it if written without a space
_SPACES: dict[TokenType, frozenset[TokenType]] = {
    TokenType.DECIMAL: _MERGING,
    TokenType.RADIX: _MERGING,
    TokenType.REAL: _MERGING,
    TokenType.NAME: _MERGING,
    TokenType.QUOTED_NAME: _MERGING,
    TokenType.IMMEDIATE_NAME: _MERGING,
}


def need_space_between(prev: TokenType, next_: TokenType) -> bool:
    """Return True if a token of type prev followed by one of type next_
    needs white space between them to re-scan as the same two tokens."""
    return next_ in _SPACES.get(prev, ())
