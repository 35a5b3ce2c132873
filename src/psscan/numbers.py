"""Numeric shape matchers used to classify name-like tokens.

Each matcher takes the complete token text and answers whether the whole
text has the given shape. None of them check digit validity beyond the
shape: ``2#ZZZZ`` is a radix number here and only fails when its value is
decoded.
"""

from __future__ import annotations

from psscan.tokens import HASH, is_alnum, is_digit

_MINUS = 45
_PLUS = 43
_POINT = 46
_EXP = frozenset(b"eE")


def _digits(text: bytes, i: int) -> int:
    """Return the index just past the run of decimal digits starting at i."""
    n = len(text)
    while i < n and is_digit(text[i]):
        i += 1
    return i


def is_real(text: bytes) -> bool:
    """Match ``-?(D+ EXP | (D*.D+ | D+.) EXP?)`` where EXP is ``[eE][-+]?D+``.

    Examples: -.002 34.5 -3.62 123.6e10 1.0E-5 1E6 -1. 0.0
    A bare integer (no point, no exponent) does not match.
    """
    n = len(text)
    i = 0
    if i < n and text[i] == _MINUS:
        i += 1

    j = _digits(text, i)
    whole = j - i
    i = j

    if i < n and text[i] == _POINT:
        j = _digits(text, i + 1)
        frac = j - i - 1
        i = j
        if whole == 0 and frac == 0:
            return False
    elif whole == 0:
        return False
    elif i >= n or text[i] not in _EXP:
        # Without a point the exponent is mandatory
        return False

    if i < n and text[i] in _EXP:
        i += 1
        if i < n and text[i] in (_MINUS, _PLUS):
            i += 1
        j = _digits(text, i)
        if j == i:
            return False
        i = j

    return i == n


def is_decimal(text: bytes) -> bool:
    """Match a signed decimal integer: 123 -98 43445 0 +17"""
    i = 0
    if text[:1] in (b"-", b"+"):
        i = 1
    return len(text) > i and _digits(text, i) == len(text)


def is_radix(text: bytes) -> bool:
    """Match radix notation ``D+#[0-9A-Za-z]+``: 8#1777 16#FFFE 2#1000

    No sign is accepted, following ghostscript.
    """
    i = _digits(text, 0)
    if i == 0 or i >= len(text) or text[i] != HASH:
        return False
    rest = text[i + 1 :]
    return len(rest) > 0 and all(is_alnum(b) for b in rest)
