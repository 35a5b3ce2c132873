"""Literal decoders and token value conversion."""

from __future__ import annotations

from psscan.errors import FormatError
from psscan.tokens import (
    BACKSLASH,
    LINE_FEED,
    RETURN,
    TokenType,
    hex_value,
    is_hex,
    is_octal,
)

# the escape dictionary
_ESCAPES = {
    ord("n"): LINE_FEED,
    ord("r"): RETURN,
    ord("t"): 9,
    ord("b"): 8,
    ord("f"): 12,
    BACKSLASH: BACKSLASH,
    ord("("): ord("("),
    ord(")"): ord(")"),
}

_VERBATIM = frozenset(
    [TokenType.DECIMAL, TokenType.RADIX, TokenType.REAL, TokenType.NAME, TokenType.LEFT, TokenType.RIGHT]
)


def decode_literal(s: bytes) -> bytes:
    """Decode the escapes in the inner text of a ``( )`` string literal.

    Standard escapes map through the escape table, ``\\ddd`` is an octal
    byte, and a backslash before CR, LF or CR-LF folds the line break out.
    Any other escaped byte is emitted as itself.
    """
    out = bytearray()
    n = len(s)
    i = 0
    while i < n:
        ch = s[i]
        i += 1
        if ch != BACKSLASH:
            out.append(ch)
            continue
        if i >= n:
            break

        ch = s[i]
        i += 1
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif i + 1 < n and is_octal(ch) and is_octal(s[i]) and is_octal(s[i + 1]):
            out.append((64 * (ch - 48) + 8 * (s[i] - 48) + (s[i + 1] - 48)) & 0xFF)
            i += 2
        elif ch == RETURN:
            if i < n and s[i] == LINE_FEED:
                i += 1
        elif ch == LINE_FEED:
            pass
        else:
            out.append(ch)
    return bytes(out)


def decode_hex(s: bytes) -> bytes:
    """Decode hex digit pairs, ignoring anything that is not a hex digit.

    An odd final digit is the high nibble of one more byte (``x`` -> ``x0``).
    """
    out = bytearray()
    cur = 0
    odd = False
    for b in s:
        if not is_hex(b):
            continue
        cur = 16 * cur + hex_value(b)
        odd = not odd
        if not odd:
            out.append(cur)
            cur = 0
    if odd:
        out.append(16 * cur)
    return bytes(out)


def _decode_a85_group(values: list[int]) -> bytes:
    """Decode a group of 2-5 base-85 digits (0-84) to 1-4 bytes."""
    group_len = len(values)

    # Pad to 5 values with 84 ('u' - '!')
    value = 0
    for digit in values + [84] * (5 - group_len):
        value = value * 85 + digit

    if value > 0xFFFFFFFF:
        chars = "".join(chr(v + 33) for v in values)
        raise ValueError(f"ascii85 group '{chars}' exceeds 2^32-1")

    return value.to_bytes(4, "big")[: group_len - 1]


def decode_a85(s: bytes) -> bytes:
    """Decode Adobe ascii85 text without its ``<~`` ``~>`` quotes.

    Whitespace is ignored, ``z`` stands for four zero bytes, and a final
    partial group is flushed. A lone trailing digit decodes to nothing.
    """
    out = bytearray()
    group: list[int] = []
    for b in s:
        if b == 122 and not group:  # 'z'
            out.extend(b"\x00\x00\x00\x00")
        elif 33 <= b <= 117:
            group.append(b - 33)
            if len(group) == 5:
                out.extend(_decode_a85_group(group))
                group = []
        elif b in b" \t\n\r\f\x00":
            continue
        else:
            raise ValueError(f"invalid ascii85 character {chr(b)!r}")
    if len(group) >= 2:
        out.extend(_decode_a85_group(group))
    return bytes(out)


# ----------------------------------------------------------------------
# Token values
# ----------------------------------------------------------------------


def _invalid(tt: TokenType, raw: bytes, want: str) -> FormatError:
    return FormatError(f"invalid format: {tt.name} token {raw.decode('latin-1')!r} is not {want}")


def int_value(tt: TokenType, raw: bytes) -> int:
    """Return the integer value of a numeric token; reals truncate toward zero."""
    text = raw.decode("latin-1")
    if tt == TokenType.DECIMAL:
        try:
            return int(text, 10)
        except ValueError as exc:
            raise FormatError(str(exc)) from exc

    if tt == TokenType.REAL:
        try:
            return int(float(text))
        except (ValueError, OverflowError) as exc:
            raise FormatError(str(exc)) from exc

    if tt == TokenType.RADIX:
        base_text, _, digits = text.partition("#")
        try:
            base = int(base_text, 10)
        except ValueError as exc:
            raise FormatError(str(exc)) from exc
        if not 2 <= base <= 36:
            raise FormatError(f"invalid radix {base} in {text!r}")
        value = 0
        for ch in digits.lower():
            d = int(ch) if ch.isdigit() else ord(ch) - 87
            if not 0 <= d < base:
                raise FormatError(f"invalid digit {ch!r} for base {base} in {text!r}")
            value = value * base + d
        return value

    raise _invalid(tt, raw, "an integer")


def float_value(tt: TokenType, raw: bytes) -> float:
    """Return the floating-point value of a numeric token."""
    if tt == TokenType.REAL:
        try:
            return float(raw.decode("latin-1"))
        except ValueError as exc:
            raise FormatError(str(exc)) from exc

    if tt in (TokenType.DECIMAL, TokenType.RADIX):
        z = int_value(tt, raw)
        try:
            return float(z)
        except OverflowError as exc:
            raise FormatError(str(exc)) from exc

    raise _invalid(tt, raw, "a number")


def bytes_value(tt: TokenType, raw: bytes) -> bytes:
    """Return the decoded value of a token.

    Numbers and punctuation come back as written, quoted names lose their
    slashes, comments lose their leading ``%`` and surrounding whitespace,
    and string literals are unquoted and decoded. Anything else is empty.

    Besides the type checks in int_value and float_value, this raises
    FormatError in one case: an ascii85 group whose value exceeds 2**32-1.
    Such text scans as a valid A85_STRING, but it has no byte value.
    """
    if tt in _VERBATIM:
        return raw
    if tt == TokenType.QUOTED_NAME:
        return raw.removeprefix(b"/")
    if tt == TokenType.IMMEDIATE_NAME:
        return raw.removeprefix(b"//")
    if tt == TokenType.COMMENT:
        return raw.lstrip(b"%").strip()
    if tt == TokenType.LIT_STRING:
        return decode_literal(raw[1:-1])
    if tt == TokenType.HEX_STRING:
        return decode_hex(raw[1:-1])
    if tt == TokenType.A85_STRING:
        try:
            return decode_a85(raw[2:-2])
        except ValueError as exc:
            raise FormatError(str(exc)) from exc
    return b""
