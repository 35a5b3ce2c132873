"""Token types, data structures, and byte classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    INVALID = auto()  # no current token

    COMMENT = auto()  # % foo
    LIT_STRING = auto()  # (foo)
    HEX_STRING = auto()  # <666f6f>
    A85_STRING = auto()  # <~AoDS~>

    DECIMAL = auto()  # 25
    RADIX = auto()  # 2#1101
    REAL = auto()  # -6.3e2

    NAME = auto()  # foo
    QUOTED_NAME = auto()  # /foo
    IMMEDIATE_NAME = auto()  # //foo

    LEFT = auto()  # {
    RIGHT = auto()  # }


# White-space characters (PLRM Table 3.1)
NUL = 0
TAB = 9
LINE_FEED = 10
FORM_FEED = 12
RETURN = 13
SPACE = 32

# Delimiters
L_PAREN = 40
R_PAREN = 41
LESS_THAN = 60
GREATER_THAN = 62
L_SQR_BRACKET = 91
R_SQR_BRACKET = 93
L_CRLY_BRACKET = 123
R_CRLY_BRACKET = 125
SOLIDUS = 47
PERCENT = 37

BACKSLASH = 92
TILDE = 126
HASH = 35

WHITE_SPACE = frozenset([NUL, TAB, LINE_FEED, FORM_FEED, RETURN, SPACE])

DELIMITERS = frozenset(
    [
        L_PAREN,
        R_PAREN,
        LESS_THAN,
        GREATER_THAN,
        L_SQR_BRACKET,
        R_SQR_BRACKET,
        L_CRLY_BRACKET,
        R_CRLY_BRACKET,
        SOLIDUS,
        PERCENT,
    ]
)


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and byte column, 0-based byte offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token with its verbatim source bytes."""

    type: TokenType
    raw: bytes
    span: Span

    @property
    def text(self) -> str:
        return self.raw.decode("latin-1")

    @property
    def pos(self) -> int:
        return self.span.start.offset

    @property
    def end(self) -> int:
        return self.span.end.offset

    def int_value(self) -> int:
        from psscan.decode import int_value

        return int_value(self.type, self.raw)

    def float_value(self) -> float:
        from psscan.decode import float_value

        return float_value(self.type, self.raw)

    def bytes_value(self) -> bytes:
        from psscan.decode import bytes_value

        return bytes_value(self.type, self.raw)

    def string_value(self) -> str:
        return self.bytes_value().decode("latin-1")


def is_space(b: int) -> bool:
    return b in WHITE_SPACE


def is_special(b: int) -> bool:
    """Return True if b is a self-delimiting character that ends a name."""
    return b in DELIMITERS


def is_digit(b: int) -> bool:
    return 48 <= b <= 57


def is_octal(b: int) -> bool:
    return 48 <= b <= 55


def is_hex(b: int) -> bool:
    return 48 <= b <= 57 or 97 <= b <= 102 or 65 <= b <= 70


def is_alnum(b: int) -> bool:
    return 48 <= b <= 57 or 97 <= b <= 122 or 65 <= b <= 90


def is_a85(b: int) -> bool:
    """Return True if b is in the ascii85 digit alphabet ``!`` through ``u``."""
    return 33 <= b <= 117


def hex_value(b: int) -> int:
    if b >= 97:
        return b - 97 + 10
    if b >= 65:
        return b - 65 + 10
    return b - 48
