"""PostScript scanner: reads one token at a time from a byte stream."""

from __future__ import annotations

import io
from collections.abc import Iterator
from typing import BinaryIO

from psscan.cursor import ByteCursor
from psscan.errors import ScanError
from psscan.numbers import is_decimal, is_radix, is_real
from psscan.tokens import (
    BACKSLASH,
    FORM_FEED,
    GREATER_THAN,
    L_CRLY_BRACKET,
    L_PAREN,
    L_SQR_BRACKET,
    LESS_THAN,
    LINE_FEED,
    PERCENT,
    R_CRLY_BRACKET,
    R_PAREN,
    R_SQR_BRACKET,
    SOLIDUS,
    TILDE,
    Position,
    Span,
    Token,
    TokenType,
    is_a85,
    is_hex,
    is_space,
    is_special,
)


class Scanner:
    """Consume PostScript tokens from a binary input stream.

    Call advance() to move to the next token, then read the current token
    through type, raw, text, pos, end and the value methods.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._cursor = ByteCursor(stream)
        self._text = bytearray()
        self._type = TokenType.INVALID
        self._err: Exception | None = None
        self._eof = False
        self._start = self._cursor.position
        self._end = self._start

    @classmethod
    def from_bytes(cls, data: bytes) -> Scanner:
        return cls(io.BytesIO(data))

    def __iter__(self) -> Iterator[Token]:
        while self.advance():
            yield self.token

    def advance(self) -> bool:
        """Scan the next token.

        Returns True if a token is available and False at end of input.
        Raises ScanError for malformed tokens; stream errors propagate.
        Either way the error is kept in err until the next call.
        """
        self._text.clear()
        self._type = TokenType.INVALID
        self._err = None
        self._eof = False
        self._start = self._end = self._cursor.position

        try:
            while True:
                try:
                    b = self._cursor.read()
                except EOFError:
                    self._eof = True
                    return False
                if is_space(b):
                    self._start = self._cursor.position
                    continue

                self._text.append(b)
                self._dispatch(b)
                return True
        except (ScanError, OSError) as exc:
            self._err = exc
            raise
        finally:
            self._end = self._cursor.position

    # ------------------------------------------------------------------
    # Current token
    # ------------------------------------------------------------------

    @property
    def type(self) -> TokenType:
        return self._type

    @property
    def raw(self) -> bytes:
        """The verbatim bytes of the current token, or b""."""
        return bytes(self._text)

    @property
    def text(self) -> str:
        return self._text.decode("latin-1")

    @property
    def pos(self) -> int:
        """Starting byte offset of the current token."""
        return self._start.offset

    @property
    def end(self) -> int:
        """Ending byte offset (exclusive) of the current token."""
        return self._end.offset

    @property
    def start_position(self) -> Position:
        return self._start

    @property
    def end_position(self) -> Position:
        return self._end

    @property
    def err(self) -> Exception | None:
        """The error raised by the last advance(), if any."""
        return self._err

    @property
    def at_eof(self) -> bool:
        return self._eof

    @property
    def token(self) -> Token | None:
        if self._type == TokenType.INVALID:
            return None
        return Token(self._type, bytes(self._text), Span(self._start, self._end))

    def int_value(self) -> int:
        return self._snapshot().int_value()

    def float_value(self) -> float:
        return self._snapshot().float_value()

    def bytes_value(self) -> bytes:
        return self._snapshot().bytes_value()

    def string_value(self) -> str:
        return self._snapshot().string_value()

    def _snapshot(self) -> Token:
        return Token(self._type, bytes(self._text), Span(self._start, self._end))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _error(self, message: str, pos: Position | None = None) -> ScanError:
        if pos is None:
            pos = self._cursor.position
        return ScanError(message, pos)

    def _read(self, message: str) -> tuple[int, Position]:
        """Read a byte inside a literal; end of input is the given error."""
        pos = self._cursor.position
        try:
            return self._cursor.read(), pos
        except EOFError:
            raise self._error(message, self._start) from None

    # ------------------------------------------------------------------
    # Dispatch on the first byte
    # ------------------------------------------------------------------

    def _dispatch(self, b: int) -> None:
        if b == PERCENT:
            self._scan_comment()
        elif b == L_PAREN:
            self._scan_string()
        elif b in (L_SQR_BRACKET, R_SQR_BRACKET):
            self._type = TokenType.NAME  # self-delimiting names
        elif b == L_CRLY_BRACKET:
            self._type = TokenType.LEFT
        elif b == R_CRLY_BRACKET:
            self._type = TokenType.RIGHT
        elif b == LESS_THAN:
            # This might be different things, depending on what follows.
            c, _ = self._read("unterminated hex string")
            if c == TILDE:
                self._text.append(c)
                self._scan_a85()
                return
            self._cursor.unread()
            if c == LESS_THAN:
                self._scan_namelike(b)
            else:
                self._scan_hex()
        else:
            self._scan_namelike(b)

    # ------------------------------------------------------------------
    # Sub-scanners
    # ------------------------------------------------------------------

    def _scan_comment(self) -> None:
        """Read through the end of the line; the terminator is kept."""
        while True:
            try:
                b = self._cursor.read()
            except EOFError:
                break
            self._text.append(b)
            if b in (LINE_FEED, FORM_FEED):
                break
        self._type = TokenType.COMMENT

    def _scan_string(self) -> None:
        depth = 1  # the opening paren is already buffered
        esc = False
        while True:
            b, _ = self._read("unterminated string")
            if b == BACKSLASH:
                esc = not esc
            elif esc:
                esc = False
            elif b == L_PAREN:
                depth += 1
            elif b == R_PAREN:
                depth -= 1
            self._text.append(b)
            if b == R_PAREN and depth == 0:
                self._type = TokenType.LIT_STRING
                return

    def _scan_hex(self) -> None:
        while True:
            b, pos = self._read("unterminated hex string")
            self._text.append(b)
            if b == GREATER_THAN:
                self._type = TokenType.HEX_STRING
                return
            if not is_hex(b) and not is_space(b):
                raise self._error(f"invalid hex character {chr(b)!r}", pos)

    def _scan_a85(self) -> None:
        while True:
            b, pos = self._read("unterminated ascii85 string")
            self._text.append(b)
            if b == TILDE:
                try:
                    c = self._cursor.read()
                except EOFError:
                    c = -1
                if c != GREATER_THAN:
                    raise self._error("invalid closing ascii85 quote", pos)
                self._text.append(c)
                self._type = TokenType.A85_STRING
                return
            if not is_a85(b) and not is_space(b):
                raise self._error(f"invalid ascii85 character {chr(b)!r}", pos)

    def _scan_namelike(self, first: int) -> None:
        """Read and classify a name or number whose first byte is buffered."""
        # A name may begin with "/" or "//", but otherwise "/" ends a name.
        # "<<" and ">>" are self-delimiting names.
        doubled = first in (SOLIDUS, LESS_THAN, GREATER_THAN)
        while True:
            try:
                b = self._cursor.read()
            except EOFError:
                break

            if doubled:
                doubled = False
                if b == first:
                    self._text.append(b)
                    if b != SOLIDUS:
                        break
                    continue

            if is_space(b) or is_special(b):
                self._cursor.unread()
                break
            self._text.append(b)

        self._type = classify(bytes(self._text))


def classify(text: bytes) -> TokenType:
    """Classify the complete text of a name-like token."""
    if text.startswith(b"//"):
        return TokenType.IMMEDIATE_NAME
    if text.startswith(b"/"):
        return TokenType.QUOTED_NAME
    if is_real(text):
        return TokenType.REAL
    if is_decimal(text):
        return TokenType.DECIMAL
    if is_radix(text):
        return TokenType.RADIX
    return TokenType.NAME


def tokenize(source: bytes | str, encoding: str = "latin-1") -> list[Token]:
    """Convenience function: scan source completely and return the token list."""
    data = source.encode(encoding) if isinstance(source, str) else source
    scanner = Scanner.from_bytes(data)
    try:
        return list(scanner)
    except ScanError as exc:
        exc.source = data
        raise
