"""Strip comments and unnecessary white space from PostScript source."""

from __future__ import annotations

from typing import BinaryIO, TextIO

from psscan.debug import dump_token
from psscan.scanner import Scanner
from psscan.spacing import need_space_between
from psscan.tokens import Token, TokenType


def _needs_space(prev: Token | None, token: Token) -> bool:
    if prev is None:
        return False
    # "/" then "/a" would re-scan as the immediate name "//a"
    if prev.raw == b"/" and token.raw.startswith(b"/"):
        return True
    return need_space_between(prev.type, token.type)


def minify(
    stream: BinaryIO,
    out: BinaryIO,
    *,
    width: int = 0,
    trace: TextIO | None = None,
) -> None:
    """Copy the tokens of *stream* to *out* without comments or spare spaces.

    Each token's raw bytes are written to the binary stream *out*. With a
    positive width, a token that would run past that column (counting the
    space before it) starts a new line. Scan and stream errors propagate.
    """
    scanner = Scanner(stream)
    col = 0
    prev: Token | None = None
    for token in scanner:
        if trace is not None:
            dump_token(token, file=trace)
        if token.type == TokenType.COMMENT:
            continue

        sep = 1 if _needs_space(prev, token) else 0
        if width > 0 and col > 0 and col + sep + len(token.raw) > width:
            out.write(b"\n")
            col = 0
        elif sep:
            out.write(b" ")
            col += 1

        out.write(token.raw)
        col += len(token.raw)
        prev = token
    out.write(b"\n")
