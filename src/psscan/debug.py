"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from psscan.tokens import Token


def dump_token(token: Token, *, file: TextIO = sys.stderr) -> None:
    """Print one token as ``line:col [pos,end) TYPE raw`` to *file*."""
    start = token.span.start
    file.write(f"{start.line}:{start.column} [{token.pos},{token.end}) {token.type.name} {token.text!r}\n")

