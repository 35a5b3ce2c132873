"""Offset-tracking byte reader with one byte of pushback."""

from __future__ import annotations

from io import DEFAULT_BUFFER_SIZE
from typing import BinaryIO

from psscan.tokens import LINE_FEED, Position


class ByteCursor:
    """Read single bytes from a binary stream, counting what was consumed.

    End of input raises EOFError. Errors from the stream itself propagate
    unchanged.
    """

    def __init__(self, stream: BinaryIO, bufsize: int = DEFAULT_BUFFER_SIZE) -> None:
        self._stream = stream
        self._bufsize = bufsize
        self._buf = b""
        self._idx = 0
        self._last = -1  # last byte read, -1 if none can be unread
        self._pushed = False
        self._offset = 0
        self._line = 1
        self._col = 1
        self._prev = (1, 1)  # (line, col) before the last read

    @property
    def offset(self) -> int:
        """Total number of bytes consumed so far."""
        return self._offset

    @property
    def position(self) -> Position:
        return Position(self._line, self._col, self._offset)

    def read(self) -> int:
        if self._pushed:
            self._pushed = False
            b = self._last
        else:
            if self._idx >= len(self._buf):
                chunk = self._stream.read(self._bufsize)
                if not chunk:
                    self._last = -1
                    raise EOFError
                self._buf = chunk
                self._idx = 0
            b = self._buf[self._idx]
            self._idx += 1
            self._last = b

        self._offset += 1
        self._prev = (self._line, self._col)
        if b == LINE_FEED:
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return b

    def unread(self) -> None:
        """Push back the byte returned by the last read."""
        if self._pushed or self._last < 0:
            raise RuntimeError("unread without a preceding read")
        self._pushed = True
        self._offset -= 1
        self._line, self._col = self._prev
