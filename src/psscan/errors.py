"""Error types with formatted source context."""

from __future__ import annotations

from psscan.tokens import Position


class ScanError(Exception):
    """Raised when a token is malformed, with position and optional source."""

    def __init__(self, message: str, position: Position, source: bytes | None = None) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(message)

    def format(self, filename: str = "<stdin>") -> str:
        col = self.position.column
        header = (
            f"error: {self.message}\n"
            f"{' ' * (len(str(self.position.line)) + 1)}--> {filename}:{self.position.line}:{col}"
        )
        if self.source is None:
            return header

        lines = self.source.split(b"\n")
        line_idx = self.position.line - 1

        # Build the source line (strip trailing CR for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip(b"\r").decode("latin-1")
        else:
            source_line = ""

        # Unterminated literals may run past the end of the line
        underline_len = max(1, min(2, len(source_line) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"{header}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class FormatError(ValueError):
    """Raised when a token's value cannot be decoded in the requested form."""
