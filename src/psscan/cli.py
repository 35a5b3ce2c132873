"""Command-line interface for psmin, the PostScript minifier."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO

from psscan.errors import ScanError


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_files: list[str]
    output_file: Path | None
    width: int
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="psmin",
        description=(
            "Read PostScript source text and write equivalent code without "
            "comments or unnecessary spaces. With no files, read stdin; use - "
            "to name stdin among other files."
        ),
    )
    p.add_argument("input", nargs="*", default=[], help="Input files (default: stdin)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-w",
        "--width",
        type=int,
        default=None,
        metavar="COLS",
        help="Wrap output lines at COLS columns (default: 0, no wrapping)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover psmin.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump scanned tokens to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "psmin.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_files = list(args.input) or ["-"]

    input_dir = Path(".")
    if input_files[0] != "-":
        input_dir = Path(input_files[0]).parent
        if not input_dir.parts:
            input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Width: config < CLI
    width = 0
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_width = cfg_output.get("width")
        if isinstance(cfg_width, int):
            width = cfg_width
    if args.width is not None:
        width = args.width
    if width < 0:
        raise argparse.ArgumentTypeError(f"invalid width (expected >= 0): {width}")

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_files=input_files,
        output_file=output_file,
        width=width,
        debug=args.debug,
    )


def minify_files(options: CliOptions, out: BinaryIO) -> int:
    """Minify each input in order, each with its own scanner. Returns exit code."""
    from psscan.minify import minify

    trace = sys.stderr if options.debug else None
    for name in options.input_files:
        try:
            if name == "-":
                minify(sys.stdin.buffer, out, width=options.width, trace=trace)
            else:
                with open(name, "rb") as f:
                    minify(f, out, width=options.width, trace=trace)
        except ScanError as exc:
            if name == "-":
                print(exc.format("<stdin>"), file=sys.stderr)
            else:
                exc.source = Path(name).read_bytes()
                print(exc.format(name), file=sys.stderr)
            return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except (OSError, tomllib.TOMLDecodeError) as exc:
        print(f"error: config: {exc}", file=sys.stderr)
        return 2

    try:
        if options.output_file:
            with open(options.output_file, "wb") as out:
                return minify_files(options, out)
        result = minify_files(options, sys.stdout.buffer)
        sys.stdout.flush()
        return result
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
