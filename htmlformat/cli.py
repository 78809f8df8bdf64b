"""Command-line interface for htmlformat."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional

from pydantic import ValidationError

from .formatter import document_to_string, format_document, format_fragment, fragment_to_string
from .io_utils import read_text, warn, write_text
from .models import FormatOptions, load_options
from .parse import ParseError

VERSION = "0.1.0"


def _resolve_options(args: argparse.Namespace) -> FormatOptions:
    options = load_options(Path(args.config)) if args.config else FormatOptions()
    indent = "\t" if args.tabs else args.indent
    if indent is None:
        return options
    try:
        return FormatOptions(indent=indent)
    except ValidationError as exc:
        raise SystemExit(f"Invalid --indent value {indent!r}: {exc}") from exc


def _format_stream(args: argparse.Namespace, options: FormatOptions) -> None:
    if args.check or args.write:
        raise SystemExit("--check and --write need at least one FILE.")
    formatter = format_document if args.document else format_fragment
    try:
        formatter(sys.stdout, sys.stdin.buffer.read(), options)
        sys.stdout.flush()
    except BrokenPipeError:
        # Keep the interpreter from flushing into the closed pipe again at exit.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        raise SystemExit(1)
    except (ParseError, OSError) as exc:
        raise SystemExit(f"failed to format: {exc}") from exc


def _format_files(args: argparse.Namespace, options: FormatOptions) -> None:
    to_string: Callable[..., str] = document_to_string if args.document else fragment_to_string
    unformatted: list[Path] = []

    for path in args.files:
        try:
            original = read_text(path)
            formatted = to_string(original, options)
        except FileNotFoundError as exc:
            raise SystemExit(f"Input file not found: {path}") from exc
        except (ParseError, OSError, UnicodeDecodeError) as exc:
            raise SystemExit(f"failed to format {path}: {exc}") from exc

        changed = formatted != original
        if args.check:
            if changed:
                warn(f"would reformat {path}")
                unformatted.append(path)
        elif args.write:
            if changed:
                try:
                    write_text(path, formatted)
                except OSError as exc:
                    raise SystemExit(f"failed to format {path}: {exc}") from exc
                warn(f"reformatted {path}")
        else:
            sys.stdout.write(formatted)

    if unformatted:
        warn(f"{len(unformatted)} file(s) would be reformatted")
        raise SystemExit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlformat",
        description="Format HTML into a canonical, indented layout.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"htmlformat {VERSION}",
        help="Show the htmlformat version and exit.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        metavar="FILE",
        help="HTML files to format. Reads stdin and writes stdout when omitted.",
    )
    parser.add_argument(
        "--document",
        action="store_true",
        help="Parse input as a whole document instead of a fragment.",
    )
    indent_group = parser.add_mutually_exclusive_group()
    indent_group.add_argument(
        "--indent",
        default=None,
        help="Indentation string used per nesting level (default: two spaces).",
    )
    indent_group.add_argument(
        "--tabs",
        action="store_true",
        help="Indent with a tab character.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file with formatting options (e.g. indent).",
    )
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--check",
        action="store_true",
        help="Report files that are not formatted and exit with status 1.",
    )
    mode_group.add_argument(
        "--write",
        action="store_true",
        help="Rewrite files in place.",
    )
    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    options = _resolve_options(args)
    if args.files:
        _format_files(args, options)
    else:
        _format_stream(args, options)


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
