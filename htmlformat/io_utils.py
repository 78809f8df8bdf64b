"""Helpers for text IO and stderr diagnostics."""

from __future__ import annotations

import sys
from pathlib import Path


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def write_text(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
