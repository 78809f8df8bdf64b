"""Whitespace and character helpers for text runs."""

from __future__ import annotations

import html
import re
import textwrap
import unicodedata
from typing import List

# HTML whitespace; U+00A0 and friends are content.
HTML_WHITESPACE = " \t\n\r\f"
WHITESPACE_RE = re.compile(r"[ \t\n\r\f]+")


def first_char(text: str) -> str:
    return text[:1]


def last_char(text: str) -> str:
    return text[-1:]


def strip_space(text: str) -> str:
    return text.strip(HTML_WHITESPACE)


def is_space(ch: str) -> bool:
    return bool(ch) and ch in HTML_WHITESPACE


def is_punct(ch: str) -> bool:
    """True for characters in a Unicode punctuation category (Pc, Pd, Ps, ...)."""

    return bool(ch) and unicodedata.category(ch).startswith("P")


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces.

    A single leading or trailing space survives when the input had any
    whitespace at that end, so word boundaries next to inline elements are
    kept while run lengths and newlines are dropped.
    """

    if not text:
        return ""
    body = WHITESPACE_RE.sub(" ", strip_space(text))
    if not body:
        return ""
    leading = " " if is_space(first_char(text)) else ""
    trailing = " " if is_space(last_char(text)) else ""
    return f"{leading}{body}{trailing}"


def block_lines(text: str) -> List[str]:
    """Split a raw text block into lines with its common margin removed.

    Leading blank lines and trailing whitespace are dropped; whitespace-only
    lines come back empty.
    """

    lines = text.rstrip().splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    return textwrap.dedent("\n".join(lines)).splitlines()


def escape_text(text: str) -> str:
    return html.escape(text, quote=False)


def escape_attr(value: str) -> str:
    return html.escape(value, quote=True)


__all__ = [
    "block_lines",
    "collapse_whitespace",
    "escape_attr",
    "escape_text",
    "first_char",
    "is_punct",
    "is_space",
    "last_char",
    "strip_space",
]
