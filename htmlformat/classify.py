"""Tag classification used by the renderer."""

from __future__ import annotations

from typing import Optional

# Elements that never have a closing tag or children.
VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "command", "embed", "hr", "img", "input",
    "keygen", "link", "meta", "param", "source", "track", "wbr",
})

# Phrasing content that may stay on the same line as adjacent text.
INLINE_ELEMENTS = frozenset({
    "b", "i", "u", "s", "a", "br", "code", "em", "time",
    "span", "strong", "small", "mark", "del", "ins", "sub", "sup", "q", "cite",
    "dfn", "abbr", "data", "var", "samp", "kbd", "label", "button", "select",
    "textarea", "img", "map", "object", "iframe", "audio", "video", "canvas",
    "meter", "progress", "math",
})

# Text children are kept line for line and only reindented.
RAW_CONTENT_ELEMENTS = frozenset({"script", "style"})

# The parser keeps the text of these undecoded, so it is written unescaped.
# <plaintext> also swallows the rest of the input, closing tags included.
RAWTEXT_ELEMENTS = frozenset({"iframe", "noembed", "noframes", "plaintext", "xmp"})

# Everything beneath these is written verbatim.
LITERAL_ELEMENTS = frozenset({"pre", "code"})


def _norm(tag: Optional[str]) -> str:
    return tag.lower() if tag else ""


def is_void(tag: Optional[str]) -> bool:
    return _norm(tag) in VOID_ELEMENTS


def is_inline(tag: Optional[str]) -> bool:
    return _norm(tag) in INLINE_ELEMENTS


def is_raw_content(tag: Optional[str]) -> bool:
    return _norm(tag) in RAW_CONTENT_ELEMENTS


def is_rawtext(tag: Optional[str]) -> bool:
    return _norm(tag) in RAWTEXT_ELEMENTS


def is_literal(tag: Optional[str]) -> bool:
    return _norm(tag) in LITERAL_ELEMENTS


__all__ = [
    "INLINE_ELEMENTS",
    "LITERAL_ELEMENTS",
    "RAW_CONTENT_ELEMENTS",
    "RAWTEXT_ELEMENTS",
    "VOID_ELEMENTS",
    "is_inline",
    "is_literal",
    "is_raw_content",
    "is_rawtext",
    "is_void",
]
