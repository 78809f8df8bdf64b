"""Entry points that parse markup and write the formatted rendering."""

from __future__ import annotations

import io
from typing import Iterable, Optional, TextIO

from .dom_model import Node
from .models import FormatOptions
from .parse import Source, parse_document, parse_fragment
from .render import render_nodes


def _options(options: Optional[FormatOptions]) -> FormatOptions:
    return options if options is not None else FormatOptions()


def format_nodes(out: TextIO, nodes: Iterable[Node], options: Optional[FormatOptions] = None) -> None:
    """Render each node at nesting level 0, in order."""

    render_nodes(out, nodes, _options(options).indent)


def format_document(out: TextIO, source: Source, options: Optional[FormatOptions] = None) -> None:
    """Format ``source`` as a full HTML document.

    Raises :class:`htmlformat.parse.ParseError` before anything is written if
    the markup is rejected. Errors raised by ``out`` propagate unchanged.
    """

    root = parse_document(source)
    format_nodes(out, [root], options)


def format_fragment(out: TextIO, source: Source, options: Optional[FormatOptions] = None) -> None:
    """Format ``source`` as a fragment of body content."""

    nodes = parse_fragment(source)
    format_nodes(out, nodes, options)


def document_to_string(source: Source, options: Optional[FormatOptions] = None) -> str:
    buf = io.StringIO()
    format_document(buf, source, options)
    return buf.getvalue()


def fragment_to_string(source: Source, options: Optional[FormatOptions] = None) -> str:
    buf = io.StringIO()
    format_fragment(buf, source, options)
    return buf.getvalue()


__all__ = [
    "document_to_string",
    "format_document",
    "format_fragment",
    "format_nodes",
    "fragment_to_string",
]
