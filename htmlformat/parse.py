"""Build :class:`Node` trees from markup with BeautifulSoup and html5lib.

Documents go through the full html5lib tree construction, so ``html``,
``head`` and ``body`` are inferred and unclosed elements are closed. Fragments
are parsed in the "in body" insertion mode, as if they were the children of a
context element without tag semantics of its own; the returned top-level nodes
are detached from that synthetic parent.
"""

from __future__ import annotations

import warnings
from typing import IO, Iterable, List, Union

from bs4 import BeautifulSoup, FeatureNotFound, MarkupResemblesLocatorWarning
from bs4.builder import ParserRejectedMarkup
from bs4.dammit import UnicodeDammit
from bs4.element import Doctype, NavigableString, PageElement, PreformattedString, Tag

from .dom_model import Node

Source = Union[str, bytes, IO[str], IO[bytes]]

PARSER_FEATURES = "html5lib"
# The doctype keeps html5lib out of quirks mode.
FRAGMENT_PREFIX = "<!DOCTYPE html><body>"


class ParseError(Exception):
    """The markup could not be turned into a tree."""


def _read(source: Source) -> Union[str, bytes]:
    if hasattr(source, "read"):
        return source.read()  # type: ignore[union-attr]
    return source  # type: ignore[return-value]


def _decode(markup: Union[str, bytes]) -> str:
    if isinstance(markup, str):
        return markup
    dammit = UnicodeDammit(markup, ["utf-8"])
    if dammit.unicode_markup is None:
        raise ParseError("unable to detect the input encoding")
    return dammit.unicode_markup


def _soup(markup: Union[str, bytes]) -> BeautifulSoup:
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            return BeautifulSoup(markup, PARSER_FEATURES, multi_valued_attributes=None)
    except FeatureNotFound as exc:
        raise ParseError(f"HTML tree builder not available: {exc}") from exc
    except ParserRejectedMarkup as exc:
        raise ParseError(str(exc)) from exc


def _attr_value(value: object) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return "" if value is None else str(value)


def convert(element: PageElement) -> Node:
    """Convert a BeautifulSoup element (or a whole soup) into a :class:`Node`."""

    if isinstance(element, BeautifulSoup):
        root = Node.document()
        _append_converted(root, element.contents)
        return root
    if isinstance(element, Doctype):
        return Node.doctype(str(element))
    if isinstance(element, PreformattedString):
        # Comments; html5lib also reports CDATA and processing instructions as comments.
        return Node.comment(str(element))
    if isinstance(element, NavigableString):
        return Node.text_node(str(element))
    if isinstance(element, Tag):
        attrs = [(str(name), _attr_value(value)) for name, value in element.attrs.items()]
        node = Node.element(element.name, attrs)
        _append_converted(node, element.contents)
        return node
    raise TypeError(f"cannot convert {type(element).__name__}")


def _append_converted(parent: Node, contents: Iterable[PageElement]) -> None:
    for item in contents:
        child = convert(item)
        last = parent.last_child
        if child.is_text() and last is not None and last.is_text():
            last.text += child.text
            continue
        parent.append_child(child)


def parse_document(source: Source) -> Node:
    """Parse a complete document and return its document node."""

    return convert(_soup(_read(source)))


def _fragment_contents(soup: BeautifulSoup) -> List[PageElement]:
    body = soup.body
    if body is None:
        return []
    contents = list(body.contents)
    # Comments after a stray </body> or </html> land outside the body.
    contents.extend(body.next_siblings)
    html = body.parent
    if isinstance(html, Tag) and html is not soup:
        contents.extend(html.next_siblings)
    return contents


def parse_fragment(source: Source) -> List[Node]:
    """Parse a fragment and return its top-level nodes, detached and in order."""

    markup = _decode(_read(source))
    soup = _soup(FRAGMENT_PREFIX + markup)
    holder = Node.document()
    _append_converted(holder, _fragment_contents(soup))
    return [child.detach() for child in holder.children]


__all__ = ["ParseError", "Source", "convert", "parse_document", "parse_fragment"]
