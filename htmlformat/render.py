"""Render parsed HTML trees as canonical indented text."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional, TextIO

from .classify import is_inline, is_literal, is_raw_content, is_rawtext, is_void
from .dom_model import Node, NodeKind
from .text_utils import (
    block_lines,
    collapse_whitespace,
    escape_attr,
    escape_text,
    first_char,
    is_punct,
    is_space,
    last_char,
    strip_space,
)

DEFAULT_INDENT = "  "


@dataclass(frozen=True)
class RenderContext:
    """Per-call rendering state threaded through the recursion."""

    level: int = 0
    raw_mode: bool = False
    indent_unit: str = DEFAULT_INDENT

    def descend(self, raw_mode: bool) -> "RenderContext":
        return replace(self, level=self.level + 1, raw_mode=raw_mode)


def indent(out: TextIO, ctx: RenderContext) -> None:
    out.write(ctx.indent_unit * ctx.level)


def _parent_tag(node: Node) -> Optional[str]:
    parent = node.parent
    if parent is None or parent.kind is not NodeKind.ELEMENT:
        return None
    return parent.tag


def _is_compact(node: Optional[Node]) -> bool:
    # A lone text child with content stays on the line of its tags. A blank
    # one would vanish on the next pass and change the layout.
    return (
        node is not None
        and node.has_single_text_child()
        and strip_space(node.children[0].text) != ""
    )


def _attaches_to_previous(node: Node) -> bool:
    # Punctuation stays on the line of a preceding closing tag. Only a
    # non-void element suppresses its line break before punctuation, so the
    # text attaches nowhere else.
    prev = node.previous_sibling
    return (
        prev is not None
        and prev.is_element()
        and not is_void(prev.tag)
        and is_punct(first_char(node.text))
    )


def _continues_inline_run(node: Node) -> bool:
    # An inline element directly after text with no trailing whitespace.
    # Text before a block element has already ended its line.
    prev = node.previous_sibling
    return (
        prev is not None
        and prev.is_text()
        and not is_space(last_char(prev.text))
        and is_inline(node.tag)
    )


def _ends_in_plaintext(node: Optional[Node]) -> bool:
    # Nothing after <plaintext> is markup, so it and its ancestors stay open.
    while node is not None and node.is_element():
        if node.is_element("plaintext"):
            return True
        node = node.last_child
    return False


def _render_children(out: TextIO, node: Node, ctx: RenderContext) -> None:
    for child in node.children:
        render_node(out, child, ctx)


def _render_text(out: TextIO, node: Node, ctx: RenderContext) -> None:
    parent_tag = _parent_tag(node)
    raw_parent = is_raw_content(parent_tag)
    unescaped = raw_parent or is_rawtext(parent_tag)
    if ctx.raw_mode:
        out.write(node.text if unescaped else escape_text(node.text))
        return

    stripped = strip_space(node.text)
    if not stripped:
        return

    single = _is_compact(node.parent)
    if not raw_parent and not single and not _attaches_to_previous(node):
        indent(out, ctx)

    if raw_parent:
        for line in block_lines(node.text):
            out.write("\n")
            if line:
                indent(out, ctx)
                out.write(line)
        out.write("\n")
        return

    collapsed = collapse_whitespace(stripped)
    out.write(collapsed if unescaped else escape_text(collapsed))
    if single:
        return
    nxt = node.next_sibling
    if (
        is_space(last_char(node.text))
        or nxt is None
        or not (nxt.is_element() and is_inline(nxt.tag))
    ):
        out.write("\n")


def _render_element(out: TextIO, node: Node, ctx: RenderContext) -> None:
    if not ctx.raw_mode and not _continues_inline_run(node):
        indent(out, ctx)

    out.write(f"<{node.tag}")
    for name, value in node.attrs:
        out.write(f' {name}="{escape_attr(value)}"')
    out.write(">")

    inner_raw = ctx.raw_mode or is_literal(node.tag)
    single = _is_compact(node)
    if inner_raw:
        # No whitespace is added below pre/code. The parser drops one newline
        # after <pre>; write it back.
        first = node.first_child
        if (
            node.tag == "pre"
            and first is not None
            and first.is_text()
            and first.text.startswith("\n")
        ):
            out.write("\n")
    elif not single:
        out.write("\n")

    if is_void(node.tag):
        return

    _render_children(out, node, ctx.descend(inner_raw))

    if _ends_in_plaintext(node):
        return
    if not inner_raw and (is_raw_content(node.tag) or not single):
        indent(out, ctx)
    out.write(f"</{node.tag}>")

    if ctx.raw_mode:
        return
    nxt = node.next_sibling
    if nxt is not None and nxt.is_text() and is_punct(first_char(nxt.text)):
        return
    out.write("\n")


def render_node(out: TextIO, node: Node, ctx: RenderContext) -> None:
    """Write ``node`` and its subtree to ``out``.

    Sink errors propagate immediately; nothing is buffered.
    """

    kind = node.kind
    if kind is NodeKind.DOCUMENT:
        _render_children(out, node, replace(ctx, level=0, raw_mode=False))
    elif kind is NodeKind.DOCTYPE:
        out.write(f"<!doctype {node.text}>\n")
        _render_children(out, node, ctx)
    elif kind is NodeKind.COMMENT:
        if ctx.raw_mode:
            out.write(f"<!--{node.text}-->")
            return
        indent(out, ctx)
        out.write(f"<!--{node.text}-->\n")
        _render_children(out, node, ctx)
    elif kind is NodeKind.TEXT:
        _render_text(out, node, ctx)
    elif kind is NodeKind.ELEMENT:
        _render_element(out, node, ctx)
    else:  # pragma: no cover - NodeKind is closed
        raise ValueError(f"unsupported node kind: {kind}")


def render_nodes(out: TextIO, nodes: Iterable[Node], indent_unit: str = DEFAULT_INDENT) -> None:
    ctx = RenderContext(indent_unit=indent_unit)
    for node in nodes:
        render_node(out, node, ctx)


__all__ = ["DEFAULT_INDENT", "RenderContext", "indent", "render_node", "render_nodes"]
