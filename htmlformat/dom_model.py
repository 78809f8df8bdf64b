"""Node model for parsed HTML trees."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

Attribute = Tuple[str, str]


class NodeKind(enum.Enum):
    DOCUMENT = "document"
    DOCTYPE = "doctype"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"


@dataclass(eq=False)
class Node:
    """A node of a parsed HTML tree.

    Children are owned by their parent. ``parent`` and the sibling links are
    navigation only and are kept in step by :meth:`append_child`.
    """

    kind: NodeKind
    tag: str = ""
    text: str = ""
    attrs: List[Attribute] = field(default_factory=list)
    children: List["Node"] = field(default_factory=list)
    parent: Optional["Node"] = None
    previous_sibling: Optional["Node"] = None
    next_sibling: Optional["Node"] = None

    @classmethod
    def document(cls) -> "Node":
        return cls(NodeKind.DOCUMENT)

    @classmethod
    def doctype(cls, name: str) -> "Node":
        return cls(NodeKind.DOCTYPE, text=name)

    @classmethod
    def element(cls, tag: str, attrs: Optional[List[Attribute]] = None) -> "Node":
        return cls(NodeKind.ELEMENT, tag=tag, attrs=list(attrs or []))

    @classmethod
    def text_node(cls, text: str) -> "Node":
        return cls(NodeKind.TEXT, text=text)

    @classmethod
    def comment(cls, text: str) -> "Node":
        return cls(NodeKind.COMMENT, text=text)

    @property
    def first_child(self) -> Optional["Node"]:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Optional["Node"]:
        return self.children[-1] if self.children else None

    def is_element(self, tag: Optional[str] = None) -> bool:
        if self.kind is not NodeKind.ELEMENT:
            return False
        return tag is None or self.tag == tag

    def is_text(self) -> bool:
        return self.kind is NodeKind.TEXT

    def append_child(self, child: "Node") -> "Node":
        if child.parent is not None:
            raise ValueError("node already has a parent")
        if self.kind is NodeKind.TEXT:
            raise ValueError("text nodes cannot have children")
        last = self.last_child
        if last is not None:
            last.next_sibling = child
            child.previous_sibling = last
        child.parent = self
        self.children.append(child)
        return child

    def detach(self) -> "Node":
        """Drop the navigation links, leaving the node as a standalone root."""

        self.parent = None
        self.previous_sibling = None
        self.next_sibling = None
        return self

    def has_single_text_child(self) -> bool:
        return len(self.children) == 1 and self.children[0].is_text()

    def iter_tree(self) -> Iterator["Node"]:
        yield self
        for child in self.children:
            yield from child.iter_tree()

    def __repr__(self) -> str:
        if self.kind is NodeKind.ELEMENT:
            return f"<Node element {self.tag!r} children={len(self.children)}>"
        if self.kind is NodeKind.DOCUMENT:
            return f"<Node document children={len(self.children)}>"
        return f"<Node {self.kind.value} {self.text!r}>"


__all__ = ["Attribute", "Node", "NodeKind"]
