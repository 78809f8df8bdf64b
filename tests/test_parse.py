import pytest
from bs4 import BeautifulSoup

from htmlformat.dom_model import NodeKind
from htmlformat.parse import ParseError, convert, parse_document, parse_fragment


def test_parse_document_infers_structure() -> None:
    root = parse_document("<!doctype html><p>x")
    assert root.kind is NodeKind.DOCUMENT
    doctype, html = root.children
    assert doctype.kind is NodeKind.DOCTYPE
    assert doctype.text == "html"
    assert [child.tag for child in html.children] == ["head", "body"]


def test_parse_fragment_returns_detached_nodes() -> None:
    nodes = parse_fragment("<b>x</b> tail<!--c-->")
    assert [node.kind for node in nodes] == [NodeKind.ELEMENT, NodeKind.TEXT, NodeKind.COMMENT]
    for node in nodes:
        assert node.parent is None
        assert node.previous_sibling is None
        assert node.next_sibling is None
    assert nodes[1].text == " tail"
    assert nodes[2].text == "c"


def test_fragment_keeps_head_elements_in_place() -> None:
    nodes = parse_fragment("<meta charset=utf-8><script>x()</script><p>y</p>")
    assert [node.tag for node in nodes] == ["meta", "script", "p"]


def test_fragment_ignores_doctype() -> None:
    nodes = parse_fragment("<!doctype html><p>x</p>")
    assert [node.kind for node in nodes] == [NodeKind.ELEMENT]


def test_entities_are_decoded() -> None:
    (li,) = parse_fragment('<li style="&amp;&#38;">a &lt; b</li>')
    assert li.attrs == [("style", "&&")]
    assert li.children[0].text == "a < b"


def test_class_attribute_is_kept_verbatim() -> None:
    (span,) = parse_fragment('<span class="a  b" id=x></span>')
    assert span.attrs == [("class", "a  b"), ("id", "x")]


def test_void_elements_have_no_children() -> None:
    nodes = parse_fragment("<br>text")
    assert nodes[0].tag == "br"
    assert nodes[0].children == []
    assert nodes[1].text == "text"


def test_tree_links_are_consistent() -> None:
    root = parse_document("<ul><li>a</li> <li>b</li></ul>")
    for node in root.iter_tree():
        for index, child in enumerate(node.children):
            assert child.parent is node
            expected_prev = node.children[index - 1] if index else None
            assert child.previous_sibling is expected_prev


def test_convert_existing_soup() -> None:
    soup = BeautifulSoup("<p>x</p>", "html.parser")
    root = convert(soup)
    assert root.kind is NodeKind.DOCUMENT
    (p,) = root.children
    assert p.tag == "p"
    assert p.children[0].text == "x"


def test_convert_rejects_unknown_objects() -> None:
    with pytest.raises(TypeError):
        convert(object())  # type: ignore[arg-type]


def test_missing_tree_builder_is_a_parse_error(monkeypatch) -> None:
    monkeypatch.setattr("htmlformat.parse.PARSER_FEATURES", "no-such-builder")
    with pytest.raises(ParseError):
        parse_document("<p>x</p>")
