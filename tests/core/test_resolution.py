from dataclasses import replace

import pytest
from lxml import etree as ET

from html_tailwind.core.converter import convert, convert_node, load, resolve_tree, scan_fonts
from html_tailwind.core.exceptions import (
    DocumentIOError,
    EncodingError,
    MarkupSyntaxError,
    UnsupportedTagError,
)
from html_tailwind.core.loader import FontTable
from html_tailwind.core.models import Button, Container, Image, Text
from html_tailwind.core.tree import iter_nodes

from tests.conftest import FailingLoader, RecordingLoader


def _unresolved(markup: str):
    return convert_node(ET.fromstring(markup))


class TestScanFonts:

    def test_default_and_named_fonts(self, loader):
        head = ET.fromstring(
            "<head>"
            "<font src='a.ttf'/>"
            "<font name='title' src='t.ttf'/>"
            "<font name='default' src='d.ttf'/>"
            "<title>ignored</title>"
            "</head>"
        )
        table = scan_fonts(head, loader)
        assert table.default == "handle:d.ttf"
        assert table.fonts == {"title": "handle:t.ttf"}
        assert loader.requests == ["a.ttf", "t.ttf", "d.ttf"]

    def test_font_without_source_is_skipped(self, loader):
        head = ET.fromstring("<head><font name='x'/><font src=''/><font src=' '/></head>")
        table = scan_fonts(head, loader)
        assert len(table) == 0
        assert loader.requests == []

    def test_no_head(self, loader):
        table = scan_fonts(None, loader)
        assert table.default is None
        assert table.fonts == {}


class TestResolveTree:

    def test_default_font_reaches_every_node(self, loader):
        fonts = FontTable(default="font:default")
        tree = resolve_tree(_unresolved("<div><p>a</p><button>b<span>c</span></button></div>"), loader, fonts)
        assert [node.style.font for node in iter_nodes(tree)] == ["font:default"] * 4

    def test_named_font_override(self, loader):
        fonts = FontTable(fonts={"mono": "font:mono"}, default="font:default")
        node = _unresolved("<p>code</p>")
        node = replace(node, style=replace(node.style, font_name="mono"))
        assert resolve_tree(node, loader, fonts).style.font == "font:mono"

        unknown = replace(node, style=replace(node.style, font_name="missing"))
        assert resolve_tree(unknown, loader, fonts).style.font == "font:default"

    def test_image_handles(self, loader):
        tree = resolve_tree(_unresolved('<div><img src="a.png"/><img/></div>'), loader, FontTable())
        with_src, without_src = tree.children
        assert with_src.image == "handle:a.png"
        assert without_src.image is None
        assert loader.requests == ["a.png"]

    def test_pre_order(self, loader):
        markup = '<div><img src="a"><img src="b"/></img><div><img src="c"/></div><img src="d"/></div>'
        resolve_tree(_unresolved(markup), loader)
        assert loader.requests == ["a", "b", "c", "d"]

    def test_input_tree_is_not_mutated(self, loader):
        unresolved = _unresolved('<div><img src="a.png"/></div>')
        resolve_tree(unresolved, loader, FontTable(default="f"))
        assert unresolved.children[0].image is None
        assert unresolved.style.font is None

    def test_idempotent(self):
        unresolved = _unresolved('<div class="flex"><p>Hi</p><img src="a.png"/></div>')
        fonts = FontTable(default="font:default")
        first = resolve_tree(unresolved, RecordingLoader(), fonts)
        second = resolve_tree(unresolved, RecordingLoader(), fonts)
        assert first == second
        assert resolve_tree(first, RecordingLoader(), fonts) == first


class TestConvertPipeline:

    def test_full_document(self, sample_document, loader):
        tree = convert(sample_document, loader, source="main.html")

        root = tree.root
        assert isinstance(root, Container)
        assert root.id == "main"
        assert tree.source == "main.html"
        assert [type(child) for child in root.children] == [Text, Image, Button]
        assert root.children[0].content == "Main menu"
        assert root.children[1].image == "handle:images/logo.png"
        assert root.children[2].content == "Exit"
        assert all(node.style.font == "handle:fonts/FiraSans-Bold.ttf" for node in tree.iter_nodes())
        # fonts first, then images in document order
        assert loader.requests == ["fonts/FiraSans-Bold.ttf", "fonts/FiraMono.ttf", "images/logo.png"]

    def test_bare_span_root(self, loader):
        tree = convert(b"<span class='text-[#000000]'>Hi</span>", loader)
        assert isinstance(tree.root, Text)
        assert tree.root.content == "Hi"
        assert tree.root.style.font is None

    def test_internal_entities_are_expanded(self, loader):
        tree = convert(b'<!DOCTYPE p [<!ENTITY who "World">]><p>Hello &who;</p>', loader)
        assert tree.root.content == "Hello World"

    def test_script_body_child_is_fatal(self, loader):
        with pytest.raises(UnsupportedTagError):
            convert(b"<html><body><script>x()</script><div/></body></html>", loader)

    def test_invalid_encoding(self, loader):
        with pytest.raises(EncodingError):
            convert(b"<p>caf\xe9</p>", loader)

    def test_malformed_markup(self, loader):
        with pytest.raises(MarkupSyntaxError) as excinfo:
            convert(b"<div>\n<p></div>", loader, source="broken.html")
        assert excinfo.value.line is not None
        assert excinfo.value.source == "broken.html"

    def test_load_reads_loader_bytes(self, sample_document):
        loader = RecordingLoader(sample_document)
        assert load(loader).root.id == "main"

    def test_load_read_failure(self):
        with pytest.raises(DocumentIOError) as excinfo:
            load(FailingLoader(), source="gone.html")
        assert isinstance(excinfo.value.cause, OSError)
        assert "gone.html" in str(excinfo.value)
