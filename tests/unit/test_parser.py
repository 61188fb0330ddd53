"""Tests for source text access and the Java tree builder."""

from __future__ import annotations

from pathlib import Path

import pytest

from pkgvisibility.ast.nodes import FILE_START, Position
from pkgvisibility.parser.java import JavaSyntaxError, JavaTreeBuilder
from pkgvisibility.parser.source import _MAX_DOCUMENT_SIZE, SourceText, SourceTooLargeError
from tests.conftest import NESTED_CLASSES_JAVA, PACKAGE_INPUT


class TestSourceText:
    def test_lines_are_one_based(self) -> None:
        source = SourceText.from_string("first\nsecond\nthird")
        assert source.line(1) == "first"
        assert source.line(3) == "third"
        assert len(source) == 3

    def test_crlf_line_endings_stripped(self) -> None:
        source = SourceText.from_string("a\r\nb\r\n")
        assert source.lines == ("a", "b", "")

    def test_lines_between_inclusive(self) -> None:
        source = SourceText.from_string("a\nb\nc\nd")
        assert source.lines_between(2, 3) == ["b", "c"]
        assert source.lines_between(4, 4) == ["d"]

    def test_line_out_of_range(self) -> None:
        source = SourceText.from_string("only")
        with pytest.raises(IndexError):
            source.line(0)
        with pytest.raises(IndexError):
            source.line(2)

    def test_reversed_range(self) -> None:
        source = SourceText.from_string("a\nb")
        with pytest.raises(IndexError, match="reversed"):
            source.lines_between(2, 1)

    def test_oversized_source_rejected(self) -> None:
        with pytest.raises(SourceTooLargeError, match="maximum size"):
            SourceText.from_string("x" * (_MAX_DOCUMENT_SIZE + 1))

    def test_load_keeps_content(self, tmp_path: Path) -> None:
        path = tmp_path / "A.java"
        path.write_bytes(b"class A {\r\n}\r\n")
        source = SourceText.load(path)
        assert source.content == "class A {\r\n}\r\n"
        assert source.line(1) == "class A {"


class TestJavaTreeBuilder:
    def test_root_pinned_to_file_start(self, builder: JavaTreeBuilder) -> None:
        tree = builder.parse(SourceText.from_string("\n\n  class A {}\n"))
        assert tree.root.kind == "program"
        assert tree.root.position == FILE_START

    def test_comments_are_dropped(self, builder: JavaTreeBuilder) -> None:
        tree = builder.parse(SourceText.from_string(NESTED_CLASSES_JAVA))
        kinds = {node.kind for node in tree.nodes()}
        assert "block_comment" not in kinds
        assert "line_comment" not in kinds

    def test_previous_sibling_skips_comment(self, builder: JavaTreeBuilder) -> None:
        tree = builder.parse(SourceText.from_string(NESTED_CLASSES_JAVA))
        classes = [n for n in tree.nodes() if n.kind == "class_declaration"]
        class_a, class_b = classes[1], classes[2]
        assert tree.previous_sibling(class_b) == class_a

    def test_leaf_text_and_position(self, builder: JavaTreeBuilder) -> None:
        tree = builder.parse(SourceText.from_string("class Alpha {}"))
        idents = [n for n in tree.nodes() if n.kind == "identifier"]
        assert idents[0].text == "Alpha"
        assert idents[0].position == Position(1, 6)

    def test_inner_node_positioned_at_first_token(self, builder: JavaTreeBuilder) -> None:
        content = "class A {\n    /* package */\n    int x;\n}\n"
        tree = builder.parse(SourceText.from_string(content))
        field = next(n for n in tree.nodes() if n.kind == "field_declaration")
        assert field.position == Position(3, 4)

    def test_columns_count_characters_not_bytes(self, builder: JavaTreeBuilder) -> None:
        line = '    String s = "äö"; int x;'
        tree = builder.parse(SourceText.from_string(f"class A {{\n{line}\n}}\n"))
        x = [n for n in tree.nodes() if n.kind == "identifier" and n.text == "x"][0]
        assert x.position == Position(2, line.index("x;"))

    def test_syntax_error_raises(self, builder: JavaTreeBuilder) -> None:
        with pytest.raises(JavaSyntaxError, match="Syntax error"):
            builder.parse(SourceText.from_string("class A {\n    int x = ;\n}\n"))

    def test_deep_nesting_does_not_recurse(self, builder: JavaTreeBuilder) -> None:
        expr = "(" * 600 + "1" + ")" * 600
        tree = builder.parse(SourceText.from_string(f"class A {{ int x = {expr}; }}"))
        assert len(tree) > 1200

    def test_fixture_parses(self, builder: JavaTreeBuilder) -> None:
        tree = builder.parse(SourceText.load(PACKAGE_INPUT))
        assert tree.root.children[0].kind == "package_declaration"
