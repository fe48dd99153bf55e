#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_ast_nodes.py
"""Unit tests for AST node classes and visitor dispatch."""

from unittest.mock import Mock

import pytest

from resumedoc.ast import (
    BoldMark,
    BulletList,
    Document,
    ItalicMark,
    LinkAttrs,
    LinkMark,
    ListItem,
    Mark,
    Node,
    NodeVisitor,
    OrderedList,
    OrderedListAttrs,
    Paragraph,
    Text,
    iter_fragment,
)


@pytest.mark.unit
class TestNodeTypes:
    """Each class carries its serialized type tag."""

    @pytest.mark.parametrize(
        "node_class,type_tag",
        [
            (Document, "doc"),
            (Paragraph, "paragraph"),
            (Text, "text"),
            (BulletList, "bulletList"),
            (OrderedList, "orderedList"),
            (ListItem, "listItem"),
        ],
    )
    def test_node_type_tags(self, node_class, type_tag):
        assert node_class.type == type_tag
        assert issubclass(node_class, Node)

    @pytest.mark.parametrize(
        "mark_class,type_tag",
        [(BoldMark, "bold"), (ItalicMark, "italic"), (LinkMark, "link")],
    )
    def test_mark_type_tags(self, mark_class, type_tag):
        assert mark_class.type == type_tag
        assert issubclass(mark_class, Mark)

    def test_node_base_is_abstract(self):
        with pytest.raises(TypeError):
            Node()


@pytest.mark.unit
class TestDefaults:
    """Absent fields default to None and stay distinct from empty."""

    @pytest.mark.parametrize("node_class", [Document, Paragraph, BulletList, OrderedList, ListItem])
    def test_content_defaults_to_absent(self, node_class):
        assert node_class().content is None
        assert node_class(content=[]).content == []

    def test_text_defaults(self):
        node = Text()
        assert node.text == ""
        assert node.marks is None

    def test_iter_fragment(self):
        child = Text(text="a")
        assert iter_fragment(None) == []
        assert iter_fragment([]) == []
        assert iter_fragment([child]) == [child]


@pytest.mark.unit
class TestOrderedListStart:
    """Tests for OrderedList.start."""

    @pytest.mark.parametrize(
        "attrs,expected",
        [
            (None, 1),
            (OrderedListAttrs(), 1),
            (OrderedListAttrs(start=None), 1),
            (OrderedListAttrs(start=5), 5),
            (OrderedListAttrs(start=0), 0),
            (OrderedListAttrs(start=-3), -3),
        ],
    )
    def test_start(self, attrs, expected):
        assert OrderedList(attrs=attrs).start == expected


@pytest.mark.unit
class TestMarks:
    """Tests for mark value semantics."""

    def test_marks_compare_by_value(self):
        assert BoldMark() == BoldMark()
        assert LinkMark(attrs=LinkAttrs(href="x")) == LinkMark(attrs=LinkAttrs(href="x"))
        assert LinkMark(attrs=LinkAttrs(href="x")) != LinkMark(attrs=LinkAttrs(href="y"))

    @pytest.mark.parametrize(
        "mark,expected",
        [
            (LinkMark(), ""),
            (LinkMark(attrs=LinkAttrs()), ""),
            (LinkMark(attrs=LinkAttrs(href="https://acme.example", class_="c", target="_blank")), "https://acme.example"),
        ],
    )
    def test_link_href(self, mark, expected):
        assert mark.href == expected


@pytest.mark.unit
class TestDispatch:
    """Each node and mark dispatches to its own visitor method."""

    @pytest.mark.parametrize(
        "node,method",
        [
            (Document(), "visit_doc"),
            (Paragraph(), "visit_paragraph"),
            (Text(), "visit_text"),
            (BulletList(), "visit_bullet_list"),
            (OrderedList(), "visit_ordered_list"),
            (ListItem(), "visit_list_item"),
        ],
    )
    def test_node_accept(self, node, method):
        visitor = Mock(spec=NodeVisitor)
        context = object()

        node.accept(visitor, context)

        getattr(visitor, method).assert_called_once_with(node, context)

    @pytest.mark.parametrize(
        "mark,method",
        [(BoldMark(), "apply_bold"), (ItalicMark(), "apply_italic"), (LinkMark(), "apply_link")],
    )
    def test_mark_accept(self, mark, method):
        visitor = Mock()
        getattr(visitor, method).return_value = "wrapped"

        assert mark.accept(visitor, "text") == "wrapped"
        getattr(visitor, method).assert_called_once_with(mark, "text", None)
