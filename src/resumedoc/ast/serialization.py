#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumedoc/ast/serialization.py
"""Dictionary, JSON and YAML serialization for AST nodes.

The serialized shape is the one the upstream resume-to-tree producer emits::

    {"type": "doc", "content": [
        {"type": "paragraph", "content": [
            {"type": "text", "text": "Hello", "marks": [{"type": "bold"}]}
        ]},
        {"type": "orderedList", "attrs": {"start": 3}, "content": [...]}
    ]}

Absent ``content``, ``marks`` and ``attrs`` keys stay absent after a round
trip, so an absent fragment and an empty one remain distinguishable.

Examples
--------
    >>> from resumedoc.ast.serialization import dict_to_ast, ast_to_dict
    >>> node = dict_to_ast({"type": "text", "text": "Hi", "marks": [{"type": "italic"}]})
    >>> ast_to_dict(node)
    {'type': 'text', 'text': 'Hi', 'marks': [{'type': 'italic'}]}

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional

import yaml

from resumedoc.ast.nodes import (
    BoldMark,
    BulletList,
    Document,
    Fragment,
    ItalicMark,
    LinkAttrs,
    LinkMark,
    ListItem,
    Mark,
    Node,
    OrderedList,
    OrderedListAttrs,
    Paragraph,
    Text,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Serialization
# ============================================================================


def _serialize_fragment(result: dict[str, Any], content: Fragment) -> None:
    if content is not None:
        result["content"] = [ast_to_dict(child) for child in content]


def _serialize_content_node(node: Document | Paragraph | BulletList | ListItem) -> dict[str, Any]:
    result: dict[str, Any] = {"type": node.type}
    _serialize_fragment(result, node.content)
    return result


def _serialize_ordered_list(node: OrderedList) -> dict[str, Any]:
    result: dict[str, Any] = {"type": node.type}
    if node.attrs is not None:
        attrs: dict[str, Any] = {}
        if node.attrs.start is not None:
            attrs["start"] = node.attrs.start
        result["attrs"] = attrs
    _serialize_fragment(result, node.content)
    return result


def _serialize_text(node: Text) -> dict[str, Any]:
    result: dict[str, Any] = {"type": node.type, "text": node.text}
    if node.marks is not None:
        result["marks"] = [mark_to_dict(mark) for mark in node.marks]
    return result


def mark_to_dict(mark: Mark) -> dict[str, Any]:
    """Convert a mark to its dictionary representation.

    Parameters
    ----------
    mark : Mark
        The mark to convert

    Returns
    -------
    dict
        ``{"type": ...}`` plus ``attrs`` for links that carry attributes

    """
    result: dict[str, Any] = {"type": mark.type}
    if isinstance(mark, LinkMark) and mark.attrs is not None:
        attrs: dict[str, Any] = {}
        if mark.attrs.href is not None:
            attrs["href"] = mark.attrs.href
        if mark.attrs.class_ is not None:
            attrs["class"] = mark.attrs.class_
        if mark.attrs.target is not None:
            attrs["target"] = mark.attrs.target
        result["attrs"] = attrs
    return result


_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    Document: _serialize_content_node,
    Paragraph: _serialize_content_node,
    BulletList: _serialize_content_node,
    ListItem: _serialize_content_node,
    OrderedList: _serialize_ordered_list,
    Text: _serialize_text,
}


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a dictionary representation.

    Parameters
    ----------
    node : Node
        The AST node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node class is not part of the vocabulary

    """
    serializer = _SERIALIZATION_DISPATCH.get(type(node))
    if serializer:
        return serializer(node)

    raise ValueError(f"Unknown node type for serialization: {type(node).__name__}")


# ============================================================================
# Deserialization
# ============================================================================


def _expect_mapping(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a mapping, got {type(data).__name__}")
    return data


def _deserialize_fragment(data: dict[str, Any], strict_mode: bool) -> Fragment:
    """Deserialize ``data["content"]``, keeping absent distinct from empty."""
    if "content" not in data or data["content"] is None:
        return None

    raw_children = data["content"]
    if not isinstance(raw_children, list):
        raise ValueError(f"'content' must be a list, got {type(raw_children).__name__}")

    children: list[Node] = []
    for child_data in raw_children:
        child = _dict_to_node(child_data, strict_mode)
        # Unknown entries are dropped in lenient mode; fragments never hold None
        if child is not None:
            children.append(child)
    return children


def _deserialize_attrs(data: dict[str, Any]) -> Optional[dict[str, Any]]:
    attrs = data.get("attrs")
    if attrs is None:
        return None
    return _expect_mapping(attrs, "'attrs'")


def _deserialize_ordered_list(data: dict[str, Any], strict_mode: bool) -> OrderedList:
    attrs = _deserialize_attrs(data)
    list_attrs: Optional[OrderedListAttrs] = None
    if attrs is not None:
        start = attrs.get("start")
        if start is not None and (isinstance(start, bool) or not isinstance(start, int)):
            raise ValueError(f"orderedList 'start' must be an integer, got {start!r}")
        list_attrs = OrderedListAttrs(start=start)
    return OrderedList(content=_deserialize_fragment(data, strict_mode), attrs=list_attrs)


def _deserialize_text(data: dict[str, Any], strict_mode: bool) -> Text:
    text = data.get("text", "")
    if not isinstance(text, str):
        raise ValueError(f"text node 'text' must be a string, got {type(text).__name__}")

    marks: Optional[list[Mark]] = None
    if data.get("marks") is not None:
        raw_marks = data["marks"]
        if not isinstance(raw_marks, list):
            raise ValueError(f"'marks' must be a list, got {type(raw_marks).__name__}")
        marks = []
        for mark_data in raw_marks:
            mark = dict_to_mark(mark_data, strict_mode=strict_mode)
            if mark is not None:
                marks.append(mark)
    return Text(text=text, marks=marks)


def _deserialize_link_mark(data: dict[str, Any]) -> LinkMark:
    attrs = _deserialize_attrs(data)
    if attrs is None:
        return LinkMark()
    for key in ("href", "class", "target"):
        value = attrs.get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"link '{key}' must be a string, got {type(value).__name__}")
    return LinkMark(attrs=LinkAttrs(href=attrs.get("href"), class_=attrs.get("class"), target=attrs.get("target")))


_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any], bool], Node]] = {
    Document.type: lambda d, s: Document(content=_deserialize_fragment(d, s)),
    Paragraph.type: lambda d, s: Paragraph(content=_deserialize_fragment(d, s)),
    BulletList.type: lambda d, s: BulletList(content=_deserialize_fragment(d, s)),
    ListItem.type: lambda d, s: ListItem(content=_deserialize_fragment(d, s)),
    OrderedList.type: _deserialize_ordered_list,
    Text.type: _deserialize_text,
}

_MARK_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any]], Mark]] = {
    BoldMark.type: lambda d: BoldMark(),
    ItalicMark.type: lambda d: ItalicMark(),
    LinkMark.type: _deserialize_link_mark,
}


def dict_to_mark(data: dict[str, Any], strict_mode: bool = True) -> Mark | None:
    """Convert a dictionary representation to a mark.

    Parameters
    ----------
    data : dict
        ``{"type": "bold" | "italic" | "link", "attrs": {...}}``
    strict_mode : bool, default True
        If True, raise on unknown or missing mark types.
        If False, log a warning and return None.

    Returns
    -------
    Mark or None
        The mark, or None when skipped in lenient mode

    Raises
    ------
    ValueError
        If the mark type is missing or unknown and strict_mode is True

    """
    data = _expect_mapping(data, "Mark")
    mark_type = data.get("type")
    deserializer = _MARK_DESERIALIZATION_DISPATCH.get(mark_type) if isinstance(mark_type, str) else None
    if deserializer is None:
        if strict_mode:
            raise ValueError(f"Unknown mark type: {mark_type!r}")
        logger.warning("Unknown mark type %r, skipping", mark_type)
        return None
    return deserializer(data)


def _dict_to_node(data: Any, strict_mode: bool) -> Node | None:
    data = _expect_mapping(data, "Node")
    node_type = data.get("type")
    if not node_type:
        if strict_mode:
            raise ValueError("Dictionary must contain 'type' field")
        logger.warning("Dictionary missing 'type' field, skipping")
        return None

    deserializer = _DESERIALIZATION_DISPATCH.get(node_type) if isinstance(node_type, str) else None
    if deserializer is None:
        if strict_mode:
            raise ValueError(f"Unknown node type: {node_type!r}")
        logger.warning("Unknown node type %r, skipping", node_type)
        return None

    return deserializer(data, strict_mode)


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Node:
    """Convert a dictionary representation back to an AST node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise ValueError on unknown node or mark types anywhere in
        the tree. If False, skip them with a warning.

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ValueError
        If the root is not a known node, or if the tree contains unknown
        types or ill-typed fields and strict_mode is True

    """
    node = _dict_to_node(data, strict_mode)
    if node is None:
        raise ValueError(f"Root node could not be deserialized: {data.get('type')!r}")
    return node


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to a JSON string.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string representation

    """
    return json.dumps(ast_to_dict(node), indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, strict_mode: bool = True) -> Node:
    """Deserialize a JSON string to an AST node.

    Raises
    ------
    ValueError
        If the structure is invalid (see ``dict_to_ast``)
    json.JSONDecodeError
        If the JSON string is malformed

    """
    return dict_to_ast(json.loads(json_str), strict_mode=strict_mode)


def yaml_to_ast(yaml_str: str, strict_mode: bool = True) -> Node:
    """Deserialize a YAML document to an AST node.

    Raises
    ------
    ValueError
        If the structure is invalid (see ``dict_to_ast``)
    yaml.YAMLError
        If the YAML is malformed

    """
    return dict_to_ast(yaml.safe_load(yaml_str), strict_mode=strict_mode)


__all__ = [
    "ast_to_dict",
    "dict_to_ast",
    "mark_to_dict",
    "dict_to_mark",
    "ast_to_json",
    "json_to_ast",
    "yaml_to_ast",
]
