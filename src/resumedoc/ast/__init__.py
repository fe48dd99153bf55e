#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumedoc/ast/__init__.py
"""Rich document tree for resume narrative fields.

The module consists of:

- nodes: the closed node and mark vocabulary
- visitors: abstract visitor contracts that code generators implement
- serialization: dict/JSON/YAML conversion in the upstream tree format

Examples
--------
    >>> from resumedoc.ast import BoldMark, Document, Paragraph, Text
    >>> from resumedoc.codegen import MarkdownCodeGenerator
    >>> doc = Document(content=[
    ...     Paragraph(content=[Text(text="Hello", marks=[BoldMark()])])
    ... ])
    >>> MarkdownCodeGenerator().generate(doc)
    '**Hello**\\n\\n'

"""

from __future__ import annotations

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
    iter_fragment,
)
from resumedoc.ast.serialization import (
    ast_to_dict,
    ast_to_json,
    dict_to_ast,
    json_to_ast,
    yaml_to_ast,
)
from resumedoc.ast.visitors import MarkVisitor, NodeVisitor

__all__ = [
    # Nodes
    "Node",
    "Fragment",
    "iter_fragment",
    "Document",
    "Paragraph",
    "Text",
    "BulletList",
    "OrderedList",
    "OrderedListAttrs",
    "ListItem",
    # Marks
    "Mark",
    "BoldMark",
    "ItalicMark",
    "LinkMark",
    "LinkAttrs",
    # Visitors
    "NodeVisitor",
    "MarkVisitor",
    # Serialization
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
    "yaml_to_ast",
]
