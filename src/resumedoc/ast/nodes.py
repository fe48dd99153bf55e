#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumedoc/ast/nodes.py
"""AST node and mark classes for rich document representation.

This module defines the closed vocabulary of the rich document tree that the
code generators consume. Nodes carry no rendering behavior; each one only
knows how to dispatch itself to a visitor.

Node Hierarchy
--------------
Block-level nodes:
    - Document (``doc``): root of the tree
    - Paragraph (``paragraph``): a single flowed block of inline nodes
    - BulletList (``bulletList``), OrderedList (``orderedList``)
    - ListItem (``listItem``): block content of one list entry

Inline nodes:
    - Text (``text``): a literal run of characters with optional marks

Marks
-----
Inline formatting is expressed as an ordered sequence of marks on a Text
node rather than as wrapper nodes:
    - BoldMark (``bold``), ItalicMark (``italic``), LinkMark (``link``)

Mark order matters. Generators apply marks as a left fold, so each mark wraps
the output of the marks before it.

Fragments
---------
Every node except Text holds its children in ``content``. ``None`` (absent)
and ``[]`` (empty) are both valid and render the same way; they are kept
distinct so that serialization round-trips exactly.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Optional

from resumedoc.constants import (
    DEFAULT_ORDERED_LIST_START,
    MARK_TYPE_BOLD,
    MARK_TYPE_ITALIC,
    MARK_TYPE_LINK,
    NODE_TYPE_BULLET_LIST,
    NODE_TYPE_DOC,
    NODE_TYPE_LIST_ITEM,
    NODE_TYPE_ORDERED_LIST,
    NODE_TYPE_PARAGRAPH,
    NODE_TYPE_TEXT,
)

if TYPE_CHECKING:
    from resumedoc.ast.visitors import MarkVisitor, NodeVisitor
    from resumedoc.options.base import CodeGenerationContext

Fragment = Optional[list["Node"]]


class Node(ABC):
    """Base class for all AST nodes.

    Subclasses set the ``type`` class attribute to their tag in the
    serialized tree format and implement ``accept``.
    """

    type: ClassVar[str]

    @abstractmethod
    def accept(self, visitor: "NodeVisitor", context: "CodeGenerationContext | None" = None) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : NodeVisitor
            A visitor object with visit_* methods
        context : CodeGenerationContext or None
            Read-only settings passed through to the visitor unchanged

        Returns
        -------
        Any
            Result from the visitor's processing

        """


def iter_fragment(content: Fragment) -> list[Node]:
    """Return the nodes of a fragment, treating an absent fragment as empty."""
    return content if content is not None else []


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node.

    Parameters
    ----------
    content : list of Node or None, default = None
        Block-level nodes (paragraphs and lists)

    """

    type: ClassVar[str] = NODE_TYPE_DOC

    content: Fragment = None

    def accept(self, visitor: "NodeVisitor", context: "CodeGenerationContext | None" = None) -> Any:
        """Dispatch to ``visitor.visit_doc``."""
        return visitor.visit_doc(self, context)


@dataclass
class Paragraph(Node):
    """Paragraph node holding inline content.

    Parameters
    ----------
    content : list of Node or None, default = None
        Inline nodes (Text)

    """

    type: ClassVar[str] = NODE_TYPE_PARAGRAPH

    content: Fragment = None

    def accept(self, visitor: "NodeVisitor", context: "CodeGenerationContext | None" = None) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self, context)


@dataclass
class BulletList(Node):
    """Unordered list node.

    Parameters
    ----------
    content : list of Node or None, default = None
        List items. Entries that are not ListItem are tolerated and render
        as nothing.

    """

    type: ClassVar[str] = NODE_TYPE_BULLET_LIST

    content: Fragment = None

    def accept(self, visitor: "NodeVisitor", context: "CodeGenerationContext | None" = None) -> Any:
        """Dispatch to ``visitor.visit_bullet_list``."""
        return visitor.visit_bullet_list(self, context)


@dataclass(frozen=True)
class OrderedListAttrs:
    """Attribute bag of an ordered list.

    Parameters
    ----------
    start : int or None, default = None
        Ordinal of the first item. None means 1. Any integer is used verbatim.

    """

    start: Optional[int] = None


@dataclass
class OrderedList(Node):
    """Ordered list node.

    Parameters
    ----------
    content : list of Node or None, default = None
        List items
    attrs : OrderedListAttrs or None, default = None
        Optional attributes; see ``start``

    """

    type: ClassVar[str] = NODE_TYPE_ORDERED_LIST

    content: Fragment = None
    attrs: Optional[OrderedListAttrs] = None

    @property
    def start(self) -> int:
        """Ordinal of the first item, defaulting to 1."""
        if self.attrs is None or self.attrs.start is None:
            return DEFAULT_ORDERED_LIST_START
        return self.attrs.start

    def accept(self, visitor: "NodeVisitor", context: "CodeGenerationContext | None" = None) -> Any:
        """Dispatch to ``visitor.visit_ordered_list``."""
        return visitor.visit_ordered_list(self, context)


@dataclass
class ListItem(Node):
    """A single list entry.

    Parameters
    ----------
    content : list of Node or None, default = None
        Block nodes, typically one Paragraph optionally followed by a nested
        BulletList or OrderedList

    """

    type: ClassVar[str] = NODE_TYPE_LIST_ITEM

    content: Fragment = None

    def accept(self, visitor: "NodeVisitor", context: "CodeGenerationContext | None" = None) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self, context)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Leaf node holding literal text.

    Parameters
    ----------
    text : str, default = ""
        The literal characters
    marks : list of Mark or None, default = None
        Formatting applied in order, each wrapping the result of the previous

    """

    type: ClassVar[str] = NODE_TYPE_TEXT

    text: str = ""
    marks: Optional[list["Mark"]] = None

    def accept(self, visitor: "NodeVisitor", context: "CodeGenerationContext | None" = None) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self, context)


# ============================================================================
# Marks
# ============================================================================


class Mark(ABC):
    """Base class for inline formatting marks."""

    type: ClassVar[str]

    @abstractmethod
    def accept(self, visitor: "MarkVisitor", text: str, context: "CodeGenerationContext | None" = None) -> str:
        """Apply this mark to already-rendered ``text`` through ``visitor``.

        Parameters
        ----------
        visitor : MarkVisitor
            A visitor object with apply_* methods
        text : str
            Current rendered string, possibly already wrapped by earlier marks
        context : CodeGenerationContext or None
            Read-only settings passed through unchanged

        Returns
        -------
        str
            The wrapped string

        """


@dataclass(frozen=True)
class BoldMark(Mark):
    """Strong emphasis."""

    type: ClassVar[str] = MARK_TYPE_BOLD

    def accept(self, visitor: "MarkVisitor", text: str, context: "CodeGenerationContext | None" = None) -> str:
        """Dispatch to ``visitor.apply_bold``."""
        return visitor.apply_bold(self, text, context)


@dataclass(frozen=True)
class ItalicMark(Mark):
    """Emphasis."""

    type: ClassVar[str] = MARK_TYPE_ITALIC

    def accept(self, visitor: "MarkVisitor", text: str, context: "CodeGenerationContext | None" = None) -> str:
        """Dispatch to ``visitor.apply_italic``."""
        return visitor.apply_italic(self, text, context)


@dataclass(frozen=True)
class LinkAttrs:
    """Attribute bag of a link mark.

    Parameters
    ----------
    href : str or None, default = None
        Link destination; None renders as an empty destination
    class_ : str or None, default = None
        CSS class carried over from the editor (``class`` when serialized)
    target : str or None, default = None
        Browsing context carried over from the editor

    """

    href: Optional[str] = None
    class_: Optional[str] = None
    target: Optional[str] = None


@dataclass(frozen=True)
class LinkMark(Mark):
    """Hyperlink around the marked text.

    Parameters
    ----------
    attrs : LinkAttrs or None, default = None
        Link attributes; absent attributes mean an empty destination

    """

    type: ClassVar[str] = MARK_TYPE_LINK

    attrs: Optional[LinkAttrs] = field(default=None)

    @property
    def href(self) -> str:
        """Link destination, or an empty string when absent."""
        if self.attrs is None or self.attrs.href is None:
            return ""
        return self.attrs.href

    def accept(self, visitor: "MarkVisitor", text: str, context: "CodeGenerationContext | None" = None) -> str:
        """Dispatch to ``visitor.apply_link``."""
        return visitor.apply_link(self, text, context)


__all__ = [
    "Fragment",
    "Node",
    "iter_fragment",
    "Document",
    "Paragraph",
    "BulletList",
    "OrderedListAttrs",
    "OrderedList",
    "ListItem",
    "Text",
    "Mark",
    "BoldMark",
    "ItalicMark",
    "LinkAttrs",
    "LinkMark",
]
