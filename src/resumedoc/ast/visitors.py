#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumedoc/ast/visitors.py
"""Visitor contracts for AST traversal.

Every node variant has exactly one abstract ``visit_*`` method on
``NodeVisitor`` and every mark variant has exactly one abstract ``apply_*``
method on ``MarkVisitor``. Because the methods are abstract, a visitor that
forgets a variant cannot be instantiated: adding a node or mark kind makes
each implementation fail loudly until it handles the new kind.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from resumedoc.ast.nodes import (
    BoldMark,
    BulletList,
    Document,
    ItalicMark,
    LinkMark,
    ListItem,
    OrderedList,
    Paragraph,
    Text,
)

if TYPE_CHECKING:
    from resumedoc.options.base import CodeGenerationContext


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Visit methods receive the node and the read-only context the traversal
    was started with, and return the visitor's result for that subtree.

    Examples
    --------
    Visitor that counts text characters:

        >>> class CharCounter(NodeVisitor):
        ...     def visit_doc(self, node, context=None):
        ...         return sum(c.accept(self) for c in node.content or [])
        ...     visit_paragraph = visit_bullet_list = visit_doc
        ...     visit_ordered_list = visit_list_item = visit_doc
        ...     def visit_text(self, node, context=None):
        ...         return len(node.text)

    """

    @abstractmethod
    def visit_doc(self, node: Document, context: "CodeGenerationContext | None" = None) -> Any:
        """Visit a Document node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph, context: "CodeGenerationContext | None" = None) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_text(self, node: Text, context: "CodeGenerationContext | None" = None) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_bullet_list(self, node: BulletList, context: "CodeGenerationContext | None" = None) -> Any:
        """Visit a BulletList node."""

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList, context: "CodeGenerationContext | None" = None) -> Any:
        """Visit an OrderedList node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem, context: "CodeGenerationContext | None" = None) -> Any:
        """Visit a ListItem node."""


class MarkVisitor(ABC):
    """Abstract base class for mark application.

    Each method takes the current rendered string and returns it wrapped by
    the mark. Implementations must not depend on any mark other than the one
    being applied; composition is the caller's left fold.
    """

    @abstractmethod
    def apply_bold(self, mark: BoldMark, text: str, context: "CodeGenerationContext | None" = None) -> str:
        """Wrap ``text`` in bold."""

    @abstractmethod
    def apply_italic(self, mark: ItalicMark, text: str, context: "CodeGenerationContext | None" = None) -> str:
        """Wrap ``text`` in italics."""

    @abstractmethod
    def apply_link(self, mark: LinkMark, text: str, context: "CodeGenerationContext | None" = None) -> str:
        """Wrap ``text`` in a link to ``mark.href``."""


__all__ = ["NodeVisitor", "MarkVisitor"]
