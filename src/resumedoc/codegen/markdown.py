#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumedoc/codegen/markdown.py
"""Markdown code generation from the rich document tree.

Block rules:

- ``doc``: children concatenated
- ``paragraph``: a lone ``"\\n"`` when empty, otherwise inline content
  followed by ``"\\n\\n"``
- ``bulletList`` / ``orderedList``: one line per item, ``"- "`` or ``"{n}. "``
  followed by the item body with trailing newlines stripped
- ``listItem`` on its own: rendered with the bullet marker

Text is emitted verbatim and marks wrap it in declaration order: with
``[bold, italic]`` the italic delimiter wraps ``**text**``, giving
``***text***``.

"""

from __future__ import annotations

from resumedoc.ast.nodes import (
    BoldMark,
    BulletList,
    Document,
    ItalicMark,
    LinkMark,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Text,
)
from resumedoc.codegen.base import CodeGenerator
from resumedoc.constants import (
    MARKDOWN_BOLD_DELIMITER,
    MARKDOWN_BULLET_MARKER,
    MARKDOWN_ITALIC_DELIMITER,
)
from resumedoc.options.base import CodeGenerationContext
from resumedoc.options.markdown import MarkdownContext


class MarkdownCodeGenerator(CodeGenerator):
    """Generate Markdown from AST nodes.

    Examples
    --------
        >>> from resumedoc.ast import OrderedList, OrderedListAttrs, ListItem, Paragraph, Text
        >>> item = ListItem(content=[Paragraph(content=[Text(text="Item")])])
        >>> node = OrderedList(content=[item, item], attrs=OrderedListAttrs(start=5))
        >>> MarkdownCodeGenerator().generate(node)
        '5. Item\\n6. Item\\n'

    """

    format_name = "markdown"
    context_class = MarkdownContext

    def visit_doc(self, node: Document, context: CodeGenerationContext | None = None) -> str:
        """Render a Document node."""
        return self._render_fragment(node.content, context)

    def visit_paragraph(self, node: Paragraph, context: CodeGenerationContext | None = None) -> str:
        """Render a Paragraph node.

        An empty paragraph still produces one newline so that consecutive
        empty paragraphs remain visible as vertical space.
        """
        if not node.content:
            return "\n"
        return f"{self._render_fragment(node.content, context)}\n\n"

    def visit_text(self, node: Text, context: CodeGenerationContext | None = None) -> str:
        """Render a Text node with its marks applied."""
        return self._apply_marks(node.text, node.marks, context)

    def visit_bullet_list(self, node: BulletList, context: CodeGenerationContext | None = None) -> str:
        """Render a BulletList node."""
        return "".join(
            self._list_line(MARKDOWN_BULLET_MARKER, item, context) for item in self._iter_list_items(node.content)
        )

    def visit_ordered_list(self, node: OrderedList, context: CodeGenerationContext | None = None) -> str:
        """Render an OrderedList node, numbering items from ``node.start``."""
        return "".join(
            self._list_line(f"{number}. ", item, context)
            for number, item in enumerate(self._iter_list_items(node.content), start=node.start)
        )

    def visit_list_item(self, node: ListItem, context: CodeGenerationContext | None = None) -> str:
        """Render a ListItem outside of any list, using the bullet marker."""
        return self._list_line(MARKDOWN_BULLET_MARKER, node, context)

    def _list_line(self, marker: str, item: ListItem, context: CodeGenerationContext | None) -> str:
        return f"{marker}{self._render_list_item_body(item, context)}\n"

    def apply_bold(self, mark: BoldMark, text: str, context: CodeGenerationContext | None = None) -> str:
        """Wrap text in ``**``."""
        return f"{MARKDOWN_BOLD_DELIMITER}{text}{MARKDOWN_BOLD_DELIMITER}"

    def apply_italic(self, mark: ItalicMark, text: str, context: CodeGenerationContext | None = None) -> str:
        """Wrap text in ``*``."""
        return f"{MARKDOWN_ITALIC_DELIMITER}{text}{MARKDOWN_ITALIC_DELIMITER}"

    def apply_link(self, mark: LinkMark, text: str, context: CodeGenerationContext | None = None) -> str:
        """Wrap text as ``[text](href)``; a missing href gives ``[text]()``."""
        return f"[{text}]({mark.href})"


_DEFAULT_GENERATOR = MarkdownCodeGenerator()


def node_to_markdown(node: Node, context: CodeGenerationContext | None = None) -> str:
    """Convert an AST node to Markdown.

    Parameters
    ----------
    node : Node
        The node to convert
    context : CodeGenerationContext or None, default = None
        Optional layout settings

    Returns
    -------
    str
        The generated Markdown

    """
    return _DEFAULT_GENERATOR.generate(node, context)


__all__ = ["MarkdownCodeGenerator", "node_to_markdown"]
