#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumedoc/codegen/latex.py
r"""LaTeX code generation from the rich document tree.

Produces a document body fragment, not a complete document: preamble and
document class belong to whatever template includes the output. Ordered
lists that do not start at 1 use the ``start`` key of the enumitem package.

"""

from __future__ import annotations

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
from resumedoc.codegen.base import CodeGenerator
from resumedoc.constants import DEFAULT_ORDERED_LIST_START, LATEX_SPECIAL_CHARS, LATEX_URL_SPECIAL_CHARS
from resumedoc.options.base import CodeGenerationContext
from resumedoc.options.latex import LatexContext


def escape_latex(text: str) -> str:
    """Escape LaTeX special characters in literal text.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text

    """
    return "".join(LATEX_SPECIAL_CHARS.get(char, char) for char in text)


def escape_latex_url(url: str) -> str:
    r"""Escape the characters that break ``\href`` arguments."""
    return "".join(LATEX_URL_SPECIAL_CHARS.get(char, char) for char in url)


class LatexCodeGenerator(CodeGenerator):
    r"""Generate LaTeX from AST nodes.

    Examples
    --------
        >>> from resumedoc.ast import BoldMark, Text
        >>> LatexCodeGenerator().generate(Text(text="50% off", marks=[BoldMark()]))
        '\\textbf{50\\% off}'

    """

    format_name = "latex"
    context_class = LatexContext

    def visit_doc(self, node: Document, context: CodeGenerationContext | None = None) -> str:
        """Render a Document node."""
        return self._render_fragment(node.content, context)

    def visit_paragraph(self, node: Paragraph, context: CodeGenerationContext | None = None) -> str:
        """Render a Paragraph node; a blank line ends the paragraph."""
        if not node.content:
            return "\n"
        return f"{self._render_fragment(node.content, context)}\n\n"

    def visit_text(self, node: Text, context: CodeGenerationContext | None = None) -> str:
        """Render a Text node: escape first, then apply marks."""
        return self._apply_marks(escape_latex(node.text), node.marks, context)

    def visit_bullet_list(self, node: BulletList, context: CodeGenerationContext | None = None) -> str:
        """Render a BulletList as an itemize environment."""
        items = "".join(self._item_line(item, context) for item in self._iter_list_items(node.content))
        if not items:
            return ""
        return f"\\begin{{itemize}}\n{items}\\end{{itemize}}\n"

    def visit_ordered_list(self, node: OrderedList, context: CodeGenerationContext | None = None) -> str:
        """Render an OrderedList as an enumerate environment."""
        items = "".join(self._item_line(item, context) for item in self._iter_list_items(node.content))
        if not items:
            return ""
        start = node.start
        options = f"[start={start}]" if start != DEFAULT_ORDERED_LIST_START else ""
        return f"\\begin{{enumerate}}{options}\n{items}\\end{{enumerate}}\n"

    def visit_list_item(self, node: ListItem, context: CodeGenerationContext | None = None) -> str:
        r"""Render a ListItem as a single ``\item`` line."""
        return self._item_line(node, context)

    def _item_line(self, item: ListItem, context: CodeGenerationContext | None) -> str:
        return f"\\item {self._render_list_item_body(item, context)}\n"

    def apply_bold(self, mark: BoldMark, text: str, context: CodeGenerationContext | None = None) -> str:
        r"""Wrap text in ``\textbf``."""
        return f"\\textbf{{{text}}}"

    def apply_italic(self, mark: ItalicMark, text: str, context: CodeGenerationContext | None = None) -> str:
        r"""Wrap text in ``\textit``."""
        return f"\\textit{{{text}}}"

    def apply_link(self, mark: LinkMark, text: str, context: CodeGenerationContext | None = None) -> str:
        r"""Wrap text in ``\href``; a missing href gives an empty destination."""
        return f"\\href{{{escape_latex_url(mark.href)}}}{{{text}}}"


__all__ = ["LatexCodeGenerator", "escape_latex", "escape_latex_url"]
