"""Test utilities for the resumedoc test suite.

Small builders for trees used across generator and CLI tests, and the
expected output of the shared sample resume tree.
"""

from resumedoc.ast import ListItem, Paragraph, Text


def paragraph(*texts: str) -> Paragraph:
    """Build a paragraph of unmarked text runs."""
    return Paragraph(content=[Text(text=text) for text in texts])


def item(*blocks) -> ListItem:
    """Build a list item; plain strings become one-run paragraphs."""
    return ListItem(content=[paragraph(block) if isinstance(block, str) else block for block in blocks])


RESUME_MARKDOWN = (
    "Senior engineer at [Acme](https://acme.example).\n\n"
    "- Led the platform team\n"
    "- Shipped:\n\n3. billing\n4. search\n"
    "***Impact***\n\n"
)

RESUME_LATEX_BODY = (
    "Senior engineer at \\href{https://acme.example}{Acme}.\n\n"
    "\\begin{itemize}\n"
    "\\item Led the platform team\n"
    "\\item Shipped:\n\n\\begin{enumerate}[start=3]\n\\item billing\n\\item search\n\\end{enumerate}\n"
    "\\end{itemize}\n"
    "\\textit{\\textbf{Impact}}\n\n"
)
