#  Copyright (c) 2025 Tom Villani, Ph.D.
"""resumedoc - render rich document trees to Markdown and LaTeX.

The rich document tree is the structured form of a resume's narrative fields:
paragraphs, bullet and ordered lists, and text runs carrying bold, italic and
link marks. This package holds the tree model and the code generators that
turn it into markup.

Examples
--------
    >>> from resumedoc import Document, Paragraph, Text, get_code_generator
    >>> doc = Document(content=[Paragraph(content=[Text(text="Hello, "), Text(text="world!")])])
    >>> get_code_generator("markdown").generate(doc)
    'Hello, world!\\n\\n'

"""

from __future__ import annotations

__version__ = "0.1.0"

from resumedoc.ast import (  # noqa: E402
    BoldMark,
    BulletList,
    Document,
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
    dict_to_ast,
    json_to_ast,
    yaml_to_ast,
)
from resumedoc.codegen import (  # noqa: E402
    CodeGenerator,
    LatexCodeGenerator,
    MarkdownCodeGenerator,
    get_code_generator,
    node_to_markdown,
)
from resumedoc.exceptions import ResumeDocError  # noqa: E402
from resumedoc.options import CodeGenerationContext, LatexContext, MarkdownContext  # noqa: E402

__all__ = [
    "__version__",
    "Node",
    "Document",
    "Paragraph",
    "Text",
    "BulletList",
    "OrderedList",
    "OrderedListAttrs",
    "ListItem",
    "Mark",
    "BoldMark",
    "ItalicMark",
    "LinkMark",
    "LinkAttrs",
    "dict_to_ast",
    "json_to_ast",
    "yaml_to_ast",
    "CodeGenerator",
    "MarkdownCodeGenerator",
    "LatexCodeGenerator",
    "get_code_generator",
    "node_to_markdown",
    "CodeGenerationContext",
    "MarkdownContext",
    "LatexContext",
    "ResumeDocError",
]
