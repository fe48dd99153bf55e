#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumedoc/constants.py
"""Constants and default values used across resumedoc.

Defaults for generation contexts, the node and mark type tags used in the
serialized tree format, and settings for the ``build`` command live here so
that modules share one source of truth.
"""

from __future__ import annotations

from typing import Literal

OutputFormat = Literal["markdown", "latex"]
LatexEngine = Literal["xelatex", "tectonic"]

# =============================================================================
# Generation context defaults
# =============================================================================

DEFAULT_INDENT_WIDTH = 2
DEFAULT_LINE_WIDTH = 0  # 0 = no hard wrapping

# =============================================================================
# Tree format
# =============================================================================

NODE_TYPE_DOC = "doc"
NODE_TYPE_PARAGRAPH = "paragraph"
NODE_TYPE_TEXT = "text"
NODE_TYPE_BULLET_LIST = "bulletList"
NODE_TYPE_ORDERED_LIST = "orderedList"
NODE_TYPE_LIST_ITEM = "listItem"

MARK_TYPE_BOLD = "bold"
MARK_TYPE_ITALIC = "italic"
MARK_TYPE_LINK = "link"

DEFAULT_ORDERED_LIST_START = 1

# =============================================================================
# Markdown
# =============================================================================

MARKDOWN_BULLET_MARKER = "- "
MARKDOWN_BOLD_DELIMITER = "**"
MARKDOWN_ITALIC_DELIMITER = "*"

# =============================================================================
# LaTeX
# =============================================================================

LATEX_SPECIAL_CHARS: dict[str, str] = {
    "\\": r"\textbackslash{}",
    "{": r"\{",
    "}": r"\}",
    "$": r"\$",
    "%": r"\%",
    "&": r"\&",
    "#": r"\#",
    "_": r"\_",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

# Escaping inside \href{...}; backslash and braces are percent-encoded
# since they cannot appear literally in the argument
LATEX_URL_SPECIAL_CHARS: dict[str, str] = {
    "%": r"\%",
    "#": r"\#",
    "\\": r"\%5C",
    "{": r"\%7B",
    "}": r"\%7D",
}

DEFAULT_LATEX_DOCUMENT_CLASS = "article"
DEFAULT_LATEX_PACKAGES: list[str] = ["hyperref", "enumitem"]

# =============================================================================
# Build command
# =============================================================================

SOURCE_EXTENSIONS: tuple[str, ...] = (".yaml", ".yml", ".json")
OUTPUT_EXTENSIONS: dict[str, str] = {"markdown": ".md", "latex": ".tex"}
SUPPORTED_OUTPUT_FORMATS: list[str] = ["latex", "markdown"]
DEFAULT_OUTPUT_FORMAT: OutputFormat = "latex"

# Engines in order of preference
LATEX_ENGINES: tuple[LatexEngine, ...] = ("xelatex", "tectonic")
