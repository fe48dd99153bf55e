#  Copyright (c) 2025 Tom Villani, Ph.D.

# resumedoc/options/markdown.py
"""Generation context for the Markdown code generator."""

from __future__ import annotations

from dataclasses import dataclass

from resumedoc.options.base import CodeGenerationContext


@dataclass(frozen=True)
class MarkdownContext(CodeGenerationContext):
    """Context for AST-to-Markdown generation.

    Carries no Markdown-specific settings yet; exists so that callers can
    type their configuration per target format.
    """
