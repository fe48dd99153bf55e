#  Copyright (c) 2025 Tom Villani, Ph.D.

# resumedoc/options/latex.py
"""Generation context for the LaTeX code generator."""

from __future__ import annotations

from dataclasses import dataclass

from resumedoc.options.base import CodeGenerationContext


@dataclass(frozen=True)
class LatexContext(CodeGenerationContext):
    """Context for AST-to-LaTeX generation.

    Carries no LaTeX-specific settings yet. Special characters in text are
    always escaped; preamble and document class are the build step's
    concern, not the generator's.
    """
