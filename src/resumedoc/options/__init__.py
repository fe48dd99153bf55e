#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Generation contexts for resumedoc code generators.

Each target format has its own frozen context dataclass deriving from
``CodeGenerationContext``. A generator accepts either its own context class
or the shared base class.
"""

from __future__ import annotations

from typing import TypeVar

from resumedoc.options.base import CloneFrozenMixin, CodeGenerationContext
from resumedoc.options.latex import LatexContext
from resumedoc.options.markdown import MarkdownContext

ContextT = TypeVar("ContextT", bound=CodeGenerationContext)


def create_updated_context(context: ContextT, **kwargs: object) -> ContextT:
    """Return a copy of ``context`` with the given fields replaced.

    Parameters
    ----------
    context : CodeGenerationContext
        Context to copy
    **kwargs
        Field names and their new values

    Returns
    -------
    CodeGenerationContext
        New context of the same class

    Raises
    ------
    TypeError
        If a keyword does not name a field of the context class

    """
    return context.create_updated(**kwargs)


__all__ = [
    "CloneFrozenMixin",
    "CodeGenerationContext",
    "LatexContext",
    "MarkdownContext",
    "create_updated_context",
]
