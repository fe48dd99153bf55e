#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for generation contexts.

A generation context is the read-only configuration object threaded through
every recursive call of a code generator. Contexts are frozen dataclasses so
that one instance can be shared between calls and threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Self

from resumedoc.constants import DEFAULT_INDENT_WIDTH, DEFAULT_LINE_WIDTH


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class CodeGenerationContext(CloneFrozenMixin):
    """Layout settings shared by all code generators.

    The fields reserve the layout knobs that line-oriented formats need. The
    current Markdown and LaTeX generators accept a context but do not read
    any of its fields, so adding a layout-sensitive format later does not
    change the ``generate`` signature.

    Parameters
    ----------
    indent_width : int, default 2
        Number of spaces per nesting level.
    line_width : int, default 0
        Column at which to hard-wrap lines (0 = no wrapping).

    """

    indent_width: int = field(
        default=DEFAULT_INDENT_WIDTH,
        metadata={"help": "Spaces per nesting level", "type": int, "importance": "advanced"},
    )
    line_width: int = field(
        default=DEFAULT_LINE_WIDTH,
        metadata={"help": "Hard line-wrap column (0 = no wrapping)", "type": int, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.indent_width < 0:
            raise ValueError(f"indent_width must be non-negative, got {self.indent_width}")
        if self.line_width < 0:
            raise ValueError(f"line_width must be non-negative, got {self.line_width}")
