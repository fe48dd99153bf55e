#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/resumedoc/codegen/base.py
"""Base class for code generators.

A code generator maps a rich document tree to target-format text through a
single public entry point, ``generate(node, context=None) -> str``. Each
target format subclasses ``CodeGenerator`` and implements one method per node
variant and one per mark variant; the abstract methods inherited from the
visitor contracts guarantee that no variant is left unhandled.

"""

from __future__ import annotations

import logging
from abc import ABC
from functools import reduce
from typing import ClassVar, Iterator

from resumedoc.ast.nodes import Fragment, ListItem, Mark, Node, iter_fragment
from resumedoc.ast.visitors import MarkVisitor, NodeVisitor
from resumedoc.exceptions import InvalidOptionsError
from resumedoc.options.base import CodeGenerationContext

logger = logging.getLogger(__name__)


class CodeGenerator(NodeVisitor, MarkVisitor, ABC):
    """Abstract base class for all code generators.

    Generators are stateless: every ``visit_*`` and ``apply_*`` method is a
    pure function of its arguments, so a single instance can serve any number
    of concurrent ``generate`` calls.

    Subclasses set ``format_name`` and ``context_class``.

    Examples
    --------
    Selecting a generator by target format:

        >>> from resumedoc.codegen import get_code_generator
        >>> from resumedoc.ast import Paragraph, Text
        >>> get_code_generator("markdown").generate(Paragraph(content=[Text(text="Hi")]))
        'Hi\\n\\n'

    """

    format_name: ClassVar[str]
    context_class: ClassVar[type[CodeGenerationContext]] = CodeGenerationContext

    def generate(self, node: Node, context: CodeGenerationContext | None = None) -> str:
        """Generate target-format code from an AST node.

        Parameters
        ----------
        node : Node
            The node to generate code from; any variant, not only Document
        context : CodeGenerationContext or None, default = None
            Read-only layout settings passed unchanged to every recursive call

        Returns
        -------
        str
            The generated code

        Raises
        ------
        InvalidOptionsError
            If ``context`` is neither this generator's context class nor the
            shared ``CodeGenerationContext`` base

        """
        self._validate_context_type(context)
        return node.accept(self, context)

    def _validate_context_type(self, context: CodeGenerationContext | None) -> None:
        if context is None or type(context) is CodeGenerationContext:
            return
        if not isinstance(context, self.context_class):
            raise InvalidOptionsError(
                generator_name=self.format_name,
                expected_type=self.context_class,
                received_type=type(context),
            )

    def _render_fragment(self, content: Fragment, context: CodeGenerationContext | None) -> str:
        """Concatenate the output of each node in order; absent renders as empty."""
        return "".join(child.accept(self, context) for child in iter_fragment(content))

    def _apply_marks(self, text: str, marks: list[Mark] | None, context: CodeGenerationContext | None) -> str:
        """Left fold of ``marks`` over ``text``; each mark wraps the previous result."""
        if marks is None:
            return text
        return reduce(lambda current, mark: mark.accept(self, current, context), marks, text)

    def _render_list_item_body(self, node: ListItem, context: CodeGenerationContext | None) -> str:
        """Render the item's blocks and strip every trailing newline.

        Blocks inside the item keep their own separators, so a paragraph
        followed by a nested list leaves a blank line between the two.
        """
        return self._render_fragment(node.content, context).rstrip("\n")

    def _iter_list_items(self, content: Fragment) -> Iterator[ListItem]:
        """Yield the ListItem entries of a list, skipping anything else."""
        for entry in iter_fragment(content):
            if isinstance(entry, ListItem):
                yield entry
            else:
                logger.debug("Skipping non-listItem entry in list content: %s", type(entry).__name__)


__all__ = ["CodeGenerator"]
