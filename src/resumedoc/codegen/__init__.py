#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Code generators turning the rich document tree into markup text.

All generators implement the same ``generate(node, context=None) -> str``
contract over the same node vocabulary. Callers pick one by target format:

    >>> from resumedoc.codegen import get_code_generator
    >>> generator = get_code_generator("latex")

"""

from __future__ import annotations

from resumedoc.codegen.base import CodeGenerator
from resumedoc.codegen.latex import LatexCodeGenerator, escape_latex
from resumedoc.codegen.markdown import MarkdownCodeGenerator, node_to_markdown
from resumedoc.constants import SUPPORTED_OUTPUT_FORMATS
from resumedoc.exceptions import FormatError

_GENERATORS: dict[str, type[CodeGenerator]] = {
    MarkdownCodeGenerator.format_name: MarkdownCodeGenerator,
    LatexCodeGenerator.format_name: LatexCodeGenerator,
}


def get_code_generator(output_format: str) -> CodeGenerator:
    """Return a generator for the given target format.

    Parameters
    ----------
    output_format : str
        ``"markdown"`` or ``"latex"``

    Returns
    -------
    CodeGenerator
        A new generator instance

    Raises
    ------
    FormatError
        If no generator is registered for ``output_format``

    """
    generator_class = _GENERATORS.get(output_format)
    if generator_class is None:
        raise FormatError(format_type=output_format, supported_formats=SUPPORTED_OUTPUT_FORMATS)
    return generator_class()


__all__ = [
    "CodeGenerator",
    "MarkdownCodeGenerator",
    "LatexCodeGenerator",
    "get_code_generator",
    "node_to_markdown",
    "escape_latex",
]
