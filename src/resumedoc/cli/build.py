#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/resumedoc/cli/build.py
"""Build a rich document tree file into Markdown, LaTeX and PDF.

The ``build`` command reads a tree from a ``.json``, ``.yaml`` or ``.yml``
file, writes the generated ``.md`` or ``.tex`` next to it (or into an output
directory) and, for LaTeX, optionally compiles a PDF with ``xelatex`` or
``tectonic``, whichever is found first on ``PATH``.

Steps:

1. read and deserialize the tree from the source file
2. generate the output file for the requested format
3. if the format is LaTeX and a PDF was requested, run the LaTeX engine

"""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from rich.console import Console
from rich.markup import escape

from resumedoc.ast.nodes import Document, Node
from resumedoc.ast.serialization import json_to_ast, yaml_to_ast
from resumedoc.codegen import get_code_generator
from resumedoc.constants import (
    DEFAULT_LATEX_DOCUMENT_CLASS,
    DEFAULT_LATEX_PACKAGES,
    DEFAULT_OUTPUT_FORMAT,
    LATEX_ENGINES,
    OUTPUT_EXTENSIONS,
    SOURCE_EXTENSIONS,
    SUPPORTED_OUTPUT_FORMATS,
    LatexEngine,
)
from resumedoc.exceptions import (
    DependencyError,
    FileAccessError,
    FormatError,
    LatexCompileError,
    OutputWriteError,
    ParsingError,
)
from resumedoc.exceptions import FileNotFoundError as ResumeDocFileNotFoundError

logger = logging.getLogger(__name__)

console = Console(stderr=True)


@dataclass(frozen=True)
class LatexCommand:
    """An engine invocation: program, arguments and working directory."""

    command: str
    args: tuple[str, ...] = ()
    cwd: str = "."

    @property
    def argv(self) -> list[str]:
        """Full argument vector for ``subprocess``."""
        return [self.command, *self.args]


def _check_source_extension(resume_path: str | Path) -> Path:
    path = Path(resume_path)
    if path.suffix not in SOURCE_EXTENSIONS:
        raise FormatError(
            message=f"Unsupported source file extension: '{path.suffix}'. "
            f"Expected one of: {', '.join(SOURCE_EXTENSIONS)}",
            format_type=path.suffix,
            supported_formats=list(SOURCE_EXTENSIONS),
        )
    return path


def _check_output_format(output_format: str) -> None:
    if output_format not in OUTPUT_EXTENSIONS:
        raise FormatError(format_type=output_format, supported_formats=SUPPORTED_OUTPUT_FORMATS)


def infer_output(resume_path: str | Path, output_format: str, output_dir: str | Path | None = None) -> Path:
    """Infer the generated file's path from the source file's path.

    Parameters
    ----------
    resume_path : str or Path
        Source tree file (``.json``, ``.yaml`` or ``.yml``)
    output_format : str
        ``"markdown"`` (``.md``) or ``"latex"`` (``.tex``)
    output_dir : str, Path or None, default = None
        Directory to place the file in; defaults to the source's directory

    Returns
    -------
    Path
        Path of the file to generate

    Raises
    ------
    FormatError
        If the source has an unsupported extension or the format is unknown

    """
    path = _check_source_extension(resume_path)
    _check_output_format(output_format)

    output_path = path.with_suffix(OUTPUT_EXTENSIONS[output_format])
    if output_dir:
        return Path(output_dir) / output_path.name
    return output_path


def get_pdf_path(tex_path: str | Path) -> Path:
    """Return the PDF path that compiling ``tex_path`` produces."""
    return Path(tex_path).with_suffix(".pdf")


def is_command_available(command: str) -> bool:
    """Return True if ``command`` is found on ``PATH``."""
    return shutil.which(command) is not None


def infer_latex_environment() -> LatexEngine:
    """Pick the LaTeX engine to compile with.

    ``xelatex`` is preferred when both engines are installed.

    Raises
    ------
    DependencyError
        If neither engine is found on ``PATH``

    """
    for engine in LATEX_ENGINES:
        if is_command_available(engine):
            logger.debug("Using LaTeX engine: %s", engine)
            return engine

    raise DependencyError("LaTeX compilation", list(LATEX_ENGINES))


def infer_latex_command(resume_path: str | Path, output_dir: str | Path | None = None) -> LatexCommand:
    """Build the engine command that compiles the generated ``.tex`` file.

    Parameters
    ----------
    resume_path : str or Path
        Source tree file
    output_dir : str, Path or None, default = None
        Directory the ``.tex`` file was written to

    Returns
    -------
    LatexCommand
        Command, arguments (the ``.tex`` basename) and working directory

    Raises
    ------
    DependencyError
        If no LaTeX engine is installed
    FormatError
        If the source file extension is unsupported

    """
    engine = infer_latex_environment()
    tex_file = infer_output(resume_path, "latex", output_dir)

    if engine == "xelatex":
        args = ("-halt-on-error", tex_file.name)
    else:
        args = (tex_file.name,)

    cwd = Path(output_dir).resolve() if output_dir else tex_file.resolve().parent
    return LatexCommand(command=engine, args=args, cwd=str(cwd))


def load_document(resume_path: str | Path) -> Node:
    """Read and deserialize a tree file.

    Raises
    ------
    FormatError
        If the extension is not ``.json``, ``.yaml`` or ``.yml``
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the file cannot be read
    ParsingError
        If the content is not a valid tree

    """
    path = _check_source_extension(resume_path)
    if not path.exists():
        raise ResumeDocFileNotFoundError(str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(str(path), original_error=e) from e

    try:
        if path.suffix == ".json":
            return json_to_ast(text)
        return yaml_to_ast(text)
    except (ValueError, yaml.YAMLError) as e:
        # json.JSONDecodeError is a ValueError
        raise ParsingError(f"Invalid document tree in {path}: {e}", file_path=str(path), original_error=e) from e


def wrap_latex_document(body: str) -> str:
    """Wrap a generated LaTeX body in a minimal compilable document."""
    packages = "".join(f"\\usepackage{{{package}}}\n" for package in DEFAULT_LATEX_PACKAGES)
    return (
        f"\\documentclass{{{DEFAULT_LATEX_DOCUMENT_CLASS}}}\n\n"
        f"{packages}\n"
        "\\begin{document}\n\n"
        f"{body}"
        "\\end{document}\n"
    )


def generate_output(
    resume_path: str | Path,
    document: Node,
    output_format: str,
    output_dir: str | Path | None = None,
) -> Path:
    """Generate the output file for ``document``.

    Parameters
    ----------
    resume_path : str or Path
        Source tree file, used to name the output
    document : Node
        Tree to render
    output_format : str
        ``"markdown"`` or ``"latex"``
    output_dir : str, Path or None, default = None
        Directory for the output; created if missing

    Returns
    -------
    Path
        The written file

    Raises
    ------
    FormatError
        If the extension or format is unsupported
    OutputWriteError
        If the directory or file cannot be written

    """
    output_file = infer_output(resume_path, output_format, output_dir)

    rendered = get_code_generator(output_format).generate(document)
    if output_format == "latex":
        rendered = wrap_latex_document(rendered)

    try:
        if output_dir:
            Path(output_dir).mkdir(parents=True, exist_ok=True)
        output_file.write_text(rendered, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(output_file), original_error=e) from e

    logger.info("Wrote %s", output_file)
    return output_file


def compile_latex(command: LatexCommand) -> subprocess.CompletedProcess[str]:
    """Run the LaTeX engine.

    Raises
    ------
    LatexCompileError
        If the engine cannot be started or exits with a non-zero status

    """
    try:
        result = subprocess.run(
            command.argv,
            cwd=command.cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
        )
    except OSError as e:
        raise LatexCompileError(command.argv, message=f"Failed to run {command.command}: {e}", original_error=e) from e

    logger.debug("stdout:\n%s", result.stdout)
    if result.returncode != 0:
        logger.debug("stderr:\n%s", result.stderr)
        raise LatexCompileError(command.argv, result.returncode, stdout=result.stdout, stderr=result.stderr)
    return result


def build_document(
    resume_path: str | Path,
    output_format: str = DEFAULT_OUTPUT_FORMAT,
    pdf: bool = True,
    output_dir: Optional[str | Path] = None,
) -> Path:
    """Build a tree file to the requested output format.

    Parameters
    ----------
    resume_path : str or Path
        Source tree file (``.json``, ``.yaml`` or ``.yml``)
    output_format : str, default "latex"
        ``"markdown"`` or ``"latex"``
    pdf : bool, default True
        For LaTeX, also compile a PDF; ignored for Markdown
    output_dir : str, Path or None, default = None
        Directory for generated files

    Returns
    -------
    Path
        The PDF when one was compiled, otherwise the generated text file

    Raises
    ------
    ResumeDocError
        Any of the errors raised by the individual steps

    """
    _check_output_format(output_format)

    document = load_document(resume_path)
    if not isinstance(document, Document):
        logger.debug("Root node is '%s', not 'doc'; rendering it as-is", document.type)

    output_file = generate_output(resume_path, document, output_format, output_dir)

    if output_format == "markdown":
        console.print("[green]Generated markdown file successfully.[/green]")
        return output_file

    if not pdf:
        console.print("[green]Generated TeX file successfully.[/green]")
        return output_file

    command = infer_latex_command(resume_path, output_dir)
    console.print(f"Generating PDF file with command: `{escape(' '.join(command.argv))}`...")
    compile_latex(command)
    console.print("[green]Generated PDF file successfully.[/green]")
    return get_pdf_path(output_file)


__all__ = [
    "LatexCommand",
    "infer_output",
    "get_pdf_path",
    "is_command_available",
    "infer_latex_environment",
    "infer_latex_command",
    "load_document",
    "wrap_latex_document",
    "generate_output",
    "compile_latex",
    "build_document",
]
