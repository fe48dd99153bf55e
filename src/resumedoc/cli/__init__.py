#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for resumedoc.

Build a tree file to LaTeX and PDF::

    $ resumedoc build resume.yaml

Markdown into another directory::

    $ resumedoc build resume.json --format markdown --output out/

Only the ``.tex`` file, with debug logging::

    $ resumedoc build resume.yml --no-pdf --verbose

"""

from __future__ import annotations

import argparse
import logging
import sys

from resumedoc import __version__
from resumedoc.constants import DEFAULT_OUTPUT_FORMAT, SUPPORTED_OUTPUT_FORMATS
from resumedoc.exceptions import (
    DependencyError,
    FileError,
    FormatError,
    ParsingError,
    RenderingError,
    ResumeDocError,
    ValidationError,
)
from resumedoc.logging_utils import configure_logging

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

_EXIT_CODES: list[tuple[type[ResumeDocError], int]] = [
    (DependencyError, EXIT_DEPENDENCY_ERROR),
    (ValidationError, EXIT_VALIDATION_ERROR),
    (FileError, EXIT_FILE_ERROR),
    (FormatError, EXIT_FORMAT_ERROR),
    (ParsingError, EXIT_PARSING_ERROR),
    (RenderingError, EXIT_RENDERING_ERROR),
]


def get_exit_code_for_exception(error: ResumeDocError) -> int:
    """Map a library exception to the process exit code."""
    for error_class, code in _EXIT_CODES:
        if isinstance(error, error_class):
            return code
    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with its ``build`` subcommand."""
    parser = argparse.ArgumentParser(
        prog="resumedoc",
        description="Render rich document trees from resume data to Markdown and LaTeX",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="build a document tree to LaTeX (and PDF) or Markdown")
    build.add_argument("resume_path", metavar="resume-path", help="the tree file path (.json, .yaml or .yml)")
    build.add_argument(
        "--no-pdf", dest="pdf", action="store_false", help="only generate the TeX file without compiling a PDF"
    )
    build.add_argument("-o", "--output", metavar="DIR", help="output directory for generated files")
    build.add_argument(
        "-f",
        "--format",
        choices=SUPPORTED_OUTPUT_FORMATS,
        default=DEFAULT_OUTPUT_FORMAT,
        help="output format (default: %(default)s)",
    )

    log_group = build.add_argument_group("logging")
    log_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="logging level (default: %(default)s)",
    )
    log_group.add_argument("--log-file", metavar="PATH", help="also write log records to this file")
    log_group.add_argument("-v", "--verbose", action="store_true", help="shortcut for --log-level DEBUG")
    log_group.add_argument("--trace", action="store_true", help="debug logging with timestamps and logger names")

    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return the process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    # Lazy import so that --help does not load the generators
    from resumedoc.cli.build import build_document

    try:
        build_document(
            parsed_args.resume_path,
            output_format=parsed_args.format,
            pdf=parsed_args.pdf,
            output_dir=parsed_args.output,
        )
    except ResumeDocError as e:
        logger.debug("Build failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


__all__ = [
    "main",
    "create_parser",
    "get_exit_code_for_exception",
    "EXIT_SUCCESS",
    "EXIT_ERROR",
    "EXIT_DEPENDENCY_ERROR",
    "EXIT_VALIDATION_ERROR",
    "EXIT_FILE_ERROR",
    "EXIT_FORMAT_ERROR",
    "EXIT_PARSING_ERROR",
    "EXIT_RENDERING_ERROR",
]
