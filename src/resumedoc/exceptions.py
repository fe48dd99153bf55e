#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the resumedoc library.

The code generators themselves degrade gracefully on malformed trees and raise
nothing for them. These exceptions cover the remaining failure points: wrong
context types handed to a generator, unreadable or malformed tree files,
unsupported formats, and the LaTeX build step.

Exception Hierarchy
-------------------
- ResumeDocError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong context class for a generator)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, unreadable files)

  - FormatError (unsupported source extension or output format)

  - ParsingError (tree file could not be deserialized)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)
    - LatexCompileError (external LaTeX engine failed)

  - DependencyError (missing external programs)

"""

from typing import Any


class ResumeDocError(Exception):
    """Base exception class for all resumedoc-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(ResumeDocError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when a generator receives a context of the wrong class.

    For example, passing a ``LatexContext`` to the Markdown generator.

    Parameters
    ----------
    generator_name : str
        Name of the generator that received the context
    expected_type : type
        The expected context class
    received_type : type
        The context class that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        generator_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{generator_name} expected a context of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="context", parameter_value=received_type, original_error=original_error
        )
        self.generator_name = generator_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(ResumeDocError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when a tree file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when a file exists but cannot be read."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FormatError(ResumeDocError):
    """Exception raised for an unsupported source extension or output format.

    Parameters
    ----------
    message : str, optional
        Custom error message
    format_type : str, optional
        The unsupported format (file extension or output format name)
    supported_formats : list[str], optional
        Supported values, listed in the default message

    """

    def __init__(
        self,
        message: str | None = None,
        format_type: str | None = None,
        supported_formats: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the format error."""
        if message is None:
            if format_type:
                message = f"Unsupported format: '{format_type}'"
                if supported_formats:
                    message += f". Supported formats: {', '.join(supported_formats)}"
            else:
                message = "Format is not supported"

        super().__init__(message, original_error=original_error)
        self.format_type = format_type
        self.supported_formats = supported_formats


class ParsingError(ResumeDocError):
    """Exception raised when a tree file cannot be turned into nodes.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    file_path : str, optional
        The file being parsed

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.file_path = file_path


class RenderingError(ResumeDocError):
    """Exception raised when producing output fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when writing the generated file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


class LatexCompileError(RenderingError):
    """Exception raised when the LaTeX engine exits unsuccessfully.

    Parameters
    ----------
    command : list[str]
        The command line that was run
    returncode : int or None
        Exit status of the engine, None if it could not be started
    stdout : str
        Captured standard output
    stderr : str
        Captured standard error

    """

    def __init__(
        self,
        command: list[str],
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the compile error with the engine's output."""
        if message is None:
            message = f"LaTeX compilation failed: `{' '.join(command)}`"
            if returncode is not None:
                message += f" exited with status {returncode}"
        super().__init__(message, rendering_stage="latex_compile", original_error=original_error)
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class DependencyError(ResumeDocError):
    """Exception raised when a required external program is not available.

    Parameters
    ----------
    dependency_name : str
        What needed the programs (e.g. ``"latex"``)
    missing_programs : list[str]
        Programs that were searched for on ``PATH``
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(self, dependency_name: str, missing_programs: list[str], message: str | None = None):
        """Initialize the dependency error."""
        if message is None:
            programs = " or ".join(f"'{name}'" for name in missing_programs)
            message = f"{dependency_name} requires {programs} to be installed and on PATH"
        super().__init__(message)
        self.dependency_name = dependency_name
        self.missing_programs = missing_programs


__all__ = [
    "ResumeDocError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "FileNotFoundError",
    "FileAccessError",
    "FormatError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
    "LatexCompileError",
    "DependencyError",
]
