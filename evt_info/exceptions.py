"""Custom exceptions for the EVT information library.

This module defines the exception hierarchy used throughout the library
to handle invalid arguments, unreadable input files and failures reported
by the event log file handle.
"""

from __future__ import annotations

from typing import Optional


class EvtInfoError(Exception):
    """Base exception for all EVT information errors.

    All custom exceptions in this library inherit from this base class,
    allowing users to catch all library errors with a single except block.
    """

    pass


class InvalidArgumentError(EvtInfoError, ValueError):
    """Raised when a caller passes an invalid value to a library function.

    This indicates a bug in the calling code. An unsupported value (such as
    an unknown language tag) is not an invalid argument and is reported
    through the return value instead.
    """

    def __init__(self, argument: str, message: str) -> None:
        """Initialize the exception with the offending argument name.

        Args:
            argument: Name of the invalid argument.
            message: Human-readable description of the problem.
        """
        self.argument = argument
        super().__init__(f"Invalid {argument}: {message}")


class FileValidationError(EvtInfoError):
    """Raised when input file validation fails.

    This can occur when:
    - The input file does not exist
    - The input path is not a regular file
    - The file cannot be read due to permissions
    - The file does not carry the legacy EVT signature
    """

    pass


class EvtFileError(EvtInfoError):
    """Raised when the event log file handle cannot provide a value."""

    def __init__(self, message: str, file_path: Optional[str] = None) -> None:
        self.file_path = file_path
        if file_path:
            message = f"{message}: {file_path}"
        super().__init__(message)


class FileNotOpenError(EvtFileError):
    """Raised when metadata is requested from a handle that is not open."""

    def __init__(self, accessor: str) -> None:
        self.accessor = accessor
        super().__init__(f"Unable to {accessor}, file is not open")
