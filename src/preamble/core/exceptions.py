# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

"""
Exception hierarchy for the preamble CLI.

Every failure in preamble is terminal: errors carry a user facing message
and are turned into a colored stderr line and exit code 1 by
handle_preamble_exception.
"""

import contextlib
import functools
import sys
from pathlib import Path

import typer
from loguru import logger

from preamble.constants import HELP_HINT
from preamble.core.ui.theme import themed


class PreambleError(Exception):
    """
    Base exception for all preamble-related errors.

    All preamble-specific exceptions should inherit from this class
    so the CLI can report them consistently.
    """

    def __init__(self, message: str, details: str = None):
        """
        Initialize a PreambleError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class UsageError(PreambleError):
    """Raised when the command line is missing a required option."""

    pass


class MissingOutputError(PreambleError):
    """
    Raised when the output file does not exist.

    preamble only ever rewrites an existing file, it never creates one.
    """

    pass


class FileReadError(PreambleError):
    """
    Errors while reading the external or the output file.

    Attributes:
        path: The path that failed to read
        file_type: Either "external" or "output"
    """

    def __init__(
        self, message: str, path: Path, file_type: str, details: str = None
    ):
        self.path = path
        self.file_type = file_type
        super().__init__(message, details)


class DirectoryReadError(FileReadError):
    """Raised when a directory was given where a file is expected."""

    pass


class MissingFileError(FileReadError):
    """Raised when a file vanished or never existed at read time."""

    pass


class FileWriteError(PreambleError):
    """Raised when the output file cannot be rewritten."""

    def __init__(self, message: str, path: Path, details: str = None):
        self.path = path
        super().__init__(message, details)


# Convenience functions for creating common errors
def output_option_missing() -> UsageError:
    """Create a UsageError for a missing --output option."""
    return UsageError(f"The --output (-o) option is required.\n{HELP_HINT}")


def output_not_found(path: Path) -> MissingOutputError:
    """Create a MissingOutputError for an output path that does not exist."""
    return MissingOutputError(
        f"Your output file does not exist.\n{HELP_HINT}",
        f"Output path checked: {path}",
    )


def is_a_directory(path: Path, file_type: str, details: str = None):
    return DirectoryReadError(
        f"Expecting a file and not a directory:\n{path}", path, file_type, details
    )


def no_such_file(path: Path, file_type: str, details: str = None):
    return MissingFileError(f"No such file exists:\n{path}", path, file_type, details)


def read_failed(path: Path, file_type: str, details: str = None) -> FileReadError:
    """Create a FileReadError for any other failure reading a file."""
    return FileReadError(
        f"There was an error reading your {file_type} file:\n{path}",
        path,
        file_type,
        details,
    )


def write_failed(path: Path, details: str = None) -> FileWriteError:
    """Create a FileWriteError for a failure writing the output file."""
    return FileWriteError(
        f"There was an error writing your file:\n{path}", path, details
    )


def report_error(error: PreambleError) -> None:
    """Print an error for the user: themed message followed by a blank line."""
    print(themed("error", error.message) + "\n", file=sys.stderr)


@contextlib.contextmanager
def _exception_handler(exit_on_fail: bool):
    try:
        yield
    except PreambleError as e:
        logger.debug(
            "{kind}: {details}",
            kind=type(e).__name__,
            details=e.details or e.message,
        )
        report_error(e)
        if exit_on_fail:
            raise typer.Exit(1)
        raise


def handle_preamble_exception(func=None, *, exit_on_fail: bool = True):
    """
    Report PreambleErrors and exit with code 1.

    Usable as a bare decorator (``@handle_preamble_exception``) or as a
    context manager (``with handle_preamble_exception():``).
    """
    if func is None:
        return _exception_handler(exit_on_fail)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with _exception_handler(exit_on_fail):
            return func(*args, **kwargs)

    return wrapper
