"""Exceptions raised while regrouping use declarations.

Everything raised on purpose by merge_uses inherits from MergeUsesError, so
callers (the command line included) can handle all of them with a single
except clause.
"""
from __future__ import annotations

from typing import Sequence


class MergeUsesError(Exception):
    """Base exception for all merge_uses errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ParseError(MergeUsesError):
    """The source could not be parsed as Rust.

    Attributes:
        line: 1-based line of the first syntax error.
        column: 1-based column of the first syntax error.
    """

    def __init__(self, line: int, column: int) -> None:
        self.line = line
        self.column = column
        super().__init__(f'failed to parse source at {line}:{column}')


class UnsupportedUseError(MergeUsesError):
    """A use declaration falls outside the subset that can be regrouped.

    Decorated declarations (attributes, doc comments, comments inside or
    between declarations) and a few syntax forms are rejected rather than
    rewritten with their decorations dropped.
    """


class FormatterError(MergeUsesError):
    """The external formatter failed or could not be started.

    Attributes:
        command: The command line that was run.
        returncode: Exit status of the formatter, if it ran.
        stderr: What the formatter wrote to stderr, if it ran.
        cause: The exception raised when starting the formatter, if any.
    """

    def __init__(
            self,
            command: Sequence[str],
            returncode: int | None = None,
            stderr: str = '',
            cause: Exception | None = None,
    ) -> None:
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr
        self.cause = cause
        message = f'{self.command[0]} failed'
        if returncode is not None:
            message += f' with exit status {returncode}'
        if cause is not None:
            message += f': {cause}'
        elif stderr.strip():
            message += f': {stderr.strip()}'
        super().__init__(message)
