"""Custom exceptions for pylaslog."""

from __future__ import annotations


class PylaslogError(Exception):
    """Base exception for all pylaslog errors."""


class LASReadError(PylaslogError):
    """Raised when a LAS file cannot be read (file not found, permissions)."""


class LASEncodingError(PylaslogError):
    """Raised when file encoding cannot be determined or decoded."""


class LASParseError(PylaslogError):
    """Raised when LAS file content cannot be parsed.

    Carries the 1-based line number and raw text of the offending line
    when the failure can be tied to one.
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}: {line!r}"
        super().__init__(message)


class FieldSyntaxError(LASParseError):
    """Raised when a header line lacks the mandatory '.' separator."""


class MissingSectionError(LASParseError):
    """Raised when a required section (~C) is absent or empty."""


class NumericParseError(LASParseError):
    """Raised when a data token is not a valid finite number."""

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
        token: str = "",
    ) -> None:
        self.token = token
        super().__init__(message, line_number, line)


class ColumnCountMismatchError(LASParseError):
    """Raised when a data record does not match the declared curve count."""

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
        expected: int = 0,
        actual: int = 0,
    ) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(message, line_number, line)
