"""Exceptions raised while parsing PowerChurch text reports."""

from __future__ import annotations

from typing import Optional


class ReportParseError(ValueError):
    """Base class for every failure to parse a report file."""


class ReportFormatError(ReportParseError):
    """
    The input is not a recognised PowerChurch report.

    Raised when a required header line is missing or the column-title line
    does not match. Processing of the file stops; nothing is written for it.
    """

    def __init__(self, message: str, line: Optional[str] = None):
        super().__init__(message)
        self.line = line

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is not None:
            return f"{message} (got {self.line!r})"
        return message


class EmptyBufferError(ReportParseError, IndexError):
    """A line was requested from a buffer that has no lines left."""


__all__ = ["ReportParseError", "ReportFormatError", "EmptyBufferError"]
