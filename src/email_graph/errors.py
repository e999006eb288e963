from __future__ import annotations

from typing import Optional


class EmailGraphError(Exception):
    """Base class for errors raised by email_graph."""


class RecordFormatError(EmailGraphError, ValueError):
    """A raw interaction record is not three non-negative integers."""

    def __init__(self, message: str, *, line_no: Optional[int] = None, line: Optional[str] = None):
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no
        self.line = line
