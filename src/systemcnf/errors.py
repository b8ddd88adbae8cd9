"""Errors raised while decoding SYSTEM.CNF text."""

from __future__ import annotations


class DecodeError(ValueError):
    """Base error for SYSTEM.CNF decoding."""


class MissingFieldError(DecodeError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field: {field}")
        self.field = field


class UnknownVideoModeError(DecodeError):
    def __init__(self, value: str, line_no: int | None = None) -> None:
        where = f" (line {line_no})" if line_no is not None else ""
        super().__init__(f"Unknown video mode: {value!r}{where}")
        self.value = value
        self.line_no = line_no


class MalformedLineError(DecodeError):
    def __init__(self, line_no: int, line: str, reason: str) -> None:
        super().__init__(f"Malformed line {line_no}: {reason}: {line!r}")
        self.line_no = line_no
        self.line = line
        self.reason = reason
