"""Failures raised while fetching and decoding a single day's document."""

from __future__ import annotations


class FxWindowError(Exception):
    def __init__(self, message: str, date_str: str | None = None) -> None:
        super().__init__(message)
        self.date_str = date_str

    def __str__(self) -> str:
        msg = super().__str__()
        if self.date_str:
            return f"{self.date_str}: {msg}"
        return msg


class TransportError(FxWindowError):
    """Network failure, timeout or non-2xx response."""


class DecodeError(FxWindowError):
    """Malformed XML, unknown encoding or missing element."""


class ParseError(FxWindowError):
    """Rate field that is not a number."""
