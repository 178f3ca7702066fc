"""
Exception hierarchy for the continued-line decoder.

``EndOfStream`` is the normal "no more records" signal.  Errors raised by the
underlying stream are plain :class:`OSError` instances and are not wrapped.
"""
from __future__ import annotations


class ContlError(Exception):
    """Base class for every error raised by :mod:`contl`."""


class EndOfStream(ContlError, EOFError):
    """The input is exhausted; no further line can be read."""


class ValidationError(ContlError, ValueError):
    """A first-line validator rejected *line*."""

    def __init__(self, line: bytes, reason: str = "") -> None:
        self.line = line
        self.reason = reason or "invalid first line"
        super().__init__(f"{self.reason}: {line!r}")


class ConfigurationError(ContlError, ValueError):
    """The reader was set up or invoked with unusable settings."""
