"""
Configuration and shared types for the continued-line decoder.
"""
from __future__ import annotations

import codecs
import io
from dataclasses import dataclass
from typing import Callable, Optional

from .errors import ConfigurationError

#: A first-line validator: returns ``None`` to accept or a rejection reason.
LineValidator = Callable[[bytes], Optional[str]]

DEFAULT_DELIMITER = b" "
DEFAULT_FRAGMENT_SIZE = 4096


@dataclass(frozen=True)
class ReaderConfig:
    """
    Settings for :class:`~contl.reader.continued_line.ContinuedLineReader`.

    Attributes
    ----------
    delimiter:
        Bytes placed between the segments of a continued line.
    fragment_size:
        Largest number of bytes requested from the stream for one underlying
        line read.  Longer physical lines arrive in pieces and are reassembled.
    buffer_size:
        Buffer size used when a stream without ``peek`` has to be wrapped.
    encoding:
        Used only to turn a logical line into ``str``.
    """

    delimiter: bytes = DEFAULT_DELIMITER
    fragment_size: int = DEFAULT_FRAGMENT_SIZE
    buffer_size: int = io.DEFAULT_BUFFER_SIZE
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, (bytes, bytearray)):
            raise ConfigurationError(
                f"delimiter must be bytes, not {type(self.delimiter).__name__}"
            )
        if self.fragment_size < 1:
            raise ConfigurationError(
                f"fragment_size must be positive, got {self.fragment_size}"
            )
        if self.buffer_size < 1:
            raise ConfigurationError(
                f"buffer_size must be positive, got {self.buffer_size}"
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ConfigurationError(f"unknown encoding {self.encoding!r}") from exc

    @classmethod
    def from_text(cls, delimiter: str = " ", **kwargs) -> "ReaderConfig":
        """Build a config from a text *delimiter*, expanding escapes like ``\\t``."""
        encoding = kwargs.get("encoding", "utf-8")
        try:
            if "\\" in delimiter:
                # Non-Latin-1 characters become \uXXXX first so the escape
                # decoder turns them back unchanged.
                expanded = delimiter.encode("latin-1", "backslashreplace").decode("unicode_escape")
            else:
                expanded = delimiter
        except UnicodeError as exc:
            raise ConfigurationError(f"bad delimiter {delimiter!r}: {exc}") from exc
        return cls(delimiter=expanded.encode(encoding, "surrogateescape"), **kwargs)
