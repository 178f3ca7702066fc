"""
ContinuedLineReader
===================

Joins folded physical lines into logical lines.

Folding rules:
  * A line that starts with a space or tab continues the line before it.
  * Every segment (the first line and each continuation) is stripped of
    leading and trailing spaces/tabs, then the segments are joined with the
    configured delimiter (a single space by default).
  * An empty physical line is a logical line of its own.  It is never
    continued and never continues anything.

Implementation notes
--------------------
Each call reuses one accumulation buffer owned by the reader.  It is cleared
at the start of the call and copied out before anything is returned, so a
caller never holds a view into it.

When the bytes already buffered after the first line show that no
continuation can follow (next line starts with a letter, or is empty), the
trimmed first line is returned directly and the buffer is not touched.

A failure while reading a *continuation* line (end of stream or
:class:`OSError`) ends the record: the segments joined so far are returned as
a normal result and the error is only logged.  Failures on the *first* line
of a record always propagate.
"""
from __future__ import annotations

import logging
from typing import BinaryIO, Iterator, Optional, Union

from ..errors import ConfigurationError, EndOfStream, ValidationError
from ..models import LineValidator, ReaderConfig
from ..stream.line_source import LineSource
from .validators import no_validation
from .whitespace import ends_record, trim

logger = logging.getLogger(__name__)

# Bytes of lookahead needed to rule out a continuation without reading.
_LOOKAHEAD = 2


class ContinuedLineReader:
    """
    Reads logical (unfolded) lines from a binary stream.

    Parameters
    ----------
    source:
        A :class:`~contl.stream.line_source.LineSource`, or a binary stream
        to wrap in one.
    config:
        Reader settings; the delimiter is fixed for the reader's lifetime.

    A reader is single-consumer state.  Do not drive one instance from more
    than one thread; give each stream its own reader.
    """

    def __init__(
        self,
        source: Union[LineSource, BinaryIO],
        config: Optional[ReaderConfig] = None,
    ) -> None:
        if isinstance(source, LineSource):
            self.config = config or source.config
            self._source = source
        else:
            self.config = config or ReaderConfig()
            self._source = LineSource(source, self.config)
        self._buf = bytearray()

    @property
    def delimiter(self) -> bytes:
        return self.config.delimiter

    @property
    def lines_read(self) -> int:
        """Physical lines consumed so far."""
        return self._source.lines_read

    # ------------------------------------------------------------------
    # Plain lines
    # ------------------------------------------------------------------

    def read_line_bytes(self) -> bytes:
        """Return the next physical line, unfolded and untrimmed."""
        return self._source.read_line()

    def read_line(self) -> str:
        return self._decode(self._source.read_line())

    # ------------------------------------------------------------------
    # Continued lines
    # ------------------------------------------------------------------

    def read_continued_line(self, validate_first_line: Optional[LineValidator] = no_validation) -> str:
        """
        Read one logical line and return it as ``str``.

        Bytes that do not decode with the configured encoding are kept as
        surrogate escapes, so ``line.encode(encoding, "surrogateescape")``
        gives back the exact bytes.

        Raises
        ------
        ConfigurationError
            *validate_first_line* is ``None``.  Raised before any read.
        EndOfStream
            No record is left.
        ValidationError
            The validator rejected the first line.
        OSError
            Reading the first line failed.
        """
        return self._decode(self._read_continued_line_slice(validate_first_line))

    def read_continued_line_bytes(
        self, validate_first_line: Optional[LineValidator] = no_validation
    ) -> bytes:
        """Like :meth:`read_continued_line` but returns a private ``bytes`` copy."""
        return bytes(self._read_continued_line_slice(validate_first_line))

    def __iter__(self) -> Iterator[str]:
        while True:
            try:
                yield self.read_continued_line()
            except EndOfStream:
                return

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _read_continued_line_slice(self, validate_first_line: Optional[LineValidator]):
        """
        Return the logical line as ``bytes`` (fast path) or as the reader's
        own buffer.  Callers must copy the buffer before handing it out.
        """
        if validate_first_line is None:
            raise ConfigurationError("missing first-line validator")

        line = self._source.read_line()
        if not line:
            return line

        reason = validate_first_line(line)
        if reason is not None:
            raise ValidationError(line, reason)

        try:
            lookahead = self._source.peek(_LOOKAHEAD)
        except OSError:
            lookahead = b""
        if ends_record(lookahead):
            logger.debug("Lookahead %r ends the record, skipping continuation scan", lookahead)
            return trim(line)

        buf = self._buf
        buf.clear()
        buf += trim(line)
        while True:
            try:
                if self._source.skip_blanks() == 0:
                    break
                line = self._source.read_line()
            except (EndOfStream, OSError) as exc:
                logger.debug(
                    "Continuation read failed after %d bytes, keeping partial line: %s",
                    len(buf),
                    exc,
                )
                break
            buf += self.config.delimiter
            buf += trim(line)
        return buf

    def _decode(self, data) -> str:
        return bytes(data).decode(self.config.encoding, "surrogateescape")
