"""
LineSource
==========

Produces one physical line per call from a buffered byte stream.

The stream is asked for at most ``fragment_size`` bytes per underlying line
read.  When a physical line is longer than that, the stream hands it over in
pieces; the pieces are collected in a local buffer and joined once the line
terminator (or the end of the stream) is reached.

Line terminators are ``\\n`` and ``\\r\\n``.  A final line without terminator
is returned as is; reading past the last line raises
:class:`~contl.errors.EndOfStream`.
"""
from __future__ import annotations

import io
import logging
from typing import BinaryIO, List, Optional

from ..errors import EndOfStream
from ..models import ReaderConfig

logger = logging.getLogger(__name__)

_LF = b"\n"
_CRLF = b"\r\n"


class LineSource:
    """
    Physical-line reader over a buffered binary stream.

    Parameters
    ----------
    stream:
        Binary stream.  Streams without ``peek`` (e.g. :class:`io.BytesIO`,
        raw file objects) are wrapped in :class:`io.BufferedReader`.
    config:
        Supplies ``fragment_size`` and ``buffer_size``.
    """

    def __init__(self, stream: BinaryIO, config: Optional[ReaderConfig] = None) -> None:
        self.config = config or ReaderConfig()
        if not hasattr(stream, "peek"):
            stream = io.BufferedReader(stream, self.config.buffer_size)  # type: ignore[arg-type]
        self._stream = stream
        #: Number of physical lines returned so far.
        self.lines_read = 0

    # ------------------------------------------------------------------
    # Primary API
    # ------------------------------------------------------------------

    def read_line(self) -> bytes:
        """
        Return the next physical line without its terminator.

        Raises
        ------
        EndOfStream
            No bytes are left.
        OSError
            The stream failed; any fragments read so far are dropped.
        """
        fragment = self._stream.readline(self.config.fragment_size)
        if not fragment:
            raise EndOfStream("end of stream")

        if fragment.endswith(_LF) or len(fragment) < self.config.fragment_size:
            # Whole line in one read.
            self.lines_read += 1
            return _strip_terminator(fragment)

        pieces: List[bytes] = [fragment]
        while True:
            fragment = self._stream.readline(self.config.fragment_size)
            if not fragment:
                break
            pieces.append(fragment)
            if fragment.endswith(_LF) or len(fragment) < self.config.fragment_size:
                break

        logger.debug("Reassembled physical line from %d fragments", len(pieces))
        self.lines_read += 1
        return _strip_terminator(b"".join(pieces))

    # ------------------------------------------------------------------
    # Lookahead
    # ------------------------------------------------------------------

    def peek(self, size: int) -> bytes:
        """
        Return up to *size* upcoming bytes without consuming them.

        May return fewer bytes than asked for (only what is buffered), and
        ``b""`` at end of stream.
        """
        return self._stream.peek(size)[:size]

    def skip_blanks(self) -> int:
        """Consume leading spaces and tabs; return how many were consumed."""
        count = 0
        while True:
            head = self._stream.peek(1)
            if not head:
                return count
            run = len(head) - len(head.lstrip(b" \t"))
            if run == 0:
                return count
            self._stream.read(run)
            count += run


def _strip_terminator(line: bytes) -> bytes:
    if line.endswith(_CRLF):
        return line[:-2]
    if line.endswith(_LF):
        return line[:-1]
    return line
