"""
DecodeTask
==========

Whole-input decoding on top of
:class:`~contl.reader.continued_line.ContinuedLineReader`.

Where the reader hands out one logical line per call, ``DecodeTask`` drains a
stream, a file, or an in-memory buffer and returns every logical line in input
order.  Callers processing untrusted input must bound its size themselves;
nothing here limits line length or line count.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Iterator, List, Optional, Union

from ..errors import EndOfStream
from ..models import LineValidator, ReaderConfig
from ..reader.continued_line import ContinuedLineReader
from ..reader.validators import no_validation

logger = logging.getLogger(__name__)


class DecodeTask:
    """
    Decode folded input into logical lines.

    Parameters
    ----------
    config:
        Reader settings shared by every decode call.
    validate_first_line:
        Applied to the first physical line of each record.  A rejection
        aborts the decode with :class:`~contl.errors.ValidationError`.
    """

    def __init__(
        self,
        config: Optional[ReaderConfig] = None,
        validate_first_line: LineValidator = no_validation,
    ) -> None:
        self.config = config or ReaderConfig()
        self.validate_first_line = validate_first_line

    # ------------------------------------------------------------------
    # Primary API
    # ------------------------------------------------------------------

    def iter_stream(self, stream: BinaryIO) -> Iterator[bytes]:
        """Yield logical lines as ``bytes`` until the stream is exhausted."""
        reader = ContinuedLineReader(stream, self.config)
        while True:
            try:
                line = reader.read_continued_line_bytes(self.validate_first_line)
            except EndOfStream:
                logger.debug("Decoded %d physical lines", reader.lines_read)
                return
            yield line

    def decode_stream(self, stream: BinaryIO) -> List[str]:
        return [self._to_text(line) for line in self.iter_stream(stream)]

    def decode_bytes(self, data: bytes) -> List[str]:
        return self.decode_stream(io.BytesIO(data))

    def decode_text(self, text: str) -> List[str]:
        """Decode a ``str`` by way of the configured encoding."""
        return self.decode_bytes(text.encode(self.config.encoding, "surrogateescape"))

    def decode_file(self, file_path: Union[str, Path]) -> List[str]:
        """
        Decode the file at *file_path*.

        Raises
        ------
        OSError
            The file cannot be opened or read.
        """
        path = Path(file_path)
        logger.debug("Decoding %s", path)
        with path.open("rb") as fh:
            return self.decode_stream(fh)

    # ------------------------------------------------------------------

    def _to_text(self, line: bytes) -> str:
        return line.decode(self.config.encoding, "surrogateescape")
