"""
UnfoldPass
==========

Unfolds an in-memory list of physical lines.

Input lines carry no terminators.  A line starting with a space or tab is
joined onto the logical line before it with the pass's delimiter, after both
sides are stripped of surrounding spaces/tabs.  Empty lines pass through
unchanged and never take part in a join.

Every list item is one physical line.  ``\\r`` and ``\\n`` inside an item are
content; the items are never re-joined and re-split.
"""
from __future__ import annotations

from collections import deque
from typing import Iterable, List

from ..errors import EndOfStream
from ..models import ReaderConfig
from ..reader.continued_line import ContinuedLineReader
from ..stream.line_source import LineSource


class _ListLineSource(LineSource):
    """LineSource over already-split lines."""

    def __init__(self, lines: Iterable[bytes], config: ReaderConfig) -> None:
        self.config = config
        self.lines_read = 0
        self._pending = deque(lines)

    def read_line(self) -> bytes:
        if not self._pending:
            raise EndOfStream("end of lines")
        self.lines_read += 1
        return self._pending.popleft()

    def peek(self, size: int) -> bytes:
        if not self._pending:
            return b""
        return (self._pending[0] + b"\n")[:size]

    def skip_blanks(self) -> int:
        if not self._pending:
            return 0
        head = self._pending[0]
        rest = head.lstrip(b" \t")
        self._pending[0] = rest
        return len(head) - len(rest)


class UnfoldPass:
    """Joins continuation lines with their logical predecessor."""

    def __init__(self, delimiter: str = " ") -> None:
        self.config = ReaderConfig.from_text(delimiter)

    def run(self, lines: List[str]) -> List[str]:
        """
        Unfold *lines*.

        Parameters
        ----------
        lines:
            Physical lines, newlines already stripped.

        Returns
        -------
        List[str]
            Logical lines; never longer than the input.
        """
        encoding = self.config.encoding
        source = _ListLineSource(
            (line.encode(encoding, "surrogateescape") for line in lines),
            self.config,
        )
        return list(ContinuedLineReader(source))
