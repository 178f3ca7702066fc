"""Shared stream doubles for the reader tests."""
from __future__ import annotations

import pytest


class ScriptedStream:
    """
    Peekable in-memory stream that raises :class:`OSError` from ``readline``
    once the read position reaches *fail_at*.

    ``peek`` returns at most *window* bytes so tests can control how much
    lookahead the reader sees.
    """

    def __init__(self, data: bytes, fail_at: int | None = None, window: int = 64) -> None:
        self.data = data
        self.pos = 0
        self.fail_at = fail_at
        self.window = window
        self.readline_calls = 0

    def peek(self, size: int = 1) -> bytes:
        return self.data[self.pos:self.pos + self.window]

    def read(self, size: int = -1) -> bytes:
        end = len(self.data) if size < 0 else self.pos + size
        chunk = self.data[self.pos:end]
        self.pos += len(chunk)
        return chunk

    def readline(self, limit: int = -1) -> bytes:
        self.readline_calls += 1
        if self.fail_at is not None and self.pos >= self.fail_at:
            raise OSError("simulated read failure")
        end = self.data.find(b"\n", self.pos)
        end = len(self.data) if end < 0 else end + 1
        if limit >= 0:
            end = min(end, self.pos + limit)
        chunk = self.data[self.pos:end]
        self.pos = end
        return chunk


@pytest.fixture
def scripted():
    return ScriptedStream
