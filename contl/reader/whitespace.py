"""
Byte-level whitespace helpers shared by the reader.

Only ASCII space and horizontal tab count as whitespace here; every other
byte, including ``\\r`` and form feed, is content.
"""
from __future__ import annotations

BLANKS = b" \t"

_SPACE = 0x20
_TAB = 0x09
_LF = 0x0A
_CR = 0x0D


def is_blank(byte: int) -> bool:
    return byte == _SPACE or byte == _TAB


def is_ascii_letter(byte: int) -> bool:
    # Fold to lower case; only A-Z/a-z land in the range afterwards.
    byte |= 0x20
    return 0x61 <= byte <= 0x7A


def trim(line: bytes) -> bytes:
    """Strip leading and trailing spaces and tabs from *line*."""
    return line.strip(BLANKS)


def ends_record(lookahead: bytes) -> bool:
    """
    True when *lookahead*, the bytes right after a physical line, proves the
    line cannot be continued.

    Needs at least two bytes: the next line starts with a letter, or the next
    line is empty (``\\n`` or ``\\r\\n``).
    """
    if len(lookahead) < 2:
        return False
    first = lookahead[0]
    if is_ascii_letter(first) or first == _LF:
        return True
    return first == _CR and lookahead[1] == _LF
