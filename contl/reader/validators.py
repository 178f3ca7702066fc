"""
Stock first-line validators.

A validator receives the raw first physical line of a record and returns
``None`` to accept it, or a short reason string to reject it.
"""
from __future__ import annotations

from typing import Optional

from ..errors import ConfigurationError
from ..models import LineValidator
from .whitespace import is_blank


def no_validation(line: bytes) -> Optional[str]:
    return None


def reject_leading_space(line: bytes) -> Optional[str]:
    """Reject a record that opens with a continuation line."""
    if line and is_blank(line[0]):
        return "first line begins with whitespace"
    return None


def require_colon(line: bytes) -> Optional[str]:
    """Header-style records need a ``name:`` part on their first line."""
    if b":" not in line:
        return "missing colon"
    return None


def reject_prefix(prefix: bytes) -> LineValidator:
    """Return a validator rejecting first lines that start with *prefix*."""
    if not prefix:
        raise ConfigurationError("prefix must not be empty")

    def _validate(line: bytes) -> Optional[str]:
        if line.startswith(prefix):
            return f"first line starts with {prefix!r}"
        return None

    _validate.__name__ = f"reject_prefix({prefix!r})"
    return _validate
