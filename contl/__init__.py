"""
contl
=====

Decoder for folded text: logical lines split over several physical lines,
where each continuation line starts with a space or tab (the header folding
of mail and HTTP).

Quick start
-----------
>>> import io
>>> from contl import ContinuedLineReader
>>> reader = ContinuedLineReader(io.BytesIO(b"Subject: hello\\n  world\\nTo: x\\n"))
>>> list(reader)
['Subject: hello world', 'To: x']
"""

from .errors import ConfigurationError, ContlError, EndOfStream, ValidationError
from .models import LineValidator, ReaderConfig
from .passes.unfold import UnfoldPass
from .pipeline.decode import DecodeTask
from .reader.continued_line import ContinuedLineReader
from .reader.validators import no_validation, reject_leading_space, reject_prefix, require_colon
from .stream.line_source import LineSource

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "ContlError",
    "EndOfStream",
    "ValidationError",
    "LineValidator",
    "ReaderConfig",
    "UnfoldPass",
    "DecodeTask",
    "ContinuedLineReader",
    "LineSource",
    "no_validation",
    "reject_leading_space",
    "reject_prefix",
    "require_colon",
]
