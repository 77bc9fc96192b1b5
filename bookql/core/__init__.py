"""
BookQL core - configuration constants and the error taxonomy.
"""

from .errors import (
    BookQLError,
    CodecError,
    ParseError,
    ProtocolError,
    TransportError,
)

__all__ = [
    "BookQLError",
    "CodecError",
    "ParseError",
    "ProtocolError",
    "TransportError",
]
