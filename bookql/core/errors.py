"""
Error taxonomy for BookQL.

Server side, a ParseError never escapes the executor: it becomes an error
envelope. Client side, TransportError / ProtocolError / CodecError are raised
by BookQLClient and turned into a Failed lifecycle state by the controller.
A missing record is not an error at all (see EmptyEnvelope).
"""


class BookQLError(Exception):
    """Base class for every BookQL error."""
    pass


class ParseError(BookQLError):
    """Query document failed to parse or validate against the schema."""
    pass


class TransportError(BookQLError):
    """Connectivity or I/O failure talking to the server."""
    pass


class ProtocolError(BookQLError):
    """Server answered, but with a non-success status or no body."""
    pass


class CodecError(BookQLError):
    """Response body does not match the expected shape."""

    def __init__(self, detail: str):
        super().__init__(f"error parsing response -> {detail}")
        self.detail = detail
