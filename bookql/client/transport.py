"""
BookQL API Client.

Issues the `book(id:)` query against a BookQL server:
    POST {base_url}  body {"query": "{ book(id: \"<id>\") { id, name, genre } }"}

The call is blocking; the lifecycle controller runs it on a worker thread.
Failures are raised as the client half of the error taxonomy:
- TransportError: connectivity / I/O
- ProtocolError: non-success status or empty body
- CodecError: body does not decode into the expected shape
"""

import json
from typing import Optional

import httpx
from pydantic import ValidationError

from bookql.core.constants import API_URL, HTTP_TIMEOUT, JSON_CONTENT_TYPE
from bookql.core.errors import CodecError, ProtocolError, TransportError
from bookql.domain import Book, BookResponse
from bookql.utils.log_utils import get_logger

logger = get_logger(__name__)

BODY_IS_NULL = "body is null"


def build_query(book_id: str) -> str:
    """
    Render the query document for one id.

    The id is written as an escaped string literal, so odd input (quotes,
    backslashes) is looked up verbatim and misses rather than breaking the
    document.
    """
    return "{ book(id: %s) { id, name, genre } }" % json.dumps(book_id)


def _server_message(response: httpx.Response) -> str:
    """First GraphQL error message in the body, else the HTTP reason phrase."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        errors = body.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            message = errors[0].get("message")
            if message:
                return str(message)
    return response.reason_phrase or f"HTTP {response.status_code}"


class BookQLClient:
    """Client for the BookQL GraphQL endpoint."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url or API_URL
        self.timeout = timeout if timeout is not None else HTTP_TIMEOUT
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout, transport=self._transport)
        return self._client

    def fetch_book(self, book_id: str) -> Optional[Book]:
        """
        Fetch one book by id.

        Returns None when the server has no such record.
        """
        content = json.dumps({"query": build_query(book_id)}).encode("utf-8")
        logger.info(f"[BookQLClient] Fetching book: {book_id!r}")

        try:
            response = self._get_client().post(
                self.base_url,
                content=content,
                headers={"Content-Type": JSON_CONTENT_TYPE},
            )
        except httpx.TransportError as e:
            logger.error(f"[BookQLClient] Transport error: {e}")
            raise TransportError(str(e) or type(e).__name__) from e

        if not response.is_success:
            message = _server_message(response)
            logger.error(f"[BookQLClient] Request failed: HTTP {response.status_code} {message}")
            raise ProtocolError(message)

        if not response.content:
            logger.error("[BookQLClient] Empty response body")
            raise ProtocolError(BODY_IS_NULL)

        try:
            decoded = BookResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"[BookQLClient] Could not decode response: {e}")
            raise CodecError(str(e)) from e

        logger.info(f"[BookQLClient] Book fetched: {book_id!r} found={decoded.data.book is not None}")
        return decoded.data.book

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "BookQLClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
