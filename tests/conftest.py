"""
Shared fixtures: the demo store, an executor over it, and a BookQLClient
whose HTTP transport is answered in-process by that executor.
"""
import json

import httpx
import pytest

from bookql.client import BookQLClient
from bookql.engine import QueryExecutor, default_store


@pytest.fixture
def store():
    return default_store()


@pytest.fixture
def executor(store):
    return QueryExecutor(store)


def executor_transport(executor: QueryExecutor) -> httpx.MockTransport:
    """Serve POST bodies with `executor`, using the API's status codes."""

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        envelope = executor.execute(body.get("query"), body.get("variables"))
        status_code = 400 if envelope.kind == "error" else 200
        return httpx.Response(status_code, json=envelope.to_wire())

    return httpx.MockTransport(handler)


@pytest.fixture
def bridge_client(executor):
    client = BookQLClient(base_url="http://bookql.test/graphql/", transport=executor_transport(executor))
    yield client
    client.close()
