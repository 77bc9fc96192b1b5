"""
Tests for BookViewModel ownership and teardown.
"""

import asyncio
import threading

import pytest

from bookql.client import BookViewModel
from bookql.domain import Book, Pending, Succeeded


BOOK_1 = Book(id="1", name="Book 1", genre="Fantasy")


class GatedClient:
    """fetch_book waits on a gate so tests control completion."""

    def __init__(self):
        self.gate = threading.Event()
        self.finished = threading.Event()
        self.calls = 0
        self._lock = threading.Lock()

    def fetch_book(self, book_id):
        self.gate.wait(5)
        with self._lock:
            self.calls += 1
        self.finished.set()
        return BOOK_1


class TestBookViewModel:

    def test_request_completes_and_is_forgotten(self, bridge_client):
        view_model = BookViewModel(bridge_client)
        events = []

        async def scenario():
            handle = view_model.request_book("2", events.append)
            assert view_model.outstanding == 1
            await handle.wait()

        asyncio.run(scenario())
        assert events == [Pending(), Succeeded(entity=Book(id="2", name="Book 2", genre="Fantasy"))]
        assert view_model.outstanding == 0

    def test_each_request_is_independent(self):
        view_model = BookViewModel(GatedClient())
        view_model.client.gate.set()
        first, second = [], []

        async def scenario():
            h1 = view_model.request_book("1", first.append)
            h2 = view_model.request_book("1", second.append)
            assert h1 is not h2
            await h1.wait()
            await h2.wait()

        asyncio.run(scenario())
        assert first == [Pending(), Succeeded(entity=BOOK_1)]
        assert second == [Pending(), Succeeded(entity=BOOK_1)]

    def test_stop_suppresses_late_results(self):
        client = GatedClient()
        view_model = BookViewModel(client)
        events = []

        async def scenario():
            handles = [view_model.request_book(str(i), events.append) for i in range(3)]
            view_model.stop()
            client.gate.set()
            for handle in handles:
                await handle.wait()
            await asyncio.sleep(0.01)
            return handles

        handles = asyncio.run(scenario())
        assert events == [Pending(), Pending(), Pending()]
        assert all(handle.cancelled for handle in handles)
        assert view_model.outstanding == 0

    def test_request_after_stop_raises(self):
        view_model = BookViewModel(GatedClient())
        view_model.stop()

        async def scenario():
            view_model.request_book("1", lambda state: None)

        with pytest.raises(RuntimeError):
            asyncio.run(scenario())

    def test_individually_cancelled_requests_are_forgotten(self):
        client = GatedClient()
        view_model = BookViewModel(client)
        events = []

        async def scenario():
            handles = [view_model.request_book(str(i), events.append) for i in range(3)]
            assert view_model.outstanding == 3
            for handle in handles:
                handle.cancel()
            client.gate.set()
            for handle in handles:
                await handle.wait()
            await asyncio.sleep(0)

        asyncio.run(scenario())
        assert view_model.outstanding == 0
        assert events == [Pending(), Pending(), Pending()]

    def test_stop_during_start_cancels_new_request(self):
        client = GatedClient()
        client.gate.set()
        view_model = BookViewModel(client)
        events = []

        def on_event(state):
            events.append(state)
            if state.kind == "pending":
                view_model.stop()

        async def scenario():
            handle = view_model.request_book("1", on_event)
            await handle.wait()
            await asyncio.sleep(0.01)
            return handle

        handle = asyncio.run(scenario())
        assert handle.cancelled
        assert view_model.outstanding == 0
        assert events == [Pending()]
