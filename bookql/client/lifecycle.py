"""
Request lifecycle controller.

A BookRequest wraps exactly one outbound `book` query:

    Idle -> Pending -> Failed | Succeeded

`start()` must be called from the presentation context (a running asyncio
event loop). It emits Pending before returning, hands the blocking HTTP call
to a worker thread, and emits the terminal state back on the loop.

Cancellation only discards the result: the HTTP call may still run to
completion on its worker thread, but `on_event` is never called again once
`cancel()` has been requested. The cancelled flag is checked under the same
lock that guards delivery.
"""

import asyncio
import threading
from typing import Callable, Optional

from bookql.client.transport import BookQLClient
from bookql.core.errors import BookQLError
from bookql.domain import Failed, LifecycleState, Pending, Succeeded
from bookql.utils.log_utils import get_logger

logger = get_logger(__name__)

EventSink = Callable[[LifecycleState], None]

NOT_FOUND_MESSAGE = "book not found"


class CancellationHandle:
    """Caller-side handle for one BookRequest."""

    def __init__(self, request: "BookRequest") -> None:
        self._request = request

    def cancel(self) -> None:
        self._request.cancel()

    @property
    def cancelled(self) -> bool:
        return self._request.cancelled

    def done(self) -> bool:
        return self._request.done()

    async def wait(self) -> None:
        """
        Wait until the request has finished or been cancelled.

        Re-raises anything `on_event` raised while handling the terminal state.
        """
        await self._request.wait()

    def add_done_callback(self, fn: Callable[[], None]) -> None:
        """Call `fn` on the event loop once the request ends, however it ends."""
        self._request.add_done_callback(fn)


class BookRequest:
    """One in-flight book query. Not reusable."""

    def __init__(self, client: BookQLClient) -> None:
        self._client = client
        self._lock = threading.RLock()
        self._phase = "idle"
        self._cancelled = False
        self._on_event: Optional[EventSink] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def phase(self) -> str:
        """One of idle, pending, failed, succeeded."""
        return self._phase

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def start(self, book_id: str, on_event: EventSink) -> CancellationHandle:
        loop = asyncio.get_running_loop()

        with self._lock:
            if self._phase != "idle":
                raise RuntimeError("BookRequest can only be started once")
            self._phase = "pending"
            self._on_event = on_event

        self._emit(Pending())
        self._task = loop.create_task(self._run(book_id))
        return CancellationHandle(self)

    def cancel(self) -> None:
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            self._on_event = None
        logger.debug("[BookRequest] Cancelled")

        task = self._task
        if task is not None and not task.done():
            loop = task.get_loop()
            if not loop.is_closed():
                loop.call_soon_threadsafe(task.cancel)

    def done(self) -> bool:
        if self._cancelled:
            return True
        return self._phase in ("failed", "succeeded")

    async def wait(self) -> None:
        task = self._task
        if task is None:
            return
        try:
            # Shielded so cancelling the waiter leaves the request running
            await asyncio.shield(task)
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    def add_done_callback(self, fn: Callable[[], None]) -> None:
        if self._task is None:
            raise RuntimeError("BookRequest has not been started")
        self._task.add_done_callback(lambda task: fn())

    async def _run(self, book_id: str) -> None:
        state = await asyncio.to_thread(self._fetch, book_id)
        self._emit(state)

    def _fetch(self, book_id: str) -> LifecycleState:
        """Worker-thread half: do the blocking call, map the outcome."""
        try:
            book = self._client.fetch_book(book_id)
        except BookQLError as e:
            return Failed(message=str(e))
        except Exception as e:
            logger.exception(f"[BookRequest] Unexpected error fetching {book_id!r}")
            return Failed(message=str(e) or type(e).__name__)

        if book is None:
            return Failed(message=NOT_FOUND_MESSAGE)
        return Succeeded(entity=book)

    def _emit(self, state: LifecycleState) -> None:
        with self._lock:
            if self._cancelled or self._on_event is None:
                return
            on_event = self._on_event

            if state.kind == "pending":
                pass
            elif state.kind in ("failed", "succeeded"):
                self._phase = state.kind
                # Terminal: nothing may be delivered after this one
                self._on_event = None
            else:
                raise ValueError(f"Unknown lifecycle state: {state.kind!r}")

            on_event(state)
