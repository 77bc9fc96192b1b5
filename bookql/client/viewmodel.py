"""
Book view model - the presentation scope that owns in-flight requests.

Every `request_book` call starts a fresh BookRequest. `stop()` is called
when the screen is torn down and cancels everything still outstanding, so
no late response can touch the view afterwards. A request leaves the
outstanding set as soon as it ends, whether it finished or was cancelled
through its own handle.
"""
import threading
from typing import Optional, Set

from bookql.client.lifecycle import BookRequest, CancellationHandle, EventSink
from bookql.client.transport import BookQLClient


class BookViewModel:

    def __init__(self, client: Optional[BookQLClient] = None) -> None:
        self.client = client or BookQLClient()
        self._lock = threading.Lock()
        self._outstanding: Set[CancellationHandle] = set()
        self._stopped = False

    def request_book(self, book_id: str, on_event: EventSink) -> CancellationHandle:
        with self._lock:
            if self._stopped:
                raise RuntimeError("BookViewModel has been stopped")

        handle = BookRequest(self.client).start(book_id, on_event)

        # stop() may have run meanwhile, from another thread or from on_event
        with self._lock:
            stopped = self._stopped
            if not stopped:
                self._outstanding.add(handle)

        if stopped:
            handle.cancel()
        else:
            handle.add_done_callback(lambda: self._forget(handle))
        return handle

    def _forget(self, handle: CancellationHandle) -> None:
        with self._lock:
            self._outstanding.discard(handle)

    @property
    def outstanding(self) -> int:
        with self._lock:
            return len(self._outstanding)

    def stop(self) -> None:
        with self._lock:
            self._stopped = True
            handles = list(self._outstanding)
            self._outstanding.clear()
        for handle in handles:
            handle.cancel()
