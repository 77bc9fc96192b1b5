"""
Command-line entry points.

    bookql-serve [--host HOST] [--port PORT]
    bookql-fetch ID [--url URL]

`bookql-fetch` is a minimal presentation layer: it prints every projected
view as the request moves through its lifecycle.
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from bookql.client import BookQLClient, BookView, BookViewModel, project
from bookql.core.constants import API_URL, LOG_LEVEL, SERVER_HOST, SERVER_PORT
from bookql.domain import LifecycleState
from bookql.utils.log_utils import setup_logging


def render_view(view: BookView) -> str:
    lines = [view.status]
    if view.book_id is not None:
        lines.append(f"  id:    {view.book_id}")
        lines.append(f"  name:  {view.book_name}")
        lines.append(f"  genre: {view.book_genre}")
    return "\n".join(lines)


async def fetch_and_render(book_id: str, client: BookQLClient) -> int:
    """Run one request through the view model; exit status 0 on success."""
    view_model = BookViewModel(client)
    outcome = {"kind": "pending"}

    def on_event(state: LifecycleState) -> None:
        outcome["kind"] = state.kind
        print(render_view(project(state)))

    handle = view_model.request_book(book_id, on_event)
    try:
        await handle.wait()
    finally:
        view_model.stop()

    return 0 if outcome["kind"] == "succeeded" else 1


def fetch_main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Fetch a book from a BookQL server")
    parser.add_argument("book_id", help="Book id to look up")
    parser.add_argument("--url", default=API_URL, help=f"GraphQL endpoint (default: {API_URL})")
    parser.add_argument("--log-level", default=None, help=f"Logging level (default: {LOG_LEVEL})")
    args = parser.parse_args(argv)
    setup_logging(level=args.log_level)

    with BookQLClient(base_url=args.url) as client:
        return asyncio.run(fetch_and_render(args.book_id, client))


def serve_main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the BookQL API server")
    parser.add_argument("--host", default=SERVER_HOST)
    parser.add_argument("--port", type=int, default=SERVER_PORT)
    parser.add_argument("--log-level", default=None, help=f"Logging level (default: {LOG_LEVEL})")
    args = parser.parse_args(argv)
    bookql_logger = setup_logging(level=args.log_level)

    import uvicorn

    bookql_logger.info(f"listening requests on {args.port}")
    uvicorn.run(
        "bookql.api.main:app",
        host=args.host,
        port=args.port,
        reload=False,
        log_level=logging.getLevelName(bookql_logger.level).lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(fetch_main())
