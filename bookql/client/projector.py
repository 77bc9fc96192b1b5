"""
State projector - maps lifecycle states to presentation fields.

Pure: no I/O, no shared state. A None entity field means "leave whatever
the view currently shows", matching a screen that only rewrites the book
fields once a book has loaded.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict

from bookql.domain import LifecycleState

LOADING = "Loading"
LOADED = "Loaded"


class BookView(BaseModel):
    """Presentation fields for the book screen."""
    model_config = ConfigDict(frozen=True)

    status: str
    book_id: Optional[str] = None
    book_name: Optional[str] = None
    book_genre: Optional[str] = None


def project(state: LifecycleState) -> BookView:
    if state.kind == "pending":
        return BookView(status=LOADING)
    if state.kind == "failed":
        return BookView(status=state.message)
    if state.kind == "succeeded":
        return BookView(
            status=LOADED,
            book_id=state.entity.id,
            book_name=state.entity.name,
            book_genre=state.entity.genre,
        )
    raise ValueError(f"Unknown lifecycle state: {state.kind!r}")
