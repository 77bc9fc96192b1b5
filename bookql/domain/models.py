"""
BookQL domain types.

Two tagged unions flow through the system:

- QueryEnvelope: what the query executor produces for one request
  (DataEnvelope | EmptyEnvelope | ErrorEnvelope)
- LifecycleState: what the client-side controller emits per request
  (Pending | Failed | Succeeded)

Every variant carries a literal `kind` tag; consumers dispatch on that tag.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """A catalogue entry. Immutable once created."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    genre: str


# =============================================================================
# Result envelopes (server side)
# =============================================================================


# `payload` holds the executed GraphQL `data` object when the envelope came
# out of the executor, so the wire form honours the client's selection set
# and aliases. It is ignored for equality.


@dataclass(frozen=True)
class DataEnvelope:
    entity: Book
    kind: Literal["data"] = "data"
    payload: Optional[Dict[str, Any]] = field(default=None, compare=False, repr=False)

    def to_wire(self) -> Dict[str, Any]:
        if self.payload is not None:
            return {"data": self.payload}
        return {"data": {"book": self.entity.model_dump()}}


@dataclass(frozen=True)
class EmptyEnvelope:
    kind: Literal["empty"] = "empty"
    payload: Optional[Dict[str, Any]] = field(default=None, compare=False, repr=False)

    def to_wire(self) -> Dict[str, Any]:
        if self.payload is not None:
            return {"data": self.payload}
        return {"data": {"book": None}}


@dataclass(frozen=True)
class ErrorEnvelope:
    detail: str
    kind: Literal["error"] = "error"

    def to_wire(self) -> Dict[str, Any]:
        return {"errors": [{"message": self.detail}]}


QueryEnvelope = Union[DataEnvelope, EmptyEnvelope, ErrorEnvelope]


# =============================================================================
# Lifecycle states (client side)
# =============================================================================


@dataclass(frozen=True)
class Pending:
    kind: Literal["pending"] = "pending"


@dataclass(frozen=True)
class Failed:
    message: str
    kind: Literal["failed"] = "failed"


@dataclass(frozen=True)
class Succeeded:
    entity: Book
    kind: Literal["succeeded"] = "succeeded"


LifecycleState = Union[Pending, Failed, Succeeded]


# =============================================================================
# Wire models (client-side decoding of the executor's response)
# =============================================================================


class BookPayload(BaseModel):
    """The `data` member of a successful response."""
    book: Optional[Book] = None


class BookResponse(BaseModel):
    """Full response body for a `book` query."""
    data: BookPayload
