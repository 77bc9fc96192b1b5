from .models import (
    Book,
    BookPayload,
    BookResponse,
    DataEnvelope,
    EmptyEnvelope,
    ErrorEnvelope,
    Failed,
    LifecycleState,
    Pending,
    QueryEnvelope,
    Succeeded,
)

__all__ = [
    "Book",
    "BookPayload",
    "BookResponse",
    "DataEnvelope",
    "EmptyEnvelope",
    "ErrorEnvelope",
    "Failed",
    "LifecycleState",
    "Pending",
    "QueryEnvelope",
    "Succeeded",
]
