"""
BookQL client - transport, request lifecycle and presentation mapping.
"""

from .transport import BookQLClient, build_query
from .lifecycle import BookRequest, CancellationHandle, NOT_FOUND_MESSAGE
from .projector import BookView, project, LOADING, LOADED
from .viewmodel import BookViewModel

__all__ = [
    "BookQLClient",
    "build_query",
    "BookRequest",
    "CancellationHandle",
    "NOT_FOUND_MESSAGE",
    "BookView",
    "project",
    "LOADING",
    "LOADED",
    "BookViewModel",
]
