from .store import BookStore, default_store, DEFAULT_BOOKS
from .schema import BookResolver, build_schema
from .executor import QueryExecutor, BOOK_BY_ID_QUERY

__all__ = [
    "BookStore",
    "default_store",
    "DEFAULT_BOOKS",
    "BookResolver",
    "build_schema",
    "QueryExecutor",
    "BOOK_BY_ID_QUERY",
]
