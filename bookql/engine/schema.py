"""
GraphQL schema for the book catalogue.

Declares one object type and one root field:

    type Book { id: String, name: String, genre: String }
    type RootQueryType { book(id: String!): Book }

The schema is built per store so two executors never share data.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLSchema,
    GraphQLString,
)

from bookql.domain import DataEnvelope, EmptyEnvelope, QueryEnvelope
from bookql.engine.store import BookStore

# Key under which the field resolver records its envelopes in the
# per-request execution context.
ENVELOPES_KEY = "envelopes"


BookType = GraphQLObjectType(
    name="Book",
    fields=lambda: {
        "id": GraphQLField(GraphQLString),
        "name": GraphQLField(GraphQLString),
        "genre": GraphQLField(GraphQLString),
    },
)


class BookResolver:
    """Maps a `book(id:)` lookup to a result envelope."""

    def __init__(self, store: BookStore) -> None:
        self.store = store

    def resolve(self, book_id: Optional[str]) -> QueryEnvelope:
        # Blank ids are treated exactly like a miss.
        if not book_id:
            return EmptyEnvelope()
        book = self.store.find(book_id)
        if book is None:
            return EmptyEnvelope()
        return DataEnvelope(entity=book)


def build_schema(store: BookStore) -> GraphQLSchema:
    """Build the executable schema bound to `store`."""
    resolver = BookResolver(store)

    def resolve_book(root: Any, info: GraphQLResolveInfo, id: str) -> Optional[Dict[str, str]]:
        envelope = resolver.resolve(id)
        if isinstance(info.context, dict):
            info.context.setdefault(ENVELOPES_KEY, []).append(envelope)
        if envelope.kind == "data":
            return envelope.entity.model_dump()
        return None

    root_query = GraphQLObjectType(
        name="RootQueryType",
        fields={
            "book": GraphQLField(
                BookType,
                args={"id": GraphQLArgument(GraphQLNonNull(GraphQLString))},
                resolve=resolve_book,
            ),
        },
    )

    return GraphQLSchema(query=root_query)
