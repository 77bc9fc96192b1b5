"""
BookQL Query Executor - runs one GraphQL document against the book schema.

Execution is single-shot and stateless:
1. Parse the document (syntax errors -> error envelope, resolver never runs)
2. Validate it against the schema (unknown fields, missing args -> error envelope)
3. Execute with the supplied variables
4. Return the envelope recorded by the `book` resolver

Nothing is cached between calls; each call gets a fresh execution context.
"""
from typing import Any, Dict, List, Optional

from graphql import (
    GraphQLError,
    GraphQLSchema,
    execute_sync,
    parse,
    validate,
)

from bookql.core.errors import ParseError
from bookql.domain import (
    DataEnvelope,
    EmptyEnvelope,
    ErrorEnvelope,
    QueryEnvelope,
)
from bookql.engine.schema import ENVELOPES_KEY, build_schema
from bookql.engine.store import BookStore
from bookql.utils.log_utils import get_logger

logger = get_logger(__name__)

MISSING_QUERY_MESSAGE = "Must provide query string."


def _join_messages(errors: List[GraphQLError]) -> str:
    return "; ".join(error.message for error in errors)


class QueryExecutor:
    """Executes `book` queries against one store."""

    def __init__(self, store: BookStore, schema: Optional[GraphQLSchema] = None) -> None:
        self.store = store
        self.schema = schema or build_schema(store)

    def execute(
        self,
        query_text: Optional[str],
        variables: Optional[Dict[str, Any]] = None,
        operation_name: Optional[str] = None,
    ) -> QueryEnvelope:
        """
        Execute a query document and wrap the outcome in an envelope.

        Never raises for a bad document: parse, validation and variable
        errors all come back as ErrorEnvelope.
        """
        if not query_text or not query_text.strip():
            return ErrorEnvelope(detail=MISSING_QUERY_MESSAGE)

        try:
            document = self.check(query_text)
        except ParseError as e:
            logger.warning(f"[QueryExecutor] Rejected document: {e}")
            return ErrorEnvelope(detail=str(e))

        context: Dict[str, Any] = {}
        result = execute_sync(
            self.schema,
            document,
            context_value=context,
            variable_values=variables or {},
            operation_name=operation_name,
        )

        if result.errors:
            detail = _join_messages(result.errors)
            logger.warning(f"[QueryExecutor] Execution failed: {detail}")
            return ErrorEnvelope(detail=detail)

        envelopes: List[QueryEnvelope] = context.get(ENVELOPES_KEY, [])
        if not envelopes:
            # Valid document that never touched `book`, e.g. `{ __typename }`
            return EmptyEnvelope(payload=result.data)

        # The first resolved `book` field decides the envelope kind
        envelope = envelopes[0]
        if envelope.kind == "data":
            return DataEnvelope(entity=envelope.entity, payload=result.data)
        if envelope.kind == "empty":
            return EmptyEnvelope(payload=result.data)
        if envelope.kind == "error":
            return envelope
        raise ValueError(f"Unknown envelope kind: {envelope.kind!r}")

    def check(self, query_text: str):
        """
        Parse and validate a document against the schema.

        Returns the parsed document; raises ParseError with the diagnostic
        message otherwise.
        """
        try:
            document = parse(query_text)
        except GraphQLError as e:
            raise ParseError(e.message) from e

        errors = validate(self.schema, document)
        if errors:
            raise ParseError(_join_messages(errors))
        return document

    def find_book(self, book_id: str) -> QueryEnvelope:
        """Execute the canonical `book(id:)` query with `book_id` as a variable."""
        return self.execute(BOOK_BY_ID_QUERY, {"id": book_id})


BOOK_BY_ID_QUERY = "query BookById($id: String!) { book(id: $id) { id name genre } }"

