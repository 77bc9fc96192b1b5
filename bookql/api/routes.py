"""
BookQL Routes - GraphQL endpoint over HTTP.

Endpoints:
- POST /graphql - execute a document sent as JSON {"query", "variables", "operationName"}
- GET /graphql  - execute a document sent as query-string parameters

Status codes follow express-graphql: 200 for `data` responses (including
`book: null`), 400 for `errors` responses.
"""
import json
from typing import Any, Dict, Optional, Union

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from bookql.core.constants import GRAPHQL_PATH
from bookql.domain import ErrorEnvelope, QueryEnvelope
from bookql.engine import QueryExecutor
from bookql.utils.log_utils import get_logger

router = APIRouter(tags=["GraphQL"])
logger = get_logger(__name__)

INVALID_VARIABLES_MESSAGE = "Variables are invalid JSON."


class GraphQLRequest(BaseModel):
    """Body of a POST /graphql request."""
    query: Optional[str] = Field(None, description="GraphQL document text")
    variables: Optional[Union[Dict[str, Any], str]] = Field(
        None, description="Variable values, as an object or a JSON-encoded string"
    )
    operationName: Optional[str] = Field(None, description="Operation to run")


def _respond(envelope: QueryEnvelope) -> JSONResponse:
    if envelope.kind == "error":
        status_code = 400
    elif envelope.kind in ("data", "empty"):
        status_code = 200
    else:
        raise ValueError(f"Unknown envelope kind: {envelope.kind!r}")
    return JSONResponse(status_code=status_code, content=envelope.to_wire())


def _executor(request: Request) -> QueryExecutor:
    return request.app.state.executor


def _parse_variables(
    variables: Optional[Union[Dict[str, Any], str]],
) -> Optional[Dict[str, Any]]:
    """Accept variables as an object or a JSON string; ValueError if neither."""
    if not variables:
        return None
    if isinstance(variables, dict):
        return variables
    parsed = json.loads(variables)
    if not isinstance(parsed, dict):
        raise ValueError("variables must decode to an object")
    return parsed


@router.post(GRAPHQL_PATH)
@router.post(GRAPHQL_PATH + "/", include_in_schema=False)
def graphql_post(body: GraphQLRequest, request: Request):
    try:
        variables = _parse_variables(body.variables)
    except ValueError:
        return _respond(ErrorEnvelope(detail=INVALID_VARIABLES_MESSAGE))

    envelope = _executor(request).execute(
        body.query,
        variables=variables,
        operation_name=body.operationName,
    )
    logger.info(f"[GraphQL] POST -> {envelope.kind}")
    return _respond(envelope)


@router.get(GRAPHQL_PATH)
@router.get(GRAPHQL_PATH + "/", include_in_schema=False)
def graphql_get(
    request: Request,
    query: Optional[str] = Query(None),
    variables: Optional[str] = Query(None),
    operationName: Optional[str] = Query(None),
):
    try:
        parsed_variables = _parse_variables(variables)
    except ValueError:
        return _respond(ErrorEnvelope(detail=INVALID_VARIABLES_MESSAGE))

    envelope = _executor(request).execute(
        query,
        variables=parsed_variables,
        operation_name=operationName,
    )
    logger.info(f"[GraphQL] GET -> {envelope.kind}")
    return _respond(envelope)
