"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import get_logger, request_context

logger = get_logger(__name__)

GRAPHQL_PATH = "/graphql"
REQUEST_ID_HEADER = "X-Request-ID"

# GraphQL payload keys that are never written to the log
_GRAPHQL_PAYLOAD_KEYS = ("query", "variables", "extensions")

_OPERATION_RE = re.compile(r"\b(query|mutation)\s+(\w+)")


def sanitize_query_params(params: dict[str, Any], path: str) -> dict[str, Any]:
    """Redact GraphQL payloads from query parameters before logging.

    Args:
        params: Dictionary of query parameters
        path: Request path

    Returns:
        Dictionary with payload parameters redacted on the GraphQL path
    """
    if path != GRAPHQL_PATH:
        return dict(params)

    return {
        key: "[REDACTED]" if key in _GRAPHQL_PAYLOAD_KEYS else value
        for key, value in params.items()
    }


def operation_name_from_document(query: str) -> str:
    """Derive a loggable operation name from a GraphQL document.

    Named operations give ``name`` (queries) or ``mutation:name``; anonymous
    mutations give ``mutation:anonymous`` and anything else ``unnamed_operation``.
    """
    match = _OPERATION_RE.search(query)
    if match:
        kind, name = match.groups()
        return f"mutation:{name}" if kind == "mutation" else name
    if query.lstrip().startswith("mutation"):
        return "mutation:anonymous"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != GRAPHQL_PATH:
        return None

    if request.method == "GET":
        data: dict[str, Any] = dict(request.query_params)
    elif request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None
    else:
        return None

    op = data.get("operationName")
    if isinstance(op, str) and op:
        return op

    query = data.get("query", "")
    if not isinstance(query, str) or not query:
        return None
    return operation_name_from_document(query)


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Log each request with its id and GraphQL operation name.

    An incoming ``X-Request-ID`` header is reused; otherwise one is generated.
    The id is echoed back on the response.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        graphql_operation = await extract_graphql_operation_name(request)

        with request_context(
            request.headers.get(REQUEST_ID_HEADER), graphql_operation
        ) as request_id:
            sanitized_params = None
            if request.query_params:
                sanitized_params = sanitize_query_params(
                    dict(request.query_params), request.url.path
                )

            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                graphql_operation=graphql_operation,
                query_params=sanitized_params,
                user_agent=request.headers.get("user-agent"),
                remote_addr=request.client.host if request.client else None,
            )

            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    "Request failed",
                    method=request.method,
                    path=request.url.path,
                    graphql_operation=graphql_operation,
                    error=str(e),
                )
                raise

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
                graphql_operation=graphql_operation,
            )

            response.headers[REQUEST_ID_HEADER] = request_id
            return response
