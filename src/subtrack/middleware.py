"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .config import settings
from .logging import bind_request_context, clear_request_context, get_logger

logger = get_logger(__name__)

_OPERATION_RE = re.compile(r"\b(query|mutation)\s+(\w+)")
_FIELD_RE = re.compile(r"{\s*(\w+)")


def graphql_operation_from_document(query: str) -> str | None:
    """Name a GraphQL document for logging.

    Prefers the declared operation name, then the first selected field, so an
    anonymous ``{ categories }`` logs as ``categories``.
    """
    if not query:
        return None
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    stripped = query.lstrip()
    kind = "mutation:" if stripped.startswith("mutation") else ""

    match = _OPERATION_RE.search(query)
    if match:
        return f"{kind}{match.group(2)}"

    match = _FIELD_RE.search(query)
    if match:
        return f"{kind}{match.group(1)}"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != settings.graphql_path:
        return None

    if request.method == "GET":
        params = dict(request.query_params)
        op = params.get("operationName")
        if op:
            return op
        return graphql_operation_from_document(params.get("query", ""))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None

        op = data.get("operationName")
        if isinstance(op, str) and op:
            return op
        query = data.get("query")
        if not isinstance(query, str):
            return None
        return graphql_operation_from_document(query)

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Everything logged while handling the request carries these fields
        request_id = bind_request_context(
            graphql_operation=await extract_graphql_operation_name(request)
        )

        try:
            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                user_agent=request.headers.get("user-agent"),
                remote_addr=request.client.host if request.client else None,
            )

            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
            )
            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
