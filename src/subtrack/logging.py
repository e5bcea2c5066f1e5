"""
structlog setup for the Subtrack API.

Request-scoped values (request id, GraphQL operation) are bound with
``structlog.contextvars`` by the HTTP middleware and merged into every event
logged while that request is handled, including resolver and store logs.
"""

import logging
import secrets
import sys
import time
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, get_contextvars


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Route structlog through stdlib logging on stdout.

    Args:
        debug: Console renderer when True, one JSON object per line otherwise.
        level: Log level name; defaults to DEBUG or INFO according to ``debug``.
    """
    log_level = logging.getLevelName(level.upper()) if level else (
        logging.DEBUG if debug else logging.INFO
    )
    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s", force=True)

    renderer: Any = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Millisecond timestamp in hex followed by 4 random hex digits, e.g. ``18c2f9a1b3e-9f0c``."""
    return f"{int(time.time() * 1000):x}-{secrets.token_hex(2)}"


def bind_request_context(
    request_id: str | None = None, graphql_operation: str | None = None
) -> str:
    """Start a fresh logging context for one request and return its id."""
    clear_contextvars()
    request_id = request_id or generate_request_id()
    bind_contextvars(request_id=request_id)
    if graphql_operation:
        bind_contextvars(graphql_operation=graphql_operation)
    return request_id


def clear_request_context() -> None:
    clear_contextvars()


def get_request_id() -> str | None:
    return get_contextvars().get("request_id")
