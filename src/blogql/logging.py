"""
Structured logging for BlogQL using structlog.

Events carry the request id and GraphQL operation name of the request being
served, taken from context variables set by the request middleware.
"""

import logging
import secrets
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
operation_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def resolve_level(log_level: str | None, debug: bool = False) -> int:
    """Map a level name to a stdlib level.

    Without a name, debug mode logs everything and production logs INFO.

    Raises:
        ValueError: If the name is not a known level
    """
    if log_level is None:
        return logging.DEBUG if debug else logging.INFO
    try:
        return _LEVELS[log_level.lower()]
    except KeyError:
        raise ValueError(f"Unknown log level: {log_level}") from None


def add_request_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor adding the current request id and operation."""
    _ = logger, method_name

    request_id = request_id_ctx.get()
    if request_id:
        event_dict.setdefault("request_id", request_id)

    operation = operation_ctx.get()
    if operation:
        event_dict.setdefault("graphql_operation", operation)

    return event_dict


def configure_logging(debug: bool = False, log_level: str | None = None) -> None:
    """Configure stdlib logging and structlog.

    Args:
        debug: Render colored console output instead of JSON lines.
        log_level: Minimum level name (``debug`` .. ``critical``).
    """
    level = resolve_level(log_level, debug)

    logging.basicConfig(level=level, stream=sys.stdout, format="%(message)s", force=True)

    renderer: Any = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_request_context,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger (typically ``get_logger(__name__)``)."""
    return structlog.get_logger(name)


def new_request_id() -> str:
    """Random 16-character url-safe request id."""
    return secrets.token_urlsafe(12)


@contextmanager
def request_context(
    request_id: str | None = None, operation: str | None = None
) -> Iterator[str]:
    """Bind a request id and operation name for the duration of a request.

    Yields the request id in use, generating one when none is given. The
    previous values are restored on exit.
    """
    request_id = request_id or new_request_id()
    id_token = request_id_ctx.set(request_id)
    op_token = operation_ctx.set(operation)
    try:
        yield request_id
    finally:
        operation_ctx.reset(op_token)
        request_id_ctx.reset(id_token)
