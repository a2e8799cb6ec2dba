"""Request-scoped logging context.

The locale middleware binds the correlation id, request path, method and
negotiated locale for the duration of a request; structlog's
``merge_contextvars`` processor adds them to every event logged meanwhile.
"""

import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    locale: Optional[str] = None,
    **extra_context: Any,
) -> Iterator[None]:
    """Bind request fields to the logging context until the block exits.

    A correlation id is generated when none is given. Fields passed as None
    are not bound. On exit the previous values are restored, so nested
    blocks leave the enclosing context intact.

    Example:
        with bind_request_context(request_path="/translate", locale="de-DE"):
            logger.info("translation_requested")
    """
    fields = {
        "request_path": request_path,
        "request_method": request_method,
        "locale": locale,
        **extra_context,
    }
    context = {key: value for key, value in fields.items() if value is not None}
    context["correlation_id"] = correlation_id or str(uuid.uuid4())

    tokens = structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.reset_contextvars(**tokens)


def get_correlation_id() -> Optional[str]:
    """Correlation id of the current context, if bound."""
    return structlog.contextvars.get_contextvars().get("correlation_id")


def clear_request_context() -> None:
    """Unbind every context variable."""
    structlog.contextvars.clear_contextvars()
