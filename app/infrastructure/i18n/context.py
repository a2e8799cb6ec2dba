"""Request-scoped locale context using contextvars.

The locale middleware publishes the negotiated locale here so code running
for the same request can read it without passing the request around. Each
request runs in its own context, so values never leak across requests.
"""

from contextvars import ContextVar, Token
from typing import Optional

_request_locale: ContextVar[Optional[str]] = ContextVar("request_locale", default=None)


def get_request_locale() -> Optional[str]:
    """Get the locale negotiated for the current request, if any."""
    return _request_locale.get()


def set_request_locale(locale: Optional[str]) -> Token:
    """Set the locale for the current request context.

    Returns:
        Token that can be used with reset_request_locale.
    """
    return _request_locale.set(locale)


def reset_request_locale(token: Token) -> None:
    """Restore the locale that was active before set_request_locale."""
    _request_locale.reset(token)
