"""Per-request locale negotiation middleware.

Negotiates the request locale from the Accept-Language header and the
configured locale parameter (route params, query string, session, cookie,
body), publishes it on ``request.state.locale`` and the request locale
context, and rejects malformed locale input through a replaceable error
handler. Responses carry the request's correlation id in the
``x-correlation-id`` header.
"""

import json
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple
from urllib.parse import parse_qs

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.routing import Match

from infrastructure.i18n import (
    InvalidLocaleFormatError,
    LocaleResolver,
    reset_request_locale,
    set_request_locale,
)
from infrastructure.logging import (
    bind_request_context,
    get_correlation_id,
    get_module_logger,
)

logger = get_module_logger()

INVALID_LOCALE_MESSAGE = "Invalid locale format"

ErrorHandler = Callable[
    [Request, InvalidLocaleFormatError, RequestResponseEndpoint], Awaitable[Response]
]


def invalid_locale_responder(status_code: int = 403) -> ErrorHandler:
    """Build an error handler ending the request with a fixed message."""

    async def respond(
        request: Request,
        exc: InvalidLocaleFormatError,
        call_next: RequestResponseEndpoint,
    ) -> Response:  # pylint: disable=unused-argument
        return PlainTextResponse(INVALID_LOCALE_MESSAGE, status_code=status_code)

    return respond


# Default error handler: 403 "Invalid locale format"
reject_invalid_locale = invalid_locale_responder()


def _route_params(request: Request) -> Dict[str, Any]:
    # Routing happens after middleware, so match the app's routes here
    for route in getattr(request.app, "routes", []):
        match, child_scope = route.matches(request.scope)
        if match == Match.FULL:
            return child_scope.get("path_params", {})
    return {}


async def _body_params(request: Request) -> Dict[str, Any]:
    if request.method in ("GET", "HEAD", "OPTIONS"):
        return {}

    content_type = request.headers.get("content-type", "").split(";")[0].strip()
    if content_type == "application/json":
        body = await request.body()
        if not body:
            return {}
        try:
            data = json.loads(body)
        except ValueError:
            logger.debug("unparsable_json_body", path=request.url.path)
            return {}
        return data if isinstance(data, dict) else {}

    if content_type == "application/x-www-form-urlencoded":
        body = await request.body()
        form = parse_qs(body.decode("utf-8", "replace"))
        return {key: values[0] for key, values in form.items() if values}

    return {}


async def collect_locale_overrides(
    request: Request, param_name: str
) -> List[Tuple[str, Any]]:
    """Collect the locale parameter from every override source of a request.

    Args:
        request: Incoming request.
        param_name: Name of the locale parameter (e.g. "lang").

    Returns:
        (source, raw value) pairs in override precedence order.
    """
    session = request.scope.get("session") or {}
    body = await _body_params(request)
    return [
        ("params", _route_params(request).get(param_name)),
        ("query", request.query_params.get(param_name)),
        ("session", session.get(param_name)),
        ("cookie", request.cookies.get(param_name)),
        ("body", body.get(param_name)),
    ]


class LocaleMiddleware(BaseHTTPMiddleware):
    """Negotiates and publishes the locale of every request.

    Attributes:
        resolver: LocaleResolver performing the negotiation.
        param_name: Request parameter carrying a locale override.
        error_handler: Called with the request, the InvalidLocaleFormatError
            and call_next when locale input is malformed; its response is
            returned. The default responds with error_status_code and
            "Invalid locale format".
    """

    def __init__(
        self,
        app,
        resolver: LocaleResolver,
        param_name: str = "lang",
        error_handler: Optional[ErrorHandler] = None,
        error_status_code: int = 403,
    ):
        super().__init__(app)
        self.resolver = resolver
        self.param_name = param_name
        self.error_handler = error_handler or invalid_locale_responder(
            error_status_code
        )

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint):
        request.state.locale = self.resolver.default_locale
        try:
            overrides = await collect_locale_overrides(request, self.param_name)
            locale = self.resolver.negotiate(
                request.headers.get("accept-language"), overrides
            )
        except InvalidLocaleFormatError as e:
            logger.warning(
                "invalid_locale_format",
                path=request.url.path,
                locale=e.tag,
            )
            return await self.error_handler(request, e, call_next)

        request.state.locale = locale
        token = set_request_locale(locale)
        try:
            with bind_request_context(
                correlation_id=request.headers.get("x-correlation-id"),
                request_path=request.url.path,
                request_method=request.method,
                locale=locale,
            ):
                response = await call_next(request)
                response.headers["x-correlation-id"] = get_correlation_id()
                return response
        finally:
            reset_request_locale(token)
