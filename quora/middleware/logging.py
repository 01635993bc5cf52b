"""
Quora Backend — Access Log Middleware
=======================================

What:  One `quora.access` line per API call.
How:   The request is matched against the app's routes up front so the
       line carries the route template (`/userprofile/{user_id}`) rather
       than the concrete path with public ids in it. Credentials are
       reduced to the scheme the client used. The level follows the
       status: 5xx → ERROR, 4xx → WARNING, otherwise INFO.

Logged:     method, route, status, duration, auth scheme, client address
Never:      request bodies (passwords), the `authorization` header value,
            the `access_token` response header
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Match

logger = logging.getLogger("quora.access")

# Polled by load balancers; not worth a line each
QUIET_PATHS = frozenset({"/health"})


def route_template(request: Request) -> str:
    """Path template of the route serving this request, else the raw path."""
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return getattr(route, "path", request.url.path)
    return request.url.path


def auth_scheme(request: Request) -> str:
    """
    Label for the credentials on the request, never the credentials.

    Endpoints accept a bare access token as well as `Bearer <token>`, so
    any other non-empty header is reported as "token".
    """
    header = request.headers.get("authorization", "").strip()
    if not header:
        return "none"
    scheme = header.split(" ", 1)[0].lower()
    return scheme if scheme in ("basic", "bearer") else "token"


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        route = route_template(request)
        scheme = auth_scheme(request)
        client_ip = request.client.host if request.client else "unknown"

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms auth=%s from %s",
            request.method,
            route,
            status,
            duration_ms,
            scheme,
            client_ip,
            extra={
                "route": route,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "auth_scheme": scheme,
            },
        )
        return response
