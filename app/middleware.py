# =============================================================================
# app/middleware.py - Request Logging and Path-Scoped Credential Gates
# =============================================================================
# Cross-cutting middleware installed by app.main.create_app():
#
#   RequestLoggingMiddleware - logs every request on entry and exit
#   ErrorBoundaryMiddleware  - renders any error escaping the inner chain
#                              as an envelope response
#   PathGateMiddleware       - runs a credential gate for requests under a
#                              declared path prefix
#
# Gates are declared as a table of GateBinding entries so the set of
# dispatcher-enforced namespaces can be read in one place.
# =============================================================================

import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Sequence

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.exceptions import handle_error

logger = logging.getLogger(__name__)

# A gate verifies the request's credentials and returns a context object,
# or raises an ApiError to reject it.
Gate = Callable[[Request], Awaitable[Any]]


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log `<-- METHOD path` on entry and `--> METHOD path STATUS TIME` on exit."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        method = request.method
        path = request.url.path
        logger.info(f"<-- {method} {path}")
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.info(f"--> {method} {path} 500 {_elapsed_ms(start)}ms")
            raise

        logger.info(f"--> {method} {path} {response.status_code} {_elapsed_ms(start)}ms")
        return response


def _elapsed_ms(start: float) -> int:
    return round((time.perf_counter() - start) * 1000)


@dataclass(frozen=True)
class GateBinding:
    """
    Binds a credential gate to a path prefix.

    The prefix matches itself and anything below it: "/api/admin/files"
    covers "/api/admin/files" and "/api/admin/files/abc", but not
    "/api/admin/filesystem".
    """
    prefix: str
    gate: Gate
    state_key: str

    def matches(self, path: str) -> bool:
        prefix = self.prefix.rstrip("/")
        return path == prefix or path.startswith(prefix + "/")


class PathGateMiddleware(BaseHTTPMiddleware):
    """
    Run the gates whose prefix matches the request path, in table order.

    The context returned by a gate is stored on `request.state.<state_key>`
    for downstream handlers. A rejection ends the chain: the handler never
    runs and the error is rendered by the global error handler.
    """

    def __init__(self, app: ASGIApp, bindings: Sequence[GateBinding] = ()):
        super().__init__(app)
        self.bindings = tuple(bindings)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path

        for binding in self.bindings:
            if not binding.matches(path):
                continue
            try:
                context = await binding.gate(request)
            except Exception as exc:
                return await handle_error(request, exc)
            setattr(request.state, binding.state_key, context)
            logger.debug(f"Gate for {binding.prefix} passed: {request.method} {path}")

        return await call_next(request)


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """
    Turn any exception escaping the gates or routes into an envelope response.

    Starlette hands unhandled exceptions to ServerErrorMiddleware, which sits
    outside CORS and re-raises to the server after responding. Installed just
    inside CORS, this renders internal failures through handle_error so the
    500 envelope carries CORS headers and nothing reaches the transport.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return await handle_error(request, exc)
