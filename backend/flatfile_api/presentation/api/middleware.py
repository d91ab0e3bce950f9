"""HTTP middleware — access logging and baseline security headers."""

import time

from starlette.middleware.base import BaseHTTPMiddleware

from flatfile_api.infrastructure.logging.access_logger import AccessLogger, AccessRecord


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Emit one access-log line per request, including requests that crash."""

    def __init__(self, app, *, access_logger: AccessLogger) -> None:
        super().__init__(app)
        self._access_logger = access_logger

    async def dispatch(self, request, call_next):
        start = time.perf_counter()
        status_code = 500
        content_length = None
        try:
            response = await call_next(request)
            status_code = response.status_code
            content_length = response.headers.get("content-length")
            return response
        finally:
            client = request.client.host if request.client else "-"
            self._access_logger.log(
                AccessRecord(
                    method=request.method,
                    path=request.url.path,
                    status_code=status_code,
                    elapsed_ms=(time.perf_counter() - start) * 1000,
                    content_length=content_length,
                    client=client,
                    http_version=request.scope.get("http_version", "1.1"),
                    referer=request.headers.get("referer", "-"),
                    user_agent=request.headers.get("user-agent", "-"),
                )
            )


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (anti clickjacking, no sniffing, referrer policy)."""

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "SAMEORIGIN")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        response.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        response.headers.setdefault("X-DNS-Prefetch-Control", "off")
        return response
