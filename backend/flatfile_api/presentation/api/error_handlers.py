"""Boundary error handler — the only place failures become HTTP responses.

Every failure, whatever raised it, is answered with the same envelope:

    {"status": "error", "statusCode": N, "message": "...", "stack": "..."}

``stack`` is only included when the handler was built with
``include_stack_trace=True``.
"""

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from flatfile_api.application.schemas import ErrorEnvelope
from flatfile_api.domain.exceptions import AppError

logger = logging.getLogger(__name__)


def _original_url(request: Request) -> str:
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


class ErrorEnvelopeHandler:
    """Converts raised failures into error envelopes.

    Usage:
        ErrorEnvelopeHandler(include_stack_trace=settings.show_stack_trace).register(app)
    """

    def __init__(self, include_stack_trace: bool = False):
        self._include_stack_trace = include_stack_trace

    def register(self, app: FastAPI) -> None:
        app.add_exception_handler(AppError, self.handle_app_error)
        app.add_exception_handler(StarletteHTTPException, self.handle_http_exception)
        app.add_exception_handler(RequestValidationError, self.handle_validation_error)
        app.add_exception_handler(Exception, self.handle_unexpected)

    def build_response(
        self,
        status_code: int,
        message: str,
        exc: BaseException,
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        envelope = ErrorEnvelope(statusCode=status_code, message=message)
        if self._include_stack_trace:
            envelope.stack = "".join(traceback.format_exception(exc))
        return JSONResponse(
            status_code=status_code,
            content=envelope.model_dump(exclude_none=True),
            headers=headers,
        )

    # ── Handlers ────────────────────────────────────────────────────

    async def handle_app_error(self, request: Request, exc: AppError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "Error: %s (%s %s)", exc.message, request.method, request.url.path,
                exc_info=exc,
            )
        else:
            logger.info("%s %s → %d %s", request.method, request.url.path, exc.status_code, exc.message)
        return self.build_response(exc.status_code, exc.message, exc)

    async def handle_http_exception(
        self, request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        # A known path with an unsupported method is an unmatched route too
        unmatched = exc.status_code == 405 or (
            exc.status_code == 404 and request.scope.get("endpoint") is None
        )
        if unmatched:
            message = f"Could not find {_original_url(request)} on this server!"
            logger.info("%s %s → 404 %s", request.method, request.url.path, message)
            return self.build_response(404, message, exc)
        message = str(exc.detail)
        logger.info("%s %s → %d %s", request.method, request.url.path, exc.status_code, message)
        return self.build_response(exc.status_code, message, exc, headers=exc.headers)

    async def handle_validation_error(
        self, request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            message = f"Invalid request {location}: {first.get('msg', 'validation error')}"
        else:
            message = "Invalid request"
        logger.info("%s %s → 400 %s", request.method, request.url.path, message)
        return self.build_response(400, message, exc)

    async def handle_unexpected(self, request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s: %s", request.method, request.url.path, exc,
            exc_info=exc,
        )
        message = str(exc) if self._include_stack_trace and str(exc) else "Internal server error"
        return self.build_response(500, message, exc)
