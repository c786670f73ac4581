"""vnd.error handling middleware."""

import logging
from typing import Any

from fastapi_hal.core.errors import HALErrorBuilder
from fastapi_hal.responses import VndErrorResponse

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert unhandled exceptions into vnd.error documents."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.error_builder = HALErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Log the failure and answer 500 with a vnd.error document."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except Exception as exc:
            logger.exception("Unhandled error for %s %s", scope.get("method"), scope.get("path"))
            error = self.error_builder.error_object(
                message=str(exc) or exc.__class__.__name__,
                logref=exc.__class__.__name__,
                path=scope.get("path"),
            )
            response = VndErrorResponse(
                self.error_builder.error_document([error]),
                status_code=500,
            )
            await response(scope, receive, send)
