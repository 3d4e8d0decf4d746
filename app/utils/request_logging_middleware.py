"""Request logging middleware.

Logs one line per API request with the method, path, status code, duration
and the JSON body returned to the client.
"""

import time
import logging
from typing import Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

MAX_LOG_LINE_LENGTH = 80


def format_log_line(
    method: str,
    path: str,
    status_code: int,
    duration_ms: int,
    body: Optional[str] = None,
    max_length: int = MAX_LOG_LINE_LENGTH,
) -> str:
    """Build the request log line, truncated with an ellipsis past max_length."""
    line = f"{method} {path} {status_code} in {duration_ms}ms"
    if body:
        line += f" :: {body}"
    if len(line) > max_length:
        line = line[: max_length - 1] + "…"
    return line


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs requests under a path prefix."""

    def __init__(self, app, path_prefix: str = "/api", max_length: int = MAX_LOG_LINE_LENGTH):
        """Initialize the request logging middleware.

        Args:
            app: FastAPI application instance
            path_prefix: Only requests under this prefix are logged
            max_length: Longest log line before truncation
        """
        super().__init__(app)
        self.path_prefix = path_prefix
        self.max_length = max_length

    async def dispatch(self, request: Request, call_next):
        """Process the request and log it once the response is ready.

        Args:
            request: The incoming HTTP request
            call_next: The next middleware or endpoint in the chain

        Returns:
            HTTP response
        """
        start_time = time.time()
        response = await call_next(request)

        path = request.url.path
        if not path.startswith(self.path_prefix):
            return response

        # The body is a stream, read it once and hand back a buffered copy
        content = b""
        async for chunk in response.body_iterator:
            content += chunk

        body = None
        if response.headers.get("content-type", "").startswith("application/json"):
            body = content.decode("utf-8", errors="replace")

        duration_ms = int((time.time() - start_time) * 1000)
        logger.info(
            format_log_line(
                request.method,
                path,
                response.status_code,
                duration_ms,
                body,
                self.max_length,
            )
        )

        return Response(
            content=content,
            status_code=response.status_code,
            headers=dict(response.headers),
            media_type=response.media_type,
            background=response.background,
        )
