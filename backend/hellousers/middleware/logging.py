"""
HelloUsers Backend — Request Logging Middleware
================================================

What:  One access-log line per HTTP request, on the `hellousers.access` logger.
When:  Runs inside RequestIDMiddleware, so the request ID is already set.

Line format (combined-log style):
    <client> "<method> <path>[?query] HTTP/<version>" <status> <size> "<referer>" "<user-agent>" <seconds> [<request id>]

Example:
    127.0.0.1 "GET /users/7?full=1 HTTP/1.1" 200 12 "-" "curl/8.5.0" 0.000412 [a1b2c3d4]

Missing values (no Referer, unknown body size) are written as "-".
Request bodies are never logged.
"""

import logging
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from hellousers.middleware.request_id import request_id_var

logger = logging.getLogger("hellousers.access")


def _request_line(request: Request) -> str:
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    http_version = request.scope.get("http_version", "1.1")
    return f"{request.method} {target} HTTP/{http_version}"


def _response_size(response: Response) -> Optional[int]:
    value = response.headers.get("content-length")
    return int(value) if value and value.isdigit() else None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs the request line and outcome of each HTTP request.

    Log level follows the response status:
        5xx → ERROR
        4xx → WARNING (includes requests rejected by the decoding layer)
        2xx/3xx → INFO

    Every field of the line is also attached to the record as an `extra`
    attribute, for handlers that format records themselves.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        # request.client is None under some test transports
        client_ip = request.client.host if request.client else "-"
        request_line = _request_line(request)
        size = _response_size(response)
        referer = request.headers.get("referer", "-")
        user_agent = request.headers.get("user-agent", "-")
        rid = request_id_var.get("")
        status = response.status_code

        if status >= 500:
            level = logging.ERROR
        elif status >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        logger.log(
            level,
            '%s "%s" %d %s "%s" "%s" %.6f [%s]',
            client_ip,
            request_line,
            status,
            "-" if size is None else size,
            referer,
            user_agent,
            elapsed,
            rid,
            extra={
                "client_ip": client_ip,
                "request_line": request_line,
                "method": request.method,
                "path": request.url.path,
                "query": request.url.query,
                "status": status,
                "size": size,
                "referer": referer,
                "user_agent": user_agent,
                "duration_ms": round(elapsed * 1000, 3),
                "request_id": rid,
            },
        )

        return response
