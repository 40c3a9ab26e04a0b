# menu_api/api/middleware.py
"""
Cross-cutting request hooks: security headers, access log and the app-wide
error handlers.
"""

import logging
import time

from flask import g, request
from werkzeug.exceptions import HTTPException

from menu_api.api.responses import failure

logger = logging.getLogger("menu_api.access")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
}

GENERIC_ERROR = "Something went wrong on the server!"


def register_middleware(app):
    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _finish(response):
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)

        started = g.get("request_started")
        elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        logger.info(
            "%s %s %s %.1fms",
            request.method,
            request.full_path.rstrip("?"),
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.errorhandler(HTTPException)
    def _http_error(e):
        return failure(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def _unhandled(e):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return failure(GENERIC_ERROR, 500)
