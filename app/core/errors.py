from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from app.core.config import settings

_LOG = logging.getLogger("app.errors")


class InvalidArgument(HTTPException):
    """Client-caused rejection detected before any backend call."""

    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


def forbidden_data_source(data_source: str | None) -> HTTPException:
    return HTTPException(status_code=403, detail=f"{data_source} is not a valid data source")


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        request_id = getattr(request.state, "request_id", None)
        _LOG.error(
            "unhandled error %s %s request_id=%s: %s",
            request.method,
            request.url.path,
            request_id,
            exc,
            exc_info=exc,
        )
        payload = {
            "error": "Internal Server Error",
            "message": "An unexpected error occurred",
        }
        if settings.is_development:
            payload["debug"] = {"type": type(exc).__name__, "message": str(exc)}
        headers = {"X-Request-ID": request_id} if request_id else None
        return JSONResponse(status_code=500, content=payload, headers=headers)
