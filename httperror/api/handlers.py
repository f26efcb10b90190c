from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from httperror.core.errors import HttpError
from httperror.core.logging import get_logger

log = get_logger("httperror.api")


async def http_error_handler(request: Request, exc: HttpError) -> JSONResponse:
    if exc.status >= 500:
        log.error(
            "%s on %s %s: %s", exc.name.value, request.method, request.url.path, exc.message,
            extra={"status": exc.status},
        )
    else:
        log.info(
            "%s on %s %s: %s", exc.name.value, request.method, request.url.path, exc.message,
            extra={"status": exc.status},
        )
    return exc.to_response()


def register_exception_handlers(app: FastAPI) -> None:
    """Serialize every raised HttpError with its own status, body and headers."""
    app.add_exception_handler(HttpError, http_error_handler)
