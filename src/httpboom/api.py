"""FastAPI integration: render decorated errors as JSON responses."""

import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from .core import get_message, is_boom, wrap
from .exceptions import Boom

logger = logging.getLogger(__name__)


def to_response(error: BaseException) -> JSONResponse:
    """Build the JSON response described by a decorated error's output."""
    if not is_boom(error):
        raise TypeError("Cannot render an undecorated exception")

    output = error.output  # type: ignore[attr-defined]
    return JSONResponse(
        status_code=output.status_code,
        content=output.payload.model_dump(mode="json", by_alias=True, exclude_none=True),
        headers=dict(output.headers),
    )


async def boom_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render any exception, decorating undecorated ones as 500."""
    if not is_boom(exc):
        wrap(exc)

    status_code = exc.output.status_code  # type: ignore[attr-defined]
    if exc.is_server:  # type: ignore[attr-defined]
        logger.error(
            "%s %s failed with HTTP %d: %s",
            request.method,
            request.url.path,
            status_code,
            get_message(exc),
            exc_info=exc,
        )
    else:
        logger.debug(
            "%s %s rejected with HTTP %d: %s",
            request.method,
            request.url.path,
            status_code,
            get_message(exc),
        )
    return to_response(exc)


async def render_decorated_errors(request: Request, call_next) -> Response:  # type: ignore[no-untyped-def]
    """Render foreign exceptions decorated by ``wrap`` as handled responses."""
    try:
        return await call_next(request)
    except Exception as exc:
        if not is_boom(exc):
            raise
        return await boom_exception_handler(request, exc)


def install_exception_handlers(app: FastAPI, *, catch_all: bool = True) -> None:
    """
    Register the error handling on a FastAPI app.

    Boom instances and foreign exceptions decorated by ``wrap`` are always
    rendered as handled responses. With ``catch_all`` every other exception
    is rendered as a 500 as well; the server still treats those as crashes.
    Must be called before the app starts.
    """
    app.add_exception_handler(Boom, boom_exception_handler)
    app.middleware("http")(render_decorated_errors)
    if catch_all:
        app.add_exception_handler(Exception, boom_exception_handler)
