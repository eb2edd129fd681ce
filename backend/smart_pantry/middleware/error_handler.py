"""
Unhandled Exception Handling

Any exception escaping an endpoint is recorded through error_logger and
answered with a generic 500. The response carries the error_logs row id
(body "error_id" and X-Error-ID header) so a report can be matched to the
stored traceback. HTTPExceptions never reach this point; FastAPI turns
them into responses first.
"""

from typing import Awaitable, Callable, Optional
from uuid import UUID

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from smart_pantry.services.error_logging import error_logger

INTERNAL_ERROR_DETAIL = "An internal error occurred. Contact the administrator."


def internal_error_response(error_id: Optional[UUID]) -> JSONResponse:
    reference = str(error_id) if error_id else None
    headers = {"X-Error-ID": reference} if reference else None
    return JSONResponse(
        status_code=500,
        content={"detail": INTERNAL_ERROR_DETAIL, "error_id": reference},
        headers=headers,
    )


async def catch_unhandled_errors(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    try:
        return await call_next(request)
    except Exception as exc:
        device = getattr(request.state, "device", None)
        error_id = error_logger.log_error(
            exc,
            request=request,
            user=getattr(request.state, "user", None),
            severity="critical",
            context={
                "unhandled": True,
                "device_id": getattr(device, "device_id", None),
            },
        )
        return internal_error_response(error_id)


def setup_error_handling(app: FastAPI) -> None:
    """Install the unhandled-exception catcher on the application."""
    app.add_middleware(BaseHTTPMiddleware, dispatch=catch_unhandled_errors)
