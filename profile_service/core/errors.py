"""
Error taxonomy and the exception handlers that shape every failure body.

Domain failures render as ``{"msg": ...}``, input failures as
``{"errors": [{"field", "message"}, ...]}``. Anything else is logged and
reported as an opaque plain-text 500.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from slowapi.errors import RateLimitExceeded

logger = logging.getLogger(__name__)

SERVER_ERROR_BODY = "Server Error"


class ServiceError(Exception):
    """Failure the caller is allowed to see, rendered as ``{"msg": ...}``."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, msg: str, status_code: int = None):
        super().__init__(msg)
        self.msg = msg
        if status_code is not None:
            self.status_code = status_code


class ProfileNotFound(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationFailed(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class UpstreamNotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class UpstreamUnavailable(Exception):
    """External service gave no usable answer; surfaced as a generic 500."""


class RequestValidationFailed(Exception):
    def __init__(self, errors: List[Dict[str, str]]):
        super().__init__(f"{len(errors)} validation error(s)")
        self.errors = errors


def _location_to_field(loc: tuple) -> str:
    # Drop the "body"/"path"/"query" prefix FastAPI puts in front
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content={"msg": exc.msg})


async def validation_failed_handler(request: Request, exc: RequestValidationFailed):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": exc.errors})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    response = JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"msg": f"Rate limit exceeded: {exc.detail}"},
    )
    limiter = getattr(request.app.state, "limiter", None)
    view_rate_limit = getattr(request.state, "view_rate_limit", None)
    if limiter is not None and view_rate_limit is not None:
        response = limiter._inject_headers(response, view_rate_limit)
    return response


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors: List[Dict[str, Any]] = [
        {"field": _location_to_field(tuple(err.get("loc", ()))), "message": err.get("msg", "Invalid value")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse(SERVER_ERROR_BODY, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationFailed, validation_failed_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
