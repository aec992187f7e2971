"""Exception handlers that render every failure as ``{"error", "message"}``."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from recipebox.errors import AppError, StoreUnavailable, ValidationFailed

logger = logging.getLogger(__name__)


REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")


def validation_errors(exc: RequestValidationError) -> list[dict]:
    """Flatten pydantic errors into one field/message pair per violation."""
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        field = ".".join(loc) or "body"
        if error.get("type") == "missing":
            message = "Request body is required" if field == "body" else f"{field} is required"
        else:
            message = error.get("msg", "Invalid value").removeprefix("Value error, ")
        errors.append({"field": field, "message": message})
    return errors


def _render(exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _render(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _render(ValidationFailed(validation_errors(exc)))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        body = {"error": "Not found", "message": "The requested resource was not found"}
    else:
        body = {"error": str(exc.detail), "message": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Store error on {request.method} {request.url.path}", exc_info=exc)
    return _render(StoreUnavailable())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return _render(AppError())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
