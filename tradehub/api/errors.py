"""
Maps application exceptions onto the JSON error envelope:

    {"success": false, "error": "...", "details": ...}
"""
import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tradehub.api.schemas.common import ErrorResponse
from tradehub.application.errors import (
    CategoryNotFoundError,
    ListingNotFoundError,
    UnknownUserError,
)
from tradehub.application.query.filter_parser import FilterValidationError
from tradehub.config import settings

logger = structlog.get_logger(__name__)


def error_response(status_code: int, error: str, details: object = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=jsonable_encoder(details))
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def _filter_validation_handler(request: Request, exc: FilterValidationError) -> JSONResponse:
    logger.info("invalid_query_parameter", path=request.url.path, field=exc.field)
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid query parameters", exc.message)


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", exc.errors())


async def _not_found_handler(request: Request, exc: ListingNotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, "Listing not found", str(exc))


async def _unknown_category_handler(request: Request, exc: CategoryNotFoundError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, "Unknown category", str(exc))


async def _unknown_user_handler(request: Request, exc: UnknownUserError) -> JSONResponse:
    return error_response(status.HTTP_401_UNAUTHORIZED, "Authentication required")


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_request_error", path=request.url.path, method=request.method)
    details = str(exc) if settings.expose_error_details else None
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", details)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FilterValidationError, _filter_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ListingNotFoundError, _not_found_handler)  # type: ignore[arg-type]
    app.add_exception_handler(CategoryNotFoundError, _unknown_category_handler)  # type: ignore[arg-type]
    app.add_exception_handler(UnknownUserError, _unknown_user_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_exception_handler)
