"""
Exception handlers: every error leaves the API as {"message": ...}
with an "errors" mapping for validation failures
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from marketplace.core.exceptions import MarketplaceError, AuthenticationRequired, ValidationFailed
from marketplace.core.i18n_logger import get_i18n_logger
from marketplace.schemas.validation import collect_errors

logger = get_i18n_logger("exception_handlers")


async def marketplace_error_handler(request: Request, exc: MarketplaceError) -> JSONResponse:
    content = {"message": exc.message}
    headers = None

    if isinstance(exc, ValidationFailed):
        content["errors"] = exc.errors
        logger.info("error.validation", path=request.url.path, fields=", ".join(exc.errors))
    if isinstance(exc, AuthenticationRequired):
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = collect_errors(exc.errors())
    logger.info("error.validation", path=request.url.path, fields=", ".join(errors))
    return JSONResponse(
        status_code=ValidationFailed.status_code,
        content={"message": ValidationFailed.default_message, "errors": errors},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.debug("error.http", status_code=exc.status_code, path=request.url.path, detail=exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Details go to the log only
    logger.exception("error.unexpected", method=request.method, path=request.url.path, error=repr(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Server Error"},
    )


EXCEPTION_HANDLERS = {
    MarketplaceError: marketplace_error_handler,
    RequestValidationError: request_validation_error_handler,
    StarletteHTTPException: http_exception_handler,
    Exception: unexpected_error_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
