"""
Exception handlers. Every error leaves the API as {"error": "<message>"}.
"""


from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import AppError, InvalidRequest
from app.core.logging import get_logger

log = get_logger("api.errors")


async def _app_error(request: Request, exc: AppError, headers: dict | None = None) -> JSONResponse:
    log.info(f"{request.method} {request.url.path} -> {exc.status_code} ({type(exc).__name__}: {exc.message})")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message}, headers=headers)


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # 404 / 405 raised by routing; 405 carries the Allow header
    return await _app_error(
        request,
        InvalidRequest(str(exc.detail), status_code=exc.status_code),
        headers=getattr(exc, "headers", None),
    )


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = {str(err["loc"][-1]) for err in exc.errors() if err.get("loc")}
    if "description" in fields:
        message = "Missing description"
    elif "category" in fields:
        message = "Unknown category"
    else:
        message = "Invalid request body"
    return await _app_error(request, InvalidRequest(message))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, _app_error)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
