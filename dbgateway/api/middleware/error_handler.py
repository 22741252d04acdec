"""Exception handlers for the table gateway.

Every failure leaves the API as {"success": false, "error": <message>}:
- missing/invalid request input -> 400
- backend and configuration failures -> 500
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from dbgateway.core.errors import GatewayError, ValidationError
from dbgateway.core.logging import logger


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning("request_validation_failed", path=request.url.path, error=exc.message)
    return error_response(exc.message, 400)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Turn FastAPI body/query validation failures into the 400 envelope."""
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        details.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))

    message = "; ".join(details) or "Invalid request"
    logger.warning("request_validation_failed", path=request.url.path, error=message)
    return error_response(message, 400)


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    logger.error(
        "request_failed",
        path=request.url.path,
        method=request.method,
        error_type=type(exc).__name__,
        error=exc.message,
    )
    return error_response(exc.message or "Internal Server Error", 500)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("request_failed", path=request.url.path, method=request.method)
    return error_response(str(exc) or "Internal Server Error", 500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
