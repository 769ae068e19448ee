"""Exception handlers mapping storefront errors onto JSON failure envelopes."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError

from storefront.api.schemas import failure, field_errors
from storefront.order.exceptions import (
    DuplicateOrderError,
    InvalidStatusError,
    OrderNotFoundError,
)

logger = structlog.get_logger(__name__)


def _error_path(loc) -> str:
    """``("body", "items", 0, "price")`` -> ``items[0].price``."""
    path = ""
    for part in loc[1:] if loc and loc[0] == "body" else loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or "body"


def _error_message(error: dict) -> str:
    # Messages raised by our own field validators carry a "Value error, " prefix
    if error.get("type") == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])
    return error.get("msg", "Invalid value")


async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        logger.warning("Malformed request body", path=request.url.path)
        return JSONResponse(status_code=400, content=failure("Malformed JSON body"))

    messages: dict[str, list[str]] = {}
    for error in errors:
        messages.setdefault(_error_path(error.get("loc", ())), []).append(_error_message(error))
    logger.warning("Request validation failed", path=request.url.path, errors=messages)
    return JSONResponse(status_code=400, content=field_errors(messages))


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    messages = exc.messages if isinstance(exc.messages, dict) else {"non_field_errors": [str(exc.messages)]}
    logger.warning("Validation failed", path=request.url.path, errors=messages)
    return JSONResponse(status_code=400, content=field_errors(messages))


async def _order_not_found(request: Request, exc: OrderNotFoundError) -> JSONResponse:
    logger.info("Order not found", path=request.url.path, order_id=str(exc.order_id))
    return JSONResponse(status_code=404, content=failure("Order not found"))


async def _invalid_status(request: Request, exc: InvalidStatusError) -> JSONResponse:
    logger.warning("Invalid status value", path=request.url.path, status=repr(exc.status))
    return JSONResponse(status_code=400, content=failure("Invalid status value"))


async def _duplicate_order(request: Request, exc: DuplicateOrderError) -> JSONResponse:
    logger.error("Duplicate order id", path=request.url.path, order_id=str(exc.order_id))
    return JSONResponse(status_code=409, content=failure(str(exc)))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(OrderNotFoundError, _order_not_found)
    app.add_exception_handler(InvalidStatusError, _invalid_status)
    app.add_exception_handler(DuplicateOrderError, _duplicate_order)
