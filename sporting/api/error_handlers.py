"""
Exception handlers turning service and infrastructure errors into the
standard error body.
"""
import logging
import traceback
from typing import List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sporting.core.exceptions import ErrorCode, FieldError, ServiceError, ValidationError
from sporting.infrastructure.exceptions import InfrastructureError
from sporting.infrastructure.response import (
    error_response,
    internal_error_response,
    validation_error_response,
)

logger = logging.getLogger(__name__)

# localized messages for pydantic error types
PARSE_ERROR_MESSAGES = {
    "int_type": "정수 값을 입력해야 합니다.",
    "int_parsing": "정수 값을 입력해야 합니다.",
    "string_type": "문자열 값을 입력해야 합니다.",
    "json_invalid": "요청 본문이 올바른 JSON 형식이 아닙니다.",
    "missing": "필수 입력값입니다.",
}


def _field_errors_from_request(exc: RequestValidationError) -> List[FieldError]:
    """Flatten FastAPI's parsing errors into FieldError entries"""
    errors = []
    for error in exc.errors():
        error_type = error.get("type")
        # loc looks like ("body", "size") or ("path", "team_id"); json_invalid carries a byte offset
        loc = [str(part) for part in error.get("loc", ())]
        if error_type == "json_invalid" or len(loc) < 2:
            field = "body"
        else:
            field = ".".join(loc[1:])
        message = PARSE_ERROR_MESSAGES.get(error_type, ErrorCode.INVALID_INPUT.message)
        errors.append(FieldError(field, message))
    return errors


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if isinstance(exc, ValidationError):
        logger.info(f"Rejected {request.method} {request.url.path}: {[e.field for e in exc.errors]}")
        return JSONResponse(
            status_code=exc.status_code,
            content=validation_error_response(exc.errors, exc.message),
        )

    logger.info(f"{request.method} {request.url.path} -> {exc.error_code.code} {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.error_code, exc.message),
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _field_errors_from_request(exc)
    logger.info(f"Malformed {request.method} {request.url.path}: {[e.field for e in errors]}")
    return JSONResponse(
        status_code=400,
        content=validation_error_response(errors),
    )


async def infrastructure_error_handler(request: Request, exc: InfrastructureError) -> JSONResponse:
    logger.error(f"Infrastructure failure on {request.method} {request.url.path}: {str(exc)}")
    logger.error(traceback.format_exc())
    return JSONResponse(status_code=500, content=internal_error_response())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}")
    logger.error(traceback.format_exc())
    return JSONResponse(status_code=500, content=internal_error_response())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(InfrastructureError, infrastructure_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
