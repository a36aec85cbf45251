from typing import Any, Dict, List, Optional

from sporting.core.exceptions import ErrorCode, FieldError


def error_response(
    error_code: ErrorCode,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the standard error body

    Args:
        error_code: catalogue entry supplying code and status
        message: overrides the catalogue message when given

    Returns:
        Dict[str, Any]: {"code", "status", "message"}
    """
    return {
        "code": error_code.code,
        "status": error_code.http_status,
        "message": message or error_code.message,
    }


def validation_error_response(
    errors: List[FieldError],
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the 400 body listing every rejected field

    Returns:
        Dict[str, Any]: the standard error body plus "errors"
    """
    body = error_response(ErrorCode.INVALID_INPUT, message)
    body["errors"] = [error.to_dict() for error in errors]
    return body


def internal_error_response() -> Dict[str, Any]:
    return error_response(ErrorCode.INTERNAL_SERVER_ERROR)
