"""Error response formatting helpers"""

from .response_formatter import (
    error_response,
    validation_error_response,
    internal_error_response,
)

__all__ = [
    "error_response",
    "validation_error_response",
    "internal_error_response",
]
