"""
Service level errors and the error code catalogue.

Every error the API reports maps to one ErrorCode member, which carries the
wire code, the HTTP status and the default message.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class ErrorCode(Enum):
    USER_NOT_FOUND = ("U0001", 404, "유저를 찾을 수 없습니다.")
    INVALID_INPUT = ("C0001", 400, "입력값이 올바르지 않습니다.")
    INTERNAL_SERVER_ERROR = ("C0002", 500, "서버 내부 오류가 발생했습니다.")

    def __init__(self, code: str, http_status: int, message: str):
        self.code = code
        self.http_status = http_status
        self.message = message


@dataclass(frozen=True)
class FieldError:
    """A single rejected field of an inbound payload"""
    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    def __init__(self, error_code: ErrorCode, message: Optional[str] = None):
        self.error_code = error_code
        self.message = message or error_code.message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return self.error_code.http_status


class NotFoundError(ServiceError):
    """The referenced entity has no live record."""

    def __init__(self, error_code: ErrorCode = ErrorCode.USER_NOT_FOUND, message: Optional[str] = None):
        super().__init__(error_code, message)


class ValidationError(ServiceError):
    """An inbound payload failed field constraints."""

    def __init__(self, errors: List[FieldError], message: Optional[str] = None):
        super().__init__(ErrorCode.INVALID_INPUT, message)
        self.errors = list(errors)
