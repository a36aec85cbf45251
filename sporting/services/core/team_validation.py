"""
Field validation for team create and update payloads.

The rules are plain functions over the payload attributes so that the service
can validate before touching the store, and report every violated field in a
single response.
"""
from typing import Any, List, Union

from sporting.core.exceptions import FieldError, ValidationError
from sporting.schemas.team import TeamCreate, TeamUpdate

MIN_TEAM_SIZE = 2
# the size column is a signed 32-bit INTEGER
MAX_TEAM_SIZE = 2 ** 31 - 1

NAME_REQUIRED = "이름은 필수 입력값입니다."
ADDRESS_REQUIRED = "주소는 필수 입력값입니다."
SIZE_REQUIRED = "최대 인원 수는 필수 입력값입니다."
SIZE_TOO_SMALL = "최대 인원 수는 1보다 커야합니다."
SIZE_TOO_LARGE = f"최대 인원 수는 {MAX_TEAM_SIZE} 이하여야 합니다."

TeamPayload = Union[TeamCreate, TeamUpdate]


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_team_payload(payload: TeamPayload) -> List[FieldError]:
    """
    Check a create or update payload

    Args:
        payload: request carrying name, address and size

    Returns:
        List[FieldError]: one entry per violated rule, empty when valid
    """
    errors: List[FieldError] = []

    if _is_blank(payload.name):
        errors.append(FieldError("name", NAME_REQUIRED))

    if _is_blank(payload.address):
        errors.append(FieldError("address", ADDRESS_REQUIRED))

    size = payload.size
    if size is None or isinstance(size, bool) or not isinstance(size, int):
        errors.append(FieldError("size", SIZE_REQUIRED))
    elif size < MIN_TEAM_SIZE:
        errors.append(FieldError("size", SIZE_TOO_SMALL))
    elif size > MAX_TEAM_SIZE:
        errors.append(FieldError("size", SIZE_TOO_LARGE))

    return errors


def ensure_valid_team_payload(payload: TeamPayload) -> None:
    """Raise ValidationError when the payload violates any field rule"""
    errors = validate_team_payload(payload)
    if errors:
        raise ValidationError(errors)
