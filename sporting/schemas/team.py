from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from sporting.models.team import Team


class TeamCreate(BaseModel):
    """
    Team creation request

    Fields are optional at the wire level; presence and range are checked by
    the validation layer so every violation can be reported at once.
    """
    model_config = ConfigDict(json_schema_extra={"description": "팀 생성"})

    name: Optional[str] = Field(default=None, description="이름")
    address: Optional[str] = Field(default=None, description="지역")
    size: Optional[StrictInt] = Field(default=None, description="최대 인원")


class TeamUpdate(BaseModel):
    """
    Team update request, replaces name, address and size
    """
    model_config = ConfigDict(json_schema_extra={"description": "팀 수정"})

    name: Optional[str] = Field(default=None, description="이름")
    address: Optional[str] = Field(default=None, description="주소")
    size: Optional[StrictInt] = Field(default=None, description="최대 인원")


class TeamResponse(BaseModel):
    """Stored team as returned by the API"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: str
    size: int


class FieldErrorSchema(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error body shared by every failing endpoint"""
    code: str
    status: int
    message: str
    errors: Optional[List[FieldErrorSchema]] = None


def to_entity(payload: TeamCreate) -> Team:
    """Map a creation request onto a new, not yet persisted Team"""
    return Team(
        name=payload.name,
        address=payload.address,
        size=payload.size,
    )


def apply_update(team: Team, payload: TeamUpdate) -> Team:
    """Replace the mutable fields of team with the request values; id is untouched"""
    team.name = payload.name
    team.address = payload.address
    team.size = payload.size
    return team


def to_response(team: Team) -> TeamResponse:
    return TeamResponse.model_validate(team)
