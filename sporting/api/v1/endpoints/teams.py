"""
Team API endpoints

Create, read, update and delete teams. Validation failures answer 400 and
unknown ids answer 404, both with the standard error body.
"""
from typing import List

from fastapi import APIRouter, Depends, Response

from sporting.api.dependencies import get_team_service
from sporting.schemas.team import ErrorResponse, TeamCreate, TeamResponse, TeamUpdate, to_response
from sporting.services import TeamService

router = APIRouter()


@router.post(
    "",
    response_model=TeamResponse,
    responses={400: {"model": ErrorResponse}},
)
def create_team(
        request: TeamCreate,
        service: TeamService = Depends(get_team_service),
):
    """
    Create a new team

    Returns:
        TeamResponse: the stored team including its assigned id
    """
    return to_response(service.create_team(request))


@router.get(
    "/{team_id}",
    response_model=TeamResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_team(
        team_id: int,
        service: TeamService = Depends(get_team_service),
):
    return to_response(service.get_team_by_id(team_id))


@router.put(
    "/{team_id}",
    response_model=TeamResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_team(
        team_id: int,
        request: TeamUpdate,
        service: TeamService = Depends(get_team_service),
):
    """
    Replace name, address and size of a team; the id never changes
    """
    return to_response(service.update_team(team_id, request))


@router.delete("/{team_id}")
def delete_team(
        team_id: int,
        service: TeamService = Depends(get_team_service),
):
    """
    Delete a team

    Deleting an id that does not exist still answers 200.
    """
    service.delete_team(team_id)
    return Response(status_code=200)


@router.get("", response_model=List[TeamResponse])
def get_teams(
        service: TeamService = Depends(get_team_service),
):
    return [to_response(team) for team in service.get_teams()]
