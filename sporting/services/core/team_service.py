import logging
from typing import List

from sporting.core.exceptions import ErrorCode, NotFoundError
from sporting.infrastructure.persistence import TeamRepository
from sporting.models.team import Team
from sporting.schemas.team import TeamCreate, TeamUpdate, apply_update, to_entity
from sporting.services.core.team_validation import ensure_valid_team_payload

logger = logging.getLogger(__name__)


class TeamService:
    """
    Team management service

    Validates inbound payloads, maps them onto Team records and delegates
    storage to the repository.
    """

    def __init__(self, repository: TeamRepository):
        self.repository = repository

    def create_team(self, candidate: TeamCreate) -> Team:
        """
        Create a team

        Args:
            candidate: creation request

        Returns:
            Team: the stored team with its assigned id

        Raises:
            ValidationError: when a field rule is violated
        """
        ensure_valid_team_payload(candidate)
        team = self.repository.save(to_entity(candidate))
        logger.info(f"Created team {team.id}")
        return team

    def get_team_by_id(self, team_id: int) -> Team:
        team = self.repository.find_by_id(team_id)
        if team is None:
            raise NotFoundError(ErrorCode.USER_NOT_FOUND)
        return team

    def get_teams(self) -> List[Team]:
        return self.repository.find_all()

    def update_team(self, team_id: int, request: TeamUpdate) -> Team:
        """
        Replace name, address and size of an existing team

        Raises:
            ValidationError: when a field rule is violated
            NotFoundError: when no team has the given id
        """
        ensure_valid_team_payload(request)
        team = self.get_team_by_id(team_id)
        team = self.repository.save(apply_update(team, request))
        logger.info(f"Updated team {team.id}")
        return team

    def delete_team(self, team_id: int) -> None:
        """Delete a team; a missing id is not an error"""
        self.repository.delete_by_id(team_id)
        logger.info(f"Deleted team {team_id}")
