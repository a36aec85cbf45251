"""
API Dependencies

Provides dependency injection for services and database sessions.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from sporting.db.session import get_db
from sporting.infrastructure.persistence import TeamRepository
from sporting.services import TeamService


def get_team_repository(db: Session = Depends(get_db)) -> TeamRepository:
    return TeamRepository(db=db)


def get_team_service(repository: TeamRepository = Depends(get_team_repository)) -> TeamService:
    """
    Get Team Service instance bound to the request's session

    Returns:
        TeamService: Configured team service
    """
    return TeamService(repository=repository)
