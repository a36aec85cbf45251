"""
Team persistence gateway

Wraps the SQLAlchemy session behind the handful of operations the service
needs. Database failures are rolled back and re-raised as PersistenceError.
"""
import logging
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sporting.infrastructure.exceptions import PersistenceError
from sporting.models.team import Team

logger = logging.getLogger(__name__)


class TeamRepository:
    """Storage of Team records keyed by their auto-assigned id"""

    def __init__(self, db: Session):
        self.db = db

    def _fail(self, operation: str, error: SQLAlchemyError) -> PersistenceError:
        self.db.rollback()
        logger.error(f"{operation} failed: {error}")
        return PersistenceError(operation, error)

    def save(self, team: Team) -> Team:
        """
        Insert or update a team

        Args:
            team: new or already attached Team

        Returns:
            Team: the stored record, with its id assigned
        """
        try:
            self.db.add(team)
            self.db.commit()
            self.db.refresh(team)
            return team
        except SQLAlchemyError as e:
            raise self._fail("save team", e)

    def find_by_id(self, team_id: int) -> Optional[Team]:
        try:
            return self.db.get(Team, team_id)
        except SQLAlchemyError as e:
            raise self._fail("find team", e)

    def find_all(self) -> List[Team]:
        try:
            return list(self.db.scalars(select(Team).order_by(Team.id)))
        except SQLAlchemyError as e:
            raise self._fail("list teams", e)

    def delete_by_id(self, team_id: int) -> None:
        """
        Delete a team by id

        A missing id is not an error; nothing is deleted in that case.
        """
        try:
            result = self.db.execute(delete(Team).where(Team.id == team_id))
            self.db.commit()
            if result.rowcount == 0:
                logger.debug(f"Delete of team {team_id} matched no rows")
        except SQLAlchemyError as e:
            raise self._fail("delete team", e)

    def delete_all(self) -> None:
        try:
            self.db.execute(delete(Team))
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete all teams", e)

    def count(self) -> int:
        try:
            return self.db.scalar(select(func.count()).select_from(Team))
        except SQLAlchemyError as e:
            raise self._fail("count teams", e)
