from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from sporting.infrastructure.exceptions import InfrastructureError, PersistenceError
from sporting.infrastructure.persistence import TeamRepository
from sporting.models.team import Team


def test_save_assigns_id(team_repository):
    team = team_repository.save(Team(name="Celtics", address="Boston", size=10))

    assert team.id == 1
    assert team_repository.count() == 1


def test_find_by_id_returns_none_when_missing(team_repository):
    assert team_repository.find_by_id(99) is None


def test_find_all_keeps_insertion_order(team_repository):
    for name in ["Lakers", "Warriors", "Bulls"]:
        team_repository.save(Team(name=name, address="USA", size=5))

    assert [team.name for team in team_repository.find_all()] == ["Lakers", "Warriors", "Bulls"]


def test_delete_by_id_removes_only_that_team(team_repository):
    first = team_repository.save(Team(name="Lakers", address="Los Angeles", size=15))
    second = team_repository.save(Team(name="Warriors", address="San Francisco", size=12))

    team_repository.delete_by_id(first.id)

    assert team_repository.find_by_id(first.id) is None
    assert [team.id for team in team_repository.find_all()] == [second.id]


def test_delete_by_id_is_idempotent(team_repository):
    team_repository.delete_by_id(1)
    team_repository.delete_by_id(1)

    assert team_repository.count() == 0


def test_delete_all(team_repository):
    team_repository.save(Team(name="Lakers", address="Los Angeles", size=15))
    team_repository.save(Team(name="Warriors", address="San Francisco", size=12))

    team_repository.delete_all()

    assert team_repository.find_all() == []


def test_database_errors_are_rolled_back_and_wrapped():
    db = MagicMock()
    db.commit.side_effect = OperationalError("INSERT", {}, Exception("connection lost"))
    repository = TeamRepository(db)

    with pytest.raises(PersistenceError) as exc_info:
        repository.save(Team(name="Celtics", address="Boston", size=10))

    db.rollback.assert_called_once()
    assert isinstance(exc_info.value, InfrastructureError)
    assert exc_info.value.operation == "save team"
