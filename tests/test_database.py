from sqlalchemy import inspect

from sporting.db.base import engine, init_db
from sporting.db.init_db import main, reset_db
from sporting.models.team import Team


def test_init_db_creates_teams_table():
    init_db()

    columns = {column["name"] for column in inspect(engine).get_columns("teams")}
    assert columns == {"id", "name", "address", "size"}


def test_reset_db_empties_tables(team_repository):
    team_repository.save(Team(name="Celtics", address="Boston", size=10))
    team_repository.db.close()

    reset_db()

    assert team_repository.count() == 0


def test_init_db_main_resets_when_asked(team_repository):
    team_repository.save(Team(name="Celtics", address="Boston", size=10))
    team_repository.db.close()

    main(["--reset"])

    assert team_repository.count() == 0


def test_init_db_main_keeps_rows_by_default(team_repository):
    team_repository.save(Team(name="Celtics", address="Boston", size=10))
    team_repository.db.close()

    main([])

    assert team_repository.count() == 1
