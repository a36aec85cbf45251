import pytest
from sqlalchemy.pool import StaticPool

from sporting.core.config import Settings
from sporting.db.base import create_db_engine


def test_database_uri_defaults_to_mysql():
    settings = Settings(DATABASE_URI=None, DB_USER="coach", DB_PASSWORD="secret", DB_HOST="db", DB_PORT="3307", DB_NAME="league")

    assert settings.SQLALCHEMY_DATABASE_URI == "mysql+pymysql://coach:secret@db:3307/league"


def test_database_uri_override_wins():
    settings = Settings(DATABASE_URI="sqlite:///./teams.db")

    assert settings.SQLALCHEMY_DATABASE_URI == "sqlite:///./teams.db"


def test_cors_origins_from_comma_separated_string():
    settings = Settings(CORS_ORIGINS="http://a.example, http://b.example")

    assert settings.CORS_ORIGINS == ["http://a.example", "http://b.example"]


def test_cors_origins_from_json_array():
    settings = Settings(CORS_ORIGINS='["http://a.example"]')

    assert settings.CORS_ORIGINS == ["http://a.example"]


def test_in_memory_sqlite_shares_one_connection():
    engine = create_db_engine("sqlite://")

    assert isinstance(engine.pool, StaticPool)


def test_file_sqlite_uses_regular_pool(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'teams.db'}")

    assert not isinstance(engine.pool, StaticPool)


def test_cors_origins_list_is_kept():
    settings = Settings(CORS_ORIGINS=["http://a.example"])

    assert settings.CORS_ORIGINS == ["http://a.example"]


def test_malformed_cors_json_array_is_rejected():
    with pytest.raises(ValueError):
        Settings(CORS_ORIGINS='["http://a.example"')
