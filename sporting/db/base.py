import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from sporting.core.config import settings

logger = logging.getLogger(__name__)


def create_db_engine(database_uri: str, echo: bool = False) -> Engine:
    """
    Build the SQLAlchemy engine for the given URI

    SQLite gets a thread-agnostic connection (and a single shared one when
    in-memory); server databases get a recycled connection pool.
    """
    url = make_url(database_uri)
    if url.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if not url.database or url.database == ":memory:":
            kwargs["poolclass"] = StaticPool
        return create_engine(database_uri, echo=echo, **kwargs)

    return create_engine(
        database_uri,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
        pool_recycle=3600,
        echo=echo
    )


engine = create_db_engine(settings.SQLALCHEMY_DATABASE_URI, echo=settings.SQL_ECHO)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def _ensure_mysql_database() -> None:
    """Create the configured MySQL database when it does not exist yet"""
    url = make_url(settings.SQLALCHEMY_DATABASE_URI)
    db_name = url.database
    server_engine = create_engine(url.set(database=None))
    try:
        with server_engine.connect() as connection:
            result = connection.execute(text("SHOW DATABASES LIKE :name"), {"name": db_name})
            if not result.fetchone():
                connection.execute(text(f"CREATE DATABASE `{db_name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"))
                logger.info(f"Database {db_name} created")
            else:
                logger.info(f"Database {db_name} already exists")
    finally:
        server_engine.dispose()


def init_db() -> None:
    """
    Initialise the database, creating missing tables
    """
    if not settings.CREATE_TABLES:
        logger.info("Automatic table creation is disabled")
        return

    # register the models on Base.metadata
    from sporting.models import team  # noqa: F401

    if engine.dialect.name == "mysql":
        _ensure_mysql_database()

    Base.metadata.create_all(bind=engine)
    logger.info("All tables created or already present")
