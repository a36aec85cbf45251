"""
Table maintenance for the configured database.

    python -m sporting.db.init_db          create missing tables
    python -m sporting.db.init_db --reset  drop and recreate every table
"""
import argparse
import logging

from sporting.db.base import Base, engine
from sporting.models import team  # noqa: F401

logger = logging.getLogger(__name__)


def create_tables() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info(f"Tables ready: {', '.join(sorted(Base.metadata.tables))}")


def reset_db() -> None:
    """Drop every table, data included, and create them again"""
    Base.metadata.drop_all(bind=engine)
    logger.warning(f"Dropped all tables on {engine.url.render_as_string(hide_password=True)}")
    create_tables()


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Create or reset the team tables")
    parser.add_argument("--reset", action="store_true", help="drop existing tables first")
    args = parser.parse_args(argv)

    if args.reset:
        reset_db()
    else:
        create_tables()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
