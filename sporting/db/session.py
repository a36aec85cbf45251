from typing import Generator

from sqlalchemy.orm import Session

from sporting.db.base import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency

    Used by FastAPI's dependency injection; one session per request.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
