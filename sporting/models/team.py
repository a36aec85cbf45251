from typing import Dict, Any

from sqlalchemy import Column, Integer, VARCHAR

from sporting.db.base import Base


class Team(Base):
    """
    Team database model

    A team with its home address and maximum capacity.
    """
    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(VARCHAR(255), nullable=False)
    address = Column(VARCHAR(255), nullable=False)
    size = Column(Integer, nullable=False)  # maximum number of members, at least 2

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "size": self.size,
        }

    def __repr__(self) -> str:
        return f"Team(id={self.id!r}, name={self.name!r}, address={self.address!r}, size={self.size!r})"
