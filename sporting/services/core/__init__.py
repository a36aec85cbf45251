"""
Core Services Module

Provides the CRUD services backing the HTTP endpoints.
"""

from .team_service import TeamService
from .team_validation import validate_team_payload, ensure_valid_team_payload

__all__ = [
    "TeamService",
    "validate_team_payload",
    "ensure_valid_team_payload",
]
