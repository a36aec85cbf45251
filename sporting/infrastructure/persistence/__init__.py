"""
Persistence Infrastructure Module

Relational storage gateways for the service entities.
"""

from .team_repository import TeamRepository

__all__ = [
    'TeamRepository',
]
