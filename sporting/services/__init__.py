"""
Services Layer

Business logic sitting between the HTTP endpoints and the persistence gateways.
"""

from .core import TeamService

__all__ = ["TeamService"]
