"""Queries - Read operations that fetch data.

Queries NEVER change state.
"""

from src.application.queries.user_queries import GetCurrentUser

__all__ = ["GetCurrentUser"]
