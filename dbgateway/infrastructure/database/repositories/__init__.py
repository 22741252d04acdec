"""Repository implementations for the table gateway.

Implements Repository pattern with Dependency Inversion principle.
"""

from dbgateway.infrastructure.database.repositories.base import BaseRepository
from dbgateway.infrastructure.database.repositories.table import TableRepository

__all__ = [
    "BaseRepository",
    "TableRepository",
]
