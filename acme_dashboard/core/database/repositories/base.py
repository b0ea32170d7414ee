"""
Base repository interfaces and utilities.

This module provides the repository pattern shared by every table repository:
a session-bound, model-bound object exposing async lookups and inserts.
"""

from __future__ import annotations

from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncBaseRepository(Generic[EntityType]):
    """Base async repository with common operations using SQLModel."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async SQLAlchemy session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    async def create(self, entity: EntityType) -> EntityType:
        """Add a new entity and flush it so generated fields are populated.

        Args:
            entity: SQLModel instance to persist

        Returns:
            The flushed entity
        """
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def create_if_absent(self, entity: EntityType, key: Any) -> EntityType:
        """Insert ``entity`` unless a row with primary key ``key`` exists.

        Existing rows are returned untouched, never updated.

        Args:
            entity: SQLModel instance to persist
            key: Primary key value to look up

        Returns:
            The existing row, or the newly flushed entity
        """
        existing = await self.session.get(self.model, key)
        if existing is not None:
            return existing
        return await self.create(entity)

    async def get_by_id(self, entity_id: Any) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """
        return await self.session.get(self.model, entity_id)

    async def list(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[EntityType]:
        """List entities with optional pagination.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            List of entity instances
        """
        stmt = select(self.model)
        stmt = AsyncQueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self) -> int:
        """Count every row of the table."""
        result = await self.session.execute(select(func.count()).select_from(self.model))
        return result.scalar_one()


class AsyncQueryBuilder:
    """Utility class for building async SQLModel-based database queries."""

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a SQLModel select statement.

        Args:
            stmt: SQLModel select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt

    @staticmethod
    def contains_pattern(query: str) -> str:
        """Build the LIKE pattern for a substring search."""
        return f"%{query}%"
