"""
Base repository class with common CRUD operations using async SQLAlchemy.
Provides generic database operations that can be extended by specific repositories.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func
from carmarket.database import Base
from typing import TypeVar, Generic, Optional, List, Dict, Any, Type
import uuid
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository class providing common CRUD operations.
    Uses async SQLAlchemy for all database operations with proper error handling.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize repository with model class and database session.

        Args:
            model: SQLAlchemy model class
            db: Async database session
        """
        self.model = model
        self.db = db

    def _apply_filters(self, query, filters: Optional[Dict[str, Any]]):
        if filters:
            for field, value in filters.items():
                if not hasattr(self.model, field):
                    raise ValueError(f"Field '{field}' does not exist on {self.model.__name__}")
                column = getattr(self.model, field)
                if isinstance(value, list):
                    query = query.where(column.in_(value))
                elif value is None:
                    query = query.where(column.is_(None))
                else:
                    query = query.where(column == value)
        return query

    async def create(self, obj_in: Dict[str, Any]) -> ModelType:
        """
        Create a new record in the database.

        Args:
            obj_in: Dictionary of field values for the new record

        Returns:
            Created model instance with server-assigned id and defaults

        Raises:
            Exception: If database operation fails
        """
        try:
            db_obj = self.model(**obj_in)
            self.db.add(db_obj)
            await self.db.commit()
            await self.db.refresh(db_obj)
            logger.debug(f"Created {self.model.__name__} with id: {db_obj.id}")
            return db_obj
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to create {self.model.__name__}: {e}")
            raise

    async def get_by_id(self, id: uuid.UUID) -> Optional[ModelType]:
        """
        Get a record by its ID.

        Args:
            id: UUID of the record to retrieve

        Returns:
            Model instance if found, None otherwise
        """
        try:
            query = select(self.model).where(self.model.id == id)
            result = await self.db.execute(query)
            obj = result.scalar_one_or_none()

            if obj:
                logger.debug(f"Retrieved {self.model.__name__} with id: {id}")
            else:
                logger.debug(f"{self.model.__name__} with id {id} not found")

            return obj
        except Exception as e:
            logger.error(f"Failed to get {self.model.__name__} by id {id}: {e}")
            raise

    async def get_multi(
        self,
        limit: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None
    ) -> List[ModelType]:
        """
        Get records in insertion order with optional filtering.

        Args:
            limit: Maximum number of records to return, None for no limit
            filters: Dictionary of field filters (exact match, list means IN)

        Returns:
            List of model instances, oldest first
        """
        try:
            query = self._apply_filters(select(self.model), filters)
            query = query.order_by(self.model.created_at, self.model.id)

            if limit is not None:
                query = query.limit(limit)

            result = await self.db.execute(query)
            objects = result.scalars().all()

            logger.debug(f"Retrieved {len(objects)} {self.model.__name__} records")
            return list(objects)
        except Exception as e:
            logger.error(f"Failed to get multiple {self.model.__name__} records: {e}")
            raise

    async def update(self, id: uuid.UUID, obj_in: Dict[str, Any]) -> Optional[ModelType]:
        """
        Update a record by its ID.

        Only keys present in obj_in are written; an explicit None clears a nullable field.

        Args:
            id: UUID of the record to update
            obj_in: Dictionary of field values to update

        Returns:
            Updated model instance if found, None otherwise
        """
        try:
            db_obj = await self.get_by_id(id)
            if db_obj is None:
                logger.debug(f"{self.model.__name__} with id {id} not found for update")
                return None

            if not obj_in:
                logger.warning(f"No data provided for updating {self.model.__name__} {id}")
                return db_obj

            for field, value in obj_in.items():
                if not hasattr(self.model, field):
                    raise ValueError(f"Field '{field}' does not exist on {self.model.__name__}")
                setattr(db_obj, field, value)

            await self.db.commit()
            await self.db.refresh(db_obj)
            logger.debug(f"Updated {self.model.__name__} with id: {id}")
            return db_obj
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to update {self.model.__name__} {id}: {e}")
            raise

    async def delete(self, id: uuid.UUID) -> bool:
        """
        Delete a record by its ID.

        Args:
            id: UUID of the record to delete

        Returns:
            True if record was deleted, False if not found
        """
        try:
            stmt = delete(self.model).where(self.model.id == id)
            result = await self.db.execute(stmt)
            await self.db.commit()

            deleted = result.rowcount > 0
            if deleted:
                logger.debug(f"Deleted {self.model.__name__} with id: {id}")
            else:
                logger.debug(f"{self.model.__name__} with id {id} not found for deletion")

            return deleted
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to delete {self.model.__name__} {id}: {e}")
            raise

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """
        Count records with optional filtering.

        Args:
            filters: Dictionary of field filters

        Returns:
            Number of matching records
        """
        try:
            query = self._apply_filters(select(func.count(self.model.id)), filters)
            result = await self.db.execute(query)
            count = result.scalar()

            logger.debug(f"Counted {count} {self.model.__name__} records")
            return count
        except Exception as e:
            logger.error(f"Failed to count {self.model.__name__} records: {e}")
            raise

    async def exists(self, id: uuid.UUID) -> bool:
        """
        Check if a record exists by its ID.

        Args:
            id: UUID of the record to check

        Returns:
            True if record exists, False otherwise
        """
        try:
            query = select(func.count(self.model.id)).where(self.model.id == id)
            result = await self.db.execute(query)
            exists = result.scalar() > 0
            logger.debug(f"{self.model.__name__} with id {id} exists: {exists}")
            return exists
        except Exception as e:
            logger.error(f"Failed to check existence of {self.model.__name__} {id}: {e}")
            raise
