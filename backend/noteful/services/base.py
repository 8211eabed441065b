"""
Noteful API - Table Storage Accessor
======================================

What:  Generic read/insert/update/delete operations against one table.
How:   Builds parameterized SQLAlchemy statements and runs them on the
       AsyncSession passed in by the caller. The session (and its
       transaction) is owned by the request; this class holds no state.
Who:   Subclassed once per resource (FolderService, NoteService).

Error Handling Strategy:
    - Missing rows: get() raises NotFoundError with the resource's own wording
    - Store failures: every SQLAlchemyError is logged and re-raised as
      DatabaseError (generic message, original type in context)
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import Base
from noteful.exceptions import DatabaseError, NotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class TableService(Generic[ModelT]):
    """
    Storage accessor bound to a single ORM model.

    Subclasses set:
        model:             the mapped class
        resource:          short name used in logs and error context
        not_found_message: body of the 404 error for this resource
    """

    model: Type[ModelT]
    resource: str
    not_found_message: str

    async def list_all(self, db: AsyncSession) -> List[ModelT]:
        """All rows in id (insertion) order."""
        try:
            result = await db.execute(select(self.model).order_by(self.model.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise self._database_error("list", e)

    async def find(self, db: AsyncSession, record_id: int) -> Optional[ModelT]:
        """The row with `record_id`, or None."""
        try:
            result = await db.execute(
                select(self.model).where(self.model.id == record_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._database_error("get", e, record_id)

    async def get(self, db: AsyncSession, record_id: int) -> ModelT:
        """
        The row with `record_id`.

        Raises:
            NotFoundError: no such row (→ 404)
        """
        record = await self.find(db, record_id)
        if record is None:
            raise NotFoundError(
                message=self.not_found_message,
                resource=self.resource,
                resource_id=record_id,
            )
        return record

    async def insert(self, db: AsyncSession, values: Dict[str, Any]) -> ModelT:
        """
        Insert a row and return it with store-assigned columns loaded.

        flush() sends the INSERT inside the request transaction (commit happens
        in get_db_session); refresh() reads back id and server defaults.
        """
        record = self.model(**values)
        try:
            db.add(record)
            await db.flush()
            await db.refresh(record)
        except SQLAlchemyError as e:
            raise self._database_error("insert", e)
        logger.info("%s %s created", self.resource.capitalize(), record.id)
        return record

    async def update(self, db: AsyncSession, record_id: int, values: Dict[str, Any]) -> int:
        """Overwrite only the given columns. Returns the affected row count."""
        try:
            result = await db.execute(
                update(self.model)
                .where(self.model.id == record_id)
                .values(**values)
            )
        except SQLAlchemyError as e:
            raise self._database_error("update", e, record_id)
        logger.info(
            "%s %s updated (%s)",
            self.resource.capitalize(), record_id, ", ".join(sorted(values)),
        )
        return result.rowcount

    async def delete(self, db: AsyncSession, record_id: int) -> int:
        """Delete one row. Dependent rows are left to the schema's cascade rules."""
        try:
            result = await db.execute(
                delete(self.model).where(self.model.id == record_id)
            )
        except SQLAlchemyError as e:
            raise self._database_error("delete", e, record_id)
        logger.info("%s %s deleted", self.resource.capitalize(), record_id)
        return result.rowcount

    def _database_error(
        self, operation: str, error: Exception, record_id: Optional[int] = None,
    ) -> DatabaseError:
        logger.error(
            "Database error during %s %s (id=%s): %s",
            operation, self.resource, record_id, error,
            exc_info=True,
        )
        context: Dict[str, Any] = {
            "resource": self.resource,
            "operation": operation,
            "error_type": type(error).__name__,
        }
        if record_id is not None:
            context["resource_id"] = record_id
        return DatabaseError(
            message=f"Could not {operation} {self.resource}. Please try again.",
            context=context,
        )
