"""
RecordBook Backend — Record Repository
========================================

What:  Data access for one record model, bound to one AsyncSession.
Why:   The service talks to a small store contract (create, find_by_id,
       find_all, find_where, save) instead of raw SQL, so it is the same for
       all three tables and easy to fake in tests.

Convention:
    - Repositories flush; the get_db_session dependency commits or rolls back.
    - SQLAlchemyError is wrapped in DatabaseError. The driver message rides in
      its context and is logged once by the app's error handler, never sent
      to the client.
    - Lookups by id raise NotFoundError instead of returning None.
"""

from typing import Any, Dict, Generic, List, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from recordbook.exceptions import DatabaseError, NotFoundError
from recordbook.models.records import RecordMixin

ModelT = TypeVar("ModelT", bound=RecordMixin)


class RecordRepository(Generic[ModelT]):
    """
    Store operations for a single record model.

    Example:
        repo = RecordRepository(db, FinancialHistory)
        row = await repo.create({"financial_id": 7, "document": "abc"})
    """

    def __init__(self, db: AsyncSession, model: Type[ModelT]):
        self.db = db
        self.model = model

    async def create(self, fields: Dict[str, Any]) -> ModelT:
        """Insert a new row; the id is assigned by the database on flush."""
        record = self.model(**fields)
        try:
            self.db.add(record)
            await self.db.flush()
            await self.db.refresh(record)
        except SQLAlchemyError as e:
            raise self._wrap(e, "create") from e
        return record

    async def find_by_id(self, record_id: int) -> ModelT:
        try:
            record = await self.db.get(self.model, record_id)
        except SQLAlchemyError as e:
            raise self._wrap(e, "find_by_id", record_id=record_id) from e
        if record is None:
            raise NotFoundError(resource=self.model.__tablename__, resource_id=record_id)
        return record

    async def find_all(self) -> List[ModelT]:
        return await self._select({})

    async def find_where(self, **criteria: Any) -> List[ModelT]:
        """Rows whose columns equal every given value, ordered by id."""
        return await self._select(criteria)

    async def save(self, record: ModelT) -> ModelT:
        """Persist pending changes on an already-loaded row."""
        try:
            await self.db.flush()
            await self.db.refresh(record)
        except SQLAlchemyError as e:
            raise self._wrap(e, "save", record_id=record.id) from e
        return record

    async def _select(self, criteria: Dict[str, Any]) -> List[ModelT]:
        query = select(self.model).filter_by(**criteria).order_by(self.model.id)
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            raise self._wrap(e, "select", criteria=criteria) from e
        return list(result.scalars().all())

    def _wrap(self, exc: SQLAlchemyError, operation: str, **context: Any) -> DatabaseError:
        table = self.model.__tablename__
        return DatabaseError(
            context={
                "table": table,
                "operation": operation,
                "error_type": type(exc).__name__,
                "detail": str(exc),
                **context,
            },
        )
