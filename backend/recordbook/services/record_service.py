"""
RecordBook Backend — Record Service (CRUD Orchestrator)
========================================================

What:  The create / update / toggle / list / get logic shared by every record
       collection.
Why:   The three collections follow one contract, so the logic is written once
       and parameterized by an EntityDescriptor.
How:   validate → store operation → RecordResult(message, data). The route
       layer wraps the result in the envelope; failures propagate as
       RecordBookError subclasses to the handler in main.py.

Orchestration Flow (update):
    ┌──────────────┐    ┌──────────┐    ┌──────────────┐    ┌──────────┐
    │  find_by_id  │───▶│ Validate │───▶│ Replace fk + │───▶│   save   │
    │ (NotFound?)  │    │  body    │    │ document     │    │ (flush)  │
    └──────────────┘    └──────────┘    └──────────────┘    └──────────┘

Design Decision:
    RecordService is stateless. It receives the db session and acting user on
    each call; nothing is kept between requests. Concurrent writes to the same
    record are last-writer-wins.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Union

from sqlalchemy.ext.asyncio import AsyncSession

from recordbook.auth import ActingUser
from recordbook.entities import EntityDescriptor
from recordbook.exceptions import EmptyResultError
from recordbook.models.records import RecordMixin
from recordbook.repositories.record_repository import RecordRepository
from recordbook.schemas.records import validate_payload

logger = logging.getLogger(__name__)

MSG_CREATED = "Registro cadastrado com sucesso!"
MSG_UPDATED = "Registro atualizado com sucesso"
MSG_ACTIVATED = "Registro ativado com sucesso"
MSG_DEACTIVATED = "Registro inativado com sucesso"
MSG_LISTED = "Registros retornados com sucesso"
MSG_RETRIEVED = "Registro retornado com sucesso"


@dataclass
class RecordResult:
    """Outcome of a successful operation, before it is enveloped."""

    message: str
    data: Union[RecordMixin, List[RecordMixin]]


class RecordService:
    """
    CRUD operations for one entity.

    Responsibilities:
        - create():        validated insert, created_by stamped
        - update():        wholesale replacement of fk + document
        - toggle_active(): flip active
        - list_all() / list_active(): EmptyResultError on no rows
        - get():           NotFoundError from the store on unknown id

    `active` and `created_by` are never written by update().
    """

    def __init__(self, entity: EntityDescriptor):
        self.entity = entity

    def _repository(self, db: AsyncSession) -> RecordRepository:
        return RecordRepository(db, self.entity.model)

    async def create(self, db: AsyncSession, body: Any, actor: ActingUser) -> RecordResult:
        payload = validate_payload(self.entity.schema_in, body)
        fields = payload.model_dump(include=set(self.entity.writable_fields))
        fields["created_by"] = actor.display_name

        record = await self._repository(db).create(fields)
        logger.info(
            "Created %s %s (created_by=%s)", self.entity.name, record.id, actor.display_name
        )
        return RecordResult(message=MSG_CREATED, data=record)

    async def update(
        self, db: AsyncSession, record_id: int, body: Any, actor: ActingUser
    ) -> RecordResult:
        repo = self._repository(db)
        # Lookup first: an unknown id is reported even when the body is invalid
        record = await repo.find_by_id(record_id)
        payload = validate_payload(self.entity.schema_in, body)

        for field in self.entity.writable_fields:
            setattr(record, field, getattr(payload, field))
        record.updated_by = actor.display_name

        record = await repo.save(record)
        logger.info(
            "Updated %s %s (updated_by=%s)", self.entity.name, record.id, actor.display_name
        )
        return RecordResult(message=MSG_UPDATED, data=record)

    async def toggle_active(
        self, db: AsyncSession, record_id: int, actor: ActingUser
    ) -> RecordResult:
        repo = self._repository(db)
        record = await repo.find_by_id(record_id)

        record.active = not record.active
        record.updated_by = actor.display_name

        record = await repo.save(record)
        logger.info(
            "Toggled %s %s to active=%s (updated_by=%s)",
            self.entity.name, record.id, record.active, actor.display_name,
        )
        message = MSG_ACTIVATED if record.active else MSG_DEACTIVATED
        return RecordResult(message=message, data=record)

    async def list_all(self, db: AsyncSession) -> RecordResult:
        records = await self._repository(db).find_all()
        return self._listing(records)

    async def list_active(self, db: AsyncSession) -> RecordResult:
        records = await self._repository(db).find_where(active=True)
        return self._listing(records)

    async def get(self, db: AsyncSession, record_id: int) -> RecordResult:
        record = await self._repository(db).find_by_id(record_id)
        return RecordResult(message=MSG_RETRIEVED, data=record)

    def _listing(self, records: List[RecordMixin]) -> RecordResult:
        if not records:
            raise EmptyResultError(context={"entity": self.entity.name})
        return RecordResult(message=MSG_LISTED, data=records)
