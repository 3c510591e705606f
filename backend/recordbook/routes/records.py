"""
RecordBook Backend — Record Route Handlers
============================================

What:  HTTP endpoints for the three record collections.
Why:   Every collection exposes the same six operations; one router factory
       builds them from an EntityDescriptor.
How:   Handlers resolve the db session and acting user, delegate to
       RecordService, and wrap the RecordResult in the Envelope. Errors are
       not caught here; main.py maps them to status codes.

Route Inventory (per collection, below settings.api_prefix):
    POST   /{path}                   create        → 201
    PUT    /{path}/{record_id}       update        → 200
    PATCH  /{path}/{record_id}/ativar toggle active → 200
    GET    /{path}                   list all      → 200 | 404 when empty
    GET    /{path}/ativos            list active   → 200 | 404 when empty
    GET    /{path}/{record_id}       get by id     → 200 | 404
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from recordbook.auth import ActingUser, get_acting_user
from recordbook.config import settings
from recordbook.database import get_db_session
from recordbook.entities import ALL_ENTITIES, EntityDescriptor
from recordbook.schemas.records import Envelope
from recordbook.services.record_service import RecordResult, RecordService

logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    404: {"description": "Record not found / no records", "model": Envelope[None]},
    422: {"description": "Invalid payload", "model": Envelope[Any]},
    500: {"description": "Server error", "model": Envelope[None]},
}


def build_record_router(entity: EntityDescriptor) -> APIRouter:
    """
    Build the APIRouter for one record collection.

    `/ativos` is registered before `/{record_id}` so it is not captured as an
    id (it would fail int conversion and return 422).
    """
    service = RecordService(entity)
    out = entity.schema_out
    One = Envelope[out]  # type: ignore[valid-type]
    Many = Envelope[List[out]]  # type: ignore[valid-type]

    router = APIRouter(prefix=f"{settings.api_prefix}{entity.path}", tags=[entity.tag])

    def one(result: RecordResult):
        return One(status=True, message=result.message, data=out.model_validate(result.data))

    def many(result: RecordResult):
        return Many(
            status=True,
            message=result.message,
            data=[out.model_validate(record) for record in result.data],
        )

    @router.post(
        "",
        response_model=One,
        status_code=status.HTTP_201_CREATED,
        responses=_ERROR_RESPONSES,
        summary=f"Create a {entity.name} record",
    )
    async def create_record(
        body: Any = Body(None),
        db: AsyncSession = Depends(get_db_session),
        actor: ActingUser = Depends(get_acting_user),
    ):
        return one(await service.create(db, body, actor))

    @router.put(
        "/{record_id}",
        response_model=One,
        responses=_ERROR_RESPONSES,
        summary=f"Replace the foreign key and document of a {entity.name} record",
    )
    async def update_record(
        record_id: int,
        body: Any = Body(None),
        db: AsyncSession = Depends(get_db_session),
        actor: ActingUser = Depends(get_acting_user),
    ):
        return one(await service.update(db, record_id, body, actor))

    @router.patch(
        "/{record_id}/ativar",
        response_model=One,
        responses=_ERROR_RESPONSES,
        summary=f"Activate/deactivate a {entity.name} record",
    )
    async def toggle_record(
        record_id: int,
        db: AsyncSession = Depends(get_db_session),
        actor: ActingUser = Depends(get_acting_user),
    ):
        return one(await service.toggle_active(db, record_id, actor))

    @router.get(
        "",
        response_model=Many,
        responses=_ERROR_RESPONSES,
        summary=f"List every {entity.name} record",
    )
    async def list_records(db: AsyncSession = Depends(get_db_session)):
        return many(await service.list_all(db))

    @router.get(
        "/ativos",
        response_model=Many,
        responses=_ERROR_RESPONSES,
        summary=f"List active {entity.name} records",
    )
    async def list_active_records(db: AsyncSession = Depends(get_db_session)):
        return many(await service.list_active(db))

    @router.get(
        "/{record_id}",
        response_model=One,
        responses=_ERROR_RESPONSES,
        summary=f"Get a {entity.name} record by id",
    )
    async def get_record(record_id: int, db: AsyncSession = Depends(get_db_session)):
        return one(await service.get(db, record_id))

    return router


routers = [build_record_router(entity) for entity in ALL_ENTITIES]
