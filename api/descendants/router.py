"""
Descendant API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from core.db import Database, get_db
from core.errors import NotFoundError
from core.schemas import CreatedResponse, MessageResponse

from . import repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/descendants", response_model=list[schemas.Descendant])
async def list_descendants(db: Database = Depends(get_db)) -> list[dict]:
    return await repository.list_descendants(db)


@router.get("/api/descendants/{descendant_id}", response_model=schemas.Descendant)
async def get_descendant(descendant_id: int, db: Database = Depends(get_db)) -> dict:
    row = await repository.get_descendant(db, descendant_id)
    if row is None:
        raise NotFoundError("Descendant not found")
    return row


@router.post(
    "/api/descendants",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_descendant(
    request: schemas.DescendantCreate,
    db: Database = Depends(get_db),
) -> dict:
    descendant_id = await repository.insert_descendant(db, request)
    logger.info("descendant_created id=%s", descendant_id)
    return {"id": descendant_id}


@router.put("/api/descendants/{descendant_id}", response_model=MessageResponse)
async def update_descendant(
    descendant_id: int,
    request: schemas.DescendantUpdate | None = None,
    db: Database = Depends(get_db),
) -> dict:
    """
    Full replace: fields missing from the body are written as "" (or 0 for
    generation). Updating an unknown id is a no-op, not an error.
    """
    tag = await repository.update_descendant(db, descendant_id, request or schemas.DescendantUpdate())
    logger.info("descendant_updated id=%s status=%s", descendant_id, tag)
    return {"message": "Descendant updated successfully"}


@router.delete("/api/descendants/{descendant_id}", response_model=MessageResponse)
async def delete_descendant(descendant_id: int, db: Database = Depends(get_db)) -> dict:
    tag = await repository.delete_descendant(db, descendant_id)
    logger.info("descendant_deleted id=%s status=%s", descendant_id, tag)
    return {"message": "Descendant deleted successfully"}
