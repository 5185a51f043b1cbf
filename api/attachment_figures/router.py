"""
Attachment figure API endpoints.

Figures can only be listed and created; there is no get/update/delete.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from core.db import Database, get_db
from core.schemas import CreatedResponse

from . import repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/attachment_figures", response_model=list[schemas.AttachmentFigure])
async def list_attachment_figures(db: Database = Depends(get_db)) -> list[dict]:
    return await repository.list_attachment_figures(db)


@router.post(
    "/api/attachment_figures",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_attachment_figure(
    request: schemas.AttachmentFigureCreate,
    db: Database = Depends(get_db),
) -> dict:
    figure_id = await repository.insert_attachment_figure(db, request)
    logger.info("attachment_figure_created id=%s", figure_id)
    return {"id": figure_id}
