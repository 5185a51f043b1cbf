"""
Attachment join API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from core.db import Database, get_db
from core.schemas import CreatedResponse, MessageResponse

from . import repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/api/attachmentjoin",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_attachment_join(
    request: schemas.AttachmentJoinRequest,
    db: Database = Depends(get_db),
) -> dict:
    join_id = await repository.insert_join(
        db,
        attachment_figure_id=request.attachment_figure_id,
        descendant_id=request.descendant_id,
    )
    logger.info(
        "attachment_join_created id=%s attachment_figure_id=%s descendant_id=%s",
        join_id,
        request.attachment_figure_id,
        request.descendant_id,
    )
    return {"id": join_id}


@router.put("/api/attachmentjoins/{join_id}", response_model=MessageResponse)
async def update_attachment_join(
    join_id: int,
    request: schemas.AttachmentJoinRequest,
    db: Database = Depends(get_db),
) -> dict:
    tag = await repository.update_join(
        db,
        join_id,
        attachment_figure_id=request.attachment_figure_id,
        descendant_id=request.descendant_id,
    )
    logger.info("attachment_join_updated id=%s status=%s", join_id, tag)
    return {"message": "Attachment join updated successfully"}


@router.delete("/api/attachmentjoins/{join_id}", response_model=MessageResponse)
async def delete_attachment_join(join_id: int, db: Database = Depends(get_db)) -> dict:
    tag = await repository.delete_join(db, join_id)
    logger.info("attachment_join_deleted id=%s status=%s", join_id, tag)
    return {"message": "Attachment join deleted successfully"}
