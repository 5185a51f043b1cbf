"""
Pydantic schemas for attachment join endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel

from core.schemas import RowId


class AttachmentJoinRequest(BaseModel):
    # Both ids are required; strings like "3" and out-of-range ids are
    # rejected before any SQL runs.
    attachment_figure_id: RowId
    descendant_id: RowId
