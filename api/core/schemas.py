"""
Response envelopes and id types shared by every resource.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, StrictInt

# Every id column is a SERIAL (int4).
MAX_ROW_ID = 2_147_483_647

# A reference to an existing row, as sent in a request body.
RowId = Annotated[StrictInt, Field(ge=1, le=MAX_ROW_ID)]


def fits_id_column(value: int) -> bool:
    """
    False for ids no SERIAL column can hold; such rows cannot exist.
    """
    return -MAX_ROW_ID - 1 <= value <= MAX_ROW_ID


class CreatedResponse(BaseModel):
    id: int


class MessageResponse(BaseModel):
    message: str
