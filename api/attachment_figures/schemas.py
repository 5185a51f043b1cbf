"""
Pydantic schemas for attachment figure endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class AttachmentFigureCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str | None = ""
    image: str | None = ""
    gender: str | None = ""
    birth_date: str | None = ""
    death_date: str | None = ""


class AttachmentFigure(BaseModel):
    id: int
    name: str
    description: str | None = None
    image: str | None = None
    birth_date: str | None = None
    death_date: str | None = None
    gender: str | None = None
