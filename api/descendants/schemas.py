"""
Pydantic schemas for descendant endpoints.

Optional text fields are tri-state: a value, "" (set but empty), or None
(stored as SQL NULL). Absent request fields default to "" so an update
replaces every column.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DescendantFields(BaseModel):
    description: str | None = ""
    image: str | None = ""
    generation: int = 0
    gender: str | None = ""
    birth_date: str | None = ""
    death_date: str | None = ""


class DescendantCreate(DescendantFields):
    name: str = Field(..., min_length=1)


class DescendantUpdate(DescendantFields):
    # Full replace: a missing name overwrites the column with "".
    name: str = ""


class Descendant(BaseModel):
    id: int
    name: str
    description: str | None = None
    image: str | None = None
    generation: int | None = None
    gender: str | None = None
    birth_date: str | None = None
    death_date: str | None = None


class DescendantTreeNode(BaseModel):
    id: int
    name: str
    family_parent: int | None = None
    related_by_attachment: int | None = None
    generation: int | None = None


class RelatedPerson(BaseModel):
    id: int
    name: str | None = None


class ParentAndAttachment(BaseModel):
    descendant_id: int
    family_parent: RelatedPerson | None = None
    attachment_figure: RelatedPerson | None = None
