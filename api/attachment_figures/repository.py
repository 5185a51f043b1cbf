"""
Attachment figure persistence (raw SQL over `attachment_figures`).
"""

from __future__ import annotations

from typing import Any

from core.db import Database

from . import schemas


async def list_attachment_figures(db: Database) -> list[dict[str, Any]]:
    return await db.fetch_all(
        "SELECT id, name, description, image, birth_date, death_date, gender FROM attachment_figures"
    )


async def insert_attachment_figure(db: Database, data: schemas.AttachmentFigureCreate) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO attachment_figures (name, description, image, gender, birth_date, death_date)
        VALUES ($1, $2, $3, $4, $5, $6)
        RETURNING id
        """,
        data.name,
        data.description,
        data.image,
        data.gender,
        data.birth_date,
        data.death_date,
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert attachment figure.")
    return int(row["id"])
