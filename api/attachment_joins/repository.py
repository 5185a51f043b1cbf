"""
Join-row persistence (raw SQL over `descendant_attachments`).
"""

from __future__ import annotations

from core.db import Database
from core.schemas import fits_id_column


async def insert_join(db: Database, *, attachment_figure_id: int, descendant_id: int) -> int:
    """
    Insert a join row and return its id. Unknown figure/descendant ids fail at
    the foreign-key constraint.
    """
    row = await db.fetch_one(
        """
        INSERT INTO descendant_attachments (attachment_figure_id, descendant_id)
        VALUES ($1, $2)
        RETURNING id
        """,
        attachment_figure_id,
        descendant_id,
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert attachment join.")
    return int(row["id"])


async def update_join(db: Database, join_id: int, *, attachment_figure_id: int, descendant_id: int) -> str:
    if not fits_id_column(join_id):
        return "UPDATE 0"
    return await db.execute(
        """
        UPDATE descendant_attachments
        SET attachment_figure_id = $1,
            descendant_id = $2
        WHERE id = $3
        """,
        attachment_figure_id,
        descendant_id,
        join_id,
    )


async def delete_join(db: Database, join_id: int) -> str:
    if not fits_id_column(join_id):
        return "DELETE 0"
    return await db.execute("DELETE FROM descendant_attachments WHERE id = $1", join_id)
