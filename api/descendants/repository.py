"""
Descendant persistence (raw SQL over `family_descendant`).
"""

from __future__ import annotations

from typing import Any

from core.db import Database
from core.schemas import fits_id_column

from . import schemas

_COLUMNS = "id, name, description, image, generation, gender, birth_date, death_date"


async def list_descendants(db: Database) -> list[dict[str, Any]]:
    return await db.fetch_all(f"SELECT {_COLUMNS} FROM family_descendant")


async def get_descendant(db: Database, descendant_id: int) -> dict[str, Any] | None:
    if not fits_id_column(descendant_id):
        return None
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM family_descendant
        WHERE id = $1
        """,
        descendant_id,
    )


async def insert_descendant(db: Database, data: schemas.DescendantCreate) -> int:
    """
    Insert a descendant and return its generated id.
    """
    row = await db.fetch_one(
        """
        INSERT INTO family_descendant (name, description, image, generation, gender, birth_date, death_date)
        VALUES ($1, $2, $3, $4, $5, $6, $7)
        RETURNING id
        """,
        data.name,
        data.description,
        data.image,
        data.generation,
        data.gender,
        data.birth_date,
        data.death_date,
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert descendant.")
    return int(row["id"])


async def update_descendant(db: Database, descendant_id: int, data: schemas.DescendantUpdate) -> str:
    """
    Overwrite every column of one row. Returns the command tag ("UPDATE 0"
    when the id does not exist).
    """
    if not fits_id_column(descendant_id):
        return "UPDATE 0"
    return await db.execute(
        """
        UPDATE family_descendant
        SET name = $1,
            description = $2,
            image = $3,
            generation = $4,
            gender = $5,
            birth_date = $6,
            death_date = $7
        WHERE id = $8
        """,
        data.name,
        data.description,
        data.image,
        data.generation,
        data.gender,
        data.birth_date,
        data.death_date,
        descendant_id,
    )


async def delete_descendant(db: Database, descendant_id: int) -> str:
    if not fits_id_column(descendant_id):
        return "DELETE 0"
    return await db.execute("DELETE FROM family_descendant WHERE id = $1", descendant_id)


async def fetch_subtree(db: Database, root_id: int) -> list[dict[str, Any]]:
    """
    The root row plus every row reachable through `family_parent`, any depth.
    """
    if not fits_id_column(root_id):
        return []
    return await db.fetch_all(
        """
        WITH RECURSIVE descendants AS (
            SELECT id, name, family_parent, related_by_attachment, generation
            FROM family_descendant
            WHERE id = $1
            UNION ALL
            SELECT fd.id, fd.name, fd.family_parent, fd.related_by_attachment, fd.generation
            FROM family_descendant fd
            INNER JOIN descendants d ON fd.family_parent = d.id
        )
        SELECT id, name, family_parent, related_by_attachment, generation
        FROM descendants
        """,
        root_id,
    )


async def fetch_parent_and_attachment(db: Database, descendant_id: int) -> dict[str, Any] | None:
    if not fits_id_column(descendant_id):
        return None
    return await db.fetch_one(
        """
        SELECT
          fd.id AS descendant_id,
          fp.id AS family_parent_id,
          fp.name AS family_parent_name,
          af.id AS attachment_figure_id,
          af.name AS attachment_figure_name
        FROM family_descendant fd
        LEFT JOIN family_descendant fp ON fd.family_parent = fp.id
        LEFT JOIN attachment_figures af ON fd.related_by_attachment = af.id
        WHERE fd.id = $1
        """,
        descendant_id,
    )
