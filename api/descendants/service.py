"""
Read-side composition for descendants.

These derived queries are library functions only; no route exposes them.
"""

from __future__ import annotations

from core.db import Database
from core.errors import NotFoundError

from . import repository, schemas


async def descendant_subtree(db: Database, root_id: int) -> list[schemas.DescendantTreeNode]:
    """
    Every descendant below `root_id` (the root included). Order is whatever the
    database returns. An unknown root yields an empty list.
    """
    rows = await repository.fetch_subtree(db, root_id)
    return [schemas.DescendantTreeNode(**row) for row in rows]


async def parent_and_attachment(db: Database, descendant_id: int) -> schemas.ParentAndAttachment:
    """
    A descendant with its parent and attachment figure, each None when unset.

    Raises NotFoundError only when the descendant itself does not exist.
    """
    row = await repository.fetch_parent_and_attachment(db, descendant_id)
    if row is None:
        raise NotFoundError("No data found for the given ID")

    family_parent = None
    if row["family_parent_id"] is not None:
        family_parent = schemas.RelatedPerson(
            id=int(row["family_parent_id"]),
            name=row["family_parent_name"],
        )

    attachment_figure = None
    if row["attachment_figure_id"] is not None:
        attachment_figure = schemas.RelatedPerson(
            id=int(row["attachment_figure_id"]),
            name=row["attachment_figure_name"],
        )

    return schemas.ParentAndAttachment(
        descendant_id=int(row["descendant_id"]),
        family_parent=family_parent,
        attachment_figure=attachment_figure,
    )
