"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from bunko.domain.model import Post, PostType
from bunko.domain.value import PostId, PostTypeId, PostTypeName


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_post_type(row: Dict[str, Any]) -> PostType:
    """Convert database row to PostType domain model."""
    return PostType(
        id=PostTypeId(_uuid(row["id"])),
        name=PostTypeName(row["name"]),
        title=row["title"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_type_to_dict(post_type: PostType) -> Dict[str, Any]:
    """Convert PostType domain model to a dict for insert/update."""
    return {
        "id": post_type.id,
        "name": post_type.name.root,
        "title": post_type.title,
        "created_at": post_type.created_at,
        "updated_at": post_type.updated_at,
    }


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        post_type_id=PostTypeId(_uuid(row["post_type_id"])),
        title=row["title"],
        slug=row["slug"],
        content=row.get("content"),
        status=row["status"],
        published_at=row.get("published_at"),
        word_count=row.get("word_count"),
        title_tag=row.get("title_tag"),
        meta_description=row.get("meta_description"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to a dict for insert/update.

    Content is stored as JSONB, so plain text and block trees share a column.
    """
    return post.model_dump()
