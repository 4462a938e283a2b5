"""PostgreSQL implementation of PostType repository."""

from typing import Iterable, List, Optional

import logfire
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bunko.domain.error import BusinessRuleViolationError
from bunko.domain.model import PostType
from bunko.domain.repository import PostTypeRepository
from bunko.domain.value import PostTypeId
from bunko.persistence.mappers import post_type_to_dict, row_to_post_type
from bunko.persistence.tables import post_types_table, posts_table


class PostgresPostTypeRepository(PostTypeRepository):
    """PostgreSQL implementation of PostTypeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_type_id: PostTypeId) -> Optional[PostType]:
        stmt = select(post_types_table).where(post_types_table.c.id == post_type_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post_type(dict(row)) if row else None

    async def find_by_name(self, name: str) -> Optional[PostType]:
        stmt = select(post_types_table).where(post_types_table.c.name == name)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post_type(dict(row)) if row else None

    async def find_by_names(self, names: Iterable[str]) -> List[PostType]:
        stmt = (
            select(post_types_table)
            .where(post_types_table.c.name.in_(list(names)))
            .order_by(post_types_table.c.name)
        )
        result = await self.session.execute(stmt)
        return [row_to_post_type(dict(row)) for row in result.mappings().all()]

    async def find_all(self) -> List[PostType]:
        stmt = select(post_types_table).order_by(post_types_table.c.name)
        result = await self.session.execute(stmt)
        return [row_to_post_type(dict(row)) for row in result.mappings().all()]

    async def save(self, post_type: PostType) -> PostType:
        """Save a post type (create or update)."""
        with logfire.span("post_type_repository.save", name=post_type.name.root):
            values = post_type_to_dict(post_type)
            existing = await self.find_by_id(post_type.id)
            if existing:
                stmt = (
                    post_types_table.update()
                    .where(post_types_table.c.id == post_type.id)
                    .values(**values)
                )
            else:
                stmt = post_types_table.insert().values(**values)
            await self.session.execute(stmt)
            await self.session.flush()
            return post_type

    async def delete(self, post_type_id: PostTypeId) -> None:
        """Delete a post type; refused while posts reference it."""
        with logfire.span(
            "post_type_repository.delete", post_type_id=str(post_type_id)
        ):
            post_count = await self.session.scalar(
                select(func.count())
                .select_from(posts_table)
                .where(posts_table.c.post_type_id == post_type_id)
            )
            if post_count:
                raise BusinessRuleViolationError(
                    f"Cannot delete post type with {post_count} existing posts"
                )

            try:
                async with self.session.begin_nested():
                    await self.session.execute(
                        post_types_table.delete().where(
                            post_types_table.c.id == post_type_id
                        )
                    )
            except IntegrityError as e:
                # A post was added after the count above
                raise BusinessRuleViolationError(
                    "Cannot delete post type with existing posts"
                ) from e
