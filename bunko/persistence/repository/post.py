"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bunko.domain.error import SlugConflictError
from bunko.domain.model import Post
from bunko.domain.repository import PostRepository
from bunko.domain.value import PostId, PostQuery, PostTypeId
from bunko.persistence.mappers import post_to_dict, row_to_post
from bunko.persistence.query import count_posts, select_posts
from bunko.persistence.tables import posts_table

SLUG_CONSTRAINT = "uq_posts_post_type_slug"


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_post(dict(row)) if row else None

    async def find(
        self, query: PostQuery, limit: Optional[int] = None, offset: int = 0
    ) -> List[Post]:
        """Find posts matching a query; limit and offset run in SQL."""
        with logfire.span(
            "post_repository.find",
            conditions=len(query.conditions),
            limit=limit,
            offset=offset,
        ):
            stmt = select_posts(query).offset(offset)
            if limit is not None:
                stmt = stmt.limit(limit)

            result = await self.session.execute(stmt)
            posts = [row_to_post(dict(row)) for row in result.mappings().all()]
            logfire.debug("Found posts", count=len(posts))
            return posts

    async def first(self, query: PostQuery) -> Optional[Post]:
        posts = await self.find(query, limit=1)
        return posts[0] if posts else None

    async def count(self, query: PostQuery) -> int:
        """Count posts matching a query."""
        with logfire.span("post_repository.count", conditions=len(query.conditions)):
            result = await self.session.execute(count_posts(query))
            return result.scalar() or 0

    async def slug_exists(
        self,
        post_type_id: PostTypeId,
        slug: str,
        exclude_id: Optional[PostId] = None,
    ) -> bool:
        """Check if a slug is taken within a post type."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(
                posts_table.c.post_type_id == post_type_id,
                posts_table.c.slug == slug,
            )
        )
        if exclude_id is not None:
            stmt = stmt.where(posts_table.c.id != exclude_id)

        result = await self.session.execute(stmt)
        exists = (result.scalar() or 0) > 0
        logfire.debug("Slug existence check", slug=slug, exists=exists)
        return exists

    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        The write runs in a savepoint so a unique violation on
        (post_type_id, slug) can be reported without aborting the request's
        transaction.
        """
        with logfire.span("post_repository.save", post_id=str(post.id), slug=post.slug):
            post_dict = post_to_dict(post)
            exists = await self.session.scalar(
                select(func.count())
                .select_from(posts_table)
                .where(posts_table.c.id == post.id)
            )

            try:
                async with self.session.begin_nested():
                    if exists:
                        logfire.info("Updating existing post", post_id=str(post.id))
                        stmt = (
                            posts_table.update()
                            .where(posts_table.c.id == post.id)
                            .values(**post_dict)
                        )
                    else:
                        logfire.info("Inserting new post", post_id=str(post.id))
                        stmt = posts_table.insert().values(**post_dict)
                    await self.session.execute(stmt)
            except IntegrityError as e:
                if SLUG_CONSTRAINT in str(e.orig):
                    raise SlugConflictError(str(post.post_type_id), post.slug or "")
                raise

            return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete)."""
        stmt = posts_table.delete().where(posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()
