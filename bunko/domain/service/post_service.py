"""Post domain service."""

from datetime import datetime
from typing import Optional

import logfire

from bunko.domain.error import SlugConflictError, ValidationError
from bunko.domain.model.post import Post
from bunko.domain.repository import PostRepository
from bunko.domain.value import PostId, Slug, utc_now

from .base import Service
from .publication_service import PublicationService
from .slug_service import SlugService
from .word_count_service import WordCountService


class PostService(Service):
    """Domain service for post operations.

    ``save_post`` runs an explicit, ordered pipeline:

    1. generate a slug when it is blank and the title is present
    2. stamp published_at when the post is published without one
    3. validate title, slug and status
    4. recompute word_count when the content changed
    5. persist, retrying once with a fresh suffix if a generated slug
       loses a race against a concurrent writer
    """

    def __init__(
        self,
        post_repository: PostRepository,
        slug_service: SlugService,
        word_count_service: WordCountService,
        publication_service: PublicationService,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            slug_service: Slug generation policy
            word_count_service: Word count policy
            publication_service: Publication state policy
        """
        self.post_repository = post_repository
        self.slug_service = slug_service
        self.word_count_service = word_count_service
        self.publication_service = publication_service

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID, regardless of its publication state.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def save_post(
        self,
        post: Post,
        previous: Optional[Post] = None,
        now: Optional[datetime] = None,
    ) -> Post:
        """Run the save pipeline and persist a post.

        Args:
            post: Post to save
            previous: Stored version of the post when updating
            now: Current time (defaults to the wall clock)

        Returns:
            Saved post

        Raises:
            ValidationError: If the post is invalid or its slug is taken
        """
        now = now or utc_now()
        with logfire.span(
            "post_service.save_post",
            post_id=str(post.id),
            title=post.title,
            is_new=previous is None,
        ):
            post, slug_generated = await self._generate_slug(post)
            post = self.publication_service.assign_published_at(post, now)
            await self._validate(post)
            post = self._update_word_count(post, previous)
            post = post.model_copy(update={"updated_at": now})

            try:
                saved = await self.post_repository.save(post)
            except SlugConflictError:
                if not slug_generated:
                    raise ValidationError({"slug": ["has already been taken"]})
                saved = await self._retry_with_new_suffix(post)

            logfire.info("Post saved", post_id=str(saved.id), slug=saved.slug)
            return saved

    async def delete_post(self, post_id: PostId) -> None:
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))

    async def _generate_slug(self, post: Post) -> tuple[Post, bool]:
        if post.slug or not post.title.strip():
            return post, False
        slug = await self.slug_service.generate_slug(
            post.title, post.post_type_id, existing_id=post.id
        )
        if not slug:
            # Left blank so validation reports it
            return post, False
        return post.model_copy(update={"slug": slug}), True

    async def _validate(self, post: Post) -> None:
        errors: dict[str, list[str]] = {}

        if not post.title.strip():
            errors.setdefault("title", []).append("can't be blank")

        if not post.slug:
            errors.setdefault("slug", []).append("can't be blank")
        elif not self._is_valid_slug(post.slug):
            errors.setdefault("slug", []).append("is invalid")
        elif await self.post_repository.slug_exists(
            post.post_type_id, post.slug, exclude_id=post.id
        ):
            errors.setdefault("slug", []).append("has already been taken")

        if not post.status:
            errors.setdefault("status", []).append("can't be blank")
        elif not self.publication_service.is_valid_status(post.status):
            errors.setdefault("status", []).append(
                f"{post.status} is not a valid status"
            )

        if errors:
            logfire.warn("Post validation failed", post_id=str(post.id), errors=errors)
            raise ValidationError(errors)

    @staticmethod
    def _is_valid_slug(slug: str) -> bool:
        try:
            Slug(slug)
        except ValueError:
            return False
        return True

    def _update_word_count(self, post: Post, previous: Optional[Post]) -> Post:
        if previous is None:
            content_changed = post.content is not None
        else:
            content_changed = post.content != previous.content

        if not self.word_count_service.should_update(content_changed):
            return post

        word_count = self.word_count_service.count_words(post.content)
        logfire.debug("Word count updated", post_id=str(post.id), word_count=word_count)
        return post.model_copy(update={"word_count": word_count})

    async def _retry_with_new_suffix(self, post: Post) -> Post:
        base_slug = self.slug_service.slugify(post.title)
        retry = post.model_copy(
            update={"slug": self.slug_service.with_random_suffix(base_slug)}
        )
        logfire.warn(
            "Slug taken by a concurrent write, retrying",
            post_id=str(post.id),
            slug=post.slug,
            retry_slug=retry.slug,
        )
        try:
            return await self.post_repository.save(retry)
        except SlugConflictError:
            logfire.error("Slug retry failed", post_id=str(post.id), slug=retry.slug)
            raise ValidationError({"slug": ["has already been taken"]})
