"""Shared in-memory store backing the in-memory repositories."""

import operator
from typing import Any, Callable

from bunko.domain.model import Post, PostType
from bunko.domain.value import (
    Condition,
    Operator,
    PostId,
    PostQuery,
    PostTypeId,
)

COMPARISONS: dict[Operator, Callable[[Any, Any], bool]] = {
    Operator.GT: operator.gt,
    Operator.GE: operator.ge,
    Operator.LT: operator.lt,
    Operator.LE: operator.le,
}


class InMemoryStore:
    """Tables held in dicts, shared by every repository of one container.

    Repositories are created per request, so the data has to live one level
    up for writes to be visible to later requests.
    """

    def __init__(self) -> None:
        self.post_types: dict[PostTypeId, PostType] = {}
        self.posts: dict[PostId, Post] = {}


def matches(post: Post, condition: Condition) -> bool:
    """Evaluate one condition with SQL semantics for NULL."""
    actual = getattr(post, condition.field.value)
    expected = condition.value

    if condition.op == Operator.EQ:
        return actual == expected
    if condition.op == Operator.NE:
        return actual != expected
    if condition.op == Operator.IN:
        return actual in expected
    if actual is None:
        return False
    return COMPARISONS[condition.op](actual, expected)


def select_posts(posts: list[Post], query: PostQuery) -> list[Post]:
    """Filter and order posts like the SQL translation does (NULLs last)."""
    selected = [p for p in posts if all(matches(p, c) for c in query.conditions)]

    # Stable sorts from the least significant key; id breaks ties
    selected.sort(key=lambda p: str(p.id))
    for ordering in reversed(query.ordering):
        field = ordering.field.value
        present = [p for p in selected if getattr(p, field) is not None]
        missing = [p for p in selected if getattr(p, field) is None]
        present.sort(key=lambda p: getattr(p, field), reverse=ordering.descending)
        selected = present + missing
    return selected
