"""Composable post query specification.

A ``PostQuery`` describes which posts to load and in which order without
tying the domain to a storage engine. Repositories translate it into SQL
or evaluate it in memory; pagination and counting happen in the store.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Iterable
from uuid import UUID

from pydantic import Field, TypeAdapter, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError

from bunko.domain.value.common import ValueObject, as_utc


class PostField(str, Enum):
    """Post attributes that queries may filter and order on."""

    ID = "id"
    POST_TYPE_ID = "post_type_id"
    TITLE = "title"
    SLUG = "slug"
    STATUS = "status"
    PUBLISHED_AT = "published_at"
    WORD_COUNT = "word_count"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


class Operator(str, Enum):
    """Comparison operators supported by every repository."""

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"
    IN = "in"


RANGE_OPERATORS = (Operator.GT, Operator.GE, Operator.LT, Operator.LE)

FIELD_TYPES: dict[PostField, TypeAdapter] = {
    PostField.ID: TypeAdapter(UUID),
    PostField.POST_TYPE_ID: TypeAdapter(UUID),
    PostField.TITLE: TypeAdapter(str),
    PostField.SLUG: TypeAdapter(str),
    PostField.STATUS: TypeAdapter(str),
    PostField.PUBLISHED_AT: TypeAdapter(datetime),
    PostField.WORD_COUNT: TypeAdapter(int),
    PostField.CREATED_AT: TypeAdapter(datetime),
    PostField.UPDATED_AT: TypeAdapter(datetime),
}


def coerce_field_value(field: PostField, value: Any) -> Any:
    """Convert a raw value (e.g. parsed JSON) to the field's Python type.

    Naive datetimes are taken as UTC.

    Raises:
        ValueError: If the value cannot represent the field
    """
    if value is None:
        return None
    try:
        coerced = FIELD_TYPES[field].validate_python(value)
    except PydanticValidationError as e:
        raise ValueError(
            f"Value {value!r} is not valid for field '{field.value}'"
        ) from e
    if isinstance(coerced, datetime):
        return as_utc(coerced)
    return coerced


class Condition(ValueObject):
    """``field <op> value``."""

    field: PostField
    op: Operator = Operator.EQ
    value: Any = None

    @field_validator("value")
    @classmethod
    def validate_value_for_operator(cls, v: Any, info: ValidationInfo) -> Any:
        """IN needs a collection of candidates; range operators need a value.

        Values are coerced to the field's type so conditions declared as
        JSON compare like those built in code.
        """
        op = info.data.get("op")
        field = info.data.get("field")
        if op == Operator.IN:
            if isinstance(v, (str, bytes)) or not isinstance(v, Iterable):
                raise ValueError("Operator 'in' needs a list of values")
            if field is None:
                return tuple(v)
            return tuple(coerce_field_value(field, item) for item in v)
        if v is None and op in RANGE_OPERATORS:
            raise ValueError(f"Operator '{op.value}' cannot compare with null")
        if field is None:
            return v
        return coerce_field_value(field, v)


class Ordering(ValueObject):
    """Sort key with direction."""

    field: PostField
    descending: bool = False


DEFAULT_ORDERING = (Ordering(field=PostField.CREATED_AT, descending=True),)


class PostQuery(ValueObject):
    """Immutable AND-composition of conditions plus an ordering.

    Every builder method returns a new query. The default ordering is
    newest-created first.
    """

    conditions: tuple[Condition, ...] = ()
    ordering: tuple[Ordering, ...] = DEFAULT_ORDERING

    def where(
        self, field: PostField | str, op: Operator | str, value: Any
    ) -> "PostQuery":
        condition = Condition(field=PostField(field), op=Operator(op), value=value)
        return self.model_copy(update={"conditions": (*self.conditions, condition)})

    def where_in(self, field: PostField | str, values: Iterable[Any]) -> "PostQuery":
        return self.where(field, Operator.IN, list(values))

    def order_by(self, field: PostField | str, descending: bool = False) -> "PostQuery":
        """Append a sort key after the existing ones."""
        key = Ordering(field=PostField(field), descending=descending)
        return self.model_copy(update={"ordering": (*self.ordering, key)})

    def reorder(self, field: PostField | str, descending: bool = False) -> "PostQuery":
        """Replace the ordering with a single sort key."""
        key = Ordering(field=PostField(field), descending=descending)
        return self.model_copy(update={"ordering": (key,)})


class CollectionScope(ValueObject):
    """Named extra filter narrowing a collection beyond type membership.

    Scopes are plain data so they can be declared in configuration and
    composed deterministically with the collection's type filter.
    """

    name: str = Field(min_length=1)
    conditions: tuple[Condition, ...] = Field(min_length=1)

    @classmethod
    def where(
        cls, name: str, field: PostField | str, op: Operator | str, value: Any
    ) -> "CollectionScope":
        return cls(
            name=name,
            conditions=(
                Condition(field=PostField(field), op=Operator(op), value=value),
            ),
        )

    def apply(self, query: PostQuery) -> PostQuery:
        """AND this scope's conditions onto an already filtered query."""
        return query.model_copy(
            update={"conditions": (*query.conditions, *self.conditions)}
        )
