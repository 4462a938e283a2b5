"""Base classes for value objects."""

from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    The wrapped value is available as ``.root`` and ``model_dump()`` returns
    the primitive itself, which keeps mappers and API schemas simple.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC so they compare with aware ones."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
