"""Strongly typed identifiers for content entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

PostId = NewType("PostId", UUID)
PostTypeId = NewType("PostTypeId", UUID)
