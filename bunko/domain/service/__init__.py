"""Domain services."""

from .base import Service
from .collection_service import CollectionService
from .post_service import PostService
from .post_type_service import PostTypeService
from .publication_service import PublicationService
from .slug_service import SlugService
from .word_count_service import WordCountService

__all__ = [
    "CollectionService",
    "PostService",
    "PostTypeService",
    "PublicationService",
    "Service",
    "SlugService",
    "WordCountService",
]
