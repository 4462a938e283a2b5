"""Word count, reading time and excerpt computation."""

import math
import re
from typing import Any, Optional

from bunko.config import ContentSettings

from .base import Service

HTML_TAG = re.compile(r"<[^>]*>")
WHITESPACE = re.compile(r"\s")


def strip_html(text: str) -> str:
    """Remove HTML tags. Entities are left as they are."""
    return HTML_TAG.sub("", text)


def count_text_words(text: str) -> int:
    """Count whitespace-separated tokens of HTML-stripped text."""
    return len(strip_html(text).split())


def count_words(content: Any) -> int:
    """Count words in plain text or a JSON tree.

    Every string leaf is counted, including structural values such as
    block type tags, so the figure is an approximation for JSON content.
    Non-string scalars count as zero.
    """
    if isinstance(content, str):
        return count_text_words(content)
    if isinstance(content, dict):
        return sum(count_words(value) for value in content.values())
    if isinstance(content, list):
        return sum(count_words(element) for element in content)
    return 0


def extract_text(content: Any) -> str:
    """Readable text of a content value.

    Plain text is returned unchanged. For JSON trees the values of ``text``
    keys are joined with spaces, in document order.
    """
    if isinstance(content, str):
        return content
    parts: list[str] = []
    _collect_text(content, parts)
    return " ".join(parts)


def _collect_text(node: Any, parts: list[str]) -> None:
    if isinstance(node, dict):
        for key, value in node.items():
            if key == "text" and isinstance(value, str):
                parts.append(value)
            else:
                _collect_text(value, parts)
    elif isinstance(node, list):
        for element in node:
            _collect_text(element, parts)


def is_blank(content: Any) -> bool:
    if content is None:
        return True
    if isinstance(content, str):
        return not content.strip()
    return not content


class WordCountService(Service):
    """Derived reading metrics, driven by ``ContentSettings``."""

    def __init__(self, settings: ContentSettings) -> None:
        """Initialize word count service.

        Args:
            settings: Content settings (reading speed, excerpt length, auto update flag)
        """
        self.settings = settings

    def count_words(self, content: Any) -> int:
        if is_blank(content):
            return 0
        return count_words(content)

    def should_update(self, content_changed: bool) -> bool:
        """Whether the save pipeline recomputes word_count.

        Only when auto update is enabled and the content changed; otherwise
        a manually supplied word_count is kept.
        """
        return self.settings.auto_update_word_count and content_changed

    def reading_time(self, word_count: Optional[int]) -> Optional[int]:
        """Minutes to read, rounded up; None when there are no words."""
        if not word_count:
            return None
        return math.ceil(word_count / self.settings.reading_speed)

    def reading_time_text(self, word_count: Optional[int]) -> Optional[str]:
        minutes = self.reading_time(word_count)
        if minutes is None:
            return None
        return f"{minutes} min read"

    def excerpt(
        self,
        content: Any,
        length: Optional[int] = None,
        omission: str = "...",
    ) -> Optional[str]:
        """HTML-stripped preview truncated at a word boundary.

        Args:
            content: Plain text or JSON tree
            length: Maximum characters before the omission (defaults to settings)
            omission: Suffix appended when truncated

        Returns:
            The excerpt, or None when there is no content
        """
        if is_blank(content):
            return None
        if length is None:
            length = self.settings.excerpt_length

        text = strip_html(extract_text(content))
        if len(text) <= length:
            return text

        truncated = text[:length]
        boundaries = [m.start() for m in WHITESPACE.finditer(truncated)]
        cut = boundaries[-1] if boundaries else length
        return f"{truncated[:cut]}{omission}"
