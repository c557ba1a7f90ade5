from __future__ import annotations

from .document import Paragraph, TextDocument
from .models import ParagraphStatistics


class ParagraphCache:
    """Per-paragraph statistics stored in the document's opaque paragraph slots."""

    def __init__(self, document: TextDocument) -> None:
        self._document = document

    def get(self, paragraph: Paragraph) -> ParagraphStatistics | None:
        """Return the entry attached to ``paragraph`` without allocating one."""
        return self._document.cache_slot(paragraph)

    def get_or_create(self, paragraph: Paragraph) -> ParagraphStatistics:
        """Return the paragraph's entry, attaching a zeroed one on first visit."""
        entry = self._document.cache_slot(paragraph)
        if entry is None:
            entry = ParagraphStatistics()
            self._document.set_cache_slot(paragraph, entry)
        return entry
