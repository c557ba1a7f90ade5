from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, List

from .models import ParagraphStatistics

logger = logging.getLogger(__name__)

LINE_BREAK_RE = re.compile(r"\r\n|\r|\u2029")

Listener = Callable[[], None]


@dataclass(slots=True, eq=False)
class Paragraph:
    """A line-break separated block of document text with an attached cache slot."""

    text: str
    index: int
    user_data: ParagraphStatistics | None = field(default=None, repr=False)


class TextDocument(ABC):
    """
    Document collaborator consumed by the statistics engine.

    Implementations own the text and the per-paragraph cache slots and notify
    registered listeners when the content changes or is cleared.
    """

    def __init__(self) -> None:
        self._contents_changed_listeners: List[Listener] = []
        self._cleared_listeners: List[Listener] = []

    @abstractmethod
    def first_paragraph(self) -> Paragraph:
        raise NotImplementedError

    @abstractmethod
    def last_paragraph(self) -> Paragraph:
        raise NotImplementedError

    @abstractmethod
    def next_paragraph(self, paragraph: Paragraph) -> Paragraph | None:
        """Return the paragraph after ``paragraph`` or None at the end."""
        raise NotImplementedError

    @abstractmethod
    def find_paragraph(self, position: int) -> Paragraph:
        """Return the paragraph containing the character offset ``position``."""
        raise NotImplementedError

    @abstractmethod
    def total_character_length(self) -> int:
        """Document length including the trailing paragraph terminator."""
        raise NotImplementedError

    def paragraph_text(self, paragraph: Paragraph) -> str:
        return paragraph.text

    def cache_slot(self, paragraph: Paragraph) -> ParagraphStatistics | None:
        return paragraph.user_data

    def set_cache_slot(self, paragraph: Paragraph, entry: ParagraphStatistics) -> None:
        paragraph.user_data = entry

    def connect_contents_changed(self, listener: Listener) -> None:
        self._contents_changed_listeners.append(listener)

    def connect_cleared(self, listener: Listener) -> None:
        self._cleared_listeners.append(listener)

    def _emit_contents_changed(self) -> None:
        for listener in list(self._contents_changed_listeners):
            listener()

    def _emit_cleared(self) -> None:
        for listener in list(self._cleared_listeners):
            listener()


class PlainTextDocument(TextDocument):
    """
    In-memory document holding one paragraph per line.

    Paragraph objects are reused by index across edits so their cache slots
    survive; paragraphs removed by an edit take their slots with them.
    """

    def __init__(self, text: str = "") -> None:
        super().__init__()
        self._paragraphs: List[Paragraph] = [Paragraph(text="", index=0)]
        if text:
            self._replace_paragraphs(text)

    @property
    def text(self) -> str:
        return "\n".join(p.text for p in self._paragraphs)

    @property
    def paragraphs(self) -> List[Paragraph]:
        return list(self._paragraphs)

    def set_text(self, text: str) -> None:
        """Replace the whole content and notify listeners."""
        self._replace_paragraphs(text)
        self._emit_contents_changed()

    def insert(self, position: int, text: str) -> None:
        current = self.text
        if not 0 <= position <= len(current):
            raise ValueError(f"Insert position {position} outside document.")
        self.set_text(current[:position] + text + current[position:])

    def remove(self, position: int, count: int) -> None:
        current = self.text
        if position < 0 or count < 0 or position + count > len(current):
            raise ValueError(
                f"Cannot remove {count} characters at {position} from a "
                f"document of length {len(current)}."
            )
        self.set_text(current[:position] + current[position + count :])

    def clear(self) -> None:
        """Drop all content and cache slots and notify cleared listeners."""
        self._paragraphs = [Paragraph(text="", index=0)]
        self._emit_cleared()

    def first_paragraph(self) -> Paragraph:
        return self._paragraphs[0]

    def last_paragraph(self) -> Paragraph:
        return self._paragraphs[-1]

    def next_paragraph(self, paragraph: Paragraph) -> Paragraph | None:
        next_index = paragraph.index + 1
        if next_index < len(self._paragraphs):
            return self._paragraphs[next_index]
        return None

    def find_paragraph(self, position: int) -> Paragraph:
        start = 0
        for paragraph in self._paragraphs:
            end = start + len(paragraph.text)
            if position <= end:
                return paragraph
            start = end + 1
        return self._paragraphs[-1]

    def total_character_length(self) -> int:
        return sum(len(p.text) + 1 for p in self._paragraphs)

    def _replace_paragraphs(self, text: str) -> None:
        lines = LINE_BREAK_RE.sub("\n", text).split("\n")
        existing = self._paragraphs
        for idx, line in enumerate(lines):
            if idx < len(existing):
                existing[idx].text = line
            else:
                existing.append(Paragraph(text=line, index=idx))
        dropped = len(existing) - len(lines)
        if dropped > 0:
            del existing[len(lines) :]
            logger.debug("Dropped %d paragraphs and their cache slots", dropped)
