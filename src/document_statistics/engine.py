from __future__ import annotations

import logging
from typing import Callable, List

from .boundaries import SentenceBoundaryFinder, create_boundary_finder
from .cache import ParagraphCache
from .config import StatisticsConfig
from .document import Paragraph, TextDocument
from .models import MetricsSnapshot, StatisticsScope
from .readability import (
    calculate_cli,
    calculate_complex_words,
    calculate_lix,
    calculate_page_count,
    calculate_reading_time,
)
from .sentences import count_sentences
from .tokenization import count_words

logger = logging.getLogger(__name__)

MetricsListener = Callable[[MetricsSnapshot], None]


class DocumentStatistics:
    """
    Live text statistics for one document.

    Document changes rescan every paragraph, refreshing the statistics cached on
    each paragraph and summing them into document-wide totals. Selections are
    measured directly from the selected text without touching the cache. Every
    recompute publishes one MetricsSnapshot to all subscribers.
    """

    def __init__(
        self,
        document: TextDocument,
        config: StatisticsConfig | None = None,
        boundary_finder: SentenceBoundaryFinder | None = None,
    ) -> None:
        self._document = document
        self._config = config or StatisticsConfig()
        self._finder = boundary_finder or create_boundary_finder(
            self._config.sentence_finder
        )
        self._cache = ParagraphCache(document)
        self._listeners: List[MetricsListener] = []
        self._scope = StatisticsScope.DOCUMENT
        self._snapshot = MetricsSnapshot()

        self._word_count = 0
        self._word_character_count = 0
        self._sentence_count = 0
        self._paragraph_count = 0
        self._lix_long_word_count = 0
        self._page_count = 0
        self._read_time_minutes = 0

        document.connect_contents_changed(self.on_contents_changed)
        document.connect_cleared(self.on_cleared)

    @property
    def snapshot(self) -> MetricsSnapshot:
        """The most recently published metrics."""
        return self._snapshot

    @property
    def scope(self) -> StatisticsScope:
        return self._scope

    @property
    def word_count(self) -> int:
        return self._snapshot.word_count

    @property
    def total_word_count(self) -> int:
        return self._word_count

    @property
    def character_count(self) -> int:
        return self._snapshot.character_count

    @property
    def sentence_count(self) -> int:
        return self._snapshot.sentence_count

    @property
    def paragraph_count(self) -> int:
        return self._snapshot.paragraph_count

    @property
    def page_count(self) -> int:
        return self._snapshot.page_count

    @property
    def reading_time(self) -> int:
        return self._snapshot.reading_time_minutes

    def subscribe(self, listener: MetricsListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: MetricsListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def on_contents_changed(self) -> None:
        """Rescan every paragraph and republish document-wide metrics."""
        self._reset_totals()

        paragraph: Paragraph | None = self._document.first_paragraph()
        visited = 0
        while paragraph is not None:
            self._update_paragraph_statistics(paragraph)
            visited += 1
            if paragraph is self._document.last_paragraph():
                break
            paragraph = self._document.next_paragraph(paragraph)

        logger.debug(
            "Rescanned %d paragraphs: %d words, %d sentences",
            visited,
            self._word_count,
            self._sentence_count,
        )
        self._publish_document_statistics()

    def on_cleared(self) -> None:
        """Reset all totals to zero and republish."""
        self._reset_totals()
        self._publish_document_statistics()

    def on_text_selected(self, selected_text: str, start: int, end: int) -> None:
        """Publish metrics computed purely from the selected text."""
        if not selected_text:
            self.on_text_deselected()
            return

        words, long_words, word_characters = count_words(selected_text)
        sentences = count_sentences(selected_text, self._finder)
        paragraphs = self._count_selected_paragraphs(start, end)

        logger.debug(
            "Selection [%d, %d): %d words, %d sentences, %d paragraphs",
            start,
            end,
            words,
            sentences,
            paragraphs,
        )
        self._scope = StatisticsScope.SELECTION
        self._publish(
            MetricsSnapshot(
                word_count=words,
                total_word_count=self._word_count,
                character_count=len(selected_text),
                sentence_count=sentences,
                paragraph_count=paragraphs,
                page_count=calculate_page_count(words),
                complex_word_percentage=calculate_complex_words(words, long_words),
                reading_time_minutes=calculate_reading_time(words),
                lix_score=calculate_lix(words, long_words, sentences),
                readability_index=calculate_cli(word_characters, words, sentences),
            )
        )

    def on_text_deselected(self) -> None:
        """Restore document-wide metrics after a selection is cleared."""
        self.on_contents_changed()

    def _reset_totals(self) -> None:
        self._word_count = 0
        self._word_character_count = 0
        self._sentence_count = 0
        self._paragraph_count = 0
        self._lix_long_word_count = 0
        self._page_count = 0
        self._read_time_minutes = 0

    def _update_paragraph_statistics(self, paragraph: Paragraph) -> None:
        text = self._document.paragraph_text(paragraph)
        entry = self._cache.get_or_create(paragraph)

        (
            entry.word_count,
            entry.long_word_count,
            entry.alphanumeric_character_count,
        ) = count_words(text)
        entry.sentence_count = count_sentences(text, self._finder)

        self._word_count += entry.word_count
        self._lix_long_word_count += entry.long_word_count
        self._word_character_count += entry.alphanumeric_character_count
        self._sentence_count += entry.sentence_count

        if text.strip():
            self._paragraph_count += 1

    def _count_selected_paragraphs(self, start: int, end: int) -> int:
        start, end = min(start, end), max(start, end)
        paragraph: Paragraph | None = self._document.find_paragraph(start)
        last = self._document.find_paragraph(end)
        count = 0
        while paragraph is not None:
            if self._counts_as_selected(paragraph):
                count += 1
            if paragraph is last:
                break
            paragraph = self._document.next_paragraph(paragraph)
        return count

    def _counts_as_selected(self, paragraph: Paragraph) -> bool:
        if not self._document.paragraph_text(paragraph).strip():
            return False
        if self._config.selection_paragraphs_require_cache:
            return self._cache.get(paragraph) is not None
        return True

    def _publish_document_statistics(self) -> None:
        self._page_count = calculate_page_count(self._word_count)
        self._read_time_minutes = calculate_reading_time(self._word_count)
        self._scope = StatisticsScope.DOCUMENT
        self._publish(
            MetricsSnapshot(
                word_count=self._word_count,
                total_word_count=self._word_count,
                character_count=self._document.total_character_length() - 1,
                sentence_count=self._sentence_count,
                paragraph_count=self._paragraph_count,
                page_count=self._page_count,
                complex_word_percentage=calculate_complex_words(
                    self._word_count, self._lix_long_word_count
                ),
                reading_time_minutes=self._read_time_minutes,
                lix_score=calculate_lix(
                    self._word_count, self._lix_long_word_count, self._sentence_count
                ),
                readability_index=calculate_cli(
                    self._word_character_count,
                    self._word_count,
                    self._sentence_count,
                ),
            )
        )

    def _publish(self, snapshot: MetricsSnapshot) -> None:
        self._snapshot = snapshot
        for listener in list(self._listeners):
            listener(snapshot)
