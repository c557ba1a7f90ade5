from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import NamedTuple


class WordCounts(NamedTuple):
    """Output of a single tokenizer pass over a span of text."""

    words: int
    long_words: int
    alphanumeric_characters: int


@dataclass(slots=True)
class ParagraphStatistics:
    """Cached tokenizer and sentence counter output for one paragraph."""

    word_count: int = 0
    long_word_count: int = 0
    alphanumeric_character_count: int = 0
    sentence_count: int = 0


class StatisticsScope(str, Enum):
    """Which span of text the current metrics describe."""

    DOCUMENT = "document"
    SELECTION = "selection"


@dataclass(frozen=True, slots=True)
class MetricsSnapshot:
    """All published metrics of one recompute, emitted as a single batch."""

    word_count: int = 0
    total_word_count: int = 0
    character_count: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0
    page_count: int = 0
    complex_word_percentage: int = 0
    reading_time_minutes: int = 0
    lix_score: int = 0
    readability_index: int = 0

    def to_dict(self) -> dict[str, int]:
        return dict(asdict(self))
