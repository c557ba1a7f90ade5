from __future__ import annotations

from typing import Iterator

from uniseg.sentencebreak import sentence_boundaries

from .base import SentenceBoundaryFinder


class UnicodeSentenceBoundaryFinder(SentenceBoundaryFinder):
    """Sentence boundaries from the Unicode text segmentation rules (UAX #29)."""

    def boundaries(self, text: str) -> Iterator[int]:
        for position in sentence_boundaries(text):
            if position > 0:
                yield position
