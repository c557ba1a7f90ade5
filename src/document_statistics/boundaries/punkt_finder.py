from __future__ import annotations

from typing import Iterator

from nltk.tokenize.punkt import PunktSentenceTokenizer

from .base import SentenceBoundaryFinder


class PunktSentenceBoundaryFinder(SentenceBoundaryFinder):
    """
    Sentence boundaries from NLTK's Punkt tokenizer.

    The tokenizer is used untrained so no corpus download is required. Each
    sentence span is extended to the start of the next one so the whitespace
    between sentences belongs to the preceding segment, matching the Unicode
    finder's segmentation.
    """

    def __init__(self, tokenizer: PunktSentenceTokenizer | None = None) -> None:
        self._tokenizer = tokenizer or PunktSentenceTokenizer()

    def boundaries(self, text: str) -> Iterator[int]:
        if not text:
            return
        for start, _ in self._tokenizer.span_tokenize(text):
            if start > 0:
                yield start
        yield len(text)
