from __future__ import annotations

from .boundaries import SentenceBoundaryFinder, UnicodeSentenceBoundaryFinder

_DEFAULT_FINDER = UnicodeSentenceBoundaryFinder()


def count_sentences(text: str, finder: SentenceBoundaryFinder | None = None) -> int:
    """
    Count the sentences of a span of text.

    Segments reported by the boundary finder only count when they hold more
    than one character, or a single character that is not whitespace.
    """
    trimmed = text.strip()
    if not trimmed:
        return 0

    finder = finder or _DEFAULT_FINDER
    count = 0
    old_pos = 0
    for next_pos in finder.boundaries(trimmed):
        length = next_pos - old_pos
        if length > 1 or (length == 1 and not trimmed[old_pos].isspace()):
            count += 1
        old_pos = next_pos
    return count
