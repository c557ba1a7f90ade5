from __future__ import annotations

from .base import SentenceBoundaryFinder
from .punkt_finder import PunktSentenceBoundaryFinder
from .unicode_finder import UnicodeSentenceBoundaryFinder

__all__ = [
    "SentenceBoundaryFinder",
    "UnicodeSentenceBoundaryFinder",
    "PunktSentenceBoundaryFinder",
    "create_boundary_finder",
]


def create_boundary_finder(name: str) -> SentenceBoundaryFinder:
    """Factory for building sentence boundary finders by name."""
    normalized = name.lower().strip()
    if normalized in {"unicode", "uax29"}:
        return UnicodeSentenceBoundaryFinder()
    if normalized in {"punkt", "nltk"}:
        return PunktSentenceBoundaryFinder()
    raise ValueError(f"Unknown sentence finder '{name}'.")
