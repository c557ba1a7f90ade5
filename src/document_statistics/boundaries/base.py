from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator


class SentenceBoundaryFinder(ABC):
    """Abstract oracle that segments text into sentence-like spans."""

    @abstractmethod
    def boundaries(self, text: str) -> Iterator[int]:
        """
        Yield successive sentence boundary offsets after position 0.

        Offsets are strictly increasing and the last one equals ``len(text)``.
        Empty text yields nothing.
        """
        raise NotImplementedError
