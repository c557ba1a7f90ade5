import pytest

from document_statistics.boundaries import (
    PunktSentenceBoundaryFinder,
    UnicodeSentenceBoundaryFinder,
    create_boundary_finder,
)
from document_statistics.sentences import count_sentences
from tests.utils import FixedBoundaryFinder


def test_count_sentences_two_sentences():
    assert count_sentences("Hello world. How are you?") == 2


def test_count_sentences_blank_text():
    assert count_sentences("") == 0
    assert count_sentences("   ") == 0
    assert count_sentences("\n\t ") == 0


def test_count_sentences_without_terminator():
    assert count_sentences("  A sentence without a full stop  ") == 1


def test_count_sentences_filters_whitespace_segments():
    """Single whitespace segments are artifacts; single visible characters count."""
    finder = FixedBoundaryFinder([2, 3, 4])

    assert count_sentences("ab c", finder) == 2


def test_count_sentences_skips_empty_segments():
    finder = FixedBoundaryFinder([3, 3, 5])

    assert count_sentences("abc d", finder) == 2


def test_unicode_finder_ends_at_text_length():
    text = "One. Two. Three."
    offsets = list(UnicodeSentenceBoundaryFinder().boundaries(text))

    assert offsets[-1] == len(text)
    assert 0 not in offsets
    assert offsets == sorted(offsets)


def test_punkt_finder_counts_sentences():
    finder = PunktSentenceBoundaryFinder()

    assert count_sentences("Hello world. How are you?", finder) == 2
    assert list(finder.boundaries("")) == []


def test_create_boundary_finder_by_name():
    assert isinstance(create_boundary_finder("unicode"), UnicodeSentenceBoundaryFinder)
    assert isinstance(create_boundary_finder(" Punkt "), PunktSentenceBoundaryFinder)
    with pytest.raises(ValueError):
        create_boundary_finder("icu")
