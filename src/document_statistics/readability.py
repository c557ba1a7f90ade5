from __future__ import annotations

import math

WORDS_PER_PAGE = 250
WORDS_PER_MINUTE = 270

# Coleman-Liau style coefficients.
CLI_CHARACTER_WEIGHT = 5.88
CLI_SENTENCE_WEIGHT = 29.6
CLI_OFFSET = 15.8


def calculate_page_count(words: int) -> int:
    """Return the number of full pages, at 250 words per page."""
    return words // WORDS_PER_PAGE


def calculate_reading_time(words: int) -> int:
    """Return the reading time in whole minutes, at 270 words per minute."""
    return words // WORDS_PER_MINUTE


def calculate_complex_words(total_words: int, long_words: int) -> int:
    """Percentage of long words, rounded up. Zero when there are no words."""
    if total_words <= 0:
        return 0
    return math.ceil(100.0 * long_words / total_words)


def calculate_lix(total_words: int, long_words: int, sentences: int) -> int:
    """
    LIX readability score, rounded up.

    Average sentence length plus the percentage of long words. Zero when there
    are no words or no sentences.
    """
    if total_words <= 0 or sentences <= 0:
        return 0
    return math.ceil(total_words / sentences + 100.0 * long_words / total_words)


def calculate_cli(characters: int, words: int, sentences: int) -> int:
    """
    Coleman-Liau style readability index, rounded up and floored at zero.

    Zero when there are no words or no sentences.
    """
    if words <= 0 or sentences <= 0:
        return 0
    cli = math.ceil(
        CLI_CHARACTER_WEIGHT * (characters / words)
        - CLI_SENTENCE_WEIGHT * (sentences / words)
        - CLI_OFFSET
    )
    return max(cli, 0)
