from __future__ import annotations

from .models import WordCounts

# Words longer than this count as "long" for LIX and complex-word percentage.
LONG_WORD_THRESHOLD = 6


def count_words(text: str) -> WordCounts:
    """
    Count words, long words and word characters in a single left-to-right scan.

    Letters and numbers build words. Whitespace ends the current word. A lone
    punctuation mark between letters (``well-known``, ``it's``) stays inside
    the word without adding to its length, while a run of two or more
    (``done--next``) splits it.
    """
    words = 0
    long_words = 0
    alphanumeric = 0

    in_word = False
    word_length = 0
    separator_run = 0

    for char in text:
        if char.isalnum():
            in_word = True
            separator_run = 0
            word_length += 1
            alphanumeric += 1
        elif not in_word:
            continue
        elif char.isspace():
            words += 1
            if word_length > LONG_WORD_THRESHOLD:
                long_words += 1
            in_word = False
            word_length = 0
            separator_run = 0
        else:
            separator_run += 1
            if separator_run > 1:
                words += 1
                if word_length > LONG_WORD_THRESHOLD:
                    long_words += 1
                in_word = False
                word_length = 0
                separator_run = 0

    if in_word:
        words += 1
        if word_length > LONG_WORD_THRESHOLD:
            long_words += 1

    return WordCounts(words, long_words, alphanumeric)
