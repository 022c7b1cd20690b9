"""Anagram windows and letter-frequency comparisons."""

import re
import string
from collections import Counter

_ALPHABET = frozenset(string.ascii_uppercase)


def _upper_letters(text):
    """Return ``text`` upper-cased, rejecting anything but the letters A-Z."""
    upper = text.upper()
    invalid = set(upper) - _ALPHABET
    if invalid:
        raise ValueError(f"not a letter: {min(invalid)!r}")
    return upper


def count_anagram_windows(text, pattern):
    """Count windows of ``text`` that are anagrams of ``pattern``, ignoring case.

    Every window is counted afresh.
    """
    text = _upper_letters(text)
    pattern = _upper_letters(pattern)
    width = len(pattern)
    target = Counter(pattern)
    return sum(
        1
        for start in range(len(text) - width + 1)
        if Counter(text[start:start + width]) == target
    )


def count_anagram_windows_sliding(text, pattern):
    """Count anagram windows like :func:`count_anagram_windows`, sliding one count."""
    text = _upper_letters(text)
    pattern = _upper_letters(pattern)
    width = len(pattern)
    if width > len(text):
        return 0
    target = Counter(pattern)
    window = Counter(text[:width])
    matches = int(window == target)
    for incoming, outgoing in zip(text[width:], text):
        window[incoming] += 1
        window[outgoing] -= 1
        if not window[outgoing]:
            del window[outgoing]
        matches += window == target
    return matches


def is_even_letter_string(text):
    """Tell whether every letter occurs an even number of times.

    A string of a single character never qualifies.
    """
    if len(text) == 1:
        return False
    return all(count % 2 == 0 for count in Counter(text).values())


def smallest_char_count(word):
    """Return how often the smallest character of ``word`` occurs in it."""
    if not word:
        raise ValueError("word must not be empty")
    return word.count(min(word))


def count_smaller_frequencies(words, queries):
    """For each query, count the words whose smallest-character count is lower."""
    word_counts = [smallest_char_count(word) for word in words]
    return [
        sum(1 for count in word_counts if query_count > count)
        for query_count in map(smallest_char_count, queries)
    ]


def split_words(text):
    """Split ``text`` at every comma and every space, keeping empty pieces."""
    return re.split(r"[, ]", text)