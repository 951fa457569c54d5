"""
Text Analytics Module.

Provides counters and comparison metrics including:
- Levenshtein edit distance and normalized similarity
- Positional string similarity
- Character, word, sentence-mark and line counts
- Character and word-length frequency tables
- Longest/shortest word lookup

Counts of letters, vowels and consonants use ASCII classes. Character
frequency and byte length are computed per code point and per UTF-8 byte
respectively.
"""

import re
from collections import Counter
from typing import Dict

from Levenshtein import ratio


WORD_PATTERN = re.compile(r'\b\w+\b', re.ASCII)
VOWEL_PATTERN = re.compile(r'[aeiouAEIOU]')
CONSONANT_PATTERN = re.compile(r'[b-df-hj-np-tv-zB-DF-HJ-NP-TV-Z]')
PUNCTUATION_PATTERN = re.compile(r'[.,!?;:]')
UPPERCASE_PATTERN = re.compile(r'[A-Z]')
LOWERCASE_PATTERN = re.compile(r'[a-z]')
LINE_BREAK_PATTERN = re.compile(r'\r\n|\r|\n')


def levenshtein_distance(a: str, b: str) -> int:
    """
    Compute the edit distance between two strings.

    Classic dynamic programming with unit costs for insertion, deletion and
    substitution, running in O(len(a) * len(b)) time.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits turning ``a`` into ``b``

    Example:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("", "brook")
        5
    """
    m, n = len(a), len(b)
    if m == 0:
        return n
    if n == 0:
        return m

    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,         # deletion
                dp[i][j - 1] + 1,         # insertion
                dp[i - 1][j - 1] + cost   # substitution
            )

    return dp[m][n]


def levenshtein_similarity(s1: str, s2: str) -> float:
    """
    Calculate the normalized Levenshtein similarity ratio of two strings.

    Uses the python-Levenshtein library. Returns a ratio from 0.0
    (completely different) to 1.0 (identical).

    Example:
        >>> levenshtein_similarity("Budget_v1.xlsx", "Budget_v2.xlsx")
        0.9285714285714286
    """
    return ratio(s1, s2)


def string_similarity(a: str, b: str) -> float:
    """
    Positional similarity of two strings.

    Counts the indexes where both strings hold the same character and
    divides by the longer length. This is not edit-distance based.

    Args:
        a: First string
        b: Second string

    Returns:
        1.0 for two empty strings, 0.0 when exactly one is empty, otherwise
        the matching ratio

    Example:
        >>> string_similarity("kitten", "sitting")
        0.5714285714285714
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0

    matches = sum(1 for left, right in zip(a, b) if left == right)
    return matches / longest


def char_frequency(text: str) -> Dict[str, int]:
    """
    Map each distinct character to its number of occurrences.

    Example:
        >>> char_frequency("luffy")
        {'l': 1, 'u': 1, 'f': 2, 'y': 1}
    """
    return dict(Counter(text))


def count_words(text: str) -> int:
    return len(WORD_PATTERN.findall(text))


def count_words_by_length(text: str) -> Dict[int, int]:
    """
    Map word length to how many whitespace-separated words have it.

    Example:
        >>> count_words_by_length("  one   two  three  ")
        {3: 2, 5: 1}
    """
    return dict(Counter(len(word) for word in text.split()))


def count_vowels(text: str) -> int:
    return len(VOWEL_PATTERN.findall(text))


def count_consonants(text: str) -> int:
    return len(CONSONANT_PATTERN.findall(text))


def count_punctuation(text: str) -> int:
    """Count ``. , ! ? ; :`` characters."""
    return len(PUNCTUATION_PATTERN.findall(text))


def count_uppercase(text: str) -> int:
    return len(UPPERCASE_PATTERN.findall(text))


def count_lowercase(text: str) -> int:
    return len(LOWERCASE_PATTERN.findall(text))


def count_lines(text: str) -> int:
    """
    Count lines separated by ``\\r\\n``, ``\\r`` or ``\\n``.

    The empty string has zero lines; a trailing line break starts a final
    empty line.
    """
    if text == '':
        return 0
    return len(LINE_BREAK_PATTERN.split(text))


def get_byte_length(text: str) -> int:
    """
    Size of the UTF-8 encoding in bytes.

    Example:
        >>> get_byte_length("你好")
        6
    """
    return len(text.encode('utf-8', 'surrogatepass'))


def string_to_ascii_sum(text: str) -> int:
    return sum(ord(char) for char in text)


def get_longest_word(text: str) -> str:
    """Longest whitespace-separated word; the first one wins a tie."""
    words = text.split()
    if not words:
        return ''
    return max(words, key=len)


def get_shortest_word(text: str) -> str:
    """Shortest whitespace-separated word; the first one wins a tie."""
    words = text.split()
    if not words:
        return ''
    return min(words, key=len)
