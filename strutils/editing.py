"""
Structural Editing Module.

Index-based edits, reversal, rotation, chunking and word sorting. Strings
are immutable, so every function returns a new string. Out-of-range
indexes clamp (insertion) or leave the string unchanged (removal and
replacement); nothing here raises.
"""

import re
from typing import List


SENTENCE_PATTERN = re.compile(r'[^.!?]+[.!?]+')


def reverse(text: str) -> str:
    return text[::-1]


def reverse_words(text: str) -> str:
    """
    Reverse the order of space-separated words.

    Runs of spaces are kept as empty words, so spacing is mirrored.

    Example:
        >>> reverse_words("Monkey  D Luffy")
        'Luffy D  Monkey'
    """
    return ' '.join(reversed(text.split(' ')))


def reverse_each_word(text: str) -> str:
    return ' '.join(word[::-1] for word in text.split(' '))


def reverse_sentences(text: str) -> str:
    """
    Reverse the order of sentences ending in ``.``, ``!`` or ``?``.

    Text without any terminated sentence is returned as-is (blank text
    becomes ``""``). A trailing unterminated fragment is dropped when at
    least one sentence is found.

    Example:
        >>> reverse_sentences("Hello world. How are you? Fine!")
        'Fine! How are you? Hello world.'
    """
    sentences = SENTENCE_PATTERN.findall(text)
    if not sentences:
        return text if text.strip() else ''
    return ' '.join(sentence.strip() for sentence in reversed(sentences)).strip()


def mirror_string(text: str) -> str:
    """
    Append the reverse of the string to itself.

    Example:
        >>> mirror_string("abc")
        'abccba'
    """
    return text + text[::-1]


def insert_at(text: str, index: int, value: str) -> str:
    """
    Insert ``value`` at ``index``, clamping the index into ``0..len(text)``.

    Example:
        >>> insert_at("abc", 1, "X")
        'aXbc'
        >>> insert_at("abc", 10, "X")
        'abcX'
    """
    index = max(0, min(index, len(text)))
    return text[:index] + value + text[index:]


def remove_at(text: str, index: int, count: int = 1) -> str:
    """
    Remove ``count`` characters starting at ``index``.

    An index outside the string or a non-positive count leaves the string
    unchanged.

    Example:
        >>> remove_at("abcde", 1, 2)
        'ade'
    """
    if index < 0 or index >= len(text) or count <= 0:
        return text
    return text[:index] + text[index + count:]


def replace_at(text: str, index: int, char: str) -> str:
    """Replace the character at ``index``; out-of-range indexes are a no-op."""
    if index < 0 or index >= len(text):
        return text
    return text[:index] + char + text[index + 1:]


def rotate_string(text: str, n: int) -> str:
    """
    Rotate left by ``n`` positions; negative ``n`` rotates right.

    Example:
        >>> rotate_string("abcdef", 2)
        'cdefab'
        >>> rotate_string("abcdef", -2)
        'efabcd'
    """
    if not text:
        return ''
    k = n % len(text)
    return text[k:] + text[:k]


def split_by_length(text: str, length: int) -> List[str]:
    """
    Chunk a string into pieces of ``length`` characters.

    The last piece may be shorter. An empty string or a non-positive length
    yields an empty list.

    Example:
        >>> split_by_length("mugiwara", 3)
        ['mug', 'iwa', 'ra']
    """
    if length <= 0:
        return []
    return [text[i:i + length] for i in range(0, len(text), length)]


def sort_words(text: str) -> str:
    """
    Sort space-separated words by code point (upper case before lower case).

    Example:
        >>> sort_words("Zebra apple Banana")
        'Banana Zebra apple'
    """
    return ' '.join(sorted(text.split(' ')))
