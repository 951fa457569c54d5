"""
Search and Replace Module.

Provides case-sensitive substring tests, occurrence counting, literal
replacement, masking/highlighting and safe positional access.

All matching here is literal: search targets are never interpreted as
regular expressions.
"""

import re
from typing import List, Sequence


def contains(text: str, substr: str) -> bool:
    return substr in text


def starts_with(text: str, prefix: str) -> bool:
    return text.startswith(prefix)


def ends_with(text: str, suffix: str) -> bool:
    return text.endswith(suffix)


def contains_any(text: str, items: Sequence[str]) -> bool:
    """True if any item is a substring of ``text``. An empty list is always False."""
    return any(item in text for item in items)


def starts_with_any(text: str, prefixes: Sequence[str]) -> bool:
    return any(text.startswith(prefix) for prefix in prefixes)


def ends_with_any(text: str, suffixes: Sequence[str]) -> bool:
    return any(text.endswith(suffix) for suffix in suffixes)


def count_occurrences(text: str, substr: str) -> int:
    """
    Count non-overlapping occurrences of a substring.

    An empty substring matches at every insertion point, so the count is
    ``len(text) + 1``.

    Args:
        text: String to search
        substr: Substring to count

    Returns:
        Number of non-overlapping matches

    Example:
        >>> count_occurrences("aaaaa", "aa")
        2
        >>> count_occurrences("Zoro", "")
        5
    """
    if substr == '':
        return len(text) + 1
    return text.count(substr)


def count_character_occurrences(text: str, char: str) -> int:
    return count_occurrences(text, char)


def replace_all(text: str, find: str, replace: str) -> str:
    """
    Replace every literal occurrence of ``find``.

    Example:
        >>> replace_all("One Piece One Piece", "One", "Two")
        'Two Piece Two Piece'
        >>> replace_all("abc", "", "-")
        '-a-b-c-'
    """
    return text.replace(find, replace)


def mask_string(text: str, start: int, end: int, mask_char: str = '*') -> str:
    """
    Replace the characters in ``[start, end)`` with a mask character.

    An inverted range leaves the string unchanged and an ``end`` past the
    string clamps to its length.

    Args:
        text: String to mask
        start: First index to mask (inclusive)
        end: Index to stop masking at (exclusive)
        mask_char: Replacement for each masked character (default: ``*``)

    Returns:
        Masked string

    Example:
        >>> mask_string("MonkeyDLuffy", 1, 6)
        'M*****DLuffy'
        >>> mask_string("Sanji", 2, 10, "❤")
        'Sa❤❤❤'
    """
    return ''.join(
        mask_char if start <= index < end else char
        for index, char in enumerate(text)
    )


def highlight_substr(
    text: str,
    substr: str,
    tag_open: str = '**',
    tag_close: str = '**'
) -> str:
    """
    Wrap every literal occurrence of ``substr`` with open/close markers.

    Example:
        >>> highlight_substr("hello (world)", "(world)")
        'hello **(world)**'
        >>> highlight_substr("hello world", "world", "<em>", "</em>")
        'hello <em>world</em>'
    """
    if not substr:
        return text
    return text.replace(substr, f"{tag_open}{substr}{tag_close}")


def get_all_indexes_of(text: str, target: str, overlapping: bool = False) -> List[int]:
    """
    Find every start index of ``target`` in ``text``.

    Args:
        text: String to search
        target: Substring to locate. When empty, every insertion index
                ``0..len(text)`` is returned.
        overlapping: Advance the search cursor by 1 after a hit instead of
                     by ``len(target)``

    Returns:
        Start indexes in ascending order

    Example:
        >>> get_all_indexes_of("banana bandanna", "an")
        [1, 3, 8, 11]
        >>> get_all_indexes_of("aaaaa", "aa", overlapping=True)
        [0, 1, 2, 3]
    """
    if not target:
        return list(range(len(text) + 1))

    step = 1 if overlapping else len(target)
    indexes = []
    position = text.find(target)
    while position != -1:
        indexes.append(position)
        position = text.find(target, position + step)
    return indexes


def censor(text: str, words: Sequence[str], mask: str = '*') -> str:
    """
    Mask whole-word, case-insensitive occurrences of each word.

    Each hit is replaced with ``mask`` repeated to the word's length.

    Example:
        >>> censor("Hello World", ["world"])
        'Hello *****'
    """
    for word in words:
        if not word:
            continue
        pattern = re.compile(rf'\b{re.escape(word)}\b', re.IGNORECASE)
        text = pattern.sub(mask * len(word), text)
    return text


def has_repeated_characters(text: str) -> bool:
    """True if any character is immediately followed by itself."""
    return re.search(r'(.)\1', text) is not None


def contains_uppercase(text: str) -> bool:
    return re.search(r'[A-Z]', text) is not None


def contains_lowercase(text: str) -> bool:
    return re.search(r'[a-z]', text) is not None


def get_char_at_safe(text: str, index: int) -> str:
    """Character at ``index``, or an empty string when out of range (negative included)."""
    if 0 <= index < len(text):
        return text[index]
    return ''


def get_nth_word(text: str, n: int) -> str:
    """
    Return the ``n``-th whitespace-separated word, or an empty string.

    Example:
        >>> get_nth_word("Straw   Hat   Pirates", 2)
        'Pirates'
    """
    words = re.split(r'\s+', text)
    if 0 <= n < len(words):
        return words[n]
    return ''


def get_first_n_chars(text: str, n: int) -> str:
    return text[:max(n, 0)]


def get_last_n_chars(text: str, n: int) -> str:
    if n <= 0:
        return ''
    return text[-n:]


def get_middle_character(text: str) -> str:
    """Middle character; for even lengths the left of the two middle characters."""
    if not text:
        return ''
    return text[(len(text) - 1) // 2]


def get_first_line(text: str) -> str:
    return re.split(r'\r?\n', text)[0]


def get_last_line(text: str) -> str:
    return re.split(r'\r?\n', text)[-1]
