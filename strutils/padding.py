"""
Padding and Trimming Module.

Provides functions for shaping a string to a length or boundary including:
- Left, right and center padding with a fill character
- Trimming whitespace or a custom literal character
- Repetition (strict, until-length and separated)
- Prefix/suffix enforcement and wrapping
- Truncation with an ellipsis mark
- Whitespace and newline compression

Lengths are measured in code points, so multi-byte characters and emoji are
never split.
"""

import math
import re


ELLIPSIS = '…'

WHITESPACE_RUN_PATTERN = re.compile(r'\s+')
NEWLINE_RUN_PATTERN = re.compile(r'[\r\n]+')


class RepeatCountError(ValueError):
    """Raised by ``repeat`` when the repeat count is negative."""
    pass


def pad_left(text: str, length: int, char: str = ' ') -> str:
    """
    Pad a string on the left until it reaches the target length.

    Only the first character of ``char`` is used as the fill. Strings that
    are already long enough are returned unchanged (never truncated).

    Args:
        text: String to pad
        length: Target length in characters
        char: Fill character (default: space)

    Returns:
        Padded string of length ``max(len(text), length)``

    Example:
        >>> pad_left("Usopp", 7, "-")
        '--Usopp'
        >>> pad_left("Robin", 9, "ab")
        'aaaaRobin'
    """
    fill = char[:1]
    if len(text) >= length or not fill:
        return text
    return fill * (length - len(text)) + text


def pad_right(text: str, length: int, char: str = ' ') -> str:
    """
    Pad a string on the right until it reaches the target length.

    Example:
        >>> pad_right("Luffy", 8)
        'Luffy   '
    """
    fill = char[:1]
    if len(text) >= length or not fill:
        return text
    return text + fill * (length - len(text))


def pad_center(text: str, length: int, char: str = ' ') -> str:
    """
    Pad a string on both sides until it reaches the target length.

    When the deficit is odd the extra fill character goes at the end.

    Example:
        >>> pad_center("hi", 5, "-")
        '-hi--'
        >>> pad_center("hi", 6, "-")
        '--hi--'
    """
    fill = char[:1]
    if len(text) >= length or not fill:
        return text

    total_padding = length - len(text)
    padding_start = total_padding // 2
    padding_end = total_padding - padding_start
    return fill * padding_start + text + fill * padding_end


def trim_start(text: str) -> str:
    return text.lstrip()


def trim_end(text: str) -> str:
    return text.rstrip()


def trim_char(text: str, char: str) -> str:
    """
    Strip repetitions of a literal character from both ends of a string.

    ``char`` is matched literally (not as a pattern) and interior
    occurrences are left untouched.

    Example:
        >>> trim_char("...luffy.mugiwara...", ".")
        'luffy.mugiwara'
    """
    if not char:
        return text
    escaped = re.escape(char)
    return re.sub(rf'\A(?:{escaped})+|(?:{escaped})+\Z', '', text)


def repeat(text: str, count: float) -> str:
    """
    Repeat a string ``count`` times.

    Fractional counts are floored.

    Args:
        text: String to repeat
        count: Number of repetitions

    Returns:
        Repeated string

    Raises:
        RepeatCountError: If the floored count is negative

    Example:
        >>> repeat("Robin", 2.5)
        'RobinRobin'
    """
    times = math.floor(count)
    if times < 0:
        raise RepeatCountError(f"Invalid count value: {count}")
    return text * times


def repeat_string_until_length(text: str, target_length: int) -> str:
    """
    Repeat a string until it is exactly ``target_length`` characters long.

    The final repetition is truncated. An empty input cannot fill any
    length and yields an empty string.

    Example:
        >>> repeat_string_until_length("go", 5)
        'gogog'
    """
    if not text or target_length <= 0:
        return ''
    repetitions = target_length // len(text) + 1
    return (text * repetitions)[:target_length]


def repeat_with_separator(text: str, count: int, separator: str) -> str:
    """
    Repeat a string ``count`` times joined by ``separator``.

    Example:
        >>> repeat_with_separator("Luffy", 3, "-")
        'Luffy-Luffy-Luffy'
    """
    return separator.join([text] * max(count, 0))


def wrap(text: str, wrapper: str) -> str:
    return f"{wrapper}{text}{wrapper}"


def ensure_starts_with(text: str, prefix: str) -> str:
    return text if text.startswith(prefix) else prefix + text


def ensure_ends_with(text: str, suffix: str) -> str:
    return text if text.endswith(suffix) else text + suffix


def remove_trailing_slash(text: str) -> str:
    return text[:-1] if text.endswith('/') else text


def remove_leading_slash(text: str) -> str:
    return text[1:] if text.startswith('/') else text


def truncate(text: str, length: int) -> str:
    """
    Truncate a string to a number of characters and append an ellipsis.

    Args:
        text: Text to truncate
        length: Maximum number of characters kept before the ellipsis.
                Negative values are treated as 0.

    Returns:
        Original string if it fits, otherwise the first ``length``
        characters followed by ``…``

    Example:
        >>> truncate("strawhatpirates", 6)
        'strawh…'
        >>> truncate("ワンピース海賊団", 4)
        'ワンピー…'
    """
    length = max(length, 0)
    if len(text) <= length:
        return text
    return text[:length] + ELLIPSIS


def truncate_words(text: str, num_words: int) -> str:
    """
    Keep the first ``num_words`` space-separated words and append an ellipsis.

    The ellipsis is always appended, even when no words were dropped.

    Example:
        >>> truncate_words("I will become the Pirate King", 3)
        'I will become…'
    """
    words = text.split(' ')[:max(num_words, 0)]
    return ' '.join(words) + ELLIPSIS


def compress_whitespace(text: str) -> str:
    """
    Collapse whitespace runs to a single space and trim both ends.

    Example:
        >>> compress_whitespace("  Franky \\n builds \\t the ship  ")
        'Franky builds the ship'
    """
    return WHITESPACE_RUN_PATTERN.sub(' ', text).strip()


def compact_whitespace(text: str) -> str:
    return compress_whitespace(text)


def collapse_newlines(text: str) -> str:
    """Collapse any run of ``\\r``/``\\n`` characters into a single ``\\n``."""
    return NEWLINE_RUN_PATTERN.sub('\n', text)
