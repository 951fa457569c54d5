"""
Cleaning Module.

Functions that remove classes of characters or repeated content from a
string. Character classes are ASCII unless noted: letters are ``a-z``/``A-Z``
and digits are ``0-9``. Whitespace follows Python's Unicode definition, so
non-breaking spaces count as whitespace.
"""

import re
import unicodedata


NON_ALPHA_PATTERN = re.compile(r'[^a-zA-Z]')
NON_DIGIT_PATTERN = re.compile(r'[^0-9]')
WHITESPACE_PATTERN = re.compile(r'\s+')
DIGIT_RUN_PATTERN = re.compile(r'[0-9]+')
ALPHANUMERIC_PATTERN = re.compile(r'[a-zA-Z0-9]')
SPECIAL_CHAR_PATTERN = re.compile(r'[^a-zA-Z0-9_\s]')
PUNCTUATION_PATTERN = re.compile(r'[.!@#$%^&*()\-_=+{}\[\]:;"/\\,~]')
VOWEL_PATTERN = re.compile(r'[aeiouAEIOU]')
CONSONANT_PATTERN = re.compile(r'[b-df-hj-np-tv-zB-DF-HJ-NP-TV-Z]')
COMBINING_MARK_PATTERN = re.compile(r'[\u0300-\u036f]')

# ESC, optional CSI opener, numeric params, final byte
ANSI_ESCAPE_PATTERN = re.compile(r'\x1b[\[(?);]{0,2}(?:;?[0-9])*.')


def remove_non_alpha(text: str) -> str:
    """
    Keep only ASCII letters.

    Example:
        >>> remove_non_alpha("Chopper😊é")
        'Chopper'
    """
    return NON_ALPHA_PATTERN.sub('', text)


def remove_non_numeric(text: str) -> str:
    return NON_DIGIT_PATTERN.sub('', text)


def remove_whitespace(text: str) -> str:
    """Remove every whitespace character, including tabs, newlines and NBSP."""
    return WHITESPACE_PATTERN.sub('', text)


def strip_spaces(text: str) -> str:
    return remove_whitespace(text)


def remove_all_numbers(text: str) -> str:
    return DIGIT_RUN_PATTERN.sub('', text)


def remove_alphanumeric(text: str) -> str:
    """
    Remove ASCII letters and digits, keeping everything else.

    Example:
        >>> remove_alphanumeric("!@#123abc$%^")
        '!@#$%^'
    """
    return ALPHANUMERIC_PATTERN.sub('', text)


def remove_special_chars(text: str) -> str:
    """
    Keep ASCII letters, digits, underscores and whitespace.

    Example:
        >>> remove_special_chars("He!!o W@rld#123")
        'Heo Wrld123'
        >>> remove_special_chars("Brook 🎸 sings")
        'Brook  sings'
    """
    return SPECIAL_CHAR_PATTERN.sub('', text)


def safe_string(text: str) -> str:
    return remove_special_chars(text)


def strip_punctuation(text: str) -> str:
    """
    Remove a fixed set of punctuation marks.

    The set is ``. ! @ # $ % ^ & * ( ) - _ = + { } [ ] : ; " / \\ , ~``.
    Question marks and apostrophes are kept.

    Example:
        >>> strip_punctuation("100,000 Berries!")
        '100000 Berries'
    """
    return PUNCTUATION_PATTERN.sub('', text)


def remove_vowels(text: str) -> str:
    return VOWEL_PATTERN.sub('', text)


def remove_consonants(text: str) -> str:
    """
    Remove ASCII consonants, keeping vowels, digits, whitespace and symbols.

    Example:
        >>> remove_consonants("Hello World 123!")
        'eo o 123!'
    """
    return CONSONANT_PATTERN.sub('', text)


def remove_diacritics(text: str) -> str:
    """
    Strip combining accent marks after canonical decomposition.

    Args:
        text: Text possibly containing accented characters

    Returns:
        Text with marks in U+0300..U+036F removed

    Example:
        >>> remove_diacritics("Jalapeño and crème brûlée")
        'Jalapeno and creme brulee'
    """
    return COMBINING_MARK_PATTERN.sub('', unicodedata.normalize('NFD', text))


def remove_duplicate_words(text: str) -> str:
    """
    Drop repeated space-separated words, keeping first occurrences.

    Empty tokens from runs of spaces are discarded and the result is joined
    with single spaces. Comparison is case-sensitive.

    Example:
        >>> remove_duplicate_words("Zoro   Sanji Zoro")
        'Zoro Sanji'
    """
    words = [word for word in text.split(' ') if word]
    return ' '.join(dict.fromkeys(words))


def remove_duplicates_words(text: str) -> str:
    """Drop repeated space-separated tokens without discarding empty ones."""
    return ' '.join(dict.fromkeys(text.split(' ')))


def remove_duplicate_chars(text: str) -> str:
    """
    Keep the first occurrence of each character.

    Example:
        >>> remove_duplicate_chars("onepiece")
        'onepic'
    """
    return ''.join(dict.fromkeys(text))


def strip_ansi_codes(text: str) -> str:
    """
    Remove ANSI terminal escape sequences.

    Example:
        >>> strip_ansi_codes("\\x1b[31mHello\\x1b[0m World")
        'Hello World'
    """
    return ANSI_ESCAPE_PATTERN.sub('', text)


def strip_leading_zeros(text: str) -> str:
    """Remove leading ``0`` characters; a lone ``"0"`` is kept."""
    if text == '0':
        return text
    return text.lstrip('0')
