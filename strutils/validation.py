"""
Validation Module.

Boolean predicates over strings. Every predicate returns a plain ``bool``
and never raises on malformed input. The structural checks (email, URL,
UUID, IP, colors, password) are intentionally simplified shapes rather than
full RFC validators.
"""

import re
from typing import Any
from urllib.parse import urlsplit


ALPHA_PATTERN = re.compile(r'[A-Za-z]+')
ALPHANUMERIC_PATTERN = re.compile(r'[A-Za-z0-9]+')
NUMERIC_PATTERN = re.compile(r'[0-9]+')
WHITESPACE_ONLY_PATTERN = re.compile(r'\s*')
NON_ALPHANUMERIC_PATTERN = re.compile(r'[^a-zA-Z0-9]')

EMAIL_PATTERN = re.compile(r'[^\s@]+@[^\s@]+\.[^\s@]+')
UUID_V4_PATTERN = re.compile(
    r'[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}',
    re.IGNORECASE
)
IPV4_PATTERN = re.compile(r'(?:[0-9]{1,3}\.){3}[0-9]{1,3}')
HEX_COLOR_PATTERN = re.compile(r'#(?:[A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})')
RGB_COLOR_PATTERN = re.compile(r'rgb\((?:[0-9]{1,3},\s*){2}[0-9]{1,3}\)')
STRONG_PASSWORD_PATTERN = re.compile(
    r'(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[^\w\s:]).{8,}',
    re.ASCII | re.DOTALL
)

# Bare host names such as "example.com" are treated as http URLs
BARE_DOMAIN_PATTERN = re.compile(r'[a-zA-Z0-9.-]+\.[a-z]{2,}')
URL_SCHEMES = ('http', 'https', 'ftp')


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_alpha(text: str) -> bool:
    """True for a non-empty string of ASCII letters only."""
    return ALPHA_PATTERN.fullmatch(text) is not None


def is_alphanumeric(text: str) -> bool:
    return ALPHANUMERIC_PATTERN.fullmatch(text) is not None


def is_numeric_string(text: str) -> bool:
    """
    True for a non-empty string of ASCII digits.

    Signs, decimal points and exponents are rejected.

    Example:
        >>> is_numeric_string("12345")
        True
        >>> is_numeric_string("123.45")
        False
    """
    return NUMERIC_PATTERN.fullmatch(text) is not None


def is_empty(value: Any) -> bool:
    """True only for a string of length zero; None and non-strings are False."""
    return isinstance(value, str) and len(value) == 0


def is_blank(text: str) -> bool:
    return not text.strip()


def is_whitespace(text: str) -> bool:
    """True when every character is whitespace. The empty string qualifies."""
    return WHITESPACE_ONLY_PATTERN.fullmatch(text) is not None


def is_upper_case(text: str) -> bool:
    """
    True when upper-casing leaves the string unchanged.

    Strings without letters (including the empty string) are upper case by
    this rule; see ``is_all_upper_case`` for the stricter check.
    """
    return text == text.upper()


def is_lower_case(text: str) -> bool:
    return text == text.lower()


def is_all_upper_case(text: str) -> bool:
    """
    Upper case with at least one ASCII capital letter.

    Example:
        >>> is_all_upper_case("HELLO WORLD 123!")
        True
        >>> is_all_upper_case("1234!@#")
        False
    """
    return text == text.upper() and re.search(r'[A-Z]', text) is not None


def is_all_lower_case(text: str) -> bool:
    return text == text.lower() and re.search(r'[a-z]', text) is not None


def is_strict_palindrome(text: str) -> bool:
    return text == text[::-1]


def is_loose_palindrome(text: str) -> bool:
    """
    Palindrome check ignoring case and anything that is not an ASCII letter or digit.

    Example:
        >>> is_loose_palindrome("A man, a plan, a canal: Panama")
        True
    """
    cleaned = NON_ALPHANUMERIC_PATTERN.sub('', text).lower()
    return cleaned == cleaned[::-1]


def _anagram_key(text: str) -> str:
    return ''.join(sorted(re.sub(r'[^a-z0-9]', '', text.lower())))


def is_anagram(first: str, second: str) -> bool:
    """
    True when both strings use the same letters and digits.

    Case, whitespace and punctuation are ignored.

    Example:
        >>> is_anagram("Dormitory", "Dirty room!")
        True
    """
    return _anagram_key(first) == _anagram_key(second)


def is_email(text: str) -> bool:
    """
    Structural email check.

    Requires a local part without whitespace or ``@``, a single ``@`` and a
    dotted domain. This is not RFC 5322.

    Example:
        >>> is_email("chopper@mail.strawhat.com")
        True
        >>> is_email("brook@@strawhat.com")
        False
    """
    return EMAIL_PATTERN.fullmatch(text) is not None


def is_url(value: Any) -> bool:
    """
    Check whether a value is an http, https or ftp URL.

    Inputs starting with ``www.`` and bare domains like ``example.com`` are
    treated as ``http://`` URLs. Whitespace anywhere in the input rejects it.

    Args:
        value: Candidate URL

    Returns:
        True if the value parses as an absolute URL with an accepted scheme
        and a host

    Example:
        >>> is_url("https://www.example.com/path?query=value#hash")
        True
        >>> is_url("example.com")
        True
        >>> is_url("http:/example.com")
        False
    """
    if not isinstance(value, str) or not value:
        return False
    if any(char.isspace() for char in value):
        return False

    if value.startswith('www.') or BARE_DOMAIN_PATTERN.fullmatch(value):
        value = f"http://{value}"

    try:
        parts = urlsplit(value)
        # .port raises ValueError on a malformed port
        parts.port
    except ValueError:
        return False

    return parts.scheme.lower() in URL_SCHEMES and bool(parts.hostname)


def is_uuid(text: str) -> bool:
    """
    Version-4 UUID shape check (case-insensitive).

    The version nibble must be ``4`` and the variant nibble one of
    ``8``, ``9``, ``a`` or ``b``.

    Example:
        >>> is_uuid("123e4567-e89b-42d3-a456-426614174000")
        True
        >>> is_uuid("123e4567-e89b-22d3-a456-426614174000")
        False
    """
    return UUID_V4_PATTERN.fullmatch(text) is not None


def is_ip_address(text: str) -> bool:
    """Dotted-quad IPv4 check with each octet in 0..255."""
    if IPV4_PATTERN.fullmatch(text) is None:
        return False
    return all(int(octet) <= 255 for octet in text.split('.'))


def is_hex_color(text: str) -> bool:
    return HEX_COLOR_PATTERN.fullmatch(text) is not None


def is_rgb_color(text: str) -> bool:
    """
    ``rgb(r,g,b)`` shape check.

    Components are one to three digits each; values are not range checked,
    so ``rgb(300,0,0)`` passes.
    """
    return RGB_COLOR_PATTERN.fullmatch(text) is not None


def is_strong_password(text: str) -> bool:
    """
    Password strength check.

    Requires at least 8 characters with a lowercase letter, an uppercase
    letter, a digit and a symbol (anything other than a word character,
    whitespace or ``:``).

    Example:
        >>> is_strong_password("Abcdef1!")
        True
        >>> is_strong_password("Abcdef12")
        False
    """
    return STRONG_PASSWORD_PATTERN.fullmatch(text) is not None


def ends_with_punctuation(text: str) -> bool:
    return text.endswith(('.', '!', '?'))
