"""
Randomization Module.

Generators for random strings, base-36 strings, version-4 style UUIDs and
character shuffles.

Every generator takes an optional ``rng``: a zero-argument callable that
returns a float in ``[0, 1)``. When omitted, a process-wide
``random.Random`` is used, seeded from ``Settings.random_seed`` (OS entropy
when unset). The generator is not cryptographically secure; use
``secrets`` for tokens, passwords or anything security sensitive.
"""

import random
from typing import Callable, Optional

import structlog

from strutils.config import get_settings


logger = structlog.get_logger(__name__)


RandomSource = Callable[[], float]

ALPHANUMERIC_ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789'
BASE36_ALPHABET = '0123456789abcdefghijklmnopqrstuvwxyz'
HEX_ALPHABET = '0123456789abcdef'
UUID_TEMPLATE = 'xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx'

_default_random: Optional[random.Random] = None


def reset_default_random_source(seed: Optional[int] = None) -> None:
    """
    Rebuild the process-wide generator.

    Args:
        seed: Explicit seed. Defaults to ``Settings.random_seed``.
    """
    global _default_random
    if seed is None:
        seed = get_settings().random_seed
    _default_random = random.Random(seed)
    logger.debug("default_random_source_reset", seeded=seed is not None)


def default_random_source() -> RandomSource:
    """Return the process-wide source, creating it on first use."""
    if _default_random is None:
        reset_default_random_source()
    return _default_random.random


def _random_index(rng: RandomSource, size: int) -> int:
    # Clamp so a source returning exactly 1.0 still yields a valid index
    return min(int(rng() * size), size - 1)


def _random_chars(alphabet: str, length: int, rng: Optional[RandomSource]) -> str:
    if length <= 0:
        return ''
    rng = rng or default_random_source()
    return ''.join(alphabet[_random_index(rng, len(alphabet))] for _ in range(length))


def random_string(length: int, rng: Optional[RandomSource] = None) -> str:
    """
    Generate a random string of ASCII letters and digits.

    Args:
        length: Number of characters. Zero or negative yields ``""``.
        rng: Random source returning floats in ``[0, 1)``

    Returns:
        Random alphanumeric string of exactly ``length`` characters

    Example:
        >>> random_string(4, rng=lambda: 0.0)
        'AAAA'
    """
    return _random_chars(ALPHANUMERIC_ALPHABET, length, rng)


def random_string_base36(length: int, rng: Optional[RandomSource] = None) -> str:
    """Generate a random string of lowercase base-36 digits (``0-9a-z``)."""
    return _random_chars(BASE36_ALPHABET, length, rng)


def generate_uuid(rng: Optional[RandomSource] = None) -> str:
    """
    Generate a random UUID string in version-4 layout.

    The version nibble is always ``4`` and the variant nibble is one of
    ``8``, ``9``, ``a`` or ``b``.

    Example:
        >>> generate_uuid(rng=lambda: 0.0)
        '00000000-0000-4000-8000-000000000000'
    """
    rng = rng or default_random_source()
    chars = []
    for placeholder in UUID_TEMPLATE:
        if placeholder == 'x':
            chars.append(HEX_ALPHABET[_random_index(rng, 16)])
        elif placeholder == 'y':
            chars.append(HEX_ALPHABET[_random_index(rng, 16) & 0x3 | 0x8])
        else:
            chars.append(placeholder)
    return ''.join(chars)


def shuffle_characters(text: str, rng: Optional[RandomSource] = None) -> str:
    """
    Return the characters of ``text`` in random order (Fisher-Yates).

    The result is a permutation: same length and same multiset of
    characters.
    """
    rng = rng or default_random_source()
    chars = list(text)
    for i in range(len(chars) - 1, 0, -1):
        j = _random_index(rng, i + 1)
        chars[i], chars[j] = chars[j], chars[i]
    return ''.join(chars)
