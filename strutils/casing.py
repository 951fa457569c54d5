"""
Case Conversion Module.

Provides functions for converting between naming conventions including:
- camelCase, PascalCase, kebab-case, snake_case, dot.case and space case
- Title casing and first-character casing
- Per-character case inversion
- URL slugs

All conversions treat runs of whitespace, hyphens and underscores as word
boundaries, along with lower-to-upper and digit-to-letter transitions where
a convention calls for them.
"""

import re


# Word boundary patterns
ALREADY_CAMEL_PATTERN = re.compile(r'^[a-z][a-zA-Z0-9]*$')
SEPARATOR_THEN_CHAR_PATTERN = re.compile(r'[^a-zA-Z0-9]+(\w)', re.ASCII)
LEADING_LETTER_PATTERN = re.compile(r'^[^a-zA-Z0-9]*([a-zA-Z])')
LOWER_UPPER_PATTERN = re.compile(r'([a-z])([A-Z])')       # fooBar
DIGIT_LETTER_PATTERN = re.compile(r'(\d)([a-zA-Z])', re.ASCII)  # id1And
NON_ALNUM_RUN_PATTERN = re.compile(r'[^a-zA-Z0-9]+')

# Slug patterns
SLUG_DROP_PATTERN = re.compile(r'[^\w\s-]', re.ASCII)
SLUG_SEPARATOR_PATTERN = re.compile(r'[\s_-]+')
SLUG_EDGE_DASHES_PATTERN = re.compile(r'^-+|-+$')

SENTENCE_START_PATTERN = re.compile(r'(^\s*\w|[.!?]\s*\w)', re.ASCII)
WORD_START_PATTERN = re.compile(r'\b\w', re.ASCII)


def _upper_first_lower_rest(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def capitalize(text: str) -> str:
    """
    Upper-case the first character and leave the rest untouched.

    Example:
        >>> capitalize("hElLo")
        'HElLo'
        >>> capitalize("123abc")
        '123abc'
    """
    return text[:1].upper() + text[1:]


def decapitalize(text: str) -> str:
    """Lower-case the first character and leave the rest untouched."""
    return text[:1].lower() + text[1:]


def to_upper_first_char(text: str) -> str:
    return capitalize(text)


def to_lower_first_char(text: str) -> str:
    return decapitalize(text)


def to_camel_case(text: str) -> str:
    """
    Convert a mixed-delimiter string to camelCase.

    Strings that are already camelCase are returned unchanged. Otherwise the
    string is lowercased and every run of non-alphanumeric characters is
    collapsed into the upper-cased character that follows it.

    Args:
        text: String with spaces, hyphens, underscores or other separators

    Returns:
        camelCase string

    Example:
        >>> to_camel_case("hello_world -foo bar")
        'helloWorldFooBar'
        >>> to_camel_case("HELLO_WORLD")
        'helloWorld'
        >>> to_camel_case("hello-123-world")
        'hello123World'
    """
    if ALREADY_CAMEL_PATTERN.match(text):
        return text

    converted = SEPARATOR_THEN_CHAR_PATTERN.sub(
        lambda match: match.group(1).upper(), text.lower()
    )
    return LEADING_LETTER_PATTERN.sub(
        lambda match: match.group(1).lower(), converted, count=1
    )


def to_kebab_case(text: str) -> str:
    """
    Convert a string to kebab-case.

    Example:
        >>> to_kebab_case("helloWorld foo_bar")
        'hello-world-foo-bar'
        >>> to_kebab_case("hello123World")
        'hello123-world'
    """
    converted = LOWER_UPPER_PATTERN.sub(r'\1-\2', text.strip())
    converted = DIGIT_LETTER_PATTERN.sub(r'\1-\2', converted)
    converted = re.sub(r'[\s_]+', '-', converted)
    return converted.lower()


def to_snake_case(text: str) -> str:
    """
    Convert a string to snake_case.

    Example:
        >>> to_snake_case("userID1AndID2")
        'user_id1_and_id2'
        >>> to_snake_case("mix-It Up Now")
        'mix_it_up_now'
    """
    converted = LOWER_UPPER_PATTERN.sub(r'\1_\2', text)
    converted = DIGIT_LETTER_PATTERN.sub(r'\1_\2', converted)
    converted = re.sub(r'[\s-]+', '_', converted)
    return converted.lower()


def to_pascal_case(text: str) -> str:
    """
    Convert a string to PascalCase.

    Any run of non-alphanumeric characters separates words. Each word is
    capitalized and the remainder lowercased.

    Example:
        >>> to_pascal_case("gEar foUR SnAke MaN")
        'GearFourSnakeMan'
        >>> to_pascal_case("gear 5 nika")
        'Gear5Nika'
    """
    words = NON_ALNUM_RUN_PATTERN.sub(' ', text).strip().split(' ')
    return ''.join(_upper_first_lower_rest(word) for word in words)


def to_dot_case(text: str) -> str:
    """Join whitespace-separated words with dots, lowercased."""
    return re.sub(r'\s+', '.', text.strip()).lower()


def to_space_case(text: str) -> str:
    """
    Replace underscores and hyphens with spaces and split camel humps.

    Example:
        >>> to_space_case("thousandSunny_go")
        'thousand Sunny go'
    """
    spaced = re.sub(r'[_-]+', ' ', text)
    return LOWER_UPPER_PATTERN.sub(r'\1 \2', spaced)


def title_case(text: str) -> str:
    """
    Title-case each word, collapsing inner whitespace.

    Leading and trailing whitespace is preserved as-is.

    Args:
        text: Text to title-case

    Returns:
        Text with every word capitalized and the rest of each word lowercased

    Example:
        >>> title_case("Grand LINE adventure")
        'Grand Line Adventure'
        >>> title_case("  pirate king  ")
        '  Pirate King  '
    """
    stripped = text.strip()
    if not stripped:
        return text

    leading = text[:len(text) - len(text.lstrip())]
    trailing = text[len(text.rstrip()):]
    titled = ' '.join(_upper_first_lower_rest(word) for word in stripped.split())
    return leading + titled + trailing


def to_title_case(text: str) -> str:
    """Upper-case the first character of every word, leaving the rest untouched."""
    return WORD_START_PATTERN.sub(lambda match: match.group(0).upper(), text)


def swap_case(text: str) -> str:
    """
    Invert the case of every character.

    A character equal to its own upper-case form is lowered, anything else is
    raised, so digits and punctuation pass through unchanged.

    Example:
        >>> swap_case("Luffy123!")
        'lUFFY123!'
    """
    return ''.join(
        char.lower() if char == char.upper() else char.upper()
        for char in text
    )


def toggle_case(text: str) -> str:
    return swap_case(text)


def alternate_case(text: str) -> str:
    """
    Force a strict upper/lower pattern starting with upper at index 0.

    Example:
        >>> alternate_case("HelloWorld")
        'HeLlOwOrLd'
    """
    return ''.join(
        char.lower() if index % 2 else char.upper()
        for index, char in enumerate(text)
    )


def camel_to_snake(text: str) -> str:
    """
    Prefix every upper-case ASCII letter with an underscore and lower it.

    Example:
        >>> camel_to_snake("onePieceIsReal")
        'one_piece_is_real'
        >>> camel_to_snake("RedLine")
        '_red_line'
    """
    return re.sub(r'[A-Z]', lambda match: '_' + match.group(0).lower(), text)


def snake_to_camel(text: str) -> str:
    """
    Convert snake_case to camelCase, dropping stray edge underscores.

    Example:
        >>> snake_to_camel("one_piece_is_real")
        'onePieceIsReal'
        >>> snake_to_camel("luffy_")
        'luffy'
    """
    converted = re.sub(r'(_\w)', lambda match: match.group(1)[1].upper(), text, flags=re.ASCII)
    return converted.strip('_')


def slug_to_camel_case(text: str) -> str:
    return re.sub(r'-([a-z])', lambda match: match.group(1).upper(), text)


def camel_case_to_slug(text: str) -> str:
    return LOWER_UPPER_PATTERN.sub(r'\1-\2', text).lower()


def capitalize_sentences(text: str) -> str:
    """
    Upper-case the first word character of every sentence.

    Example:
        >>> capitalize_sentences("hello world. how are you?")
        'Hello world. How are you?'
    """
    return SENTENCE_START_PATTERN.sub(lambda match: match.group(0).upper(), text)


def slugify(text: str) -> str:
    """
    Create a URL slug from arbitrary text.

    Lowercases, drops everything except word characters, whitespace and
    hyphens, collapses separator runs to a single hyphen and trims hyphens
    from both ends.

    Args:
        text: Text to slugify

    Returns:
        URL-safe slug, or an empty string if nothing survives

    Example:
        >>> slugify("Chapter 1050: The Final War")
        'chapter-1050-the-final-war'
        >>> slugify("--Zoro--")
        'zoro'
    """
    slug = SLUG_DROP_PATTERN.sub('', text.lower().strip())
    slug = SLUG_SEPARATOR_PATTERN.sub('-', slug)
    return SLUG_EDGE_DASHES_PATTERN.sub('', slug)


def title_to_slug(text: str) -> str:
    """
    Create a slug, keeping existing hyphen runs intact.

    Example:
        >>> title_to_slug("  Another  Example--For You  ")
        'another-example--for-you'
    """
    slug = SLUG_DROP_PATTERN.sub('', text.lower()).strip()
    return re.sub(r'\s+', '-', slug)
