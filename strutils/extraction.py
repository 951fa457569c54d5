"""
Extraction Module.

Pattern-based extractors that pull structured pieces out of free text:
- Numbers, words and unique words
- Emails, URLs, hashtags, mentions and emoji
- Domain and top-level domain of a URL
- Sentences
- Initials and acronyms

Every extractor returns matches in order of appearance and never returns
None; no match yields an empty list. Only ``unique_words`` and
``get_unique_characters`` deduplicate.
"""

import re
from typing import List, Optional
from urllib.parse import urlsplit

import structlog


logger = structlog.get_logger(__name__)


DIGIT_RUN_PATTERN = re.compile(r'\d+', re.ASCII)
WORD_PATTERN = re.compile(r'\b\w+\b', re.ASCII)

# Simplified shapes, not RFC complete
EMAIL_PATTERN = re.compile(r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}')
URL_PATTERN = re.compile(r'https?://[^\s]+[a-zA-Z0-9]')
URL_EXTENDED_PATTERN = re.compile(r'(?:https?|ftp)://[^\s]+[a-zA-Z0-9]')
HASHTAG_PATTERN = re.compile(r'#\w+', re.ASCII)
MENTION_PATTERN = re.compile(r'@\w+', re.ASCII)

EMOJI_PATTERN = re.compile(
    '['
    '\U0001F600-\U0001F6FF'  # emoticons, transport
    '\U0001F300-\U0001F5FF'  # symbols & pictographs
    '\U0001F900-\U0001F9FF'  # supplemental symbols
    '\u2600-\u26FF'          # misc symbols
    '\u2700-\u27BF'          # dingbats
    ']'
)

# Terminal punctuation only counts when followed by whitespace or the end
SENTENCE_PATTERN = re.compile(r'\S.*?[.!?]+(?=\s|\Z)', re.DOTALL)


def extract_numbers(text: str) -> List[int]:
    """
    Extract every run of ASCII digits as an integer.

    Example:
        >>> extract_numbers("Chopper1-2-3")
        [1, 2, 3]
    """
    return [int(value) for value in DIGIT_RUN_PATTERN.findall(text)]


def extract_all_numbers(text: str) -> List[str]:
    """Extract every run of ASCII digits, keeping the literal text (leading zeros included)."""
    return DIGIT_RUN_PATTERN.findall(text)


def extract_words(text: str) -> List[str]:
    """
    Extract runs of word characters (letters, digits and underscore).

    Example:
        >>> extract_words("Zoro, the swordsman!")
        ['Zoro', 'the', 'swordsman']
    """
    return WORD_PATTERN.findall(text)


def split_to_words(text: str) -> List[str]:
    return text.split()


def unique_words(text: str) -> List[str]:
    """
    Lowercased words in order of first appearance, without repeats.

    Example:
        >>> unique_words("Hello world! hello World?")
        ['hello', 'world']
    """
    return list(dict.fromkeys(WORD_PATTERN.findall(text.lower())))


def extract_emails(text: str) -> List[str]:
    """
    Extract email-shaped substrings.

    A match needs a user part, ``@`` and a dotted domain ending in a label of
    at least two letters.

    Example:
        >>> extract_emails("Buggy@pirates, wrong@com, right@onepiece.com")
        ['right@onepiece.com']
    """
    return EMAIL_PATTERN.findall(text)


def extract_urls(text: str) -> List[str]:
    """
    Extract ``http`` and ``https`` URLs.

    A URL runs until the next whitespace and must end in an ASCII letter or
    digit, so trailing punctuation is left out.

    Example:
        >>> extract_urls("Read more at http://onepiece.com, then report back.")
        ['http://onepiece.com']
        >>> extract_urls("ftp://secretbase.onepiece")
        []
    """
    return URL_PATTERN.findall(text)


def extract_urls_extended(text: str) -> List[str]:
    """Like ``extract_urls`` but also accepts ``ftp://`` URLs."""
    return URL_EXTENDED_PATTERN.findall(text)


def extract_hashtags(text: str) -> List[str]:
    return HASHTAG_PATTERN.findall(text)


def extract_mentions(text: str) -> List[str]:
    return MENTION_PATTERN.findall(text)


def extract_emoji(text: str) -> List[str]:
    """
    Extract emoji code points from the common pictograph blocks.

    Example:
        >>> extract_emoji("😊😂❤")
        ['😊', '😂', '❤']
    """
    return EMOJI_PATTERN.findall(text)


def has_emoji(text: str) -> bool:
    return EMOJI_PATTERN.search(text) is not None


def _hostname(url: str) -> Optional[str]:
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
    except ValueError as e:
        logger.debug("url_parse_failed", url=url, error=str(e))
        return None

    if not parts.scheme or not hostname:
        return None
    return hostname


def extract_domain(url: str) -> Optional[str]:
    """
    Return the lowercased host name of an absolute URL.

    Args:
        url: Absolute URL with a scheme

    Returns:
        Host name, or None when the input does not parse as an absolute URL

    Example:
        >>> extract_domain("http://www.example.com/path")
        'www.example.com'
        >>> extract_domain("not a url") is None
        True
    """
    return _hostname(url)


def extract_tld(url: str) -> Optional[str]:
    """
    Return the last label of a URL's host name.

    Single-label hosts such as ``localhost`` have no TLD and yield None.

    Example:
        >>> extract_tld("http://www.example.co.uk/path")
        'uk'
        >>> extract_tld("http://localhost:3000") is None
        True
    """
    hostname = _hostname(url)
    if hostname is None:
        return None

    labels = hostname.split('.')
    if len(labels) < 2 or not labels[-1]:
        return None
    return labels[-1]


def extract_sentences(text: str) -> List[str]:
    """
    Split text into sentences terminated by ``.``, ``!`` or ``?``.

    Punctuation ends a sentence only when whitespace or the end of the text
    follows it, so ``example.com`` and ``3.14`` stay inside one sentence.
    A trailing fragment without terminal punctuation is dropped.

    Example:
        >>> extract_sentences("First sentence. Second one! trailing")
        ['First sentence.', 'Second one!']
        >>> extract_sentences("Pi is 3.14 ok! Wow!!")
        ['Pi is 3.14 ok!', 'Wow!!']
    """
    return [sentence.strip() for sentence in SENTENCE_PATTERN.findall(text)]


def count_sentences(text: str) -> int:
    """Number of sentences ``extract_sentences`` finds."""
    return len(extract_sentences(text))


def extract_initials(text: str) -> str:
    """
    Upper-cased first character of each whitespace-separated word.

    Example:
        >>> extract_initials("  First   Last  ")
        'FL'
        >>> extract_initials("Franky-San")
        'F'
    """
    return ''.join(word[0].upper() for word in text.split())


def get_initials(text: str) -> str:
    return extract_initials(text)


def generate_acronym(text: str) -> str:
    return extract_initials(text)


def get_unique_characters(text: str) -> List[str]:
    """Distinct characters in order of first appearance."""
    return list(dict.fromkeys(text))


def to_char_array(text: str) -> List[str]:
    return list(text)
