"""
Encoding Module.

Forward/inverse codec pairs and related helpers:
- Base64, percent-encoding, binary and hex byte dumps (UTF-8 byte level)
- Named HTML escaping and numeric HTML entities (two separate families)
- HTML tag stripping
- ``\\uXXXX`` escape sequences (one per UTF-16 code unit)
- Code point arrays, UTF-8 byte buffers and tolerant JSON parsing

Decoders never raise on malformed input. They log the failure at debug
level and return the input unchanged (or None for JSON).
"""

import base64
import json
import re
from typing import Any, List, Optional, Union
from urllib.parse import quote, unquote

import structlog


logger = structlog.get_logger(__name__)


REPLACEMENT_CHARACTER = '\N{REPLACEMENT CHARACTER}'
MAX_CODE_POINT = 0x10FFFF

HTML_ESCAPE_TABLE = str.maketrans({
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&#039;',
})
HTML_UNESCAPE_MAP = {
    '&amp;': '&',
    '&lt;': '<',
    '&gt;': '>',
    '&quot;': '"',
    '&#039;': "'",
}
HTML_UNESCAPE_PATTERN = re.compile('|'.join(re.escape(entity) for entity in HTML_UNESCAPE_MAP))

NUMERIC_ENTITY_PATTERN = re.compile(r'&#(?:([0-9]{1,8})|[xX]([0-9a-fA-F]{1,8}));')
HTML_ENTITY_SPECIALS = '<>&"\''
HTML_ENTITY_MIN_CODE_POINT = 0xA0

SCRIPT_BLOCK_PATTERN = re.compile(r'<script[\s\S]*?>[\s\S]*?</script>', re.IGNORECASE)
STYLE_BLOCK_PATTERN = re.compile(r'<style[\s\S]*?>[\s\S]*?</style>', re.IGNORECASE)
TAG_PATTERN = re.compile(r'</?[a-z][\s\S]*?>', re.IGNORECASE)
ANY_TAG_PATTERN = re.compile(r'<[^>]*>')

UNICODE_ESCAPE_PATTERN = re.compile(r'\\u([0-9A-Fa-f]{4})')
BACKSLASH_ESCAPE_PATTERN = re.compile(r'\\(.)')


# =============================================================================
# Byte-level codecs
# =============================================================================

def base64_encode(text: str) -> str:
    """
    Encode the UTF-8 bytes of a string as standard Base64.

    Example:
        >>> base64_encode("Luffy")
        'THVmZnk='
    """
    return base64.b64encode(text.encode('utf-8')).decode('ascii')


def base64_decode(text: str) -> str:
    """
    Decode standard Base64 into a UTF-8 string.

    Missing ``=`` padding is restored before decoding.

    Args:
        text: Base64 text

    Returns:
        Decoded string, or ``text`` unchanged if it is not valid Base64 or
        does not decode to UTF-8

    Example:
        >>> base64_decode("T25lIFBpZWNlIQ==")
        'One Piece!'
    """
    padded = text + '=' * (-len(text) % 4)
    try:
        return base64.b64decode(padded, validate=True).decode('utf-8')
    except (ValueError, UnicodeDecodeError) as e:
        logger.debug("base64_decode_failed", error=str(e))
        return text


def percent_encode(text: str) -> str:
    """
    Percent-encode everything except ASCII letters, digits and ``-_.~``.

    Example:
        >>> percent_encode("hello world")
        'hello%20world'
        >>> percent_encode("ルフィ")
        '%E3%83%AB%E3%83%95%E3%82%A3'
    """
    return quote(text, safe='')


def percent_decode(text: str) -> str:
    """
    Decode ``%XX`` sequences as UTF-8.

    Returns ``text`` unchanged when the decoded bytes are not valid UTF-8.
    """
    try:
        return unquote(text, errors='strict')
    except UnicodeDecodeError as e:
        logger.debug("percent_decode_failed", error=str(e))
        return text


def convert_to_binary(text: str) -> str:
    """
    Dump the UTF-8 bytes of a string as space-separated 8-bit groups.

    Example:
        >>> convert_to_binary("Hi")
        '01001000 01101001'
    """
    return ' '.join(format(byte, '08b') for byte in text.encode('utf-8'))


def binary_to_string(text: str) -> str:
    """Inverse of ``convert_to_binary``; invalid input is returned unchanged."""
    try:
        data = bytes(int(group, 2) for group in text.split())
        return data.decode('utf-8')
    except (ValueError, UnicodeDecodeError) as e:
        logger.debug("binary_decode_failed", error=str(e))
        return text


def convert_to_hex(text: str) -> str:
    """
    Dump the UTF-8 bytes of a string as space-separated lowercase hex pairs.

    Example:
        >>> convert_to_hex("Hi")
        '48 69'
    """
    return ' '.join(format(byte, '02x') for byte in text.encode('utf-8'))


def hex_to_string(text: str) -> str:
    """Inverse of ``convert_to_hex``; invalid input is returned unchanged."""
    try:
        data = bytes(int(group, 16) for group in text.split())
        return data.decode('utf-8')
    except (ValueError, UnicodeDecodeError) as e:
        logger.debug("hex_decode_failed", error=str(e))
        return text


def string_to_bytes(text: str) -> bytes:
    return text.encode('utf-8')


def bytes_to_string(data: Union[bytes, bytearray, memoryview]) -> str:
    """Decode UTF-8 bytes, substituting U+FFFD for malformed sequences."""
    return bytes(data).decode('utf-8', errors='replace')


# =============================================================================
# HTML
# =============================================================================

def escape_html(text: str) -> str:
    """
    Escape ``& < > " '`` as named entities (``'`` becomes ``&#039;``).

    Example:
        >>> escape_html("He said \\"I'm King\\"")
        'He said &quot;I&#039;m King&quot;'
    """
    return text.translate(HTML_ESCAPE_TABLE)


def unescape_html(text: str) -> str:
    """
    Reverse ``escape_html`` in a single pass.

    Only the five entities ``escape_html`` produces are recognized, and an
    unescaped ``&`` is never re-read as the start of another entity.

    Example:
        >>> unescape_html("&amp;lt;")
        '&lt;'
    """
    return HTML_UNESCAPE_PATTERN.sub(lambda match: HTML_UNESCAPE_MAP[match.group(0)], text)


def html_entity_encode(text: str) -> str:
    """
    Encode ``< > & " '`` and every code point from U+00A0 up as ``&#N;``.

    Example:
        >>> html_entity_encode("<b>")
        '&#60;b&#62;'
    """
    return ''.join(
        f"&#{ord(char)};"
        if char in HTML_ENTITY_SPECIALS or ord(char) >= HTML_ENTITY_MIN_CODE_POINT
        else char
        for char in text
    )


def _numeric_entity(match: re.Match) -> str:
    decimal, hexadecimal = match.groups()
    code_point = int(decimal) if decimal is not None else int(hexadecimal, 16)
    if code_point > MAX_CODE_POINT:
        return match.group(0)
    return chr(code_point)


def html_entity_decode(text: str) -> str:
    """
    Decode decimal ``&#N;`` and hexadecimal ``&#xN;`` entities.

    Entities beyond U+10FFFF are left as-is.
    """
    return NUMERIC_ENTITY_PATTERN.sub(_numeric_entity, text)


def strip_html(text: str) -> str:
    """
    Remove HTML tags, dropping ``<script>`` and ``<style>`` blocks entirely.

    A ``<`` that does not start a tag name is kept, so plain comparisons in
    text survive. Passes repeat until nothing changes, so tags or blocks
    assembled from the pieces of a removed one are stripped too.

    Example:
        >>> strip_html("<script>alert('yo');</script>Robin")
        'Robin'
        >>> strip_html("<scr<script>x</script>ipt>alert(1)</script>")
        ''
        >>> strip_html("Use < or > for comparison")
        'Use < or > for comparison'
    """
    while True:
        stripped = SCRIPT_BLOCK_PATTERN.sub('', text)
        stripped = STYLE_BLOCK_PATTERN.sub('', stripped)
        # Tags are only stripped once no block matches
        if stripped == text:
            stripped = TAG_PATTERN.sub('', stripped)
            if stripped == text:
                return stripped
        text = stripped


def remove_html_tags(text: str) -> str:
    return ANY_TAG_PATTERN.sub('', text)


# =============================================================================
# Escapes, code points and JSON
# =============================================================================

def string_to_unicode(text: str) -> str:
    """
    Render every UTF-16 code unit as a lowercase ``\\uXXXX`` escape.

    Characters outside the BMP become a surrogate pair of escapes.

    Example:
        >>> string_to_unicode("Hi")
        '\\\\u0048\\\\u0069'
    """
    data = text.encode('utf-16-le', 'surrogatepass')
    return ''.join(
        '\\u' + format(int.from_bytes(data[index:index + 2], 'little'), '04x')
        for index in range(0, len(data), 2)
    )


def unicode_to_string(text: str) -> str:
    """
    Decode ``\\uXXXX`` escapes, rejoining surrogate pairs.

    Text outside the escapes is kept as-is. An unpaired surrogate escape
    decodes to a lone surrogate code point.
    """
    decoded = UNICODE_ESCAPE_PATTERN.sub(lambda match: chr(int(match.group(1), 16)), text)
    try:
        return decoded.encode('utf-16-le', 'surrogatepass').decode('utf-16-le')
    except UnicodeDecodeError as e:
        logger.debug("unpaired_surrogate", error=str(e))
        return decoded


def unescape_backslashes(text: str) -> str:
    """
    Drop a backslash in front of any character.

    Example:
        >>> unescape_backslashes('hello \\\\"world\\\\"')
        'hello "world"'
    """
    return BACKSLASH_ESCAPE_PATTERN.sub(r'\1', text)


def string_to_char_code_array(text: str) -> List[int]:
    return [ord(char) for char in text]


def char_code_array_to_string(codes: List[int]) -> str:
    """
    Build a string from code points.

    Values outside 0..U+10FFFF become U+FFFD.
    """
    return ''.join(
        chr(code) if 0 <= code <= MAX_CODE_POINT else REPLACEMENT_CHARACTER
        for code in codes
    )


def safe_json_parse(text: str) -> Optional[Any]:
    """
    Parse JSON, returning None instead of raising on invalid input.

    Example:
        >>> safe_json_parse('{"a": 1}')
        {'a': 1}
        >>> safe_json_parse("{a:1}") is None
        True
    """
    try:
        return json.loads(text)
    except ValueError as e:
        logger.debug("json_parse_failed", error=str(e))
        return None
