"""
Formatting Module.

Presentation helpers including:
- en-US currency formatting
- US phone number formatting and phone/email obfuscation
- Quote removal and wrapping
- File name extension handling and sanitization
"""

import os
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Dict, Tuple

import structlog

from strutils.validation import is_email


logger = structlog.get_logger(__name__)


# Currency code -> (symbol, fraction digits), en-US rendering
CURRENCY_FORMATS: Dict[str, Tuple[str, int]] = {
    'USD': ('$', 2),
    'EUR': ('€', 2),
    'GBP': ('£', 2),
    'JPY': ('¥', 0),
    'INR': ('₹', 2),
    'CAD': ('CA$', 2),
    'AUD': ('A$', 2),
    'CNY': ('CN¥', 2),
    'KRW': ('₩', 0),
    'MXN': ('MX$', 2),
}
DEFAULT_FRACTION_DIGITS = 2
NOT_A_NUMBER = 'NaN'

NON_DIGIT_PATTERN = re.compile(r'[^0-9]')
US_PHONE_PATTERN = re.compile(r'([0-9]{3})([0-9]{3})([0-9]{4})')
PHONE_OBFUSCATION_PATTERN = re.compile(r'([0-9]{5})([0-9]{4})(.*)')

QUOTE_PATTERNS = [
    re.compile(r'\A[\'"](.*)[\'"]\Z'),
    re.compile(r"\A'(.*)'\Z"),
    re.compile(r'\A"(.*)"\Z'),
]

UNSAFE_FILE_NAME_CHARS = re.compile(r'[^a-zA-Z0-9._-]')


def to_currency_format(num_str: str, currency: str = 'USD') -> str:
    """
    Format a numeric string as an en-US currency amount.

    Amounts are rounded half-up to the currency's fraction digits and
    grouped with commas. Known currencies use their symbol; other codes are
    rendered as the code followed by a no-break space.

    Args:
        num_str: Decimal number as text. Blank text counts as zero.
        currency: ISO 4217 currency code (default: USD)

    Returns:
        Formatted amount, or ``"NaN"`` when ``num_str`` is not a finite
        number

    Example:
        >>> to_currency_format("1234.56")
        '$1,234.56'
        >>> to_currency_format("1000", "EUR")
        '€1,000.00'
        >>> to_currency_format("abc")
        'NaN'
    """
    code = currency.upper()
    symbol, digits = CURRENCY_FORMATS.get(
        code, (f"{code}\N{NO-BREAK SPACE}", DEFAULT_FRACTION_DIGITS)
    )

    stripped = num_str.strip()
    try:
        amount = Decimal(stripped) if stripped else Decimal(0)
        if not amount.is_finite():
            return NOT_A_NUMBER
        with localcontext() as context:
            # Large amounts need enough precision to carry the fraction digits
            context.prec = max(context.prec, amount.adjusted() + digits + 2)
            amount = amount.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        logger.debug("currency_amount_invalid", value=num_str)
        return NOT_A_NUMBER

    sign = '-' if amount < 0 else ''
    return f"{sign}{symbol}{abs(amount):,.{digits}f}"


def format_phone_number(num: str) -> str:
    """
    Format a US phone number as ``(XXX) XXX-XXXX``.

    Non-digits are ignored. An 11-digit number with a leading ``1`` or ``0``
    has that prefix dropped. Anything else is returned unchanged.

    Example:
        >>> format_phone_number("18005551234")
        '(800) 555-1234'
        >>> format_phone_number("12345")
        '12345'
    """
    digits = NON_DIGIT_PATTERN.sub('', num)
    if len(digits) == 11 and digits[0] in '10':
        digits = digits[1:]
    if len(digits) != 10:
        return num
    return US_PHONE_PATTERN.sub(r'(\1) \2-\3', digits)


def obfuscate_email(email: str) -> str:
    """
    Hide all but the first character of an email's local part.

    Invalid addresses are logged and returned unchanged.

    Example:
        >>> obfuscate_email("luffy@onepiece.com")
        'l***@onepiece.com'
    """
    if not is_email(email):
        logger.warning("invalid_email", email=email)
        return email

    user, domain = email.split('@', 1)
    return f"{user[0]}***@{domain}"


def obfuscate_phone_number(num: str) -> str:
    """
    Mask digits 6 to 9 of a digit string with ``****``.

    The string must start with at least nine digits; otherwise it is
    returned unchanged.

    Example:
        >>> obfuscate_phone_number("1234567891234")
        '12345****1234'
    """
    match = PHONE_OBFUSCATION_PATTERN.fullmatch(num)
    if not match:
        return num
    return f"{match.group(1)}****{match.group(3)}"


def remove_quotes(text: str) -> str:
    """
    Strip surrounding quotes in three passes.

    The first pass removes any leading and trailing quote characters, even
    mismatched ones. The second then removes a matching single-quote pair
    and the third a matching double-quote pair, so up to two nested pairs
    can go.

    Example:
        >>> remove_quotes('"hello"')
        'hello'
        >>> remove_quotes('"hello\\'')
        'hello'
        >>> remove_quotes('"\\'hello\\'"')
        'hello'
        >>> remove_quotes('he"llo"')
        'he"llo"'
    """
    for pattern in QUOTE_PATTERNS:
        text = pattern.sub(r'\1', text)
    return text


def surround_with_quotes(text: str, quote_type: str = '"') -> str:
    return f"{quote_type}{text}{quote_type}"


def get_file_extension(file_name: str) -> str:
    """
    Extension of a file name without the dot.

    Hidden files such as ``.bashrc`` and names ending in a dot have no
    extension.

    Example:
        >>> get_file_extension("archive.tar.gz")
        'gz'
        >>> get_file_extension(".bashrc")
        ''
    """
    return os.path.splitext(file_name)[1][1:]


def remove_file_extension(file_name: str) -> str:
    """
    File name without its last extension.

    Example:
        >>> remove_file_extension("archive.tar.gz")
        'archive.tar'
    """
    return os.path.splitext(file_name)[0]


def sanitize_file_name(file_name: str) -> str:
    """
    Replace every character other than ASCII letters, digits, ``.``, ``_``
    and ``-`` with an underscore.

    Example:
        >>> sanitize_file_name("my:file/name?.txt")
        'my_file_name_.txt'
    """
    return UNSAFE_FILE_NAME_CHARS.sub('_', file_name)
