"""
strutils - string transformation and inspection functions.

Modules:
- casing: camel/kebab/snake/pascal/dot/space/title case, slugs
- padding: padding, trimming, repeating, wrapping, truncation, whitespace
- search: substring tests, counting, replace, mask, highlight, safe access
- extraction: numbers, words, emails, URLs, hashtags, mentions, emoji, sentences
- cleaning: removal of character classes, duplicates, ANSI codes, diacritics
- validation: boolean predicates
- encoding: Base64, percent, binary/hex, HTML, unicode escapes, JSON
- analytics: counters, frequency tables, edit distance, similarity
- randomness: random strings, UUIDs and shuffles with an injectable source
- editing: index-based edits, reversal, rotation, chunking, sorting
- formatting: currency, phone numbers, obfuscation, quotes, file names
- config / log_config: settings and structlog setup
"""

from strutils.config import (
    Settings,
    get_settings,
    reload_settings,
)

from strutils.log_config import configure_logging

from strutils.casing import (
    capitalize,
    decapitalize,
    to_upper_first_char,
    to_lower_first_char,
    to_camel_case,
    to_kebab_case,
    to_snake_case,
    to_pascal_case,
    to_dot_case,
    to_space_case,
    title_case,
    to_title_case,
    swap_case,
    toggle_case,
    alternate_case,
    camel_to_snake,
    snake_to_camel,
    slug_to_camel_case,
    camel_case_to_slug,
    capitalize_sentences,
    slugify,
    title_to_slug,
)

from strutils.padding import (
    RepeatCountError,
    pad_left,
    pad_right,
    pad_center,
    trim_start,
    trim_end,
    trim_char,
    repeat,
    repeat_string_until_length,
    repeat_with_separator,
    wrap,
    ensure_starts_with,
    ensure_ends_with,
    remove_trailing_slash,
    remove_leading_slash,
    truncate,
    truncate_words,
    compress_whitespace,
    compact_whitespace,
    collapse_newlines,
)

from strutils.search import (
    contains,
    starts_with,
    ends_with,
    contains_any,
    starts_with_any,
    ends_with_any,
    count_occurrences,
    count_character_occurrences,
    replace_all,
    mask_string,
    highlight_substr,
    get_all_indexes_of,
    censor,
    has_repeated_characters,
    contains_uppercase,
    contains_lowercase,
    get_char_at_safe,
    get_nth_word,
    get_first_n_chars,
    get_last_n_chars,
    get_middle_character,
    get_first_line,
    get_last_line,
)

from strutils.extraction import (
    extract_numbers,
    extract_all_numbers,
    extract_words,
    split_to_words,
    unique_words,
    extract_emails,
    extract_urls,
    extract_urls_extended,
    extract_hashtags,
    extract_mentions,
    extract_emoji,
    has_emoji,
    extract_domain,
    extract_tld,
    extract_sentences,
    count_sentences,
    extract_initials,
    get_initials,
    generate_acronym,
    get_unique_characters,
    to_char_array,
)

from strutils.cleaning import (
    remove_non_alpha,
    remove_non_numeric,
    remove_whitespace,
    strip_spaces,
    remove_all_numbers,
    remove_alphanumeric,
    remove_special_chars,
    safe_string,
    strip_punctuation,
    remove_vowels,
    remove_consonants,
    remove_diacritics,
    remove_duplicate_words,
    remove_duplicates_words,
    remove_duplicate_chars,
    strip_ansi_codes,
    strip_leading_zeros,
)

from strutils.validation import (
    is_string,
    is_alpha,
    is_alphanumeric,
    is_numeric_string,
    is_empty,
    is_blank,
    is_whitespace,
    is_upper_case,
    is_lower_case,
    is_all_upper_case,
    is_all_lower_case,
    is_strict_palindrome,
    is_loose_palindrome,
    is_anagram,
    is_email,
    is_url,
    is_uuid,
    is_ip_address,
    is_hex_color,
    is_rgb_color,
    is_strong_password,
    ends_with_punctuation,
)

from strutils.encoding import (
    base64_encode,
    base64_decode,
    percent_encode,
    percent_decode,
    convert_to_binary,
    binary_to_string,
    convert_to_hex,
    hex_to_string,
    string_to_bytes,
    bytes_to_string,
    escape_html,
    unescape_html,
    html_entity_encode,
    html_entity_decode,
    strip_html,
    remove_html_tags,
    string_to_unicode,
    unicode_to_string,
    unescape_backslashes,
    string_to_char_code_array,
    char_code_array_to_string,
    safe_json_parse,
)

from strutils.analytics import (
    levenshtein_distance,
    levenshtein_similarity,
    string_similarity,
    char_frequency,
    count_words,
    count_words_by_length,
    count_vowels,
    count_consonants,
    count_punctuation,
    count_uppercase,
    count_lowercase,
    count_lines,
    get_byte_length,
    string_to_ascii_sum,
    get_longest_word,
    get_shortest_word,
)

from strutils.randomness import (
    RandomSource,
    default_random_source,
    reset_default_random_source,
    random_string,
    random_string_base36,
    generate_uuid,
    shuffle_characters,
)

from strutils.editing import (
    reverse,
    reverse_words,
    reverse_each_word,
    reverse_sentences,
    mirror_string,
    insert_at,
    remove_at,
    replace_at,
    rotate_string,
    split_by_length,
    sort_words,
)

from strutils.formatting import (
    to_currency_format,
    format_phone_number,
    obfuscate_email,
    obfuscate_phone_number,
    remove_quotes,
    surround_with_quotes,
    get_file_extension,
    remove_file_extension,
    sanitize_file_name,
)

__all__ = [
    # Configuration
    'Settings',
    'get_settings',
    'reload_settings',
    'configure_logging',

    # Casing
    'capitalize',
    'decapitalize',
    'to_upper_first_char',
    'to_lower_first_char',
    'to_camel_case',
    'to_kebab_case',
    'to_snake_case',
    'to_pascal_case',
    'to_dot_case',
    'to_space_case',
    'title_case',
    'to_title_case',
    'swap_case',
    'toggle_case',
    'alternate_case',
    'camel_to_snake',
    'snake_to_camel',
    'slug_to_camel_case',
    'camel_case_to_slug',
    'capitalize_sentences',
    'slugify',
    'title_to_slug',

    # Padding & trimming
    'RepeatCountError',
    'pad_left',
    'pad_right',
    'pad_center',
    'trim_start',
    'trim_end',
    'trim_char',
    'repeat',
    'repeat_string_until_length',
    'repeat_with_separator',
    'wrap',
    'ensure_starts_with',
    'ensure_ends_with',
    'remove_trailing_slash',
    'remove_leading_slash',
    'truncate',
    'truncate_words',
    'compress_whitespace',
    'compact_whitespace',
    'collapse_newlines',

    # Search
    'contains',
    'starts_with',
    'ends_with',
    'contains_any',
    'starts_with_any',
    'ends_with_any',
    'count_occurrences',
    'count_character_occurrences',
    'replace_all',
    'mask_string',
    'highlight_substr',
    'get_all_indexes_of',
    'censor',
    'has_repeated_characters',
    'contains_uppercase',
    'contains_lowercase',
    'get_char_at_safe',
    'get_nth_word',
    'get_first_n_chars',
    'get_last_n_chars',
    'get_middle_character',
    'get_first_line',
    'get_last_line',

    # Extraction
    'extract_numbers',
    'extract_all_numbers',
    'extract_words',
    'split_to_words',
    'unique_words',
    'extract_emails',
    'extract_urls',
    'extract_urls_extended',
    'extract_hashtags',
    'extract_mentions',
    'extract_emoji',
    'has_emoji',
    'extract_domain',
    'extract_tld',
    'extract_sentences',
    'count_sentences',
    'extract_initials',
    'get_initials',
    'generate_acronym',
    'get_unique_characters',
    'to_char_array',

    # Cleaning
    'remove_non_alpha',
    'remove_non_numeric',
    'remove_whitespace',
    'strip_spaces',
    'remove_all_numbers',
    'remove_alphanumeric',
    'remove_special_chars',
    'safe_string',
    'strip_punctuation',
    'remove_vowels',
    'remove_consonants',
    'remove_diacritics',
    'remove_duplicate_words',
    'remove_duplicates_words',
    'remove_duplicate_chars',
    'strip_ansi_codes',
    'strip_leading_zeros',

    # Validation
    'is_string',
    'is_alpha',
    'is_alphanumeric',
    'is_numeric_string',
    'is_empty',
    'is_blank',
    'is_whitespace',
    'is_upper_case',
    'is_lower_case',
    'is_all_upper_case',
    'is_all_lower_case',
    'is_strict_palindrome',
    'is_loose_palindrome',
    'is_anagram',
    'is_email',
    'is_url',
    'is_uuid',
    'is_ip_address',
    'is_hex_color',
    'is_rgb_color',
    'is_strong_password',
    'ends_with_punctuation',

    # Encoding
    'base64_encode',
    'base64_decode',
    'percent_encode',
    'percent_decode',
    'convert_to_binary',
    'binary_to_string',
    'convert_to_hex',
    'hex_to_string',
    'string_to_bytes',
    'bytes_to_string',
    'escape_html',
    'unescape_html',
    'html_entity_encode',
    'html_entity_decode',
    'strip_html',
    'remove_html_tags',
    'string_to_unicode',
    'unicode_to_string',
    'unescape_backslashes',
    'string_to_char_code_array',
    'char_code_array_to_string',
    'safe_json_parse',

    # Analytics
    'levenshtein_distance',
    'levenshtein_similarity',
    'string_similarity',
    'char_frequency',
    'count_words',
    'count_words_by_length',
    'count_vowels',
    'count_consonants',
    'count_punctuation',
    'count_uppercase',
    'count_lowercase',
    'count_lines',
    'get_byte_length',
    'string_to_ascii_sum',
    'get_longest_word',
    'get_shortest_word',

    # Randomness
    'RandomSource',
    'default_random_source',
    'reset_default_random_source',
    'random_string',
    'random_string_base36',
    'generate_uuid',
    'shuffle_characters',

    # Editing
    'reverse',
    'reverse_words',
    'reverse_each_word',
    'reverse_sentences',
    'mirror_string',
    'insert_at',
    'remove_at',
    'replace_at',
    'rotate_string',
    'split_by_length',
    'sort_words',

    # Formatting
    'to_currency_format',
    'format_phone_number',
    'obfuscate_email',
    'obfuscate_phone_number',
    'remove_quotes',
    'surround_with_quotes',
    'get_file_extension',
    'remove_file_extension',
    'sanitize_file_name',
]
