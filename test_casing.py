"""
Validation tests for case conversion functions.

Covers camel/kebab/snake/pascal/dot/space conversions, title casing,
per-character case inversion and slugs.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from strutils.casing import (
    alternate_case,
    camel_case_to_slug,
    camel_to_snake,
    capitalize,
    capitalize_sentences,
    decapitalize,
    slug_to_camel_case,
    slugify,
    snake_to_camel,
    swap_case,
    title_case,
    title_to_slug,
    to_camel_case,
    to_dot_case,
    to_kebab_case,
    to_lower_first_char,
    to_pascal_case,
    to_snake_case,
    to_space_case,
    to_title_case,
    to_upper_first_char,
    toggle_case,
)


def _check(func, cases):
    for value, expected in cases:
        result = func(value)
        print(f"  {func.__name__}({value!r}) -> {result!r}")
        assert result == expected, f"{func.__name__}({value!r}): expected {expected!r}, got {result!r}"


def test_capitalize():
    """Test that only the first character is upper-cased."""
    print("Testing capitalize...")
    _check(capitalize, [
        ("hello", "Hello"),
        ("h", "H"),
        ("", ""),
        (" hello", " hello"),
        ("hElLo", "HElLo"),
        ("!hello", "!hello"),
        ("this is a it", "This is a it"),
        ("123abc", "123abc"),
        ("HELLO", "HELLO"),
    ])
    assert to_upper_first_char("helloWorld") == "HelloWorld"
    print("✓ capitalize tests passed")


def test_decapitalize():
    """Test that only the first character is lower-cased."""
    print("\nTesting decapitalize...")
    for func in (decapitalize, to_lower_first_char):
        _check(func, [
            ("HelloWorld", "helloWorld"),
            ("helloWorld", "helloWorld"),
            ("", ""),
        ])
    print("✓ decapitalize tests passed")


def test_to_camel_case():
    """Test camelCase conversion across delimiter styles."""
    print("\nTesting to_camel_case...")
    _check(to_camel_case, [
        ("hello_world -foo bar", "helloWorldFooBar"),
        ("hello-world", "helloWorld"),
        ("hello_world", "helloWorld"),
        ("hello world", "helloWorld"),
        ("helloWorld", "helloWorld"),
        ("hello", "hello"),
        ("", ""),
        ("Hello World", "helloWorld"),
        ("hello---world__foo bar", "helloWorldFooBar"),
        ("hello-123-world", "hello123World"),
        ("HELLO_WORLD", "helloWorld"),
        ("hello & world", "helloWorld"),
    ])
    print("✓ to_camel_case tests passed")


def test_to_kebab_case():
    """Test kebab-case conversion."""
    print("\nTesting to_kebab_case...")
    _check(to_kebab_case, [
        ("helloWorld", "hello-world"),
        ("hello_world", "hello-world"),
        ("helloWorld foo_bar", "hello-world-foo-bar"),
        ("", ""),
        ("HelloWorld", "hello-world"),
        ("hello123World", "hello123-world"),
        ("hello___world    foo bar", "hello-world-foo-bar"),
        ("HELLO_WORLD", "hello-world"),
        ("  hello world  ", "hello-world"),
    ])
    print("✓ to_kebab_case tests passed")


def test_to_snake_case():
    """Test snake_case conversion including digit boundaries."""
    print("\nTesting to_snake_case...")
    _check(to_snake_case, [
        ("camelCaseExample", "camel_case_example"),
        ("PascalCaseExample", "pascal_case_example"),
        ("this-is-a-it", "this_is_a_it"),
        ("multiple   spaces---and---hyphens", "multiple_spaces_and_hyphens"),
        ("already_snake_case", "already_snake_case"),
        ("THISISAit", "thisisait"),
        ("", ""),
        ("mix-It Up Now", "mix_it_up_now"),
        ("userID1AndID2", "user_id1_and_id2"),
    ])
    print("✓ to_snake_case tests passed")


def test_to_pascal_case():
    """Test PascalCase conversion."""
    print("\nTesting to_pascal_case...")
    _check(to_pascal_case, [
        ("luffy", "Luffy"),
        ("straw hat pirates", "StrawHatPirates"),
        ("gEar foUR SnAke MaN", "GearFourSnakeMan"),
        ("  going    merry ship  ", "GoingMerryShip"),
        ("", ""),
        ("     ", ""),
        ("gear 5 nika", "Gear5Nika"),
        ("wano-kuni arc", "WanoKuniArc"),
        ("thriller_bark saga", "ThrillerBarkSaga"),
    ])
    print("✓ to_pascal_case tests passed")


def test_dot_and_space_case():
    """Test dot.case and space case conversions."""
    print("\nTesting to_dot_case / to_space_case...")
    _check(to_dot_case, [
        ("Straw Hat Pirates", "straw.hat.pirates"),
        ("  Thousand Sunny  ", "thousand.sunny"),
        ("Wano_kuni Arc", "wano_kuni.arc"),
        ("", ""),
    ])
    _check(to_space_case, [
        ("wano_kuni", "wano kuni"),
        ("goingMerryShip", "going Merry Ship"),
        ("thousandSunny_go", "thousand Sunny go"),
        ("one__piece--arc", "one piece arc"),
        ("", ""),
    ])
    print("✓ dot/space case tests passed")


def test_title_case():
    """Test title casing keeps edge whitespace and collapses inner runs."""
    print("\nTesting title_case...")
    _check(title_case, [
        ("the straw hat pirates", "The Straw Hat Pirates"),
        ("Grand LINE adventure", "Grand Line Adventure"),
        ("", ""),
        ("Monkey   D    Luffy", "Monkey D Luffy"),
        ("  pirate king  ", "  Pirate King  "),
        ("   ", "   "),
    ])
    _check(to_title_case, [
        ("hello world", "Hello World"),
        ("hello wORLD", "Hello WORLD"),
        ("", ""),
    ])
    print("✓ title case tests passed")


def test_case_inversion():
    """Test swap_case, toggle_case and alternate_case."""
    print("\nTesting case inversion...")
    for func in (swap_case, toggle_case):
        _check(func, [
            ("One Piece", "oNE pIECE"),
            ("Luffy123!", "lUFFY123!"),
            ("!@# $%^", "!@# $%^"),
            ("", ""),
        ])
    _check(alternate_case, [
        ("hello", "HeLlO"),
        ("HelloWorld", "HeLlOwOrLd"),
        ("", ""),
    ])
    print("✓ case inversion tests passed")


def test_camel_snake_slug_round_trips():
    """Test the direct camel/snake/slug converters."""
    print("\nTesting camel_to_snake / snake_to_camel / slug converters...")
    _check(camel_to_snake, [
        ("grandLine", "grand_line"),
        ("RedLine", "_red_line"),
        ("nami", "nami"),
        ("", ""),
    ])
    _check(snake_to_camel, [
        ("straw_hat", "strawHat"),
        ("one_piece_is_real", "onePieceIsReal"),
        ("luffy_", "luffy"),
        ("", ""),
    ])
    _check(slug_to_camel_case, [
        ("hello-world-again", "helloWorldAgain"),
        ("hello", "hello"),
    ])
    _check(camel_case_to_slug, [
        ("helloWorldAgain", "hello-world-again"),
        ("Hello", "hello"),
    ])
    print("✓ direct converter tests passed")


def test_capitalize_sentences():
    """Test sentence-start capitalization."""
    print("\nTesting capitalize_sentences...")
    _check(capitalize_sentences, [
        ("hello world. how are you?", "Hello world. How are you?"),
        ("Hello World. How Are You?", "Hello World. How Are You?"),
        ("", ""),
    ])
    print("✓ capitalize_sentences tests passed")


def test_slugs():
    """Test slugify and title_to_slug."""
    print("\nTesting slugify / title_to_slug...")
    _check(slugify, [
        ("One Piece", "one-piece"),
        ("  Straw Hat  ", "straw-hat"),
        ("Luffy! @# $%", "luffy"),
        ("Sanji___is  -  cool", "sanji-is-cool"),
        ("--Zoro--", "zoro"),
        ("  ---___!!!  ", ""),
        ("Chapter 1050: The Final War", "chapter-1050-the-final-war"),
    ])
    _check(title_to_slug, [
        ("My Awesome Title!", "my-awesome-title"),
        ("  Another  Example--For You  ", "another-example--for-you"),
        ("", ""),
    ])
    print("✓ slug tests passed")


def main():
    """Run all tests."""
    print("=" * 60)
    print("Case Conversion Validation Tests")
    print("=" * 60)

    try:
        test_capitalize()
        test_decapitalize()
        test_to_camel_case()
        test_to_kebab_case()
        test_to_snake_case()
        test_to_pascal_case()
        test_dot_and_space_case()
        test_title_case()
        test_case_inversion()
        test_camel_snake_slug_round_trips()
        test_capitalize_sentences()
        test_slugs()

        print("\n" + "=" * 60)
        print("✓ ALL TESTS PASSED")
        print("=" * 60)
        return 0
    except AssertionError as e:
        print(f"\n✗ TEST FAILED: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
