"""
Tests for index-based edits, reversal, rotation and chunking.
"""

import pytest

from strutils.editing import (
    insert_at,
    mirror_string,
    remove_at,
    replace_at,
    reverse,
    reverse_each_word,
    reverse_sentences,
    reverse_words,
    rotate_string,
    sort_words,
    split_by_length,
)


class TestReversal:
    """Test character, word and sentence reversal."""

    def test_reverse(self):
        assert reverse("Luffy") == "yffuL"
        assert reverse("") == ""
        assert reverse("🔥👒") == "👒🔥"

    @pytest.mark.laws
    def test_reverse_is_an_involution(self, unicode_samples):
        for text in unicode_samples:
            assert reverse(reverse(text)) == text

    def test_reverse_words(self):
        assert reverse_words("Monkey D Luffy") == "Luffy D Monkey"
        assert reverse_words("Monkey  D Luffy") == "Luffy D  Monkey"
        assert reverse_words("") == ""

    def test_reverse_each_word(self):
        assert reverse_each_word("Hello World") == "olleH dlroW"
        assert reverse_each_word("a  bc") == "a  cb"

    def test_reverse_sentences(self):
        assert reverse_sentences("Hello world. How are you? Fine!") == "Fine! How are you? Hello world."
        assert reverse_sentences("One. Two. trailing") == "Two. One."
        assert reverse_sentences("no terminator") == "no terminator"
        assert reverse_sentences("   ") == ""

    def test_mirror_string(self):
        assert mirror_string("abc") == "abccba"
        assert mirror_string("") == ""


class TestIndexEdits:
    """Test insert, remove and replace at an index."""

    @pytest.mark.parametrize("index,expected", [
        (0, "Xabc"),
        (1, "aXbc"),
        (3, "abcX"),
        (10, "abcX"),
        (-5, "Xabc"),
    ])
    def test_insert_at_clamps(self, index, expected):
        assert insert_at("abc", index, "X") == expected

    def test_remove_at(self):
        assert remove_at("abcde", 1, 2) == "ade"
        assert remove_at("abcde", 1) == "acde"
        assert remove_at("abcde", 3, 10) == "abc"
        assert remove_at("abcde", 5) == "abcde"
        assert remove_at("abcde", -1) == "abcde"
        assert remove_at("abcde", 1, 0) == "abcde"

    def test_replace_at(self):
        assert replace_at("Zoro", 0, "H") == "Horo"
        assert replace_at("Zoro", 3, "!") == "Zor!"
        assert replace_at("Zoro", 4, "!") == "Zoro"
        assert replace_at("Zoro", -1, "!") == "Zoro"


class TestRotation:
    """Test left/right rotation."""

    @pytest.mark.parametrize("n,expected", [
        (0, "abcdef"),
        (2, "cdefab"),
        (-2, "efabcd"),
        (6, "abcdef"),
        (8, "cdefab"),
        (-8, "efabcd"),
    ])
    def test_rotate_string(self, n, expected):
        assert rotate_string("abcdef", n) == expected

    def test_rotate_empty(self):
        assert rotate_string("", 3) == ""

    @pytest.mark.laws
    @pytest.mark.parametrize("n", [-7, -1, 0, 1, 3, 11])
    def test_rotation_inverts(self, n):
        text = "mugiwara"
        assert rotate_string(rotate_string(text, n), -n) == text


class TestChunkingAndSorting:
    """Test fixed-length chunking and word sorting."""

    def test_split_by_length(self):
        assert split_by_length("mugiwara", 3) == ["mug", "iwa", "ra"]
        assert split_by_length("abc", 5) == ["abc"]
        assert split_by_length("", 2) == []
        assert split_by_length("abc", 0) == []
        assert split_by_length("ab\ncd", 2) == ["ab", "\nc", "d"]

    @pytest.mark.laws
    @pytest.mark.parametrize("length", [1, 2, 3, 7])
    def test_chunks_rejoin(self, length, unicode_samples):
        for text in unicode_samples:
            chunks = split_by_length(text, length)
            assert "".join(chunks) == text
            assert all(len(chunk) <= length for chunk in chunks)

    def test_sort_words(self):
        assert sort_words("Zebra apple Banana") == "Banana Zebra apple"
        assert sort_words("c b a") == "a b c"
        assert sort_words("") == ""
