"""
Tests for random string, UUID and shuffle generators.
"""

import random

import pytest
from structlog.testing import capture_logs

from strutils.config import reload_settings
from strutils.randomness import (
    ALPHANUMERIC_ALPHABET,
    BASE36_ALPHABET,
    default_random_source,
    generate_uuid,
    random_string,
    random_string_base36,
    reset_default_random_source,
    shuffle_characters,
)
from strutils.validation import is_uuid


@pytest.fixture
def restore_default_source(clean_env):
    """Rebuild settings and the default source after a test changes them."""
    yield clean_env
    clean_env.delenv("STRUTILS_RANDOM_SEED", raising=False)
    reload_settings()
    reset_default_random_source()


class TestRandomString:
    """Test alphanumeric and base-36 generators."""

    def test_length_and_alphabet(self, seeded_rng):
        result = random_string(32, rng=seeded_rng)
        assert len(result) == 32
        assert all(char in ALPHANUMERIC_ALPHABET for char in result)

    def test_non_positive_length(self, zero_rng):
        assert random_string(0, rng=zero_rng) == ""
        assert random_string(-4, rng=zero_rng) == ""
        assert random_string_base36(0, rng=zero_rng) == ""

    def test_alphabet_edges(self, zero_rng, top_rng):
        assert random_string(4, rng=zero_rng) == "AAAA"
        assert random_string(3, rng=top_rng) == "999"
        assert random_string_base36(3, rng=zero_rng) == "000"
        assert random_string_base36(3, rng=top_rng) == "zzz"

    def test_source_returning_one_is_clamped(self):
        assert random_string(2, rng=lambda: 1.0) == "99"

    def test_base36_alphabet(self, seeded_rng):
        result = random_string_base36(64, rng=seeded_rng)
        assert len(result) == 64
        assert all(char in BASE36_ALPHABET for char in result)

    def test_sequence_source(self, sequence_rng):
        rng = sequence_rng([0.0, 0.5])
        assert random_string_base36(4, rng=rng) == "0i0i"


class TestGenerateUuid:
    """Test version-4 UUID layout."""

    def test_fixed_sources(self, zero_rng, top_rng):
        assert generate_uuid(rng=zero_rng) == "00000000-0000-4000-8000-000000000000"
        assert generate_uuid(rng=top_rng) == "ffffffff-ffff-4fff-bfff-ffffffffffff"

    @pytest.mark.laws
    def test_generated_uuids_validate(self, seeded_rng):
        for _ in range(200):
            value = generate_uuid(rng=seeded_rng)
            assert is_uuid(value), value
            assert value[14] == "4"
            assert value[19] in "89ab"

    def test_default_source_produces_valid_uuid(self):
        assert is_uuid(generate_uuid())


class TestShuffle:
    """Test Fisher-Yates shuffling."""

    def test_fixed_sources(self, zero_rng, top_rng):
        assert shuffle_characters("abcd", rng=zero_rng) == "bcda"
        assert shuffle_characters("abcd", rng=top_rng) == "abcd"

    def test_empty_and_single(self, zero_rng):
        assert shuffle_characters("", rng=zero_rng) == ""
        assert shuffle_characters("x", rng=zero_rng) == "x"

    @pytest.mark.laws
    @pytest.mark.parametrize("text", ["", "Zoro", "banana", "ワンピース", "🔥👒🍖"])
    def test_shuffle_is_permutation(self, text, seeded_rng):
        result = shuffle_characters(text, rng=seeded_rng)
        assert sorted(result) == sorted(text)


class TestDefaultSource:
    """Test the process-wide random source."""

    def test_explicit_seed_is_reproducible(self, restore_default_source):
        reset_default_random_source(99)
        first = random_string(16)
        reset_default_random_source(99)
        assert random_string(16) == first

    def test_seed_from_settings(self, restore_default_source):
        restore_default_source.setenv("STRUTILS_RANDOM_SEED", "7")
        reload_settings()
        reset_default_random_source()

        expected = random.Random(7).random
        assert default_random_source()() == expected()

    def test_reset_is_logged(self, restore_default_source):
        with capture_logs() as cap_logs:
            reset_default_random_source(5)
        assert cap_logs[0]["event"] == "default_random_source_reset"
        assert cap_logs[0]["seeded"] is True
