import string

import pytest

from passgen.char_pool import (
    ALPHABETS,
    AMBIGUOUS_CHARS,
    SPECIAL_CHARS,
    CharacterCategory,
    build_pool,
    remove_ambiguous,
)
from passgen.errors import PoolConfigurationError

ALL = set(CharacterCategory)


class TestAlphabets:
    def test_alphabet_sizes(self):
        assert len(CharacterCategory.UPPERCASE.alphabet) == 26
        assert len(CharacterCategory.LOWERCASE.alphabet) == 26
        assert len(CharacterCategory.DIGIT.alphabet) == 10
        assert CharacterCategory.SPECIAL.alphabet == "!@#$%^&*()_+-=[]{}|;:,.<>?"

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            ALPHABETS[CharacterCategory.DIGIT] = "0"
        assert isinstance(AMBIGUOUS_CHARS, frozenset)

    def test_remove_ambiguous(self):
        assert remove_ambiguous("a0O1lI|`'\"b") == "ab"


class TestBuildPool:
    """Per-category alphabets and the combined pool."""

    def test_all_categories(self):
        per_category, pool = build_pool(ALL)
        assert list(per_category) == list(CharacterCategory)
        assert pool == string.ascii_uppercase + string.ascii_lowercase + string.digits + SPECIAL_CHARS

    def test_order_does_not_depend_on_input_order(self):
        wanted = [CharacterCategory.SPECIAL, CharacterCategory.DIGIT, CharacterCategory.UPPERCASE]
        _, pool_a = build_pool(wanted)
        _, pool_b = build_pool(reversed(wanted))
        assert pool_a == pool_b == string.ascii_uppercase + string.digits + SPECIAL_CHARS

    def test_only_requested_categories(self):
        per_category, pool = build_pool({CharacterCategory.DIGIT})
        assert per_category == {CharacterCategory.DIGIT: string.digits}
        assert pool == string.digits

    def test_exclude_ambiguous(self):
        per_category, pool = build_pool(ALL, exclude_ambiguous=True)
        assert len(per_category[CharacterCategory.UPPERCASE]) == 24
        assert len(per_category[CharacterCategory.LOWERCASE]) == 25
        assert per_category[CharacterCategory.DIGIT] == "23456789"
        assert len(per_category[CharacterCategory.SPECIAL]) == 25
        assert not AMBIGUOUS_CHARS & set(pool)

    def test_no_categories_gives_empty_pool(self):
        assert build_pool([]) == ({}, "")

    def test_category_filtered_to_nothing(self):
        alphabets = dict(ALPHABETS)
        alphabets[CharacterCategory.DIGIT] = "01"
        with pytest.raises(PoolConfigurationError, match="digit"):
            build_pool({CharacterCategory.DIGIT}, exclude_ambiguous=True, alphabets=alphabets)

    def test_same_custom_alphabet_is_fine_without_filtering(self):
        alphabets = dict(ALPHABETS)
        alphabets[CharacterCategory.DIGIT] = "01"
        _, pool = build_pool({CharacterCategory.DIGIT}, alphabets=alphabets)
        assert pool == "01"
