import string
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from passgen.errors import PoolConfigurationError


class CharacterCategory(Enum):
    # definition order is the pool order: upper, lower, digit, special
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digit"
    SPECIAL = "special"

    @property
    def alphabet(self) -> str:
        return ALPHABETS[self]


SPECIAL_CHARS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

ALPHABETS: Mapping[CharacterCategory, str] = MappingProxyType({
    CharacterCategory.UPPERCASE: string.ascii_uppercase,
    CharacterCategory.LOWERCASE: string.ascii_lowercase,
    CharacterCategory.DIGIT: string.digits,
    CharacterCategory.SPECIAL: SPECIAL_CHARS,
})

# visually confusable characters: 0/O, 1/l/I/|, and the quote marks
AMBIGUOUS_CHARS = frozenset("0O1lI|`'\"")


def remove_ambiguous(chars: str) -> str:
    return "".join(c for c in chars if c not in AMBIGUOUS_CHARS)


def build_pool(
    categories: Iterable[CharacterCategory],
    exclude_ambiguous: bool = False,
    alphabets: Mapping[CharacterCategory, str] = ALPHABETS,
) -> Tuple[Dict[CharacterCategory, str], str]:
    """
    Builds the usable alphabet of every requested category and the combined pool.

    Returns (per_category, combined). Both follow the CharacterCategory order,
    whatever the order of `categories`, so results are reproducible.
    """
    requested = set(categories)
    per_category: Dict[CharacterCategory, str] = {}

    for category in CharacterCategory:
        if category not in requested:
            continue
        chars = alphabets[category]
        if exclude_ambiguous:
            chars = remove_ambiguous(chars)
        if not chars:
            raise PoolConfigurationError(
                f"Category '{category.value}' has no characters left after filtering."
            )
        per_category[category] = chars

    combined = "".join(per_category.values())
    return per_category, combined
