import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional

from passgen.char_pool import CharacterCategory, build_pool
from passgen.errors import GenerationExhausted, InvalidRequest
from passgen.secure_random import SecureRandom, default_random
from passgen.weak_patterns import is_weak

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 1000


@dataclass(frozen=True)
class GenerationRequest:
    """
    What the caller wants: length, which categories must appear, and whether
    look-alike characters (0/O, 1/l/I...) are left out.
    """

    length: int
    categories: FrozenSet[CharacterCategory]
    exclude_ambiguous: bool = False

    @classmethod
    def from_flags(
        cls,
        length: int,
        upper: bool = True,
        lower: bool = True,
        digits: bool = True,
        special: bool = True,
        exclude_ambiguous: bool = False,
    ) -> "GenerationRequest":
        flags = (
            (upper, CharacterCategory.UPPERCASE),
            (lower, CharacterCategory.LOWERCASE),
            (digits, CharacterCategory.DIGIT),
            (special, CharacterCategory.SPECIAL),
        )
        categories = frozenset(category for wanted, category in flags if wanted)
        return cls(length=length, categories=categories, exclude_ambiguous=exclude_ambiguous)

    def validate(self):
        if isinstance(self.length, bool) or not isinstance(self.length, int) or self.length <= 0:
            raise InvalidRequest("Password length must be a positive integer.")
        if not self.categories:
            raise InvalidRequest("Select at least one character type.")
        if not all(isinstance(c, CharacterCategory) for c in self.categories):
            raise InvalidRequest("Unknown character type requested.")
        if self.length < len(self.categories):
            raise InvalidRequest(
                f"Password length must be at least {len(self.categories)} "
                f"for the selected character types."
            )


class PasswordGenerator:
    """
    Builds random passwords that contain every requested category and pass the
    weak-pattern check.

    One character is drawn from each requested category, the rest from the
    combined pool, then the whole thing is shuffled. Candidates flagged by
    is_weak are thrown away and regenerated, at most `max_attempts` times.
    """

    def __init__(self, rng: Optional[SecureRandom] = None, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.rng = rng or default_random
        self.max_attempts = max_attempts

    def _candidate(self, request: GenerationRequest) -> str:
        per_category, pool = build_pool(request.categories, request.exclude_ambiguous)

        # at least one char from every selected category
        chars = [self.rng.choice(alphabet) for alphabet in per_category.values()]
        chars += [self.rng.choice(pool) for _ in range(request.length - len(chars))]

        self.rng.shuffle(chars)
        return "".join(chars)

    def generate(self, request: GenerationRequest) -> str:
        request.validate()

        for attempt in range(1, self.max_attempts + 1):
            candidate = self._candidate(request)
            if not is_weak(candidate):
                if attempt > 1:
                    logger.debug("Accepted candidate after %d attempts", attempt)
                return candidate
            logger.debug("Rejected weak candidate (attempt %d/%d)", attempt, self.max_attempts)

        logger.error(
            "Gave up after %d weak candidates (length=%d, categories=%d)",
            self.max_attempts, request.length, len(request.categories),
        )
        raise GenerationExhausted(self.max_attempts)

    def generate_batch(self, request: GenerationRequest, count: int) -> List[str]:
        if count < 1:
            raise InvalidRequest("Batch size must be at least 1.")
        request.validate()
        return [self.generate(request) for _ in range(count)]


def generate_password(
    length: int = 16,
    upper: bool = True,
    lower: bool = True,
    digits: bool = True,
    special: bool = True,
    exclude_ambiguous: bool = False,
) -> str:
    """
    Generates one password from the selected character types.
    """
    request = GenerationRequest.from_flags(length, upper, lower, digits, special, exclude_ambiguous)
    return PasswordGenerator().generate(request)


def generate_batch(
    count: int,
    length: int = 16,
    upper: bool = True,
    lower: bool = True,
    digits: bool = True,
    special: bool = True,
    exclude_ambiguous: bool = False,
) -> List[str]:
    """
    Generates `count` independent passwords with the same settings.
    """
    request = GenerationRequest.from_flags(length, upper, lower, digits, special, exclude_ambiguous)
    return PasswordGenerator().generate_batch(request, count)
