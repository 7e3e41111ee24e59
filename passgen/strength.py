import math
import string
from dataclasses import dataclass
from typing import List

from passgen.weak_patterns import is_weak

# pool sizes assumed for entropy, per character class found in the password
UPPERCASE_POOL = 26
LOWERCASE_POOL = 26
DIGIT_POOL = 10
SPECIAL_POOL = 32

GUESSES_PER_SECOND = 1_000_000_000
MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
YEAR = 365 * DAY
CENTURY = 100 * YEAR

VERY_WEAK = "Very Weak"
WEAK = "Weak"
MEDIUM = "Medium"
STRONG = "Strong"
VERY_STRONG = "Very Strong"

# the scoring below tops out at 8 even though results are shown as "/10"
MAX_SCORE = 8

_UPPER = frozenset(string.ascii_uppercase)
_LOWER = frozenset(string.ascii_lowercase)
_DIGITS = frozenset(string.digits)
_ALNUM = _UPPER | _LOWER | _DIGITS


@dataclass(frozen=True)
class PasswordStrength:
    length: int
    has_uppercase: bool
    has_lowercase: bool
    has_digits: bool
    has_special: bool
    entropy: float
    contains_weak_pattern: bool
    score: int
    level: str
    crack_time: str

    @property
    def suggestions(self) -> List[str]:
        return suggestions(self)


def calculate_entropy(password: str) -> float:
    """
    Brute-force entropy in bits: length * log2(pool), where the pool is the sum
    of the full class sizes for every class that appears in the password.
    """
    if not password:
        return 0.0

    pool = 0
    if any(c in _UPPER for c in password):
        pool += UPPERCASE_POOL
    if any(c in _LOWER for c in password):
        pool += LOWERCASE_POOL
    if any(c in _DIGITS for c in password):
        pool += DIGIT_POOL
    if any(c not in _ALNUM for c in password):
        pool += SPECIAL_POOL

    if pool == 0:
        return 0.0
    return len(password) * math.log2(pool)


def strength_level(score: int) -> str:
    if score <= 2:
        return VERY_WEAK
    if score <= 4:
        return WEAK
    if score <= 6:
        return MEDIUM
    if score <= 8:
        return STRONG
    return VERY_STRONG


def estimate_crack_time(entropy: float) -> str:
    """
    Time to exhaust 2**entropy guesses at one billion guesses per second.
    """
    # stay in log2 space until we know the number fits in a float
    log2_seconds = entropy - math.log2(GUESSES_PER_SECOND)
    if log2_seconds >= math.log2(CENTURY):
        return "centuries"

    seconds = 2 ** log2_seconds
    if seconds < 1:
        return "instant"
    if seconds < MINUTE:
        return f"{seconds:.0f} seconds"
    if seconds < HOUR:
        return f"{seconds / MINUTE:.0f} minutes"
    if seconds < DAY:
        return f"{seconds / HOUR:.1f} hours"
    if seconds < YEAR:
        return f"{seconds / DAY:.0f} days"
    return f"{seconds / YEAR:.0f} years"


def analyze_password(password: str) -> PasswordStrength:
    """
    Scores any password, generated or typed in by the user.

    One point each for upper, lower, digit, special, length >= 12, length >= 16,
    entropy >= 60 and for not containing a weak pattern; a weak pattern costs
    two points instead. The score never goes below 0, and an empty password
    scores 0.
    """
    has_upper = any(c in _UPPER for c in password)
    has_lower = any(c in _LOWER for c in password)
    has_digits = any(c in _DIGITS for c in password)
    has_special = any(c not in _ALNUM for c in password)
    entropy = calculate_entropy(password)
    weak = is_weak(password)

    score = sum((has_upper, has_lower, has_digits, has_special))
    if len(password) >= 12:
        score += 1
    if len(password) >= 16:
        score += 1
    if entropy >= 60:
        score += 1
    # an empty password earns nothing, not even the no-weak-pattern point
    if password:
        score += -2 if weak else 1
    score = max(0, score)

    return PasswordStrength(
        length=len(password),
        has_uppercase=has_upper,
        has_lowercase=has_lower,
        has_digits=has_digits,
        has_special=has_special,
        entropy=entropy,
        contains_weak_pattern=weak,
        score=score,
        level=strength_level(score),
        crack_time=estimate_crack_time(entropy),
    )


def suggestions(strength: PasswordStrength) -> List[str]:
    """
    Improvement hints, in a fixed order. An empty list means nothing to improve.
    """
    hints = []
    if strength.length < 12:
        hints.append("Use at least 12 characters")
    if not strength.has_uppercase:
        hints.append("Add uppercase letters")
    if not strength.has_lowercase:
        hints.append("Add lowercase letters")
    if not strength.has_digits:
        hints.append("Add digits")
    if not strength.has_special:
        hints.append("Add special characters")
    if strength.contains_weak_pattern:
        hints.append("Avoid common words and sequential characters")
    if strength.entropy < 60:
        hints.append("Use a more complex password")
    return hints
