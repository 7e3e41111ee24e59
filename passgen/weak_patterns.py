"""
Dictionary-word and sequential-run detection.

A candidate is weak when it contains (case-insensitively) one of the common
words below anywhere inside it, or a run of characters whose code points move
by exactly one at each step.
"""

# common passwords plus a few Turkish login words (sifre, parola, kullanici, giris)
WEAK_WORDS = frozenset({
    "password", "pass", "qwerty", "admin", "user", "login", "welcome",
    "letmein", "monkey", "dragon", "master", "sunshine", "princess",
    "football", "shadow", "michael", "jennifer", "computer", "123456",
    "password123", "admin123", "sifre", "parola", "kullanici", "giris",
})

# number of consecutive +/-1 transitions that makes a run weak ("abcd" = 3)
SEQUENCE_THRESHOLD = 3


def contains_weak_word(candidate: str) -> bool:
    lowered = candidate.lower()
    return any(word in lowered for word in WEAK_WORDS)


def has_sequential_run(candidate: str, threshold: int = SEQUENCE_THRESHOLD) -> bool:
    """
    True if `threshold` adjacent pairs in a row differ by exactly one code point.

    Direction is not tracked, so "abcd", "4321" and also "abab" all count.
    """
    count = 0
    for current, following in zip(candidate, candidate[1:]):
        if abs(ord(current) - ord(following)) == 1:
            count += 1
            if count >= threshold:
                return True
        else:
            count = 0
    return False


def is_weak(candidate: str) -> bool:
    return contains_weak_word(candidate) or has_sequential_run(candidate)
