import os
from typing import Callable, MutableSequence, Optional, TypeVar

from passgen.errors import EntropySourceFailure

T = TypeVar("T")

_DRAW_BYTES = 4
_DRAW_SPACE = 1 << (8 * _DRAW_BYTES)  # 2**32


class SecureRandom:
    """
    Unbiased random indices and shuffles on top of a cryptographically secure byte source.

    By default the bytes come from os.urandom. A different source can be injected
    (e.g. a fixed tape in tests), but it must return exactly the number of bytes
    asked for; anything else is an EntropySourceFailure, never a silent fallback.

    uniform_index uses rejection sampling over 32-bit draws, so every index in
    [0, bound) is exactly equally likely.
    """

    def __init__(self, randbytes: Optional[Callable[[int], bytes]] = None):
        self._randbytes = randbytes or os.urandom

    def _draw(self) -> int:
        try:
            data = self._randbytes(_DRAW_BYTES)
        except (OSError, NotImplementedError) as e:
            raise EntropySourceFailure(f"Secure random source failed: {e}") from e

        if data is None or len(data) != _DRAW_BYTES:
            raise EntropySourceFailure("Secure random source returned a short read.")
        return int.from_bytes(data, "little")

    def uniform_index(self, bound: int) -> int:
        """
        Returns an integer in [0, bound).
        """
        if bound <= 0:
            raise ValueError("bound must be a positive integer.")
        if bound > _DRAW_SPACE:
            raise ValueError(f"bound must not exceed {_DRAW_SPACE}.")

        # largest multiple of bound that fits in 32 bits; draws above it are rejected
        limit = _DRAW_SPACE - (_DRAW_SPACE % bound)
        while True:
            value = self._draw()
            if value < limit:
                return value % bound

    def choice(self, chars: str) -> str:
        if not chars:
            raise ValueError("Cannot choose from an empty character set.")
        return chars[self.uniform_index(len(chars))]

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """
        Fisher-Yates shuffle, in place. Returns the same sequence for convenience.
        """
        for i in range(len(items) - 1, 0, -1):
            j = self.uniform_index(i + 1)
            items[i], items[j] = items[j], items[i]
        return items


# shared default instance; os.urandom is safe to call from several threads
default_random = SecureRandom()
