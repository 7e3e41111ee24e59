import hashlib

import pytest

from passgen.secure_random import SecureRandom


class ByteTape:
    """
    Deterministic stand-in for os.urandom: a SHA-256 counter stream.
    Same seed, same bytes.
    """

    def __init__(self, seed: bytes = b"passgen"):
        self.seed = seed
        self.counter = 0
        self.buffer = b""
        self.calls = 0

    def __call__(self, n: int) -> bytes:
        self.calls += 1
        while len(self.buffer) < n:
            self.buffer += hashlib.sha256(self.seed + self.counter.to_bytes(8, "big")).digest()
            self.counter += 1
        data, self.buffer = self.buffer[:n], self.buffer[n:]
        return data


class FixedValues:
    """
    Feeds the given 32-bit values, little-endian, one per draw.
    """

    def __init__(self, *values: int):
        self.values = list(values)

    def __call__(self, n: int) -> bytes:
        return self.values.pop(0).to_bytes(n, "little")


@pytest.fixture
def tape():
    return ByteTape()


@pytest.fixture
def tape_rng(tape):
    return SecureRandom(tape)


@pytest.fixture
def broken_rng():
    def fail(n):
        raise OSError("no entropy available")

    return SecureRandom(fail)
