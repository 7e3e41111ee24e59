class PasswordGeneratorError(Exception):
    """
    Base class for every error raised by the passgen core.
    """


class InvalidRequest(PasswordGeneratorError, ValueError):
    """
    The generation parameters cannot be satisfied (bad length, no categories...).
    Raised before any random draw; callers should re-prompt the user.
    """


class EntropySourceFailure(PasswordGeneratorError, RuntimeError):
    """
    The secure byte source could not supply bytes. Fatal for the current call.
    """


class GenerationExhausted(PasswordGeneratorError, RuntimeError):
    """
    Every candidate within the retry cap was rejected by the weak-pattern detector.
    """

    def __init__(self, attempts: int):
        super().__init__(f"No acceptable password after {attempts} attempts.")
        self.attempts = attempts


class PoolConfigurationError(PasswordGeneratorError):
    """
    A requested character category was filtered down to zero characters.
    """
