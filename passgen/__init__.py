from passgen.char_pool import CharacterCategory, build_pool
from passgen.errors import (
    EntropySourceFailure,
    GenerationExhausted,
    InvalidRequest,
    PasswordGeneratorError,
    PoolConfigurationError,
)
from passgen.generator import GenerationRequest, PasswordGenerator, generate_batch
from passgen.generator import generate_password as generate
from passgen.strength import PasswordStrength, suggestions
from passgen.strength import analyze_password as analyze
from passgen.weak_patterns import is_weak

__version__ = "2.0.0"
