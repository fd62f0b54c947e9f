import logging
import math
import re
from dataclasses import dataclass, field
from typing import Optional

from passguard.charset_policy import CharsetPolicy, DIGITS, LOWERCASE, SYMBOLS, UPPERCASE
from passguard.config import Config
from passguard.errors import InvalidInput, InvalidRequest
from passguard.secure_random import SecureRandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationRequest:
    length: int = Config.DEFAULT_PASSWORD_LENGTH
    policy: CharsetPolicy = field(default_factory=CharsetPolicy)


class PasswordGenerator:
    """
    Generează parole din alfabetul politicii, cu cel puțin un caracter
    din fiecare clasă activă.
    """

    def __init__(
        self,
        rng: Optional[SecureRandomSource] = None,
        min_length: int = Config.MIN_PASSWORD_LENGTH,
        max_length: int = Config.MAX_PASSWORD_LENGTH,
    ):
        self.rng = rng or SecureRandomSource()
        self.min_length = min_length
        self.max_length = max_length

    def validate(self, request: GenerationRequest) -> None:
        length = request.length
        if not isinstance(length, int) or isinstance(length, bool):
            raise InvalidRequest(f"Password length must be an integer, got {length!r}")
        if request.policy is None:
            raise InvalidRequest("A character policy is required")
        if length < request.policy.class_count:
            raise InvalidRequest(
                f"Password length {length} is smaller than the number of "
                f"enabled character classes ({request.policy.class_count})"
            )
        if not self.min_length <= length <= self.max_length:
            raise InvalidRequest(
                f"Password length must be between {self.min_length} and {self.max_length}, got {length}"
            )

    def generate(self, request: GenerationRequest) -> str:
        self.validate(request)
        policy = request.policy

        # garantăm cel puțin un char din fiecare clasă selectată
        chars = [self.rng.choice(alphabet) for alphabet in policy.class_alphabets]

        all_chars = policy.alphabet
        chars += [self.rng.choice(all_chars) for _ in range(request.length - len(chars))]

        # altfel caracterele garantate ar sta mereu la început
        self.rng.shuffle(chars)

        logger.debug("Generated password: length=%d classes=%d", request.length, policy.class_count)
        return "".join(chars)


_default_generator = PasswordGenerator()


def generate_password(length: int = Config.DEFAULT_PASSWORD_LENGTH, upper=True, lower=True, digits=True, symbols=True) -> str:
    """
    Generează o parolă aleatoare din seturile selectate.
    """
    policy = CharsetPolicy(use_lower=lower, use_upper=upper, use_digits=digits, use_symbols=symbols)
    return _default_generator.generate(GenerationRequest(length=length, policy=policy))


def charset_size(password: str) -> int:
    """Mărimea alfabetului dedusă din clasele care apar efectiv în parolă."""
    size = 0
    if re.search(r"[a-z]", password):
        size += len(LOWERCASE)
    if re.search(r"[A-Z]", password):
        size += len(UPPERCASE)
    if re.search(r"[0-9]", password):
        size += len(DIGITS)
    if re.search(r"[^a-zA-Z0-9]", password):
        size += len(SYMBOLS)
    return size


def calculate_entropy(password: str) -> float:
    """
    Entropia aproximativă în biți: lungime * log2(alfabet).
    Presupune caractere alese uniform, deci ignoră cuvinte și tipare;
    e doar un complement ieftin pentru scorul euristic.
    """
    if password is None:
        raise InvalidInput("Password is required")
    if not password:
        return 0.0

    entropy = len(password) * math.log2(charset_size(password))
    return round(entropy, 2)
