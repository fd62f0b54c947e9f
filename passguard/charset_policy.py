import string
from dataclasses import dataclass
from enum import Enum

from passguard.errors import InvalidPolicy

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
# același set la generare și la calculul entropiei
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
# regula "symbols" acceptă și restul punctuației uzuale, nu orice non-alfanumeric
RULE_SYMBOLS = SYMBOLS + "`~'\"\\/€£¥₹§±"


class CharClass(str, Enum):
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGIT = "digit"
    SYMBOL = "symbol"

    @property
    def alphabet(self) -> str:
        return ALPHABETS[self]


ALPHABETS = {
    CharClass.LOWERCASE: LOWERCASE,
    CharClass.UPPERCASE: UPPERCASE,
    CharClass.DIGIT: DIGITS,
    CharClass.SYMBOL: SYMBOLS,
}


@dataclass(frozen=True)
class CharsetPolicy:
    """
    Ce clase de caractere intră în parolă.
    Ordinea claselor e mereu: lowercase, uppercase, digit, symbol.
    """

    use_lower: bool = True
    use_upper: bool = True
    use_digits: bool = True
    use_symbols: bool = True

    def __post_init__(self):
        if not any((self.use_lower, self.use_upper, self.use_digits, self.use_symbols)):
            raise InvalidPolicy("At least one character class must be enabled")

    @property
    def enabled_classes(self) -> tuple[CharClass, ...]:
        flags = (
            (CharClass.LOWERCASE, self.use_lower),
            (CharClass.UPPERCASE, self.use_upper),
            (CharClass.DIGIT, self.use_digits),
            (CharClass.SYMBOL, self.use_symbols),
        )
        return tuple(cls for cls, enabled in flags if enabled)

    @property
    def class_count(self) -> int:
        return len(self.enabled_classes)

    @property
    def class_alphabets(self) -> list[str]:
        """Alfabetul fiecărei clase active, în ordinea fixă."""
        return [cls.alphabet for cls in self.enabled_classes]

    @property
    def alphabet(self) -> str:
        """Reuniunea alfabetelor active."""
        return "".join(self.class_alphabets)
