import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from passguard.charset_policy import RULE_SYMBOLS
from passguard.config import Config
from passguard.errors import InvalidInput
from passguard.heuristic import HeuristicResult, HeuristicScorer
from passguard.password_utils import calculate_entropy

logger = logging.getLogger(__name__)


class Category(str, Enum):
    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"


CATEGORY_BY_SCORE = {
    4: Category.VERY_STRONG,
    3: Category.STRONG,
    2: Category.MODERATE,
    1: Category.WEAK,
}


def category_for_score(score: int) -> Category:
    return CATEGORY_BY_SCORE.get(score, Category.VERY_WEAK)


class Rule(str, Enum):
    MIN_LENGTH = "min"
    MAX_LENGTH = "max"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGITS = "digits"
    SYMBOLS = "symbols"
    SPACES = "spaces"


@dataclass(frozen=True)
class RuleViolation:
    rule: Rule
    message: str


@dataclass(frozen=True)
class PasswordRule:
    rule: Rule
    message: str
    passes: Callable[[str], bool]
    # dacă avertismentul euristic conține unul dintre cuvinte, regula e deja acoperită
    hints: tuple[str, ...] = ()

    def implied_by(self, warning: str) -> bool:
        warning = warning.lower()
        return any(hint in warning for hint in self.hints)


def build_rules(
    min_length: int = Config.POLICY_MIN_LENGTH,
    max_length: int = Config.POLICY_MAX_LENGTH,
) -> tuple[PasswordRule, ...]:
    return (
        PasswordRule(Rule.MIN_LENGTH, f"Use at least {min_length} characters",
                     lambda pw: len(pw) >= min_length, ("too short", "at least")),
        PasswordRule(Rule.MAX_LENGTH, f"Use no more than {max_length} characters",
                     lambda pw: len(pw) <= max_length, ("too long",)),
        PasswordRule(Rule.UPPERCASE, "Add at least one uppercase letter",
                     lambda pw: re.search(r"[A-Z]", pw) is not None, ("uppercase", "capital")),
        PasswordRule(Rule.LOWERCASE, "Add at least one lowercase letter",
                     lambda pw: re.search(r"[a-z]", pw) is not None, ("lowercase",)),
        PasswordRule(Rule.DIGITS, "Add at least one digit",
                     lambda pw: re.search(r"[0-9]", pw) is not None, ("digit", "number")),
        PasswordRule(Rule.SYMBOLS, "Add at least one symbol",
                     lambda pw: any(c in RULE_SYMBOLS for c in pw), ("symbol",)),
        PasswordRule(Rule.SPACES, "Remove spaces and other whitespace",
                     lambda pw: re.search(r"\s", pw) is None, ("space",)),
    )


@dataclass(frozen=True)
class StrengthReport:
    entropy_bits: float
    heuristic_score: int
    rule_violations: tuple[RuleViolation, ...]
    category: Category
    suggestions: tuple[str, ...]

    @property
    def violated_rules(self) -> tuple[Rule, ...]:
        return tuple(v.rule for v in self.rule_violations)

    @property
    def is_strong(self) -> bool:
        return not self.rule_violations

    @property
    def is_common(self) -> bool:
        # sub 2 = parolă comună / ușor de ghicit
        return self.heuristic_score < 2


def _require_password(password) -> str:
    if password is None or not isinstance(password, str) or not password:
        raise InvalidInput("Password is required")
    return password


class StrengthEvaluator:
    """
    Combină entropia, regulile de politică și scorul euristic într-un raport.

    Categoria vine DOAR din scorul euristic; entropia și regulile încălcate
    sunt raportate alături, dar nu o modifică.
    """

    def __init__(
        self,
        min_length: int = Config.POLICY_MIN_LENGTH,
        max_length: int = Config.POLICY_MAX_LENGTH,
        entropy_fn: Callable[[str], float] = calculate_entropy,
    ):
        self.min_length = min_length
        self.max_length = max_length
        self.rules = build_rules(min_length, max_length)
        self.entropy_fn = entropy_fn

    def validate(self, password: str) -> tuple[RuleViolation, ...]:
        """Toate regulile încălcate, nu doar prima."""
        return tuple(
            RuleViolation(rule.rule, rule.message)
            for rule in self.rules
            if not rule.passes(password)
        )

    def evaluate(self, password: str, heuristic: HeuristicResult) -> StrengthReport:
        password = _require_password(password)

        entropy = self.entropy_fn(password)
        violations = self.validate(password)
        category = category_for_score(heuristic.score)

        suggestions = list(heuristic.suggestions)
        seen = {s.lower() for s in suggestions}
        by_rule = {rule.rule: rule for rule in self.rules}
        for violation in violations:
            if violation.message.lower() in seen:
                continue
            if by_rule[violation.rule].implied_by(heuristic.warning):
                continue
            suggestions.append(violation.message)
            seen.add(violation.message.lower())

        logger.debug(
            "Evaluated password: length=%d score=%d violations=%d",
            len(password), heuristic.score, len(violations),
        )
        return StrengthReport(
            entropy_bits=entropy,
            heuristic_score=heuristic.score,
            rule_violations=violations,
            category=category,
            suggestions=tuple(suggestions),
        )


def assess(
    password: str,
    scorer: HeuristicScorer,
    evaluator: Optional[StrengthEvaluator] = None,
) -> tuple[HeuristicResult, StrengthReport]:
    """Cheamă evaluatorul euristic o singură dată și construiește raportul."""
    password = _require_password(password)
    evaluator = evaluator or StrengthEvaluator()
    heuristic = scorer.score(password)
    return heuristic, evaluator.evaluate(password, heuristic)


def report_to_dict(heuristic: HeuristicResult, report: StrengthReport) -> dict:
    """
    Forma JSON a unui raport, cu câmpurile euristice transmise mai departe.
    Aceeași formă e folosită de API și de analiza locală din interfețe.
    """
    return {
        "score": report.heuristic_score,
        "feedback": {
            "warning": heuristic.warning,
            "suggestions": list(heuristic.suggestions),
        },
        "suggestions": list(report.suggestions),
        "crackTime": heuristic.crack_time_display,
        "isCommon": report.is_common,
        "isStrong": report.is_strong,
        "validationDetails": [
            {"validation": v.rule.value, "message": v.message} for v in report.rule_violations
        ],
        "entropy": report.entropy_bits,
        "strength": report.category.value,
    }


def requirement_checklist(
    password: str,
    score: Optional[int],
    min_length: int = Config.POLICY_MIN_LENGTH,
) -> list[tuple[str, bool]]:
    """
    Criteriile afișate în interfață, fiecare cu starea ei.
    score poate fi None când încă nu avem un rezultat euristic;
    min_length trebuie să fie cel al evaluatorului folosit.
    """
    has_upper = re.search(r"[A-Z]", password) is not None
    has_lower = re.search(r"[a-z]", password) is not None
    has_digits = re.search(r"[0-9]", password) is not None
    has_symbols = re.search(r"[^A-Za-z0-9]", password) is not None
    long_enough = len(password) >= min_length

    length_label = f"At least {min_length} characters long"
    if not long_enough:
        length_label += f" ({len(password)}/{min_length})"

    return [
        (length_label, long_enough),
        ("Includes uppercase and lowercase letters", has_upper and has_lower),
        ("Includes numbers and symbols", has_digits and has_symbols),
        ("Not based on common words or patterns", score is not None and score >= 2),
        ("High entropy for better security",
         sum((has_upper, has_lower, has_digits, has_symbols)) >= 3 and long_enough),
    ]
