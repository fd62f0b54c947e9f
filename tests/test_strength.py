import pytest

from passguard.config import Config
from passguard.errors import InvalidInput
from passguard.heuristic import HeuristicResult
from passguard.password_utils import calculate_entropy
from passguard.strength import (
    Category,
    Rule,
    StrengthEvaluator,
    assess,
    category_for_score,
    report_to_dict,
    requirement_checklist,
)
from tests.conftest import StubScorer


@pytest.fixture
def evaluator():
    return StrengthEvaluator()


@pytest.mark.parametrize("score, category", [
    (4, Category.VERY_STRONG),
    (3, Category.STRONG),
    (2, Category.MODERATE),
    (1, Category.WEAK),
    (0, Category.VERY_WEAK),
    (-1, Category.VERY_WEAK),
    (7, Category.VERY_WEAK),
])
def test_category_table(score, category):
    assert category_for_score(score) is category


def test_score_four_is_very_strong_regardless_of_entropy(evaluator):
    report = evaluator.evaluate("a", HeuristicResult(score=4))
    assert report.category is Category.VERY_STRONG
    assert report.entropy_bits == calculate_entropy("a")
    assert report.rule_violations


def test_high_entropy_does_not_lift_a_low_score(evaluator):
    pwd = "Xk9#mQ2$vL7!pR4&wZ8*"
    report = evaluator.evaluate(pwd, HeuristicResult(score=0))
    assert report.entropy_bits > 100
    assert report.is_strong
    assert report.category is Category.VERY_WEAK


def test_all_lowercase_violates_only_class_rules(evaluator):
    report = evaluator.evaluate("alllowercase", HeuristicResult(score=1))
    assert report.violated_rules == (Rule.UPPERCASE, Rule.DIGITS, Rule.SYMBOLS)


def test_short_password_reports_length_violation(evaluator):
    report = evaluator.evaluate("Sh0rt!", HeuristicResult(score=0))
    assert report.violated_rules == (Rule.MIN_LENGTH,)
    assert "Use at least 12 characters" in report.suggestions


def test_every_violation_is_collected_in_rule_order(evaluator):
    report = evaluator.evaluate("a b", HeuristicResult(score=0))
    assert report.violated_rules == (
        Rule.MIN_LENGTH, Rule.UPPERCASE, Rule.DIGITS, Rule.SYMBOLS, Rule.SPACES,
    )


def test_too_long_password(evaluator):
    report = evaluator.evaluate("Aa1!" * 26, HeuristicResult(score=4))
    assert report.violated_rules == (Rule.MAX_LENGTH,)


def test_whitespace_is_not_a_symbol(evaluator):
    report = evaluator.evaluate("Abcdefghij1 k", HeuristicResult(score=3))
    assert Rule.SYMBOLS in report.violated_rules
    assert Rule.SPACES in report.violated_rules


def test_custom_length_bounds():
    report = StrengthEvaluator(min_length=6).evaluate("Sh0rt!", HeuristicResult(score=2))
    assert report.rule_violations == ()


@pytest.mark.parametrize("password", ["Passwordé1234", "Contraseña1234", "Straße1234Abc"])
def test_non_ascii_letters_are_not_symbols(evaluator, password):
    report = evaluator.evaluate(password, HeuristicResult(score=3))
    assert Rule.SYMBOLS in report.violated_rules


@pytest.mark.parametrize("password", ["Password`1234", "Password€1234", "Pass/word1234", "Password'1234"])
def test_extra_punctuation_counts_as_symbol(evaluator, password):
    report = evaluator.evaluate(password, HeuristicResult(score=3))
    assert report.rule_violations == ()


def test_suggestions_start_with_heuristic_ones(evaluator, weak_result):
    report = evaluator.evaluate("password", weak_result)
    assert report.suggestions[0] == weak_result.suggestions[0]
    assert report.suggestions[1:] == (
        "Use at least 12 characters",
        "Add at least one uppercase letter",
        "Add at least one digit",
        "Add at least one symbol",
    )


def test_rule_already_named_by_warning_is_not_repeated(evaluator):
    heuristic = HeuristicResult(score=1, warning="All-uppercase is almost as easy to guess as all-lowercase")
    report = evaluator.evaluate("ALLUPPERCASE1!", heuristic)
    assert report.violated_rules == (Rule.LOWERCASE,)
    assert report.suggestions == ()


def test_rule_already_in_suggestions_is_not_duplicated(evaluator):
    heuristic = HeuristicResult(score=1, suggestions=("Add at least one digit",))
    report = evaluator.evaluate("NoDigitsHere!!", heuristic)
    assert report.suggestions == ("Add at least one digit",)


@pytest.mark.parametrize("password", [None, "", 123])
def test_missing_password_is_invalid_input(evaluator, password):
    with pytest.raises(InvalidInput):
        evaluator.evaluate(password, HeuristicResult(score=0))


def test_report_flags(evaluator):
    report = evaluator.evaluate("Correct-Horse-9-Battery", HeuristicResult(score=1))
    assert report.is_strong
    assert report.is_common


def test_heuristic_score_is_validated():
    with pytest.raises(ValueError):
        HeuristicResult(score=5)
    with pytest.raises(ValueError):
        HeuristicResult(score=True)


def test_assess_calls_scorer_once(strong_result):
    scorer = StubScorer(strong_result)
    heuristic, report = assess("Tr0ub4dor&3xyz", scorer)
    assert scorer.calls == ["Tr0ub4dor&3xyz"]
    assert heuristic is strong_result
    assert report.category is Category.VERY_STRONG


def test_assess_rejects_empty_password_before_scoring(stub_scorer):
    with pytest.raises(InvalidInput):
        assess("", stub_scorer)
    assert stub_scorer.calls == []


def test_report_to_dict_shape(evaluator, weak_result):
    report = evaluator.evaluate("password", weak_result)
    data = report_to_dict(weak_result, report)
    assert data["score"] == 0
    assert data["strength"] == "Very Weak"
    assert data["feedback"] == {
        "warning": weak_result.warning,
        "suggestions": list(weak_result.suggestions),
    }
    assert data["crackTime"] == "less than a second"
    assert data["isCommon"] is True
    assert data["isStrong"] is False
    assert data["entropy"] == calculate_entropy("password")
    assert [d["validation"] for d in data["validationDetails"]] == ["min", "uppercase", "digits", "symbols"]


def test_requirement_checklist():
    checks = dict(requirement_checklist("short", None))
    assert checks["At least 12 characters long (5/12)"] is False
    assert checks["Not based on common words or patterns"] is False

    checks = requirement_checklist("Correct-Horse-9-Battery", 3)
    assert all(ok for _, ok in checks)


def test_requirement_checklist_follows_min_length():
    checks = requirement_checklist("Sh0rt!x", 3, min_length=6)
    assert checks[0] == ("At least 6 characters long", True)

    checks = requirement_checklist("Sh0rt", 3, min_length=6)
    assert checks[0] == ("At least 6 characters long (5/6)", False)


def test_requirement_checklist_default_comes_from_config():
    label, ok = requirement_checklist("x", None)[0]
    assert label == f"At least {Config.POLICY_MIN_LENGTH} characters long (1/{Config.POLICY_MIN_LENGTH})"
    assert ok is False


def test_checklist_and_rules_agree_on_min_length():
    evaluator = StrengthEvaluator(min_length=20)
    report = evaluator.evaluate("Correct-Horse-9-Bat", HeuristicResult(score=3))
    checks = dict(requirement_checklist("Correct-Horse-9-Bat", 3, evaluator.min_length))
    assert report.violated_rules == (Rule.MIN_LENGTH,)
    assert checks["At least 20 characters long (19/20)"] is False
