import abc
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from zxcvbn import zxcvbn

logger = logging.getLogger(__name__)

# zxcvbn refuză parolele mai lungi; caracterele în plus doar adaugă tărie
ZXCVBN_MAX_LENGTH = 72


@dataclass(frozen=True)
class HeuristicResult:
    score: int
    warning: str = ""
    suggestions: tuple[str, ...] = ()
    crack_time_display: str = ""

    def __post_init__(self):
        if not isinstance(self.score, int) or isinstance(self.score, bool) or not 0 <= self.score <= 4:
            raise ValueError(f"Heuristic score must be an integer in 0..4, got {self.score!r}")


class HeuristicScorer(abc.ABC):
    """Evaluator extern de tip zxcvbn (dicționare, tipare, secvențe)."""

    @abc.abstractmethod
    def score(self, password: str) -> HeuristicResult:
        ...


class ZxcvbnScorer(HeuristicScorer):
    def __init__(self, user_inputs: Optional[Sequence[str]] = None):
        # cuvinte penalizate suplimentar (ex: username, numele site-ului)
        self.user_inputs = list(user_inputs or [])

    def score(self, password: str) -> HeuristicResult:
        if len(password) > ZXCVBN_MAX_LENGTH:
            logger.debug("Scoring only the first %d characters", ZXCVBN_MAX_LENGTH)
        result = zxcvbn(password[:ZXCVBN_MAX_LENGTH], user_inputs=self.user_inputs)

        feedback = result.get("feedback") or {}
        return HeuristicResult(
            score=int(result["score"]),
            warning=feedback.get("warning") or "",
            suggestions=tuple(feedback.get("suggestions") or ()),
            crack_time_display=str(result["crack_times_display"]["offline_slow_hashing_1e4_per_second"]),
        )
