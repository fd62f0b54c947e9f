import logging
from typing import Optional

import requests

from passguard.config import Config
from passguard.heuristic import HeuristicScorer
from passguard.strength import StrengthEvaluator, assess, report_to_dict

logger = logging.getLogger(__name__)


def _flag(value: bool) -> str:
    return "true" if value else "false"


class PasswordApiClient:
    """Client pentru API-ul HTTP (check / generate)."""

    def __init__(self, base_url: str = None, timeout: float = None, session: Optional[requests.Session] = None):
        self.base_url = (base_url or Config.API_URL).rstrip("/")
        self.timeout = timeout or Config.API_TIMEOUT
        self.session = session or requests.Session()

    def check_password(self, password: str) -> dict:
        resp = self.session.post(
            f"{self.base_url}/api/check-password",
            json={"password": password},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        return resp.json()

    def generate_password(self, length: int = 16, uppercase=True, lowercase=True, numbers=True, symbols=True) -> str:
        params = {
            "length": length,
            "symbols": _flag(symbols),
            "numbers": _flag(numbers),
            "uppercase": _flag(uppercase),
            "lowercase": _flag(lowercase),
        }
        resp = self.session.get(
            f"{self.base_url}/api/generate-password",
            params=params,
            timeout=self.timeout,
        )
        resp.raise_for_status()
        return resp.json()["password"]


def check_with_fallback(
    password: str,
    client: PasswordApiClient,
    scorer: HeuristicScorer,
    evaluator: Optional[StrengthEvaluator] = None,
) -> tuple[dict, bool]:
    """
    Întâi serverul; dacă nu răspunde, analiză locală.
    Al doilea element e True când rezultatul e doar local.
    """
    try:
        return client.check_password(password), False
    except requests.RequestException as e:
        logger.warning("Password check request failed, using local analysis only: %s", e)

    heuristic, report = assess(password, scorer, evaluator)
    return report_to_dict(heuristic, report), True
