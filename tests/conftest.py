import pytest
import requests

from passguard.heuristic import HeuristicResult, HeuristicScorer


class StubScorer(HeuristicScorer):
    """Întoarce mereu același rezultat și ține minte ce a primit."""

    def __init__(self, result: HeuristicResult):
        self.result = result
        self.calls = []

    def score(self, password: str) -> HeuristicResult:
        self.calls.append(password)
        return self.result


class ByteFeed:
    """Sursă de bytes deterministă pentru SecureRandomSource."""

    def __init__(self, data: bytes):
        self.data = bytearray(data)
        self.sizes = []

    def __call__(self, n: int) -> bytes:
        self.sizes.append(n)
        chunk, self.data = bytes(self.data[:n]), self.data[n:]
        return chunk


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, text=""):
        self.status_code = status_code
        self._json = json_data
        self.text = text

    def json(self):
        return self._json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def _handle(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, url, **kwargs):
        return self._handle("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._handle("POST", url, **kwargs)


@pytest.fixture
def strong_result():
    return HeuristicResult(score=4, warning="", suggestions=(), crack_time_display="centuries")


@pytest.fixture
def weak_result():
    return HeuristicResult(
        score=0,
        warning="This is a top-10 common password",
        suggestions=("Add another word or two. Uncommon words are better.",),
        crack_time_display="less than a second",
    )


@pytest.fixture
def stub_scorer(strong_result):
    return StubScorer(strong_result)
