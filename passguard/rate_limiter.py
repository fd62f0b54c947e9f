import threading
import time
from collections import deque
from typing import Callable, Deque, Dict, Optional


class RateLimiter:
    """
    Fereastră glisantă: cel mult `limit` cereri per cheie în `window_seconds`.
    Cheile fără cereri în fereastră sunt șterse, deci memoria ține doar clienții activi.
    """

    def __init__(
        self,
        limit: int = 100,
        window_seconds: float = 900,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._hits: Dict[str, Deque[float]] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()

    def _prune(self, key: str, now: float) -> Optional[Deque[float]]:
        hits = self._hits.get(key)
        if hits is None:
            return None
        while hits and now - hits[0] >= self.window_seconds:
            hits.popleft()
        if not hits:
            del self._hits[key]
            return None
        return hits

    def _sweep(self, now: float, force: bool = False) -> None:
        # cel mult o dată pe fereastră, altfel fiecare cerere ar parcurge toate cheile
        if not force and now - self._last_sweep < self.window_seconds:
            return
        self._last_sweep = now
        for key in list(self._hits):
            self._prune(key, now)

    def allow(self, key: str) -> bool:
        with self._lock:
            now = self._clock()
            self._sweep(now)
            hits = self._prune(key, now)
            if hits is not None and len(hits) >= self.limit:
                return False
            self._hits.setdefault(key, deque()).append(now)
            return True

    def remaining(self, key: str) -> int:
        with self._lock:
            hits = self._prune(key, self._clock())
            return max(0, self.limit - (len(hits) if hits else 0))

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()

    def stats(self) -> Dict[str, int]:
        with self._lock:
            self._sweep(self._clock(), force=True)
            return {key: len(hits) for key, hits in self._hits.items()}
