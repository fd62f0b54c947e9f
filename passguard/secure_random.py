import os
from typing import Callable, MutableSequence, Sequence, TypeVar

from passguard.errors import RandomSourceFailure

T = TypeVar("T")


class SecureRandomSource:
    """
    Indici aleatori uniformi din os.urandom.

    Reducerea byte -> index se face prin rejection sampling: valorile din
    "coada" intervalului (peste cel mai mare multiplu al lui bound) se aruncă,
    altfel `valoare % bound` ar favoriza indicii mici.
    """

    def __init__(self, random_bytes: Callable[[int], bytes] = os.urandom):
        # sursa de bytes se poate injecta (în teste primim bytes deterministe)
        self._random_bytes = random_bytes

    def random_bytes(self, n: int) -> bytes:
        try:
            data = self._random_bytes(n)
        except (OSError, NotImplementedError) as e:
            raise RandomSourceFailure(f"Secure random source unavailable: {e}") from e
        if len(data) != n:
            raise RandomSourceFailure(f"Secure random source returned {len(data)} bytes, expected {n}")
        return data

    def next_index(self, bound: int) -> int:
        """Întoarce un întreg uniform în [0, bound)."""
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        if bound == 1:
            return 0

        nbytes = ((bound - 1).bit_length() + 7) // 8
        span = 256 ** nbytes
        limit = span - span % bound

        while True:
            value = int.from_bytes(self.random_bytes(nbytes), "big")
            if value < limit:
                return value % bound

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.next_index(len(seq))]

    def shuffle(self, items: MutableSequence) -> None:
        """Fisher-Yates, pe loc."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_index(i + 1)
            items[i], items[j] = items[j], items[i]
