import random
from typing import Optional, Protocol, Sequence, Tuple, TypeVar

T = TypeVar("T")

# (weight, value) pairs; entries with weight <= 0 can never be chosen.
Weighted = Tuple[float, T]


class RandomSource(Protocol):
    def rand_int(self, lo: int, hi: int) -> int: ...

    def rand_float(self, lo: float, hi: float) -> float: ...

    def select(self, entries: Sequence[Weighted]) -> T: ...


class RNG(random.Random):
    """Seeded RNG to keep deterministic behavior."""

    def rand_int(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi], both ends inclusive."""
        return self.randint(lo, hi)

    def rand_float(self, lo: float, hi: float) -> float:
        return self.uniform(lo, hi)

    def select(self, entries: Sequence[Weighted]) -> T:
        """
        Pick one value with probability weight / sum(weights).

        Zero and negative weights are excluded. Raises ValueError when no
        entry is selectable.
        """
        live = [(w, v) for w, v in entries if w > 0]
        if not live:
            raise ValueError("select() needs at least one entry with positive weight")
        total = sum(w for w, _ in live)
        roll = self.random() * total
        for w, v in live:
            roll -= w
            if roll < 0:
                return v
        # float rounding can leave roll at ~0 after the last entry
        return live[-1][1]


def new_rng(seed: Optional[int] = None) -> RNG:
    rng = RNG()
    rng.seed(seed)
    return rng
