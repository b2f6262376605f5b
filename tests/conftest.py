from __future__ import annotations

from collections import deque
from typing import Iterable, List, Sequence, Tuple

from barrage.patterns.catalog import PatternCatalog
from barrage.rng import Weighted, new_rng


class ScriptedRNG:
    """Random source whose integer draws come from a script until it runs out."""

    def __init__(self, ints: Iterable[int] = (), seed: int = 7) -> None:
        self.inner = new_rng(seed)
        self.ints = deque(ints)
        self.int_calls: List[Tuple[int, int]] = []

    def rand_int(self, lo: int, hi: int) -> int:
        self.int_calls.append((lo, hi))
        if self.ints:
            return self.ints.popleft()
        return self.inner.rand_int(lo, hi)

    def rand_float(self, lo: float, hi: float) -> float:
        return self.inner.rand_float(lo, hi)

    def select(self, entries: Sequence[Weighted]):
        return self.inner.select(entries)


def only(pattern_id: str) -> PatternCatalog:
    """A catalog that always yields `pattern_id`."""
    return PatternCatalog.from_mapping({pattern_id: 1})
