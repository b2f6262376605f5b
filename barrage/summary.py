"""Read-only statistics over a formulated trigger tree."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple

from barrage.behavior.trigger import Behavior, Declination, NoTrigger, Rapid, Ring, Splash, children_of


def family_of(node: Behavior) -> str:
    if isinstance(node, Ring):
        return node.plane
    if isinstance(node, Declination):
        return "yz"
    if isinstance(node, Rapid):
        return "rapid"
    if isinstance(node, Splash):
        return "splash"
    if isinstance(node, NoTrigger):
        return "none"
    return "creator"


def iter_triggers(tree: Behavior, level: int = 0) -> Iterator[Tuple[int, Behavior]]:
    """Depth-first (tree level, node) pairs, parents before children."""
    yield level, tree
    for child in children_of(tree):
        yield from iter_triggers(child, level + 1)


@dataclass
class WaveSummary:
    nodes: int = 0
    terminals: int = 0
    max_depth: int = 0
    families: Dict[str, int] = field(default_factory=dict)
    bullets_per_volley: int = 0  # bullets spawned by the root trigger's volley

    def __str__(self) -> str:
        fams = ", ".join(f"{k}={v}" for k, v in sorted(self.families.items()))
        return (
            f"{self.nodes} nodes, {self.terminals} terminal, depth {self.max_depth}, "
            f"volley {self.bullets_per_volley} [{fams}]"
        )


def summarize(tree: Behavior) -> WaveSummary:
    out = WaveSummary()
    fams: Counter = Counter()
    for level, node in iter_triggers(tree):
        out.nodes += 1
        out.max_depth = max(out.max_depth, level)
        if isinstance(node, NoTrigger):
            out.terminals += 1
        fams[family_of(node)] += 1
    out.families = dict(fams)
    creator = getattr(tree, "creator", None)
    if creator is not None:
        # num shots, each spawning every child once per rudder
        out.bullets_per_volley = tree.num * len(creator.children) * len(creator.rudders)
    return out
