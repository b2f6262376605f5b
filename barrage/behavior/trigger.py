"""Trigger nodes: when and how a volley of child bullets is spawned.

The tree is closed over the variants below. Composite triggers keep the
`power` and `depth` they were formulated with; the simulation ignores them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence, Tuple, Union

from barrage.behavior.engine import Engine
from barrage.behavior.rudder import Rudder
from barrage.bullet import BulletFactory


@dataclass(frozen=True)
class NoTrigger:
    """Fires nothing."""


@dataclass(frozen=True)
class Creator:
    """
    Spawns the volley itself.

    Child i is fired as generation gens[i] with engines[i] and carries
    children[i] as its own trigger. Every child is fired once per rudder.
    """

    bullets: Tuple[BulletFactory, ...]
    gens: Tuple[int, ...]
    engines: Tuple[Engine, ...]
    rudders: Tuple[Rudder, ...]
    children: Tuple["Behavior", ...]


@dataclass(frozen=True)
class Ring:
    plane: Literal["xy", "xz"]
    creator: Creator
    frame: int
    num: int
    offset: float  # initial angle
    angle: float   # total sweep
    power: float = 0.0
    depth: int = 0


@dataclass(frozen=True)
class Declination:
    creator: Creator
    frame: int
    num: int
    base: float  # radians
    power: float = 0.0
    depth: int = 0


@dataclass(frozen=True)
class Rapid:
    creator: Creator
    start: int
    interval: int
    num: int
    aim: str
    power: float = 0.0
    depth: int = 0


@dataclass(frozen=True)
class Splash:
    creator: Creator
    start: int
    spread: float
    num: int
    aim: str
    power: float = 0.0
    depth: int = 0


Behavior = Union[NoTrigger, Creator, Ring, Declination, Rapid, Splash]

none = NoTrigger()


def creator(
    bullets: Sequence[BulletFactory],
    gens: Sequence[int],
    engines: Sequence[Engine],
    rudders: Sequence[Rudder],
    children: Sequence[Behavior],
) -> Creator:
    if not (len(gens) == len(engines) == len(children)):
        raise ValueError(
            f"creator needs one engine and child per generation, got "
            f"{len(gens)} gens, {len(engines)} engines, {len(children)} children"
        )
    return Creator(tuple(bullets), tuple(gens), tuple(engines), tuple(rudders), tuple(children))


def xy(c: Creator, frame: int, num: int, offset: float, angle: float, **state) -> Ring:
    return Ring("xy", c, frame, num, offset, angle, **state)


def xz(c: Creator, frame: int, num: int, offset: float, angle: float, **state) -> Ring:
    return Ring("xz", c, frame, num, offset, angle, **state)


def yz(c: Creator, frame: int, num: int, base: float, **state) -> Declination:
    return Declination(c, frame, num, base, **state)


def rapid(c: Creator, start: int, interval: int, num: int, aim: str, **state) -> Rapid:
    return Rapid(c, start, interval, num, aim, **state)


def splash(c: Creator, start: int, spread: float, num: int, aim: str, **state) -> Splash:
    return Splash(c, start, spread, num, aim, **state)


def children_of(node: Behavior) -> Tuple[Behavior, ...]:
    """Direct child triggers of a node (through its creator)."""
    if isinstance(node, Creator):
        return node.children
    c = getattr(node, "creator", None)
    if c is None:
        return ()
    return c.children
