"""Speed profiles for bullets.

Each engine is plain data; the simulation reads the fields every frame.
"""
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Uniform:
    speed: float


@dataclass(frozen=True)
class Accel:
    start: float
    rate: float


@dataclass(frozen=True)
class Decel:
    speed: float
    rate: float


@dataclass(frozen=True)
class Quick:
    """Short burst at `speed`, then settles down at `rate`."""

    speed: float
    rate: float


Engine = Union[Uniform, Accel, Decel, Quick]


def uniform(speed: float) -> Uniform:
    return Uniform(speed)


def accel(start: float, rate: float) -> Accel:
    return Accel(start, rate)


def decel(speed: float, rate: float) -> Decel:
    return Decel(speed, rate)


def quick(speed: float, rate: float) -> Quick:
    return Quick(speed, rate)
