from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, Tuple, Union

from barrage.errors import UnknownRudder


@dataclass(frozen=True)
class NoRudder:
    pass


@dataclass(frozen=True)
class Yaw:
    rate: float  # radians per frame


@dataclass(frozen=True)
class Pitch:
    rate: float  # radians per frame


Rudder = Union[NoRudder, Yaw, Pitch]

none = NoRudder()


def yaw(rate: float) -> Yaw:
    return Yaw(rate)


def pitch(rate: float) -> Pitch:
    return Pitch(rate)


RudderCtor = Callable[[float], Rudder]

# steering token -> [(axis, rate)], axis is "yaw" or "pitch"; empty means straight
STEERING: Dict[str, Tuple[Tuple[str, float], ...]] = {
    "straight": (),
    "lspin": (("yaw", -math.pi * 0.02),),
    "rspin": (("yaw", math.pi * 0.02),),
    "lrspin": (("yaw", -math.pi * 0.02), ("yaw", math.pi * 0.02)),
    "udspin": (("pitch", -math.pi * 0.01), ("pitch", math.pi * 0.01)),
    "inner": (("yaw", math.pi * 0.015), ("yaw", -math.pi * 0.015)),
    "outer": (("yaw", -math.pi * 0.015), ("yaw", math.pi * 0.015)),
}


def rudders_for(token: str, swap: bool = False) -> Tuple[Rudder, ...]:
    """
    Map a steering token to one or two rudders.

    swap=True exchanges the yaw and pitch axes (used by mirrored planes).
    Raises UnknownRudder for tokens missing from STEERING.
    """
    try:
        spec = STEERING[token]
    except KeyError:
        raise UnknownRudder(token) from None
    if not spec:
        return (none,)
    axes: Dict[str, RudderCtor] = {"yaw": pitch, "pitch": yaw} if swap else {"yaw": yaw, "pitch": pitch}
    return tuple(axes[axis](rate) for axis, rate in spec)
