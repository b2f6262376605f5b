from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Literal

BulletShapeType = Literal["missile", "arrow", "claw"]


@dataclass
class CommonBullet:
    """A spawned bullet. Only the shape is decided here; the simulation owns the rest."""

    shape: str


BulletCtor = Callable[[], CommonBullet]

# Global registry of bullet constructors by shape id.
_shape_registry: Dict[str, BulletCtor] = {}


def register_shape(name: str) -> Callable[[BulletCtor], BulletCtor]:
    """
    Decorator to register a zero-argument bullet constructor.

        @register_shape("missile")
        def missile() -> CommonBullet:
            ...
    """
    def decorator(ctor: BulletCtor) -> BulletCtor:
        _shape_registry[name] = ctor
        return ctor

    return decorator


def get_shape(name: str) -> BulletCtor:
    """
    Look up a bullet constructor by shape id.

    Raises KeyError if the shape is unknown.
    """
    try:
        return _shape_registry[name]
    except KeyError as exc:
        known = ", ".join(sorted(_shape_registry)) or "<none>"
        raise KeyError(f"Unknown bullet shape '{name}'. Known shapes: {known}") from exc


@register_shape("missile")
def _missile() -> CommonBullet:
    return CommonBullet("missile")


@register_shape("arrow")
def _arrow() -> CommonBullet:
    return CommonBullet("arrow")


@register_shape("claw")
def _claw() -> CommonBullet:
    return CommonBullet("claw")


@dataclass(frozen=True)
class BulletFactory:
    """Deferred bullet construction; calling it allocates a new bullet."""

    shape: str

    def __call__(self) -> CommonBullet:
        return get_shape(self.shape)()


def bullet_factory(shape: str) -> BulletFactory:
    get_shape(shape)  # fail early on unknown shapes
    return BulletFactory(shape)
