"""Trigger, engine and rudder building blocks consumed by the simulation."""

from . import engine, rudder, trigger
from .trigger import Behavior

__all__ = ["engine", "rudder", "trigger", "Behavior"]
