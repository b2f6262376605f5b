"""
Recursive wave formulation.

Turns (generation, power) into a trigger tree. Each call draws a child
count, picks a pattern from the catalog, formulates its children with an
equal share of the power and wraps them in the pattern's trigger. Power
below `min_power` ends the recursion.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, List, Literal, Optional, Tuple

from barrage import config as config_mod
from barrage.behavior import engine, rudder, trigger
from barrage.behavior.engine import Engine
from barrage.behavior.trigger import Behavior
from barrage.bullet import BulletFactory, bullet_factory
from barrage.errors import UnhandledPattern
from barrage.patterns.catalog import PatternCatalog, PatternDescriptor, default_catalog, load_catalog
from barrage.rng import RandomSource, new_rng
from barrage.summary import summarize

Kind = Literal["normal", "slow", "final"]

# speed scale applied to a child's engine, by the kind of its own subtree
KIND_FACTOR = {"final": 1.0, "slow": 0.3, "normal": 0.6}


@dataclass(frozen=True)
class GenerationState:
    generation: int
    power: float
    depth: int = 0
    level: int = 0  # recursion level, +1 for every child whatever the family


@dataclass(frozen=True)
class Formulation:
    trigger: Behavior
    kind: Kind


TERMINAL = Formulation(trigger.none, "final")


class Formulator:
    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        catalog: Optional[PatternCatalog] = None,
        config: Optional[config_mod.FormulatorConfig] = None,
        logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.cfg = config or config_mod.FormulatorConfig()
        self.rng = rng if rng is not None else new_rng(self.cfg.seed)
        if catalog is None:
            if self.cfg.catalog_path:
                catalog = load_catalog(self.cfg.catalog_path, logger=logger)
            else:
                catalog = default_catalog()
        self.catalog = catalog
        self.logger = logger

    def _log(self, msg: str) -> None:
        if self.logger:
            self.logger(f"[formulate] {msg}")

    # ------------------------------------------------------------------
    # entry points
    # ------------------------------------------------------------------

    def formulate(self, generation: int, power: float) -> Behavior:
        """
        Build the trigger tree for one wave.

        Raises ValueError for a NaN or infinite power.
        """
        result = self.formulate_trigger(GenerationState(generation, power, 0))
        if self.logger:
            self._log(f"gen={generation} power={power:g} -> {summarize(result.trigger)}")
        return result.trigger

    def formulate_trigger(self, state: GenerationState) -> Formulation:
        if state.power < self.cfg.min_power:
            return TERMINAL
        if not math.isfinite(state.power):
            raise ValueError(f"power must be finite, got {state.power}")
        if state.level > self.cfg.max_level:
            self._log(f"level cap {self.cfg.max_level} hit at gen={state.generation} power={state.power:g}")
            return TERMINAL
        if state.depth > self.cfg.max_depth:
            self._log(f"depth cap {self.cfg.max_depth} hit at gen={state.generation} power={state.power:g}")
            return TERMINAL

        num = self.child_count(state)
        pattern = self.catalog.select(num, state.depth, self.rng)
        self._log(f"depth={state.depth} gen={state.generation} power={state.power:g} num={num} pattern='{pattern}'")

        family = pattern.family
        if family in ("xy", "xz"):
            return self._build_ring(state, num, pattern)
        if family == "yz":
            return self._build_declination(state, num, pattern)
        if family == "rapid":
            return self._build_rapid(state, num, pattern)
        raise UnhandledPattern(pattern)

    # ------------------------------------------------------------------
    # policies
    # ------------------------------------------------------------------

    def child_count(self, state: GenerationState) -> int:
        cfg = self.cfg
        draw = self.rng.rand_int(cfg.branch_min, cfg.branch_max)
        num = min(draw * max(1, cfg.branch_depth_scale - state.depth), math.floor(state.power))
        return max(1, num)

    def engine_for(self, kind: Kind, spin: bool = False) -> Engine:
        """
        Pick a speed profile for a child whose subtree is `kind`.

        Weights depend on `kind` only; `spin` is accepted for callers that
        know the motion but does not change the odds. Every candidate is
        drawn before selecting so the amount of entropy consumed does not
        depend on the outcome.
        """
        factor = KIND_FACTOR[kind]
        candidates = [
            (1.5, engine.uniform(self.rng.rand_float(1.5, 2.2) * factor)),
            (1.0 if kind == "final" else 0.0, engine.accel(0.5, 3.3)),
            (0.5, engine.decel(self.rng.rand_float(2.5, 3.5) * factor, 0.8)),
            (0.5 if kind == "normal" else 0.0, engine.quick(self.rng.rand_float(3.5, 5.0), 1.7)),
        ]
        return self.rng.select(candidates)

    def select_bullet(self, missile: float, arrow: float, claw: float) -> BulletFactory:
        shape = self.rng.select([(missile, "missile"), (arrow, "arrow"), (claw, "claw")])
        return bullet_factory(shape)

    # ------------------------------------------------------------------
    # tree builders
    # ------------------------------------------------------------------

    def _formulate_children(
        self, state: GenerationState, num: int, pattern: PatternDescriptor, step: int
    ) -> Tuple[List[int], List[Formulation]]:
        gens = [state.generation + i + 1 for i in pattern.offsets()]
        child_power = state.power / num
        children = [
            self.formulate_trigger(GenerationState(g, child_power, state.depth + step, state.level + 1))
            for g in gens
        ]
        return gens, children

    def _frame(self) -> int:
        lo, hi = self.cfg.frame_steps
        return self.rng.rand_int(lo, hi) * self.cfg.frame_unit

    def _aimed_creator(
        self, state: GenerationState, num: int, pattern: PatternDescriptor, step: int, swap: bool
    ) -> trigger.Creator:
        # shared by the ring and declination families
        spin = pattern.steer != "straight"
        gens, children = self._formulate_children(state, num, pattern, step)
        engines = [self.engine_for(c.kind, spin) for c in children]
        rudders = rudder.rudders_for(pattern.steer, swap=swap)
        bullets = [self.select_bullet(0.7, 0.0 if spin else 1.5, 0.4)]
        return trigger.creator(bullets, gens, engines, rudders, [c.trigger for c in children])

    def _build_ring(self, state: GenerationState, num: int, pattern: PatternDescriptor) -> Formulation:
        mirrored = pattern.family == "xz"
        full = pattern.modifier == "360"
        c = self._aimed_creator(state, num, pattern, 1 if full else 0, swap=mirrored)
        frame = self._frame()
        offset = math.pi if pattern.modifier == "back" else 0.0
        angle = math.pi * 2 if full else self.cfg.narrow_step * num
        build = trigger.xz if mirrored else trigger.xy
        return Formulation(build(c, frame, num, offset, angle, power=state.power, depth=state.depth), "normal")

    def _build_declination(self, state: GenerationState, num: int, pattern: PatternDescriptor) -> Formulation:
        base = math.radians(float(pattern.modifier))
        c = self._aimed_creator(state, num, pattern, 1 if pattern.modifier == "90" else 0, swap=False)
        frame = self._frame()
        return Formulation(trigger.yz(c, frame, num, base, power=state.power, depth=state.depth), "normal")

    def _build_rapid(self, state: GenerationState, num: int, pattern: PatternDescriptor) -> Formulation:
        straight = pattern.modifier == "straight"
        if straight and num >= 3:
            num = 2 + (num % 2)
        gens, children = self._formulate_children(state, num, pattern, 0)
        engines = [self.engine_for(ch.kind, not straight) for ch in children]
        bullets = [self.select_bullet(1.0, 1.0 if straight else 0.0, 0.0)]
        c = trigger.creator(bullets, gens, engines, [rudder.none], [ch.trigger for ch in children])
        lo, hi = self.cfg.start_steps
        start = self.rng.rand_int(lo, hi) * self.cfg.frame_unit
        aim = pattern.steer
        if straight:
            interval = self.rng.rand_int(*self.cfg.rapid_interval)
            node = trigger.rapid(c, start, interval, num, aim, power=state.power, depth=state.depth)
        else:
            node = trigger.splash(c, start, self.cfg.splash_spread, num, aim, power=state.power, depth=state.depth)
        return Formulation(node, "slow")


def formulate(
    generation: int,
    power: float,
    rng: Optional[RandomSource] = None,
    catalog: Optional[PatternCatalog] = None,
    config: Optional[config_mod.FormulatorConfig] = None,
    logger: Optional[Callable[[str], None]] = None,
) -> Behavior:
    """Formulate one wave with a fresh Formulator."""
    return Formulator(rng=rng, catalog=catalog, config=config, logger=logger).formulate(generation, power)
