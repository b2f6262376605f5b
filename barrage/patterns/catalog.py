"""Pattern catalog: the named shapes a wave can take, with their weights."""
from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Tuple, Union

import yaml

from barrage.behavior.rudder import STEERING
from barrage.errors import CatalogError, UnhandledPattern, UnknownRudder
from barrage.rng import RandomSource

FAMILIES = ("xy", "xz", "yz", "rapid")

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "content" / "patterns.yaml"


@dataclass(frozen=True)
class PatternDescriptor:
    """
    Tokens of one catalog pattern, e.g. ("xy", "360", "lrspin", "2").

    family   - xy | xz | yz | rapid
    modifier - angle/placement token ("360", "back", "90", ...) or, for
               rapid, "straight" vs anything else (splash)
    steer    - steering token, or the aim token for rapid
    repeat   - how many generations the volley spans, "1" if omitted
    """

    tokens: Tuple[str, ...]

    @classmethod
    def parse(cls, pattern_id: str) -> "PatternDescriptor":
        return cls(tuple(pattern_id.split()))

    def _token(self, i: int, default: str = "") -> str:
        return self.tokens[i] if len(self.tokens) > i else default

    @property
    def family(self) -> str:
        return self._token(0)

    @property
    def modifier(self) -> str:
        return self._token(1)

    @property
    def steer(self) -> str:
        return self._token(2)

    @property
    def repeat(self) -> str:
        return self._token(3, "1") or "1"

    def offsets(self) -> List[int]:
        """Generation offsets covered by the repeat token."""
        return list(range(int(self.repeat)))

    def __str__(self) -> str:
        return " ".join(self.tokens)


@dataclass(frozen=True)
class PatternEntry:
    descriptor: PatternDescriptor
    weight: float
    min_num: int = 1
    max_num: Optional[int] = None
    min_depth: int = 0
    max_depth: Optional[int] = None

    @property
    def unconstrained(self) -> bool:
        return self.min_num <= 1 and self.max_num is None and self.min_depth <= 0 and self.max_depth is None

    def allows(self, num: int, depth: int) -> bool:
        if num < self.min_num or (self.max_num is not None and num > self.max_num):
            return False
        if depth < self.min_depth or (self.max_depth is not None and depth > self.max_depth):
            return False
        return True


def validate_descriptor(desc: PatternDescriptor) -> None:
    """
    Check that the tree builder can handle `desc`.

    Raises UnhandledPattern, UnknownRudder or CatalogError.
    """
    if desc.family not in FAMILIES:
        raise UnhandledPattern(desc)
    if not 3 <= len(desc.tokens) <= 4:
        raise CatalogError(f"Pattern '{desc}' needs 3 or 4 tokens")
    try:
        repeat = int(desc.repeat)
    except ValueError:
        raise CatalogError(f"Pattern '{desc}' has non-integer repeat '{desc.repeat}'") from None
    if repeat < 1:
        raise CatalogError(f"Pattern '{desc}' has repeat {repeat}; must be >= 1")
    if desc.family == "rapid":
        return
    if desc.steer not in STEERING:
        raise UnknownRudder(desc.steer)
    if desc.family == "yz":
        try:
            angle = float(desc.modifier)
        except ValueError:
            angle = math.nan
        if not math.isfinite(angle):
            raise CatalogError(f"Pattern '{desc}' needs a finite numeric angle, got '{desc.modifier}'")


def _build_entry(pattern_id: str, spec: Union[float, int, Mapping]) -> PatternEntry:
    desc = PatternDescriptor.parse(str(pattern_id))
    validate_descriptor(desc)
    if isinstance(spec, Mapping):
        fields = dict(spec)
    else:
        fields = {"weight": spec}
    try:
        weight = float(fields.pop("weight", 1.0))
        max_num = fields.pop("max_num", None)
        max_depth = fields.pop("max_depth", None)
        entry = PatternEntry(
            descriptor=desc,
            weight=weight,
            min_num=int(fields.pop("min_num", 1)),
            max_num=int(max_num) if max_num is not None else None,
            min_depth=int(fields.pop("min_depth", 0)),
            max_depth=int(max_depth) if max_depth is not None else None,
        )
    except (TypeError, ValueError) as exc:
        raise CatalogError(f"Pattern '{desc}' has a malformed entry: {exc}") from exc
    if fields:
        raise CatalogError(f"Pattern '{desc}' has unknown keys: {sorted(fields)}")
    if entry.weight < 0:
        raise CatalogError(f"Pattern '{desc}' has negative weight {entry.weight}")
    return entry


class PatternCatalog:
    def __init__(self, entries: List[PatternEntry]) -> None:
        if not entries:
            raise CatalogError("Pattern catalog is empty")
        if not any(e.unconstrained and e.weight > 0 for e in entries):
            raise CatalogError("Pattern catalog needs an unconstrained entry with positive weight")
        self.entries = list(entries)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Union[float, int, Mapping]]) -> "PatternCatalog":
        """Build from {pattern_id: weight} or {pattern_id: {weight: ..., min_num: ...}}."""
        return cls([_build_entry(pid, spec) for pid, spec in data.items()])

    def __len__(self) -> int:
        return len(self.entries)

    def descriptors(self) -> List[PatternDescriptor]:
        return [e.descriptor for e in self.entries]

    def select(self, num: int, depth: int, rng: RandomSource) -> PatternDescriptor:
        """Weighted choice among the entries eligible for this child count and depth."""
        eligible = [(e.weight, e.descriptor) for e in self.entries if e.allows(num, depth)]
        return rng.select(eligible)


def load_catalog(path: Path | str | None = None, logger: Optional[Callable[[str], None]] = None) -> PatternCatalog:
    """Load and validate a pattern catalog from YAML."""
    if path is None:
        path = DEFAULT_CATALOG_PATH
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Pattern catalog not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    patterns = data.get("patterns") if isinstance(data, dict) else None
    if not isinstance(patterns, dict):
        raise CatalogError(f"Pattern catalog malformed (no 'patterns' mapping): {path}")
    catalog = PatternCatalog.from_mapping(patterns)
    if logger:
        logger(f"[patterns] loaded {len(catalog)} patterns from {path}")
    return catalog


_DEFAULT_CATALOG: Optional[PatternCatalog] = None


def default_catalog() -> PatternCatalog:
    """The bundled catalog, loaded on first use."""
    global _DEFAULT_CATALOG
    if _DEFAULT_CATALOG is None:
        _DEFAULT_CATALOG = load_catalog()
    return _DEFAULT_CATALOG


def select_pattern(
    num: int, depth: int, rng: RandomSource, catalog: Optional[PatternCatalog] = None
) -> PatternDescriptor:
    if catalog is None:
        catalog = default_catalog()
    return catalog.select(num, depth, rng)
