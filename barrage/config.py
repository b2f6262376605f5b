import math
from dataclasses import dataclass
from typing import Optional, Tuple


default_seed = 12345


@dataclass
class FormulatorConfig:
    seed: int = default_seed
    min_power: float = 2.0        # below this a node is terminal
    max_depth: int = 12           # cap on pattern depth (grows on 360/90 branches only)
    max_level: int = 48           # cap on recursion level (grows on every child)
    # child count: rand_int(branch_min, branch_max) * max(1, branch_depth_scale - depth)
    branch_min: int = 2
    branch_max: int = 16
    branch_depth_scale: int = 3
    # firing interval for ring/fan triggers: rand_int(*frame_steps) * frame_unit
    frame_steps: Tuple[int, int] = (4, 7)
    frame_unit: int = 10
    # start delay for rapid/splash triggers, same units as frame
    start_steps: Tuple[int, int] = (2, 8)
    rapid_interval: Tuple[int, int] = (30, 60)
    splash_spread: float = 4.0
    narrow_step: float = math.pi / 24  # sweep per bullet for non-360 fans
    catalog_path: Optional[str] = None

    def __post_init__(self) -> None:
        if self.branch_min < 1 or self.branch_max < self.branch_min:
            raise ValueError(f"bad branch range [{self.branch_min}, {self.branch_max}]")
        if self.max_depth < 0 or self.max_level < 0:
            raise ValueError("max_depth and max_level must be >= 0")
