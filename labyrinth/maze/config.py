from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .generators import DEFAULT_ALGORITHM, resolve_algorithm
from .grid import MIN_DIMENSION

# Size presets offered by the game front end (width, height)
SIZE_PRESETS: Dict[str, Tuple[int, int]] = {
    "small": (15, 15),
    "medium": (25, 25),
    "large": (35, 35),
}
DEFAULT_SIZE = "medium"


def preset_dimensions(name: str) -> Tuple[int, int]:
    key = (name or "").strip().lower()
    if key not in SIZE_PRESETS:
        raise ValueError(f"unknown size preset {name!r}; expected one of {sorted(SIZE_PRESETS)}")
    return SIZE_PRESETS[key]


@dataclass
class MazeConfig:
    width: int = 25
    height: int = 25
    algorithm: str = DEFAULT_ALGORITHM
    seed: Optional[int] = None

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < MIN_DIMENSION:
                raise ValueError(f"{name} must be an integer >= {MIN_DIMENSION}, got {value!r}")
        self.algorithm = resolve_algorithm(self.algorithm)

    @classmethod
    def from_preset(cls, size: str, algorithm: str = DEFAULT_ALGORITHM, seed: Optional[int] = None) -> "MazeConfig":
        width, height = preset_dimensions(size)
        return cls(width=width, height=height, algorithm=algorithm, seed=seed)


__all__ = ["MazeConfig", "SIZE_PRESETS", "DEFAULT_SIZE", "preset_dimensions"]
