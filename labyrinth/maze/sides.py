# Side / direction constants centralized for modular imports
TOP = "top"
RIGHT = "right"
BOTTOM = "bottom"
LEFT = "left"

# Fixed expansion order used by the solver, flood fill and backtracker
SIDES = (TOP, RIGHT, BOTTOM, LEFT)

DELTAS = {
    TOP: (0, -1),
    RIGHT: (1, 0),
    BOTTOM: (0, 1),
    LEFT: (-1, 0),
}

OPPOSITE = {TOP: BOTTOM, RIGHT: LEFT, BOTTOM: TOP, LEFT: RIGHT}

# Player-facing movement names map onto wall sides
DIRECTIONS = {
    "up": TOP,
    "right": RIGHT,
    "down": BOTTOM,
    "left": LEFT,
}


def side_for(direction: str) -> str:
    """Resolve a movement direction ('up') or side name ('top') to a side."""
    key = (direction or "").strip().lower()
    if key in DIRECTIONS:
        return DIRECTIONS[key]
    if key in DELTAS:
        return key
    raise ValueError(f"unknown direction: {direction!r}")


__all__ = ["TOP", "RIGHT", "BOTTOM", "LEFT", "SIDES", "DELTAS", "OPPOSITE", "DIRECTIONS", "side_for"]
