from typing import Any, Dict

from .connectivity import dead_end_count, reachable_count
from .grid import Grid


def init_metrics() -> Dict[str, Any]:
    return {
        'cells': 0,
        'passages': 0,
        'dead_ends': 0,
        'reachable': 0,
        'solution_length': None,
        'runtime_ms': 0.0,
    }


def collect_grid_metrics(grid: Grid, metrics: Dict[str, Any]) -> Dict[str, Any]:
    metrics.update(
        {
            'cells': grid.size,
            'passages': grid.passage_count(),
            'dead_ends': dead_end_count(grid),
            'reachable': reachable_count(grid),
        }
    )
    return metrics
