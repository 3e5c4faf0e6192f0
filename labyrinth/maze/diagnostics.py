"""Automated self test and structural debugging reports.

``run_self_test`` sweeps every algorithm, checks connectivity for each size
preset, verifies the outer boundary and times generation. ``debug_eller``
breaks an Eller maze into connected components, which is how row-merging bugs
show up (more than one component, start and goal in different ones).

Both return plain dicts so the CLI can print them and tests can assert on them.
"""
from __future__ import annotations

import random
import time
from typing import Any, Dict, Iterable, List, Optional

from ..logging_utils import get_logger
from .config import SIZE_PRESETS
from .connectivity import check_boundaries, check_maze, connected_components
from .generators import ALGORITHMS, ELLER, RECURSIVE_BACKTRACKING
from .pipeline import generate_maze
from .solver import solve

PERFORMANCE_BUDGET_MS = 5000
MIN_REACHABLE_RATIO = 0.8

_log = get_logger("maze.diagnostics")


def _rng(seed: Optional[int], salt: int) -> random.Random:
    return random.Random(None if seed is None else seed + salt)


def check_algorithms(width: int = 15, height: int = 15, seed: Optional[int] = None,
                     algorithms: Iterable[str] = tuple(ALGORITHMS)) -> Dict[str, Dict[str, Any]]:
    results = {}
    for i, name in enumerate(algorithms):
        try:
            grid = generate_maze(width, height, name, rng=_rng(seed, i))
        except Exception as exc:  # recorded per algorithm, sweep continues
            _log.error(event="selftest_generation_failed", algorithm=name, error=repr(exc))
            results[name] = {'generated': False, 'error': str(exc)}
            continue
        report = check_maze(grid)
        results[name] = {
            'generated': True,
            'valid': report['valid'],
            'symmetric': report['symmetric'],
            'boundaries_intact': report['boundaries_intact'],
            'perfect': report['perfect'],
            'has_path': len(solve(grid, cutoff_ratio=None)) > 0,
        }
    return results


def check_connectivity(sizes: Dict[str, tuple] = SIZE_PRESETS, seed: Optional[int] = None) -> Dict[str, Dict[str, Any]]:
    results = {}
    for i, (label, (w, h)) in enumerate(sizes.items()):
        grid = generate_maze(w, h, RECURSIVE_BACKTRACKING, rng=_rng(seed, 100 + i))
        path = solve(grid, cutoff_ratio=None)
        report = check_maze(grid)
        results[label] = {
            'has_path': bool(path),
            'path_length': len(path),
            'reachable_ratio': report['reachable_ratio'],
        }
    return results


def check_outer_walls(width: int = 25, height: int = 25, seed: Optional[int] = None) -> Dict[str, bool]:
    return check_boundaries(generate_maze(width, height, RECURSIVE_BACKTRACKING, rng=_rng(seed, 200)))


def time_generation(sizes: Dict[str, tuple] = SIZE_PRESETS, seed: Optional[int] = None) -> Dict[str, Dict[str, Any]]:
    results = {}
    for i, (label, (w, h)) in enumerate(sizes.items()):
        start = time.perf_counter()
        generate_maze(w, h, RECURSIVE_BACKTRACKING, rng=_rng(seed, 300 + i))
        elapsed_ms = (time.perf_counter() - start) * 1000
        results[label] = {
            'generation_ms': round(elapsed_ms, 3),
            'cell_count': w * h,
            'ms_per_cell': elapsed_ms / (w * h),
        }
    return results


def run_self_test(seed: Optional[int] = None) -> Dict[str, Any]:
    results = {
        'algorithm_tests': check_algorithms(seed=seed),
        'connectivity_tests': check_connectivity(seed=seed),
        'boundary_tests': check_outer_walls(seed=seed),
        'performance_tests': time_generation(seed=seed),
    }
    results['ok'] = self_test_passed(results)
    _log.info(event="selftest_complete", ok=results['ok'], seed=seed)
    return results


def self_test_passed(results: Dict[str, Any]) -> bool:
    algos_ok = all(
        r.get('generated') and r.get('valid') and r.get('has_path') and r.get('perfect')
        for r in results['algorithm_tests'].values()
    )
    conn_ok = all(
        r['has_path'] and r['reachable_ratio'] > MIN_REACHABLE_RATIO for r in results['connectivity_tests'].values()
    )
    bounds_ok = all(results['boundary_tests'].values())
    perf_ok = all(r['generation_ms'] < PERFORMANCE_BUDGET_MS for r in results['performance_tests'].values())
    return bool(algos_ok and conn_ok and bounds_ok and perf_ok)


def debug_eller(width: int = 15, height: int = 15, seed: Optional[int] = None) -> Dict[str, Any]:
    grid = generate_maze(width, height, ELLER, seed=seed)
    path = solve(grid, cutoff_ratio=None)
    comps = connected_components(grid)
    return {
        'width': width,
        'height': height,
        'path_found': bool(path),
        'path_length': len(path),
        'reachable': check_maze(grid)['reachable'],
        'total': grid.size,
        'components': [{k: c[k] for k in ('size', 'has_start', 'has_goal')} for c in comps],
    }


def _mark(ok: bool) -> str:
    return "PASS" if ok else "FAIL"


def format_report(results: Dict[str, Any]) -> str:
    lines: List[str] = ["TEST RESULTS SUMMARY", "", "Algorithm generation:"]
    for name, r in results['algorithm_tests'].items():
        if not r.get('generated'):
            lines.append(f"  FAIL {name}: error={r.get('error')}")
            continue
        ok = r['valid'] and r['has_path'] and r['perfect']
        lines.append(
            f"  {_mark(ok)} {name}: valid={r['valid']} symmetric={r['symmetric']} "
            f"perfect={r['perfect']} has_path={r['has_path']}"
        )
    lines += ["", "Connectivity:"]
    for label, r in results['connectivity_tests'].items():
        ok = r['has_path'] and r['reachable_ratio'] > MIN_REACHABLE_RATIO
        lines.append(
            f"  {_mark(ok)} {label}: path={r['has_path']} length={r['path_length']} "
            f"reachable={round(r['reachable_ratio'] * 100)}%"
        )
    b = results['boundary_tests']
    lines += [
        "",
        "Boundaries:",
        f"  {_mark(all(b.values()))} top={b['top']} right={b['right']} bottom={b['bottom']} left={b['left']}",
        "",
        "Performance:",
    ]
    for label, r in results['performance_tests'].items():
        lines.append(
            f"  {_mark(r['generation_ms'] < PERFORMANCE_BUDGET_MS)} {label}: {r['generation_ms']}ms "
            f"({r['cell_count']} cells, {r['ms_per_cell']:.4f}ms/cell)"
        )
    lines += ["", f"Overall: {_mark(results['ok'])}"]
    return "\n".join(lines)


__all__ = [
    'run_self_test', 'self_test_passed', 'debug_eller', 'format_report',
    'check_algorithms', 'check_connectivity', 'check_outer_walls', 'time_generation',
]
