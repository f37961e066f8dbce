from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from snake_cube.core.lattice import (
    DIRECTIONS,
    Direction,
    Position,
    add,
    in_bounds,
    scale,
    turn_directions,
    validate_shape,
)
from snake_cube.core.occupancy import OccupancyMap
from snake_cube.invariants.solution_audit import audit_solution
from snake_cube.logging import get_logger

logger = get_logger(__name__)

Path = tuple[Position, ...]


class SearchStatus(enum.Enum):
    SOLVED = "solved"
    NO_SOLUTION = "no_solution"
    ABORTED = "aborted"


class SearchAborted(Exception):
    """Raised inside the recursion when ``should_abort`` asks the search to stop."""


@dataclass(frozen=True, slots=True)
class SearchStep:
    """Intermediate state handed to observers after a segment is committed.

    ``occupancy`` is a private copy; mutating it has no effect on the search.
    """

    occupancy: OccupancyMap
    path: Path
    depth: int


@dataclass(slots=True)
class SearchStats:
    nodes_visited: int = 0


@dataclass(frozen=True, slots=True)
class SearchResult:
    status: SearchStatus
    n: int
    shape: tuple[int, ...]
    path: Path | None
    nodes_visited: int

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "N": self.n,
            "shape": list(self.shape),
            "path": [list(p) for p in self.path] if self.path is not None else None,
            "nodes_visited": self.nodes_visited,
        }


def solve(
    occupancy: OccupancyMap,
    path_so_far: Path,
    remaining_shape: Sequence[int],
    current_end: Position,
    current_direction: Direction,
    *,
    n: int,
    on_step: Callable[[SearchStep], None] | None = None,
    should_abort: Callable[[], bool] | None = None,
    stats: SearchStats | None = None,
) -> Path | None:
    """Place ``remaining_shape[0]`` along ``current_direction`` and search depth-first.

    ``occupancy`` is owned by this call and is mutated in place; every branch
    below receives its own copy. Returns the first complete path found in
    ``DIRECTIONS`` order, or None when every branch fails. Raises
    SearchAborted when ``should_abort()`` returns true.
    """
    if should_abort is not None and should_abort():
        raise SearchAborted()
    if stats is not None:
        stats.nodes_visited += 1

    length = remaining_shape[0]
    candidate_end = add(current_end, scale(current_direction, length))
    if not in_bounds(candidate_end, n):
        return None

    steps = [add(current_end, scale(current_direction, i)) for i in range(1, length + 1)]
    # whole segment must be free before anything is committed
    if any(occupancy.has(p) for p in steps):
        return None
    for p in steps:
        occupancy.set(p, True)

    path = path_so_far + (candidate_end,)
    if on_step is not None:
        on_step(SearchStep(occupancy=occupancy.copy(), path=path, depth=len(path_so_far) - 1))

    if len(remaining_shape) == 1:
        return path

    rest = remaining_shape[1:]
    for d in turn_directions(current_direction):
        found = solve(
            occupancy.copy(),
            path,
            rest,
            candidate_end,
            d,
            n=n,
            on_step=on_step,
            should_abort=should_abort,
            stats=stats,
        )
        if found is not None:
            return found
    return None


def solve_shape(
    shape: Sequence[int],
    *,
    start: Position = (0, 0, 0),
    initial_direction: Direction = (1, 0, 0),
    on_step: Callable[[SearchStep], None] | None = None,
    should_abort: Callable[[], bool] | None = None,
    audit: bool = True,
) -> SearchResult:
    """Validate ``shape`` and search for one embedding into the N x N x N cube.

    Raises InvalidConfigurationError (a ValueError) before searching when
    1 + sum(shape) is not a perfect cube N**3 with N >= 2. Exhaustion and
    cancellation are reported through ``SearchResult.status``.
    """
    n = validate_shape(shape)
    start = tuple(start)  # type: ignore[assignment]
    initial_direction = tuple(initial_direction)  # type: ignore[assignment]
    if len(start) != 3 or not in_bounds(start, n):
        raise ValueError(f"start must be a lattice cell in [0, {n})^3, got {start}")
    if initial_direction not in DIRECTIONS:
        raise ValueError(f"initial_direction must be an axis-aligned unit vector, got {initial_direction}")

    shape_t = tuple(shape)
    logger.debug("validated shape: %d segments, N=%d", len(shape_t), n)
    logger.info("solving snake of %d segments in %dx%dx%d cube", len(shape_t), n, n, n)

    occupancy = OccupancyMap()
    occupancy.set(start, True)
    stats = SearchStats()

    try:
        path = solve(
            occupancy,
            (start,),
            shape_t,
            start,
            initial_direction,
            n=n,
            on_step=on_step,
            should_abort=should_abort,
            stats=stats,
        )
    except SearchAborted:
        logger.info("search aborted after %d nodes", stats.nodes_visited)
        return SearchResult(SearchStatus.ABORTED, n, shape_t, None, stats.nodes_visited)

    if path is None:
        logger.info("no solution after %d nodes", stats.nodes_visited)
        return SearchResult(SearchStatus.NO_SOLUTION, n, shape_t, None, stats.nodes_visited)

    if audit:
        audit_solution(shape_t, path, n, start=start)
    logger.info("solved after %d nodes", stats.nodes_visited)
    return SearchResult(SearchStatus.SOLVED, n, shape_t, path, stats.nodes_visited)
