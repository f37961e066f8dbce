from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .lattice import Position


@dataclass(slots=True)
class OccupancyMap:
    """Sparse map from lattice position to an occupancy flag.

    Backtracking isolates branches by calling ``copy()`` rather than undoing
    writes, so two live copies must never share the underlying dict.
    """

    cells: dict[Position, bool]

    def __init__(self, entries: Iterable[tuple[Position, bool]] = ()):
        self.cells = {tuple(p): bool(v) for p, v in entries}  # type: ignore[misc]

    def has(self, p: Position) -> bool:
        return self.cells.get(p, False)

    def set(self, p: Position, occupied: bool) -> None:
        self.cells[p] = occupied

    def copy(self) -> OccupancyMap:
        clone = OccupancyMap()
        # keys are immutable tuples and values are bools, so a shallow dict copy suffices
        clone.cells = dict(self.cells)
        return clone

    def entries(self) -> list[tuple[Position, bool]]:
        return list(self.cells.items())

    def occupied_count(self) -> int:
        return sum(1 for v in self.cells.values() if v)

    def __len__(self) -> int:
        return len(self.cells)
