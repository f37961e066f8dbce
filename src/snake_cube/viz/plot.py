from __future__ import annotations

from collections.abc import Sequence

import matplotlib.pyplot as plt

from snake_cube.core.lattice import Position
from snake_cube.invariants.solution_audit import covered_cells


def plot_solution(path: Sequence[Position], n: int, *, ax=None, title: str | None = None):
    """3D scatter of the covered cells (checkerboard by parity) with the chain drawn through them."""
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111, projection="3d")

    cells = covered_cells(path)
    xs = [c[0] for c in cells]
    ys = [c[1] for c in cells]
    zs = [c[2] for c in cells]
    colors = ["#6b4226" if (x + y + z) % 2 == 0 else "#d9b38c" for x, y, z in cells]

    ax.scatter(xs, ys, zs, c=colors, s=120, depthshade=False)
    ax.plot([p[0] for p in path], [p[1] for p in path], [p[2] for p in path], color="green", linewidth=2)
    if path:
        ex, ey, ez = path[-1]
        ax.scatter([ex], [ey], [ez], color="green", s=40)

    ax.set_xlim(-0.5, n - 0.5)
    ax.set_ylim(-0.5, n - 0.5)
    ax.set_zlim(-0.5, n - 0.5)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("z")
    ax.set_title(title or f"Snake cube N={n}")
    ax.set_box_aspect((1, 1, 1))
    return ax
