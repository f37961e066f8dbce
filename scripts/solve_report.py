from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from pathlib import Path

import matplotlib.pyplot as plt

# Allow running as a standalone script from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from snake_cube.core.lattice import InvalidConfigurationError  # noqa: E402
from snake_cube.logging import get_logger, set_global_log_level  # noqa: E402
from snake_cube.search.path_search import SearchStep, solve_shape  # noqa: E402
from snake_cube.viz.plot import plot_solution  # noqa: E402

logger = get_logger("snake_cube.scripts.solve_report")

DEFAULT_SHAPE = "2,1,1,2,1,2,1,1,2,2,1,1,1,2,2,2,2"
SHAPE_RE = re.compile(r"^(\d+,)*\d+$")


def parse_triple(text: str) -> tuple[int, int, int]:
    parts = text.split(",")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected x,y,z, got {text!r}")
    try:
        x, y, z = (int(p) for p in parts)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected integers, got {text!r}") from e
    return (x, y, z)


def parse_shape(text: str) -> list[int]:
    if not SHAPE_RE.match(text):
        raise argparse.ArgumentTypeError(f"shape must be comma-separated integers, got {text!r}")
    return [int(p) for p in text.split(",")]


def main() -> int:
    ap = argparse.ArgumentParser(description="Solve a snake cube and print the path as JSON")
    ap.add_argument("--shape", type=parse_shape, default=parse_shape(DEFAULT_SHAPE))
    ap.add_argument("--start", type=parse_triple, default=(0, 0, 0))
    ap.add_argument("--direction", type=parse_triple, default=(1, 0, 0))
    ap.add_argument("--plot", type=Path, default=None, help="write a PNG of the solved cube here")
    ap.add_argument("--progress", action="store_true", help="log every committed segment at DEBUG")
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    set_global_log_level(getattr(logging, args.log_level))

    def on_step(step: SearchStep) -> None:
        logger.debug("depth=%d end=%s filled=%d", step.depth, step.path[-1], step.occupancy.occupied_count())

    try:
        res = solve_shape(
            args.shape,
            start=args.start,
            initial_direction=args.direction,
            on_step=on_step if args.progress else None,
        )
    except InvalidConfigurationError as e:
        logger.error("invalid configuration: %s", e)
        return 2

    print(json.dumps(res.to_dict(), indent=2))

    if args.plot is not None and res.path is not None:
        args.plot.parent.mkdir(parents=True, exist_ok=True)
        fig = plt.figure(figsize=(6, 6))
        ax = fig.add_subplot(111, projection="3d")
        plot_solution(res.path, res.n, ax=ax)
        fig.tight_layout()
        fig.savefig(args.plot)
        plt.close(fig)
        logger.info("wrote %s", args.plot)

    return 0 if res.solved else 1


if __name__ == "__main__":
    raise SystemExit(main())
