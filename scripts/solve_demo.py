from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from snake_cube import solve_shape  # noqa: E402


def main() -> None:
    print(solve_shape([2, 1, 1, 2, 1, 2, 1, 1, 2, 2, 1, 1, 1, 2, 2, 2, 2]).to_dict())
    print(solve_shape([1] * 7).to_dict())


if __name__ == "__main__":
    main()
