"""Snake cube solver package."""

from .core.lattice import DIRECTIONS, InvalidConfigurationError, cube_size, validate_shape
from .core.occupancy import OccupancyMap
from .search.path_search import SearchResult, SearchStatus, SearchStep, solve, solve_shape

__all__ = [
    "DIRECTIONS",
    "InvalidConfigurationError",
    "OccupancyMap",
    "SearchResult",
    "SearchStatus",
    "SearchStep",
    "cube_size",
    "solve",
    "solve_shape",
    "validate_shape",
]
