"""snake_cube.search"""

from .path_search import SearchAborted, SearchResult, SearchStatus, SearchStep, solve, solve_shape

__all__ = [
    "solve",
    "solve_shape",
    "SearchAborted",
    "SearchResult",
    "SearchStatus",
    "SearchStep",
]
