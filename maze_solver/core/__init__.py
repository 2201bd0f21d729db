# Core module
from .models import START, CellResponse, Coordinate
from .traversal import (
    CellSource,
    InconsistentMazeError,
    MazeExhaustedError,
    TraversalEngine,
    TraversalError,
    solve,
)

__all__ = [
    "START",
    "CellResponse",
    "Coordinate",
    "CellSource",
    "InconsistentMazeError",
    "MazeExhaustedError",
    "TraversalEngine",
    "TraversalError",
    "solve",
]
