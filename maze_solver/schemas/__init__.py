# Wire schemas
from .maze import CheckResponse, LocalCell, LocalMazeDocument, MazePosition, StepResponse

__all__ = [
    "CheckResponse",
    "LocalCell",
    "LocalMazeDocument",
    "MazePosition",
    "StepResponse",
]
