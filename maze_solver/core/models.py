"""
Domain types for the maze walk.

Coordinates are value objects: two Coordinates with the same x and y are
equal and hash alike, so they can key the visited set directly. Wire JSON is
converted into these types by the clients and never reaches the engine.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """2D position of a maze cell."""
    x: int
    y: int

    def to_dict(self) -> dict:
        """Convert to the wire representation."""
        return {"x": self.x, "y": self.y}

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


START = Coordinate(0, 0)


@dataclass(frozen=True)
class CellResponse:
    """What the server revealed about one cell."""
    coordinate: Coordinate
    letter: str
    adjacent: tuple[Coordinate, ...] = ()
    end: bool = False

    def is_adjacent_to(self, coordinate: Coordinate) -> bool:
        """Check whether coordinate appears in this cell's adjacency list."""
        return coordinate in self.adjacent

    def __repr__(self) -> str:
        return (
            f"CellResponse({self.coordinate}, letter={self.letter!r}, "
            f"adjacent={len(self.adjacent)}, end={self.end})"
        )
