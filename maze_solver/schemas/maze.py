"""Maze schemas for response validation."""

from pydantic import BaseModel, Field, StrictBool

from maze_solver.core.models import CellResponse, Coordinate


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    x: int
    y: int

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.x, self.y)


class StepResponse(BaseModel):
    """Schema for the body returned by the step endpoint."""

    letter: str = Field(..., min_length=1, max_length=1)
    adjacent: list[MazePosition] = Field(...)
    end: StrictBool = Field(...)

    def to_cell(self, coordinate: Coordinate) -> CellResponse:
        """Build the domain cell for the coordinate that was requested."""
        return CellResponse(
            coordinate=coordinate,
            letter=self.letter,
            adjacent=tuple(p.to_coordinate() for p in self.adjacent),
            end=self.end,
        )


class CheckResponse(BaseModel):
    """Schema for the body returned by the check endpoint."""

    success: StrictBool


class LocalCell(StepResponse):
    """Schema for one cell of a local maze file."""

    x: int
    y: int
    adjacent: list[MazePosition] = Field(default_factory=list)
    end: StrictBool = False

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.x, self.y)


class LocalMazeDocument(BaseModel):
    """Schema for a local maze file."""

    cells: list[LocalCell] = Field(..., min_length=1)
