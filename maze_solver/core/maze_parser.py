"""
Maze Parser for local maze files.

Loads and validates mazes stored as JSON, in the same shape the step
endpoint uses for a single cell:

    {
        "cells": [
            {"x": 0, "y": 0, "letter": "A", "adjacent": [{"x": 1, "y": 0}], "end": false},
            {"x": 1, "y": 0, "letter": "B", "adjacent": [{"x": 0, "y": 0}], "end": true}
        ]
    }

Adjacency order is kept exactly as written, since the solver explores
neighbors in the order they are listed.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from maze_solver.core.models import START, CellResponse, Coordinate
from maze_solver.schemas.maze import LocalMazeDocument


class MazeParseError(Exception):
    """Exception raised when maze parsing fails."""

    pass


class MazeValidationError(Exception):
    """Exception raised when maze validation fails."""

    pass


@dataclass
class LocalMaze:
    """Parsed maze ready to be served locally."""

    cells: dict[Coordinate, CellResponse] = field(default_factory=dict)
    name: str = "Unnamed"

    @property
    def start(self) -> CellResponse:
        return self.cells[START]

    @property
    def exits(self) -> list[Coordinate]:
        return [c for c, cell in self.cells.items() if cell.end]

    def __len__(self) -> int:
        return len(self.cells)


def parse_maze_json(maze_text: str, name: str = "Unnamed") -> LocalMaze:
    """
    Parse maze JSON and build a LocalMaze.

    Args:
        maze_text: JSON document describing every cell.
        name: Name of the maze, used in messages only.

    Returns:
        LocalMaze keyed by coordinate.

    Raises:
        MazeParseError: If the text is empty, not JSON, or not a maze document.
        MazeValidationError: If the maze is structurally invalid.
    """
    if not maze_text or not maze_text.strip():
        raise MazeParseError("Maze text is empty")

    try:
        raw = json.loads(maze_text)
    except json.JSONDecodeError as e:
        raise MazeParseError(f"Maze is not valid JSON: {e}") from e

    try:
        document = LocalMazeDocument.model_validate(raw)
    except ValidationError as e:
        raise MazeParseError(f"Maze does not match the cell schema: {e}") from e

    cells: dict[Coordinate, CellResponse] = {}
    for entry in document.cells:
        coordinate = entry.coordinate
        if coordinate in cells:
            raise MazeValidationError(f"Duplicate cell at {coordinate}")
        cells[coordinate] = entry.to_cell(coordinate)

    if START not in cells:
        raise MazeValidationError(f"Maze must have a cell at the start position {START}")

    for cell in cells.values():
        for neighbor in cell.adjacent:
            if neighbor not in cells:
                raise MazeValidationError(
                    f"Cell {cell.coordinate} lists unknown neighbor {neighbor}"
                )

    maze = LocalMaze(cells=cells, name=name)
    if not maze.exits:
        raise MazeValidationError("Maze must have at least one end cell")
    return maze


def load_maze_file(file_path: Union[str, Path]) -> LocalMaze:
    """
    Load and parse a maze from a JSON file.

    Args:
        file_path: Path to the maze file.

    Returns:
        LocalMaze named after the file stem.

    Raises:
        MazeParseError: If the file cannot be read or parsed.
        MazeValidationError: If the maze is structurally invalid.
    """
    path = Path(file_path)

    if not path.exists():
        raise MazeParseError(f"Maze file not found: {path}")

    if not path.is_file():
        raise MazeParseError(f"Path is not a file: {path}")

    try:
        maze_text = path.read_text(encoding="utf-8")
    except (IOError, UnicodeDecodeError) as e:
        raise MazeParseError(f"Failed to read maze file {path}: {e}") from e

    return parse_maze_json(maze_text, name=path.stem)
