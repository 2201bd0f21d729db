"""Pytest configuration and fixtures."""

import json
from typing import Callable
from unittest.mock import MagicMock

import pytest
import requests

from maze_solver.config import get_settings
from maze_solver.core.maze_parser import LocalMaze
from maze_solver.core.models import CellResponse, Coordinate

# (x, y, letter, [(ax, ay), ...], end)
CellSpec = tuple[int, int, str, list[tuple[int, int]], bool]


def build_maze(specs: list[CellSpec], name: str = "test") -> LocalMaze:
    """Build a LocalMaze without file validation."""
    cells = {}
    for x, y, letter, adjacent, end in specs:
        coordinate = Coordinate(x, y)
        cells[coordinate] = CellResponse(
            coordinate=coordinate,
            letter=letter,
            adjacent=tuple(Coordinate(ax, ay) for ax, ay in adjacent),
            end=end,
        )
    return LocalMaze(cells=cells, name=name)


def maze_document(specs: list[CellSpec]) -> str:
    """Render cell specs as a maze JSON file body."""
    return json.dumps({
        "cells": [
            {
                "x": x,
                "y": y,
                "letter": letter,
                "adjacent": [{"x": ax, "y": ay} for ax, ay in adjacent],
                "end": end,
            }
            for x, y, letter, adjacent, end in specs
        ]
    })


# R at the origin with a dead end X to the east and the exit Y to the south.
# X is listed last, so it is explored first.
DEAD_END_MAZE: list[CellSpec] = [
    (0, 0, "R", [(0, 1), (1, 0)], False),
    (1, 0, "X", [(0, 0)], False),
    (0, 1, "Y", [(0, 0)], True),
]

# A two-level tree whose exit is only reached after two dead ends.
#
#   A(0,0) - B(1,0) - D(2,0) - E(3,0)
#     |        |
#   F(0,1)   C(1,1)
BRANCHING_MAZE: list[CellSpec] = [
    (0, 0, "A", [(0, 1), (1, 0)], False),
    (1, 0, "B", [(0, 0), (2, 0), (1, 1)], False),
    (1, 1, "C", [(1, 0)], False),
    (2, 0, "D", [(1, 0), (3, 0)], False),
    (3, 0, "E", [(2, 0)], False),
    (0, 1, "F", [(0, 0)], True),
]


@pytest.fixture
def maze_factory() -> Callable[[list[CellSpec]], LocalMaze]:
    """Factory for in-memory mazes."""
    return build_maze


@pytest.fixture
def maze_file(tmp_path) -> Callable[[list[CellSpec]], str]:
    """Factory writing a maze JSON file and returning its path."""

    def write(specs: list[CellSpec], name: str = "maze") -> str:
        path = tmp_path / f"{name}.json"
        path.write_text(maze_document(specs), encoding="utf-8")
        return str(path)

    return write


@pytest.fixture
def mock_response() -> Callable[..., MagicMock]:
    """Factory for fake requests.Response objects."""

    def make(payload=None, url: str = "https://maze.test/", status_code: int = 200):
        response = MagicMock(spec=requests.Response)
        response.status_code = status_code
        response.url = url
        if isinstance(payload, Exception):
            response.json.side_effect = payload
        else:
            response.json.return_value = payload
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.exceptions.HTTPError(
                f"{status_code} Error", response=response
            )
        return response

    return make


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Keep environment changes from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
