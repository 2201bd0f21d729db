"""
Maze Traversal Engine

Depth-first walk over a maze the server reveals one cell at a time.

The mazes are trees, so a plain DFS over coordinates finds the exit. The
catch is the report: the check endpoint replays the literal walk, so every
time the search jumps from a dead end back to a branch point, the letters of
the cells walked back across must be reported too. A second stack holds the
committed path of fetched cells for that purpose, which means backtracking
never needs another step request.

Example usage:
    engine = TraversalEngine(client, seed)
    path = engine.solve()
    client.verify_path(seed, path)
"""

import logging
from typing import Optional, Protocol

from .models import START, CellResponse, Coordinate

logger = logging.getLogger(__name__)


class CellSource(Protocol):
    """Anything that can reveal a cell for a seed."""

    def fetch_cell(self, seed: str, coordinate: Coordinate) -> CellResponse:
        ...


class TraversalError(Exception):
    """Base exception for traversal failures."""

    pass


class MazeExhaustedError(TraversalError):
    """Every reachable cell was visited without finding the exit."""

    pass


class InconsistentMazeError(TraversalError):
    """The maze broke the tree shape the backtracking relies on."""

    pass


class TraversalEngine:
    """
    DFS with backtrack reporting for a single seed.

    All traversal state belongs to the instance and lives for one run:
        visited    - coordinates already fetched
        frontier   - coordinates waiting to be explored (LIFO)
        true_path  - fetched cells from the start to the current branch
        traveled   - letters of every cell entered, retraced ones included
    """

    def __init__(self, client: CellSource, seed: str, start: Coordinate = START):
        self.client = client
        self.seed = seed
        self.start = start

        self._visited: set[Coordinate] = set()
        self._frontier: list[Coordinate] = []
        self._true_path: list[CellResponse] = []
        self._traveled: list[str] = []

        self.fetch_count: int = 0
        self.backtrack_count: int = 0
        self.end_cell: Optional[CellResponse] = None

    @property
    def traveled_path(self) -> str:
        """Letters reported so far."""
        return "".join(self._traveled)

    @property
    def visited(self) -> frozenset[Coordinate]:
        return frozenset(self._visited)

    @property
    def committed_path(self) -> str:
        """
        Letters along the committed path.

        Once the exit is found this is the direct route from the start to
        the exit, with every detour removed.
        """
        letters = [cell.letter for cell in self._true_path]
        if self.end_cell is not None:
            letters.append(self.end_cell.letter)
        return "".join(letters)

    def solve(self) -> str:
        """
        Walk the maze until the exit cell is fetched.

        Returns:
            The full sequence of letters walked, backtracking included.

        Raises:
            MazeExhaustedError: If the frontier runs dry before the exit.
            InconsistentMazeError: If backtracking cannot find a branch point.
            MazeClientError: Propagated unchanged from the client.
        """
        if self.fetch_count:
            raise RuntimeError("TraversalEngine instances solve a single run")

        self._frontier.append(self.start)

        while True:
            coordinate = self._pop_frontier()
            cell = self._fetch(coordinate)
            self._traveled.append(cell.letter)

            if cell.end:
                self.end_cell = cell
                logger.info(
                    f"Exit found at {cell.coordinate} after {self.fetch_count} "
                    f"steps and {self.backtrack_count} backtracks"
                )
                return self.traveled_path

            pushed = 0
            for neighbor in cell.adjacent:
                if neighbor not in self._visited:
                    self._frontier.append(neighbor)
                    pushed += 1

            if pushed == 0:
                # Dead end: walk back to the cell the next branch leaves from
                self._backtrack(self._peek_frontier())
            else:
                self._true_path.append(cell)

    def _fetch(self, coordinate: Coordinate) -> CellResponse:
        cell = self.client.fetch_cell(self.seed, coordinate)
        self._visited.add(coordinate)
        self.fetch_count += 1
        logger.debug(f"Fetched {cell!r}")
        return cell

    def _discard_visited(self) -> None:
        """Drop frontier entries visited since they were pushed."""
        while self._frontier and self._frontier[-1] in self._visited:
            stale = self._frontier.pop()
            logger.debug(f"Skipping already visited coordinate {stale}")

    def _pop_frontier(self) -> Coordinate:
        self._discard_visited()
        if not self._frontier:
            raise MazeExhaustedError(
                f"Maze exhausted after {self.fetch_count} steps without reaching the exit"
            )
        return self._frontier.pop()

    def _peek_frontier(self) -> Coordinate:
        self._discard_visited()
        if not self._frontier:
            raise MazeExhaustedError(
                f"Maze exhausted after {self.fetch_count} steps without reaching the exit"
            )
        return self._frontier[-1]

    def _backtrack(self, target: Coordinate) -> None:
        """
        Retrace committed cells until one is adjacent to target.

        Each popped cell's letter is reported again. The branch point itself
        stays on the committed path.
        """
        self.backtrack_count += 1
        retraced = 0
        while self._true_path:
            cell = self._true_path.pop()
            self._traveled.append(cell.letter)
            retraced += 1
            if cell.is_adjacent_to(target):
                self._true_path.append(cell)
                logger.debug(
                    f"Backtracked {retraced} cells to {cell.coordinate} heading for {target}"
                )
                return

        raise InconsistentMazeError(
            f"No cell on the committed path is adjacent to {target}"
        )


def solve(client: CellSource, seed: str) -> str:
    """Walk the maze for seed and return the letters traveled."""
    return TraversalEngine(client, seed).solve()
