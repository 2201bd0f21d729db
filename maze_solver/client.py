"""
Maze Client

Wraps the letter maze service behind three calls:

    client = MazeClient()
    seed = client.start_session()                        # follows the /start redirect
    cell = client.fetch_cell(seed, Coordinate(0, 0))     # reveals one cell
    ok = client.verify_path(seed, "ABCB...")             # checks the walk

LocalMazeClient offers the same calls over a maze loaded from a JSON file,
so the solver can run without the network.

Every call is synchronous and attempted once. Failures raise MazeClientError
subclasses; nothing here exits the process.
"""

import logging
from pathlib import Path
from typing import Optional, Union
from urllib.parse import parse_qs, urljoin, urlparse

import requests
from pydantic import BaseModel, ValidationError

from maze_solver.config import DEFAULT_BASE_URL
from maze_solver.core.maze_parser import LocalMaze, load_maze_file
from maze_solver.core.models import START, CellResponse, Coordinate
from maze_solver.schemas.maze import CheckResponse, StepResponse

logger = logging.getLogger(__name__)


class MazeClientError(Exception):
    """Base exception for maze client errors."""
    pass


class ConfigurationError(MazeClientError):
    """The client was given a base URL it cannot use."""
    pass


class TransportError(MazeClientError):
    """The request did not produce a successful HTTP response."""
    pass


class ResponseFormatError(MazeClientError):
    """The server answered with something other than what the API promises."""
    pass


class MazeClient:
    """
    Client for the remote maze service.

    The client holds only the base URL and transport options; the seed is
    passed to every call so one client can serve any maze.
    """

    DEFAULT_BASE_URL = DEFAULT_BASE_URL

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the maze client.

        Args:
            base_url: Service base URL. Defaults to the public challenge.
            timeout: Seconds to wait per request. None waits indefinitely.
        """
        base_url = base_url or self.DEFAULT_BASE_URL
        parsed = urlparse(base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(f"Malformed base URL: {base_url!r}")

        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout

    def _get(self, endpoint: str, params: Optional[dict] = None) -> requests.Response:
        """Make a single GET request against the service."""
        url = urljoin(self.base_url, endpoint)
        logger.debug(f"GET {url} params={params}")
        try:
            response = requests.request(
                "GET", url, params=params, timeout=self.timeout, allow_redirects=True
            )
            response.raise_for_status()
            return response
        except requests.exceptions.HTTPError as e:
            raise TransportError(
                f"API error on /{endpoint}: {e.response.status_code}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request to /{endpoint} failed: {e}") from e

    def _get_json(self, endpoint: str, params: dict, schema: type[BaseModel]) -> BaseModel:
        response = self._get(endpoint, params)
        try:
            return schema.model_validate(response.json())
        except ValueError as e:
            # ValidationError is a ValueError, as is the JSON decode failure
            kind = "unexpected" if isinstance(e, ValidationError) else "non-JSON"
            raise ResponseFormatError(f"/{endpoint} returned {kind} body: {e}") from e

    def start_session(self) -> str:
        """
        Start a random maze.

        Returns:
            The seed taken from the query string the /start redirect lands on.
        """
        response = self._get("start")
        seed = _seed_from_url(response.url)
        if not seed:
            raise ResponseFormatError(f"No seed in redirect target: {response.url}")
        logger.info(f"Started maze with seed {seed}")
        return seed

    def fetch_cell(self, seed: str, coordinate: Coordinate) -> CellResponse:
        """
        Reveal the cell at coordinate.

        Returns:
            CellResponse with the cell's letter, neighbors and end flag.
        """
        step = self._get_json(
            "step",
            {"s": seed, **coordinate.to_dict()},
            StepResponse,
        )
        return step.to_cell(coordinate)

    def verify_path(self, seed: str, path: str) -> bool:
        """
        Ask the service whether path escapes the maze.

        Returns:
            The server's success flag.
        """
        check = self._get_json("check", {"s": seed, "guess": path}, CheckResponse)
        logger.info(f"Check for seed {seed}: success={check.success}")
        return check.success


def _seed_from_url(url: str) -> Optional[str]:
    """Extract the s= query parameter from a URL."""
    values = parse_qs(urlparse(url).query).get("s")
    return values[0] if values else None


class LocalMazeClient:
    """
    Local maze client for solving without the service.

    Serves cells from a LocalMaze and verifies paths by replaying them.

    Example:
        client = LocalMazeClient("mazes/small.json")
        seed = client.start_session()
        cell = client.fetch_cell(seed, Coordinate(0, 0))
    """

    SEED = "local"

    def __init__(self, maze: Union[LocalMaze, str, Path]):
        """
        Initialize with a parsed maze or a path to a maze file.

        Args:
            maze: LocalMaze, or path to a maze JSON file.
        """
        if not isinstance(maze, LocalMaze):
            maze = load_maze_file(maze)
        self.maze = maze
        self.fetch_count: int = 0
        self.fetched: list[Coordinate] = []

    def _check_seed(self, seed: str) -> None:
        if seed != self.SEED:
            raise MazeClientError(f"Unknown seed: {seed}")

    def start_session(self) -> str:
        """Start a local session."""
        return self.SEED

    def fetch_cell(self, seed: str, coordinate: Coordinate) -> CellResponse:
        """Reveal a cell. Unknown coordinates behave like a server error."""
        self._check_seed(seed)
        cell = self.maze.cells.get(coordinate)
        if cell is None:
            raise MazeClientError(f"No cell at {coordinate} in maze {self.maze.name}")
        self.fetch_count += 1
        self.fetched.append(coordinate)
        return cell

    def verify_path(self, seed: str, path: str) -> bool:
        """
        Replay path as a literal walk.

        The first letter must be the start cell's and each following letter
        must belong to a cell adjacent to the previous one. Letters need not
        be unique, so every position consistent with the walk so far is
        tracked. The walk succeeds if it can end on an exit.
        """
        self._check_seed(seed)
        cells = self.maze.cells
        start = cells.get(START)
        if not path or start is None or path[0] != start.letter:
            return False

        positions = {START}
        for letter in path[1:]:
            positions = {
                neighbor
                for position in positions
                for neighbor in cells[position].adjacent
                if neighbor in cells and cells[neighbor].letter == letter
            }
            if not positions:
                return False

        return any(cells[position].end for position in positions)
