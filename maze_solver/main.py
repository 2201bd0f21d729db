#!/usr/bin/env python3
"""
Maze Solver entry point

Runs one full cycle: start a maze, walk it, check the walk, and print the
outcome followed by the path traversed.

Usage:
    maze-solver                               # solve a random remote maze
    MAZE_LOCAL_MAZE_FILE=maze.json maze-solver  # solve a local maze file

Exit codes:
    0  the service accepted the path
    1  the service rejected the path
    2  the maze client failed (network, bad response, bad configuration)
    3  the walk failed (no exit reachable, or a maze that is not a tree)
"""

import logging
import sys
from typing import Optional

from pydantic import ValidationError

from maze_solver.client import LocalMazeClient, MazeClient, MazeClientError
from maze_solver.config import Settings, get_settings
from maze_solver.core.maze_parser import MazeParseError, MazeValidationError
from maze_solver.core.traversal import TraversalEngine, TraversalError

logger = logging.getLogger("maze_solver")

EXIT_FOUND = 0
EXIT_LOST = 1
EXIT_CLIENT_ERROR = 2
EXIT_TRAVERSAL_ERROR = 3


def configure_logging(level: str) -> None:
    """Configure root logging once for the command line run."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_client(settings: Settings):
    """Pick the local client when a maze file is configured, else the service."""
    if settings.local_maze_file:
        logger.info(f"Using local maze file {settings.local_maze_file}")
        return LocalMazeClient(settings.local_maze_file)
    return MazeClient(base_url=settings.base_url, timeout=settings.request_timeout)


def main(settings: Optional[Settings] = None) -> int:
    """
    Solve one maze and report the result.

    Args:
        settings: Overrides the environment-derived settings.

    Returns:
        Process exit code.
    """
    if settings is None:
        try:
            settings = get_settings()
        except ValidationError as e:
            print(f"Error: invalid configuration: {e}", file=sys.stderr)
            return EXIT_CLIENT_ERROR

    configure_logging(settings.log_level)

    try:
        client = build_client(settings)
        seed = client.start_session()
        engine = TraversalEngine(client, seed)
        traveled_path = engine.solve()
        found = client.verify_path(seed, traveled_path)
    except (MazeClientError, MazeParseError, MazeValidationError) as e:
        logger.error(f"Maze client failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CLIENT_ERROR
    except TraversalError as e:
        logger.error(f"Traversal failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_TRAVERSAL_ERROR

    logger.info(
        f"Walked {len(traveled_path)} letters over {engine.fetch_count} cells; "
        f"direct route: {engine.committed_path}"
    )

    if found:
        print(f"Found the exit for seed {seed}! The path traversed was:")
    else:
        print(f"Lost forever in the maze with seed {seed} :(   The path traversed was:")
    print(traveled_path)

    return EXIT_FOUND if found else EXIT_LOST


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
