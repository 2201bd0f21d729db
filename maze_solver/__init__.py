"""Maze Solver - walks a server-revealed maze and reports the literal path."""

__version__ = "1.0.0"
