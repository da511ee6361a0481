#Maze generation suite: 19 generators over one grid model, a BFS solver and a PNG renderer

from .algorithms import GENERATORS, MazeGenerator, generate, get_generator, list_algorithms
from .braid import braid
from .errors import ConfigError, MazeError, UnknownAlgorithmError, UnsolvableMazeError
from .maze import Cell, Maze, shortest_path

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "ConfigError",
    "GENERATORS",
    "Maze",
    "MazeError",
    "MazeGenerator",
    "UnknownAlgorithmError",
    "UnsolvableMazeError",
    "braid",
    "generate",
    "get_generator",
    "list_algorithms",
    "shortest_path",
]
