#Registry of every maze generation algorithm, keyed by its config/CLI name

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..errors import UnknownAlgorithmError
from ..maze import Maze
from .base import MazeGenerator
from .cellular import CellularAutomata
from .division import RecursiveDivision
from .hamiltonian import Hamiltonian
from .rows import BinaryTree, Sidewinder
from .sets import Eller, Kruskal, RandomObstacle
from .trees import BreadthFirst, DepthFirst, GrowingTree, Prim, RecursiveBacktracking, RecursiveBacktrackingBraided
from .voronoi import Voronoi
from .walks import AldousBroder, DrunkardsWalk, HuntAndKill, Wilsons

GENERATORS: Dict[str, MazeGenerator] = {
    generator.name: generator
    for generator in (
        RecursiveBacktracking(),
        Kruskal(),
        Prim(),
        AldousBroder(),
        Wilsons(),
        HuntAndKill(),
        GrowingTree(),
        BinaryTree(),
        Sidewinder(),
        Eller(),
        DepthFirst(),
        BreadthFirst(),
        RecursiveBacktrackingBraided(),
        RecursiveDivision(),
        CellularAutomata(),
        DrunkardsWalk(),
        RandomObstacle(),
        Hamiltonian(),
        Voronoi(),
    )
}

DEFAULT_ALGORITHM = RecursiveBacktracking.name


def normalize_name(name: str) -> str:
    return name.strip().lower().replace("-", "_")


def get_generator(name: str) -> MazeGenerator:
    try:
        return GENERATORS[normalize_name(name)]
    except KeyError:
        raise UnknownAlgorithmError(name) from None


def list_algorithms() -> List[Tuple[str, str]]:
    return [(name, generator.title) for name, generator in GENERATORS.items()]


def generate(
    algorithm: str,
    width: int,
    height: int,
    complexity: float = 0.5,
    seed: Optional[int] = None,
) -> Maze:
    return get_generator(algorithm).generate(width, height, complexity, seed)


__all__ = [
    "GENERATORS",
    "DEFAULT_ALGORITHM",
    "MazeGenerator",
    "generate",
    "get_generator",
    "list_algorithms",
    "normalize_name",
    "AldousBroder",
    "BinaryTree",
    "BreadthFirst",
    "CellularAutomata",
    "DepthFirst",
    "DrunkardsWalk",
    "Eller",
    "GrowingTree",
    "Hamiltonian",
    "HuntAndKill",
    "Kruskal",
    "Prim",
    "RandomObstacle",
    "RecursiveBacktracking",
    "RecursiveBacktrackingBraided",
    "RecursiveDivision",
    "Sidewinder",
    "Voronoi",
    "Wilsons",
]
