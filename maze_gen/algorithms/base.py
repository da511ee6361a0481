#Shared plumbing for every maze generator
#Each generator owns a fresh random.Random per generate() call, seeded from `seed`
#or from OS entropy when no seed is given

from __future__ import annotations

import logging
import random
import time
from typing import List, Optional, Sequence, Set, TypeVar

from ..errors import UnsolvableMazeError
from ..maze import Coord, Maze

logger = logging.getLogger(__name__)

T = TypeVar("T")

#Below this complexity the walkers lean on the first listed neighbor
LOW_COMPLEXITY = 0.1
FIRST_CHOICE_BIAS = 0.8


def make_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(seed)


def clamp_complexity(complexity: float) -> float:
    return max(0.0, min(1.0, float(complexity)))


def random_cell(maze: Maze, rng: random.Random) -> Coord:
    return (rng.randrange(maze.width), rng.randrange(maze.height))


def choose_biased(rng: random.Random, options: Sequence[T], complexity: float) -> T:
    if len(options) == 1:
        return options[0]
    if complexity < LOW_COMPLEXITY:
        if rng.random() < FIRST_CHOICE_BIAS:
            return options[0]
        return options[rng.randrange(1, len(options))]
    return options[rng.randrange(len(options))]


def hunt(maze: Maze, rng: random.Random, visited: Set[Coord]) -> Optional[Coord]:
    #Row-major scan for the first unvisited cell touching the visited area, link it in
    for x, y in maze.coords():
        if (x, y) in visited:
            continue
        touching = [n for n in maze.neighbors(x, y) if n in visited]
        if not touching:
            continue
        target = touching[0] if len(touching) == 1 else rng.choice(touching)
        maze.remove_wall((x, y), target)
        visited.add((x, y))
        return (x, y)
    return None


def join_stragglers(maze: Maze, rng: random.Random, visited: Set[Coord]) -> int:
    joined = 0
    while hunt(maze, rng, visited) is not None:
        joined += 1
    return joined


class MazeGenerator:
    name: str = ""
    title: str = ""

    def generate(
        self,
        width: int,
        height: int,
        complexity: float = 0.5,
        seed: Optional[int] = None,
    ) -> Maze:
        complexity = clamp_complexity(complexity)
        rng = make_rng(seed)
        start_time = time.perf_counter()

        maze = self.create_maze(width, height)
        self.carve(maze, rng, complexity)

        if maze.solve() is None:
            logger.error(
                "%s produced an unsolvable %dx%d maze (complexity=%.2f, seed=%s)",
                self.name, width, height, complexity, seed,
            )
            raise UnsolvableMazeError(
                f"{self.name} left no path from {maze.entry} to {maze.exit}"
            )

        logger.debug(
            "%s generated %dx%d maze in %.4fs (complexity=%.2f, seed=%s)",
            self.name, width, height, time.perf_counter() - start_time, complexity, seed,
        )
        return maze

    def create_maze(self, width: int, height: int) -> Maze:
        return Maze(width, height)

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def shuffled(rng: random.Random, items: List[T], complexity: float) -> List[T]:
    #Shuffle in place unless complexity is exactly zero
    if complexity > 0.0:
        rng.shuffle(items)
    return items
