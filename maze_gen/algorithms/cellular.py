#Cave-style generator: random fill smoothed by a cellular automaton, then stitched together

from __future__ import annotations

import logging
import random
from typing import List

from ..components import find_components, stitch_components
from ..maze import Maze
from .base import MazeGenerator

logger = logging.getLogger(__name__)

#A cell becomes solid when at least this many of its 8 neighbors are solid
SOLID_NEIGHBOR_THRESHOLD = 5


def smooth(solid: List[List[bool]]) -> List[List[bool]]:
    #One automaton pass, out of bounds counts as solid
    height = len(solid)
    width = len(solid[0]) if height else 0
    result = [row[:] for row in solid]
    for y in range(height):
        for x in range(width):
            count = 0
            for dy in (-1, 0, 1):
                for dx in (-1, 0, 1):
                    if dx == 0 and dy == 0:
                        continue
                    nx, ny = x + dx, y + dy
                    if not (0 <= nx < width and 0 <= ny < height) or solid[ny][nx]:
                        count += 1
            result[y][x] = count >= SOLID_NEIGHBOR_THRESHOLD
    return result


class CellularAutomata(MazeGenerator):
    name = "cellular_automata"
    title = "Cellular Automata"

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        density = 0.3 + complexity * 0.4
        iterations = int(3 + complexity * 5)

        solid = [
            [rng.random() < density for _ in range(maze.width)]
            for _ in range(maze.height)
        ]
        for _ in range(iterations):
            solid = smooth(solid)

        open_cells = set()
        for x, y in maze.coords():
            if solid[y][x]:
                continue
            open_cells.add((x, y))
            if x < maze.width - 1 and not solid[y][x + 1]:
                maze.remove_wall((x, y), (x + 1, y))
            if y < maze.height - 1 and not solid[y + 1][x]:
                maze.remove_wall((x, y), (x, y + 1))

        caves = find_components(maze, open_cells)
        if len(caves) > 1:
            stitch_components(maze, caves)
            logger.debug("Cellular automata stitched %d caves", len(caves))
        maze.ensure_connectivity()
