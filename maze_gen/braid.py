#Braiding: knock through some dead ends so the maze gets loops
#Only ever removes walls, so a solvable maze stays solvable

from __future__ import annotations

import logging
import math
import random
from typing import Optional

from .maze import DIRS, Maze

logger = logging.getLogger(__name__)


def braid(maze: Maze, complexity: float, rng: Optional[random.Random] = None) -> int:
    rng = rng or random.Random()
    dead_ends = maze.dead_ends()
    rng.shuffle(dead_ends)
    remove_count = min(len(dead_ends), math.floor(len(dead_ends) * complexity))

    opened = 0
    for x, y in dead_ends[:remove_count]:
        cell = maze.cells[y][x]
        candidates = [
            (nx, ny)
            for direction, (dx, dy) in DIRS.items()
            if cell.walls[direction] and maze.in_bounds(nx := x + dx, ny := y + dy)
        ]
        if not candidates:
            continue
        maze.remove_wall((x, y), rng.choice(candidates))
        opened += 1

    logger.debug("Braided %d of %d dead ends (complexity=%.2f)", opened, len(dead_ends), complexity)
    return opened
