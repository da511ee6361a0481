#Union-find based generators: Kruskal, Eller's and random obstacles

from __future__ import annotations

import logging
import random
from typing import Dict, List

from ..components import UnionFind, stitch_components, union_find_components
from ..maze import Maze
from .base import LOW_COMPLEXITY, MazeGenerator, shuffled

logger = logging.getLogger(__name__)


class Kruskal(MazeGenerator):
    name = "kruskal"
    title = "Kruskal's Algorithm"

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        width = maze.width
        uf = UnionFind(maze.size)
        edges = shuffled(rng, list(maze.edges()), complexity)
        #Share of merges kept, lower complexity keeps more of the spanning tree
        keep_rate = 1.0 - complexity * 0.3

        for a, b in edges:
            idx_a = a[1] * width + a[0]
            idx_b = b[1] * width + b[0]
            if uf.connected(idx_a, idx_b):
                continue
            if complexity < LOW_COMPLEXITY or rng.random() < keep_rate:
                maze.remove_wall(a, b)
                uf.union(idx_a, idx_b)

        #Skipped merges can split the maze
        maze.ensure_connectivity()


class Eller(MazeGenerator):
    name = "eller"
    title = "Eller's Algorithm"

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        width, height = maze.width, maze.height
        uf = UnionFind(maze.size)
        merge_probability = 0.3 + complexity * 0.4

        for y in range(height):
            last_row = y == height - 1
            row = y * width

            for x in range(width - 1):
                if uf.connected(row + x, row + x + 1):
                    continue
                if last_row:
                    #The last row has to join everything left over
                    merge = True
                elif complexity < LOW_COMPLEXITY:
                    merge = x % 2 == 0
                else:
                    merge = rng.random() < merge_probability
                if merge:
                    maze.remove_wall((x, y), (x + 1, y))
                    uf.union(row + x, row + x + 1)

            if last_row:
                break

            sets: Dict[int, List[int]] = {}
            for x in range(width):
                sets.setdefault(uf.find(row + x), []).append(x)

            for members in sets.values():
                if complexity < LOW_COMPLEXITY:
                    count = 1
                else:
                    count = 1 + sum(1 for _ in members[1:] if rng.random() < complexity)
                for x in shuffled(rng, members, complexity)[:count]:
                    maze.remove_wall((x, y), (x, y + 1))
                    uf.union(row + x, row + width + x)


class RandomObstacle(MazeGenerator):
    name = "random_obstacle"
    title = "Random Obstacles"

    def create_maze(self, width: int, height: int) -> Maze:
        return Maze.open(width, height)

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        walls = shuffled(rng, list(maze.edges()), complexity)
        obstacles = min(len(walls), int(len(walls) * complexity * 0.4))
        for a, b in walls[:obstacles]:
            maze.add_wall(a, b)

        components = union_find_components(maze)
        if len(components) > 1:
            stitch_components(maze, components)
            logger.debug("Random obstacles split the grid into %d regions, stitched", len(components))
        maze.ensure_connectivity()
