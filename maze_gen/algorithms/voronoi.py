#Voronoi maze: scatter seed points, carve a small tree inside each region,
#then connect neighbouring regions through a randomized spanning tree of the region graph

from __future__ import annotations

import logging
import random
from typing import Dict, List, Set, Tuple

from ..components import UnionFind
from ..maze import Coord, Edge, Maze
from .base import MazeGenerator, shuffled
from .trees import dfs_tree_edges

logger = logging.getLogger(__name__)

RegionPair = Tuple[int, int]


class Voronoi(MazeGenerator):
    name = "voronoi"
    title = "Voronoi Regions"

    MAX_PLACEMENT_ATTEMPTS = 100

    def _point_count(self, maze: Maze, complexity: float) -> int:
        wanted = int(5 + complexity * 15)
        return max(2, min(wanted, maze.size // 4))

    def _scatter(self, maze: Maze, rng: random.Random, count: int) -> List[Coord]:
        points: List[Coord] = []
        taken: Set[Coord] = set()
        for _ in range(count):
            point = (rng.randrange(maze.width), rng.randrange(maze.height))
            attempts = 0
            while point in taken and attempts < self.MAX_PLACEMENT_ATTEMPTS:
                point = (rng.randrange(maze.width), rng.randrange(maze.height))
                attempts += 1
            points.append(point)
            taken.add(point)
        return points

    def _assign(self, maze: Maze, points: List[Coord]) -> List[List[int]]:
        #Nearest seed by Euclidean distance, lowest index wins ties
        regions = [[0] * maze.width for _ in range(maze.height)]
        for x, y in maze.coords():
            best = min(
                range(len(points)),
                key=lambda i: ((x - points[i][0]) ** 2 + (y - points[i][1]) ** 2, i),
            )
            regions[y][x] = best
        return regions

    def _borders(self, maze: Maze, regions: List[List[int]]) -> Dict[RegionPair, List[Edge]]:
        borders: Dict[RegionPair, List[Edge]] = {}
        for a, b in maze.edges():
            ra = regions[a[1]][a[0]]
            rb = regions[b[1]][b[0]]
            if ra != rb:
                borders.setdefault((min(ra, rb), max(ra, rb)), []).append((a, b))
        return borders

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        points = self._scatter(maze, rng, self._point_count(maze, complexity))
        regions = self._assign(maze, points)

        #Interior of each region
        members: Dict[int, Set[Coord]] = {}
        for x, y in maze.coords():
            members.setdefault(regions[y][x], set()).add((x, y))
        for index, cells in sorted(members.items()):
            for a, b in dfs_tree_edges(maze, rng, points[index], complexity, allowed=cells):
                maze.remove_wall(a, b)

        borders = self._borders(maze, regions)
        region_edges = shuffled(rng, sorted(borders), complexity)

        uf = UnionFind(len(points))
        selected: List[RegionPair] = []
        extra_probability = (complexity - 0.5) * 2.0
        for r1, r2 in region_edges:
            if uf.union(r1, r2):
                selected.append((r1, r2))
            elif complexity > 0.5 and rng.random() < extra_probability:
                selected.append((r1, r2))

        for pair in selected:
            boundary = list(borders[pair])
            if complexity < 0.3:
                passages = 1
            else:
                passages = int(1 + complexity * (min(3, len(boundary)) - 1))
            if len(boundary) > 1:
                rng.shuffle(boundary)
            for a, b in boundary[:passages]:
                maze.remove_wall(a, b)

        logger.debug(
            "Voronoi: %d regions, %d region links (%d border pairs)",
            len(members), len(selected), len(borders),
        )
        maze.ensure_connectivity()
