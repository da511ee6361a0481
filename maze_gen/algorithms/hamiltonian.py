#Hamiltonian path maze: one long winding corridor through (nearly) every cell
#The backtracking search is budgeted, large grids usually fall back to a DFS tree

from __future__ import annotations

import logging
import random
from typing import List, Optional, Set

from ..maze import Coord, Edge, Maze
from .base import MazeGenerator, join_stragglers
from .trees import dfs_tree_edges

logger = logging.getLogger(__name__)


class Hamiltonian(MazeGenerator):
    name = "hamiltonian"
    title = "Hamiltonian Path"

    EXPANSIONS_PER_CELL = 10
    MIN_COVERAGE = 0.75

    def _candidates(
        self, maze: Maze, rng: random.Random, cell: Coord, on_path: Set[Coord], complexity: float
    ) -> List[Coord]:
        options = [n for n in maze.neighbors(*cell) if n not in on_path]
        if complexity > 0.0 and len(options) > 1:
            rng.shuffle(options)
        #Popped from the end, so reverse to try the first option first
        options.reverse()
        return options

    def search(self, maze: Maze, rng: random.Random, complexity: float) -> Optional[List[Coord]]:
        #Depth-first search for a path covering every cell, starting at the entry
        total = maze.size
        budget = total * self.EXPANSIONS_PER_CELL
        start = maze.entry
        path = [start]
        on_path = {start}
        options = [self._candidates(maze, rng, start, on_path, complexity)]
        longest = list(path)
        expansions = 0

        while path:
            if len(path) == total:
                return path
            if expansions >= budget:
                break
            if not options[-1]:
                on_path.discard(path.pop())
                options.pop()
                continue
            nxt = options[-1].pop()
            if nxt in on_path:
                continue
            expansions += 1
            path.append(nxt)
            on_path.add(nxt)
            options.append(self._candidates(maze, rng, nxt, on_path, complexity))
            if len(path) > len(longest):
                longest = list(path)

        if len(longest) >= total * self.MIN_COVERAGE:
            return longest
        return None

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        path = self.search(maze, rng, complexity)
        if path is not None:
            edges: List[Edge] = list(zip(path, path[1:]))
            for a, b in edges:
                maze.remove_wall(a, b)
            if len(path) < maze.size:
                #Partial path, hang the uncovered cells off it
                join_stragglers(maze, rng, set(path))
        else:
            logger.debug("No Hamiltonian path within budget on %dx%d, using a DFS tree", maze.width, maze.height)
            edges = dfs_tree_edges(maze, rng, maze.entry, complexity)
            for a, b in edges:
                maze.remove_wall(a, b)

        if complexity > 0.3:
            #Wall off some of the corridor again, ensure_connectivity patches the entry to exit route
            break_probability = (complexity - 0.3) * 0.5
            for a, b in edges:
                if rng.random() < break_probability:
                    maze.add_wall(a, b)

        maze.ensure_connectivity()
