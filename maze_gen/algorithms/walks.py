#Random walk generators: Aldous-Broder, Wilson's, hunt-and-kill and the drunkard's walk

from __future__ import annotations

import logging
import random
from typing import Dict, List

from ..components import find_components, stitch_components
from ..maze import Coord, Maze
from .base import MazeGenerator, choose_biased, hunt, join_stragglers, random_cell

logger = logging.getLogger(__name__)


class AldousBroder(MazeGenerator):
    name = "aldous_broder"
    title = "Aldous-Broder"

    #Walk budget in steps per cell, the rest is finished hunt style
    STEPS_PER_CELL = 64

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        current = random_cell(maze, rng)
        visited = {current}
        total = maze.size
        budget = total * self.STEPS_PER_CELL
        steps = 0

        while len(visited) < total and steps < budget:
            nxt = choose_biased(rng, maze.neighbors(*current), complexity)
            if nxt not in visited:
                maze.remove_wall(current, nxt)
                visited.add(nxt)
            elif complexity > 0.0 and rng.random() < complexity * 0.5:
                #Reopening on a revisit is what gives this variant its loops
                maze.remove_wall(current, nxt)
            current = nxt
            steps += 1

        if len(visited) < total:
            joined = join_stragglers(maze, rng, visited)
            logger.debug("Aldous-Broder walk budget ran out, joined %d cells by hunting", joined)


class Wilsons(MazeGenerator):
    name = "wilsons"
    title = "Wilson's Algorithm"

    #Walk budget in steps per cell, shared by every walk, the rest is finished hunt style
    STEPS_PER_CELL = 64

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        start = random_cell(maze, rng)
        in_tree = {start}
        pending = [cell for cell in maze.coords() if cell != start]
        if complexity > 0.0:
            rng.shuffle(pending)
        budget = maze.size * self.STEPS_PER_CELL
        steps = 0

        for cell in pending:
            if cell in in_tree:
                continue
            if steps >= budget:
                break

            #Loop-erased random walk until it touches the tree
            path: List[Coord] = [cell]
            position: Dict[Coord, int] = {cell: 0}
            current = cell
            while current not in in_tree and steps < budget:
                nxt = choose_biased(rng, maze.neighbors(*current), complexity)
                if nxt in position:
                    cut = position[nxt]
                    for erased in path[cut + 1:]:
                        del position[erased]
                    del path[cut + 1:]
                else:
                    position[nxt] = len(path)
                    path.append(nxt)
                current = nxt
                steps += 1

            if current not in in_tree:
                #Out of steps mid walk, the unfinished path is dropped
                break
            for a, b in zip(path, path[1:]):
                maze.remove_wall(a, b)
            in_tree.update(path)

        if len(in_tree) < maze.size:
            joined = join_stragglers(maze, rng, in_tree)
            logger.debug("Wilson's walk budget ran out, joined %d cells by hunting", joined)


class HuntAndKill(MazeGenerator):
    name = "hunt_and_kill"
    title = "Hunt-and-Kill"

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        current = random_cell(maze, rng)
        visited = {current}

        while current is not None:
            #Kill phase, walk until boxed in
            while True:
                unvisited = [n for n in maze.neighbors(*current) if n not in visited]
                if not unvisited:
                    break
                nxt = choose_biased(rng, unvisited, complexity)
                maze.remove_wall(current, nxt)
                visited.add(nxt)
                current = nxt

            current = hunt(maze, rng, visited)


class DrunkardsWalk(MazeGenerator):
    name = "drunkards_walk"
    title = "Drunkard's Walk"

    STEPS_PER_CELL = 10

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        total = maze.size
        target = int(total * (0.4 + complexity * 0.3))
        budget = total * self.STEPS_PER_CELL

        current = random_cell(maze, rng)
        carved = {current}
        steps = 0
        while len(carved) < target and steps < budget:
            neighbors = maze.neighbors(*current)
            if not neighbors:
                break
            nxt = choose_biased(rng, neighbors, complexity)
            maze.remove_wall(current, nxt)
            carved.add(nxt)
            current = nxt
            steps += 1

        components = find_components(maze, carved)
        if len(components) > 1:
            stitch_components(maze, components)
            logger.debug("Drunkard's walk stitched %d carved regions", len(components))
        maze.ensure_connectivity()
