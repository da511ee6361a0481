#Row-by-row carvers: binary tree and sidewinder

from __future__ import annotations

import random

from ..maze import Maze
from .base import LOW_COMPLEXITY, MazeGenerator


class BinaryTree(MazeGenerator):
    name = "binary_tree"
    title = "Binary Tree"

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        for x, y in maze.coords():
            options = []
            if y > 0:
                options.append((x, y - 1))
            if x < maze.width - 1:
                options.append((x + 1, y))
            if not options:
                continue

            if len(options) == 1 or complexity < LOW_COMPLEXITY:
                target = options[0]
            elif rng.random() < 1.0 - complexity:
                target = options[0]
            else:
                target = rng.choice(options)
            maze.remove_wall((x, y), target)


class Sidewinder(MazeGenerator):
    name = "sidewinder"
    title = "Sidewinder"

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        #Runs end more often as complexity rises, 0.3 up to 0.8
        end_probability = 0.3 + complexity * 0.5
        last = maze.width - 1

        for y in range(maze.height):
            run_start = 0
            for x in range(maze.width):
                end_run = x == last or rng.random() < end_probability
                #The row is carved east whether or not the run ends here
                if x < last:
                    maze.remove_wall((x, y), (x + 1, y))
                if not end_run:
                    continue
                #Row 0 has nothing above it to link to
                if y > 0:
                    link_x = x if run_start == x else rng.randint(run_start, x)
                    maze.remove_wall((link_x, y), (link_x, y - 1))
                run_start = x + 1
