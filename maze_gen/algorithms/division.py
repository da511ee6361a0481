#Recursive division: start open, split regions with walls that each keep one gap
#Regions are handled from an explicit work list instead of Python recursion

from __future__ import annotations

import random
from typing import List, Tuple

from ..maze import Maze
from .base import LOW_COMPLEXITY, MazeGenerator

Region = Tuple[int, int, int, int]


class RecursiveDivision(MazeGenerator):
    name = "recursive_division"
    title = "Recursive Division"

    def create_maze(self, width: int, height: int) -> Maze:
        return Maze.open(width, height)

    def _horizontal(self, rng: random.Random, width: int, height: int, complexity: float) -> bool:
        if width < height:
            return True
        if height < width:
            return False
        if complexity < LOW_COMPLEXITY:
            return True
        return rng.random() < 0.5

    def _wall_position(self, rng: random.Random, low: int, high: int, complexity: float) -> int:
        #Wall line somewhere in (low, high), drifting away from the middle as complexity rises
        if complexity < LOW_COMPLEXITY:
            return low + (high - low) // 2
        min_pos, max_pos = low + 1, high - 1
        center = (min_pos + max_pos) // 2
        spread = max(1, int((max_pos - min_pos) * complexity))
        offset = rng.randint(0, spread)
        pos = center - offset if rng.random() < 0.5 else center + offset
        return max(min_pos, min(max_pos, pos))

    def _gap_position(self, rng: random.Random, low: int, high: int, complexity: float) -> int:
        if complexity < LOW_COMPLEXITY:
            return low + (high - low) // 2
        return rng.randrange(low, high)

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        work: List[Region] = [(0, 0, maze.width, maze.height)]

        while work:
            x1, y1, x2, y2 = work.pop()
            width, height = x2 - x1, y2 - y1
            if width < 2 or height < 2:
                continue

            if self._horizontal(rng, width, height, complexity):
                wall_y = self._wall_position(rng, y1, y2, complexity)
                gap_x = self._gap_position(rng, x1, x2, complexity)
                for x in range(x1, x2):
                    if x != gap_x:
                        maze.add_wall((x, wall_y - 1), (x, wall_y))
                #Pushed in reverse so the top half is split first
                work.append((x1, wall_y, x2, y2))
                work.append((x1, y1, x2, wall_y))
            else:
                wall_x = self._wall_position(rng, x1, x2, complexity)
                gap_y = self._gap_position(rng, y1, y2, complexity)
                for y in range(y1, y2):
                    if y != gap_y:
                        maze.add_wall((wall_x - 1, y), (wall_x, y))
                work.append((wall_x, y1, x2, y2))
                work.append((x1, y1, wall_x, y2))
