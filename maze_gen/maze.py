#Grid maze model shared by every generator, plus the BFS solver
#Cells are addressed (x, y) with (0, 0) at the top left
#Entry is always (0, 0) and exit is always (width - 1, height - 1)

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .components import flood, row_major, stitch_components

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]
Edge = Tuple[Coord, Coord]

#Order matters, it is the neighbor expansion order used by every algorithm and the solver
DIRS = {
    "W": (-1, 0),
    "E": (1, 0),
    "N": (0, -1),
    "S": (0, 1),
}

OPPOSITE = {"N": "S", "S": "N", "E": "W", "W": "E"}

STEP_TO_DIR = {step: direction for direction, step in DIRS.items()}


def within_bounds(width: int, height: int, x: int, y: int) -> bool:
    return 0 <= x < width and 0 <= y < height


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass
class Cell:
    x: int
    y: int
    walls: Dict[str, bool] = field(
        default_factory=lambda: {"N": True, "S": True, "E": True, "W": True}
    )

    def wall_count(self) -> int:
        return sum(1 for present in self.walls.values() if present)

    def is_isolated(self) -> bool:
        return self.wall_count() == 4


class Maze:

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"maze dimensions must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells: List[List[Cell]] = [
            [Cell(x, y) for x in range(width)] for y in range(height)
        ]

    @classmethod
    def open(cls, width: int, height: int) -> "Maze":
        #Every internal wall removed, the outer boundary stays
        maze = cls(width, height)
        for a, b in maze.edges():
            maze.remove_wall(a, b)
        return maze

    @property
    def entry(self) -> Coord:
        return (0, 0)

    @property
    def exit(self) -> Coord:
        return (self.width - 1, self.height - 1)

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return within_bounds(self.width, self.height, x, y)

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        if not self.in_bounds(x, y):
            return None
        return self.cells[y][x]

    def coords(self) -> Iterator[Coord]:
        #Row-major
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def neighbors(self, x: int, y: int) -> List[Coord]:
        return [
            (nx, ny)
            for dx, dy in DIRS.values()
            if within_bounds(self.width, self.height, nx := x + dx, ny := y + dy)
        ]

    def accessible_neighbors(self, x: int, y: int) -> List[Coord]:
        cell = self.get_cell(x, y)
        if cell is None:
            return []
        return [
            (nx, ny)
            for direction, (dx, dy) in DIRS.items()
            if not cell.walls[direction]
            and within_bounds(self.width, self.height, nx := x + dx, ny := y + dy)
        ]

    def edges(self) -> Iterator[Edge]:
        #Every internal edge once, row-major, east edge before south edge
        for y in range(self.height):
            for x in range(self.width):
                if x < self.width - 1:
                    yield ((x, y), (x + 1, y))
                if y < self.height - 1:
                    yield ((x, y), (x, y + 1))

    def _direction(self, a: Coord, b: Coord) -> Optional[str]:
        if not (self.in_bounds(*a) and self.in_bounds(*b)):
            return None
        return STEP_TO_DIR.get((b[0] - a[0], b[1] - a[1]))

    def _set_wall(self, a: Coord, b: Coord, present: bool) -> bool:
        direction = self._direction(a, b)
        if direction is None:
            return False
        self.cells[a[1]][a[0]].walls[direction] = present
        self.cells[b[1]][b[0]].walls[OPPOSITE[direction]] = present
        return True

    def remove_wall(self, a: Coord, b: Coord) -> bool:
        #No-op for out of range or non-adjacent cells, callers rely on that
        return self._set_wall(a, b, False)

    def add_wall(self, a: Coord, b: Coord) -> bool:
        return self._set_wall(a, b, True)

    def has_wall(self, a: Coord, b: Coord) -> bool:
        direction = self._direction(a, b)
        if direction is None:
            return True
        return self.cells[a[1]][a[0]].walls[direction]

    def dead_ends(self) -> List[Coord]:
        return [(x, y) for x, y in self.coords() if self.cells[y][x].wall_count() == 3]

    def passages(self) -> Iterator[Edge]:
        for a, b in self.edges():
            if not self.has_wall(a, b):
                yield (a, b)

    def passage_count(self) -> int:
        return sum(1 for _ in self.passages())

    def to_grid(self) -> List[List[int]]:
        #Doubled resolution occupancy: cells sit on odd coordinates, 1 is floor and 0 is wall
        grid = [[0] * (2 * self.width + 1) for _ in range(2 * self.height + 1)]
        for x, y in self.coords():
            grid[2 * y + 1][2 * x + 1] = 1
        #An open passage lights the slot halfway between its two cells
        for (ax, ay), (bx, by) in self.passages():
            grid[ay + by + 1][ax + bx + 1] = 1
        return grid

    def wall_signature(self) -> Tuple[Tuple[bool, bool, bool, bool], ...]:
        return tuple(
            (cell.walls["N"], cell.walls["S"], cell.walls["E"], cell.walls["W"])
            for row in self.cells
            for cell in row
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.wall_signature() == other.wall_signature()
        )

    def __repr__(self) -> str:
        return f"Maze({self.width}x{self.height}, passages={self.passage_count()})"

    def ensure_connectivity(self) -> bool:
        #Carve one corridor between the entry and exit components if they are apart
        #Returns True when a corridor had to be carved
        entry_side = flood(self, self.entry)
        if self.exit in entry_side:
            return False
        exit_side = flood(self, self.exit)
        stitch_components(self, [row_major(entry_side), row_major(exit_side)])
        logger.debug(
            "Repaired connectivity on %dx%d maze (entry component %d cells, exit component %d cells)",
            self.width, self.height, len(entry_side), len(exit_side),
        )
        return True

    def solve(self) -> Optional[List[Coord]]:
        path = shortest_path(self, self.entry, self.exit)
        return path or None


# Solver utilities


def reconstruct_path(parent: Dict[Coord, Coord], start: Coord, goal: Coord) -> List[Coord]:
    #Follow parent links back from goal, empty when the search never reached it
    if goal != start and goal not in parent:
        return []
    path = [goal]
    while path[-1] != start:
        path.append(parent[path[-1]])
    path.reverse()
    return path


def shortest_path(maze: Maze, start: Coord, goal: Coord) -> List[Coord]:
    #BFS over the passage graph, ties broken by DIRS order so the result is stable
    q = deque([start])
    parent: Dict[Coord, Coord] = {}
    visited = {start}
    while q:
        x, y = q.popleft()
        if (x, y) == goal:
            return reconstruct_path(parent, start, goal)
        for nx, ny in maze.accessible_neighbors(x, y):
            if (nx, ny) in visited:
                continue
            visited.add((nx, ny))
            parent[(nx, ny)] = (x, y)
            q.append((nx, ny))
    return []
