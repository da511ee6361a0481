#Connected component helpers shared by the connectivity repair and the noise based generators

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Sequence, Set, Tuple

if TYPE_CHECKING:
    from .maze import Maze

Coord = Tuple[int, int]


class UnionFind:
    #Disjoint sets over 0..size-1 with union by rank and path compression

    def __init__(self, size: int):
        self.parent = list(range(size))
        self.rank = [0] * size

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)


def row_major(cells: Iterable[Coord]) -> List[Coord]:
    return sorted(cells, key=lambda c: (c[1], c[0]))


def flood(maze: "Maze", start: Coord, allowed: Optional[Set[Coord]] = None) -> Set[Coord]:
    #Cells reachable from start through open walls, optionally restricted to `allowed`
    seen = {start}
    q = deque([start])
    while q:
        x, y = q.popleft()
        for nxt in maze.accessible_neighbors(x, y):
            if nxt in seen or (allowed is not None and nxt not in allowed):
                continue
            seen.add(nxt)
            q.append(nxt)
    return seen


def find_components(maze: "Maze", cells: Optional[Iterable[Coord]] = None) -> List[List[Coord]]:
    #Components discovered in row-major order of their first cell, each listed row-major
    pool = set(maze.coords()) if cells is None else set(cells)
    assigned: Set[Coord] = set()
    result: List[List[Coord]] = []
    for cell in row_major(pool):
        if cell in assigned:
            continue
        component = flood(maze, cell, pool)
        assigned |= component
        result.append(row_major(component))
    return result


def union_find_components(maze: "Maze") -> List[List[Coord]]:
    uf = UnionFind(maze.size)
    for x, y in maze.coords():
        idx = y * maze.width + x
        for nx, ny in maze.accessible_neighbors(x, y):
            uf.union(idx, ny * maze.width + nx)
    groups: Dict[int, List[Coord]] = {}
    for x, y in maze.coords():
        groups.setdefault(uf.find(y * maze.width + x), []).append((x, y))
    return list(groups.values())


def nearest_pair(first: Sequence[Coord], second: Sequence[Coord]) -> Tuple[Coord, Coord]:
    #First pair with the smallest Manhattan distance, scanning `first` then `second` in order
    best: Optional[Tuple[Coord, Coord]] = None
    best_dist = None
    for a in first:
        for b in second:
            dist = abs(a[0] - b[0]) + abs(a[1] - b[1])
            if best_dist is None or dist < best_dist:
                best_dist = dist
                best = (a, b)
                if dist <= 1:
                    return best
    if best is None:
        raise ValueError("nearest_pair needs two non-empty components")
    return best


def carve_corridor(maze: "Maze", start: Coord, goal: Coord) -> List[Coord]:
    #Horizontal leg first, then vertical, every wall crossed is removed
    cx, cy = start
    crossed = [start]
    while cx != goal[0]:
        nx = cx + 1 if cx < goal[0] else cx - 1
        maze.remove_wall((cx, cy), (nx, cy))
        cx = nx
        crossed.append((cx, cy))
    while cy != goal[1]:
        ny = cy + 1 if cy < goal[1] else cy - 1
        maze.remove_wall((cx, cy), (cx, ny))
        cy = ny
        crossed.append((cx, cy))
    return crossed


def stitch_components(maze: "Maze", components: Sequence[Sequence[Coord]]) -> List[Coord]:
    #Join each component to the next one in the list with a corridor between their closest cells
    carved: List[Coord] = []
    for first, second in zip(components, components[1:]):
        if not first or not second:
            continue
        a, b = nearest_pair(first, second)
        carved.extend(carve_corridor(maze, a, b))
    return carved
