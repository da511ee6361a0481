#Spanning tree carvers that grow outward from one start cell:
#recursive backtracking (plus its braided variant), Prim, growing tree, iterative DFS and BFS

from __future__ import annotations

import random
from collections import deque
from typing import List, Optional, Set

from ..braid import braid
from ..maze import Coord, Edge, Maze
from .base import LOW_COMPLEXITY, MazeGenerator, choose_biased, random_cell, shuffled


def dfs_tree_edges(
    maze: Maze,
    rng: random.Random,
    start: Coord,
    shuffle_probability: float,
    allowed: Optional[Set[Coord]] = None,
) -> List[Edge]:
    #Randomized iterative DFS, returns (parent, child) edges in discovery order
    #Each push list is shuffled with `shuffle_probability`, otherwise neighbors go in listed order
    edges: List[Edge] = []
    visited: Set[Coord] = set()
    stack: List[tuple] = [(start, None)]
    while stack:
        cell, parent = stack.pop()
        if cell in visited:
            continue
        visited.add(cell)
        if parent is not None:
            edges.append((parent, cell))
        unvisited = [
            n for n in maze.neighbors(*cell)
            if n not in visited and (allowed is None or n in allowed)
        ]
        if len(unvisited) > 1 and rng.random() < shuffle_probability:
            rng.shuffle(unvisited)
        else:
            #Reversed so the first listed neighbor is popped first
            unvisited.reverse()
        stack.extend((n, cell) for n in unvisited)
    return edges


class RecursiveBacktracking(MazeGenerator):
    name = "recursive_backtracking"
    title = "Recursive Backtracking"

    #Chance per dead end (scaled by complexity) of carving the backtrack cell's next unvisited
    #neighbour early. It only changes the shape of the tree, no loops are added
    BRANCH_RATE = 0.3

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        start = random_cell(maze, rng)
        visited = {start}
        stack = [start]

        while stack:
            x, y = stack.pop()
            unvisited = [n for n in maze.neighbors(x, y) if n not in visited]
            if unvisited:
                stack.append((x, y))
                nxt = choose_biased(rng, unvisited, complexity)
                maze.remove_wall((x, y), nxt)
                visited.add(nxt)
                stack.append(nxt)
                continue

            #Dead end, sometimes grow the backtrack cell first (still a spanning tree)
            if complexity > 0.0 and stack and rng.random() < complexity * self.BRANCH_RATE:
                bx, by = stack[-1]
                branch = next((n for n in maze.neighbors(bx, by) if n not in visited), None)
                if branch is not None:
                    maze.remove_wall((bx, by), branch)
                    visited.add(branch)
                    stack.append(branch)


class RecursiveBacktrackingBraided(RecursiveBacktracking):
    name = "recursive_backtracking_braided"
    title = "Recursive Backtracking (Braided)"

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        super().carve(maze, rng, complexity)
        braid(maze, complexity, rng)


class Prim(MazeGenerator):
    name = "prim"
    title = "Prim's Algorithm"

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        start = random_cell(maze, rng)
        in_tree = {start}
        frontier: List[Edge] = [(start, n) for n in maze.neighbors(*start)]

        while frontier:
            if complexity > 0.0:
                #Higher complexity draws from a shorter prefix of the frontier
                span = max(1, int(len(frontier) * (1.0 - complexity * 0.5)))
                idx = rng.randrange(min(span, len(frontier)))
            else:
                idx = rng.randrange(len(frontier))

            src, dst = frontier.pop(idx)
            if dst in in_tree:
                continue
            maze.remove_wall(src, dst)
            in_tree.add(dst)
            frontier.extend((dst, n) for n in maze.neighbors(*dst) if n not in in_tree)


class GrowingTree(MazeGenerator):
    name = "growing_tree"
    title = "Growing Tree"

    def _pick_index(self, rng: random.Random, active: List[Coord], complexity: float) -> int:
        newest = len(active) - 1
        if complexity < 0.25:
            return newest
        if complexity < 0.5:
            return rng.randrange(len(active))
        if complexity < 0.75:
            return 0
        return newest if rng.random() < 0.5 else 0

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        start = random_cell(maze, rng)
        visited = {start}
        active = [start]

        while active:
            idx = self._pick_index(rng, active, complexity)
            x, y = active[idx]
            unvisited = [n for n in maze.neighbors(x, y) if n not in visited]
            if not unvisited:
                active.pop(idx)
                continue
            if len(unvisited) == 1 or complexity < LOW_COMPLEXITY:
                nxt = unvisited[0]
            else:
                nxt = rng.choice(unvisited)
            maze.remove_wall((x, y), nxt)
            visited.add(nxt)
            active.append(nxt)


class DepthFirst(MazeGenerator):
    name = "dfs"
    title = "Depth-First Search (iterative)"

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        for parent, child in dfs_tree_edges(maze, rng, random_cell(maze, rng), complexity):
            maze.remove_wall(parent, child)


class BreadthFirst(MazeGenerator):
    name = "bfs"
    title = "Breadth-First Search"

    def _carve_count(self, rng: random.Random, available: int, complexity: float) -> int:
        if complexity < LOW_COMPLEXITY:
            return available
        keep_probability = 1.0 - complexity * 0.5
        kept = sum(1 for _ in range(available) if rng.random() < keep_probability)
        return max(1, min(available, kept))

    def carve(self, maze: Maze, rng: random.Random, complexity: float) -> None:
        start = random_cell(maze, rng)
        visited = {start}
        queue = deque([start])

        while queue:
            x, y = queue.popleft()
            unvisited = [n for n in maze.neighbors(x, y) if n not in visited]
            if not unvisited:
                continue
            count = self._carve_count(rng, len(unvisited), complexity)
            for nxt in shuffled(rng, unvisited, complexity)[:count]:
                maze.remove_wall((x, y), nxt)
                visited.add(nxt)
                queue.append(nxt)

        #Neighbors skipped above can be left stranded
        maze.ensure_connectivity()
