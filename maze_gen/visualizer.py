#Pygame window that shows a generated maze and animates the BFS solve over it

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set, Tuple

import pygame

from .maze import Coord, Maze, reconstruct_path


@dataclass
class SolverSnapshot:
    visited: Set[Coord]
    frontier: Set[Coord]
    current: Optional[Coord]
    path: List[Coord]
    done: bool
    success: bool
    expanded: int


def bfs_snapshots(maze: Maze) -> Iterator[SolverSnapshot]:
    #Same search as Maze.solve, yielding one snapshot per expanded cell
    start, goal = maze.entry, maze.exit
    q = deque([start])
    parent: Dict[Coord, Coord] = {}
    seen = {start}
    visited: Set[Coord] = set()
    expanded = 0

    while q:
        current = q.popleft()
        expanded += 1
        visited.add(current)
        success = current == goal
        path = reconstruct_path(parent, start, current) if success else []
        yield SolverSnapshot(set(visited), set(q), current, path, success, success, expanded)
        if success:
            return
        for nxt in maze.accessible_neighbors(*current):
            if nxt in seen:
                continue
            seen.add(nxt)
            parent[nxt] = current
            q.append(nxt)

    yield SolverSnapshot(set(visited), set(), None, [], True, False, expanded)


@dataclass
class SolverPlayback:
    generator: Iterator[SolverSnapshot]
    snapshot: SolverSnapshot = field(init=False)
    finished: bool = field(default=False, init=False)

    def __post_init__(self):
        self.snapshot = SolverSnapshot(set(), set(), None, [], False, False, 0)
        self.advance()

    def advance(self, steps: int = 1):
        if self.finished:
            return
        for _ in range(steps):
            try:
                self.snapshot = next(self.generator)
            except StopIteration:
                self.finished = True
                break


class MazeVisualizer:
    #Single panel: maze grid on top, stats underneath

    def __init__(
        self,
        maze: Maze,
        title: str = "",
        tile_size: int = 24,
        stats_height: int = 100,
        fps: int = 30,
        steps_per_frame: int = 1,
    ):
        self.maze = maze
        self.title = title
        self.tile_size = tile_size
        self.stats_height = stats_height
        self.fps = fps
        self.steps_per_frame = steps_per_frame

    def _cell_to_grid(self, x, y):
        return 2 * x + 1, 2 * y + 1

    def _compute_layout(self, grid_cols, grid_rows, container_w, container_h) -> Tuple[int, int]:
        #Largest tile that fits the window, at least 2 pixels
        usable_w = max(160, container_w - 16)
        usable_h = max(120, container_h - 16 - self.stats_height)
        tile_size = max(2, min(self.tile_size, usable_w // grid_cols, usable_h // grid_rows))
        line_height = max(16, int(18 * min(tile_size, 24) / 24))
        return tile_size, line_height

    def run(self):
        grid = self.maze.to_grid()
        grid_rows = len(grid)
        grid_cols = len(grid[0])

        pygame.init()
        display_info = pygame.display.Info()
        default_w = min(max(640, grid_cols * self.tile_size + 16), int(display_info.current_w * 0.9))
        default_h = min(max(480, grid_rows * self.tile_size + self.stats_height + 16), int(display_info.current_h * 0.9))
        screen = pygame.display.set_mode((default_w, default_h), pygame.RESIZABLE)
        pygame.display.set_caption(f"Maze viewer{self.title}")
        clock = pygame.time.Clock()
        font = pygame.font.SysFont(None, 20)
        fullscreen = False
        last_window_size = screen.get_size()

        playback = SolverPlayback(bfs_snapshots(self.maze))

        colors = {
            "wall": (20, 20, 20),
            "floor": (230, 230, 230),
            "start": (50, 200, 90),
            "goal": (210, 60, 60),
            "solver": (66, 135, 245),
        }

        #Semi transparent overlays so the floor stays visible under the search
        def draw_alpha_rect(surface, color, rect, alpha):
            overlay = pygame.Surface((rect.width, rect.height), pygame.SRCALPHA)
            overlay.fill((*color, alpha))
            surface.blit(overlay, rect.topleft)

        running = True
        while running:
            clock.tick(self.fps)
            tile_size, line_height = self._compute_layout(grid_cols, grid_rows, *screen.get_size())
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
                if event.type == pygame.VIDEORESIZE and not fullscreen:
                    last_window_size = (event.w, event.h)
                    screen = pygame.display.set_mode(last_window_size, pygame.RESIZABLE)
                if event.type == pygame.KEYDOWN and event.key == pygame.K_f:
                    fullscreen = not fullscreen
                    if fullscreen:
                        display_info = pygame.display.Info()
                        screen = pygame.display.set_mode((display_info.current_w, display_info.current_h), pygame.FULLSCREEN)
                    else:
                        screen = pygame.display.set_mode(last_window_size, pygame.RESIZABLE)

            playback.advance(self.steps_per_frame)
            snapshot = playback.snapshot
            screen.fill((10, 10, 10))

            def tile(gx, gy):
                return pygame.Rect(8 + gx * tile_size, 8 + gy * tile_size, tile_size, tile_size)

            for gy, grid_row in enumerate(grid):
                for gx, value in enumerate(grid_row):
                    pygame.draw.rect(screen, colors["floor"] if value == 1 else colors["wall"], tile(gx, gy))

            for cell in snapshot.visited:
                draw_alpha_rect(screen, colors["solver"], tile(*self._cell_to_grid(*cell)), 60)
            for cell in snapshot.frontier:
                draw_alpha_rect(screen, colors["solver"], tile(*self._cell_to_grid(*cell)), 110)
            #Fill the gaps between path cells too so the route reads as one line
            for a, b in zip(snapshot.path, snapshot.path[1:]):
                agx, agy = self._cell_to_grid(*a)
                bgx, bgy = self._cell_to_grid(*b)
                draw_alpha_rect(screen, colors["solver"], tile((agx + bgx) // 2, (agy + bgy) // 2), 200)
            for cell in snapshot.path:
                draw_alpha_rect(screen, colors["solver"], tile(*self._cell_to_grid(*cell)), 200)
            if snapshot.current:
                draw_alpha_rect(screen, colors["solver"], tile(*self._cell_to_grid(*snapshot.current)), 230)

            pygame.draw.rect(screen, colors["start"], tile(*self._cell_to_grid(*self.maze.entry)))
            pygame.draw.rect(screen, colors["goal"], tile(*self._cell_to_grid(*self.maze.exit)))

            path_len = len(snapshot.path) if snapshot.path else "-"
            lines = [
                f"{self.maze.width}x{self.maze.height}  passages: {self.maze.passage_count()}",
                f"expanded: {snapshot.expanded}",
                f"solved: {snapshot.success}" if snapshot.done else "solving...",
                f"path length: {path_len}",
            ]
            stats_top = 8 + grid_rows * tile_size + 8
            for i, text in enumerate(lines):
                surface = font.render(text, True, (235, 235, 235))
                screen.blit(surface, (8, stats_top + i * line_height))

            pygame.display.flip()

        pygame.quit()
