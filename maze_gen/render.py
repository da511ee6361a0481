#Raster rendering of a maze (and optionally its solution) with pygame surfaces
#No display is needed, surfaces are drawn off-screen and written out with pygame.image.save

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

import pygame

from .config import parse_hex_color
from .maze import Coord, Maze

logger = logging.getLogger(__name__)

WALL_COLOR = (0, 0, 0)
FLOOR_COLOR = (255, 255, 255)
DEFAULT_LINE_COLOR = "#FF0000"
#Solution line width as a share of the cell size when none is given
DEFAULT_THICKNESS = 1.0 / 3.0


def image_size(maze: Maze, cell_size: int) -> Tuple[int, int]:
    return maze.width * cell_size + 1, maze.height * cell_size + 1


def cell_center(cell: Coord, cell_size: int) -> Tuple[int, int]:
    return cell[0] * cell_size + cell_size // 2, cell[1] * cell_size + cell_size // 2


def line_width(cell_size: int, thickness: Optional[float]) -> int:
    ratio = DEFAULT_THICKNESS if thickness is None else thickness
    return max(1, int(round(cell_size * ratio)))


def _draw_walls(surface: pygame.Surface, maze: Maze, cell_size: int) -> None:
    for y in range(maze.height):
        for x in range(maze.width):
            walls = maze.cells[y][x].walls
            left, top = x * cell_size, y * cell_size
            right, bottom = left + cell_size, top + cell_size
            if walls["N"]:
                pygame.draw.line(surface, WALL_COLOR, (left, top), (right, top))
            if walls["S"]:
                pygame.draw.line(surface, WALL_COLOR, (left, bottom), (right, bottom))
            if walls["W"]:
                pygame.draw.line(surface, WALL_COLOR, (left, top), (left, bottom))
            if walls["E"]:
                pygame.draw.line(surface, WALL_COLOR, (right, top), (right, bottom))


def _draw_openings(surface: pygame.Surface, maze: Maze, cell_size: int) -> None:
    #Gap in the outer wall at the entry (north and west) and the exit (south and east)
    if cell_size < 2:
        return
    inner = cell_size - 1
    pygame.draw.line(surface, FLOOR_COLOR, (1, 0), (inner, 0))
    pygame.draw.line(surface, FLOOR_COLOR, (0, 1), (0, inner))

    right, bottom = maze.width * cell_size, maze.height * cell_size
    pygame.draw.line(surface, FLOOR_COLOR, (right - inner, bottom), (right - 1, bottom))
    pygame.draw.line(surface, FLOOR_COLOR, (right, bottom - inner), (right, bottom - 1))


def draw_solution(
    surface: pygame.Surface,
    solution: Sequence[Coord],
    cell_size: int,
    line_color: str = DEFAULT_LINE_COLOR,
    line_thickness: Optional[float] = None,
) -> None:
    if not solution:
        return
    color = parse_hex_color(line_color)
    width = line_width(cell_size, line_thickness)
    points = [cell_center(cell, cell_size) for cell in solution]
    if len(points) == 1:
        pygame.draw.circle(surface, color, points[0], max(1, width // 2))
        return
    for start, end in zip(points, points[1:]):
        pygame.draw.line(surface, color, start, end, width)
    #Round the joints so thick lines do not leave notches at the corners
    if width > 2:
        for point in points:
            pygame.draw.circle(surface, color, point, width // 2)


def render_maze(
    maze: Maze,
    cell_size: int,
    solution: Optional[Sequence[Coord]] = None,
    line_color: str = DEFAULT_LINE_COLOR,
    line_thickness: Optional[float] = None,
) -> pygame.Surface:
    if cell_size < 1:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    surface = pygame.Surface(image_size(maze, cell_size))
    surface.fill(FLOOR_COLOR)
    _draw_walls(surface, maze, cell_size)
    _draw_openings(surface, maze, cell_size)
    if solution:
        draw_solution(surface, solution, cell_size, line_color, line_thickness)
    return surface


def save_maze(
    maze: Maze,
    cell_size: int,
    output_path: str,
    solution: Optional[Sequence[Coord]] = None,
    line_color: str = DEFAULT_LINE_COLOR,
    line_thickness: Optional[float] = None,
) -> None:
    surface = render_maze(maze, cell_size, solution, line_color, line_thickness)
    try:
        pygame.image.save(surface, output_path)
    except pygame.error as exc:
        #pygame reports a missing directory or unknown extension as its own error type
        raise OSError(f"could not write {output_path}: {exc}") from exc
    logger.info("Saved %dx%d image to %s", *surface.get_size(), output_path)
