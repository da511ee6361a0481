import pytest

from maze_gen.algorithms import generate
from maze_gen.maze import Cell, Maze, manhattan, reconstruct_path, shortest_path


def test_new_maze_is_fully_walled():
    maze = Maze(4, 3)
    assert maze.width == 4 and maze.height == 3
    for row in maze.cells:
        for cell in row:
            assert cell.walls == {"N": True, "S": True, "E": True, "W": True}
    assert maze.passage_count() == 0
    assert maze.entry == (0, 0)
    assert maze.exit == (3, 2)


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
def test_rejects_empty_dimensions(width, height):
    with pytest.raises(ValueError):
        Maze(width, height)


def test_get_cell_out_of_range_is_none():
    maze = Maze(2, 2)
    assert maze.get_cell(1, 1) is maze.cells[1][1]
    assert maze.get_cell(2, 0) is None
    assert maze.get_cell(0, -1) is None


def test_neighbors_order_and_edges():
    maze = Maze(3, 3)
    assert maze.neighbors(1, 1) == [(0, 1), (2, 1), (1, 0), (1, 2)]
    assert maze.neighbors(0, 0) == [(1, 0), (0, 1)]
    assert maze.neighbors(2, 2) == [(1, 2), (2, 1)]
    assert len(list(maze.edges())) == 2 * 3 + 3 * 2


def test_remove_wall_clears_both_sides():
    maze = Maze(3, 3)
    assert maze.remove_wall((1, 1), (2, 1))
    assert maze.cells[1][1].walls["E"] is False
    assert maze.cells[1][2].walls["W"] is False
    assert maze.accessible_neighbors(1, 1) == [(2, 1)]
    assert maze.accessible_neighbors(2, 1) == [(1, 1)]

    maze.remove_wall((1, 1), (1, 0))
    assert maze.cells[1][1].walls["N"] is False
    assert maze.cells[0][1].walls["S"] is False


@pytest.mark.parametrize(
    "a,b",
    [
        ((0, 0), (1, 1)),
        ((0, 0), (2, 0)),
        ((0, 0), (0, 0)),
        ((2, 2), (3, 2)),
        ((-1, 0), (0, 0)),
        ((5, 5), (5, 6)),
    ],
)
def test_remove_wall_ignores_bad_input(a, b):
    maze = Maze(3, 3)
    before = maze.wall_signature()
    assert maze.remove_wall(a, b) is False
    assert maze.wall_signature() == before


def test_add_wall_restores_pair():
    maze = Maze.open(3, 3)
    assert not maze.has_wall((0, 0), (0, 1))
    maze.add_wall((0, 1), (0, 0))
    assert maze.has_wall((0, 0), (0, 1))
    assert maze.cells[0][0].walls["S"] and maze.cells[1][0].walls["N"]


def test_open_maze_keeps_boundary():
    maze = Maze.open(3, 2)
    assert maze.passage_count() == 2 * 2 + 3 * 1
    assert maze.cells[0][0].walls["N"] and maze.cells[0][0].walls["W"]
    assert maze.cells[1][2].walls["S"] and maze.cells[1][2].walls["E"]


def test_has_wall_out_of_range_counts_as_wall():
    maze = Maze.open(2, 2)
    assert maze.has_wall((1, 1), (2, 1))
    assert maze.has_wall((0, 0), (1, 1))


def test_dead_ends_and_cell_counts():
    maze = Maze(3, 1)
    maze.remove_wall((0, 0), (1, 0))
    maze.remove_wall((1, 0), (2, 0))
    assert maze.dead_ends() == [(0, 0), (2, 0)]
    assert maze.cells[0][1].wall_count() == 2
    assert not maze.cells[0][1].is_isolated()
    assert Cell(0, 0).is_isolated()


def test_to_grid_marks_passages():
    maze = Maze(2, 1)
    maze.remove_wall((0, 0), (1, 0))
    grid = maze.to_grid()
    assert len(grid) == 3 and len(grid[0]) == 5
    assert grid[1] == [0, 1, 1, 1, 0]
    assert grid[0] == [0] * 5


def test_equality_compares_walls():
    a, b = Maze(3, 3), Maze(3, 3)
    assert a == b
    a.remove_wall((0, 0), (1, 0))
    assert a != b
    b.remove_wall((1, 0), (0, 0))
    assert a == b
    assert Maze(3, 3) != Maze(3, 2)


def test_solve_walled_maze_has_no_path():
    assert Maze(3, 3).solve() is None
    assert shortest_path(Maze(3, 3), (0, 0), (2, 2)) == []


def test_solve_single_cell():
    assert Maze(1, 1).solve() == [(0, 0)]


def test_solve_prefers_expansion_order_on_ties():
    maze = Maze.open(2, 2)
    #East is expanded before south, so the route goes along the top first
    assert maze.solve() == [(0, 0), (1, 0), (1, 1)]


def test_solve_returns_adjacent_open_steps():
    maze = Maze(3, 3)
    for a, b in [((0, 0), (0, 1)), ((0, 1), (1, 1)), ((1, 1), (1, 2)), ((1, 2), (2, 2)), ((0, 0), (1, 0))]:
        maze.remove_wall(a, b)
    path = maze.solve()
    assert path == [(0, 0), (0, 1), (1, 1), (1, 2), (2, 2)]
    for a, b in zip(path, path[1:]):
        assert manhattan(a, b) == 1
        assert not maze.has_wall(a, b)


def test_ensure_connectivity_is_noop_when_connected():
    maze = Maze.open(3, 3)
    before = maze.wall_signature()
    assert maze.ensure_connectivity() is False
    assert maze.wall_signature() == before


def test_ensure_connectivity_joins_disjoint_halves():
    maze = Maze(4, 2)
    #Left half and right half, each open inside, nothing shared
    for a, b in [((0, 0), (1, 0)), ((0, 1), (1, 1)), ((0, 0), (0, 1)), ((1, 0), (1, 1))]:
        maze.remove_wall(a, b)
    for a, b in [((2, 0), (3, 0)), ((2, 1), (3, 1)), ((2, 0), (2, 1)), ((3, 0), (3, 1))]:
        maze.remove_wall(a, b)
    assert maze.solve() is None
    before = maze.passage_count()

    assert maze.ensure_connectivity() is True

    assert maze.passage_count() == before + 1
    assert not maze.has_wall((1, 0), (2, 0))
    assert maze.solve() is not None


def test_ensure_connectivity_carves_long_corridor():
    maze = Maze(5, 5)
    assert maze.ensure_connectivity() is True
    path = maze.solve()
    #Horizontal leg along the top row, then straight down the right edge
    assert path == [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (4, 1), (4, 2), (4, 3), (4, 4)]
    assert maze.passage_count() == 8


def test_to_grid_agrees_with_walls():
    maze = generate("kruskal", 7, 5, 0.6, seed=4)
    grid = maze.to_grid()
    assert len(grid) == 11 and len(grid[0]) == 15
    for x, y in maze.coords():
        walls = maze.cells[y][x].walls
        gx, gy = 2 * x + 1, 2 * y + 1
        assert grid[gy][gx] == 1
        assert grid[gy][gx + 1] == (0 if walls["E"] else 1)
        assert grid[gy + 1][gx] == (0 if walls["S"] else 1)
    assert all(v == 0 for v in grid[0])
    assert all(row[0] == 0 for row in grid)


def test_reconstruct_path_follows_parents():
    parent = {(1, 0): (0, 0), (1, 1): (1, 0), (2, 1): (1, 1)}
    assert reconstruct_path(parent, (0, 0), (2, 1)) == [(0, 0), (1, 0), (1, 1), (2, 1)]
    assert reconstruct_path(parent, (0, 0), (0, 0)) == [(0, 0)]
    assert reconstruct_path(parent, (0, 0), (5, 5)) == []
