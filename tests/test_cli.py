import csv

from maze_gen.algorithms import GENERATORS
from maze_gen.cli import BENCH_FIELDS, build_parser, main


def base_args(tmp_path, *extra):
    return [
        "--config", str(tmp_path / "none.toml"),
        "--output", str(tmp_path / "maze.png"),
        "--width", "6",
        "--height", "4",
        "--seed", "3",
        "--cell-size", "4",
        *extra,
    ]


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.mode == "render"
    assert args.width is None and args.algorithm is None
    assert args.runs == 1
    assert not args.show and not args.no_solution


def test_list_algorithms(capsys):
    assert main(["--list-algorithms"]) == 0
    out = capsys.readouterr().out
    for name in GENERATORS:
        assert name in out


def test_render_writes_maze_and_solution(tmp_path, capsys):
    assert main(base_args(tmp_path, "--algorithm", "prim")) == 0
    assert (tmp_path / "maze.png").exists()
    assert (tmp_path / "maze_solved.png").exists()
    out = capsys.readouterr().out
    assert "Algorithm: prim" in out
    assert "Solution found with" in out


def test_no_solution_flag_skips_solved_image(tmp_path):
    assert main(base_args(tmp_path, "--no-solution")) == 0
    assert (tmp_path / "maze.png").exists()
    assert not (tmp_path / "maze_solved.png").exists()


def test_config_file_is_used(tmp_path, capsys):
    config = tmp_path / "config.toml"
    config.write_text(f'algorithm = "eller"\nwidth = 5\nheight = 5\noutput = "{(tmp_path / "c.png").as_posix()}"\n')
    assert main(["--config", str(config), "--seed", "1", "--no-solution"]) == 0
    assert (tmp_path / "c.png").exists()
    assert "Algorithm: eller" in capsys.readouterr().out


def test_unknown_algorithm_exits_with_usage_error(tmp_path, capsys):
    assert main(base_args(tmp_path, "--algorithm", "labyrinth")) == 2
    assert "labyrinth" in capsys.readouterr().err
    assert not (tmp_path / "maze.png").exists()


def test_bad_dimensions_exit_with_usage_error(tmp_path):
    assert main(base_args(tmp_path, "--width", "0")) == 2


def test_unwritable_output_fails(tmp_path, capsys):
    args = base_args(tmp_path) + ["--output", str(tmp_path / "missing" / "dir" / "maze.png")]
    assert main(args) == 1
    assert "Error" in capsys.readouterr().err


def test_bench_single_algorithm_csv(tmp_path):
    csv_path = tmp_path / "bench.csv"
    assert main(base_args(tmp_path, "--mode", "bench", "--algorithm", "kruskal", "--complexity", "0", "--runs", "2", "--csv-output", str(csv_path))) == 0
    with open(csv_path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert list(rows[0]) == BENCH_FIELDS
    assert {row["algorithm"] for row in rows} == {"kruskal"}
    assert rows[0]["seed"] == "3"
    assert rows[0]["passages"] == "23"


def test_bench_all_algorithms(tmp_path, capsys):
    csv_path = tmp_path / "all.csv"
    assert main(base_args(tmp_path, "--mode", "bench", "--csv-output", str(csv_path))) == 0
    with open(csv_path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert [row["algorithm"] for row in rows] == list(GENERATORS)
    assert all(row["path_length"] != "-" for row in rows)
    assert not (tmp_path / "maze.png").exists()


def test_wrongly_typed_config_falls_back_to_defaults(tmp_path):
    config = tmp_path / "config.toml"
    config.write_text('complexity = "high"\n')
    args = base_args(tmp_path, "--no-solution")
    args[args.index("--config") + 1] = str(config)
    assert main(args) == 0
    assert (tmp_path / "maze.png").exists()
