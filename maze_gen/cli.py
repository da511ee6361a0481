#Command line entry point
#Render a maze (and its solution) to PNG:
#   python -m maze_gen --algorithm kruskal --width 30 --height 20 --seed 7
#Time every algorithm and save the numbers:
#   python -m maze_gen --mode bench --runs 5 --csv-output results.csv

from __future__ import annotations

import argparse
import csv
import logging
import random
import sys
import time
from typing import List, Optional

from .algorithms import GENERATORS, get_generator, list_algorithms
from .config import DEFAULT_CONFIG_PATH, Config
from .errors import ConfigError, MazeError

logger = logging.getLogger(__name__)

BENCH_FIELDS = [
    "run",
    "algorithm",
    "width",
    "height",
    "complexity",
    "seed",
    "elapsed",
    "passages",
    "dead_ends",
    "path_length",
]


def build_config(args) -> Config:
    config = Config.load(args.config)
    return config.with_overrides(
        width=args.width,
        height=args.height,
        algorithm=args.algorithm,
        complexity=args.complexity,
        output=args.output,
        seed=args.seed,
        cell_size=args.cell_size,
        line_color=args.line_color,
        line_thickness=args.line_thickness,
    )


def print_settings(config: Config) -> None:
    print("Generating maze with:")
    print(f"  Width: {config.width}")
    print(f"  Height: {config.height}")
    print(f"  Algorithm: {config.algorithm}")
    print(f"  Complexity: {config.complexity:.2f}")
    print(f"  Seed: {config.seed if config.seed is not None else 'random'}")
    print(f"  Output: {config.output}")


def run_render_mode(args, config: Config) -> int:
    #Imported here so --list-algorithms and bench mode do not need pygame
    from .render import save_maze

    print_settings(config)
    generator = get_generator(config.algorithm)
    maze = generator.generate(config.width, config.height, config.complexity, config.seed)

    try:
        save_maze(maze, config.cell_size, config.output)
    except (OSError, ValueError) as exc:
        print(f"Error: failed to save image: {exc}", file=sys.stderr)
        return 1
    print(f"Maze saved to {config.output}")

    solution = maze.solve()
    if solution is None:
        print("Error: Could not solve maze (no path found)", file=sys.stderr)
        return 1
    print(f"Solution found with {len(solution)} steps")

    if not args.no_solution:
        try:
            save_maze(
                maze,
                config.cell_size,
                config.solved_output,
                solution=solution,
                line_color=config.line_color,
                line_thickness=config.line_thickness,
            )
        except (OSError, ValueError) as exc:
            print(f"Error saving solved maze: {exc}", file=sys.stderr)
            return 1
        print(f"Solved maze saved to {config.solved_output}")

    if args.show:
        from .visualizer import MazeVisualizer

        MazeVisualizer(maze, title=f" - {generator.title}").run()
    return 0


def bench_algorithms(args, config: Config) -> List[str]:
    #Every algorithm unless one was named on the command line
    if args.algorithm:
        return [config.algorithm]
    return list(GENERATORS)


def run_bench_mode(args, config: Config) -> int:
    rows = []
    for run_idx in range(args.runs):
        seed = config.seed if config.seed is not None else random.randint(0, 1_000_000_000)
        seed_desc = seed if config.seed is not None else f"random({seed})"
        print(f"\nRun {run_idx + 1}/{args.runs} | maze {config.width}x{config.height} | complexity={config.complexity:.2f} | seed: {seed_desc}")

        for name in bench_algorithms(args, config):
            start_time = time.perf_counter()
            maze = get_generator(name).generate(config.width, config.height, config.complexity, seed)
            elapsed = time.perf_counter() - start_time
            solution = maze.solve()
            path_length = len(solution) if solution else "-"
            passages = maze.passage_count()
            dead_ends = len(maze.dead_ends())
            print(f"[{name}] elapsed={elapsed:.4f}s passages={passages} dead_ends={dead_ends} path_len={path_length}")
            rows.append({
                "run": run_idx + 1,
                "algorithm": name,
                "width": config.width,
                "height": config.height,
                "complexity": f"{config.complexity:.2f}",
                "seed": seed,
                "elapsed": f"{elapsed:.6f}",
                "passages": passages,
                "dead_ends": dead_ends,
                "path_length": path_length,
            })

    if args.csv_output:
        with open(args.csv_output, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=BENCH_FIELDS)
            writer.writeheader()
            writer.writerows(rows)
        print(f"\nWrote {len(rows)} rows to {args.csv_output}")
    return 0


def print_algorithms() -> None:
    for name, title in list_algorithms():
        print(f"{name:<32} {title}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="maze-gen", description="Generate mazes using various algorithms and render them to PNG.")
    parser.add_argument("--mode", choices=["render", "bench"], default="render", help="'render' writes PNG images, 'bench' times the generators.")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="TOML configuration file (ignored if missing).")
    parser.add_argument("--width", type=int, default=None, help="Maze width in cells.")
    parser.add_argument("--height", type=int, default=None, help="Maze height in cells.")
    parser.add_argument("--algorithm", default=None, help="Generation algorithm, see --list-algorithms.")
    parser.add_argument("--complexity", type=float, default=None, help="Complexity from 0.0 to 1.0, clamped.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible mazes (default: random).")
    parser.add_argument("--output", default=None, help="Output PNG path.")
    parser.add_argument("--cell-size", type=int, default=None, help="Cell size in pixels.")
    parser.add_argument("--line-color", default=None, help="Solution line color as hex, e.g. #FF0000.")
    parser.add_argument("--line-thickness", type=float, default=None, help="Solution line thickness as a share of the cell size (0-1).")
    parser.add_argument("--no-solution", action="store_true", help="Skip writing the solved image.")
    parser.add_argument("--show", action="store_true", help="Open a pygame window animating the solve.")
    parser.add_argument("--list-algorithms", action="store_true", help="List available algorithms and exit.")
    parser.add_argument("--runs", type=int, default=1, help="Number of runs in bench mode.")
    parser.add_argument("--csv-output", default=None, help="Path to write bench results as CSV.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log generation details.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_algorithms:
        print_algorithms()
        return 0

    try:
        config = build_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    try:
        if args.mode == "bench":
            return run_bench_mode(args, config)
        return run_render_mode(args, config)
    except MazeError as exc:
        logger.error("Generation failed: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
