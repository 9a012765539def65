#Spanning-tree maze generator
#Builds a perfect maze on a rectangular or hexagonal grid, validates it and solves it with BFS

#To run this code, open terminal, follow directories to where the files are then run "python3 maze_gen.py"
#To save multiple runs to a csv file, run "python3 maze_gen.py --mode cli --topology hex --runs 10 --csv-output results.csv"
#A fixed --seed reproduces the same maze on the same grid

from __future__ import annotations

import argparse
import logging
import random
import sys
from dataclasses import dataclass
from typing import List, Optional, Tuple

from hexagonal_grid import HexagonalGrid
from maze_core import Grid, Maze, MazeError
from maze_generator import generate_maze
from maze_solver import SolverVisualizer, analyze_difficulty, bfs_search, solve, validate_solution
from maze_validator import validate
from rectangular_grid import RectangularGrid
from render import render_text

logger = logging.getLogger(__name__)

TOPOLOGIES = ("rect", "hex")


@dataclass
class MazeConfig:
    topology: str = "rect"
    width: int = 14
    height: int = 10
    radius: int = 5
    seed: Optional[int] = None


def build_grid(config: MazeConfig) -> Grid:
    if config.topology == "rect":
        return RectangularGrid(config.width, config.height)
    if config.topology == "hex":
        return HexagonalGrid(config.radius)
    raise ValueError(f"unknown topology {config.topology!r}, expected one of {TOPOLOGIES}")


def make_environment(config: MazeConfig) -> Tuple[Grid, Maze]:
    #Build the grid, then the maze; the seed is resolved here, never inside the generator
    grid = build_grid(config)
    maze = generate_maze(grid, random.Random(config.seed))
    return grid, maze


def resolve_seed(args) -> int:
    return args.seed if args.seed is not None else random.randint(0, 1_000_000_000)


def build_config(args, seed: Optional[int]) -> MazeConfig:
    return MazeConfig(
        topology=args.topology,
        width=args.width,
        height=args.height,
        radius=args.radius,
        seed=seed,
    )


def run_visual_mode(args):
    from visualizer import MazeVisualizer

    seed = resolve_seed(args)
    grid, maze = make_environment(build_config(args, seed))
    print(f"Launching visualizer for {grid!r} seed={seed}")
    viewer = MazeVisualizer(
        maze=maze,
        grid=grid,
        solver=SolverVisualizer("BFS", (66, 135, 245), bfs_search(maze)),
        tile_size=args.tile_size,
        title_suffix=f" - {args.topology} seed {seed}",
    )
    viewer.run()


def run_cli_mode(args) -> int:
    rows = []
    failures = 0
    for run_idx in range(args.runs):
        seed = resolve_seed(args) if run_idx == 0 or args.seed is None else args.seed + run_idx
        seed_desc = seed if args.seed is not None else f"random({seed})"
        grid, maze = make_environment(build_config(args, seed))

        violations = validate(maze, grid)
        path = solve(maze)
        solution_errors = validate_solution(maze, path) if path is not None else ["no path"]
        difficulty = analyze_difficulty(maze)
        failures += bool(violations or solution_errors)

        print(f"\nRun {run_idx + 1}/{args.runs} | {grid!r} | seed: {seed_desc}")
        print(
            f"cells={len(maze.cells)} passages={maze.passage_count()} boundary_walls={len(maze.boundary_walls)} "
            f"path_len={difficulty.solution_length} dead_ends={difficulty.dead_ends} "
            f"solution_ratio={difficulty.solution_ratio:.2f} violations={len(violations)}"
        )
        for violation in violations:
            print(f"  ! {violation}")
        for error in solution_errors:
            print(f"  ! {error}")
        if args.show and isinstance(grid, RectangularGrid):
            print(render_text(maze, grid, path))

        rows.append({
            "run": run_idx + 1,
            "topology": args.topology,
            "seed": seed,
            "cells": len(maze.cells),
            "passages": maze.passage_count(),
            "boundary_walls": len(maze.boundary_walls),
            "path_length": difficulty.solution_length,
            "dead_ends": difficulty.dead_ends,
            "solution_ratio": f"{difficulty.solution_ratio:.6f}",
            "violations": len(violations),
        })

    if args.csv_output:
        import csv

        fieldnames = [
            "run",
            "topology",
            "seed",
            "cells",
            "passages",
            "boundary_walls",
            "path_length",
            "dead_ends",
            "solution_ratio",
            "violations",
        ]
        with open(args.csv_output, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(rows)
        print(f"\nWrote {len(rows)} rows to {args.csv_output}")

    return 1 if failures else 0


def prompt_for_mode():
    response = input("Run visualizer? (y/n): ").strip().lower()
    return "visual" if response.startswith("y") else "cli"


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Spanning-tree maze generator/solver with optional visualizer.")
    parser.add_argument("--mode", choices=["visual", "cli"], help="Choose 'visual' for pygame viewer or 'cli' for text metrics.")
    parser.add_argument("--topology", choices=TOPOLOGIES, default="rect", help="Grid shape.")
    parser.add_argument("--width", type=int, default=14, help="Maze width in cells (rect).")
    parser.add_argument("--height", type=int, default=10, help="Maze height in cells (rect).")
    parser.add_argument("--radius", type=int, default=5, help="Board radius in cells (hex).")
    parser.add_argument("--tile-size", type=int, default=24, help="Base tile size for visual mode; auto-scales to fit the screen.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for maze generation (default: random). Later runs use seed+run.")
    parser.add_argument("--runs", type=int, default=1, help="Number of runs to execute in CLI mode.")
    parser.add_argument("--show", action="store_true", help="Print the maze as text (rect only).")
    parser.add_argument("--csv-output", type=str, default=None, help="Path to write CSV metrics.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log generation details.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    mode = args.mode or prompt_for_mode()
    try:
        if mode == "visual":
            run_visual_mode(args)
            return 0
        return run_cli_mode(args)
    except MazeError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
