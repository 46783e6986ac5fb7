"""
CLI to solve maze files with the Dijkstra engine.

Reads a YAML config (or uses defaults), solves every maze in the configured
directory into a sibling *_solution.txt file, prints progress and the
coloured solutions, and optionally writes a per-maze summary CSV.
"""

from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence
import argparse
import csv
import time

import numpy as np

from algorithms import SolveResult
from dijkstra_engine import SimpleDijkstraEngine
from frontier import frontier_factory
from maze import END_CHAR, START_CHAR, Maze, positions_to_coordinates
from maze_files import list_maze_files, read_maze_lines, solution_path_for, write_solution_lines
from solution import classify_cells, colorize_solution, reconstruct_path, render_solution

SUMMARY_FIELDS = [
    "maze",
    "solution_file",
    "height",
    "width",
    "starts",
    "ends",
    "reached",
    "distance",
    "visited",
    "path_length",
    "edges_examined",
    "frontier_pops",
    "duration_sec",
]


@dataclass(frozen=True)
class SolverConfig:
    maze_directory: Path = Path("mazes")
    solution_marker: str = "solution"
    frontier: str = "heap"
    colorize: bool = True
    use_processes: bool = False
    max_workers: Optional[int] = None
    summary_csv: Optional[Path] = None
    start_char: str = START_CHAR
    end_char: str = END_CHAR


def load_config(path: Path) -> SolverConfig:
    import yaml  # type: ignore

    data = yaml.safe_load(Path(path).read_text()) or {}
    base = Path(path).parent
    summary = data.get("summary_csv")
    max_workers = data.get("max_workers")
    cfg = SolverConfig(
        # Relative paths in the file are relative to the file itself.
        maze_directory=base / data.get("maze_directory", "."),
        solution_marker=str(data.get("solution_marker", "solution")),
        frontier=str(data.get("frontier", "heap")),
        colorize=_flag(data, "colorize", True),
        use_processes=_flag(data, "use_processes", False),
        max_workers=int(max_workers) if max_workers is not None else None,
        summary_csv=base / summary if summary else None,
        start_char=str(data.get("start_char", START_CHAR)),
        end_char=str(data.get("end_char", END_CHAR)),
    )
    # Fail on a bad frontier name before any maze is touched.
    frontier_factory(cfg.frontier)
    return cfg


def _flag(data: Dict[str, object], key: str, default: bool) -> bool:
    value = data.get(key, default)
    # A quoted "false" is a string, and bool("false") is True.
    if not isinstance(value, bool):
        raise ValueError(f"Config key '{key}' must be true or false, got {value!r}")
    return value


@dataclass
class MazeSolution:
    """
    A maze together with one engine run over it and the derived overlay.
    """

    maze: Maze
    result: SolveResult
    classes: np.ndarray
    path: List[int] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.result.reached_target is not None

    @property
    def distance(self) -> Optional[int]:
        if not self.solved:
            return None
        return self.result.distances[self.result.reached_target]

    def solution_lines(self) -> List[str]:
        return render_solution(self.maze, self.classes)

    def colored_lines(self) -> List[str]:
        return colorize_solution(self.solution_lines(), self.classes)


def solve_maze(maze: Maze, engine: Optional[SimpleDijkstraEngine] = None) -> MazeSolution:
    """
    Run the engine from every start marker towards every end marker.
    """
    engine = engine or SimpleDijkstraEngine()
    result = engine.solve(maze, maze.start_positions, maze.end_positions)

    path: List[int] = []
    if result.reached_target is not None:
        path = reconstruct_path(
            result.predecessors, result.reached_target, sources=maze.start_positions
        )

    classes = classify_cells(maze, result.distances, path)
    return MazeSolution(maze=maze, result=result, path=path, classes=classes)


def solve_maze_file(
    maze_file: Path, solution_file: Path, config: SolverConfig = SolverConfig()
) -> Dict[str, object]:
    """
    Solve one maze file, write its solution file and return a summary row.
    """
    start = time.time()
    maze = Maze(read_maze_lines(maze_file), start_char=config.start_char, end_char=config.end_char)
    engine = SimpleDijkstraEngine(frontier_factory=frontier_factory(config.frontier))

    print(f"[solve] {maze_file}: start position(s) {_format_positions(maze.start_positions)}")
    print(f"[solve] {maze_file}: end position(s) {_format_positions(maze.end_positions)}")

    solution = solve_maze(maze, engine)
    lines = solution.solution_lines()
    write_solution_lines(solution_file, lines)

    if solution.solved:
        print(
            f"[solve] end vertex {_format_positions([solution.result.reached_target])} "
            f"has a distance of {solution.distance}"
        )
    else:
        print(f"[solve] {maze_file}: no end position is reachable")

    if config.colorize:
        print("\n".join(solution.colored_lines()))

    return {
        "maze": str(maze_file),
        "solution_file": str(solution_file),
        "height": maze.height,
        "width": maze.width,
        "starts": len(maze.start_positions),
        "ends": len(maze.end_positions),
        "reached": solution.solved,
        "distance": solution.distance if solution.solved else "",
        "visited": len(solution.result.distances),
        "path_length": len(solution.path),
        "edges_examined": engine.last_edges_examined,
        "frontier_pops": engine.last_frontier_pops,
        "duration_sec": time.time() - start,
    }


def _run_task(maze_file: str, config: SolverConfig) -> Dict[str, object]:
    path = Path(maze_file)
    return solve_maze_file(path, solution_path_for(path), config)


def solve_directory(config: SolverConfig) -> List[Dict[str, object]]:
    """
    Solve every maze file in config.maze_directory.

    Files whose name contains config.solution_marker are skipped so that
    earlier outputs are never solved again. A maze that fails to load or
    solve is reported and left out of the results.
    """
    start = time.time()
    maze_files = list_maze_files(config.maze_directory, config.solution_marker)
    print(f"[solve] queued {len(maze_files)} maze file(s) from {config.maze_directory}")

    results: List[Dict[str, object]] = []
    use_processes = config.use_processes
    if maze_files and use_processes:
        try:
            with ProcessPoolExecutor(max_workers=config.max_workers) as executor:
                future_to_file = {
                    executor.submit(_run_task, str(path), config): path for path in maze_files
                }
                for future in as_completed(future_to_file):
                    path = future_to_file[future]
                    try:
                        res = future.result()
                        results.append(res)
                        print(f"[solve] completed maze={path.name} duration={res['duration_sec']:.3f}s")
                    except Exception as exc:
                        print(f"[solve] failed maze={path.name}: {exc}")
        except (PermissionError, NotImplementedError, OSError) as exc:
            print(f"[solve] process pool unavailable ({exc}), falling back to sequential execution")
            use_processes = False
            results = []

    if maze_files and not use_processes:
        for path in maze_files:
            try:
                res = _run_task(str(path), config)
            except (OSError, ValueError) as exc:
                print(f"[solve] failed maze={path.name}: {exc}")
                continue
            results.append(res)
            print(f"[solve] completed maze={path.name} duration={res['duration_sec']:.3f}s")

    # Pool completion order is arbitrary; report in file order.
    results.sort(key=lambda r: str(r["maze"]))

    if config.summary_csv:
        write_summary_csv(results, config.summary_csv)

    elapsed = time.time() - start
    solved = sum(1 for r in results if r["reached"])
    print(f"[solve] solved {solved}/{len(results)} maze(s) in {elapsed:.2f}s")
    return results


def write_summary_csv(results: Iterable[Dict[str, object]], path: Path) -> None:
    """
    Write one row per solved maze file for downstream analysis.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=SUMMARY_FIELDS)
        writer.writeheader()
        for res in results:
            writer.writerow({key: res.get(key, "") for key in SUMMARY_FIELDS})


def _format_positions(positions: Iterable[int]) -> str:
    # Printed as (x,y), i.e. column first.
    coords = positions_to_coordinates(positions)
    if not coords:
        return "none"
    return " ".join(f"({col},{row})" for row, col in coords)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Solve text mazes with Dijkstra's algorithm")
    parser.add_argument("--config", type=Path, default=None, help="YAML solver config")
    parser.add_argument("--directory", type=Path, default=None, help="Directory of maze .txt files")
    parser.add_argument("--frontier", choices=["heap", "scan"], default=None, help="Frontier implementation")
    parser.add_argument("--summary-csv", type=Path, default=None, help="Write a per-maze summary CSV")
    parser.add_argument("--processes", action="store_true", help="Solve mazes in a process pool")
    parser.add_argument("--no-color", action="store_true", help="Do not print coloured solutions")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> List[Dict[str, object]]:
    args = parse_args(argv)
    config = load_config(args.config) if args.config else SolverConfig()

    overrides: Dict[str, object] = {}
    if args.directory is not None:
        overrides["maze_directory"] = args.directory
    if args.frontier is not None:
        overrides["frontier"] = args.frontier
    if args.summary_csv is not None:
        overrides["summary_csv"] = args.summary_csv
    if args.processes:
        overrides["use_processes"] = True
    if args.no_color:
        overrides["colorize"] = False
    config = replace(config, **overrides)

    return solve_directory(config)


if __name__ == "__main__":
    main()
