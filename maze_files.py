"""
File helpers for maze inputs and solution outputs.
"""

from pathlib import Path
from typing import Iterable, List

SOLUTION_SUFFIX = "_solution.txt"


def read_maze_lines(path: Path) -> List[str]:
    """Read a maze file as a list of rows without line terminators."""
    return Path(path).read_text().splitlines()


def write_solution_lines(path: Path, lines: Iterable[str]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines))


def solution_path_for(maze_file: Path) -> Path:
    """maze_3.txt -> maze_3_solution.txt, next to the input."""
    maze_file = Path(maze_file)
    return maze_file.with_name(maze_file.stem + SOLUTION_SUFFIX)


def list_maze_files(
    directory: Path, solution_marker: str = "solution", pattern: str = "*.txt"
) -> List[Path]:
    """
    Files in directory matching pattern that are not previous solutions,
    sorted by name.

    Raises FileNotFoundError if directory does not exist.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Maze directory not found: {directory}")
    return sorted(
        p
        for p in directory.glob(pattern)
        if p.is_file() and solution_marker not in p.name
    )
