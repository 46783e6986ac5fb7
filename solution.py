"""
Path reconstruction and solution rendering for solved mazes.

The classification grid is computed once; rendering to plain text and
colouring for the terminal are separate passes over it.
"""

from enum import IntEnum
from typing import Any, Collection, Dict, Iterable, List, Mapping

import numpy as np

from maze import Maze, position_to_coordinates

VISITED_CHAR = "o"
PATH_CHAR = "x"

RESET_COLOR = "\033[0m"


class CellClass(IntEnum):
    UNVISITED = 0
    VISITED = 1
    PATH = 2
    START = 3
    END = 4


CELL_COLORS: Dict[CellClass, str] = {
    CellClass.VISITED: "\033[90m",
    CellClass.PATH: "\033[93m",
    CellClass.START: "\033[94m",
    CellClass.END: "\033[92m",
}


def reconstruct_path(
    predecessors: Mapping[Any, Any], target: Any, sources: Collection[Any] = ()
) -> List[Any]:
    """
    Walk predecessors back from target until a vertex with no parent.

    Returns the chain ordered from the source side to target. Any vertex in
    sources is left out, so passing the search's sources yields only the
    cells that should carry the path marker plus the target itself.
    """
    chain = [target]
    seen = {target}
    current = target
    while current in predecessors:
        current = predecessors[current]
        if current in seen:
            raise ValueError(f"Predecessor cycle through {current!r}")
        seen.add(current)
        chain.append(current)

    chain.reverse()
    if sources:
        source_set = set(sources)
        chain = [v for v in chain if v not in source_set]
    return chain


def classify_cells(
    maze: Maze, distances: Iterable[int], path: Iterable[int] = ()
) -> np.ndarray:
    """
    Label every cell of maze with a CellClass.

    Settled positions become VISITED, positions on path become PATH, and
    cells carrying the start or end marker keep START / END whatever the
    search did with them.
    """
    classes = np.full((maze.height, maze.width), CellClass.UNVISITED, dtype=np.int8)

    for position in distances:
        row, col = position_to_coordinates(position)
        classes[row, col] = CellClass.VISITED
    for position in path:
        row, col = position_to_coordinates(position)
        classes[row, col] = CellClass.PATH

    chars = _char_grid(maze.layout)
    classes[chars == maze.start_char] = CellClass.START
    classes[chars == maze.end_char] = CellClass.END
    return classes


def render_solution(
    maze: Maze,
    classes: np.ndarray,
    visited_char: str = VISITED_CHAR,
    path_char: str = PATH_CHAR,
) -> List[str]:
    """Copy of the maze layout with visited and path cells overwritten."""
    grid = _char_grid(maze.layout)
    grid[classes == CellClass.VISITED] = visited_char
    grid[classes == CellClass.PATH] = path_char
    return ["".join(row) for row in grid]


def colorize_solution(lines: List[str], classes: np.ndarray) -> List[str]:
    """Wrap each classified cell of lines in its ANSI colour."""
    colored: List[str] = []
    for row, line in enumerate(lines):
        parts = []
        for col, char in enumerate(line):
            color = CELL_COLORS.get(CellClass(int(classes[row, col])))
            parts.append(f"{color}{char}{RESET_COLOR}" if color else char)
        colored.append("".join(parts))
    return colored


def _char_grid(layout: Iterable[str]) -> np.ndarray:
    # One character per element; works for zero-width rows too.
    rows = [list(line) for line in layout]
    width = len(rows[0]) if rows else 0
    return np.array(rows, dtype="<U1").reshape(len(rows), width)
