"""
Grid maze domain model.

A maze is a rectangle of characters read as rows of equal length. Cells
holding the start marker are sources, cells holding the end marker are
targets, blank cells are open floor and every other character is a wall.
Movement is 4-connected at unit cost.

Vertices handed to the engine are (row, col) pairs packed into one int, row
in the high 32 bits and column in the low 32 bits.
"""

from typing import Iterable, List, Sequence, Tuple

from graph import Graph

START_CHAR = "@"
END_CHAR = "$"
BLANK_CHAR = " "

COORDINATE_BITS = 32
_COORDINATE_LIMIT = 1 << COORDINATE_BITS
_COORDINATE_MASK = _COORDINATE_LIMIT - 1

# (d_row, d_col) for up, down, left, right
_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def coordinates_to_position(row: int, col: int) -> int:
    """Pack (row, col) into a single vertex id."""
    if not (0 <= row < _COORDINATE_LIMIT and 0 <= col < _COORDINATE_LIMIT):
        raise ValueError(
            f"Coordinates ({row}, {col}) outside [0, 2**{COORDINATE_BITS})"
        )
    return (row << COORDINATE_BITS) | col


def position_to_coordinates(position: int) -> Tuple[int, int]:
    """Unpack a vertex id into (row, col)."""
    return position >> COORDINATE_BITS, position & _COORDINATE_MASK


class Maze(Graph[int, int]):
    """
    Immutable character grid exposing its open cells as a unit-weight graph.
    """

    coordinates_to_position = staticmethod(coordinates_to_position)
    position_to_coordinates = staticmethod(position_to_coordinates)

    def __init__(
        self,
        layout: Sequence[str],
        start_char: str = START_CHAR,
        end_char: str = END_CHAR,
        blank_char: str = BLANK_CHAR,
    ) -> None:
        rows = tuple(layout)
        if not rows:
            raise ValueError("Maze must have at least one line")

        width = len(rows[0])
        for i, line in enumerate(rows[1:], start=1):
            if len(line) != width:
                raise ValueError(
                    f"All lines must have the same width: line {i} has "
                    f"{len(line)} characters, expected {width}"
                )

        self._layout = rows
        self._height = len(rows)
        self._width = width
        self._start_char = start_char
        self._end_char = end_char
        self._blank_char = blank_char
        self._passable = frozenset((blank_char, start_char, end_char))
        self._start_positions = self._find(start_char)
        self._end_positions = self._find(end_char)

    @classmethod
    def from_text(cls, text: str, **markers: str) -> "Maze":
        """Build a maze from a newline-separated block of text."""
        return cls(text.splitlines(), **markers)

    # --- Accessors ------------------------------------------------------------

    @property
    def layout(self) -> Tuple[str, ...]:
        return self._layout

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def start_char(self) -> str:
        return self._start_char

    @property
    def end_char(self) -> str:
        return self._end_char

    @property
    def blank_char(self) -> str:
        return self._blank_char

    @property
    def start_positions(self) -> Tuple[int, ...]:
        """Packed positions of every start marker, in row-major order."""
        return self._start_positions

    @property
    def end_positions(self) -> Tuple[int, ...]:
        """Packed positions of every end marker, in row-major order."""
        return self._end_positions

    def char_at(self, row: int, col: int) -> str:
        return self._layout[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._height and 0 <= col < self._width

    def is_passable(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self._layout[row][col] in self._passable

    # --- Graph interface ------------------------------------------------------

    def outgoing(self, position: int) -> List[Tuple[int, int]]:
        row, col = position_to_coordinates(position)
        neighbors: List[Tuple[int, int]] = []
        for d_row, d_col in _STEPS:
            n_row, n_col = row + d_row, col + d_col
            if not self.is_passable(n_row, n_col):
                continue
            neighbors.append((coordinates_to_position(n_row, n_col), 1))
        return neighbors

    # --- Internal helpers -----------------------------------------------------

    def _find(self, marker: str) -> Tuple[int, ...]:
        return tuple(
            coordinates_to_position(row, col)
            for row, line in enumerate(self._layout)
            for col, char in enumerate(line)
            if char == marker
        )

    def __repr__(self) -> str:
        return (
            f"Maze(height={self._height}, width={self._width}, "
            f"starts={len(self._start_positions)}, ends={len(self._end_positions)})"
        )


def positions_to_coordinates(positions: Iterable[int]) -> List[Tuple[int, int]]:
    """Unpack several vertex ids at once."""
    return [position_to_coordinates(p) for p in positions]
