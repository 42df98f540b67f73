"""
Grid coordinates and lattice navigation for the 15x15 Gomoku board.

Also holds the pixel geometry used by a presentation layer to translate
pointer positions into intersections and back.
"""
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple


GRID_SIZE = 15
MARGIN = 35  # pixels between grid lines, and from the window edge to line 0


def pixel_values(margin=MARGIN):
    """
    Get the pixel positions of the grid lines along one axis.

    Args:
        margin (int): Pixel spacing between grid lines

    Returns:
        tuple: GRID_SIZE increasing pixel values, one per grid line
    """
    return tuple(margin * (i + 1) for i in range(GRID_SIZE))


PIXEL_VALUES = pixel_values()


class Direction(Enum):
    """
    The 8 compass directions, declared clockwise starting at North.

    Each value is the (column, row) step of one grid unit. Rows grow
    downwards, so North decreases the row.
    """
    NORTH = (0, -1)
    NORTHEAST = (1, -1)
    EAST = (1, 0)
    SOUTHEAST = (1, 1)
    SOUTH = (0, 1)
    SOUTHWEST = (-1, 1)
    WEST = (-1, 0)
    NORTHWEST = (-1, -1)

    @property
    def dcol(self) -> int:
        return self.value[0]

    @property
    def drow(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> 'Direction':
        return Direction((-self.dcol, -self.drow))


def _round_to_grid_index(px, margin):
    """
    Round a pixel distance to the index of the nearest grid line.

    Scans the grid lines in increasing order and keeps the first strict
    minimum, so a pixel exactly between two lines goes to the lower one.

    Returns:
        tuple: (index, distance in pixels to that line)
    """
    best_index = 0
    best_diff = None
    for index, value in enumerate(pixel_values(margin)):
        diff = abs(px - value)
        if best_diff is None or diff < best_diff:
            best_diff = diff
            best_index = index
    return best_index, best_diff


@dataclass(frozen=True)
class GridCoordinate:
    """
    One of the 225 intersections on the board.

    Coordinates outside the lattice cannot be constructed; navigation
    methods return None instead of stepping off the edge.
    """
    column: int
    row: int

    def __post_init__(self):
        for name in ('column', 'row'):
            value = getattr(self, name)
            if not isinstance(value, numbers.Integral) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int, got {value!r}")
            value = int(value)
            object.__setattr__(self, name, value)
            if not 0 <= value < GRID_SIZE:
                raise ValueError(f"{name} {value} is outside [0, {GRID_SIZE - 1}]")

    def __str__(self):
        return f"({self.column}, {self.row})"

    @staticmethod
    def in_bounds(column, row):
        """Check whether (column, row) names an intersection on the lattice."""
        return 0 <= column < GRID_SIZE and 0 <= row < GRID_SIZE

    @classmethod
    def from_pixel(cls, px, py, margin=MARGIN) -> Optional['GridCoordinate']:
        """
        Create the coordinate closest to a pixel position.

        For example, with the default 35px margin, (40, 68) is (0, 1).
        Each axis is rounded independently. Positions more than half a
        grid spacing outside the outermost lines are off the board.

        Args:
            px (int): Distance on the horizontal axis
            py (int): Distance on the vertical axis
            margin (int): Pixel spacing between grid lines

        Returns:
            GridCoordinate or None: The nearest intersection, or None if off-board
        """
        column, column_diff = _round_to_grid_index(px, margin)
        row, row_diff = _round_to_grid_index(py, margin)
        if column_diff * 2 > margin or row_diff * 2 > margin:
            return None
        return cls(column, row)

    def to_pixel(self, margin=MARGIN) -> Tuple[int, int]:
        """Get the pixel position of this intersection."""
        return margin * (self.column + 1), margin * (self.row + 1)

    def adjacent(self, direction: Direction) -> Optional['GridCoordinate']:
        """
        Get the neighbouring coordinate in the given direction.

        Returns:
            GridCoordinate or None: The neighbour, or None if it is off the grid
        """
        column = self.column + direction.dcol
        row = self.row + direction.drow
        if not self.in_bounds(column, row):
            return None
        return GridCoordinate(column, row)

    def all_adjacent(self) -> Tuple[Optional['GridCoordinate'], ...]:
        """
        Get all 8 neighbours in clockwise order starting at North.

        Entries are None where the neighbour would be off the grid, so the
        position of each entry always matches its Direction.
        """
        return tuple(self.adjacent(direction) for direction in Direction)

    def walk(self, direction: Direction, limit=GRID_SIZE) -> Iterator['GridCoordinate']:
        """Yield successive neighbours in one direction, at most `limit` of them."""
        current = self
        for _ in range(limit):
            current = current.adjacent(direction)
            if current is None:
                return
            yield current

    @classmethod
    def all_coordinates(cls):
        """Get every coordinate on the board in row-major order."""
        return [cls(column, row) for row in range(GRID_SIZE) for column in range(GRID_SIZE)]
