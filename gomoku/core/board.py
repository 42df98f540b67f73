"""
Board implementation for Gomoku game.
"""
import numpy as np

from .coordinate import GRID_SIZE, Direction, GridCoordinate


WIN_LENGTH = 5

# One direction per line through a stone; the opposite side is walked too.
AXES = (
    Direction.EAST,       # Horizontal
    Direction.SOUTH,      # Vertical
    Direction.SOUTHEAST,  # Diagonal (↘)
    Direction.NORTHEAST,  # Anti-diagonal (↗)
)


class Board:
    """
    Represents a 15x15 Gomoku board.

    Board state representation, indexed [row, column]:
    - 0: empty cell
    - 1: player one stone
    - -1: player two stone

    Each player's stones are also kept in placement order.
    """

    STONES = (1, -1)

    def __init__(self):
        """Initialize an empty 15x15 board."""
        self.size = GRID_SIZE
        self.state = np.zeros((self.size, self.size), dtype=np.int8)
        self._moves = {stone: [] for stone in self.STONES}

    def place(self, coordinate, stone):
        """
        Place a stone on the board.

        Args:
            coordinate (GridCoordinate): Intersection to place on
            stone (int): 1 for player one, -1 for player two

        Returns:
            bool: True if the stone was placed, False if the cell is taken
                or the stone value is invalid
        """
        if stone not in self.STONES:
            return False
        if self.is_occupied(coordinate):
            return False

        self.state[coordinate.row, coordinate.column] = stone
        self._moves[stone].append(coordinate)
        return True

    def stone_at(self, coordinate):
        """Get the stone at a coordinate: 1, -1, or 0 when empty."""
        return int(self.state[coordinate.row, coordinate.column])

    def is_occupied(self, coordinate):
        return self.stone_at(coordinate) != 0

    def stones(self, stone):
        """
        Get the set of coordinates holding the given stone.

        Returns:
            frozenset: GridCoordinate objects, empty for an unknown stone value
        """
        return frozenset(self._moves.get(stone, ()))

    def moves(self, stone):
        """Get the coordinates of the given stone in the order they were placed."""
        return tuple(self._moves.get(stone, ()))

    @property
    def move_count(self):
        return sum(len(moves) for moves in self._moves.values())

    def get_legal_moves(self):
        """
        Get all empty intersections on the board.

        Returns:
            list: GridCoordinate objects in row-major order
        """
        rows, columns = np.nonzero(self.state == 0)
        return [GridCoordinate(int(col), int(row)) for row, col in zip(rows, columns)]

    def is_full(self):
        return not np.any(self.state == 0)

    def clear(self):
        """Remove every stone from the board."""
        self.state.fill(0)
        for moves in self._moves.values():
            moves.clear()

    def copy_state(self):
        """Get a copy of the board array that later moves will not touch."""
        return self.state.copy()

    def _count_run(self, seed, stone, direction, limit=GRID_SIZE):
        """Count consecutive stones beyond `seed` in one direction, up to `limit`."""
        count = 0
        for coordinate in seed.walk(direction, limit):
            if self.stone_at(coordinate) != stone:
                break
            count += 1
        return count

    def check_directional_win(self, seed, stone):
        """
        Check for five in a row starting at the seed, one direction at a time.

        For every neighbour of the seed holding the same stone, walks on in
        that direction looking for three more. This only sees runs where the
        seed is an end stone; a seed placed inside a run is not detected.

        Args:
            seed (GridCoordinate): The stone just placed
            stone (int): Player to check (1 or -1)

        Returns:
            bool: True if seed, neighbour and three further stones line up
        """
        for direction, neighbour in zip(Direction, seed.all_adjacent()):
            if neighbour is None or self.stone_at(neighbour) != stone:
                continue
            needed = WIN_LENGTH - 2
            if self._count_run(neighbour, stone, direction, needed) == needed:
                return True
        return False

    def check_symmetric_win(self, seed, stone):
        """
        Check for five or more in a row through the seed.

        Counts both sides of the seed along each of the 4 axes, so the seed
        may sit anywhere in the run. Overlines count as a win.

        Args:
            seed (GridCoordinate): The stone just placed
            stone (int): Player to check (1 or -1)

        Returns:
            bool: True if any axis holds at least 5 contiguous stones
        """
        for direction in AXES:
            total = (1 + self._count_run(seed, stone, direction)
                     + self._count_run(seed, stone, direction.opposite))
            if total >= WIN_LENGTH:
                return True
        return False

    def winning_line(self, seed, stone):
        """
        Get the longest run through the seed if it is long enough to win.

        Returns:
            tuple: GridCoordinate objects from one end of the run to the
                other, or an empty tuple when no axis holds 5 in a row
        """
        if self.stone_at(seed) != stone:
            return ()

        best = ()
        for direction in AXES:
            backward = self._count_run(seed, stone, direction.opposite)
            forward = self._count_run(seed, stone, direction)
            length = backward + 1 + forward
            if length < WIN_LENGTH or length <= len(best):
                continue
            start = seed
            for start in seed.walk(direction.opposite, backward):
                pass
            best = (start,) + tuple(start.walk(direction, backward + forward))
        return best
