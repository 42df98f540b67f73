"""
Game implementation for Gomoku.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Tuple

import numpy as np

from .board import Board
from .config import EngineConfig, WinCheck
from .coordinate import GridCoordinate


class Player(Enum):
    PLAYER_ONE = 1
    PLAYER_TWO = -1

    @property
    def other(self) -> 'Player':
        return Player.PLAYER_TWO if self is Player.PLAYER_ONE else Player.PLAYER_ONE

    @property
    def stone(self) -> int:
        """Board encoding of this player's stones."""
        return self.value


class MoveOutcome(Enum):
    PLACED = 'placed'
    PLACED_AND_WON = 'placed_and_won'
    REJECTED_CELL_OCCUPIED = 'rejected_cell_occupied'
    REJECTED_GAME_OVER = 'rejected_game_over'


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a move attempt.

    `player` is the player who moved for accepted moves and None for
    rejected ones.
    """
    outcome: MoveOutcome
    player: Optional[Player] = None

    @classmethod
    def placed(cls, player):
        return cls(MoveOutcome.PLACED, player)

    @classmethod
    def placed_and_won(cls, player):
        return cls(MoveOutcome.PLACED_AND_WON, player)

    @property
    def accepted(self) -> bool:
        return self.outcome in (MoveOutcome.PLACED, MoveOutcome.PLACED_AND_WON)

    @property
    def won(self) -> bool:
        return self.outcome is MoveOutcome.PLACED_AND_WON


MoveResult.REJECTED_CELL_OCCUPIED = MoveResult(MoveOutcome.REJECTED_CELL_OCCUPIED)
MoveResult.REJECTED_GAME_OVER = MoveResult(MoveOutcome.REJECTED_GAME_OVER)


@dataclass(frozen=True)
class GameStatus:
    """
    State of the game: in progress with a player to move, or won.

    Only one player is ever recorded, so a game cannot be won by both
    players or be over while someone is still to move.
    """
    player: Player
    is_over: bool = False

    @classmethod
    def in_progress(cls, active_player):
        return cls(active_player, False)

    @classmethod
    def won(cls, winner):
        return cls(winner, True)

    @property
    def active_player(self) -> Optional[Player]:
        return None if self.is_over else self.player

    @property
    def winner(self) -> Optional[Player]:
        return self.player if self.is_over else None

    def __str__(self):
        if self.is_over:
            return f"Won({self.player.name})"
        return f"InProgress({self.player.name})"


@dataclass(frozen=True)
class BoardSnapshot:
    """Render-ready view of the game at one point in time."""
    state: np.ndarray = field(compare=False)
    player_one_stones: FrozenSet[GridCoordinate]
    player_two_stones: FrozenSet[GridCoordinate]
    status: GameStatus
    last_placed: Optional[GridCoordinate] = None
    winning_line: Tuple[GridCoordinate, ...] = ()

    @property
    def active_player(self):
        return self.status.active_player

    @property
    def winner(self):
        return self.status.winner

    def stones_of(self, player):
        if player is Player.PLAYER_ONE:
            return self.player_one_stones
        return self.player_two_stones


class GameEngine:
    """
    Manages a Gomoku game session.

    Handles turn order, move legality and win detection for two players
    sharing one board. Player one always moves first. Illegal moves are
    reported through MoveResult and leave the game untouched.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        Initialize a new Gomoku game.

        Args:
            config: Engine configuration; defaults to EngineConfig()
        """
        self.config = config if config is not None else EngineConfig()
        self.board = Board()
        self._status = GameStatus.in_progress(Player.PLAYER_ONE)
        self._last_placed = None

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def active_player(self) -> Optional[Player]:
        """Player whose move is next, or None once the game is won."""
        return self._status.active_player

    @property
    def winner(self) -> Optional[Player]:
        return self._status.winner

    @property
    def last_placed(self) -> Optional[GridCoordinate]:
        return self._last_placed

    @property
    def move_count(self) -> int:
        return self.board.move_count

    def stones_of(self, player: Player) -> FrozenSet[GridCoordinate]:
        return self.board.stones(player.stone)

    def moves_of(self, player: Player) -> Tuple[GridCoordinate, ...]:
        """Get a player's stones in the order they were placed."""
        return self.board.moves(player.stone)

    def legal_moves(self):
        """
        Get the coordinates a move could currently be made on.

        Returns:
            list: Empty intersections, or an empty list once the game is won
        """
        if self._status.is_over:
            return []
        return self.board.get_legal_moves()

    def attempt_move(self, coordinate: GridCoordinate) -> MoveResult:
        """
        Make a move for the active player.

        Args:
            coordinate: Intersection to place the stone on

        Returns:
            MoveResult: PLACED or PLACED_AND_WON with the mover, or one of
                the rejections if the game is over or the cell is taken

        Raises:
            TypeError: If coordinate is not a GridCoordinate
        """
        if not isinstance(coordinate, GridCoordinate):
            raise TypeError(f"Expected a GridCoordinate, got {coordinate!r}")

        # Can't make moves if game is already over
        if self._status.is_over:
            return MoveResult.REJECTED_GAME_OVER

        mover = self._status.player
        if not self.board.place(coordinate, mover.stone):
            return MoveResult.REJECTED_CELL_OCCUPIED

        self._last_placed = coordinate

        if self._is_winning_move(coordinate, mover):
            self._status = GameStatus.won(mover)
            return MoveResult.placed_and_won(mover)

        # Game continues, switch to next player
        self._status = GameStatus.in_progress(mover.other)
        return MoveResult.placed(mover)

    def attempt_pixel_move(self, px, py) -> Optional[MoveResult]:
        """
        Make a move at the intersection nearest to a pixel position.

        Returns:
            MoveResult or None: None, with no state change, if the position
                is off the board
        """
        coordinate = GridCoordinate.from_pixel(px, py, margin=self.config.margin)
        if coordinate is None:
            return None
        return self.attempt_move(coordinate)

    def _is_winning_move(self, coordinate, player):
        if self.config.win_check is WinCheck.DIRECTIONAL:
            return self.board.check_directional_win(coordinate, player.stone)
        return self.board.check_symmetric_win(coordinate, player.stone)

    def reset(self):
        """Start a new game: empty board, player one to move, no winner."""
        self.board.clear()
        self._status = GameStatus.in_progress(Player.PLAYER_ONE)
        self._last_placed = None

    def snapshot(self) -> BoardSnapshot:
        """Get a copy of the current game state for rendering."""
        winning_line = ()
        if self._status.is_over:
            winning_line = self.board.winning_line(self._last_placed, self._status.player.stone)
        return BoardSnapshot(
            state=self.board.copy_state(),
            player_one_stones=self.stones_of(Player.PLAYER_ONE),
            player_two_stones=self.stones_of(Player.PLAYER_TWO),
            status=self._status,
            last_placed=self._last_placed,
            winning_line=winning_line,
        )
