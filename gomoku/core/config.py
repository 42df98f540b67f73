"""
Configuration for the Gomoku game engine.

Board size and win length are fixed rules of the game and live as
constants elsewhere; only presentation geometry and the win-check policy
are configurable.
"""
from enum import Enum
from typing import Dict

from .coordinate import MARGIN


class WinCheck(Enum):
    """
    How a move is tested for five in a row.

    DIRECTIONAL walks outward from the placed stone one direction at a
    time and only sees runs that start at that stone. SYMMETRIC counts both
    sides of the placed stone along each axis.
    """
    DIRECTIONAL = 'directional'
    SYMMETRIC = 'symmetric'


class EngineConfig:
    """Configuration for a GameEngine."""

    def __init__(self,
                 # Pixel spacing between grid lines
                 margin: int = MARGIN,

                 # Win detection policy
                 win_check: WinCheck = WinCheck.SYMMETRIC):

        if isinstance(margin, bool) or not isinstance(margin, int) or margin <= 0:
            raise ValueError(f"margin must be a positive int, got {margin!r}")

        self.margin = margin
        self.win_check = self._parse_win_check(win_check)

    @staticmethod
    def _parse_win_check(value) -> WinCheck:
        if isinstance(value, WinCheck):
            return value
        if isinstance(value, str):
            for member in WinCheck:
                if value.lower() in (member.value, member.name.lower()):
                    return member
        raise ValueError(f"Unknown win check policy: {value!r}")

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return {'margin': self.margin, 'win_check': self.win_check.value}

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'EngineConfig':
        """Create config from dictionary."""
        return cls(**config_dict)

    def __repr__(self):
        return f"EngineConfig(margin={self.margin}, win_check={self.win_check.name})"
