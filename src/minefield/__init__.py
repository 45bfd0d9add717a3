"""
Minefield engine.

Provides the board state machine: mine placement, flood-fill reveal,
flag toggling and win/loss detection, plus a session adapter.
"""
from .cell import Cell, CellState, ASCII_SYMBOLS, EMOJI_SYMBOLS
from .board import (
    Board,
    BoardConfig,
    GameState,
    InvalidConfiguration,
    OutOfBounds,
    Position,
)
from .session import GameSession

__all__ = [
    "Cell",
    "CellState",
    "ASCII_SYMBOLS",
    "EMOJI_SYMBOLS",
    "Board",
    "BoardConfig",
    "GameState",
    "InvalidConfiguration",
    "OutOfBounds",
    "Position",
    "GameSession",
]
