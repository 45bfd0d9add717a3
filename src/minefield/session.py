"""
Game session adapter.

Relays start/open/flag/fetch calls from a host (CLI, UI binding)
to a single owned Board.
"""
from typing import Optional

from .board import Board, Position
from .cell import ASCII_SYMBOLS, SymbolTable


class GameSession:
    """
    Holds the board for one player and forwards coordinates to it.

    The session replaces its board wholesale on ``start``; it keeps no
    history of earlier games.
    """

    def __init__(
        self,
        symbols: SymbolTable = ASCII_SYMBOLS,
        board: Optional[Board] = None,
    ) -> None:
        self.symbols = symbols
        self._board = board

    @property
    def board(self) -> Board:
        if self._board is None:
            raise RuntimeError("No game in progress; call start() first")
        return self._board

    def start(
        self,
        rows: int,
        cols: int,
        mine_count: int,
        seed: Optional[int] = None,
    ) -> None:
        """
        Start a new game, discarding the current one.

        The first argument is the row count, as in the host binding
        where ``start(16, 30, 70)`` opens a 16-row by 30-column board.

        The new board is fully built before the old one is dropped, so
        an invalid configuration leaves the running game untouched.
        """
        self._board = Board.initialize(rows, cols, mine_count, seed=seed)

    def open(self, row: int, col: int) -> int:
        """Reveal a cell. Returns the number of safe cells opened."""
        return self.board.reveal(Position(row, col))

    def flag(self, row: int, col: int) -> bool:
        """Toggle the flag on a cell."""
        return self.board.toggle_flag(Position(row, col))

    def fetch(self) -> str:
        """Current board rendered with the session's symbols."""
        return self.board.render(self.symbols)

    def game_ended(self) -> bool:
        return self.board.has_ended()
