"""
Cell module for the minefield engine.

Represents one grid position and its visible state
(closed/flagged/revealed/detonated), plus the symbol tables used
to render a cell as text.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, Tuple


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible states of a cell."""

    CLOSED = auto()
    FLAGGED = auto()
    REVEALED = auto()
    DETONATED = auto()


# Keys are CellState.CLOSED, CellState.FLAGGED, CellState.DETONATED and
# the revealed counts 0-8.
SymbolTable = Dict[object, str]

ASCII_SYMBOLS: SymbolTable = {
    CellState.CLOSED: ".",
    CellState.FLAGGED: "F",
    CellState.DETONATED: "*",
    **{count: str(count) for count in range(9)},
}

EMOJI_SYMBOLS: SymbolTable = {
    CellState.CLOSED: "\u2b1b",
    CellState.FLAGGED: "\U0001f3f3\ufe0f",
    CellState.DETONATED: "\U0001f4a3",
    0: "\U0001f7e6",
    **{count: f"{count}\ufe0f\u20e3" for count in range(1, 9)},
}


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single position on the board.

    Mines are owned by the board, not the cell, so a closed cell
    carries no hint of what is underneath it.

    Attributes:
        state: Current state of the cell.
        adjacent_mines: Mined neighbor count (0-8). Only meaningful
            once the cell is revealed.
    """

    state: CellState = CellState.CLOSED
    adjacent_mines: int = 0

    def reveal(self, adjacent_mines: int) -> bool:
        """
        Open this cell with its mined neighbor count.

        Returns:
            True if the cell was opened, False if it was already
            revealed or detonated.
        """
        if not self.is_unrevealed:
            return False
        if not 0 <= adjacent_mines <= 8:
            raise ValueError(f"Adjacent mine count out of range: {adjacent_mines}")
        self.state = CellState.REVEALED
        self.adjacent_mines = adjacent_mines
        return True

    def detonate(self) -> None:
        """Mark this cell as the mine that ended the game."""
        self.state = CellState.DETONATED
        self.adjacent_mines = 0

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed or
            detonated.
        """
        if self.state == CellState.CLOSED:
            self.state = CellState.FLAGGED
            return True
        if self.state == CellState.FLAGGED:
            self.state = CellState.CLOSED
            return True
        return False

    def clear_flag(self) -> None:
        if self.state == CellState.FLAGGED:
            self.state = CellState.CLOSED

    @property
    def is_closed(self) -> bool:
        """Check if cell is closed and unflagged."""
        return self.state == CellState.CLOSED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def is_unrevealed(self) -> bool:
        """Check if cell is closed or flagged."""
        return self.state in (CellState.CLOSED, CellState.FLAGGED)

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_detonated(self) -> bool:
        return self.state == CellState.DETONATED

    def symbol(self, symbols: SymbolTable = ASCII_SYMBOLS) -> str:
        """Look up the display symbol for this cell."""
        if self.state == CellState.REVEALED:
            return symbols[self.adjacent_mines]
        return symbols[self.state]

    def to_observation(self) -> int:
        """
        Convert cell to a numeric observation value.

        Returns:
            -1: Closed cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Detonated mine
        """
        if self.state == CellState.CLOSED:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.state == CellState.DETONATED:
            return 9
        return self.adjacent_mines


def symbol_table_keys() -> Tuple[object, ...]:
    """All keys a complete symbol table must define."""
    return (CellState.CLOSED, CellState.FLAGGED, CellState.DETONATED) + tuple(range(9))
