"""
Board module for the minefield engine.

Implements the game board with mine placement, flood-fill revealing,
flag toggling and win/loss detection.
"""
import random
from dataclasses import InitVar, dataclass, field
from enum import Enum, auto
from typing import FrozenSet, Iterable, List, NamedTuple, Optional, Tuple, Union

import numpy as np

from .cell import ASCII_SYMBOLS, Cell, SymbolTable, symbol_table_keys


# ============================================================================
# Exceptions
# ============================================================================

class InvalidConfiguration(ValueError):
    """Board parameters that cannot produce a playable board."""


class OutOfBounds(IndexError):
    """A position outside the board was passed to an operation."""


# ============================================================================
# Constants
# ============================================================================

class Position(NamedTuple):
    """A (row, col) grid coordinate."""

    row: int
    col: int


PositionLike = Union[Position, Tuple[int, int]]


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a board.

    Attributes:
        height: Number of rows.
        width: Number of columns.
        num_mines: Total mines to place.
    """

    height: int = 9
    width: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def cell_count(self) -> int:
        return self.width * self.height


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells, the mine set, the count of safe cells
    still closed, and the end-of-game state. All operations are
    synchronous; callers sharing a board across threads must serialize
    access themselves.

    Attributes:
        config: Board configuration (default: 9x9 with 10 mines).
        rng: Random source for mine placement.
        mine_positions: Exact mine positions. Overrides random
            placement; must contain exactly ``config.num_mines``
            distinct in-bounds positions.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: InitVar[Optional[random.Random]] = None
    mine_positions: InitVar[Optional[Iterable[PositionLike]]] = None
    _grid: List[List[Cell]] = field(default_factory=list, init=False, repr=False)
    _mines: FrozenSet[Position] = field(default_factory=frozenset, init=False, repr=False)
    _remaining_safe: int = field(default=0, init=False)
    _game_state: GameState = field(default=GameState.PLAYING, init=False)

    def __post_init__(
        self,
        rng: Optional[random.Random],
        mine_positions: Optional[Iterable[PositionLike]],
    ) -> None:
        """Build the grid and place mines after dataclass creation."""
        self._init_grid()
        if mine_positions is None:
            self._mines = self._sample_mines(rng or random.Random())
        else:
            self._mines = self._check_mines(mine_positions)
        self._remaining_safe = self.config.cell_count - self.config.num_mines

    @classmethod
    def initialize(
        cls,
        height: int,
        width: int,
        mine_count: int,
        seed: Optional[int] = None,
    ) -> "Board":
        """
        Build a new board with randomly placed mines.

        Raises:
            InvalidConfiguration: If the dimensions are not positive or
                ``mine_count`` does not leave at least one safe cell.
        """
        config = BoardConfig(height=height, width=width, num_mines=mine_count)
        return cls(config, rng=random.Random(seed))

    @classmethod
    def with_mines(
        cls, height: int, width: int, mines: Iterable[PositionLike]
    ) -> "Board":
        """Build a board with mines at exactly the given positions."""
        mines = set(mines)
        config = BoardConfig(height=height, width=width, num_mines=len(mines))
        return cls(config, mine_positions=mines)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create a grid of closed cells."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    # ========================================================================
    # Mine Placement (Low-level)
    # ========================================================================

    def _sample_mines(self, rng: random.Random) -> FrozenSet[Position]:
        """Draw distinct mine positions by rejection sampling."""
        # BoardConfig guarantees num_mines < cell_count, so this terminates.
        mines = set()
        while len(mines) < self.config.num_mines:
            mines.add(Position(
                rng.randrange(self.config.height),
                rng.randrange(self.config.width),
            ))
        return frozenset(mines)

    def _check_mines(self, mines: Iterable[PositionLike]) -> FrozenSet[Position]:
        """Validate caller-supplied mine positions."""
        checked = frozenset(self._check_position(pos) for pos in mines)
        if len(checked) != self.config.num_mines:
            raise InvalidConfiguration(
                f"Expected {self.config.num_mines} mines, got {len(checked)}"
            )
        return checked

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, pos: Position) -> List[Position]:
        """
        Get in-bounds positions of the 8-connected neighborhood.

        Args:
            pos: Center position.

        Returns:
            List of neighboring positions, clipped at the grid edges.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = pos.row + delta_row
                new_col = pos.col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append(Position(new_row, new_col))
        return neighbors

    def _count_adjacent_mines(self, pos: Position) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(1 for neighbor in self._get_neighbors(pos) if neighbor in self._mines)

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    def _check_position(self, pos: PositionLike) -> Position:
        """Normalize ``pos`` to a Position, rejecting out-of-bounds input."""
        row, col = pos
        for index in (row, col):
            if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
                raise TypeError(
                    f"Position indices must be integers, got ({row!r}, {col!r})"
                )
        row, col = int(row), int(col)
        if not self._is_valid_position(row, col):
            raise OutOfBounds(
                f"Position ({row}, {col}) outside "
                f"{self.config.height}x{self.config.width} board"
            )
        return Position(row, col)

    def _cell(self, pos: Position) -> Cell:
        return self._grid[pos.row][pos.col]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, pos: PositionLike) -> int:
        """
        Reveal the cell at ``pos``.

        A mine detonates and ends the game, flagged or not. Any other
        cell is opened with an iterative flood fill: cells with no
        mined neighbors open their closed and flagged neighbors too.
        Revealing the last safe cell wins the game and clears all
        remaining flags.

        Args:
            pos: (row, col) position to reveal.

        Returns:
            Number of safe cells opened by this call. Zero when the
            cell was already revealed, the game was over, or a mine
            detonated.

        Raises:
            OutOfBounds: If ``pos`` is not on the board.
        """
        pos = self._check_position(pos)
        if not self.is_playing:
            return 0

        if pos in self._mines:
            self._cell(pos).detonate()
            self._game_state = GameState.LOST
            return 0

        opened = self._flood_fill(pos)
        self._remaining_safe -= opened
        self._check_win_condition()
        return opened

    def _flood_fill(self, start: Position) -> int:
        """Open ``start`` and its zero region, returning cells opened."""
        opened = 0
        stack = [start]
        while stack:
            pos = stack.pop()
            cell = self._cell(pos)
            if not cell.is_unrevealed:
                continue
            count = self._count_adjacent_mines(pos)
            cell.reveal(count)
            opened += 1
            if count == 0:
                stack.extend(
                    neighbor for neighbor in self._get_neighbors(pos)
                    if self._cell(neighbor).is_unrevealed
                )
        return opened

    def _check_win_condition(self) -> None:
        """Win once every safe cell is open; flags are cleared on win."""
        if self._remaining_safe > 0:
            return
        for row in self._grid:
            for cell in row:
                cell.clear_flag()
        self._game_state = GameState.WON

    def toggle_flag(self, pos: PositionLike) -> bool:
        """
        Toggle flag on a cell.

        Args:
            pos: (row, col) position.

        Returns:
            True if flag was toggled, False if the cell is open or the
            game is over.

        Raises:
            OutOfBounds: If ``pos`` is not on the board.
        """
        pos = self._check_position(pos)
        if not self.is_playing:
            return False
        return self._cell(pos).toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def mine_count(self) -> int:
        return self.config.num_mines

    @property
    def mines(self) -> FrozenSet[Position]:
        """Positions of every mine."""
        return self._mines

    @property
    def remaining_safe(self) -> int:
        """Safe cells not yet revealed."""
        return self._remaining_safe

    @property
    def flag_count(self) -> int:
        return sum(1 for row in self._grid for cell in row if cell.is_flagged)

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    def has_ended(self) -> bool:
        """Check if the game has been won or lost."""
        return self._game_state != GameState.PLAYING

    def get_cell(self, pos: PositionLike) -> Cell:
        """
        Get the cell at ``pos``.

        Raises:
            OutOfBounds: If ``pos`` is not on the board.
        """
        return self._cell(self._check_position(pos))

    def get_closed_positions(self) -> List[Position]:
        """
        Get cells that have not been opened yet.

        Returns:
            Row-major list of closed or flagged positions.
        """
        return [
            Position(row, col)
            for row in range(self.config.height)
            for col in range(self.config.width)
            if self._grid[row][col].is_unrevealed
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get visible board state as a numpy array.

        For callers that work on numbers rather than symbols, such as
        solvers or front ends drawing their own tiles. Shows only what
        the player can see; mines stay hidden until detonated.

        Returns:
            2D numpy array where:
                -1 = closed
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = detonated mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row in range(self.config.height):
            for col in range(self.config.width):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def render(self, symbols: SymbolTable = ASCII_SYMBOLS) -> str:
        """
        Render the board as text, one symbol per cell.

        Args:
            symbols: Table mapping each cell state and revealed count
                to its symbol.

        Returns:
            Row-major grid with rows joined by newlines.
        """
        missing = [key for key in symbol_table_keys() if key not in symbols]
        if missing:
            raise ValueError(f"Symbol table is missing entries for {missing}")
        return "\n".join(
            "".join(cell.symbol(symbols) for cell in row)
            for row in self._grid
        )

    def __str__(self) -> str:
        return self.render()
