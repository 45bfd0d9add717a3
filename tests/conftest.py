"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src (package) and the repo root (main.py) to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from minefield import Board, BoardConfig, Cell, GameSession


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(rng=random.Random(1234))


@pytest.fixture
def center_mine_board() -> Board:
    """Create a 3x3 board with its only mine in the center."""
    return Board.with_mines(3, 3, [(1, 1)])


@pytest.fixture
def corner_mine_board() -> Board:
    """
    Create a 4x4 board with one mine in the bottom-right corner.

    Revealing (0, 0) opens every cell except the mine.
    """
    return Board.with_mines(4, 4, [(3, 3)])


@pytest.fixture
def walled_board() -> Board:
    """
    Create a 5x5 board with a column of mines splitting it in two.

        . . * . .
        . . * . .
        . . * . .
        . . * . .
        . . * . .
    """
    return Board.with_mines(5, 5, [(row, 2) for row in range(5)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def closed_cell() -> Cell:
    """Create a closed cell."""
    return Cell()


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell()
    cell.reveal(3)
    return cell


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def session() -> GameSession:
    """Create a session with a seeded 9x9 game in progress."""
    session = GameSession()
    session.start(9, 9, 10, seed=42)
    return session
