#!/usr/bin/env python3
"""
Minefield - terminal entry point.

Usage:
    python main.py play [--height H] [--width W] [--mines M] [--seed S] [--emoji]

Commands read from stdin while playing:
    r ROW COL   reveal a cell
    f ROW COL   toggle a flag
    q           quit
"""
import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield import (  # noqa: E402
    ASCII_SYMBOLS,
    EMOJI_SYMBOLS,
    GameSession,
    InvalidConfiguration,
    OutOfBounds,
)

COMMANDS = {"r": "reveal", "f": "flag", "q": "quit"}


def parse_command(line: str) -> Tuple[str, Optional[Tuple[int, int]]]:
    """
    Parse one line of player input.

    Returns:
        Tuple of (action, position); position is None for quit.

    Raises:
        ValueError: If the line is not a known command.
    """
    parts = line.split()
    if not parts or parts[0].lower() not in COMMANDS:
        raise ValueError(f"Unknown command: {line.strip()!r}")
    action = COMMANDS[parts[0].lower()]
    if action == "quit":
        return action, None
    if len(parts) != 3:
        raise ValueError(f"Expected '{parts[0]} ROW COL'")
    return action, (int(parts[1]), int(parts[2]))


def play_session(session: GameSession, lines: Iterable[str]) -> None:
    """Apply commands to a started session until it ends or input runs out."""
    print(session.fetch())

    for line in lines:
        if not line.strip():
            continue
        try:
            action, pos = parse_command(line)
        except ValueError as exc:
            print(f"Error: {exc}")
            continue

        if action == "quit":
            print("Quit.")
            return

        try:
            if action == "reveal":
                opened = session.open(*pos)
                print(f"Opened {opened} cell(s)")
            else:
                session.flag(*pos)
        except OutOfBounds as exc:
            print(f"Error: {exc}")
            continue

        print(session.fetch())

        if session.game_ended():
            break

    board = session.board
    if board.is_won:
        print("\n*** WIN! ***")
    elif board.is_lost:
        print("\n*** LOST (hit mine) ***")


def play(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Start a game with the requested parameters and play it from stdin."""
    session = GameSession(EMOJI_SYMBOLS if args.emoji else ASCII_SYMBOLS)
    try:
        session.start(args.height, args.width, args.mines, seed=args.seed)
    except InvalidConfiguration as exc:
        parser.error(str(exc))

    print(f"Board: {args.height}x{args.width} with {args.mines} mines")
    print("Commands: r ROW COL (reveal), f ROW COL (flag), q (quit)\n")
    play_session(session, sys.stdin)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Minefield - play a minesweeper board in the terminal"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game from stdin")
    play_parser.add_argument(
        "--height", type=int, default=9, help="Number of rows"
    )
    play_parser.add_argument(
        "--width", type=int, default=9, help="Number of columns"
    )
    play_parser.add_argument(
        "--mines", type=int, default=10, help="Number of mines"
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    play_parser.add_argument(
        "--emoji", action="store_true", help="Render cells as emoji"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "play":
        play(args, parser)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
