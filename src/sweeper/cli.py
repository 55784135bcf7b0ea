"""
Minesweeper - terminal front-end.

Usage:
    python main.py [-v] play [--difficulty KEY] [--seed N]
    python main.py difficulties
"""
import argparse
import logging
from typing import Callable, List, Optional, Tuple

import numpy as np

from .difficulty import DEFAULT_DIFFICULTY, DIFFICULTIES
from .renderer import TextRenderer
from .session import GameSession


HELP_TEXT = """Commands:
  r ROW COL   reveal a cell
  f ROW COL   toggle a flag
  h           ask for a hint
  n [KEY]     new game (optionally at another difficulty)
  reset       restart at the current difficulty
  q           quit"""


def parse_position(args: List[str]) -> Tuple[int, int]:
    """Parse 'ROW COL' arguments into integers."""
    if len(args) != 2:
        raise ValueError("expected ROW COL")
    return int(args[0]), int(args[1])


def handle_command(session: GameSession, line: str) -> Optional[str]:
    """
    Apply one command line to the session.

    Returns:
        A message for the player, or None if there is nothing to say.

    Raises:
        ValueError: If the command or its arguments are malformed.
    """
    words = line.split()
    if not words:
        return None
    command, args = words[0].lower(), words[1:]

    if command == "r":
        if not session.reveal(*parse_position(args)):
            return "Nothing to reveal there."
    elif command == "f":
        if not session.toggle_flag(*parse_position(args)):
            return "Cannot flag that cell."
    elif command == "h":
        move = session.request_hint()
        if move is None:
            return "No hint available."
        return f"Try ({move[0]}, {move[1]})."
    elif command == "n":
        session.new_game(args[0] if args else None)
    elif command == "reset":
        session.reset()
    elif command in ("?", "help"):
        return HELP_TEXT
    else:
        raise ValueError(f"unknown command {command!r}")
    return None


def play(args: argparse.Namespace, read_line: Callable[[str], str] = input) -> None:
    """Run an interactive game in the terminal."""
    rng = np.random.default_rng(args.seed)
    session = GameSession(args.difficulty, rng=rng, tick_interval=None)
    renderer = TextRenderer(session)

    print(HELP_TEXT)
    try:
        while True:
            print()
            print(renderer.refresh())
            try:
                line = read_line("> ").strip()
            except EOFError:
                break
            if line.lower() in ("q", "quit", "exit"):
                break
            try:
                message = handle_command(session, line)
            except ValueError as exc:
                message = f"Error: {exc}"
            if message:
                print(message)
    finally:
        renderer.close()
        session.close()


def list_difficulties(args: argparse.Namespace) -> None:
    """Print the preset table."""
    print(f"{'Name':<14} {'Rows':>5} {'Cols':>5} {'Mines':>6}")
    print("-" * 33)
    for name, config in DIFFICULTIES.items():
        marker = " (default)" if name == DEFAULT_DIFFICULTY else ""
        print(f"{name:<14} {config.rows:>5} {config.cols:>5} {config.num_mines:>6}{marker}")


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper - play in the terminal")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--difficulty",
        choices=list(DIFFICULTIES),
        default=DEFAULT_DIFFICULTY,
        help="Board preset",
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )

    subparsers.add_parser("difficulties", help="List difficulty presets")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "difficulties":
        list_difficulties(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
