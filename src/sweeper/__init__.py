"""
Minesweeper engine.

Provides the board model, flood-fill reveal, hint deduction, and a game
session that presentation layers drive through commands, queries, and
listener events.
"""
from .cell import Cell, CellState, CellView
from .difficulty import BoardConfig, DIFFICULTIES, DEFAULT_DIFFICULTY, get_difficulty
from .board import Board
from .reveal import RevealResult, reveal_cell, reveal_all_mines
from .hints import HintAdvisor, MAX_HINTS
from .timer import GameTimer
from .session import GameSession, GameState, GameStats, GameSummary, SessionListener
from .renderer import TextRenderer, format_elapsed

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "BoardConfig",
    "DIFFICULTIES",
    "DEFAULT_DIFFICULTY",
    "get_difficulty",
    "Board",
    "RevealResult",
    "reveal_cell",
    "reveal_all_mines",
    "HintAdvisor",
    "MAX_HINTS",
    "GameTimer",
    "GameSession",
    "GameState",
    "GameStats",
    "GameSummary",
    "SessionListener",
    "TextRenderer",
    "format_elapsed",
]
