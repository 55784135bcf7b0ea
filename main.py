#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty KEY] [--seed N]
    python main.py difficulties
"""
from src.sweeper.cli import main


if __name__ == "__main__":
    main()
