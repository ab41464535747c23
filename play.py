#!/usr/bin/env python3
"""
Play TicTacToe in the terminal.

Usage:
    python play.py                       # you (X) vs AI (O), X opens
    python play.py --first o --difficulty hard
    python play.py --mode pvp
"""

import sys
import argparse
import logging
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tttree import (
    DIFFICULTY_DEPTHS,
    Game,
    GameConfig,
    TicTacToeError,
    describe_outcome,
    parse_symbol,
)


def main():
    parser = argparse.ArgumentParser(description="Play TicTacToe against the tree AI")
    parser.add_argument("--first", type=str, default="x", help="Who opens: x (you) or o")
    parser.add_argument("--mode", type=str, default="pvai", choices=["pvp", "pvai"], help="Game mode")
    parser.add_argument("--difficulty", type=str, default="impossible",
                        choices=sorted(DIFFICULTY_DEPTHS), help="AI search depth preset")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for AI tie-breaks")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        config = GameConfig.for_difficulty(
            args.difficulty, first_player=parse_symbol(args.first), seed=args.seed
        )
    except TicTacToeError as e:
        parser.error(str(e))

    print("\n=== TicTacToe ===")
    print("You are X. Enter moves as 'row col' or as numbers 0-8:")
    print(" 0 | 1 | 2 ")
    print("---+---+---")
    print(" 3 | 4 | 5 ")
    print("---+---+---")
    print(" 6 | 7 | 8 ")
    print()

    if args.mode == "pvai":
        print(f"Thinking {config.depth} plies ahead...")
    game = Game(config, ai_mode=args.mode == "pvai")

    try:
        result = game.play()
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted")
        return

    print(describe_outcome(result))


if __name__ == "__main__":
    main()
