#!/usr/bin/env python3
"""
Evaluate the search-tree AI against scripted opponents.

Usage:
    python eval.py --difficulty normal --games 50
    python eval.py --depth 9 --games 10 --seed 1
"""

import sys
import argparse
import logging
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tttree import (
    GameConfig,
    DIFFICULTY_DEPTHS,
    eval_vs_random,
    eval_vs_minimax,
)


def main():
    parser = argparse.ArgumentParser(description="Evaluate the TicTacToe tree AI")
    parser.add_argument("--difficulty", type=str, default="normal",
                        choices=sorted(DIFFICULTY_DEPTHS), help="Search depth preset")
    parser.add_argument("--depth", type=int, default=None, help="Explicit search depth (overrides difficulty)")
    parser.add_argument("--games", type=int, default=20, help="Number of eval games per opponent")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    overrides = {"seed": args.seed}
    if args.depth is not None:
        overrides["depth"] = args.depth
    config = GameConfig.for_difficulty(args.difficulty, **overrides)

    print(f"Search depth: {config.depth}")

    print("\n=== Evaluation ===")

    # vs Random
    print(f"\nvs Random ({args.games} games)...")
    results = eval_vs_random(config, games=args.games, seed=args.seed)
    print(f"  Wins:   {results['ai_w']:.2%}")
    print(f"  Draws:  {results['ai_d']:.2%}")
    print(f"  Losses: {results['ai_l']:.2%}")

    # vs Minimax
    print(f"\nvs Minimax ({args.games} games)...")
    results = eval_vs_minimax(config, games=args.games, seed=args.seed)
    print(f"  Wins:   {results['ai_w']:.2%}")
    print(f"  Draws:  {results['ai_d']:.2%}")
    print(f"  Losses: {results['ai_l']:.2%}")


if __name__ == "__main__":
    main()
