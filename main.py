"""
Main entry point for TicTacToe.

Play a game on the terminal against a bot that never loses:
- Engine (board state, win checking, minimax search)
- Console (prompts, board rendering, turn loop)
"""

import argparse
import logging
import sys

from engine.board_state import Side
from console.game_loop import GameSession

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="TicTacToe against an unbeatable bot")
    order = parser.add_mutually_exclusive_group()
    order.add_argument(
        "--bot-first",
        action="store_true",
        help="Let the bot move first (as X) without asking"
    )
    order.add_argument(
        "--human-first",
        action="store_true",
        help="Move first (as X) without asking"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log search statistics"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s: %(message)s"
    )

    first = None
    if args.bot_first:
        first = Side.AUTOMATED
    elif args.human_first:
        first = Side.HUMAN

    session = GameSession()

    try:
        session.play(first)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        return 130
    except (EOFError, OSError) as e:
        # Terminal stream is gone, nothing to recover
        logger.error("Terminal I/O failed: %r", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
