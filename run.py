#!/usr/bin/env python3
"""
run.py - Main entry point for MultiCon

Usage:
    python run.py                 # two players, 'x' and 'o'
    python run.py a b c d         # four players, three in a row wins
    python run.py x o --debug     # with debug logging on stderr
"""

import argparse
import sys
from typing import List, Optional

from multicon.debug import debug, DebugLevel
from multicon.game.player import PlayerConfigError, parse_players
from multicon.game.rules import MultiConGame
from multicon.interfaces.cli import MultiConCLI
from multicon.utils import MAX_PLAYERS


def configure_debug(args):
    """Configure debug level based on args.debug or args.debug_level."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)

    if args.log_file:
        debug.configure(log_file=args.log_file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='MultiCon - Connect Four for 2 to %d players' % MAX_PLAYERS,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Enter a column number to drop a tile, or 'quit' to stop.",
    )
    parser.add_argument('tokens', nargs='*',
                        help='Single-character player tokens (default: x o)')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--debug_level', default='warning',
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging level (default: warning)')
    parser.add_argument('--log_file', default=None,
                        help='Also write log output to this file')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_debug(args)

    try:
        players = parse_players(args.tokens)
    except PlayerConfigError as e:
        debug.error(str(e), "players")
        print(e.message)
        return 1

    game = MultiConGame(players)
    MultiConCLI(game).start()
    return 0


if __name__ == "__main__":
    sys.exit(main())
