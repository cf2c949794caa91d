# __main__.py

import argparse
import random

from techterm import Interface
from techterm.session.state import COLORS, DEFAULT_COLOR

def main():
    parser = argparse.ArgumentParser(description='TechOS Terminal')
    parser.add_argument('--color',
        choices=sorted(COLORS),
        default=DEFAULT_COLOR,
        help='Initial text color')
    parser.add_argument('--seed',
        type=int,
        help='Seed the random source (jokes, matrix backdrop)')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')

    args = parser.parse_args()

    terminal = Interface(
        logging_enabled=args.enable_logging,
        log_file=args.log_file,
        color=args.color,
        rng=random.Random(args.seed) if args.seed is not None else None
    )
    terminal.start()

if __name__ == "__main__":
    main()
