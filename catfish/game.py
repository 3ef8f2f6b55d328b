"""
game.py
-------
Command-line entry point.

Usage:
    catfish-dash                         # play with defaults
    catfish-dash --config tuning.yaml    # override tuning values
    catfish-dash --save my_save.json --seed 42
    catfish-dash --log-level verbose     # per-tick traces
"""

import argparse
import sys

from catfish.core.debug.debug_logger import DebugLogger, LoggerConfig
from catfish.core.runtime.game_loop import GameLoop


def main(argv=None):
    parser = argparse.ArgumentParser(description="Catfish Dash - eat fish, dodge dogs")
    parser.add_argument("--config", default=None,
                        help="YAML or JSON file overriding tuning values")
    parser.add_argument("--save", default=None,
                        help="Save file path (default: catfish_meta_v1.json)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible spawns")
    parser.add_argument("--log-level", default=None, type=str.upper,
                        choices=list(DebugLogger.LEVEL_VALUES),
                        help="Console verbosity (NONE, ERROR, WARN, INFO, VERBOSE)")

    args = parser.parse_args(argv)
    if args.log_level:
        LoggerConfig.configure(level=args.log_level)

    GameLoop(config_path=args.config, save_path=args.save, seed=args.seed).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
