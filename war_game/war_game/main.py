"""Main entry point for the War simulator."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from war_game.config import GameLogConfig, load_config
from war_game.game.engine import WarEngine
from war_game.logging import GameLogger, parse_cards
from war_game.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str, seed: int | None) -> str:
    """Generate log filename with timestamp and seed.

    Format: {ISO timestamp}_seed{seed}.jsonl (or _random for unseeded games)

    Args:
        log_dir: Directory for log files.
        seed: Game seed.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    suffix = f"seed{seed}" if seed is not None else "random"
    filename = f"{timestamp}_{suffix}.jsonl"
    return str(Path(log_dir) / filename)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Simulate a game of War between two players"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Random seed for a reproducible game (overrides config)",
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        help="Stop after this many turns (overrides config)",
    )
    parser.add_argument(
        "--cards",
        help="Custom deck as comma-separated card codes, e.g. AS,AH,10C,2D",
    )
    parser.add_argument(
        "--canonical-shuffle",
        action="store_true",
        help="Use the unbiased Fisher-Yates shuffle",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-cards",
        action="store_true",
        help="Show the cards played each turn",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.seed is not None:
        config.game.seed = args.seed
    if args.max_turns is not None:
        config.game.max_turns = args.max_turns
    if args.cards:
        config.game.cards = args.cards.split(",")
    if args.canonical_shuffle:
        config.game.canonical_shuffle = True
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_cards:
        config.logging.show_cards = True

    # Determine game log directory (CLI argument overrides config file)
    game_log_enabled = args.game_log is not None or config.game_log.enabled

    # Setup logging
    setup_logging(config.logging.level)

    try:
        cards = parse_cards(config.game.cards) if config.game.cards else None
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    display = GameDisplay(
        show_cards=config.logging.show_cards,
        show_score=config.logging.show_score,
    )

    if game_log_enabled:
        if args.game_log:
            log_path = generate_log_filename(str(args.game_log), config.game.seed)
        else:
            log_path = config.game_log.output_path
        game_log_config = GameLogConfig(enabled=True, output_path=log_path)
        print(f"Game log: {log_path}")
    else:
        game_log_config = GameLogConfig(enabled=False)

    try:
        with GameLogger(game_log_config) as game_logger:
            engine = WarEngine(cards, config=config, game_logger=game_logger)
            engine.set_callbacks(on_turn=display.print_turn)

            if display.show_score:
                display.print_score(engine.snapshot())
                print()

            engine.autoplay()
            display.print_game_end(engine.snapshot())

        return 0

    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
