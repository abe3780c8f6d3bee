"""Game logging module."""

from war_game.config import GameLogConfig

from .formatters import format_card, format_cards, parse_card, parse_cards
from .game_logger import GameLogger

__all__ = [
    "GameLogConfig",
    "GameLogger",
    "format_card",
    "format_cards",
    "parse_card",
    "parse_cards",
]
