"""Game models."""

from .card import Card, Rank, Suit, create_standard_deck
from .deck import DealResult, DeckError, EmptyDeckError, ShuffledDeck, knuth_shuffle
from .game_state import GameSnapshot, GameStatus, Outcome
from .player import PlayerState

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "create_standard_deck",
    "DealResult",
    "DeckError",
    "EmptyDeckError",
    "ShuffledDeck",
    "knuth_shuffle",
    "GameSnapshot",
    "GameStatus",
    "Outcome",
    "PlayerState",
]
