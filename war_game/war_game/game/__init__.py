"""Game logic."""

from .engine import TurnResult, WarEngine

__all__ = [
    "TurnResult",
    "WarEngine",
]
