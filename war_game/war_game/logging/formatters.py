"""Formatters for game log output and card codes."""

from typing import Iterable

from war_game.models.card import Card, Rank, Suit

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.CLUBS: "C",
    Suit.DIAMONDS: "D",
    Suit.HEARTS: "H",
    Suit.SPADES: "S",
}

# Rank codes for log output
RANK_CODES: dict[Rank, str] = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

_SUITS_BY_CODE = {code: suit for suit, code in SUIT_CODES.items()}
_RANKS_BY_CODE = {code: rank for rank, code in RANK_CODES.items()}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "AS" for Ace of Spades, "10H" for Ten of Hearts).
    """
    return f"{RANK_CODES[card.rank]}{SUIT_CODES[card.suit]}"


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to comma-separated string, keeping their order.

    Returns:
        Comma-separated card strings (e.g., "AS,10H,2C").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def parse_card(code: str) -> Card:
    """Parse a card code produced by format_card().

    Rank and suit letters are case-insensitive ("as" == "AS"), and "T" is
    accepted for ten.

    Raises:
        ValueError: If the code is not a valid card.
    """
    text = code.strip().upper()
    if len(text) < 2:
        raise ValueError(f"Invalid card code: {code!r}")

    rank_code, suit_code = text[:-1], text[-1]
    if rank_code == "T":
        rank_code = "10"

    rank = _RANKS_BY_CODE.get(rank_code)
    suit = _SUITS_BY_CODE.get(suit_code)
    if rank is None or suit is None:
        raise ValueError(f"Invalid card code: {code!r}")
    return Card(suit=suit, rank=rank)


def parse_cards(codes: str | Iterable[str]) -> list[Card]:
    """Parse a comma-separated string (or list) of card codes.

    Empty entries are skipped.
    """
    if isinstance(codes, str):
        codes = codes.split(",")
    return [parse_card(c) for c in codes if c.strip()]
