"""Card model and standard deck supply."""

from enum import IntEnum

from pydantic import BaseModel


class Suit(IntEnum):
    """Card suit (irrelevant to War comparisons)."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


class Rank(IntEnum):
    """Card rank.

    Value is the face value with Ace low (Ace == 1). War plays Ace high,
    which is handled by Card.outranks() rather than by this ordering.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


# Highest rank in War
HIGHEST_RANK = Rank.ACE

# Map rank to display string
RANK_NAMES = {
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

SUIT_NAMES = {
    Suit.CLUBS: "Clubs",
    Suit.DIAMONDS: "Diamonds",
    Suit.HEARTS: "Hearts",
    Suit.SPADES: "Spades",
}


class Card(BaseModel, frozen=True):
    """Single playing card."""

    suit: Suit
    rank: Rank

    @property
    def is_highest_rank(self) -> bool:
        """Check if this card has the highest rank (Ace)."""
        return self.rank == HIGHEST_RANK

    def same_rank(self, other: "Card") -> bool:
        """Check if both cards have the same rank (suit is ignored)."""
        return self.rank == other.rank

    def outranks(self, other: "Card") -> bool:
        """Check if this card beats the other card.

        Ace beats every other rank. Otherwise the higher face value wins.
        Cards of the same rank never outrank each other.
        """
        if self.same_rank(other):
            return False
        if self.is_highest_rank:
            return True
        if other.is_highest_rank:
            return False
        return self.rank > other.rank

    def __str__(self) -> str:
        return f"{RANK_NAMES[self.rank]} {SUIT_NAMES[self.suit]}"

    def __repr__(self) -> str:
        return str(self)


# Rank order within each suit when building the standard deck
STANDARD_RANK_ORDER = [
    Rank.KING,
    Rank.QUEEN,
    Rank.JACK,
    Rank.TEN,
    Rank.NINE,
    Rank.EIGHT,
    Rank.SEVEN,
    Rank.SIX,
    Rank.FIVE,
    Rank.FOUR,
    Rank.THREE,
    Rank.TWO,
    Rank.ACE,
]


def create_standard_deck() -> list[Card]:
    """Create the standard 52-card population in canonical order.

    Suits go Clubs, Diamonds, Hearts, Spades; within each suit the ranks go
    from King down to Ace.
    """
    return [
        Card(suit=suit, rank=rank)
        for suit in Suit
        for rank in STANDARD_RANK_ORDER
    ]
