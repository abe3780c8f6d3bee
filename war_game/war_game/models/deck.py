"""Shuffled deck of arbitrary items."""

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class EmptyDeckError(Exception):
    """Raised when a card is dealt from an empty deck."""

    def __init__(self, message: str = "Deck is empty"):
        super().__init__(message)


class DeckError(IntEnum):
    """Error codes from dealing."""

    NONE = 0
    EMPTY = 1


@dataclass
class DealResult(Generic[T]):
    """Result of dealing from the top of a deck."""

    card: T | None = None
    error: DeckError = DeckError.NONE

    @property
    def is_ok(self) -> bool:
        """Check if a card was dealt."""
        return self.error == DeckError.NONE

    def unwrap(self) -> T:
        """Get the dealt card.

        Raises:
            EmptyDeckError: If the deck was empty.
        """
        if self.error == DeckError.EMPTY:
            raise EmptyDeckError()
        return self.card  # type: ignore[return-value]


def knuth_shuffle(data: list[T], rng: random.Random, full_range: bool = True) -> None:
    """Shuffle a list in place with a Fisher-Yates (Knuth) pass.

    Every position i is swapped with a random position. With full_range the
    partner is drawn from [0, n-1] on every step, which is not perfectly
    uniform but matches the behavior the game has always used. Without it
    the partner comes from [i, n-1], the canonical unbiased algorithm.

    Args:
        data: List to shuffle.
        rng: Seeded random generator.
        full_range: Draw swap partners from the whole list.
    """
    n = len(data)
    for i in range(n):
        low = 0 if full_range else i
        j = rng.randint(low, n - 1)
        data[i], data[j] = data[j], data[i]


class ShuffledDeck(Generic[T]):
    """Ordered deck with its own random generator.

    The end of the internal list is the top of the deck, so dealing is a
    pop from the end.

    The generator belongs to this deck only. Copies never share it: clone(),
    copy.copy() and copy.deepcopy() all reseed a new generator.
    """

    def __init__(
        self,
        initial: Iterable[T] | None = None,
        *,
        seed: int | None = None,
        rng: random.Random | None = None,
        full_range: bool = True,
    ):
        """Initialize deck.

        Args:
            initial: Items in bottom-to-top order.
            seed: Seed for a new generator. None seeds from OS entropy.
            rng: Already seeded generator to take ownership of (overrides seed).
            full_range: Shuffle variant, see knuth_shuffle().
        """
        self._data: list[T] = list(initial) if initial is not None else []
        self._rng = rng if rng is not None else random.Random(seed)
        self.full_range = full_range

    def is_empty(self) -> bool:
        """Check if deck is empty."""
        return len(self._data) == 0

    def size(self) -> int:
        """Get number of items in the deck."""
        return len(self._data)

    def shuffle(self) -> None:
        """Shuffle the deck in place."""
        knuth_shuffle(self._data, self._rng, self.full_range)

    def try_deal_top(self) -> DealResult[T]:
        """Remove the top item, reporting an empty deck as an error code."""
        if not self._data:
            return DealResult(error=DeckError.EMPTY)
        return DealResult(card=self._data.pop())

    def deal_top(self) -> T:
        """Remove and return the top item.

        Raises:
            EmptyDeckError: If the deck is empty.
        """
        return self.try_deal_top().unwrap()

    def contents(self) -> list[T]:
        """Get a copy of the contents (bottom first, top last)."""
        return list(self._data)

    def assign(self, data: Iterable[T]) -> None:
        """Replace the contents. The generator is left untouched."""
        self._data = list(data)

    def clone(self, seed: int | None = None) -> "ShuffledDeck[T]":
        """Create a deck with the same contents and a fresh generator."""
        return ShuffledDeck(self._data, seed=seed, full_range=self.full_range)

    def __copy__(self) -> "ShuffledDeck[T]":
        return self.clone()

    def __deepcopy__(self, memo: dict) -> "ShuffledDeck[T]":
        return self.clone()

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._data) + "]"

    def __repr__(self) -> str:
        return f"ShuffledDeck({self._data!r})"
