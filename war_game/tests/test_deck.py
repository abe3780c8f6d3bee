"""Tests for the shuffled deck."""

import copy
import random
from collections import Counter

import pytest

from war_game.models.deck import (
    DealResult,
    DeckError,
    EmptyDeckError,
    ShuffledDeck,
    knuth_shuffle,
)


class TestKnuthShuffle:
    """Tests for knuth_shuffle function."""

    @pytest.mark.parametrize("full_range", [True, False])
    def test_shuffle_is_permutation(self, full_range):
        """Test shuffling keeps the same items."""
        data = list(range(1, 11)) + [5, 5]
        shuffled = list(data)

        knuth_shuffle(shuffled, random.Random(7), full_range=full_range)

        assert Counter(shuffled) == Counter(data)

    def test_shuffle_empty_and_single(self):
        """Test shuffling tiny lists."""
        empty: list[int] = []
        knuth_shuffle(empty, random.Random(1))
        assert empty == []

        single = [42]
        knuth_shuffle(single, random.Random(1))
        assert single == [42]

    def test_shuffle_deterministic_with_seed(self):
        """Test the same seed gives the same order."""
        a = list(range(20))
        b = list(range(20))

        knuth_shuffle(a, random.Random(123))
        knuth_shuffle(b, random.Random(123))

        assert a == b

    def test_shuffle_changes_order(self):
        """Test that shuffling a long list moves something."""
        data = list(range(52))
        knuth_shuffle(data, random.Random(99))
        assert data != list(range(52))

    def test_canonical_shuffle_is_uniform(self):
        """Test every item lands in every position about equally often."""
        rng = random.Random(2024)
        n = 5
        trials = 20000
        counts = [[0] * n for _ in range(n)]

        for _ in range(trials):
            data = list(range(n))
            knuth_shuffle(data, rng, full_range=False)
            for position, item in enumerate(data):
                counts[item][position] += 1

        expected = trials / n
        for row in counts:
            for count in row:
                assert abs(count - expected) < expected * 0.1

    def test_full_range_shuffle_reaches_every_position(self):
        """Test the full-range variant still moves every item everywhere."""
        rng = random.Random(2024)
        n = 5
        seen = [set() for _ in range(n)]

        for _ in range(2000):
            data = list(range(n))
            knuth_shuffle(data, rng, full_range=True)
            for position, item in enumerate(data):
                seen[item].add(position)

        assert all(positions == set(range(n)) for positions in seen)


class TestShuffledDeck:
    """Tests for ShuffledDeck class."""

    def test_empty_deck(self):
        """Test empty deck."""
        deck: ShuffledDeck[int] = ShuffledDeck()
        assert deck.is_empty()
        assert deck.size() == 0
        assert len(deck) == 0

    def test_initial_contents(self):
        """Test deck keeps the given order."""
        deck = ShuffledDeck([1, 2, 3])
        assert deck.size() == 3
        assert deck.contents() == [1, 2, 3]

    def test_deal_from_top(self):
        """Test dealing takes the last item first."""
        deck = ShuffledDeck([1, 2, 3])

        assert deck.deal_top() == 3
        assert deck.deal_top() == 2
        assert deck.size() == 1

    def test_deal_empty_raises(self):
        """Test dealing from an empty deck raises."""
        deck = ShuffledDeck([1])
        deck.deal_top()

        with pytest.raises(EmptyDeckError):
            deck.deal_top()

    def test_try_deal_top(self):
        """Test the result-returning deal."""
        deck = ShuffledDeck(["a"])

        result = deck.try_deal_top()
        assert result.is_ok
        assert result.card == "a"
        assert result.unwrap() == "a"

        empty = deck.try_deal_top()
        assert not empty.is_ok
        assert empty.error == DeckError.EMPTY
        with pytest.raises(EmptyDeckError):
            empty.unwrap()

    def test_deal_result_defaults(self):
        """Test a default result is successful."""
        assert DealResult(card=5).is_ok

    def test_contents_is_copy(self):
        """Test modifying contents() does not touch the deck."""
        deck = ShuffledDeck([1, 2, 3])
        contents = deck.contents()
        contents.append(4)

        assert deck.size() == 3

    def test_assign(self):
        """Test replacing contents."""
        deck = ShuffledDeck([1, 2, 3])
        source = [7, 8]
        deck.assign(source)
        source.append(9)

        assert deck.contents() == [7, 8]

    def test_shuffle_keeps_contents(self):
        """Test shuffling keeps the same items."""
        deck = ShuffledDeck(range(52), seed=3)
        deck.shuffle()

        assert sorted(deck.contents()) == list(range(52))

    def test_same_seed_same_shuffle(self):
        """Test seeded decks shuffle identically."""
        deck1 = ShuffledDeck(range(30), seed=11)
        deck2 = ShuffledDeck(range(30), seed=11)

        deck1.shuffle()
        deck2.shuffle()

        assert deck1.contents() == deck2.contents()

    def test_injected_generator(self):
        """Test an injected generator is used for shuffling."""
        deck1 = ShuffledDeck(range(30), rng=random.Random(5))
        deck2 = ShuffledDeck(range(30), seed=5)

        deck1.shuffle()
        deck2.shuffle()

        assert deck1.contents() == deck2.contents()

    def test_clone_has_independent_generator(self):
        """Test a clone keeps the contents but not the generator."""
        deck = ShuffledDeck(range(52), seed=8)
        clone = deck.clone(seed=9)

        assert clone.contents() == deck.contents()
        assert clone._rng is not deck._rng

        deck.shuffle()
        clone.shuffle()
        assert clone.contents() != deck.contents()

    @pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy])
    def test_copy_reseeds(self, copier):
        """Test copy and deepcopy never share generator state."""
        deck = ShuffledDeck(range(10), seed=1)
        duplicate = copier(deck)

        assert duplicate.contents() == deck.contents()
        assert duplicate._rng is not deck._rng

        duplicate.deal_top()
        assert deck.size() == 10
