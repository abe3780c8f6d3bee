"""Game engine for War."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Iterable

from war_game.config import Config
from war_game.models.card import Card, create_standard_deck
from war_game.models.deck import ShuffledDeck
from war_game.models.game_state import GameSnapshot, GameStatus, Outcome
from war_game.models.player import PlayerState

if TYPE_CHECKING:
    from war_game.logging import GameLogger

logger = logging.getLogger(__name__)

# Bits drawn from the engine generator to seed each deck
DECK_SEED_BITS = 64


@dataclass
class TurnResult:
    """Result of one turn."""

    turn_number: int
    card1: Card  # Shown by player 1
    card2: Card  # Shown by player 2
    outcome: Outcome
    war_rounds: int = 0
    war_cards1: list[Card] = field(default_factory=list)  # Staged by player 1
    war_cards2: list[Card] = field(default_factory=list)  # Staged by player 2

    @property
    def is_war(self) -> bool:
        """Check if the shown cards tied and a war was fought."""
        return self.war_rounds > 0

    @property
    def cards_in_play(self) -> int:
        """Get number of cards the turn put on the table."""
        return 2 + len(self.war_cards1) + len(self.war_cards2)


class WarEngine:
    """Two-player War game engine.

    Each player has a deck to play from and a win pile that becomes their
    reshuffled deck once the deck runs out. The game ends when one player
    has neither.
    """

    def __init__(
        self,
        cards: Iterable[Card] | None = None,
        *,
        config: Config | None = None,
        seed: int | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Initialize and deal a new game.

        Args:
            cards: Custom cards to deal. None uses the standard 52-card deck.
                An odd number of cards drops the last one.
            config: Configuration (uses defaults if not provided)
            seed: Seed for a reproducible game (overrides config.game.seed)
            game_logger: GameLogger instance for detailed logging
        """
        self.config = config or Config()
        self.seed = seed if seed is not None else self.config.game.seed
        self.full_range_shuffle = not self.config.game.canonical_shuffle
        self.game_logger = game_logger

        # Only used to seed decks, never to shuffle
        self._rng = random.Random(self.seed)

        self.player1 = PlayerState(player_id=1, deck=self._new_deck())
        self.player2 = PlayerState(player_id=2, deck=self._new_deck())
        self.turn_number = 0

        self._on_turn: Callable[[TurnResult, GameSnapshot], None] | None = None
        self._on_game_end: Callable[[GameSnapshot], None] | None = None

        self._deal(list(cards) if cards is not None else create_standard_deck())

    def set_callbacks(
        self,
        on_turn: Callable[[TurnResult, GameSnapshot], None] | None = None,
        on_game_end: Callable[[GameSnapshot], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_turn: Called after each played turn (result, state after turn)
            on_game_end: Called once when the game ends (final state)
        """
        self._on_turn = on_turn
        self._on_game_end = on_game_end

    @property
    def players(self) -> tuple[PlayerState, PlayerState]:
        """Get both players."""
        return self.player1, self.player2

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return GameStatus.GAME_OVER if self.is_over() else GameStatus.PLAYING

    def player(self, player_id: int) -> PlayerState:
        """Get a player by ID (1 or 2)."""
        if player_id == 1:
            return self.player1
        if player_id == 2:
            return self.player2
        raise ValueError(f"Invalid player ID: {player_id}")

    def play_turn(self) -> TurnResult | None:
        """Play one turn.

        Returns:
            TurnResult, or None if the game has already ended.

        Raises:
            EmptyDeckError: If a deck is empty when a card must be shown,
                which means cards were lost.
        """
        if self.is_over():
            logger.warning("Cannot play turn, game has already ended")
            return None

        self.turn_number += 1
        self.replenish_decks()

        card1 = self.player1.deck.deal_top()
        card2 = self.player2.deck.deal_top()
        logger.debug(
            f"Turn {self.turn_number}: Player 1 shows {card1}, Player 2 shows {card2}"
        )

        if card1.same_rank(card2):
            outcome, war_rounds = self._resolve_war()
            result = TurnResult(
                turn_number=self.turn_number,
                card1=card1,
                card2=card2,
                outcome=outcome,
                war_rounds=war_rounds,
                war_cards1=list(self.player1.war_cards),
                war_cards2=list(self.player2.war_cards),
            )
            self._settle_war(outcome, card1, card2)
        else:
            if card1.outranks(card2):
                outcome = Outcome.PLAYER1
                self.player1.collect([card1, card2])
            else:
                outcome = Outcome.PLAYER2
                self.player2.collect([card1, card2])
            result = TurnResult(
                turn_number=self.turn_number,
                card1=card1,
                card2=card2,
                outcome=outcome,
            )

        snapshot = self.snapshot()

        if self.game_logger:
            self.game_logger.log_turn(result, snapshot)

        if self._on_turn:
            self._on_turn(result, snapshot)

        if snapshot.is_over:
            self._finish()

        return result

    def autoplay(self, max_turns: int | None = None) -> int:
        """Play turns until the game ends.

        Args:
            max_turns: Stop once this many turns have been played
                (uses config if not specified, no limit if neither is set)

        Returns:
            Number of turns played.
        """
        if max_turns is None:
            max_turns = self.config.game.max_turns

        while not self.is_over():
            if max_turns is not None and self.turn_number >= max_turns:
                logger.warning(f"Stopping after {self.turn_number} turns without a winner")
                break
            self.play_turn()

        return self.turn_number

    def replenish(self, player_id: int) -> bool:
        """Refill a player's empty deck from their win pile and reshuffle.

        Returns:
            True if the deck was refilled, False if it still had cards.
        """
        return self.player(player_id).replenish()

    def replenish_decks(self) -> None:
        """Refill every empty deck from its win pile."""
        self.player1.replenish()
        self.player2.replenish()

    def is_over(self) -> bool:
        """Check if either player has run out of cards."""
        return self.player1.is_out_of_cards() or self.player2.is_out_of_cards()

    def turns_played(self) -> int:
        """Get number of turns played. A turn with any number of wars counts once."""
        return self.turn_number

    def score(self, player_id: int) -> int:
        """Get number of cards a player owns (deck + win pile)."""
        return self.player(player_id).total_cards()

    def scores(self) -> tuple[int, int]:
        """Get card counts for both players."""
        return self.player1.total_cards(), self.player2.total_cards()

    def total_cards(self) -> int:
        """Get number of cards owned by both players."""
        return sum(self.scores())

    def winner(self) -> Outcome | None:
        """Get the winner once the game is over.

        Returns:
            Outcome.PLAYER1 or Outcome.PLAYER2, or None while still playing
            (or if no player holds any cards).
        """
        if not self.is_over():
            return None
        if self.player2.is_out_of_cards() and not self.player1.is_out_of_cards():
            return Outcome.PLAYER1
        if self.player1.is_out_of_cards() and not self.player2.is_out_of_cards():
            return Outcome.PLAYER2
        return None

    def snapshot(self) -> GameSnapshot:
        """Get observable state for display."""
        player1_cards, player2_cards = self.scores()
        return GameSnapshot(
            turn_number=self.turn_number,
            player1_cards=player1_cards,
            player2_cards=player2_cards,
            status=self.status,
        )

    def _new_deck(self, cards: list[Card] | None = None) -> ShuffledDeck:
        """Create a deck with its own generator, seeded from the engine generator."""
        return ShuffledDeck(
            cards,
            seed=self._rng.getrandbits(DECK_SEED_BITS),
            full_range=self.full_range_shuffle,
        )

    def _deal(self, cards: list[Card]) -> None:
        """Shuffle cards and deal them alternately to both players."""
        if len(cards) % 2 == 1:
            logger.debug(f"Odd number of cards ({len(cards)}), dropping {cards[-1]}")
            cards = cards[:-1]

        deal_deck = self._new_deck(cards)
        deal_deck.shuffle()

        dealt1: list[Card] = []
        dealt2: list[Card] = []
        while not deal_deck.is_empty():
            dealt1.append(deal_deck.deal_top())
            dealt2.append(deal_deck.deal_top())

        # Last card dealt ends up on top
        self.player1.deck.assign(dealt1)
        self.player2.deck.assign(dealt2)

        logger.debug(f"Dealt {len(dealt1)} cards to each player (seed={self.seed})")

        if self.game_logger:
            self.game_logger.log_game_start(self.seed, dealt1, dealt2)

    def _resolve_war(self) -> tuple[Outcome, int]:
        """Fight a war until someone wins or both players run out.

        Each round both players stage a face-down card and then a face-up
        card; the face-up cards are compared. Staged cards pile up in the
        players' war_cards across rounds.

        Returns:
            (outcome, number of war rounds fought)
        """
        rounds = 0
        while True:
            rounds += 1
            logger.debug(f"WAR! (round {rounds})")

            # Decks may have run out on the cards just shown
            self.replenish_decks()
            outcome = self._war_exhaustion()
            if outcome is not None:
                return outcome, rounds

            # Face down
            self.player1.stage_war_card()
            self.player2.stage_war_card()

            outcome = self._war_exhaustion()
            if outcome is not None:
                return outcome, rounds

            # Face up
            card1 = self.player1.stage_war_card()
            card2 = self.player2.stage_war_card()
            logger.debug(f"War: Player 1 shows {card1}, Player 2 shows {card2}")

            if card1.same_rank(card2):
                continue
            if card1.outranks(card2):
                return Outcome.PLAYER1, rounds
            return Outcome.PLAYER2, rounds

    def _war_exhaustion(self) -> Outcome | None:
        """Decide the war if a player cannot continue it.

        Returns:
            DRAW if both decks are empty, the other player if one deck is
            empty, None if both players can go on.
        """
        empty1 = self.player1.deck.is_empty()
        empty2 = self.player2.deck.is_empty()

        if empty1 and empty2:
            logger.debug("Both players ran out of cards, the war is a draw")
            return Outcome.DRAW
        if empty1:
            logger.debug("Player 1 ran out of cards & could not continue the war")
            return Outcome.PLAYER2
        if empty2:
            logger.debug("Player 2 ran out of cards & could not continue the war")
            return Outcome.PLAYER1
        return None

    def _settle_war(self, outcome: Outcome, card1: Card, card2: Card) -> None:
        """Hand out the shown and staged cards, then clear the staged cards.

        On a draw every card goes back to the player who put it down.
        """
        p1, p2 = self.player1, self.player2

        if outcome == Outcome.PLAYER1:
            p1.collect([card1, card2, *p1.war_cards, *p2.war_cards])
        elif outcome == Outcome.PLAYER2:
            p2.collect([card1, card2, *p2.war_cards, *p1.war_cards])
        else:
            p1.collect([card1, *p1.war_cards])
            p2.collect([card2, *p2.war_cards])

        p1.war_cards.clear()
        p2.war_cards.clear()

        logger.debug(f"War result: {outcome.name}")

    def _finish(self) -> None:
        """Report the end of the game."""
        snapshot = self.snapshot()
        winner = self.winner()

        if winner is not None:
            logger.info(f"Player {winner.value} won after {self.turn_number} turns")
        else:
            logger.info(f"Game ended without a winner after {self.turn_number} turns")

        if self.game_logger:
            self.game_logger.log_game_end(snapshot, winner)

        if self._on_game_end:
            self._on_game_end(snapshot)
