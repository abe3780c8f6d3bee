"""Tests for game log formatting and output."""

import json

import pytest

from war_game.game.engine import WarEngine
from war_game.logging import (
    GameLogConfig,
    GameLogger,
    format_card,
    format_cards,
    parse_card,
    parse_cards,
)
from war_game.models.card import Card, Rank, Suit, create_standard_deck


class TestFormatters:
    """Tests for card code formatting and parsing."""

    def test_format_card(self):
        """Test card codes."""
        assert format_card(Card(suit=Suit.SPADES, rank=Rank.ACE)) == "AS"
        assert format_card(Card(suit=Suit.HEARTS, rank=Rank.TEN)) == "10H"
        assert format_card(Card(suit=Suit.CLUBS, rank=Rank.TWO)) == "2C"

    def test_format_cards_keeps_order(self):
        """Test cards are joined in the given order."""
        cards = [
            Card(suit=Suit.DIAMONDS, rank=Rank.KING),
            Card(suit=Suit.CLUBS, rank=Rank.THREE),
        ]
        assert format_cards(cards) == "KD,3C"
        assert format_cards([]) == ""

    def test_parse_card(self):
        """Test parsing card codes."""
        assert parse_card("QD") == Card(suit=Suit.DIAMONDS, rank=Rank.QUEEN)
        assert parse_card(" as ") == Card(suit=Suit.SPADES, rank=Rank.ACE)
        assert parse_card("TH") == Card(suit=Suit.HEARTS, rank=Rank.TEN)

    @pytest.mark.parametrize("code", ["", "A", "1S", "AX", "11H", "ZZ"])
    def test_parse_invalid(self, code):
        """Test invalid codes are rejected."""
        with pytest.raises(ValueError):
            parse_card(code)

    def test_parse_cards(self):
        """Test parsing a card list."""
        assert parse_cards("AS, 2C,") == [
            Card(suit=Suit.SPADES, rank=Rank.ACE),
            Card(suit=Suit.CLUBS, rank=Rank.TWO),
        ]
        assert parse_cards(["KH"]) == [Card(suit=Suit.HEARTS, rank=Rank.KING)]

    def test_every_standard_card_parses_back(self):
        """Test every card code in the standard deck is parseable."""
        deck = create_standard_deck()
        assert parse_cards(format_cards(deck)) == deck


class TestGameLogger:
    """Tests for GameLogger class."""

    def test_disabled_writes_nothing(self, tmp_path):
        """Test a disabled logger creates no file."""
        path = tmp_path / "war.jsonl"
        with GameLogger(GameLogConfig(enabled=False, output_path=str(path))) as game_logger:
            WarEngine(seed=1, game_logger=game_logger).autoplay(100_000)

        assert not path.exists()

    def test_game_events(self, tmp_path):
        """Test a full game is logged event by event."""
        path = tmp_path / "logs" / "war.jsonl"
        config = GameLogConfig(enabled=True, output_path=str(path))

        with GameLogger(config) as game_logger:
            engine = WarEngine(seed=9, game_logger=game_logger)
            turns = engine.autoplay(100_000)

        events = [json.loads(line) for line in path.read_text().splitlines()]

        assert events[0]["type"] == "game_start"
        assert events[0]["seed"] == 9
        assert len(events[0]["decks"]["1"].split(",")) == 26

        turn_events = [e for e in events if e["type"] == "turn"]
        assert len(turn_events) == turns
        assert turn_events[0]["turn"] == 1
        assert all(sum(e["scores"].values()) == 52 for e in turn_events)

        wars = [e for e in turn_events if "war" in e]
        for event in wars:
            assert event["war"]["rounds"] >= 1
            assert event["shown"]["1"][:-1] == event["shown"]["2"][:-1]

        assert events[-1]["type"] == "game_end"
        assert events[-1]["turns"] == turns
        assert events[-1]["winner"] in ("player1", "player2")

    def test_draw_logged(self, tmp_path):
        """Test a drawn war is logged as a draw."""
        path = tmp_path / "war.jsonl"
        ace = Card(suit=Suit.SPADES, rank=Rank.ACE)

        with GameLogger(GameLogConfig(enabled=True, output_path=str(path))) as game_logger:
            WarEngine([ace, ace], seed=1, game_logger=game_logger).play_turn()

        events = [json.loads(line) for line in path.read_text().splitlines()]

        assert [e["type"] for e in events] == ["game_start", "turn"]
        assert events[1]["outcome"] == "draw"
        assert events[1]["war"]["rounds"] == 1
        assert events[1]["war"]["cards"] == {"1": "", "2": ""}
