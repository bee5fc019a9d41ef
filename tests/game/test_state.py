"""Tests for cards and the deck."""

import pytest

from stud_ev.game.state import FULL_DECK, Card, parse_cards


class TestCard:
    """Tests for Card class."""

    def test_create_card(self):
        card = Card.new("As")
        assert card.rank == 12
        assert card.suit == "s"

    def test_rank_indices(self):
        assert Card.new("2c").rank == 0
        assert Card.new("6d").rank == 4
        assert Card.new("Th").rank == 8
        assert Card.new("Js").rank == 9
        assert Card.new("Ks").rank == 11

    def test_ten_alias(self):
        assert Card.new("10h") == Card.new("Th")

    def test_case_insensitive(self):
        assert Card.new("aS") == Card.new("As")
        assert Card.new("td") == Card.new("Td")

    def test_cards_are_cached(self):
        assert Card.new("Qd") is Card.new("Qd")

    def test_card_equality(self):
        assert Card.new("As") == Card.new("As")
        assert Card.new("As") != Card.new("Ah")
        assert Card.new("As") != "As"

    def test_card_hash(self):
        assert hash(Card.new("As")) == hash(Card.new("As"))
        assert len({Card.new("As"), Card.new("As"), Card.new("Kh")}) == 2

    def test_card_repr(self):
        assert repr(Card.new("As")) == "As"
        assert repr(Card.new("10c")) == "Tc"

    def test_sorting_by_rank(self):
        cards = [Card.new("Ah"), Card.new("2c"), Card.new("Td")]
        assert [repr(card) for card in sorted(cards)] == ["2c", "Td", "Ah"]

    @pytest.mark.parametrize("card_str", ["", "A", "1h", "Ax", "Zs", "Ahh", "11h"])
    def test_invalid_card(self, card_str):
        with pytest.raises(ValueError, match="Invalid card"):
            Card.new(card_str)

    def test_non_string_rejected(self):
        with pytest.raises(ValueError, match="Invalid card"):
            Card.new(None)  # type: ignore


class TestDeck:
    """Tests for the 52-card deck constant."""

    def test_full_deck_size(self):
        assert len(FULL_DECK) == 52
        assert len(set(FULL_DECK)) == 52

    def test_every_rank_and_suit(self):
        assert {card.rank for card in FULL_DECK} == set(range(13))
        assert {card.suit for card in FULL_DECK} == set("cdhs")

    def test_full_deck_is_immutable(self):
        assert isinstance(FULL_DECK, tuple)

    def test_get_full_deck_returns_copy(self):
        deck = Card.get_full_deck()
        deck.pop()
        assert len(Card.get_full_deck()) == 52


class TestParseCards:
    """Tests for parse_cards helper."""

    def test_parse_string(self):
        cards = parse_cards("Ac Kc 2d 3d")
        assert cards == (Card.new("Ac"), Card.new("Kc"), Card.new("2d"), Card.new("3d"))

    def test_parse_iterable(self):
        assert parse_cards(["10s", "Jh"]) == (Card.new("Ts"), Card.new("Jh"))

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            parse_cards("Ac Kc 2x")
