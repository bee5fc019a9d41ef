"""
Card and deck primitives for final-card EV enumeration.

Cards wrap the treys integer encoding. The 52-card deck is built once at
import time and is never mutated afterwards.
"""

from typing import Iterable, List, Tuple

from treys import Card as TreysCard

RANKS = "23456789TJQKA"
SUITS = "cdhs"  # clubs, diamonds, hearts, spades

RANK_INDEX = {rank: i for i, rank in enumerate(RANKS)}

# Module-level cache for Card.new()
_CARD_CACHE = {}


class Card:
    """
    Card representation using the treys library.

    Rank indices run 0..12 for 2..A; suits are the lowercase letters c/d/h/s.

    Note: Card objects are cached. Creating the same card multiple times
    returns the same object.
    """

    def __init__(self, card_int: int):
        """
        Initialize from treys card integer.

        Args:
            card_int: Integer representation from treys (use Card.new() to create)
        """
        self.card_int = card_int
        self._hash = None

    @classmethod
    def new(cls, card_str: str) -> "Card":
        """
        Create a card from string representation (e.g., 'As', 'Kh', '2d', '10c').

        Args:
            card_str: Rank + suit. Ranks: '2'-'9', 'T' (or '10'), 'J', 'Q', 'K', 'A'.
                      Suits: 'c', 'd', 'h', 's' (case-insensitive)

        Returns:
            Card instance (cached)

        Raises:
            ValueError: If the string does not name a card
        """
        key = _normalize_card_str(card_str)
        if key not in _CARD_CACHE:
            _CARD_CACHE[key] = cls(TreysCard.new(key))
        return _CARD_CACHE[key]

    @classmethod
    def get_full_deck(cls) -> List["Card"]:
        """Get a list copy of the 52-card deck."""
        return list(FULL_DECK)

    @property
    def rank(self) -> int:
        """Rank index (0=2, ..., 8=T, 9=J, 10=Q, 11=K, 12=A)."""
        return TreysCard.get_rank_int(self.card_int)

    @property
    def suit(self) -> str:
        """Suit letter ('c', 'd', 'h' or 's')."""
        return TreysCard.int_to_str(self.card_int)[1]

    def __str__(self) -> str:
        """Pretty representation (e.g., '[ A ♠ ]')."""
        return TreysCard.int_to_pretty_str(self.card_int)

    def __repr__(self) -> str:
        """Compact representation (e.g., 'As')."""
        return TreysCard.int_to_str(self.card_int)

    def __eq__(self, other: object) -> bool:
        if type(other) is Card:
            return self.card_int == other.card_int
        if not isinstance(other, Card):
            return False
        return self.card_int == other.card_int

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(self.card_int)
        return self._hash

    def __lt__(self, other: "Card") -> bool:
        """Order by rank, then suit letter."""
        return (self.rank, self.suit) < (other.rank, other.suit)


def _normalize_card_str(card_str: str) -> str:
    if not isinstance(card_str, str):
        raise ValueError(f"Invalid card: {card_str!r}")

    text = card_str.strip()
    if len(text) == 3 and text[:2] == "10":
        text = "T" + text[2]
    if len(text) != 2:
        raise ValueError(f"Invalid card: {card_str!r}")

    rank = text[0].upper()
    suit = text[1].lower()
    if rank not in RANK_INDEX or suit not in SUITS:
        raise ValueError(f"Invalid card: {card_str!r}")
    return rank + suit


def parse_cards(cards: str | Iterable[str]) -> Tuple[Card, ...]:
    """
    Parse several cards at once.

    Args:
        cards: Whitespace-separated string ('Ac Kc 2d 3d') or iterable of card strings

    Returns:
        Tuple of Card objects in input order
    """
    if isinstance(cards, str):
        cards = cards.split()
    return tuple(Card.new(card_str) for card_str in cards)


FULL_DECK: Tuple[Card, ...] = tuple(Card.new(rank + suit) for rank in RANKS for suit in SUITS)
if len(set(FULL_DECK)) != 52:
    raise RuntimeError("Deck initialization failed, card count is not 52.")
