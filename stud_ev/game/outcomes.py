"""Outcome categories a five-card hand is paid on."""

from enum import Enum


class OutcomeCategory(Enum):
    """
    Paid outcomes, strongest first.

    Values are the exact keys used by external payout tables.
    """

    ROYAL_FLUSH = "royal_flush"
    STRAIGHT_FLUSH = "straight_flush"
    FOUR_OF_A_KIND = "four_of_a_kind"
    FULL_HOUSE = "full_house"
    FLUSH = "flush"
    STRAIGHT = "straight"
    THREE_OF_A_KIND = "three_of_a_kind"
    TWO_PAIR = "two_pair"
    PAIR_JACK_OR_BETTER = "pair_jack_or_better"
    PAIR_6_TO_10 = "pair_6_to_10"
    NOTHING = "nothing"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Human-readable name (e.g., 'Pair 6 To 10')."""
        return self.value.replace("_", " ").title()


# Definition order of the enum is the payout-strength order
CATEGORY_ORDER = tuple(OutcomeCategory)
