"""
Five-card hand classification.

Maps any five distinct cards to exactly one OutcomeCategory. The checks run
in a fixed precedence order so hands satisfying several conditions (a
straight that is also a flush) land in a single category.
"""

from collections import Counter
from typing import Optional, Sequence, Tuple

from stud_ev.game.outcomes import OutcomeCategory
from stud_ev.game.state import RANK_INDEX, Card

# A-2-3-4-5, the only straight where the ace plays low
WHEEL_RANKS = (0, 1, 2, 3, 12)
ROYAL_RANKS = (8, 9, 10, 11, 12)

JACK = RANK_INDEX["J"]
SIX = RANK_INDEX["6"]


def is_straight(sorted_ranks: Sequence[int]) -> Tuple[bool, Optional[int]]:
    """
    Check five ascending rank indices for a straight.

    Returns:
        (is_straight, high_rank). The wheel reports the five (index 3) as high.
    """
    if all(sorted_ranks[i] == sorted_ranks[i - 1] + 1 for i in range(1, 5)):
        return True, sorted_ranks[4]
    if tuple(sorted_ranks) == WHEEL_RANKS:
        return True, 3
    return False, None


def classify(hand: Sequence[Card]) -> OutcomeCategory:
    """
    Classify a five-card hand.

    Args:
        hand: Exactly five distinct cards

    Returns:
        The single outcome category the hand pays on

    Raises:
        ValueError: If the hand does not have five cards
    """
    if len(hand) != 5:
        raise ValueError(f"Hand must have exactly 5 cards, got {len(hand)}")

    ranks = sorted(card.rank for card in hand)
    flush = len({card.suit for card in hand}) == 1
    straight, _ = is_straight(ranks)
    counts = Counter(ranks)
    # Rank multiplicities, e.g. (3, 2) for a full house
    shape = tuple(sorted(counts.values(), reverse=True))

    if straight and flush:
        if tuple(ranks) == ROYAL_RANKS:
            return OutcomeCategory.ROYAL_FLUSH
        return OutcomeCategory.STRAIGHT_FLUSH
    if shape == (4, 1):
        return OutcomeCategory.FOUR_OF_A_KIND
    if shape == (3, 2):
        return OutcomeCategory.FULL_HOUSE
    if flush:
        return OutcomeCategory.FLUSH
    if straight:
        return OutcomeCategory.STRAIGHT
    if shape == (3, 1, 1):
        return OutcomeCategory.THREE_OF_A_KIND
    if shape == (2, 2, 1):
        return OutcomeCategory.TWO_PAIR
    if shape == (2, 1, 1, 1):
        pair_rank = next(rank for rank, count in counts.items() if count == 2)
        if pair_rank >= JACK:
            return OutcomeCategory.PAIR_JACK_OR_BETTER
        if pair_rank >= SIX:
            return OutcomeCategory.PAIR_6_TO_10
        return OutcomeCategory.NOTHING
    return OutcomeCategory.NOTHING
