"""
Final-card EV enumeration.

With two player cards and two community cards known, every one of the 48
remaining cards is an equally likely fifth card. Each completion is classified
and paid from the payout table; the EV is the average payout.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Sequence, Tuple, Union

from stud_ev.errors import DuplicateCard, IncompleteInput
from stud_ev.game.evaluator import classify
from stud_ev.game.outcomes import CATEGORY_ORDER, OutcomeCategory
from stud_ev.game.state import FULL_DECK, Card
from stud_ev.shared.payout import DEFAULT_PAYOUT_TABLE, PayoutTable

logger = logging.getLogger(__name__)

NUM_KNOWN_CARDS = 4

CardSlot = Optional[Union[Card, str]]


@dataclass(frozen=True)
class EVResult:
    """
    Outcome of one enumeration.

    Attributes:
        ev: Average payout per 1 unit wagered
        n: Number of completions enumerated (48)
        counts: Completions per category, every category present (read-only)
    """

    ev: float
    n: int
    counts: Mapping[OutcomeCategory, int]

    def __post_init__(self):
        object.__setattr__(self, "counts", MappingProxyType(dict(self.counts)))

    def probability(self, category: OutcomeCategory) -> float:
        return self.counts[category] / self.n

    def percent(self, category: OutcomeCategory) -> float:
        return 100.0 * self.probability(category)


def validate_known_cards(known_cards: Sequence[CardSlot]) -> Tuple[Card, ...]:
    """
    Check the four known-card slots and resolve them to Cards.

    Raises:
        IncompleteInput: If fewer than four slots are given or any slot is empty
        DuplicateCard: If the same card fills more than one slot
        ValueError: If more than four slots are given or a slot is not a card
    """
    if len(known_cards) > NUM_KNOWN_CARDS:
        raise ValueError(
            f"Expected {NUM_KNOWN_CARDS} known cards, got {len(known_cards)}"
        )
    if len(known_cards) < NUM_KNOWN_CARDS or any(
        slot is None or (isinstance(slot, str) and not slot.strip())
        for slot in known_cards
    ):
        raise IncompleteInput("Please select all four known cards.")

    cards = tuple(slot if isinstance(slot, Card) else Card.new(slot) for slot in known_cards)
    if len(set(cards)) != NUM_KNOWN_CARDS:
        raise DuplicateCard("Duplicate cards selected.")
    return cards


def remaining_deck(known_cards: Sequence[Card]) -> Iterator[Card]:
    """Yield every deck card not among the known cards, in deck order."""
    excluded = frozenset(known_cards)
    return (card for card in FULL_DECK if card not in excluded)


def compute_ev(
    known_cards: Sequence[CardSlot],
    payout_table: Union[PayoutTable, Mapping[str, float]] = DEFAULT_PAYOUT_TABLE,
) -> EVResult:
    """
    Enumerate every fifth card and average the payouts.

    Args:
        known_cards: Four slots (two player cards, two community cards), each a
            Card or card string; None or "" marks an empty slot
        payout_table: PayoutTable, or a plain mapping validated on the way in

    Returns:
        EVResult with the EV, the trial count and per-category counts

    Raises:
        IncompleteInput: If a known-card slot is empty
        DuplicateCard: If the known cards are not distinct
        InvalidPayoutTable: If a plain mapping payout table is incomplete or non-numeric
    """
    known = validate_known_cards(known_cards)
    table = PayoutTable.from_mapping(payout_table)

    counts = {category: 0 for category in CATEGORY_ORDER}
    total = 0.0
    for card in remaining_deck(known):
        category = classify(known + (card,))
        counts[category] += 1
        total += table[category]

    n = sum(counts.values())
    ev = total / n
    logger.debug(f"EV for {' '.join(map(repr, known))}: {ev:.6f} over {n} cards")
    return EVResult(ev=ev, n=n, counts=counts)
