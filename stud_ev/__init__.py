"""
Mississippi Stud final-card EV engine.

Classifies five-card hands into paid outcome categories and enumerates the
last community card to compute the expected payout of a partially known hand.
"""

from stud_ev.errors import DuplicateCard, EVInputError, IncompleteInput, InvalidPayoutTable
from stud_ev.ev.enumerator import EVResult, compute_ev
from stud_ev.game.evaluator import classify
from stud_ev.game.outcomes import OutcomeCategory
from stud_ev.game.state import FULL_DECK, Card
from stud_ev.shared.payout import DEFAULT_PAYOUT_TABLE, PayoutTable

__all__ = [
    "Card",
    "FULL_DECK",
    "OutcomeCategory",
    "classify",
    "compute_ev",
    "EVResult",
    "PayoutTable",
    "DEFAULT_PAYOUT_TABLE",
    "EVInputError",
    "IncompleteInput",
    "DuplicateCard",
    "InvalidPayoutTable",
]
