"""Plain-text rendering of an EV result."""

from stud_ev.ev.enumerator import EVResult
from stud_ev.game.outcomes import CATEGORY_ORDER
from stud_ev.shared.payout import PayoutTable


def format_report(result: EVResult, payout_table: PayoutTable) -> str:
    """
    Render the EV, trial count and per-outcome table.

    Example row::

        flush                       6       5    10.4167%
    """
    lines = [
        f"EV per 1 unit: {result.ev:.6f}",
        f"Trials (remaining cards): {result.n}",
        "",
        f"{'Outcome':<22}{'Pay':>8}{'Count':>8}{'Percent':>12}",
        "-" * 50,
    ]
    for category in CATEGORY_ORDER:
        pay = payout_table[category]
        lines.append(
            f"{category.value:<22}{pay:>8g}{result.counts[category]:>8}"
            f"{result.percent(category):>11.4f}%"
        )
    return "\n".join(lines)
