"""Tests for the plain-text EV report."""

from stud_ev.ev.enumerator import compute_ev
from stud_ev.ev.report import format_report
from stud_ev.game.outcomes import CATEGORY_ORDER
from stud_ev.shared.payout import DEFAULT_PAYOUT_TABLE


class TestFormatReport:
    """Tests for format_report."""

    def setup_method(self):
        result = compute_ev(["Ac", "Kc", "2d", "3d"])
        self.lines = format_report(result, DEFAULT_PAYOUT_TABLE).splitlines()

    def test_header(self):
        assert self.lines[0] == "EV per 1 unit: -0.750000"
        assert self.lines[1] == "Trials (remaining cards): 48"

    def test_one_row_per_category(self):
        rows = self.lines[-len(CATEGORY_ORDER):]
        assert [row.split()[0] for row in rows] == [c.value for c in CATEGORY_ORDER]

    def test_row_contents(self):
        nothing = next(line for line in self.lines if line.startswith("nothing"))
        assert nothing.split() == ["nothing", "-1", "42", "87.5000%"]

        royal = next(line for line in self.lines if line.startswith("royal_flush"))
        assert royal.split() == ["royal_flush", "500", "0", "0.0000%"]
