"""
Payout tables — one multiplier per outcome category.

The record has a fixed field per category, so a constructed table can never be
missing one. External tables (JSON/YAML documents, plain dicts) go through
PayoutTable.from_mapping() or load_payout_table(), which reject missing keys,
unknown keys and non-numeric values with InvalidPayoutTable.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from stud_ev.errors import InvalidPayoutTable
from stud_ev.game.outcomes import CATEGORY_ORDER, OutcomeCategory

logger = logging.getLogger(__name__)

# Ints and floats only: no bools, no numeric strings, no inf/nan
Multiplier = Annotated[float, Field(strict=True, allow_inf_nan=False)]


class PayoutTable(BaseModel):
    """Payout per 1 unit wagered for each outcome. 'nothing' is usually negative."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    royal_flush: Multiplier
    straight_flush: Multiplier
    four_of_a_kind: Multiplier
    full_house: Multiplier
    flush: Multiplier
    straight: Multiplier
    three_of_a_kind: Multiplier
    two_pair: Multiplier
    pair_jack_or_better: Multiplier
    pair_6_to_10: Multiplier
    nothing: Multiplier

    def __getitem__(self, category: OutcomeCategory | str) -> float:
        return getattr(self, OutcomeCategory(category).value)

    def items(self) -> list[tuple[OutcomeCategory, float]]:
        """(category, payout) pairs in payout-strength order."""
        return [(category, self[category]) for category in CATEGORY_ORDER]

    def to_dict(self) -> dict[str, float]:
        """Plain external form keyed by category name."""
        return self.model_dump()

    @classmethod
    def from_mapping(cls, data: Any) -> "PayoutTable":
        """
        Validate an external payout table.

        Args:
            data: Mapping of category name (or OutcomeCategory) to a number

        Returns:
            Validated PayoutTable

        Raises:
            InvalidPayoutTable: If the mapping is missing a category, has an
                unknown key, or holds a non-numeric value
        """
        if isinstance(data, PayoutTable):
            return data
        if not isinstance(data, Mapping):
            raise InvalidPayoutTable(
                f"Payout table must be a mapping, got {type(data).__name__}"
            )

        normalized = {
            key.value if isinstance(key, OutcomeCategory) else key: value
            for key, value in data.items()
        }
        try:
            return cls.model_validate(normalized)
        except ValidationError as exc:
            raise InvalidPayoutTable(describe_error(exc.errors()[0])) from exc


def describe_error(error: Any) -> str:
    """Turn one pydantic error into a short message naming the payout key."""
    key = error["loc"][-1] if error["loc"] else "?"
    if error["type"] == "missing":
        return f"Missing key: {key}"
    if error["type"] == "extra_forbidden":
        return f"Unknown key: {key}"
    if error["type"] == "model_type":
        return "Payout table must be a mapping"
    if error["type"] == "finite_number":
        return f"Key {key} must be a finite number"
    return f"Key {key} must be a number"


def _read_document(path: Path) -> Any:
    """Parse a .json file with json, anything else with the YAML parser."""
    with open(path) as f:
        if path.suffix.lower() == ".json":
            try:
                return json.load(f)
            except json.JSONDecodeError as exc:
                raise InvalidPayoutTable(f"Could not parse {path}: {exc}") from exc
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise InvalidPayoutTable(f"Could not parse {path}: {exc}") from exc


def load_payout_table(path: str | Path) -> PayoutTable:
    """
    Load a complete payout table from a JSON (.json) or YAML (.yaml/.yml) file.

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidPayoutTable: If the document is not a valid payout table
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Payout table file not found: {path}")

    table = PayoutTable.from_mapping(_read_document(path))
    logger.info(f"Loaded payout table from {path}")
    return table


DEFAULT_PAYOUT_TABLE = PayoutTable(
    royal_flush=500,
    straight_flush=100,
    four_of_a_kind=40,
    full_house=10,
    flush=6,
    straight=4,
    three_of_a_kind=3,
    two_pair=2,
    pair_jack_or_better=1,
    pair_6_to_10=0,
    nothing=-1,
)
