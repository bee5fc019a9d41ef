"""
Configuration schema — single source of truth.

Defaults are defined as Pydantic field defaults. YAML files provide overrides only.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from stud_ev.shared.dicts import deep_merge_dicts
from stud_ev.shared.payout import DEFAULT_PAYOUT_TABLE, PayoutTable


class StrictFrozenModel(BaseModel):
    """Base for all config models: immutable, extra keys forbidden."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class SystemConfig(StrictFrozenModel):
    """System-level configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="WARNING")


class Config(StrictFrozenModel):
    """
    Complete application configuration.

    The payout table defaults to the reference schedule; a YAML file may
    override individual multipliers.
    """

    payout: PayoutTable = Field(default_factory=lambda: DEFAULT_PAYOUT_TABLE)
    system: SystemConfig = Field(default_factory=SystemConfig)

    def to_dict(self) -> dict[str, Any]:
        """Serialize config to a plain dict."""
        return self.model_dump()

    @classmethod
    def default(cls) -> "Config":
        """Return a Config populated with all defaults."""
        return cls()

    def merge(self, overrides: dict[str, Any]) -> "Config":
        """Return a new Config with the provided overrides merged in."""
        merged = deep_merge_dicts(self.model_dump(), overrides)
        return Config.model_validate(merged)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "Config":
        """Create Config from a dict merged over defaults."""
        return cls.default().merge(config_dict)
