"""
Configuration loading — YAML overrides applied to Pydantic model defaults.

YAML files may declare `extends: <filename>` to inherit from another YAML in
the same directory; the current file's values always win.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from stud_ev.errors import InvalidPayoutTable
from stud_ev.shared.config import Config
from stud_ev.shared.dicts import deep_merge_dicts, flatten_to_nested
from stud_ev.shared.payout import describe_error


def load_config(path: str | Path | None = None, **overrides: Any) -> Config:
    """
    Load configuration from an optional YAML file with optional programmatic overrides.

    Resolution order (last wins):
      1. Python field defaults
      2. YAML file (resolved via ``extends`` chain if present)
      3. Programmatic keyword overrides

    Args:
        path: Optional path to a YAML config file.
        **overrides: Overrides using ``__`` as a nesting separator,
            e.g. ``payout__flush=8``.

    Returns:
        Validated, frozen :class:`Config` instance.

    Raises:
        FileNotFoundError: If the file (or a file it extends) does not exist
        ValueError: If a file is not a YAML mapping
        InvalidPayoutTable: If the payout section holds an invalid value
        ValidationError: For any other invalid setting

    Examples:
        >>> cfg = load_config()
        >>> cfg = load_config("config/generous.yaml")
        >>> cfg = load_config(payout__flush=8, system__log_level="DEBUG")
    """
    config = Config.default()

    try:
        if path is not None:
            config = config.merge(_load_yaml(Path(path)))

        if overrides:
            config = config.merge(flatten_to_nested(overrides))
    except ValidationError as exc:
        payout_errors = [error for error in exc.errors() if error["loc"][:1] == ("payout",)]
        if payout_errors:
            raise InvalidPayoutTable(describe_error(payout_errors[0])) from exc
        raise

    return config


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and recursively resolve any ``extends`` chain."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Could not parse {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must be a mapping, got {type(data).__name__}")

    if "extends" in data:
        base_data = _load_yaml(path.parent / data.pop("extends"))
        data = deep_merge_dicts(base_data, data)

    return data
