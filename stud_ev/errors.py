"""Validation errors raised before any EV computation starts."""


class EVInputError(ValueError):
    """Base class for rejected EV inputs."""


class IncompleteInput(EVInputError):
    """One or more of the four known-card slots is empty."""


class DuplicateCard(EVInputError):
    """The same card was given for more than one known-card slot."""


class InvalidPayoutTable(EVInputError):
    """A payout table is missing a category or holds a non-numeric value."""
