"""Domain errors shared by the estimation engine, record stores and API layer."""


class InvalidInputError(ValueError):
    """A workout configuration cannot be estimated (non-positive duration, weight or level)."""


class StoreUnavailableError(RuntimeError):
    """The record store could not load or persist workout records."""
