"""Errors raised by the pricing engine.

All of them are caller errors: the same input always fails the same way, so
nothing in the engine retries. The HTTP layer turns them into 422 responses.
"""


class PricingError(ValueError):
    """Base class for every pricing engine error."""


class InvalidAreaError(PricingError):
    """An area that must divide or scale a price is zero or negative."""


class InvalidFactorError(PricingError):
    """A factor catalog value is missing, non-positive or non-finite."""


class DivisionByZeroError(PricingError):
    """Reconciliation was attempted against a zero computed price."""


class InvalidAttributeError(PricingError):
    """A unit count (parking spots, storage rooms) is negative."""
