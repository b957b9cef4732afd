"""
Domain exceptions.

Every business rule failure raises one of these. They subclass
ValueError so the API layer can treat all of them as client errors,
while still mapping each kind to its own HTTP status.

Store (SQLAlchemy) failures are never wrapped; they propagate as-is.
"""


class FinanceError(ValueError):
    """Base class for business rule failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FinanceError):
    """A ledger entry failed field validation. Fix the input and retry."""


class PreconditionError(FinanceError):
    """An operation was called on an entity in the wrong state."""


class AuthenticationError(FinanceError):
    """Login failed: unknown email or wrong password."""


class BusinessRuleError(FinanceError):
    """A business rule was violated, e.g. a duplicate email."""
