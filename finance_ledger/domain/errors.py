"""Error types raised by the ledger services.

Every error subclasses ValueError so callers that only care about
"bad input" can keep catching ValueError.
"""


class LedgerError(ValueError):
    """Base class for ledger errors."""


class NotFoundError(LedgerError):
    """An id was empty or no row exists for it."""


class InvalidParameterError(LedgerError):
    """A value could not be parsed or is outside its allowed set."""

    def __init__(self, param: str, reason: str):
        self.param = param
        self.reason = reason
        super().__init__(f"invalid parameter {param}: {reason}")


class ValidationError(LedgerError):
    """A required field is empty or a rule between fields is broken."""


class ConflictError(LedgerError):
    """The database rejected a write because of a constraint."""
