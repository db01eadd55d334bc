class FinanceEngineError(Exception):
    """Base class for errors raised by the finance engine."""


class DataIntegrityError(FinanceEngineError, ValueError):
    """
    A record violates the engine's input contract.

    Raised instead of skipping the record, so that flow and category totals
    can never silently under-count.
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}


class SnapshotLoadError(FinanceEngineError):
    """The snapshot provider could not materialize records."""
