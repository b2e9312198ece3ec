"""Exception hierarchy for Shortlister."""


class ShortlisterError(Exception):
    """Base class for all Shortlister errors."""


class CriteriaValidationError(ShortlisterError):
    """Criteria failed validation and cannot be saved."""

    def __init__(self, message: str, weight_total: int | None = None) -> None:
        super().__init__(message)
        self.weight_total = weight_total


class RepositoryError(ShortlisterError):
    """A persistence read or write failed."""
