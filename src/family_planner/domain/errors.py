"""Domain errors."""

from datetime import date


class PlannerError(Exception):
    """Base class for family planner errors."""


class RetrievalError(PlannerError):
    """Raised when a repository read fails."""


class InvalidRangeError(PlannerError, ValueError):
    """Raised when a date range starts after it ends."""

    def __init__(self, start_date: date, end_date: date) -> None:
        super().__init__(
            f"Start date {start_date.isoformat()} is after end date "
            f"{end_date.isoformat()}"
        )
        self.start_date = start_date
        self.end_date = end_date


class InvalidRoleError(PlannerError, ValueError):
    """Raised when a user role is not one of the known roles."""


class SuggestionError(PlannerError):
    """Raised when the suggestion provider returns an unusable payload."""


class GenerationCancelledError(PlannerError):
    """Raised when a caller abandons a shopping list generation."""
