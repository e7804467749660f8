"""
Chefly - Exception hierarchy.

Every pipeline stage raises one of these. Library exceptions (OpenAI,
PostgREST) are translated into them at the client boundary so the
classifier only has to know about this module.
"""


class ChefError(Exception):
    """Base class for all pipeline failures."""


class InvalidInputError(ChefError):
    """The caller sent a missing or malformed user identifier or body."""


class MissingPreferencesError(ChefError):
    """No preferences record exists for the user."""

    def __init__(self, user_id: str):
        super().__init__(f"No preferences found for user {user_id}")
        self.user_id = user_id


class AIServiceError(ChefError):
    """The AI service returned a non-success response or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AIRateLimitError(AIServiceError):
    """The AI service is throttling us (HTTP 429)."""

    def __init__(self, message: str = "AI service rate limit exceeded"):
        super().__init__(message, status_code=429)


class MalformedPlanError(ChefError):
    """The AI answered, but not with parseable plan data."""


class PlanValidationError(ChefError):
    """A parsed plan violates a structural rule."""

    def __init__(self, message: str, meal_index: int | None = None, field: str | None = None):
        super().__init__(message)
        self.meal_index = meal_index
        self.field = field


class PersistenceError(ChefError):
    """A write to the data store failed."""
