"""Application error hierarchy.

Services raise these; the API layer maps each to a status code and a
message that is safe to show to the client.
"""


class AquaTrackerError(Exception):
    """Base class for application errors."""

    message = "An unexpected error occurred"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidInputError(AquaTrackerError):
    """Raised when the client sent a value that cannot be accepted."""

    message = "Invalid input"


class InvalidSizeError(InvalidInputError):
    """Raised for a bottle size outside the known enumeration."""

    message = "Invalid increment"

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__()


class InvalidCredentialsError(AquaTrackerError):
    """Raised when a login does not match a stored user."""

    message = "Invalid credentials"


class DuplicateUsernameError(AquaTrackerError):
    """Raised when signing up with a username that already exists."""

    message = "Error creating user (username may already be taken)"

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__()


class StoreFailureError(AquaTrackerError):
    """Raised when the backing store fails; the cause is chained, not shown."""

    message = "Database error"


class ConfigurationError(AquaTrackerError):
    """Raised at startup when required configuration is missing."""
