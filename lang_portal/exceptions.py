"""Custom exception hierarchy for the Lang Portal application."""

from starlette import status

# Response detail for failures that must not leak internals
UNEXPECTED_ERROR_DETAIL = "An unexpected error occurred. Please try again later."


class LangPortalError(Exception):
    """Base exception for all Lang Portal errors."""

    def __init__(
        self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    ) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(LangPortalError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND)


class WordNotFoundError(NotFoundError):
    """Word not found error."""

    def __init__(self, word_id: int | None = None) -> None:
        self.word_id = word_id
        if word_id is not None:
            super().__init__(f"Word with id {word_id} not found")
        else:
            super().__init__("Word not found")


class GroupNotFoundError(NotFoundError):
    """Group not found error."""

    def __init__(self, group_id: int | None = None) -> None:
        self.group_id = group_id
        if group_id is not None:
            super().__init__(f"Group with id {group_id} not found")
        else:
            super().__init__("Group not found")


class StudyActivityNotFoundError(NotFoundError):
    """Study activity not found error."""

    def __init__(self, activity_id: int | None = None) -> None:
        self.activity_id = activity_id
        if activity_id is not None:
            super().__init__(f"Study activity with id {activity_id} not found")
        else:
            super().__init__("Study activity not found")


class StudySessionNotFoundError(NotFoundError):
    """Study session not found error."""

    def __init__(self, session_id: int | None = None) -> None:
        self.session_id = session_id
        if session_id is not None:
            super().__init__(f"Study session with id {session_id} not found")
        else:
            super().__init__("Study session not found")


class ConstraintViolationError(LangPortalError):
    """A write was rejected by a foreign key or uniqueness constraint."""

    def __init__(self, message: str = "The request conflicts with existing data") -> None:
        """Initialize with message and 409 status code."""
        super().__init__(message, status_code=status.HTTP_409_CONFLICT)
