# ABOUTME: Custom exceptions for matchmaking operations.
# ABOUTME: An empty candidate pool is not an error and has no exception here.

from whisper_core.errors import WhisperCoreError


class UserNotFound(WhisperCoreError):
    """Exception raised when the acting user has no profile."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"No profile found for user '{user_id}'")
        self.user_id = user_id
