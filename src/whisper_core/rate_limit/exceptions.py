# ABOUTME: Exception classes for rate limiting functionality.
# ABOUTME: Contains RateLimitExceeded for exhausted quotas and UnknownAction for bad action kinds.

from whisper_core.errors import WhisperCoreError


class RateLimitExceeded(WhisperCoreError):
    """Exception raised when a user's quota for an action is exhausted.

    The message is the human-readable reason and should be shown verbatim.

    Attributes:
        reason: Human-readable wait estimate.
        reset_at: Epoch milliseconds at which one unit of quota frees up.
    """

    def __init__(self, reason: str, reset_at: int | None = None) -> None:
        """Initialize the exception.

        Args:
            reason: Human-readable description of the error.
            reset_at: Optional epoch milliseconds when quota frees up.
        """
        super().__init__(reason)
        self.reason = reason
        self.reset_at = reset_at


class UnknownAction(WhisperCoreError):
    """Raised when an action kind has no configured policy."""

    def __init__(self, action: object) -> None:
        super().__init__(f"Unknown rate-limited action: {action!r}")
        self.action = action
