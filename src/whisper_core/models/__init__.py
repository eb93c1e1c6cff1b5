# ABOUTME: Models package for Whisper core data structures.
# ABOUTME: Exports the action log, profile and match SQLModels with their result types.

from whisper_core.models.match import MatchRecord, MatchResult, MatchScore, MatchStats
from whisper_core.models.profile import UserProfile
from whisper_core.models.rate_limit import (
    ActionRecord,
    ActionType,
    QuotaStatus,
    RateLimitPolicy,
)

__all__ = [
    "ActionRecord",
    "ActionType",
    "MatchRecord",
    "MatchResult",
    "MatchScore",
    "MatchStats",
    "QuotaStatus",
    "RateLimitPolicy",
    "UserProfile",
]
