# ABOUTME: Rate limiting package for enforcing per-user action quotas.
# ABOUTME: Exports RateLimiter service, default policies, exceptions and display helper.

from whisper_core.rate_limit.display import RateLimitDisplay
from whisper_core.rate_limit.exceptions import RateLimitExceeded, UnknownAction
from whisper_core.rate_limit.policies import DEFAULT_POLICIES
from whisper_core.rate_limit.service import RateLimiter

__all__ = [
    "DEFAULT_POLICIES",
    "RateLimitDisplay",
    "RateLimitExceeded",
    "RateLimiter",
    "UnknownAction",
]
