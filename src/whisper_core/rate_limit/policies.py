# ABOUTME: Default quota table for every rate-limited action kind.
# ABOUTME: Policies are injected into RateLimiter so callers and tests can supply their own.

from collections.abc import Mapping
from types import MappingProxyType

from whisper_core.clock import DAY_MS, HOUR_MS
from whisper_core.models import ActionType, RateLimitPolicy

DEFAULT_POLICIES: Mapping[ActionType, RateLimitPolicy] = MappingProxyType(
    {
        ActionType.SEND_WHISPER: RateLimitPolicy(limit=20, window_ms=HOUR_MS),
        ActionType.SEND_FRIEND_REQUEST: RateLimitPolicy(limit=30, window_ms=DAY_MS),
        ActionType.SEND_MYSTERY_WHISPER: RateLimitPolicy(limit=3, window_ms=DAY_MS),
        ActionType.SEND_MESSAGE: RateLimitPolicy(limit=100, window_ms=HOUR_MS),
        ActionType.CREATE_GROUP_SPACE: RateLimitPolicy(limit=10, window_ms=HOUR_MS),
        ActionType.SCHEDULE_WHISPER: RateLimitPolicy(limit=5, window_ms=HOUR_MS),
        ActionType.REQUEST_ADMIN_PROMOTION: RateLimitPolicy(limit=3, window_ms=DAY_MS),
        ActionType.REQUEST_SUPER_ADMIN_PROMOTION: RateLimitPolicy(limit=3, window_ms=DAY_MS),
    }
)
