# ABOUTME: Rate limiter service that enforces per-user, per-action sliding-window quotas.
# ABOUTME: Derives quota state from the persisted action log on every check instead of counting.

import math
from collections.abc import Mapping
from types import MappingProxyType

from loguru import logger

from whisper_core.clock import MINUTE_MS, now_ms
from whisper_core.database import DatabaseService
from whisper_core.models import ActionRecord, ActionType, QuotaStatus, RateLimitPolicy
from whisper_core.rate_limit.exceptions import RateLimitExceeded, UnknownAction
from whisper_core.rate_limit.policies import DEFAULT_POLICIES


class RateLimiter:
    """Service that enforces sliding-window quotas per (user, action).

    Quota state is recomputed from the action log on each call, so it can
    never drift from the log. Check and record are separate, non-atomic
    steps: two concurrent callers for the same user and action may both see
    the last free slot and both record, overshooting the limit by one. The
    limit is therefore a soft limit.
    """

    DEFAULT_CLEANUP_BATCH_SIZE = 500

    def __init__(
        self,
        db_service: DatabaseService,
        policies: Mapping[ActionType, RateLimitPolicy] | None = None,
        cleanup_batch_size: int = DEFAULT_CLEANUP_BATCH_SIZE,
    ) -> None:
        """Initialize the rate limiter.

        Args:
            db_service: Database service holding the action log.
            policies: Quota per action kind. Defaults to DEFAULT_POLICIES.
            cleanup_batch_size: Maximum records removed per cleanup sweep.
        """
        self._db_service = db_service
        self._policies = dict(policies if policies is not None else DEFAULT_POLICIES)
        self._cleanup_batch_size = cleanup_batch_size

    @property
    def policies(self) -> Mapping[ActionType, RateLimitPolicy]:
        """The configured quota table, read-only."""
        return MappingProxyType(self._policies)

    @property
    def max_window_ms(self) -> int:
        """The longest window across all configured policies."""
        return max((policy.window_ms for policy in self._policies.values()), default=0)

    def _resolve(self, action: ActionType | str) -> tuple[ActionType, RateLimitPolicy]:
        """Resolve an action kind or its string value to its policy.

        Raises:
            UnknownAction: If the action is not a known kind or has no policy.
        """
        try:
            action_type = ActionType(action)
        except ValueError:
            raise UnknownAction(action) from None

        policy = self._policies.get(action_type)
        if policy is None:
            raise UnknownAction(action)
        return action_type, policy

    def check_quota(
        self,
        user_id: str,
        action: ActionType | str,
        now: int | None = None,
    ) -> QuotaStatus:
        """Compute the quota state for a user and action. Read-only.

        Args:
            user_id: The acting user.
            action: The action kind being checked.
            now: Current time in epoch milliseconds. Defaults to the wall clock.

        Returns:
            QuotaStatus with allowed flag, remaining count, reset time and,
            when not allowed, a human-readable reason.

        Raises:
            UnknownAction: If the action kind has no policy.
        """
        action_type, policy = self._resolve(action)
        now = now_ms() if now is None else now
        window_start = now - policy.window_ms

        records = self._db_service.get_action_records_since(user_id, action_type, window_start)
        count = len(records)
        allowed = count < policy.limit
        remaining = max(0, policy.limit - count)

        # The oldest record leaving the window frees one unit of quota
        if records:
            reset_at = min(record.timestamp for record in records) + policy.window_ms
        else:
            reset_at = now

        reason = None
        if not allowed:
            minutes = math.ceil((reset_at - now) / MINUTE_MS)
            reason = f"Rate limit exceeded. Try again in {minutes} minutes."

        logger.debug(
            "Quota for {} on {}: {}/{} used, allowed={}",
            user_id,
            action_type.value,
            count,
            policy.limit,
            allowed,
        )
        return QuotaStatus(
            allowed=allowed,
            used=count,
            remaining=remaining,
            reset_at=reset_at,
            reason=reason,
        )

    def enforce_quota(
        self,
        user_id: str,
        action: ActionType | str,
        now: int | None = None,
    ) -> None:
        """Raise if the user may not perform the action right now.

        Call this before performing the gated action.

        Args:
            user_id: The acting user.
            action: The action kind being performed.
            now: Current time in epoch milliseconds. Defaults to the wall clock.

        Raises:
            UnknownAction: If the action kind has no policy.
            RateLimitExceeded: If the quota is exhausted.
        """
        status = self.check_quota(user_id, action, now)
        if not status.allowed:
            reason = status.reason or "Rate limit exceeded"
            logger.warning("Rejected {} for {}: {}", ActionType(action).value, user_id, reason)
            raise RateLimitExceeded(reason, reset_at=status.reset_at)

    def record_action(
        self,
        user_id: str,
        action: ActionType | str,
        now: int | None = None,
    ) -> None:
        """Append an action to the log.

        Call this only after the gated action succeeded, so failed actions
        do not consume quota.

        Args:
            user_id: The acting user.
            action: The action kind performed.
            now: Time of the action in epoch milliseconds. Defaults to the wall clock.

        Raises:
            UnknownAction: If the action kind has no policy.
        """
        action_type, _ = self._resolve(action)
        record = ActionRecord(
            user_id=user_id,
            action=action_type,
            timestamp=now_ms() if now is None else now,
        )
        self._db_service.save_action_record(record)

    def cleanup_expired(self, now: int | None = None) -> int:
        """Delete one batch of action records older than the longest window.

        Intended to be run periodically by an external scheduler.

        Args:
            now: Current time in epoch milliseconds. Defaults to the wall clock.

        Returns:
            Number of records deleted.
        """
        now = now_ms() if now is None else now
        cutoff = now - self.max_window_ms
        deleted = self._db_service.delete_action_records_before(
            cutoff, limit=self._cleanup_batch_size
        )
        logger.info("Rate limit cleanup removed {} records older than {}", deleted, cutoff)
        return deleted

    def get_status(
        self,
        user_id: str,
        action: str,
        now: int | None = None,
    ) -> QuotaStatus | None:
        """Quota state for display purposes.

        Args:
            user_id: The acting user.
            action: The action kind value, e.g. "send-whisper".
            now: Current time in epoch milliseconds. Defaults to the wall clock.

        Returns:
            QuotaStatus, or None if the action is not a known kind.
        """
        try:
            return self.check_quota(user_id, action, now)
        except UnknownAction:
            return None
