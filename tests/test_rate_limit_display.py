# ABOUTME: Tests for the RateLimitDisplay class.
# ABOUTME: Covers per-action status rows and Rich panel rendering.

import pytest
from rich.panel import Panel

from whisper_core.clock import HOUR_MS
from whisper_core.database import DatabaseService
from whisper_core.models import ActionType, RateLimitPolicy
from whisper_core.rate_limit import RateLimitDisplay, RateLimiter

USER = "user-1"


@pytest.fixture
def rate_limiter(db_service: DatabaseService) -> RateLimiter:
    """Create a RateLimiter with two test policies."""
    return RateLimiter(
        db_service=db_service,
        policies={
            ActionType.SEND_WHISPER: RateLimitPolicy(limit=3, window_ms=HOUR_MS),
            ActionType.SEND_MESSAGE: RateLimitPolicy(limit=10, window_ms=HOUR_MS),
        },
    )


@pytest.fixture
def display(rate_limiter: RateLimiter) -> RateLimitDisplay:
    """Create a RateLimitDisplay with a rate limiter."""
    return RateLimitDisplay(rate_limiter=rate_limiter)


class TestRateLimitDisplayInit:
    """Tests for RateLimitDisplay initialization."""

    def test_init_with_rate_limiter(self, rate_limiter: RateLimiter) -> None:
        """RateLimitDisplay should be initialized with a RateLimiter."""
        display = RateLimitDisplay(rate_limiter=rate_limiter)
        assert display._rate_limiter is rate_limiter


class TestFormatTimeUntilReset:
    """Tests for the reset formatting helper."""

    def test_now_when_already_free(self, display: RateLimitDisplay) -> None:
        """A reset at or before now should read 'now'."""
        assert display._format_time_until_reset(1000, 1000) == "now"

    def test_minutes_only(self, display: RateLimitDisplay) -> None:
        """Under an hour should show minutes rounded up."""
        assert display._format_time_until_reset(45 * 60 * 1000 - 1, 0) == "45m"

    def test_hours_and_minutes(self, display: RateLimitDisplay) -> None:
        """Over an hour should show hours and minutes."""
        assert display._format_time_until_reset((5 * 60 + 23) * 60 * 1000, 0) == "5h 23m"


class TestGetStatusRows:
    """Tests for get_status_rows."""

    def test_one_row_per_policy(self, display: RateLimitDisplay) -> None:
        """Each configured action should get a row."""
        rows = display.get_status_rows(USER, now=0)

        assert [row["action"] for row in rows] == ["send-whisper", "send-message"]

    def test_fresh_user(self, display: RateLimitDisplay) -> None:
        """A user without actions should have the full quota."""
        row = display.get_status_rows(USER, now=0)[0]

        assert row["used"] == 0
        assert row["remaining"] == 3
        assert row["resets_in"] == "now"
        assert row["is_warning"] is False

    def test_usage_and_warning(self, display: RateLimitDisplay, rate_limiter: RateLimiter) -> None:
        """Recorded actions should be reflected and low quota flagged."""
        rate_limiter.record_action(USER, ActionType.SEND_WHISPER, now=0)
        rate_limiter.record_action(USER, ActionType.SEND_WHISPER, now=0)

        row = display.get_status_rows(USER, now=30 * 60 * 1000)[0]

        assert row["used"] == 2
        assert row["remaining"] == 1
        assert row["resets_in"] == "30m"
        assert row["is_warning"] is True

    def test_overshoot_reports_actual_usage(
        self, display: RateLimitDisplay, rate_limiter: RateLimiter
    ) -> None:
        """Concurrent overshoot past the limit should show the real count."""
        for _ in range(4):
            rate_limiter.record_action(USER, ActionType.SEND_WHISPER, now=0)

        row = display.get_status_rows(USER, now=1)[0]

        assert row["used"] == 4
        assert row["remaining"] == 0


class TestRenderStatus:
    """Tests for render_status."""

    def test_returns_panel(self, display: RateLimitDisplay) -> None:
        """render_status should return a green Rich Panel when nothing is exhausted."""
        panel = display.render_status(USER, now=0)

        assert isinstance(panel, Panel)
        assert panel.border_style == "green"
        assert USER in str(panel.title)

    def test_exhausted_turns_red(self, display: RateLimitDisplay, rate_limiter: RateLimiter) -> None:
        """An exhausted action should change the title and border."""
        for _ in range(3):
            rate_limiter.record_action(USER, ActionType.SEND_WHISPER, now=0)

        panel = display.render_status(USER, now=1)

        assert panel.border_style == "red"
        assert "1 Rate Limit(s) Reached" in str(panel.title)
