# ABOUTME: Display helper for a user's quota status using Rich formatting.
# ABOUTME: Provides methods to render per-action quota state as dictionaries and Rich panels.

import math
from typing import Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from whisper_core.clock import MINUTE_MS, now_ms
from whisper_core.rate_limit.service import RateLimiter


class RateLimitDisplay:
    """Display helper for rate limiter status.

    Provides methods to format and render quota information for every
    configured action kind of a single user.
    """

    WARNING_THRESHOLD = 2

    def __init__(self, rate_limiter: RateLimiter) -> None:
        """Initialize the display helper.

        Args:
            rate_limiter: The RateLimiter instance to get status from.
        """
        self._rate_limiter = rate_limiter

    def _format_time_until_reset(self, reset_at: int, now: int) -> str:
        """Format the time remaining until reset as a human-readable string.

        Args:
            reset_at: Epoch milliseconds when quota frees up.
            now: Current epoch milliseconds.

        Returns:
            Human-readable string like "5h 23m" or "45m".
        """
        total_minutes = math.ceil((reset_at - now) / MINUTE_MS)

        if total_minutes <= 0:
            return "now"

        hours, minutes = divmod(total_minutes, 60)
        if hours > 0:
            return f"{hours}h {minutes}m"
        else:
            return f"{minutes}m"

    def get_status_rows(self, user_id: str, now: int | None = None) -> list[dict[str, Any]]:
        """Get the quota status of every configured action.

        Args:
            user_id: The user whose quotas are reported.
            now: Current epoch milliseconds. Defaults to the wall clock.

        Returns:
            One dictionary per action containing:
                - action: Action kind value
                - limit: Configured quota
                - used: Actions recorded within the window
                - remaining: Actions still allowed within the window
                - resets_in: Human-readable wait until quota frees up
                - is_warning: True if remaining is below the warning threshold
        """
        now = now_ms() if now is None else now
        rows = []
        for action, policy in self._rate_limiter.policies.items():
            status = self._rate_limiter.check_quota(user_id, action, now)
            rows.append(
                {
                    "action": action.value,
                    "limit": policy.limit,
                    "used": status.used,
                    "remaining": status.remaining,
                    "resets_in": self._format_time_until_reset(status.reset_at, now),
                    "is_warning": status.remaining < self.WARNING_THRESHOLD,
                }
            )
        return rows

    def render_status(self, user_id: str, now: int | None = None) -> Panel:
        """Render the quota status of a user as a Rich Panel.

        Args:
            user_id: The user whose quotas are reported.
            now: Current epoch milliseconds. Defaults to the wall clock.

        Returns:
            A Rich Panel containing one row per action kind.
        """
        rows = self.get_status_rows(user_id, now)

        table = Table(show_header=True, box=None, padding=(0, 1))
        table.add_column("Action", style="cyan")
        table.add_column("Used")
        table.add_column("Remaining")
        table.add_column("Resets In", style="dim")

        exhausted = 0
        for row in rows:
            style = "red bold" if row["is_warning"] else "green"
            if row["remaining"] == 0:
                exhausted += 1
            table.add_row(
                row["action"],
                f"{row['used']} / {row['limit']}",
                Text(str(row["remaining"]), style=style),
                row["resets_in"],
            )

        title = f"Rate Limits for {user_id}"
        border_style = "green"
        if exhausted:
            title = f"⚠️  {exhausted} Rate Limit(s) Reached for {user_id}"
            border_style = "red"

        return Panel(table, title=title, border_style=border_style, padding=(1, 2))
