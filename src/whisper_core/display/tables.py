# ABOUTME: Rich table rendering for match results and match history.
# ABOUTME: Provides MatchTable for displaying recorded matches in formatted tables.

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from whisper_core.clock import to_datetime
from whisper_core.models import MatchRecord, MatchResult


class MatchTable:
    """Renders match data as Rich tables.

    Creates formatted tables with truncated interest lists and row numbers.
    """

    MAX_INTERESTS_LENGTH = 40

    def _truncate(self, text: str | None, max_length: int) -> str:
        """Truncate text to max length with ellipsis.

        Args:
            text: The text to truncate, or None.
            max_length: Maximum length before truncation.

        Returns:
            Truncated text with ellipsis, or empty string if None.
        """
        if text is None:
            return ""
        if len(text) <= max_length:
            return text
        return text[: max_length - 3] + "..."

    def render(self, records: list[MatchRecord], title: str | None = None) -> Table:
        """Render match records as a Rich Table.

        Args:
            records: List of MatchRecord objects to display.
            title: Optional title for the table.

        Returns:
            Rich Table with formatted match history.
        """
        table = Table(title=title, show_lines=False)

        table.add_column("#", style="dim", width=4)
        table.add_column("Matched User", style="cyan", no_wrap=True)
        table.add_column("Score", style="yellow", justify="right")
        table.add_column("Shared Interests", style="green", max_width=self.MAX_INTERESTS_LENGTH)
        table.add_column("When", style="dim")

        for idx, record in enumerate(records, 1):
            interests = self._truncate(
                ", ".join(record.shared_interests), self.MAX_INTERESTS_LENGTH
            )
            when = to_datetime(record.created_at).strftime("%Y-%m-%d %H:%M UTC")
            table.add_row(str(idx), record.matched_user_id, f"{record.score:g}", interests, when)

        return table

    def render_result(self, result: MatchResult) -> Panel:
        """Render a freshly found match as a Rich Panel.

        Args:
            result: The match returned by the engine.

        Returns:
            Rich Panel listing the match's score, interests, career and mood.
        """
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Label", style="dim")
        table.add_column("Value")

        table.add_row("Match:", Text(result.matched_user_id, style="cyan"))
        table.add_row("Score:", Text(f"{result.score:g}", style="yellow"))
        table.add_row("Shared:", ", ".join(result.shared_interests) or "-")
        table.add_row("Career:", result.match_career or "-")
        table.add_row("Mood:", result.match_mood or "-")

        return Panel(table, title="New Match", border_style="green", padding=(1, 2))
