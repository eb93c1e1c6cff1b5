# ABOUTME: CLI for operating the Whisper rate limiter and matchmaking core using Typer.
# ABOUTME: Provides profile, quota, cleanup, match, history, stats and status commands.

from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from whisper_core.clock import HOUR_MS, now_ms
from whisper_core.config import Settings, get_settings
from whisper_core.database import DatabaseService
from whisper_core.database.stats import get_database_stats
from whisper_core.display import (
    MatchTable,
    display_error,
    display_no_match,
    display_rate_limit_exceeded,
)
from whisper_core.logger import setup_logging
from whisper_core.matching import CandidatePoolSelector, MatchmakingEngine, UserNotFound
from whisper_core.models import UserProfile
from whisper_core.rate_limit import RateLimitDisplay, RateLimiter, RateLimitExceeded, UnknownAction

app = typer.Typer(
    name="whisper-core",
    help="Operate Whisper's per-user rate limits and interest-based matchmaking.",
    add_completion=False,
)

console = Console()


def _open_database(settings: Settings) -> DatabaseService:
    """Open the configured database, creating tables if needed."""
    db_service = DatabaseService(db_path=settings.db_path)
    db_service.init_db()
    return db_service


def _build_rate_limiter(settings: Settings) -> RateLimiter:
    """Create a RateLimiter over the configured database."""
    return RateLimiter(
        _open_database(settings),
        cleanup_batch_size=settings.cleanup_batch_size,
    )


def _build_engine(settings: Settings) -> MatchmakingEngine:
    """Create a MatchmakingEngine over the configured database."""
    db_service = _open_database(settings)
    return MatchmakingEngine(
        db_service,
        pool_selector=CandidatePoolSelector(db_service, pool_size=settings.candidate_pool_size),
        top_match_count=settings.top_match_count,
        anti_repeat_ms=settings.anti_repeat_hours * HOUR_MS,
        max_recent_matches=settings.max_recent_matches,
    )


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Whisper core CLI.

    Check and record rate-limited actions, and find interest-based
    matches for users.
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    if ctx.invoked_subcommand is None:
        console.print("[dim]Use --help to see available commands.[/dim]")


@app.command()
def init() -> None:
    """Create the database and its tables."""
    settings = get_settings()
    _open_database(settings)
    console.print(f"[green]Database ready at[/green] [cyan]{settings.db_path}[/cyan]")


@app.command("add-profile")
def add_profile(
    user_id: Annotated[str, typer.Argument(help="Profile id.")],
    interests: Annotated[
        list[str] | None,
        typer.Option("--interest", "-i", help="Interest, repeat for several."),
    ] = None,
    career: Annotated[str | None, typer.Option("--career", "-c", help="Career.")] = None,
    mood: Annotated[str | None, typer.Option("--mood", "-m", help="Current mood.")] = None,
) -> None:
    """Store or replace a user profile, marking it active now."""
    db_service = _open_database(get_settings())
    profile = db_service.save_profile(
        UserProfile(
            id=user_id,
            interests=interests or [],
            career=career,
            mood=mood,
            last_active_at=now_ms(),
        )
    )
    console.print(
        f"[green]Saved profile '[bold]{profile.id}[/bold]' "
        f"with {len(profile.interests)} interest(s).[/green]"
    )


@app.command()
def record(
    user_id: Annotated[str, typer.Argument(help="Acting user id.")],
    action: Annotated[str, typer.Argument(help="Action kind, e.g. send-whisper.")],
    enforce: Annotated[
        bool,
        typer.Option("--enforce/--no-enforce", help="Reject the action if over quota."),
    ] = True,
) -> None:
    """Record a rate-limited action for a user."""
    rate_limiter = _build_rate_limiter(get_settings())

    try:
        if enforce:
            rate_limiter.enforce_quota(user_id, action)
        rate_limiter.record_action(user_id, action)
    except RateLimitExceeded as e:
        console.print(display_rate_limit_exceeded(e.reason))
        raise typer.Exit(code=1) from None
    except UnknownAction as e:
        console.print(display_error(e))
        raise typer.Exit(code=1) from None

    status = rate_limiter.check_quota(user_id, action)
    console.print(
        f"[green]Recorded {action} for {user_id}.[/green] "
        f"[dim]Remaining: {status.remaining}[/dim]"
    )


@app.command()
def quota(
    user_id: Annotated[str, typer.Argument(help="Acting user id.")],
    action: Annotated[str, typer.Argument(help="Action kind, e.g. send-whisper.")],
) -> None:
    """Show whether a user may perform an action right now."""
    rate_limiter = _build_rate_limiter(get_settings())

    status = rate_limiter.get_status(user_id, action)
    if status is None:
        console.print(display_error(UnknownAction(action)))
        raise typer.Exit(code=1)

    if status.allowed:
        console.print(f"[green]Allowed.[/green] Remaining: [cyan]{status.remaining}[/cyan]")
    else:
        console.print(display_rate_limit_exceeded(status.reason or "Rate limit exceeded"))


@app.command()
def cleanup() -> None:
    """Delete one batch of action records older than the longest window."""
    rate_limiter = _build_rate_limiter(get_settings())
    deleted = rate_limiter.cleanup_expired()
    console.print(f"[green]Deleted {deleted} expired action record(s).[/green]")


@app.command()
def match(
    user_id: Annotated[str, typer.Argument(help="User asking for a match.")],
) -> None:
    """Find a new interest-based match for a user."""
    engine = _build_engine(get_settings())

    try:
        result = engine.find_match(user_id)
    except UserNotFound as e:
        console.print(display_error(e))
        raise typer.Exit(code=1) from None

    if result is None:
        console.print(display_no_match())
        return

    console.print(MatchTable().render_result(result))


@app.command()
def history(
    user_id: Annotated[str, typer.Argument(help="User whose matches to list.")],
    limit: Annotated[int, typer.Option("--limit", "-n", help="Number of matches.")] = 10,
) -> None:
    """List a user's most recent matches."""
    engine = _build_engine(get_settings())
    records = engine.get_recent_matches(user_id, limit=limit)

    if not records:
        console.print("[yellow]No matches yet.[/yellow]")
        return

    console.print(MatchTable().render(records, title=f"Recent Matches for {user_id}"))


@app.command()
def stats(
    user_id: Annotated[str, typer.Argument(help="User whose match history to summarise.")],
) -> None:
    """Show aggregated match statistics for a user."""
    engine = _build_engine(get_settings())
    match_stats = engine.get_match_stats(user_id)

    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Label", style="dim")
    table.add_column("Value")
    table.add_row("Total Matches:", f"[cyan]{match_stats.total_matches}[/cyan]")
    table.add_row("Average Score:", f"[cyan]{match_stats.avg_score}[/cyan]")
    table.add_row("This Week:", f"[cyan]{match_stats.weekly_matches}[/cyan]")
    table.add_row("Top Interests:", ", ".join(match_stats.top_interests) or "-")

    console.print(
        Panel(table, title=f"Match Stats for {user_id}", border_style="blue", padding=(1, 2))
    )


def _render_database_stats_panel(db_stats: dict[str, object]) -> Panel:
    """Render database statistics as a Rich Panel.

    Args:
        db_stats: Dictionary of database statistics from get_database_stats.

    Returns:
        Rich Panel containing formatted database statistics.
    """
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Label", style="dim")
    table.add_column("Value")

    table.add_row("Profiles:", f"[cyan]{db_stats.get('total_profiles', 0)}[/cyan]")
    table.add_row("Action Records:", f"[cyan]{db_stats.get('total_action_records', 0)}[/cyan]")
    table.add_row("Matches:", f"[cyan]{db_stats.get('total_matches', 0)}[/cyan]")

    distribution = db_stats.get("action_distribution", {})
    if distribution and isinstance(distribution, dict):
        parts = [f"{action}: {count}" for action, count in sorted(distribution.items())]
        table.add_row("By Action:", ", ".join(parts))

    return Panel(
        table,
        title="Database Statistics",
        border_style="blue",
        padding=(1, 2),
    )


@app.command()
def status(
    user_id: Annotated[
        str | None,
        typer.Option("--user", "-u", help="Show quota usage for this user."),
    ] = None,
) -> None:
    """Show database statistics and, optionally, a user's quota usage."""
    settings = get_settings()
    db_service = _open_database(settings)

    if user_id:
        rate_limiter = RateLimiter(db_service, cleanup_batch_size=settings.cleanup_batch_size)
        console.print(RateLimitDisplay(rate_limiter).render_status(user_id))
        console.print()

    console.print(_render_database_stats_panel(get_database_stats(db_service)))


if __name__ == "__main__":
    app()
