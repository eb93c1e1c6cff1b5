# ABOUTME: SQLModel for recorded matchmaking outcomes and the result types returned to callers.
# ABOUTME: Match records are directional and retained indefinitely for history and stats.

from pydantic import BaseModel
from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from whisper_core.clock import now_ms


class MatchRecord(SQLModel, table=True):
    """A completed match from `user_id`'s perspective."""

    __tablename__ = "match_records"

    id: int | None = Field(default=None, primary_key=True)
    user_id: str = Field(index=True)
    matched_user_id: str = Field(index=True)
    score: float
    shared_interests: list[str] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    created_at: int = Field(default_factory=now_ms, index=True)


class MatchScore(BaseModel):
    """Compatibility between two profiles."""

    score: float = 0.0
    shared_interests: list[str] = []


class MatchResult(BaseModel):
    """What a caller learns about a new match. Identity fields are never exposed."""

    matched_user_id: str
    score: float
    shared_interests: list[str]
    match_career: str | None = None
    match_mood: str | None = None


class MatchStats(BaseModel):
    """Aggregated view over a user's entire match history."""

    total_matches: int = 0
    avg_score: float = 0.0
    top_interests: list[str] = []
    weekly_matches: int = 0
