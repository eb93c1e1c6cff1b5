# ABOUTME: SQLModel for the user profile snapshot read by matchmaking.
# ABOUTME: Interests are stored as a JSON list to keep the user's own ordering.

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from whisper_core.clock import now_ms


class UserProfile(SQLModel, table=True):
    """Interests, career and mood of a user, owned by user management."""

    __tablename__ = "user_profiles"

    id: str = Field(primary_key=True)
    interests: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    career: str | None = None
    mood: str | None = None
    last_active_at: int = Field(default_factory=now_ms, index=True)
