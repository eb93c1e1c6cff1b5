# ABOUTME: SQLModel for the append-only log of rate-limited actions, plus quota result types.
# ABOUTME: Persists action history so quota state can be derived instead of cached.

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field as PydanticField
from sqlmodel import Field, SQLModel

from whisper_core.clock import now_ms


class ActionType(str, Enum):
    """Types of rate-limited actions."""

    SEND_WHISPER = "send-whisper"
    SEND_FRIEND_REQUEST = "send-friend-request"
    SEND_MYSTERY_WHISPER = "send-mystery-whisper"
    SEND_MESSAGE = "send-message"
    CREATE_GROUP_SPACE = "create-group-space"
    SCHEDULE_WHISPER = "schedule-whisper"
    REQUEST_ADMIN_PROMOTION = "request-admin-promotion"
    REQUEST_SUPER_ADMIN_PROMOTION = "request-super-admin-promotion"


class ActionRecord(SQLModel, table=True):
    """One occurrence of a rate-limited action. Never updated once written."""

    __tablename__ = "action_records"

    id: int | None = Field(default=None, primary_key=True)
    user_id: str = Field(index=True)
    action: ActionType = Field(index=True)
    timestamp: int = Field(default_factory=now_ms, index=True)


class RateLimitPolicy(BaseModel):
    """Quota for a single action kind: at most `limit` actions per `window_ms`."""

    model_config = ConfigDict(frozen=True)

    limit: int = PydanticField(gt=0)
    window_ms: int = PydanticField(gt=0)


class QuotaStatus(BaseModel):
    """Derived quota state for a (user, action) pair at a given instant."""

    allowed: bool
    used: int = PydanticField(default=0, ge=0)
    remaining: int = PydanticField(ge=0)
    reset_at: int
    reason: str | None = None
