# ABOUTME: Shared pytest fixtures for whisper-core tests.
# ABOUTME: Provides temporary databases and a profile factory.

from collections.abc import Callable
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

from whisper_core.database import DatabaseService
from whisper_core.models import UserProfile


@pytest.fixture
def test_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine("sqlite:///:memory:")
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture
def test_session(test_engine):
    """Create a database session for testing."""
    with Session(test_engine) as session:
        yield session


@pytest.fixture
def db_service(tmp_path: Path) -> DatabaseService:
    """Create a DatabaseService with a temporary database."""
    service = DatabaseService(db_path=tmp_path / "test.db")
    service.init_db()
    return service


@pytest.fixture
def make_profile() -> Callable[..., UserProfile]:
    """Factory for UserProfile objects with sensible defaults."""

    def _make(
        user_id: str,
        interests: list[str] | None = None,
        career: str | None = None,
        mood: str | None = None,
        last_active_at: int = 0,
    ) -> UserProfile:
        return UserProfile(
            id=user_id,
            interests=["chess"] if interests is None else interests,
            career=career,
            mood=mood,
            last_active_at=last_active_at,
        )

    return _make
