# ABOUTME: Database service for managing SQLite connections and the core's record stores.
# ABOUTME: Provides the insert, range-query and batched-delete operations the core relies on.

from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from sqlmodel import Session, SQLModel, col, create_engine, select

from whisper_core.models import ActionRecord, ActionType, MatchRecord, UserProfile


class DatabaseService:
    """Service for managing database connections and operations."""

    DEFAULT_DB_PATH = Path.home() / ".whisper-core" / "data.db"

    def __init__(self, db_path: Path | None = None) -> None:
        """Initialize the database service.

        Args:
            db_path: Path to the SQLite database file. Defaults to ~/.whisper-core/data.db
        """
        self.db_path = db_path if db_path is not None else self.DEFAULT_DB_PATH
        self._engine = create_engine(f"sqlite:///{self.db_path}", echo=False)

    def init_db(self) -> None:
        """Initialize the database by creating tables and parent directories."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        SQLModel.metadata.create_all(self._engine)

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Get a database session as a context manager.

        Yields:
            SQLModel Session for database operations.
        """
        with Session(self._engine) as session:
            yield session

    def save_action_record(self, record: ActionRecord) -> ActionRecord:
        """Append an action record to the log.

        Args:
            record: The ActionRecord to save.

        Returns:
            The saved ActionRecord with ID populated.
        """
        with self.get_session() as session:
            session.add(record)
            session.commit()
            session.refresh(record)
            return record

    def get_action_records_since(
        self,
        user_id: str,
        action: ActionType,
        since: int,
    ) -> list[ActionRecord]:
        """Retrieve a user's records of one action kind at or after a timestamp.

        Args:
            user_id: The acting user.
            action: The action kind to filter by.
            since: Inclusive lower bound in epoch milliseconds.

        Returns:
            List of ActionRecord objects, oldest first.
        """
        with self.get_session() as session:
            statement = (
                select(ActionRecord)
                .where(ActionRecord.user_id == user_id)
                .where(ActionRecord.action == action)
                .where(ActionRecord.timestamp >= since)
                .order_by(col(ActionRecord.timestamp))
            )
            return list(session.exec(statement).all())

    def delete_action_records_before(self, cutoff: int, limit: int) -> int:
        """Delete up to `limit` action records older than `cutoff`.

        Args:
            cutoff: Exclusive upper bound in epoch milliseconds.
            limit: Maximum number of records removed in this call.

        Returns:
            Number of records deleted.
        """
        with self.get_session() as session:
            statement = (
                select(ActionRecord)
                .where(ActionRecord.timestamp < cutoff)
                .order_by(col(ActionRecord.timestamp))
                .limit(limit)
            )
            expired = list(session.exec(statement).all())
            for record in expired:
                session.delete(record)
            session.commit()
            return len(expired)

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Insert or replace a user profile.

        Args:
            profile: The UserProfile to save.

        Returns:
            The stored UserProfile.
        """
        with self.get_session() as session:
            merged = session.merge(profile)
            session.commit()
            session.refresh(merged)
            return merged

    def get_profile(self, user_id: str) -> UserProfile | None:
        """Retrieve a user profile by id.

        Args:
            user_id: The profile id to look up.

        Returns:
            The UserProfile if found, None otherwise.
        """
        with self.get_session() as session:
            return session.get(UserProfile, user_id)

    def get_recently_active_profiles(self, limit: int) -> list[UserProfile]:
        """Retrieve the most recently active profiles.

        Args:
            limit: Maximum number of profiles to return.

        Returns:
            List of UserProfile objects ordered by last_active_at, newest first.
        """
        with self.get_session() as session:
            statement = (
                select(UserProfile).order_by(col(UserProfile.last_active_at).desc()).limit(limit)
            )
            return list(session.exec(statement).all())

    def save_match_record(self, record: MatchRecord) -> MatchRecord:
        """Append a match record to the history.

        Args:
            record: The MatchRecord to save.

        Returns:
            The saved MatchRecord with ID populated.
        """
        with self.get_session() as session:
            session.add(record)
            session.commit()
            session.refresh(record)
            return record

    def get_match_records(
        self,
        user_id: str,
        since: int | None = None,
        matched_user_id: str | None = None,
        limit: int | None = None,
        newest_first: bool = False,
    ) -> list[MatchRecord]:
        """Retrieve match records initiated by a user.

        Args:
            user_id: The initiating user.
            since: Optional exclusive lower bound on created_at.
            matched_user_id: Optional counterpart to filter by.
            limit: Maximum number of records to return. None for no limit.
            newest_first: Order by created_at descending instead of ascending.

        Returns:
            List of MatchRecord objects.
        """
        with self.get_session() as session:
            statement = select(MatchRecord).where(MatchRecord.user_id == user_id)
            if since is not None:
                statement = statement.where(MatchRecord.created_at > since)
            if matched_user_id is not None:
                statement = statement.where(MatchRecord.matched_user_id == matched_user_id)
            if newest_first:
                statement = statement.order_by(
                    col(MatchRecord.created_at).desc(), col(MatchRecord.id).desc()
                )
            else:
                statement = statement.order_by(col(MatchRecord.created_at), col(MatchRecord.id))
            if limit is not None:
                statement = statement.limit(limit)
            return list(session.exec(statement).all())
