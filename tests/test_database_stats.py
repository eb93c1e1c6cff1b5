# ABOUTME: Tests for database statistics functionality.
# ABOUTME: Covers get_database_stats totals and the per-action distribution.

from whisper_core.database.service import DatabaseService
from whisper_core.database.stats import get_database_stats
from whisper_core.models import ActionRecord, ActionType, MatchRecord, UserProfile


class TestGetDatabaseStats:
    """Tests for the get_database_stats function."""

    def test_returns_dict_with_required_keys(self, db_service: DatabaseService) -> None:
        """Test that get_database_stats returns a dict with all required keys."""
        stats = get_database_stats(db_service)

        assert set(stats) == {
            "total_profiles",
            "total_action_records",
            "total_matches",
            "action_distribution",
        }

    def test_empty_database(self, db_service: DatabaseService) -> None:
        """Test that an empty database reports zeros."""
        stats = get_database_stats(db_service)

        assert stats["total_profiles"] == 0
        assert stats["total_action_records"] == 0
        assert stats["total_matches"] == 0
        assert stats["action_distribution"] == {}

    def test_counts_records(self, db_service: DatabaseService) -> None:
        """Test that totals and the action distribution reflect stored records."""
        db_service.save_profile(UserProfile(id="a", interests=["art"]))
        db_service.save_profile(UserProfile(id="b", interests=["art"]))
        for action in (ActionType.SEND_WHISPER, ActionType.SEND_WHISPER, ActionType.SEND_MESSAGE):
            db_service.save_action_record(ActionRecord(user_id="a", action=action, timestamp=1))
        db_service.save_match_record(
            MatchRecord(user_id="a", matched_user_id="b", score=3, shared_interests=["art"])
        )

        stats = get_database_stats(db_service)

        assert stats["total_profiles"] == 2
        assert stats["total_action_records"] == 3
        assert stats["total_matches"] == 1
        assert stats["action_distribution"] == {"send-whisper": 2, "send-message": 1}
