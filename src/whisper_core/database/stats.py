# ABOUTME: Database statistics functionality for the status command.
# ABOUTME: Provides aggregated counts of profiles, logged actions and recorded matches.

from typing import Any

from sqlmodel import func, select

from whisper_core.database.service import DatabaseService
from whisper_core.models import ActionRecord, MatchRecord, UserProfile


def get_database_stats(db_service: DatabaseService) -> dict[str, Any]:
    """Get statistics about the stored records.

    Args:
        db_service: The DatabaseService instance to query.

    Returns:
        Dictionary containing:
            - total_profiles: Number of stored user profiles
            - total_action_records: Number of action records in the log
            - total_matches: Number of recorded matches
            - action_distribution: Dict mapping action kind value to record count
    """
    with db_service.get_session() as session:
        total_profiles = session.exec(select(func.count()).select_from(UserProfile)).one()
        total_action_records = session.exec(select(func.count()).select_from(ActionRecord)).one()
        total_matches = session.exec(select(func.count()).select_from(MatchRecord)).one()

        # Per-action breakdown
        action_stmt = select(ActionRecord.action, func.count()).group_by(
            ActionRecord.action  # type: ignore[arg-type]
        )
        action_distribution = {
            action.value: count for action, count in session.exec(action_stmt).all()
        }

    return {
        "total_profiles": total_profiles,
        "total_action_records": total_action_records,
        "total_matches": total_matches,
        "action_distribution": action_distribution,
    }
