# ABOUTME: Bounded candidate pool selection for matchmaking.
# ABOUTME: Takes the most recently active profiles and filters out ineligible ones.

from collections.abc import Collection

from loguru import logger

from whisper_core.database import DatabaseService
from whisper_core.models import UserProfile


class CandidatePoolSelector:
    """Selects the profiles a user may be matched against."""

    DEFAULT_POOL_SIZE = 100

    def __init__(self, db_service: DatabaseService, pool_size: int = DEFAULT_POOL_SIZE) -> None:
        """Initialize the selector.

        Args:
            db_service: Database service holding user profiles.
            pool_size: Number of most recently active profiles considered.
        """
        self._db_service = db_service
        self._pool_size = pool_size

    def select_pool(
        self,
        exclude_user_id: str,
        exclude_ids: Collection[str] = (),
    ) -> list[UserProfile]:
        """Return eligible candidates, most recently active first.

        The size bound applies before filtering, so fewer than `pool_size`
        candidates may come back even when more profiles exist.

        Args:
            exclude_user_id: The user being matched.
            exclude_ids: Ids of users that must not be offered, e.g. recent matches.

        Returns:
            Filtered profiles in their original order. Empty when nobody is eligible.
        """
        pool = self._db_service.get_recently_active_profiles(limit=self._pool_size)
        excluded = set(exclude_ids)
        candidates = [
            profile
            for profile in pool
            if profile.id != exclude_user_id and profile.id not in excluded and profile.interests
        ]
        logger.debug(
            "Candidate pool for {}: {} of {} profiles eligible",
            exclude_user_id,
            len(candidates),
            len(pool),
        )
        return candidates
