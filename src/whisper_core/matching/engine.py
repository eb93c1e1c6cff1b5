# ABOUTME: Matchmaking engine composing the candidate pool, scoring and history.
# ABOUTME: Picks a random match among the top scorers while avoiding recent repeats.

import math
import random
from collections import Counter

from loguru import logger

from whisper_core.clock import DAY_MS, HOUR_MS, now_ms
from whisper_core.database import DatabaseService
from whisper_core.matching.exceptions import UserNotFound
from whisper_core.matching.pool import CandidatePoolSelector
from whisper_core.matching.scoring import score_profiles
from whisper_core.models import MatchRecord, MatchResult, MatchStats

STATS_TOP_INTERESTS = 5
WEEK_MS = 7 * DAY_MS


class MatchmakingEngine:
    """Coordinates a matchmaking request.

    Handles the full flow including:
    - Loading the caller's profile
    - Excluding users matched within the anti-repeat window
    - Scoring the bounded candidate pool
    - Picking uniformly at random among the top scorers
    - Recording the match
    """

    DEFAULT_TOP_MATCH_COUNT = 10
    DEFAULT_ANTI_REPEAT_MS = 24 * HOUR_MS
    DEFAULT_RECENT_LIMIT = 10
    DEFAULT_MAX_RECENT_MATCHES = 50

    def __init__(
        self,
        db_service: DatabaseService,
        pool_selector: CandidatePoolSelector | None = None,
        rng: random.Random | None = None,
        top_match_count: int = DEFAULT_TOP_MATCH_COUNT,
        anti_repeat_ms: int = DEFAULT_ANTI_REPEAT_MS,
        max_recent_matches: int = DEFAULT_MAX_RECENT_MATCHES,
    ) -> None:
        """Initialize the matchmaking engine.

        Args:
            db_service: Database service holding profiles and match history.
            pool_selector: Candidate pool selector. Defaults to one over db_service.
            rng: Random source for the final pick. Defaults to a fresh Random.
            top_match_count: Size of the top-scored slice the match is drawn from.
            anti_repeat_ms: Window during which a matched user is not offered again.
            max_recent_matches: Upper bound on history returned by get_recent_matches.
        """
        self._db_service = db_service
        self._pool_selector = pool_selector or CandidatePoolSelector(db_service)
        self._rng = rng or random.Random()
        self._top_match_count = top_match_count
        self._anti_repeat_ms = anti_repeat_ms
        self._max_recent_matches = max_recent_matches

    def find_match(self, user_id: str, now: int | None = None) -> MatchResult | None:
        """Find and record a new match for a user.

        Args:
            user_id: The user asking for a match.
            now: Current time in epoch milliseconds. Defaults to the wall clock.

        Returns:
            MatchResult describing the chosen counterpart, or None when no
            candidate is eligible.

        Raises:
            UserNotFound: If the user has no profile.
        """
        now = now_ms() if now is None else now

        user = self._db_service.get_profile(user_id)
        if user is None:
            raise UserNotFound(user_id)

        recent = self._db_service.get_match_records(user_id, since=now - self._anti_repeat_ms)
        recently_matched = {record.matched_user_id for record in recent}

        candidates = self._pool_selector.select_pool(user.id, recently_matched)
        if not candidates:
            logger.info("No eligible candidates for {}", user_id)
            return None

        scored = [(candidate, score_profiles(user, candidate)) for candidate in candidates]
        # sorted() is stable, so ties keep the most-recently-active-first pool order
        scored = sorted(scored, key=lambda pair: pair[1].score, reverse=True)

        top_matches = scored[: min(self._top_match_count, len(scored))]
        candidate, match_score = top_matches[self._rng.randrange(len(top_matches))]

        self._db_service.save_match_record(
            MatchRecord(
                user_id=user.id,
                matched_user_id=candidate.id,
                score=match_score.score,
                shared_interests=match_score.shared_interests,
                created_at=now,
            )
        )
        logger.info(
            "Matched {} with {} (score {}, {} candidates)",
            user_id,
            candidate.id,
            match_score.score,
            len(scored),
        )

        return MatchResult(
            matched_user_id=candidate.id,
            score=match_score.score,
            shared_interests=match_score.shared_interests,
            match_career=candidate.career,
            match_mood=candidate.mood,
        )

    def has_recent_match(self, user_id: str, target_user_id: str, now: int | None = None) -> bool:
        """Whether `user_id` was matched with `target_user_id` within the anti-repeat window."""
        now = now_ms() if now is None else now
        records = self._db_service.get_match_records(
            user_id,
            since=now - self._anti_repeat_ms,
            matched_user_id=target_user_id,
            limit=1,
        )
        return len(records) > 0

    def get_recent_matches(
        self, user_id: str, limit: int = DEFAULT_RECENT_LIMIT
    ) -> list[MatchRecord]:
        """Return the user's latest match records, newest first.

        Args:
            user_id: The initiating user.
            limit: Number of records wanted, clamped to [1, max_recent_matches].

        Returns:
            List of MatchRecord objects.
        """
        limit = max(1, min(limit, self._max_recent_matches))
        return self._db_service.get_match_records(user_id, limit=limit, newest_first=True)

    def get_match_stats(self, user_id: str, now: int | None = None) -> MatchStats:
        """Aggregate the user's whole match history.

        Args:
            user_id: The initiating user.
            now: Current time in epoch milliseconds. Defaults to the wall clock.

        Returns:
            MatchStats with totals, average score rounded to one decimal, up
            to five most frequent shared interests and matches in the last
            seven days.
        """
        now = now_ms() if now is None else now
        history = self._db_service.get_match_records(user_id)
        if not history:
            return MatchStats()

        total = len(history)
        avg_score = sum(record.score for record in history) / total

        # most_common keeps first-seen order among equal counts
        interest_counts = Counter(
            interest for record in history for interest in record.shared_interests
        )
        top_interests = [
            interest for interest, _ in interest_counts.most_common(STATS_TOP_INTERESTS)
        ]

        week_ago = now - WEEK_MS
        weekly = sum(1 for record in history if record.created_at > week_ago)

        return MatchStats(
            total_matches=total,
            avg_score=math.floor(avg_score * 10 + 0.5) / 10,
            top_interests=top_interests,
            weekly_matches=weekly,
        )
