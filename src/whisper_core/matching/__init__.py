# ABOUTME: Matchmaking package for interest-based user matching.
# ABOUTME: Exports the engine, candidate pool selector, scoring function and exceptions.

from whisper_core.matching.engine import MatchmakingEngine
from whisper_core.matching.exceptions import UserNotFound
from whisper_core.matching.pool import CandidatePoolSelector
from whisper_core.matching.scoring import COMPLEMENTARY_MOODS, score_profiles

__all__ = [
    "COMPLEMENTARY_MOODS",
    "CandidatePoolSelector",
    "MatchmakingEngine",
    "UserNotFound",
    "score_profiles",
]
