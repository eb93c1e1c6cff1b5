# ABOUTME: Weighted compatibility scoring between two user profiles.
# ABOUTME: Shared interests weigh 3, same career 2, same mood 1, complementary mood 0.5.

from whisper_core.models import MatchScore, UserProfile

SHARED_INTEREST_WEIGHT = 3.0
SAME_CAREER_WEIGHT = 2.0
SAME_MOOD_WEIGHT = 1.0
COMPLEMENTARY_MOOD_WEIGHT = 0.5

# Only checked from the initiator's mood towards the candidate's.
COMPLEMENTARY_MOODS: dict[str, frozenset[str]] = {
    "anxious": frozenset({"calm", "supportive"}),
    "curious": frozenset({"knowledgeable", "excited"}),
    "lonely": frozenset({"friendly", "outgoing"}),
    "motivated": frozenset({"ambitious", "driven"}),
}


def score_profiles(a: UserProfile, b: UserProfile) -> MatchScore:
    """Score how compatible `b` is as a match for `a`.

    Interests are compared case-insensitively and reported in `a`'s order
    and spelling. Career is compared case-insensitively, mood exactly.

    Args:
        a: The initiating user's profile.
        b: The candidate's profile.

    Returns:
        MatchScore with the total score and the shared interests.
    """
    score = 0.0
    shared_interests: list[str] = []

    b_interests = {interest.lower() for interest in b.interests}
    seen: set[str] = set()
    for interest in a.interests:
        key = interest.lower()
        if key in b_interests and key not in seen:
            seen.add(key)
            shared_interests.append(interest)
            score += SHARED_INTEREST_WEIGHT

    if a.career and b.career and a.career.lower() == b.career.lower():
        score += SAME_CAREER_WEIGHT

    if a.mood and b.mood:
        if a.mood == b.mood:
            score += SAME_MOOD_WEIGHT
        elif b.mood in COMPLEMENTARY_MOODS.get(a.mood, frozenset()):
            score += COMPLEMENTARY_MOOD_WEIGHT

    return MatchScore(score=score, shared_interests=shared_interests)
