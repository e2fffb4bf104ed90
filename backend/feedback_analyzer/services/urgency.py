"""
Tweet urgency scoring.

Additive keyword model producing an integer score from 1 to 10.
"""

from typing import List


# ============================================================================
# CONFIGURATION
# ============================================================================

BASE_SCORE = 5
MAX_SCORE = 10
POSITIVE_FLOOR = 2

# (keywords, bonus) - every matching tier adds its bonus
URGENCY_TIERS = {
    "critical": (["broken", "crash", "down", "blocking"], 3),
    "high": (["error", "500", "timeout", "fail"], 2),
    "medium": (["slow", "issue", "problem"], 1),
}

EMOTIONAL_GLYPHS = ["😤", "😓", "⚠️"]
EMOTIONAL_BONUS = 1

POSITIVE_KEYWORDS = ["love", "amazing", "incredible"]
POSITIVE_PENALTY = 2


def _has_any(text: str, keywords: List[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def score_urgency(text: str) -> int:
    """
    Score how urgently a tweet needs attention.

    Args:
        text: Tweet text

    Returns:
        Integer urgency from 1 (ignore) to 10 (drop everything)

    Order matters: tier bonuses are summed first, positive language then
    lowers the total (never below POSITIVE_FLOOR), and the result is capped
    at MAX_SCORE last.
    """
    text = text or ""
    lower = text.lower()
    score = BASE_SCORE

    for keywords, bonus in URGENCY_TIERS.values():
        if _has_any(lower, keywords):
            score += bonus

    if _has_any(text, EMOTIONAL_GLYPHS):
        score += EMOTIONAL_BONUS

    if _has_any(lower, POSITIVE_KEYWORDS):
        score = max(POSITIVE_FLOOR, score - POSITIVE_PENALTY)

    return min(score, MAX_SCORE)
