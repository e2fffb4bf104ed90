"""
Batch analysis of unprocessed tweets.

For every tweet that has no analysis row yet:
1. Suggest a category (keyword rules or prompted generation)
2. Score urgency
3. Store the analysis with final_category = suggested_category

Tweets are processed one at a time. A failure on one tweet is logged and
skipped; it never stops the batch.
"""

import logging
from typing import Dict, List, Sequence
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .categorizer import categorize
from .corrections import fetch_recent_corrections
from .urgency import score_urgency
from ..models import Analysis, Tweet

logger = logging.getLogger(__name__)


def analyze_text(text: str, corrections: Sequence = (), generator=None) -> Dict:
    """
    Categorize and score a single tweet.

    Returns:
        Dictionary with suggested_category, confidence_score, urgency_score
    """
    category = categorize(text, corrections, generator)
    urgency = score_urgency(text)

    return {
        "suggested_category": category["category"],
        "confidence_score": category["confidence"],
        "urgency_score": urgency
    }


def get_unanalyzed_tweets(db: Session) -> List[Tweet]:
    """Tweets without an analysis row."""
    return db.query(Tweet).outerjoin(
        Analysis, Tweet.tweet_id == Analysis.tweet_id
    ).filter(Analysis.id.is_(None)).order_by(Tweet.timestamp, Tweet.tweet_id).all()


def analyze_unprocessed(db: Session, generator=None) -> Dict:
    """
    Analyze every tweet that hasn't been analyzed yet.

    Args:
        db: Database session
        generator: Optional text generator; None means keyword-only mode

    Returns:
        dict: analyzed (count of stored analyses) and a status message
    """
    tweets = get_unanalyzed_tweets(db)

    if not tweets:
        return {"analyzed": 0, "message": "No new tweets to analyze"}

    corrections = []
    if generator is not None:
        try:
            corrections = fetch_recent_corrections(db)
        except SQLAlchemyError as e:
            logger.warning(f"Could not load recent corrections, continuing without examples: {str(e)}")
            db.rollback()

    # Plain values so a rollback (which expires ORM objects) never forces a reload
    pending = [(tweet.tweet_id, tweet.text) for tweet in tweets]
    analyzed = 0

    for tweet_id, text in pending:
        try:
            result = analyze_text(text, corrections, generator)

            analysis = Analysis(
                tweet_id=tweet_id,
                suggested_category=result["suggested_category"],
                final_category=result["suggested_category"],  # Same as suggested until a reviewer overrides
                confidence_score=result["confidence_score"],
                urgency_score=result["urgency_score"]
            )
            db.add(analysis)

            # Commit per tweet so one failure doesn't lose earlier progress
            db.commit()

            analyzed += 1
            logger.info(f"Analyzed {tweet_id}: {result['suggested_category']} (urgency: {result['urgency_score']})")

        except Exception as e:
            logger.error(f"Failed to analyze tweet {tweet_id}: {str(e)}")
            db.rollback()

    return {
        "analyzed": analyzed,
        "message": f"Successfully analyzed {analyzed} tweets"
    }
