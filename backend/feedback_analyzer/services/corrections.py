"""
Reviewer corrections.

Overrides are written to an append-only log and the latest ones are handed
back to the categorizer as few-shot examples.
"""

import logging
from typing import List
from sqlalchemy.orm import Session
from ..models import Analysis, Correction, Tweet

logger = logging.getLogger(__name__)

RECENT_CORRECTIONS_LIMIT = 5


class AnalysisNotFoundError(Exception):
    """Raised when a tweet has no analysis to correct."""
    pass


def record_correction(db: Session, tweet_id: str, new_category: str) -> Correction:
    """
    Override a tweet's category and log the correction.

    Args:
        db: Database session
        tweet_id: Tweet whose analysis is overridden
        new_category: Any label; unknown categories are created implicitly

    Returns:
        The new Correction row

    Raises:
        AnalysisNotFoundError: If the tweet has not been analyzed
    """
    row = db.query(Analysis, Tweet.text).join(
        Tweet, Analysis.tweet_id == Tweet.tweet_id
    ).filter(Analysis.tweet_id == tweet_id).first()

    if not row:
        raise AnalysisNotFoundError(f"Tweet not found: {tweet_id}")

    analysis, tweet_text = row
    old_category = analysis.final_category

    correction = Correction(
        tweet_id=tweet_id,
        original_category=old_category,
        corrected_category=new_category,
        tweet_text=tweet_text,
    )

    try:
        db.add(correction)
        analysis.final_category = new_category
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(correction)
    logger.info(f"Category overridden: {tweet_id} from {old_category} to {new_category}")
    return correction


def fetch_recent_corrections(db: Session, limit: int = RECENT_CORRECTIONS_LIMIT) -> List[Correction]:
    """
    Get the most recent corrections, newest first.

    Ties on corrected_at are broken by insertion order so the result is
    stable even when several corrections share a timestamp.
    """
    return db.query(Correction).order_by(
        Correction.corrected_at.desc(),
        Correction.id.desc()
    ).limit(limit).all()
