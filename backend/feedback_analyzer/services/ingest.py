import logging
from datetime import datetime, timezone
from typing import Dict, List
from sqlalchemy.orm import Session

from ..models import Tweet

logger = logging.getLogger(__name__)


def parse_timestamp(value):
    """Accept datetimes or ISO-8601 strings. Aware values are stored as naive UTC."""
    if value is None:
        return None
    if not isinstance(value, datetime):
        value = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def store_tweets(db: Session, tweets: List[Dict]) -> int:
    """
    Store tweets in the database.

    Args:
        db: Database session
        tweets: Dicts with tweet_id, text, author and timestamp

    Returns:
        Number of new tweets added

    Note:
        - Tweets already stored (by tweet_id) are skipped, including
          repeats within the same batch
    """
    new_count = 0
    seen = set()

    for tweet_data in tweets:
        tweet_id = str(tweet_data["tweet_id"])

        if tweet_id in seen:
            continue
        seen.add(tweet_id)

        existing = db.query(Tweet).filter(Tweet.tweet_id == tweet_id).first()
        if existing:
            continue

        tweet = Tweet(
            tweet_id=tweet_id,
            text=tweet_data["text"],
            author=tweet_data.get("author", "unknown"),
            timestamp=parse_timestamp(tweet_data.get("timestamp")) or datetime.utcnow()
        )
        db.add(tweet)
        new_count += 1

    db.commit()
    logger.info(f"Stored {new_count} new tweets ({len(tweets)} received)")
    return new_count
