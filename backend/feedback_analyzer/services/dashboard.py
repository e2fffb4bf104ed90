"""
Read-side queries behind the dashboard endpoints.
"""

from typing import Dict, List
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..models import Analysis, Correction, Tweet

DASHBOARD_CORRECTIONS_LIMIT = 10


def get_dashboard_data(db: Session) -> Dict:
    """
    Summary counts, per-category stats, category list and recent corrections.
    """
    summary = {
        "total_tweets": db.query(Tweet).count(),
        "analyzed_tweets": db.query(Analysis).count(),
        "total_corrections": db.query(Correction).count(),
    }

    count_col = func.count(Analysis.id)
    stats_rows = db.query(
        Analysis.final_category,
        count_col,
        func.avg(Analysis.urgency_score)
    ).group_by(Analysis.final_category).order_by(
        count_col.desc(),
        Analysis.final_category
    ).all()

    category_stats = [
        {
            "category": category,
            "count": count,
            "avg_urgency": float(avg_urgency) if avg_urgency is not None else None,
        }
        for category, count, avg_urgency in stats_rows
    ]

    category_rows = db.query(Analysis.final_category).distinct().order_by(
        Analysis.final_category
    ).all()

    recent_corrections = db.query(Correction).order_by(
        Correction.corrected_at.desc(),
        Correction.id.desc()
    ).limit(DASHBOARD_CORRECTIONS_LIMIT).all()

    return {
        "summary": summary,
        "category_stats": category_stats,
        "all_categories": [row[0] for row in category_rows],
        "recent_corrections": [c.to_dict() for c in recent_corrections],
    }


def get_tweets_by_category(db: Session, category: str) -> List[Dict]:
    """
    Tweets whose final category matches, most urgent first, then newest first.
    """
    rows = db.query(Tweet, Analysis).join(
        Analysis, Tweet.tweet_id == Analysis.tweet_id
    ).filter(
        Analysis.final_category == category
    ).order_by(
        Analysis.urgency_score.desc(),
        Tweet.timestamp.desc()
    ).all()

    return [
        {
            "tweet_id": tweet.tweet_id,
            "text": tweet.text,
            "author": tweet.author,
            "timestamp": tweet.timestamp.isoformat() if tweet.timestamp else None,
            "suggested_category": analysis.suggested_category,
            "final_category": analysis.final_category,
            "confidence_score": analysis.confidence_score,
            "urgency_score": analysis.urgency_score,
        }
        for tweet, analysis in rows
    ]
