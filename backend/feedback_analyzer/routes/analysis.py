from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ..database import get_db
from ..services.generation import TextGenerator, get_generator
from ..services.pipeline import analyze_unprocessed

router = APIRouter(prefix="/api", tags=["analysis"])


@router.post("/analyze")
def analyze_tweets(
    db: Session = Depends(get_db),
    generator: Optional[TextGenerator] = Depends(get_generator)
):
    """
    Analyze every tweet that doesn't have an analysis yet.

    Uses keyword rules when no generator is configured. Tweets that fail
    are skipped and picked up again on the next run.

    Returns:
        dict: Number of tweets analyzed and a status message
    """
    return analyze_unprocessed(db, generator)
