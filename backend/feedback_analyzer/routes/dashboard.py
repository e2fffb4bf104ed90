from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ..database import get_db
from ..services.dashboard import get_dashboard_data, get_tweets_by_category

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/dashboard")
def dashboard(db: Session = Depends(get_db)):
    """
    Get dashboard data.

    Returns:
        dict: summary counts, category_stats, all_categories and
              recent_corrections
    """
    return get_dashboard_data(db)


@router.get("/category/{category:path}")
def tweets_in_category(category: str, db: Session = Depends(get_db)):
    """
    Get all tweets currently in a category, most urgent first.

    Args:
        category: final_category to filter on
        db: Database session
    """
    return get_tweets_by_category(db, category)
