from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from pydantic import BaseModel
from ..database import get_db
from ..services.corrections import record_correction

router = APIRouter(prefix="/api", tags=["override"])


class OverrideRequest(BaseModel):
    tweet_id: str
    new_category: str


@router.post("/override")
def override_category(request: OverrideRequest, db: Session = Depends(get_db)):
    """
    Override a tweet's category.

    The correction is logged and used as an example the next time tweets
    are analyzed. Raises AnalysisNotFoundError if the tweet hasn't been
    analyzed, which the app turns into a 500 response.
    """
    record_correction(db, request.tweet_id, request.new_category)
    return {"success": True}
