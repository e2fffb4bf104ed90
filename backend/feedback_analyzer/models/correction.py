from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from datetime import datetime
from ..database import Base


class Correction(Base):
    """
    Log of reviewer category overrides.

    Append-only. Each row records the category in effect right before the
    override, and doubles as a few-shot example for the categorizer.
    """
    __tablename__ = "corrections"

    id = Column(Integer, primary_key=True, index=True)
    tweet_id = Column(String, ForeignKey("tweets.tweet_id"), nullable=False, index=True)
    original_category = Column(String, nullable=False)
    corrected_category = Column(String, nullable=False)
    tweet_text = Column(Text, nullable=False)  # Copied so examples survive without a join
    corrected_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    def to_dict(self):
        return {
            "id": self.id,
            "tweet_id": self.tweet_id,
            "original_category": self.original_category,
            "corrected_category": self.corrected_category,
            "tweet_text": self.tweet_text,
            "corrected_at": self.corrected_at.isoformat() if self.corrected_at else None,
        }

    def __repr__(self):
        return f"<Correction(tweet_id='{self.tweet_id}', {self.original_category} -> {self.corrected_category})>"
