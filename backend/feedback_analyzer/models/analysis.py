from sqlalchemy import Column, Integer, String, DateTime, Float, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from ..database import Base


class Analysis(Base):
    """
    Categorization and urgency result for a single tweet.

    suggested_category keeps the analyzer's original output; final_category
    starts out equal to it and is the only column a correction updates.
    """
    __tablename__ = "analysis"

    id = Column(Integer, primary_key=True, index=True)
    tweet_id = Column(String, ForeignKey("tweets.tweet_id"), nullable=False, unique=True, index=True)
    suggested_category = Column(String, nullable=False)
    final_category = Column(String, nullable=False, index=True)
    confidence_score = Column(Float)  # 0.0 to 1.0
    urgency_score = Column(Integer, nullable=False)  # 1 to 10
    analyzed_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    tweet = relationship("Tweet", back_populates="analysis")

    def __repr__(self):
        return f"<Analysis(tweet_id='{self.tweet_id}', final='{self.final_category}', urgency={self.urgency_score})>"
