from sqlalchemy import Column, String, DateTime, Text
from sqlalchemy.orm import relationship
from datetime import datetime
from ..database import Base


class Tweet(Base):
    __tablename__ = "tweets"

    tweet_id = Column(String, primary_key=True, index=True)  # External identifier
    text = Column(Text, nullable=False)
    author = Column(String, nullable=False)
    timestamp = Column(DateTime, default=datetime.utcnow, index=True)

    # One analysis per tweet, created by the batch analyzer
    analysis = relationship("Analysis", back_populates="tweet", uselist=False)

    def __repr__(self):
        return f"<Tweet(tweet_id='{self.tweet_id}', author='{self.author}')>"
