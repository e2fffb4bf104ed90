"""
Shared fixtures: an in-memory database per test and an API client wired to it.
"""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from feedback_analyzer.database import Base, get_db
from feedback_analyzer.main import app
from feedback_analyzer.models import Analysis, Tweet
from feedback_analyzer.services.generation import get_generator


class FakeGenerator:
    """Generator double that records prompts and returns a canned reply."""

    def __init__(self, response="api_error", error=None):
        self.response = response
        self.error = error
        self.calls = []

    def generate(self, prompt, max_tokens):
        self.calls.append({"prompt": prompt, "max_tokens": max_tokens})
        if self.error:
            raise self.error
        return self.response


@pytest.fixture
def make_generator():
    """Factory for FakeGenerator instances."""
    return FakeGenerator


@pytest.fixture
def db():
    """Fresh in-memory SQLite session with all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def add_tweet(db):
    """Insert a tweet and return it."""
    def _add_tweet(tweet_id, text, author="@tester", timestamp=None):
        tweet = Tweet(
            tweet_id=tweet_id,
            text=text,
            author=author,
            timestamp=timestamp or datetime(2025, 1, 14, 12, 0, 0),
        )
        db.add(tweet)
        db.commit()
        return tweet
    return _add_tweet


@pytest.fixture
def add_analysis(db):
    """Insert an analysis row for an existing tweet and return it."""
    def _add_analysis(tweet_id, category="api_error", urgency=5, confidence=0.75):
        analysis = Analysis(
            tweet_id=tweet_id,
            suggested_category=category,
            final_category=category,
            confidence_score=confidence,
            urgency_score=urgency,
        )
        db.add(analysis)
        db.commit()
        return analysis
    return _add_analysis


@pytest.fixture
def client(db):
    """TestClient using the test session and no generator (local mode)."""
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_generator] = lambda: None

    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
