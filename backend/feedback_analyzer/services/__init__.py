from .generation import TextGenerator, ClaudeGenerator, GenerationError, get_generator
from .categorizer import categorize, categorize_by_keywords, build_prompt, parse_category
from .urgency import score_urgency
from .corrections import record_correction, fetch_recent_corrections, AnalysisNotFoundError
from .pipeline import analyze_text, analyze_unprocessed
from .dashboard import get_dashboard_data, get_tweets_by_category
from .ingest import store_tweets

__all__ = [
    "TextGenerator",
    "ClaudeGenerator",
    "GenerationError",
    "get_generator",
    "categorize",
    "categorize_by_keywords",
    "build_prompt",
    "parse_category",
    "score_urgency",
    "record_correction",
    "fetch_recent_corrections",
    "AnalysisNotFoundError",
    "analyze_text",
    "analyze_unprocessed",
    "get_dashboard_data",
    "get_tweets_by_category",
    "store_tweets"
]
