"""
Tweet categorizer with correction-driven few-shot prompting.

Two strategies share one entry point:
1. Keyword rules - deterministic, always available (local mode)
2. Prompted generation - used when a generator is configured, with the most
   recent reviewer corrections embedded as examples

Any generator failure falls back to the keyword rules for that call only.
"""

import re
import logging
from typing import Dict, List, Optional, Sequence

logger = logging.getLogger(__name__)


# ============================================================================
# CONFIGURATION
# ============================================================================

MAX_TOKENS = 30  # Category names only
MAX_EXAMPLES = 5

GENERATED_CONFIDENCE = 0.8
KEYWORD_CONFIDENCE = 0.75
DEFAULT_CONFIDENCE = 0.6

DEFAULT_CATEGORY = "general_feedback"
FALLBACK_CATEGORY = "uncategorized"


# ============================================================================
# KEYWORD RULES - evaluated top to bottom, first match wins
# ============================================================================

CATEGORY_RULES = [
    ("api_error", ["500", "error", "crash", "broken", "fail"]),
    ("slow_performance", ["slow", "timeout", "performance", "crawling"]),
    ("unclear_docs", ["docs", "documentation", "example", "guide", "unclear"]),
    ("ux_issue", ["dashboard", "ui", "ux", "confusing", "cluttered"]),
    ("pricing_concern", ["price", "cost", "bill", "tier"]),
    ("feature_request", ["please add", "would love", "need", "request"]),
    ("positive_feedback", ["love", "amazing", "incredible", "🔥", "⚡"]),
    ("deployment_issue", ["deploy", "build", "wrangler"]),
    ("configuration_problem", ["binding", "config", "secret"]),
    ("scaling_concern", ["scale", "enterprise", "million"]),
]


# ============================================================================
# PROMPT
# ============================================================================

EXAMPLE_CATEGORIES = [
    "api_error",
    "slow_performance",
    "unclear_docs",
    "pricing_concern",
    "feature_request",
    "positive_feedback",
    "deployment_issue",
    "configuration_problem",
]

PROMPT_HEADER = (
    "You are categorizing product feedback tweets. Suggest ONE specific category.\n\n"
    f"Examples of good categories: {', '.join(EXAMPLE_CATEGORIES)}.\n\n"
)


def contains_keyword(text: str, keywords: List[str]) -> Optional[str]:
    """Return the first keyword found in text (case-insensitive), or None."""
    if not text:
        return None
    text_lower = text.lower()
    for keyword in keywords:
        if keyword in text_lower:
            return keyword
    return None


def categorize_by_keywords(text: str) -> Dict:
    """
    Categorize text with the keyword rule table.

    Pure and total: every string (including empty) maps to a category.
    """
    for category, keywords in CATEGORY_RULES:
        matched = contains_keyword(text, keywords)
        if matched:
            logger.debug(f"Keyword '{matched}' matched {category}")
            return {"category": category, "confidence": KEYWORD_CONFIDENCE}

    return {"category": DEFAULT_CATEGORY, "confidence": DEFAULT_CONFIDENCE}


def build_prompt(text: str, corrections: Sequence) -> str:
    """
    Build the categorization prompt.

    Args:
        text: Tweet to categorize
        corrections: Recent corrections, most recent first. Anything with
            tweet_text and corrected_category attributes works. Only the
            first MAX_EXAMPLES are used, in the order given.

    Returns:
        Prompt string
    """
    prompt = PROMPT_HEADER

    examples = list(corrections)[:MAX_EXAMPLES]
    if examples:
        prompt += "Here are examples of correct categorizations:\n\n"
        for correction in examples:
            prompt += (
                f'Tweet: "{correction.tweet_text}"\n'
                f"Category: {correction.corrected_category}\n\n"
            )

    prompt += (
        "Now categorize this tweet:\n"
        f'Tweet: "{text}"\n\n'
        "Respond with ONLY the category name (lowercase, underscores for spaces).\n"
        "Category:"
    )
    return prompt


def parse_category(response: str) -> str:
    """
    Reduce a raw model response to a category label.

    Keeps the first line, drops a "category:" label and quotes, and joins at
    most two words with an underscore.
    """
    cleaned = response.strip().lower()
    cleaned = re.sub(r"category:", "", cleaned, flags=re.IGNORECASE)
    cleaned = re.sub(r"['\"]", "", cleaned)
    cleaned = cleaned.split("\n", 1)[0].strip()

    words = cleaned.split()
    category = "_".join(words[:2])

    return category or FALLBACK_CATEGORY


def categorize(text: str, corrections: Sequence = (), generator=None) -> Dict:
    """
    Suggest a category for a tweet.

    Args:
        text: Tweet text
        corrections: Recent corrections, most recent first
        generator: Optional object with generate(prompt, max_tokens) -> str

    Returns:
        Dictionary with category (str) and confidence (float)
    """
    if generator is None:
        logger.debug("Local mode: using keyword-based categorization")
        return categorize_by_keywords(text)

    try:
        prompt = build_prompt(text, corrections)
        response = generator.generate(prompt, MAX_TOKENS)

        if not isinstance(response, str):
            raise ValueError(f"Expected str response, got {type(response).__name__}")

        return {
            "category": parse_category(response),
            "confidence": GENERATED_CONFIDENCE
        }

    except Exception as e:
        logger.warning(f"Generation failed, using keyword fallback: {str(e)}")
        return categorize_by_keywords(text)
