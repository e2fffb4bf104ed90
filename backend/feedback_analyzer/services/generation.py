"""
Text generation backends for the categorizer.

A generator is anything with a ``generate(prompt, max_tokens) -> str`` method.
The categorizer never checks which backend it was handed; it only needs to
cope with the generator being absent (None) or raising.
"""

import os
import logging
from typing import Optional
from dotenv import load_dotenv
import anthropic

load_dotenv()
logger = logging.getLogger(__name__)


# ============================================================================
# CONFIGURATION
# ============================================================================

ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY")
MODEL = os.getenv("FEEDBACK_ANALYZER_MODEL", "claude-3-5-haiku-20241022")
TEMPERATURE = 0.1  # Low temperature for consistent labels


class GenerationError(Exception):
    """Raised when the generation backend fails or returns nothing usable."""
    pass


class TextGenerator:
    """Interface for prompt -> text backends."""

    def generate(self, prompt: str, max_tokens: int) -> str:
        raise NotImplementedError


class ClaudeGenerator(TextGenerator):
    """
    Claude-backed generator using the Anthropic messages API.

    No retries: a failed call raises GenerationError and the caller falls
    back to keyword rules.
    """

    def __init__(self, api_key: Optional[str] = None, model: str = MODEL, client=None):
        self.model = model
        self.client = client or anthropic.Anthropic(api_key=api_key or ANTHROPIC_API_KEY)

    def generate(self, prompt: str, max_tokens: int) -> str:
        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                temperature=TEMPERATURE,
                messages=[
                    {"role": "user", "content": prompt}
                ]
            )
        except anthropic.APIError as e:
            logger.error(f"Claude API error: {str(e)}")
            raise GenerationError(f"Claude API error: {str(e)}") from e

        if not response.content:
            raise GenerationError("Claude returned an empty response")

        text = getattr(response.content[0], "text", None)
        if not isinstance(text, str):
            raise GenerationError(f"Unexpected content block: {type(response.content[0]).__name__}")

        return text


def get_generator() -> Optional[TextGenerator]:
    """
    FastAPI dependency returning the configured generator.

    Returns None when ANTHROPIC_API_KEY is not set, which puts the
    categorizer in local (keyword-only) mode.
    """
    if not ANTHROPIC_API_KEY:
        return None
    return ClaudeGenerator(api_key=ANTHROPIC_API_KEY)
