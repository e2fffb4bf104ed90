"""Tests for the urgency scorer."""

import pytest

from feedback_analyzer.services.urgency import score_urgency


@pytest.mark.parametrize("text,expected", [
    ("Just tried it out today", 5),
    ("The site is down", 8),
    ("Getting an error on login", 7),
    ("It's a bit slow", 6),
    ("This is a problem 😓", 7),
    ("Heads up ⚠️", 6),
    ("Crash followed by a timeout", 10),
])
def test_additive_rules(text, expected):
    assert score_urgency(text) == expected


def test_blocking_release_scenario():
    """5 + 3 (blocking) + 2 (500/error) + 1 (😤) = 11, capped at 10."""
    text = "Getting 500 errors when I deploy, this is blocking our release 😤"
    assert score_urgency(text) == 10


def test_positive_scenario():
    """No bonuses, positive language takes 2 off the base."""
    assert score_urgency("I love this product, it's amazing!") == 3


def test_positive_applied_after_bonuses():
    """5 + 3 (broken) - 2 (love) = 6."""
    assert score_urgency("I love it but the CLI is broken") == 6


def test_positive_then_ceiling():
    """5 + 3 + 2 + 1 + 1 = 12, minus 2 = 10, still within the ceiling."""
    assert score_urgency("Amazing product but it's broken, error 500, slow 😤") == 10


def test_every_tier_capped():
    assert score_urgency("Broken build, error 500, slow, total problem ⚠️") == 10


@pytest.mark.parametrize("text", [
    "",
    "🔥",
    "love love love amazing incredible",
    "broken crash down blocking error 500 timeout fail slow issue problem 😤 😓 ⚠️",
    "I love it, amazing, but it's down and blocking everything 😤",
    "Nothing to see here",
])
def test_score_in_range(text):
    score = score_urgency(text)
    assert isinstance(score, int)
    assert 1 <= score <= 10


def test_case_insensitive_keywords():
    assert score_urgency("SITE IS DOWN") == score_urgency("site is down")
