"""
Keyword lists for message routing.

Matching is a case-insensitive substring check against each list, evaluated in
the order the router asks. Lists are ordered as they are checked.
"""
from __future__ import annotations

from typing import Iterable

# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------

NAVIGATION = ["main menu", "services", "start over"]

# ---------------------------------------------------------------------------
# Script triggers (checked in this order)
# ---------------------------------------------------------------------------

HEALTH_ADVICE_TRIGGERS = ["health advice", "health guidance", "sexual health", "physical health", "healthcare"]
WELLNESS_TRIGGERS = ["wellness", "habit"]
PROBLEM_SOLVING_TRIGGERS = ["problem", "challenge", "stuck", "solve"]
JOURNALING_TRIGGERS = ["journal", "writing", "reflection", "ritual"]
SERVICE_MENU_TRIGGERS = ["service", "help with", "coaching"]

# ---------------------------------------------------------------------------
# Resource intents
# ---------------------------------------------------------------------------

MENTAL_HEALTH_INTENT = ["mental health", "therapy", "counseling"]
HOUSING_INTENT = ["housing", "accommodation", "homeless"]
LEGAL_INTENT = ["legal", "discrimination", "rights"]
CRISIS_INTENT = ["crisis", "emergency", "urgent"]
SEARCH_INTENT = ["help", "support", "resource"]

COMMUNITY_INTENT = ["community", "events", "meetup"]
CAREER_INTENT = ["work", "job", "career"]


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    t = (text or "").lower()
    return any(k in t for k in keywords)


def wants_main_menu(text: str) -> bool:
    return contains_any(text, NAVIGATION)
