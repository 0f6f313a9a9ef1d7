"""
Distress classifier. Scans an incoming message for crisis language before any
dialogue routing happens.

Three fixed keyword tiers (critical, high, medium) are matched as
case-insensitive substrings. Critical and high levels require an immediate
emergency reply that bypasses the conversation entirely.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

DistressLevel = Literal["low", "medium", "high", "critical"]

# ---------------------------------------------------------------------------
# Keyword tiers
# ---------------------------------------------------------------------------

CRITICAL_KEYWORDS = [
    "suicide", "kill myself", "end my life", "want to die", "better off dead",
    "overdose", "self harm", "cut myself", "hurt myself",
    "emergency", "crisis", "immediate danger", "urgent help",
]

HIGH_KEYWORDS = [
    "depressed", "hopeless", "can't cope", "overwhelmed", "breaking down",
    "panic attack", "anxiety attack", "mental breakdown", "desperate",
    "isolated", "alone", "nobody cares", "worthless",
]

MEDIUM_KEYWORDS = [
    "stressed", "worried", "anxious", "sad", "upset", "struggling",
    "difficult time", "hard to cope", "need support", "feeling down",
]


@dataclass(frozen=True)
class DistressSignal:
    level: DistressLevel = "low"
    indicators: List[str] = field(default_factory=list)
    immediate_response: bool = False
    follow_up_required: bool = False


def _matches(text: str, keywords: List[str]) -> List[str]:
    return [k for k in keywords if k in text]


def classify(text: str) -> DistressSignal:
    """
    Classify a message into low | medium | high | critical.

      - any critical keyword                 → critical, immediate
      - ≥2 high, or ≥1 high and ≥1 medium    → high, immediate
      - ≥1 high, or ≥2 medium                → medium, follow-up
      - ≥1 medium                            → low (indicators kept)
      - nothing                              → low
    """
    t = (text or "").lower()
    critical = _matches(t, CRITICAL_KEYWORDS)
    high = _matches(t, HIGH_KEYWORDS)
    medium = _matches(t, MEDIUM_KEYWORDS)

    if critical:
        return DistressSignal("critical", critical, immediate_response=True, follow_up_required=True)

    if len(high) >= 2 or (high and medium):
        return DistressSignal("high", high + medium, immediate_response=True, follow_up_required=True)

    if high or len(medium) >= 2:
        return DistressSignal("medium", high + medium, immediate_response=False, follow_up_required=True)

    if medium:
        return DistressSignal("low", medium)

    return DistressSignal()


# ---------------------------------------------------------------------------
# Emergency templates
# ---------------------------------------------------------------------------

CRITICAL_RESPONSE = """🚨 **IMMEDIATE EMERGENCY SUPPORT**

**If you are in immediate danger, please contact emergency services:**
• **Emergency Services: 999**
• **Samaritans: 116 123** (free, 24/7)
• **Crisis Text Line: Text SHOUT to 85258**

**LGBTQ+ Specific Crisis Support:**
• **Switchboard LGBT+: 0300 330 0630** (10am-10pm daily)
• **MindLine Trans+: 0300 330 5468** (Mon & Fri 8pm-midnight)

**You are not alone. Your life has value. Help is available right now.**

I'm here to support you, but please prioritize getting immediate professional help. Would you like me to help you find local crisis services or someone to talk to right now?"""

HIGH_RESPONSE = """💛 **PRIORITY SUPPORT AVAILABLE**

I can see you're going through a really difficult time. You've taken a brave step by reaching out.

**Immediate Support Options:**
• **Samaritans: 116 123** (free, confidential, 24/7)
• **Mind LGBTQ+: 0300 123 3393**
• **Switchboard LGBT+: 0300 330 0630**
• **Crisis Text Line: Text SHOUT to 85258**

**You don't have to handle this alone.** I'm here to support you through this conversation, and I can help connect you with professional support.

What feels most urgent for you right now? Would you like immediate crisis support or shall we work through this together step by step?"""

MEDIUM_RESPONSE = """💚 **CARING SUPPORT**

I hear that you're struggling right now, and I want you to know that reaching out shows real strength.

**Support Available:**
• **Samaritans: 116 123** (always available to listen)
• **Mind LGBTQ+: 0300 123 3393**
• **Switchboard LGBT+: 0300 330 0630**

I'm here to support you through this. Whether you need immediate professional support or want to work through this together, we can take it at your pace.

What kind of support would feel most helpful right now?"""

_RESPONSES = {
    "critical": CRITICAL_RESPONSE,
    "high": HIGH_RESPONSE,
    "medium": MEDIUM_RESPONSE,
}


def emergency_response(signal: DistressSignal) -> str:
    """Fixed emergency template for the signal's level; empty for low."""
    return _RESPONSES.get(signal.level, "")
