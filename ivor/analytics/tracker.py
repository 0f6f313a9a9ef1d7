"""
Conversation analytics.

Every turn records two metrics (the user message and the reply). From these
the tracker learns simple usage patterns (which services and topics are in
demand), flags performance gaps when replies are slow, and builds weekly admin
and monthly community reports.

Metrics stay in process memory. Reports are aggregated with pandas.

Usage:
    tracker = ConversationTracker()
    tracker.track("conv-1", "user", topic_category=categorize_message(text))
    tracker.track("conv-1", "assistant", service_used="wellness-coaching", response_time_ms=120)
    tracker.weekly_report(week=42, year=2026)
"""
from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

import pandas as pd

from ..conversation.keywords import contains_any

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Message classification
# ---------------------------------------------------------------------------

# (category, keywords), checked in order
TOPIC_CATEGORIES = [
    ("health_wellness", ["health", "medical", "doctor", "mental health", "depression", "anxiety"]),
    ("relationships", ["relationship", "dating", "partner", "family", "friend", "love"]),
    ("career_professional", ["job", "career", "work", "employment", "boss", "interview"]),
    ("personal_development", ["goal", "habit", "growth", "motivation", "confidence", "journal"]),
    ("identity_community", ["identity", "queer", "gay", "community", "discrimination", "coming out"]),
    ("crisis_support", ["crisis", "emergency", "urgent", "help", "support", "suicide"]),
    ("housing_practical", ["housing", "homeless", "accommodation", "rent", "eviction"]),
]
DEFAULT_TOPIC = "general_conversation"

# (service id, indicators looked for in message + reply), checked in order
SERVICE_INDICATORS = [
    ("wellness-coaching", ["wellness coaching", "habit coaching", "wellness assessment"]),
    ("problem-solving", ["problem solving", "mental model", "strategic thinking", "framework"]),
    ("transformational-journaling", ["journaling", "morning ritual", "evening ritual", "transformational"]),
    ("health-advice", ["health advice", "medical", "healthcare navigation"]),
    ("immediate-resources", ["crisis", "emergency", "immediate support", "hotline"]),
]

EMERGENCY_SERVICE = "emergency-support"

URGENCY_WEIGHT = {"critical": 4, "high": 3, "medium": 2, "low": 1}

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def categorize_message(text: str) -> str:
    for category, keywords in TOPIC_CATEGORIES:
        if contains_any(text, keywords):
            return category
    return DEFAULT_TOPIC


def detect_service_used(message: str, reply: str) -> Optional[str]:
    combined = f"{message} {reply}"
    for service, indicators in SERVICE_INDICATORS:
        if contains_any(combined, indicators):
            return service
    return None


def format_category_name(category: str) -> str:
    return " ".join(w.capitalize() for w in category.split("_"))


def format_service_name(service: str) -> str:
    return " ".join(w.capitalize() for w in service.split("-"))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass
class ConversationMetric:
    conversation_id: str
    message_type: str  # "user" | "assistant"
    timestamp: datetime
    service_used: Optional[str] = None
    topic_category: Optional[str] = None
    response_time_ms: float = 0.0
    device_type: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def iso_year(self) -> int:
        return self.timestamp.isocalendar()[0]

    @property
    def week_of_year(self) -> int:
        return self.timestamp.isocalendar()[1]

    @property
    def month_of_year(self) -> int:
        return self.timestamp.month


@dataclass
class LearningPattern:
    id: str
    pattern_type: str  # service_demand | topic_trend
    description: str
    frequency: int
    confidence: float
    actionable: bool
    discovered: datetime
    last_seen: datetime


@dataclass
class ServiceGap:
    id: str
    gap_type: str
    description: str
    frequency: int
    urgency: str
    suggested_action: str
    community_impact: str
    discovered: datetime


METRIC_COLUMNS = [
    "id",
    "conversation_id",
    "message_type",
    "timestamp",
    "service_used",
    "topic_category",
    "response_time_ms",
    "device_type",
    "iso_year",
    "week_of_year",
    "year",
    "month_of_year",
]


# ---------------------------------------------------------------------------
# Tracker
# ---------------------------------------------------------------------------

class ConversationTracker:
    def __init__(self, slow_response_ms: int = 3000, clock: Callable[[], datetime] = _utcnow):
        self.slow_response_ms = slow_response_ms
        self.clock = clock
        self.metrics: List[ConversationMetric] = []
        self.patterns: Dict[str, LearningPattern] = {}
        self.gaps: Dict[str, ServiceGap] = {}
        self._lock = threading.Lock()

    def track(
        self,
        conversation_id: Optional[str],
        message_type: str,
        service_used: Optional[str] = None,
        topic_category: Optional[str] = None,
        response_time_ms: float = 0.0,
        device_type: Optional[str] = None,
    ) -> ConversationMetric:
        metric = ConversationMetric(
            conversation_id=conversation_id or "anonymous",
            message_type=message_type,
            timestamp=self.clock(),
            service_used=service_used,
            topic_category=topic_category,
            response_time_ms=float(response_time_ms or 0),
            device_type=device_type,
        )
        with self._lock:
            self.metrics.append(metric)
            self._learn(metric)
            self._detect_gaps(metric)
        return metric

    # ------------------------------------------------------------------
    # Learning
    # ------------------------------------------------------------------

    def _learn(self, metric: ConversationMetric):
        now = metric.timestamp
        if metric.service_used:
            key = f"service_demand_{metric.service_used}"
            p = self.patterns.get(key)
            if p:
                p.frequency += 1
                p.last_seen = now
                p.confidence = min(round(p.confidence + 0.1, 2), 1.0)
            else:
                self.patterns[key] = LearningPattern(
                    id=key,
                    pattern_type="service_demand",
                    description=f"High demand for {metric.service_used} service",
                    frequency=1,
                    confidence=0.1,
                    actionable=True,
                    discovered=now,
                    last_seen=now,
                )

        if metric.topic_category:
            key = f"topic_trend_{metric.topic_category}"
            p = self.patterns.get(key)
            if p:
                p.frequency += 1
                p.last_seen = now
            else:
                self.patterns[key] = LearningPattern(
                    id=key,
                    pattern_type="topic_trend",
                    description=f"Emerging interest in {metric.topic_category}",
                    frequency=1,
                    confidence=0.1,
                    actionable=False,
                    discovered=now,
                    last_seen=now,
                )

    def _detect_gaps(self, metric: ConversationMetric):
        if metric.response_time_ms <= self.slow_response_ms:
            return
        key = "performance_gap"
        gap = self.gaps.get(key)
        if gap:
            gap.frequency += 1
            return
        logger.warning("Slow response (%.0f ms) recorded as a performance gap", metric.response_time_ms)
        self.gaps[key] = ServiceGap(
            id=key,
            gap_type="service_limitation",
            description="Slow response times affecting user experience",
            frequency=1,
            urgency="medium",
            suggested_action="Optimize response generation or scale infrastructure",
            community_impact="Users may abandon conversations due to delays",
            discovered=metric.timestamp,
        )

    # ------------------------------------------------------------------
    # Aggregation
    # ------------------------------------------------------------------

    def frame(self) -> pd.DataFrame:
        """All metrics as a DataFrame, one row per message."""
        with self._lock:
            rows = []
            for m in self.metrics:
                row = asdict(m)
                row.update(
                    iso_year=m.iso_year,
                    week_of_year=m.week_of_year,
                    year=m.timestamp.year,
                    month_of_year=m.month_of_year,
                )
                rows.append(row)
        return pd.DataFrame(rows, columns=METRIC_COLUMNS)

    def average_response_time(self) -> float:
        return _avg_response_ms(self.frame())

    def top_patterns(self, min_confidence: float = 0.0, limit: int = 10) -> List[LearningPattern]:
        with self._lock:
            found = [p for p in self.patterns.values() if p.confidence > min_confidence]
        return sorted(found, key=lambda p: p.frequency, reverse=True)[:limit]

    def weekly_report(self, week: int, year: int) -> Dict[str, Any]:
        df = self.frame()
        df = df[(df["week_of_year"] == week) & (df["iso_year"] == year)]

        service_usage = _counts(df["service_used"])
        topic_trends = _counts(df["topic_category"])
        avg_ms = _avg_response_ms(df)
        devices = _counts(df["device_type"])

        with self._lock:
            gaps = [
                g for g in self.gaps.values()
                if g.discovered.isocalendar()[1] == week and g.discovered.isocalendar()[0] == year
            ]
        gaps.sort(key=lambda g: URGENCY_WEIGHT.get(g.urgency, 0), reverse=True)

        return {
            "period": f"Week {week}, {year}",
            "metrics": {
                # user + assistant rows per exchange
                "total_conversations": len(df) // 2,
                "unique_users": int(df["conversation_id"].nunique()),
                "service_usage": service_usage,
                "topic_trends": topic_trends,
                "performance": {
                    "average_response_time_ms": avg_ms,
                    "slow_responses": int((df["response_time_ms"] > self.slow_response_ms).sum()),
                    "device_breakdown": devices,
                },
            },
            "insights": {
                "most_used_service": next(iter(service_usage), "None"),
                "emerging_topics": list(topic_trends.items())[:3],
                "performance_status": "Good" if avg_ms < 2000 else "Needs Attention",
            },
            "service_gaps": [asdict(g) for g in gaps],
            "learning_patterns": [asdict(p) for p in self.top_patterns(min_confidence=0.3)],
            "recommendations": _recommendations(avg_ms, service_usage),
        }

    def monthly_report(self, month: int, year: int) -> Dict[str, Any]:
        df = self.frame()
        df = df[(df["month_of_year"] == month) & (df["year"] == year)]

        total = len(df) // 2
        unique = int(df["conversation_id"].nunique())
        services = _counts(df["service_used"])
        needs = _counts(df["topic_category"])

        with self._lock:
            expansion = [
                g.description for g in self.gaps.values()
                if g.discovered.month == month and g.discovered.year == year
            ]

        return {
            "period": f"{MONTH_NAMES[month - 1] if 1 <= month <= 12 else 'Unknown'} {year}",
            "community_impact": {
                "total_conversations": total,
                "unique_community_members": unique,
                "services_provided": len(services),
                "most_needed_support": [
                    {"category": format_category_name(c), "usage_percentage": _pct(n, len(df))}
                    for c, n in list(needs.items())[:5]
                ],
            },
            "service_utilization": [
                {"service": format_service_name(s), "conversations": n, "percentage": _pct(n, total)}
                for s, n in services.items()
            ],
            "community_growth": {
                "repeat_usage": f"{_pct(unique, total)}%",
                "service_expansion": expansion,
            },
        }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _counts(col: pd.Series) -> Dict[str, int]:
    """Value counts, most frequent first, as a plain dict."""
    return {str(k): int(v) for k, v in col.dropna().value_counts().items()}


def _avg_response_ms(df: pd.DataFrame) -> float:
    timed = df.loc[df["response_time_ms"] > 0, "response_time_ms"]
    return float(timed.mean()) if len(timed) else 0.0


def _pct(part: int, whole: int) -> int:
    return round(part / whole * 100) if whole else 0


def _recommendations(avg_ms: float, service_usage: Dict[str, int]) -> List[Dict[str, str]]:
    recs = []
    if avg_ms > 2500:
        recs.append({
            "type": "performance",
            "priority": "high",
            "issue": "Response times above optimal threshold",
            "action": "Consider optimizing response generation or scaling infrastructure",
        })

    total = sum(service_usage.values())
    low = [s for s, n in service_usage.items() if n < total * 0.1]
    if low:
        recs.append({
            "type": "service_promotion",
            "priority": "medium",
            "issue": f"Low usage for: {', '.join(low)}",
            "action": "Consider improving service discovery or user education",
        })
    return recs
