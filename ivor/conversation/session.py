"""
Per-conversation state kept between turns.

A Session is created the first time a session id is seen. Scripts keep their
working data in `progress`, one typed record per script:

    wellness-coaching            -> WellnessProgress
    transformational-journaling  -> JournalingProgress
    problem-solving              -> ProblemSolvingProgress
    health-advice / no script    -> None

The store is an interface so a shared backend can replace the in-process one.
InMemorySessionStore keeps sessions for the life of the process unless a TTL
is configured.
"""
from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, Optional, Protocol, Union

logger = logging.getLogger(__name__)

SERVICE_WELLNESS = "wellness-coaching"
SERVICE_PROBLEM_SOLVING = "problem-solving"
SERVICE_JOURNALING = "transformational-journaling"
SERVICE_HEALTH_ADVICE = "health-advice"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Progress records
# ---------------------------------------------------------------------------

@dataclass
class WellnessProgress:
    current_section: str
    completed_sections: list = field(default_factory=list)
    # section id -> the user's raw answer
    responses: Dict[str, str] = field(default_factory=dict)


@dataclass
class JournalingProgress:
    current_ritual: Optional[str] = None  # "morning" | "evening"
    morning_step: Optional[str] = None
    evening_step: Optional[str] = None
    morning_entries: Dict[str, str] = field(default_factory=dict)
    evening_entries: Dict[str, str] = field(default_factory=dict)


@dataclass
class ProblemSolvingProgress:
    problem_description: Optional[str] = None
    selected_model: Optional[str] = None


Progress = Union[WellnessProgress, JournalingProgress, ProblemSolvingProgress, None]


@dataclass
class Session:
    id: str
    current_service: Optional[str] = None
    current_step: Optional[str] = None
    progress: Progress = None
    started_at: datetime = field(default_factory=_utcnow)
    last_activity: datetime = field(default_factory=_utcnow)

    def reset(self):
        """Leave any active script."""
        self.current_service = None
        self.current_step = None
        self.progress = None


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------

class SessionStore(Protocol):
    def get(self, session_id: str) -> Optional[Session]:
        ...

    def set(self, session: Session) -> None:
        ...

    def delete(self, session_id: str) -> None:
        ...


class InMemorySessionStore:
    """
    Process-local session map.

    ttl_s=None (default) never evicts. With a TTL, a session idle longer than
    ttl_s seconds is dropped when it is next looked up or by purge_expired().
    """

    def __init__(self, ttl_s: Optional[float] = None, clock: Callable[[], datetime] = _utcnow):
        self.ttl_s = ttl_s
        self.clock = clock
        self._sessions: "OrderedDict[str, Session]" = OrderedDict()
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, session_id: str) -> Optional[Session]:
        with self._guard:
            session = self._sessions.get(session_id)
            if session is not None and self._expired(session):
                logger.debug("Session %s expired", session_id)
                del self._sessions[session_id]
                self._drop_lock(session_id)
                return None
            return session

    def set(self, session: Session) -> None:
        with self._guard:
            self._sessions[session.id] = session
            self._sessions.move_to_end(session.id)

    def delete(self, session_id: str) -> None:
        with self._guard:
            self._sessions.pop(session_id, None)
            self._locks.pop(session_id, None)

    def get_or_create(self, session_id: str) -> Session:
        session = self.get(session_id)
        if session is None:
            now = self.clock()
            session = Session(id=session_id, started_at=now, last_activity=now)
            self.set(session)
            logger.debug("Created session %s", session_id)
        return session

    def touch(self, session: Session) -> None:
        session.last_activity = self.clock()
        self.set(session)

    def lock(self, session_id: str) -> threading.Lock:
        """Lock serialising turns for one session id."""
        with self._guard:
            return self._locks.setdefault(session_id, threading.Lock())

    def purge_expired(self) -> int:
        if self.ttl_s is None:
            return 0
        with self._guard:
            stale = [sid for sid, s in self._sessions.items() if self._expired(s)]
            for sid in stale:
                del self._sessions[sid]
            # locks of sessions already gone
            for sid in [sid for sid in self._locks if sid not in self._sessions]:
                self._drop_lock(sid)
        if stale:
            logger.info("Purged %d idle sessions", len(stale))
        return len(stale)

    def _expired(self, session: Session) -> bool:
        if self.ttl_s is None:
            return False
        return (self.clock() - session.last_activity).total_seconds() > self.ttl_s

    def _drop_lock(self, session_id: str) -> None:
        # held locks stay until a later purge
        lock = self._locks.get(session_id)
        if lock is not None and not lock.locked():
            del self._locks[session_id]
