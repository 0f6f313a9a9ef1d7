"""
IVOR Conversation Engine

One call per user message:
  1. Distress check: high and critical messages get the emergency reply at once,
     without reading or creating a session
  2. Session get-or-create (serialised per session id)
  3. Routing to a dialogue script, a resource lookup or a fixed text
  4. Analytics tracking and the optional conversation log

Usage:
    engine = ConversationEngine.from_config(load_config("configs/ivor.yaml"))
    while True:
        user_input = input("You: ")
        print("IVOR:", engine.respond(user_input, session_id="local"))
"""
from __future__ import annotations

import itertools
import logging
import time
from dataclasses import dataclass
from typing import Optional

from .router import DialogueRouter
from .session import InMemorySessionStore
from ..analytics.conversation_log import ConversationLog, NullConversationLog
from ..analytics.tracker import (
    EMERGENCY_SERVICE,
    ConversationTracker,
    categorize_message,
    detect_service_used,
)
from ..resources.store import ResourceStore
from ..safety.distress import DistressLevel, classify, emergency_response

logger = logging.getLogger(__name__)


@dataclass
class TurnResult:
    reply: str
    emergency: bool = False
    distress_level: DistressLevel = "low"
    # Script active after this turn, None when no script is running
    service: Optional[str] = None


class ConversationEngine:
    """
    Create via from_config() or pass the parts directly.
    Call .respond(message, session_id) or .turn(...) for each user message.
    """

    def __init__(
        self,
        store: ResourceStore,
        sessions: Optional[InMemorySessionStore] = None,
        tracker: Optional[ConversationTracker] = None,
        conversation_log: Optional[ConversationLog] = None,
        search_limit: int = 3,
        purge_every: int = 100,
    ):
        self.store = store
        # empty stores are falsy (len 0)
        self.sessions = sessions if sessions is not None else InMemorySessionStore()
        self.tracker = tracker
        self.conversation_log = conversation_log if conversation_log is not None else NullConversationLog()
        self.router = DialogueRouter(store, search_limit=search_limit)
        # purge idle sessions every N routed turns; 0 disables
        self.purge_every = purge_every
        self._turns = itertools.count(1)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_config(cls, cfg) -> "ConversationEngine":
        """Build engine from IvorConfig."""
        from ..resources.factory import build_store

        s = cfg.store
        tracker = None
        if cfg.analytics.enabled:
            tracker = ConversationTracker(slow_response_ms=cfg.analytics.slow_response_ms)

        conversation_log: ConversationLog = NullConversationLog()
        if cfg.conversation.log_conversations:
            from ..analytics.conversation_log import SupabaseConversationLog
            conversation_log = SupabaseConversationLog.from_settings(
                s.supabase_url, s.supabase_key, table=cfg.conversation.conversations_table
            )
            logger.info("Conversation log enabled (table %s)", cfg.conversation.conversations_table)

        return cls(
            store=build_store(s),
            sessions=InMemorySessionStore(ttl_s=cfg.sessions.ttl_s),
            tracker=tracker,
            conversation_log=conversation_log,
            search_limit=s.search_limit,
            purge_every=cfg.sessions.purge_every,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def respond(self, message: str, session_id: str) -> str:
        """Process one user message and return IVOR's reply."""
        return self.turn(message, session_id).reply

    def turn(self, message: str, session_id: str, device_type: Optional[str] = None) -> TurnResult:
        started = time.monotonic()
        message = message or ""

        self._track(session_id, "user", topic_category=categorize_message(message), device_type=device_type)

        signal = classify(message)
        if signal.immediate_response:
            logger.warning(
                "Emergency distress detected (session=%s level=%s indicators=%s)",
                session_id, signal.level, signal.indicators,
            )
            reply = emergency_response(signal)
            self._track(
                session_id,
                "assistant",
                service_used=EMERGENCY_SERVICE,
                topic_category="crisis_support",
                response_time_ms=_elapsed_ms(started),
                device_type=device_type,
            )
            return TurnResult(reply=reply, emergency=True, distress_level=signal.level)

        self._maybe_purge()
        with self.sessions.lock(session_id):
            session = self.sessions.get_or_create(session_id)
            self.sessions.touch(session)
            reply = self.router.route(message, session)
            service = session.current_service

        self._track(
            session_id,
            "assistant",
            service_used=detect_service_used(message, reply),
            response_time_ms=_elapsed_ms(started),
            device_type=device_type,
        )
        self.conversation_log.record(session_id, message, reply)
        return TurnResult(reply=reply, distress_level=signal.level, service=service)

    def reset(self, session_id: str):
        """Forget a session."""
        self.sessions.delete(session_id)

    def greeting(self) -> str:
        """Return the opening text (before the first user message)."""
        from .menus import WELCOME
        return WELCOME

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _maybe_purge(self):
        if self.purge_every and next(self._turns) % self.purge_every == 0:
            self.sessions.purge_expired()

    def _track(self, session_id: str, message_type: str, **kwargs):
        if self.tracker is None:
            return
        try:
            self.tracker.track(session_id, message_type, **kwargs)
        except Exception as exc:
            logger.warning("Analytics tracking failed: %s", exc)


def _elapsed_ms(started: float) -> float:
    return (time.monotonic() - started) * 1000.0
