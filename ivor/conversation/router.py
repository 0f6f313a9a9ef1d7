"""
Dialogue router: picks the handler for one message.

Evaluation order (first match wins):
  1. an active script continues
  2. script trigger keywords start a script, or the catch-all shows the menu
  3. resource intents query the resource store
  4. community / career signposting
  5. reset keywords clear the session
  6. welcome text
"""
from __future__ import annotations

import logging
from types import ModuleType
from typing import Dict, List, Optional, Tuple

from . import health_advice, journaling, menus, problem_solving, wellness
from . import keywords as kw
from .results import ReturnToMenu
from .session import (
    SERVICE_HEALTH_ADVICE,
    SERVICE_JOURNALING,
    SERVICE_PROBLEM_SOLVING,
    SERVICE_WELLNESS,
    Session,
)
from ..resources.formatter import format_resources
from ..resources.store import ResourceStore

logger = logging.getLogger(__name__)

SCRIPTS: Dict[str, ModuleType] = {
    SERVICE_WELLNESS: wellness,
    SERVICE_PROBLEM_SOLVING: problem_solving,
    SERVICE_JOURNALING: journaling,
    SERVICE_HEALTH_ADVICE: health_advice,
}

# Trigger lists in the order they are checked
SCRIPT_TRIGGERS: List[Tuple[List[str], str]] = [
    (kw.HEALTH_ADVICE_TRIGGERS, SERVICE_HEALTH_ADVICE),
    (kw.WELLNESS_TRIGGERS, SERVICE_WELLNESS),
    (kw.PROBLEM_SOLVING_TRIGGERS, SERVICE_PROBLEM_SOLVING),
    (kw.JOURNALING_TRIGGERS, SERVICE_JOURNALING),
]

# (keywords, category name, intro)
CATEGORY_INTENTS: List[Tuple[List[str], str, str]] = [
    (
        kw.MENTAL_HEALTH_INTENT,
        "Mental Health",
        "Mental health support is crucial for our wellbeing. Here are specialized resources for LGBTQ+ community:",
    ),
    (
        kw.HOUSING_INTENT,
        "Housing",
        "Housing security is fundamental to wellbeing. Here are LGBTQ+ friendly housing resources:",
    ),
    (
        kw.LEGAL_INTENT,
        "Legal Aid",
        "I can connect you with legal support that understands intersectional discrimination:",
    ),
]

CRISIS_INTRO = "🚨 **IMMEDIATE SUPPORT AVAILABLE** - You are not alone and help is available right now:"
SEARCH_INTRO = "I found some resources that might help:"


class DialogueRouter:
    def __init__(self, store: ResourceStore, search_limit: int = 3):
        self.store = store
        self.search_limit = search_limit

    def route(self, message: str, session: Session) -> str:
        message = message or ""

        if session.current_service:
            return self._continue(message, session)

        started = self._start_script(message, session)
        if started is not None:
            return started

        if kw.contains_any(message, kw.SERVICE_MENU_TRIGGERS):
            return menus.SERVICE_SELECTION

        resource_reply = self._resources(message)
        if resource_reply is not None:
            return resource_reply

        if kw.contains_any(message, kw.COMMUNITY_INTENT):
            return menus.COMMUNITY_SPACES
        if kw.contains_any(message, kw.CAREER_INTENT):
            return menus.CAREER_SUPPORT

        if kw.wants_main_menu(message):
            session.reset()
            return menus.SERVICE_SELECTION

        return menus.WELCOME

    # ------------------------------------------------------------------
    # Scripts
    # ------------------------------------------------------------------

    def _continue(self, message: str, session: Session) -> str:
        script = SCRIPTS.get(session.current_service)
        if script is None:
            logger.debug("Session %s has unscripted service %r", session.id, session.current_service)
            return menus.GENERAL_COMMUNITY_RESOURCES

        result = script.handle(message, session)
        if isinstance(result, ReturnToMenu):
            logger.debug("Session %s left %s", session.id, session.current_service)
            session.reset()
            return menus.SERVICE_SELECTION
        return result.text

    def _start_script(self, message: str, session: Session) -> Optional[str]:
        for triggers, service in SCRIPT_TRIGGERS:
            if kw.contains_any(message, triggers):
                logger.info("Session %s started %s", session.id, service)
                return SCRIPTS[service].start(session)
        return None

    # ------------------------------------------------------------------
    # Resource intents
    # ------------------------------------------------------------------

    def _resources(self, message: str) -> Optional[str]:
        for triggers, category, intro in CATEGORY_INTENTS:
            if kw.contains_any(message, triggers):
                return format_resources(self.store.by_category(category), intro)

        if kw.contains_any(message, kw.CRISIS_INTENT):
            return format_resources(self.store.crisis_resources(), CRISIS_INTRO)

        if kw.contains_any(message, kw.SEARCH_INTENT):
            found = self.store.search(message, self.search_limit)
            if found:
                return format_resources(found, SEARCH_INTRO)
        return None
