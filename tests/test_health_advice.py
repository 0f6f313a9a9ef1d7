from __future__ import annotations

import pytest

from ivor.conversation import health_advice as ha
from ivor.conversation.results import Reply, ReturnToMenu
from ivor.conversation.session import SERVICE_HEALTH_ADVICE


def test_start_shows_menu(session):
    assert ha.start(session) == ha.TOPICS_MENU
    assert session.current_service == SERVICE_HEALTH_ADVICE
    assert session.progress is None


@pytest.mark.parametrize("msg,expected", [
    ("I've been dealing with anxiety", ha.MENTAL_HEALTH),
    ("where can I get PrEP", ha.SEXUAL_HEALTH),
    ("fitness tips", ha.PHYSICAL_HEALTH),
    ("finding a good doctor", ha.HEALTHCARE_NAVIGATION),
    ("alcohol", ha.SUBSTANCE_HEALTH),
    ("make me laugh", ha.JOY_AND_WELLNESS),
])
def test_topic_advice_with_source_note(msg, expected):
    assert ha.advice_for(msg) == expected + ha.SOURCE_NOTE


def test_first_matching_topic_wins():
    assert ha.advice_for("anxiety and alcohol") == ha.MENTAL_HEALTH + ha.SOURCE_NOTE


def test_unmatched_shows_menu():
    assert ha.advice_for("hello there") == ha.TOPICS_MENU


def test_handle_is_stateless(session):
    ha.start(session)
    assert ha.handle("exercise", session) == Reply(ha.PHYSICAL_HEALTH + ha.SOURCE_NOTE)
    assert ha.handle("exercise", session) == Reply(ha.PHYSICAL_HEALTH + ha.SOURCE_NOTE)
    assert session.progress is None


def test_navigation(session):
    ha.start(session)
    assert ha.handle("back to main menu", session) == ReturnToMenu()
