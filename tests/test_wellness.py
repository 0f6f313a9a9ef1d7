from __future__ import annotations

import pytest

from ivor.conversation import wellness
from ivor.conversation.results import Reply, ReturnToMenu
from ivor.conversation.session import SERVICE_WELLNESS, JournalingProgress, WellnessProgress

ANSWERS = [f"answer {i}" for i in range(len(wellness.SECTIONS))]


@pytest.fixture
def started(session):
    wellness.start(session)
    return session


def test_start_sets_first_section(session):
    text = wellness.start(session)
    assert session.current_service == SERVICE_WELLNESS
    assert session.current_step == "introduction"
    assert session.progress == WellnessProgress(current_section="persona-snapshot")
    assert wellness.SECTIONS[0].assessment_prompt in text


def test_six_sections():
    assert [s.id for s in wellness.SECTIONS] == [
        "persona-snapshot",
        "wellness-domains",
        "current-state-audit",
        "aspirational-vision",
        "gap-analysis",
        "motivation-mapping",
    ]


def test_answer_advances_to_next_section(started):
    out = wellness.handle("I'm a designer in Leeds", started)
    assert isinstance(out, Reply)
    assert "Personal Snapshot Complete" in out.text
    assert "Next: Wellness Domains Inventory" in out.text
    assert "**Progress:** 1/6 sections completed" in out.text
    assert started.progress.current_section == "wellness-domains"
    assert started.progress.responses == {"persona-snapshot": "I'm a designer in Leeds"}


def test_full_assessment(started):
    replies = [wellness.handle(a, started) for a in ANSWERS]
    assert replies[-1] == Reply(wellness.SUMMARY)
    assert "5/6 sections completed" in replies[-2].text
    progress = started.progress
    assert progress.completed_sections == [s.id for s in wellness.SECTIONS]
    assert progress.responses == {s.id: a for s, a in zip(wellness.SECTIONS, ANSWERS)}
    assert progress.current_section == "motivation-mapping"


def test_completion_is_idempotent(started):
    for a in ANSWERS:
        wellness.handle(a, started)
    out = wellness.handle("one more thought", started)
    assert out == Reply(wellness.SUMMARY)
    assert len(started.progress.completed_sections) == 6
    assert started.progress.responses["motivation-mapping"] == "one more thought"


@pytest.mark.parametrize("msg", ["main menu", "Take me to SERVICES", "start over please"])
def test_navigation_leaves_script(started, msg):
    assert wellness.handle(msg, started) == ReturnToMenu()
    assert started.progress.responses == {}


def test_unknown_section_restarts(started):
    started.progress.current_section = "no-such-section"
    out = wellness.handle("hello", started)
    assert out == Reply(wellness.INTRO.format(first_prompt=wellness.SECTIONS[0].assessment_prompt))
    assert started.progress.current_section == "persona-snapshot"


def test_wrong_progress_type_restarts(started):
    started.progress = JournalingProgress()
    wellness.handle("hello", started)
    assert isinstance(started.progress, WellnessProgress)
