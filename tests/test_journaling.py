from __future__ import annotations

import pytest

from ivor.conversation import journaling
from ivor.conversation.results import Reply, ReturnToMenu
from ivor.conversation.session import SERVICE_JOURNALING, JournalingProgress


@pytest.fixture
def started(session):
    journaling.start(session)
    return session


@pytest.fixture
def morning(started):
    journaling.handle("morning please", started)
    return started


@pytest.fixture
def evening(started):
    journaling.handle("Evening", started)
    return started


def say(session, message):
    out = journaling.handle(message, session)
    assert isinstance(out, Reply)
    return out.text


def test_start(session):
    assert journaling.start(session) == journaling.INTRO
    assert session.current_service == SERVICE_JOURNALING
    assert session.current_step == journaling.STEP_TIME_IDENTIFICATION
    assert session.progress == JournalingProgress()


class TestChooseRitual:
    def test_neither_asks_again(self, started):
        assert say(started, "not sure") == journaling.CHOOSE_RITUAL
        assert started.current_step == journaling.STEP_TIME_IDENTIFICATION
        assert started.progress.current_ritual is None

    def test_morning(self, morning):
        assert morning.progress.current_ritual == "morning"
        assert morning.progress.morning_step == "breathwork"
        assert morning.current_step == journaling.STEP_MORNING

    def test_evening(self, evening):
        assert evening.progress.current_ritual == "evening"
        assert evening.progress.evening_step == "wins"
        assert evening.current_step == journaling.STEP_EVENING

    def test_morning_start_text(self, started):
        assert say(started, "Good MORNING") == journaling.MORNING_START


class TestBreathworkGate:
    def test_repeats_same_reminder_without_advancing(self, morning):
        first = say(morning, "ok")
        second = say(morning, "done breathing")
        assert first == second == journaling.BREATHWORK_REMINDER
        assert morning.progress.morning_step == "breathwork"
        assert morning.progress.morning_entries == {}

    def test_ready_moves_on(self, morning):
        assert say(morning, "I'm Ready") == journaling.VISION_PROMPT
        assert morning.progress.morning_step == "vision"


class TestMorningRitual:
    def test_full_flow(self, morning):
        say(morning, "ready")
        assert say(morning, "Finish the grant application") == journaling.REFRAME_PROMPT
        text = say(morning, "Fear of rejection")
        assert '*Your barrier:* "Fear of rejection"' in text
        assert say(morning, "I trust my voice") == journaling.GRATITUDE_PROMPT
        assert say(morning, "My friends, because they hold me up") == journaling.VISUALIZATION_PROMPT
        summary = say(morning, "Hitting submit and exhaling")

        assert summary.startswith("🌅 **Morning Ritual Complete!**")
        for entry in ("Finish the grant application", "I trust my voice",
                      "My friends, because they hold me up", "Hitting submit and exhaling"):
            assert entry in summary
        assert morning.progress.morning_entries == {
            "vision": "Finish the grant application",
            "barrier": "Fear of rejection",
            "affirmations": "I trust my voice",
            "gratitude": "My friends, because they hold me up",
            "visualization": "Hitting submit and exhaling",
        }

    def test_prompts_carry_examples_and_closing(self, morning):
        vision = say(morning, "ready")
        assert '*Example: "Complete the first draft of my business proposal' in vision
        assert "*Example:" in say(morning, "Ship the draft")
        say(morning, "Fear")
        assert "my friend Marcus" in say(morning, "I am enough")
        assert "*Example: \"I see myself hitting 'send'" in say(morning, "Friends")
        summary = say(morning, "Done")
        assert "**Ready to make today meaningful? Your transformation starts now.**" in summary

    def test_last_step_stays_put(self, morning):
        morning.progress.morning_step = "visualization"
        say(morning, "first")
        again = say(morning, "second")
        assert morning.progress.morning_step == "visualization"
        assert "second" in again
        assert morning.progress.morning_entries["visualization"] == "second"

    def test_unknown_step_restarts_ritual(self, morning):
        morning.progress.morning_step = "bogus"
        assert say(morning, "hi") == journaling.MORNING_START
        assert morning.progress.morning_step == "breathwork"


class TestEveningRitual:
    def test_full_flow(self, evening):
        answers = {
            "wins": "Went for a run",
            "lesson": "Ask for help sooner",
            "growth": "Patience",
            "impact_task": "Draft the proposal",
            "leverage_task": "Set up templates",
            "reality_task": "Pay rent",
        }
        assert say(evening, answers["wins"]) == journaling.LESSON_PROMPT
        assert say(evening, answers["lesson"]) == journaling.GROWTH_PROMPT
        assert say(evening, answers["growth"]) == journaling.IMPACT_PROMPT
        assert say(evening, answers["impact_task"]) == journaling.LEVERAGE_PROMPT
        assert say(evening, answers["leverage_task"]) == journaling.REALITY_PROMPT

        starter = say(evening, answers["reality_task"])
        assert '**Impact Task:** "Draft the proposal"' in starter
        assert '**Reality Task:** "Pay rent"' in starter

        summary = say(evening, "Open doc, make list, log in")
        assert summary.startswith("🌙 **Evening Ritual Complete!**")
        for value in answers.values():
            assert value in summary
        assert "Open doc, make list, log in" in summary
        assert "Sleep well knowing you're building the life you want" in summary
        assert evening.progress.evening_step == "starter-actions"

    def test_lesson_prompt_examples(self):
        assert "I procrastinated on my important project → Lesson:" in journaling.LESSON_PROMPT
        assert "A mindset you shifted" in journaling.GROWTH_PROMPT


class TestLeavingAndRecovery:
    @pytest.mark.parametrize("msg", ["main menu", "start over"])
    def test_navigation(self, morning, msg):
        assert journaling.handle(msg, morning) == ReturnToMenu()

    def test_navigation_beats_ritual_choice(self, started):
        assert journaling.handle("morning... actually main menu", started) == ReturnToMenu()

    def test_missing_progress_restarts(self, started):
        started.progress = None
        assert say(started, "morning") == journaling.INTRO
        assert isinstance(started.progress, JournalingProgress)
