from __future__ import annotations

import pytest

from ivor.conversation import problem_solving as ps
from ivor.conversation.results import Reply, ReturnToMenu
from ivor.conversation.session import SERVICE_PROBLEM_SOLVING, ProblemSolvingProgress


@pytest.fixture
def started(session):
    ps.start(session)
    return session


@pytest.fixture
def captured(started):
    ps.handle("My manager keeps undermining me", started)
    return started


def test_start(session):
    assert ps.start(session) == ps.INTRO
    assert session.current_service == SERVICE_PROBLEM_SOLVING
    assert session.progress == ProblemSolvingProgress()


class TestCaptureProblem:
    def test_first_message_is_the_problem(self, started):
        out = ps.handle("I can't make a decision about moving", started)
        assert started.progress.problem_description == "I can't make a decision about moving"
        assert '**Problem Captured:** "I can\'t make a decision about moving"' in out.text
        assert "**Occam's Razor** - Find the simplest solution" in out.text

    def test_lists_all_models(self, started):
        out = ps.handle("something", started)
        for m in ps.MODELS:
            assert f"🎯 **{m.name}** - {m.description}" in out.text

    def test_no_keyword_generic_recommendation(self, started):
        out = ps.handle("my flatmate", started)
        assert "All models could be helpful for this challenge." in out.text

    def test_several_recommendations_in_order(self):
        text = ps.recommend("Too complicated, I worry about the future")
        first = text.index("**First Principles**")
        control = text.index("**Circle of Control**")
        second = text.index("**Second-Order Thinking** - Consider")
        assert first < control < second

    def test_long_problem_clipped_to_100(self, started):
        out = ps.handle("x" * 120, started)
        assert f'"{"x" * 100}..."' in out.text


class TestApplyModel:
    @pytest.mark.parametrize("msg,model_id", [
        ("Let's try inversion", "inversion"),
        ("Circle of Control please", "circle-of-control"),
        ("occam's razor", "occams-razor"),
        ("Second-Order Thinking", "second-order-thinking"),
        ("first principles", "first-principles"),
    ])
    def test_named_model_applied_and_recorded(self, captured, msg, model_id):
        out = ps.handle(msg, captured)
        model = ps.get_model(model_id)
        assert out.text.startswith(f"🎯 **Applying {model.name}**")
        assert f"Start with question 1: **{model.questions[0]}**" in out.text
        assert captured.progress.selected_model == model_id

    def test_unmatched_falls_back_to_first_principles(self, captured):
        out = ps.handle("not sure which", captured)
        assert out.text.startswith("🎯 **Applying First Principles Thinking**")
        assert captured.progress.selected_model is None

    def test_fallback_keeps_earlier_selection(self, captured):
        ps.handle("inversion", captured)
        ps.handle("hmm", captured)
        assert captured.progress.selected_model == "inversion"

    def test_problem_clipped_to_150(self, started):
        ps.handle("y" * 200, started)
        out = ps.handle("inversion", started)
        assert f'**Your Challenge:** "{"y" * 150}..."' in out.text

    def test_short_problem_not_clipped(self, captured):
        out = ps.handle("inversion", captured)
        assert '**Your Challenge:** "My manager keeps undermining me"' in out.text


def test_navigation(captured):
    assert ps.handle("main menu", captured) == ReturnToMenu()


def test_missing_progress_is_rebuilt(started):
    started.progress = None
    out = ps.handle("stuck at work", started)
    assert isinstance(out, Reply)
    assert started.progress.problem_description == "stuck at work"
