"""
Strategic problem solving with five mental models.

First message: captured as the problem; reply recommends models by keyword and
lists all five. Every later message: a model named (by name or id) is applied
to the captured problem, anything else applies First Principles.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .keywords import contains_any, wants_main_menu
from .results import Reply, ReturnToMenu, ScriptResult
from .session import SERVICE_PROBLEM_SOLVING, ProblemSolvingProgress, Session


@dataclass(frozen=True)
class MentalModel:
    id: str
    name: str
    description: str
    application: str
    questions: List[str] = field(default_factory=list)


MODELS: List[MentalModel] = [
    MentalModel(
        id="first-principles",
        name="First Principles Thinking",
        description="Break down complex problems to fundamental truths",
        application="Strip away assumptions and build understanding from the ground up",
        questions=[
            "What do we know to be absolutely true about this situation?",
            "What assumptions am I making?",
            "If I had to explain this to someone with no context, what are the basic facts?",
        ],
    ),
    MentalModel(
        id="inversion",
        name="Inversion",
        description="Think backwards from the desired outcome",
        application="Consider what you want to avoid, then work backwards",
        questions=[
            "What would failure look like in this situation?",
            "What should I absolutely avoid doing?",
            "If I wanted the opposite outcome, what would I do?",
        ],
    ),
    MentalModel(
        id="occams-razor",
        name="Occam's Razor",
        description="The simplest explanation is usually correct",
        application="Look for the most straightforward solution first",
        questions=[
            "What's the simplest explanation for this problem?",
            "Am I overcomplicating this?",
            "What would the most direct solution be?",
        ],
    ),
    MentalModel(
        id="circle-of-control",
        name="Circle of Control",
        description="Focus energy on what you can actually influence",
        application="Separate controllable factors from uncontrollable ones",
        questions=[
            "What aspects of this situation can I directly control?",
            "What is completely outside my influence?",
            "Where should I focus my energy?",
        ],
    ),
    MentalModel(
        id="second-order-thinking",
        name="Second-Order Thinking",
        description="Consider the consequences of consequences",
        application="Think beyond immediate effects to long-term implications",
        questions=[
            "If I do X, what happens next?",
            "And then what happens after that?",
            "What are the unintended consequences?",
        ],
    ),
]

DEFAULT_MODEL_ID = "first-principles"

# (problem keywords, recommendation line), checked in order
RECOMMENDATIONS = [
    (["complex", "complicated", "overwhelm"], "**First Principles** - Break this down to basic components"),
    (["goal", "outcome", "result"], "**Inversion** - Work backwards from your desired outcome"),
    (["choice", "option", "decision"], "**Occam's Razor** - Find the simplest solution"),
    (["stress", "worry", "control"], "**Circle of Control** - Focus on what you can influence"),
    (["consequence", "impact", "future"], "**Second-Order Thinking** - Consider long-term effects"),
]

INTRO = """🧩 **Strategic Problem Solving**

I'll help you tackle complex challenges using proven mental models and frameworks. This approach will give you tools to think more clearly and find effective solutions.

**Available Mental Models:**
🎯 **First Principles** - Break problems down to fundamental truths
↩️ **Inversion** - Work backwards from desired outcomes
⚡ **Occam's Razor** - Find the simplest, most likely solutions
🎪 **Circle of Control** - Focus energy where you have influence
🔮 **Second-Order Thinking** - Consider long-term consequences

**To get started:**
1. Briefly describe the problem or challenge you're facing
2. I'll help you select the most relevant mental model(s)
3. We'll work through the framework together

What challenge would you like to work on? Share as much or as little detail as you're comfortable with."""


def _clip(text: str, n: int) -> str:
    return text[:n] + ("..." if len(text) > n else "")


def get_model(model_id: str) -> Optional[MentalModel]:
    for m in MODELS:
        if m.id == model_id:
            return m
    return None


def find_model(message: str) -> Optional[MentalModel]:
    """Model the user named, by id (first hyphen read as a space) or by full name."""
    lower = message.lower()
    for m in MODELS:
        if m.id.replace("-", " ", 1) in lower or m.name.lower() in lower:
            return m
    return None


def recommend(problem: str) -> str:
    recs = [line for kws, line in RECOMMENDATIONS if contains_any(problem, kws)]
    model_list = "\n".join(f"🎯 **{m.name}** - {m.description}" for m in MODELS)
    rec_text = "\n".join(recs) if recs else "All models could be helpful for this challenge."
    return (
        f'**Problem Captured:** "{_clip(problem, 100)}"\n\n'
        f"**Recommended Mental Models:**\n{rec_text}\n\n"
        f"**All Available Models:**\n{model_list}\n\n"
        'Which mental model resonates with you? Just tell me the name (e.g., "First Principles" or "Circle of Control").'
    )


def apply_model(model: MentalModel, problem: str) -> str:
    questions = "\n\n".join(f"{i}. {q}" for i, q in enumerate(model.questions, 1))
    return (
        f"🎯 **Applying {model.name}**\n\n"
        f'**Your Challenge:** "{_clip(problem, 150)}"\n\n'
        f"**{model.name} Framework:**\n"
        f"*{model.application}*\n\n"
        "**Let's work through this step by step:**\n\n"
        f"{questions}\n\n"
        "Take your time with each question. Answer them one by one, and I'll help you synthesize the insights into actionable next steps.\n\n"
        f"Start with question 1: **{model.questions[0]}**"
    )


def start(session: Session) -> str:
    session.current_service = SERVICE_PROBLEM_SOLVING
    session.current_step = "introduction"
    session.progress = ProblemSolvingProgress()
    return INTRO


def handle(message: str, session: Session) -> ScriptResult:
    if wants_main_menu(message):
        return ReturnToMenu()

    progress = session.progress
    if not isinstance(progress, ProblemSolvingProgress):
        progress = session.progress = ProblemSolvingProgress()

    if not progress.problem_description:
        progress.problem_description = message
        return Reply(recommend(message))

    model = find_model(message)
    if model is not None:
        progress.selected_model = model.id
    else:
        # No model named: fall back without recording a selection
        model = get_model(DEFAULT_MODEL_ID)
    return Reply(apply_model(model, progress.problem_description))
