"""
Wellness & habit coaching: a six-section self assessment.

Each user message answers the current section. The answer is stored verbatim
under the section id, the section is marked complete (once) and the next
section's prompt is shown. After the last section the completion summary is
returned, and keeps being returned for further answers.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .keywords import wants_main_menu
from .results import Reply, ReturnToMenu, ScriptResult
from .session import SERVICE_WELLNESS, Session, WellnessProgress


@dataclass(frozen=True)
class WellnessSection:
    id: str
    name: str
    description: str
    assessment_prompt: str


SECTIONS: List[WellnessSection] = [
    WellnessSection(
        id="persona-snapshot",
        name="Personal Snapshot",
        description="Understanding your current identity and life situation",
        assessment_prompt=(
            "Tell me about yourself - your background, current situation, and what you value most in life. "
            "This helps me understand your unique perspective as we build your wellness plan."
        ),
    ),
    WellnessSection(
        id="wellness-domains",
        name="Wellness Domains Inventory",
        description="Mapping your wellness across key life areas",
        assessment_prompt=(
            "Let's assess your current wellness across different life domains. Rate each area 1-10 and share "
            "what's working well or challenging: Physical Health, Mental Health, Relationships, Career/Work, "
            "Spirituality/Purpose, Recreation/Fun."
        ),
    ),
    WellnessSection(
        id="current-state-audit",
        name="Current State Audit",
        description="Honest assessment of where you are now",
        assessment_prompt=(
            "Let's take an honest look at your current habits and patterns. What daily/weekly habits support "
            "your wellbeing? What habits might be holding you back? What patterns do you notice in your behavior?"
        ),
    ),
    WellnessSection(
        id="aspirational-vision",
        name="Aspirational Vision",
        description="Creating a compelling future vision",
        assessment_prompt=(
            "Imagine your ideal life 1 year from now. What would it look like? How would you feel day-to-day? "
            "What would be different about your relationships, work, health, and overall experience?"
        ),
    ),
    WellnessSection(
        id="gap-analysis",
        name="Gap Analysis",
        description="Identifying the bridge between current and desired state",
        assessment_prompt=(
            "Looking at where you are now versus your ideal vision, what are the main gaps? What would need to "
            "change? What obstacles or challenges do you anticipate?"
        ),
    ),
    WellnessSection(
        id="motivation-mapping",
        name="Motivation Mapping",
        description="Understanding your deepest drivers for change",
        assessment_prompt=(
            "Let's explore your motivation. Why is creating these changes important to you? What might happen "
            "if you continue on your current path? What could happen if you make the changes you want?"
        ),
    ),
]

INTRO = """🌱 **Welcome to Wellness & Habit Coaching**

I'm excited to guide you through a comprehensive wellness assessment and planning process. This will help us create a personalized plan for sustainable habit change and holistic wellbeing.

**What we'll explore together:**
✨ Personal snapshot and values
🎯 Wellness domains assessment
🔍 Current state audit
🌟 Aspirational vision creation
📊 Gap analysis
💪 Motivation mapping

This is a journey of self-discovery that honors your unique experience as a Black queer man. We'll take it step by step, and you can pause or revisit any section.

**Let's begin with your Personal Snapshot:**

{first_prompt}

Take your time - there are no wrong answers, only your authentic truth."""

SUMMARY = """🎉 **Wellness Assessment Complete!**

Congratulations! You've completed all six sections of your wellness assessment. This is a significant step toward creating positive change in your life.

**Your Wellness Journey Summary:**
✨ Personal values and identity explored
🎯 Wellness domains assessed across key life areas
🔍 Current habits and patterns identified
🌟 Aspirational vision created
📊 Gaps and obstacles mapped
💪 Core motivations clarified

**Next Steps:**
Based on your responses, I can help you:
• Create specific, actionable habit goals
• Develop implementation strategies
• Design accountability systems
• Connect you with relevant community resources

*Type "main menu" to see all services.*"""


def get_section(section_id: Optional[str]) -> Optional[WellnessSection]:
    for s in SECTIONS:
        if s.id == section_id:
            return s
    return None


def _section_done(section: WellnessSection, nxt: WellnessSection, completed: int) -> str:
    return (
        f"✅ **{section.name} Complete**\n\n"
        "Thank you for sharing that insight. You're building a strong foundation for your wellness journey.\n\n"
        "---\n\n"
        f"🎯 **Next: {nxt.name}**\n"
        f"*{nxt.description}*\n\n"
        f"{nxt.assessment_prompt}\n\n"
        f"**Progress:** {completed}/{len(SECTIONS)} sections completed"
    )


def start(session: Session) -> str:
    session.current_service = SERVICE_WELLNESS
    session.current_step = "introduction"
    session.progress = WellnessProgress(current_section=SECTIONS[0].id)
    return INTRO.format(first_prompt=SECTIONS[0].assessment_prompt)


def handle(message: str, session: Session) -> ScriptResult:
    if wants_main_menu(message):
        return ReturnToMenu()

    progress = session.progress
    section = get_section(progress.current_section) if isinstance(progress, WellnessProgress) else None
    if section is None:
        return Reply(start(session))

    progress.responses[section.id] = message
    if section.id not in progress.completed_sections:
        progress.completed_sections.append(section.id)

    idx = SECTIONS.index(section)
    if idx == len(SECTIONS) - 1:
        return Reply(SUMMARY)

    nxt = SECTIONS[idx + 1]
    progress.current_section = nxt.id
    return Reply(_section_done(section, nxt, len(progress.completed_sections)))
