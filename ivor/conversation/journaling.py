"""
Transformational journaling: a morning ritual and an evening ritual.

The first message picks the ritual ("morning" / "evening"). Each ritual is a
fixed sequence of steps. A step stores the user's answer under its entry key,
moves the step pointer on and shows the next prompt. The last step returns a
summary built from every stored entry.

Morning: breathwork -> vision -> reframe -> affirmations -> gratitude -> visualization
Evening: wins -> lesson -> growth -> tomorrow-impact -> tomorrow-leverage
         -> tomorrow-reality -> starter-actions

Breathwork is a gate. It only moves on when the message contains "ready".
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .keywords import wants_main_menu
from .results import Reply, ReturnToMenu, ScriptResult
from .session import SERVICE_JOURNALING, JournalingProgress, Session

STEP_TIME_IDENTIFICATION = "time-identification"
STEP_MORNING = "morning-ritual"
STEP_EVENING = "evening-ritual"

MORNING_STEPS = ["breathwork", "vision", "reframe", "affirmations", "gratitude", "visualization"]
EVENING_STEPS = [
    "wins",
    "lesson",
    "growth",
    "tomorrow-impact",
    "tomorrow-leverage",
    "tomorrow-reality",
    "starter-actions",
]

# step -> entry key its answer is stored under
MORNING_ENTRY_KEYS = {
    "vision": "vision",
    "reframe": "barrier",
    "affirmations": "affirmations",
    "gratitude": "gratitude",
    "visualization": "visualization",
}
EVENING_ENTRY_KEYS = {
    "wins": "wins",
    "lesson": "lesson",
    "growth": "growth",
    "tomorrow-impact": "impact_task",
    "tomorrow-leverage": "leverage_task",
    "tomorrow-reality": "reality_task",
    "starter-actions": "starter_actions",
}

# ---------------------------------------------------------------------------
# Texts
# ---------------------------------------------------------------------------

INTRO = """📖 **Welcome to Transformational Journaling**

I'm your guide for daily transformational journaling rituals designed to rewire thought patterns and propel you toward your highest potential. This isn't just writing - it's intentional daily evolution through structured morning and evening practices.

**What makes this transformational:**
🌅 **Morning Rituals** - Vision setting, resistance reframing, affirmations, gratitude, outcome visualization
🌙 **Evening Rituals** - Wins celebration, lesson extraction, growth recognition, tomorrow's planning
🔄 **Daily Integration** - Each session builds on the last, creating compound growth

**To begin, I need to know:**
Are you starting a **morning ritual** or an **evening ritual**?

Just say "morning" or "evening" to begin your transformational journey."""

CHOOSE_RITUAL = """I need to know if you're starting a **morning** or **evening** journaling ritual.

🌅 **Morning** - Set intentions, vision, and mindset for the day ahead
🌙 **Evening** - Reflect on wins, lessons, and prepare for tomorrow

Which ritual would you like to begin?"""

MORNING_START = """🌅 **Morning Transformational Ritual**

Let's begin with grounding and intention. This ritual will prime your mindset and energy for an intentional, powerful day.

**Step 1: Breathwork & Grounding**

Take a moment to breathe deeply. I want you to take 3 slow, intentional breaths:
- Inhale for 4 counts
- Hold for 4 counts
- Exhale for 6 counts

Once you've done this, simply type "ready" and we'll move to setting your vision for the day.

*This isn't rushed - take the time you need to center yourself.*"""

BREATHWORK_REMINDER = """Take your time with the breathwork. When you've completed 3 intentional breaths (inhale 4, hold 4, exhale 6), type "ready" to continue.

Remember: This ritual is about depth over speed. Let yourself truly center before we proceed."""

VISION_PROMPT = """✨ **Vision of the Day**

What is the ONE priority today that will truly move the needle in your life?

This isn't about a long to-do list. I want you to identify the single most important thing that, if accomplished, would make you feel proud and aligned with your growth.

*Example: "Complete the first draft of my business proposal because it moves me closer to financial independence" or "Have an honest conversation with my partner about our future because authentic communication strengthens our relationship."*

What's your needle-moving priority for today?"""

REFRAME_PROMPT = """🎯 **Reframe Resistance**

Now that you've identified your priority, let's address what might get in the way.

What's one barrier, fear, or resistance you anticipate facing today as you work toward that priority?

Once you share that, I'll help you reframe it as an opportunity for growth.

*Example: "I'm afraid people will judge my business idea" or "I tend to avoid difficult conversations" or "I get distracted by social media when I need to focus."*

What resistance or barrier do you anticipate?"""

AFFIRMATIONS_PROMPT = """💪 **Reframed as Opportunity**

*Your barrier:* "{barrier}"

**Reframe:** This barrier is actually an invitation to strengthen a crucial skill. Every time you face this resistance and move through it, you're building the exact capability you need for your liberation and growth.

**Now, create 2-3 mission-anchored affirmations** that speak to your authentic power and the person you're becoming.

*These should feel true and inspiring, not fake or forced. Examples:*
- "I trust my voice and my vision deserves to be heard"
- "I choose courage over comfort in service of my growth"
- "My authentic self is my greatest strength"

What are your 2-3 affirmations for today?"""

GRATITUDE_PROMPT = """🙏 **Gratitude with Purpose**

Share 2-3 specific things you're grateful for today AND explain why they matter to your growth or wellbeing.

*This isn't generic gratitude - I want you to connect each thing to its deeper significance in your life.*

*Examples:*
- "I'm grateful for my morning coffee because those quiet moments help me connect with my intentions before the day takes over"
- "I'm grateful for my friend Marcus because his encouragement reminds me I'm not alone in pursuing my dreams"

What are you specifically grateful for today and why do they matter?"""

VISUALIZATION_PROMPT = """🌟 **Visualize Success**

Now, paint a vivid picture of how it looks and feels when you successfully complete your priority today.

Be specific about:
- What you'll see
- How you'll feel in your body
- What thoughts will be running through your mind
- How this success connects to your larger vision

*Example: "I see myself hitting 'send' on the business proposal. I feel confident and proud in my chest. I'm thinking 'I did it - I took the scary step.' This success proves I can turn my ideas into action, which is exactly what I need for the financial freedom I'm building toward."*

Describe your success in vivid detail:"""

MORNING_SUMMARY = """🌅 **Morning Ritual Complete!**

You've set powerful intentions for your day. Here's your transformational blueprint:

**📍 Your Vision:** {vision}

**💪 Barrier Reframed:** Your challenges are growth opportunities

**✨ Your Affirmations:** {affirmations}

**🙏 Gratitude Foundation:** {gratitude}

**🎯 Success Visualization:** {visualization}

**Your mindset is primed for an intentional, powerful day.** Carry these intentions with you, and remember: you've already done the inner work to succeed.

*This evening, return for your Evening Ritual to process today's growth and prepare for tomorrow.*

**Ready to make today meaningful? Your transformation starts now.**

Type "main menu" anytime to explore other I.V.O.R. services."""

EVENING_START = """🌙 **Evening Transformational Ritual**

Time to honor your day, extract wisdom, and set yourself up for tomorrow's success. This ritual transforms daily experiences into lasting growth.

**Step 1: Celebrate Your Wins**

Let's start by acknowledging your victories - big and small. Every step forward matters.

**What were your top 3 wins today?**

These can be:
- Tasks completed
- Conversations handled well
- Moments of growth or courage
- Small habits maintained
- Challenges faced head-on

*Remember: Progress, not perfection. Even "I got out of bed despite feeling low" counts as a win.*

What are your 3 wins from today?"""

LESSON_PROMPT = """🎓 **Extract the Lesson**

Now, think about a challenge or setback you faced today. This isn't about dwelling on what went wrong - it's about mining wisdom from the experience.

**Describe one setback or challenge from today, and what lesson you can extract from it.**

*Examples:*
- "I procrastinated on my important project → Lesson: I need to break big tasks into smaller, less overwhelming pieces"
- "I got triggered during a difficult conversation → Lesson: I react defensively when I feel misunderstood, so I need to pause and breathe before responding"

What challenge did you face and what can you learn from it?"""

GROWTH_PROMPT = """🌱 **Recognize Your Growth**

Today, you strengthened something important about yourself.

**What skill, mindset, or emotional capacity did you develop or strengthen today?**

This might be:
- A skill you practiced (communication, focus, creativity)
- A mindset you shifted (from fear to curiosity, from scarcity to abundance)
- An emotional muscle you flexed (patience, courage, self-compassion)

*Even facing discomfort builds your resilience muscle. Even asking for help builds your vulnerability strength.*

What did you strengthen about yourself today?"""

IMPACT_PROMPT = """🎯 **Tomorrow's Big Three: Impact Task**

Now let's design tomorrow for success. We'll identify three key tasks using a strategic framework.

**First: Your IMPACT task**
What's the one task tomorrow that, if completed, would create the biggest positive impact on your goals or wellbeing? This should be meaningful, not just urgent.

*Think about what would make you feel proud and aligned with your bigger vision.*

What's your highest-impact task for tomorrow?"""

LEVERAGE_PROMPT = """⚡ **Tomorrow's Big Three: Leverage Task**

**Second: Your LEVERAGE task**
What task could you do tomorrow that would make other things easier or more efficient? This is about working smarter, not harder.

*Examples: Setting up systems, having conversations that prevent future problems, doing prep work that saves time later.*

What's your leverage task for tomorrow?"""

REALITY_PROMPT = """✅ **Tomorrow's Big Three: Reality Check Task**

**Third: Your REALITY CHECK task**
What's one essential task that simply needs to get done? This might not be exciting, but it's necessary and achievable.

*This ensures you have momentum and feel productive, even if the bigger tasks get disrupted.*

What's your reality check task for tomorrow?"""

STARTER_ACTIONS_PROMPT = """🚀 **Starter Actions**

For each of your Big Three tasks, identify the very first small action you'll take to get started:

**Impact Task:** "{impact_task}"
*First action:*

**Leverage Task:** "{leverage_task}"
*First action:*

**Reality Task:** "{reality_task}"
*First action:*

*Keep these actions small and specific. "Open the document" instead of "work on project." "Text Sarah to schedule the call" instead of "have important conversation."*

List your three starter actions:"""

EVENING_SUMMARY = """🌙 **Evening Ritual Complete!**

You've transformed today's experiences into wisdom and set yourself up for tomorrow's success.

**🏆 Today's Wins:** {wins}

**🎓 Lesson Learned:** {lesson}

**🌱 Growth Achieved:** {growth}

**🎯 Tomorrow's Big Three:**
• **Impact:** {impact_task}
• **Leverage:** {leverage_task}
• **Reality:** {reality_task}

**🚀 Your Starter Actions:** {starter_actions}

**You've honored today's journey and intentionally designed tomorrow.** This is how daily transformation compounds into life-changing growth.

Sleep well knowing you're building the life you want, one intentional day at a time.

*Tomorrow morning, begin with your Morning Ritual to set powerful intentions for another day of growth.*

Type "main menu" to explore other I.V.O.R. services."""

# step -> text shown after that step's answer is stored (None = ritual summary)
MORNING_NEXT: Dict[str, Optional[str]] = {
    "vision": REFRAME_PROMPT,
    "reframe": AFFIRMATIONS_PROMPT,
    "affirmations": GRATITUDE_PROMPT,
    "gratitude": VISUALIZATION_PROMPT,
    "visualization": None,
}
EVENING_NEXT: Dict[str, Optional[str]] = {
    "wins": LESSON_PROMPT,
    "lesson": GROWTH_PROMPT,
    "growth": IMPACT_PROMPT,
    "tomorrow-impact": LEVERAGE_PROMPT,
    "tomorrow-leverage": REALITY_PROMPT,
    "tomorrow-reality": STARTER_ACTIONS_PROMPT,
    "starter-actions": None,
}


def _fill(template: str, entries: Dict[str, str]) -> str:
    return template.format_map(_Entries(entries))


class _Entries(dict):
    """format_map source that renders missing entries as empty strings."""

    def __missing__(self, key):
        return ""


# ---------------------------------------------------------------------------
# Script
# ---------------------------------------------------------------------------

def start(session: Session) -> str:
    session.current_service = SERVICE_JOURNALING
    session.current_step = STEP_TIME_IDENTIFICATION
    session.progress = JournalingProgress()
    return INTRO


def handle(message: str, session: Session) -> ScriptResult:
    if wants_main_menu(message):
        return ReturnToMenu()

    progress = session.progress
    if not isinstance(progress, JournalingProgress):
        return Reply(start(session))

    if session.current_step == STEP_TIME_IDENTIFICATION or not progress.current_ritual:
        return Reply(_choose_ritual(message, session, progress))

    if progress.current_ritual == "morning":
        return Reply(_morning(message, progress))
    if progress.current_ritual == "evening":
        return Reply(_evening(message, progress))
    return Reply(start(session))


def _choose_ritual(message: str, session: Session, progress: JournalingProgress) -> str:
    lower = message.lower()
    if "morning" in lower:
        progress.current_ritual = "morning"
        progress.morning_step = MORNING_STEPS[0]
        session.current_step = STEP_MORNING
        return MORNING_START
    if "evening" in lower:
        progress.current_ritual = "evening"
        progress.evening_step = EVENING_STEPS[0]
        session.current_step = STEP_EVENING
        return EVENING_START
    return CHOOSE_RITUAL


def _advance(step: str, steps: List[str], nxt: Dict[str, Optional[str]]) -> Tuple[str, Optional[str]]:
    """Step pointer after `step` and the text to show; the last step stays put."""
    idx = steps.index(step)
    new_step = steps[idx + 1] if idx + 1 < len(steps) else step
    return new_step, nxt[step]


def _run_step(
    message: str,
    step: str,
    steps: List[str],
    entry_keys: Dict[str, str],
    nxt: Dict[str, Optional[str]],
    entries: Dict[str, str],
    summary: str,
) -> Tuple[str, str]:
    entries[entry_keys[step]] = message
    new_step, template = _advance(step, steps, nxt)
    return new_step, _fill(template if template is not None else summary, entries)


def _morning(message: str, progress: JournalingProgress) -> str:
    step = progress.morning_step
    if step == "breathwork":
        if "ready" in message.lower():
            progress.morning_step = "vision"
            return VISION_PROMPT
        return BREATHWORK_REMINDER

    if step not in MORNING_ENTRY_KEYS:
        progress.morning_step = MORNING_STEPS[0]
        return MORNING_START

    progress.morning_step, text = _run_step(
        message, step, MORNING_STEPS, MORNING_ENTRY_KEYS, MORNING_NEXT, progress.morning_entries, MORNING_SUMMARY
    )
    return text


def _evening(message: str, progress: JournalingProgress) -> str:
    step = progress.evening_step
    if step not in EVENING_ENTRY_KEYS:
        progress.evening_step = EVENING_STEPS[0]
        return EVENING_START

    progress.evening_step, text = _run_step(
        message, step, EVENING_STEPS, EVENING_ENTRY_KEYS, EVENING_NEXT, progress.evening_entries, EVENING_SUMMARY
    )
    return text
