"""
Health & wellbeing advice. Stateless: every message is matched against the
topic keyword lists in order, and the topics menu is shown when none match.
"""
from __future__ import annotations

from typing import List, Tuple

from .keywords import contains_any, wants_main_menu
from .results import Reply, ReturnToMenu, ScriptResult
from .session import SERVICE_HEALTH_ADVICE, Session

SOURCE_NOTE = "\n\n---\n*Health guidance informed by [MenRUs.co.uk](https://menrus.co.uk) and specialist LGBTQ+ health resources*"

TOPICS_MENU = """🏥 **Health & Wellbeing Guidance**

I'm here to provide evidence-based health advice specifically for Black queer men, incorporating insights from specialized resources and addressing unique community health needs.

**What health topic would you like guidance on?**

🧠 **MENTAL HEALTH** - Depression, anxiety, community-specific mental health support
💊 **SEXUAL HEALTH** - STI prevention, HIV/PrEP information, sexual wellbeing
💪 **PHYSICAL HEALTH** - Fitness, nutrition, preventive care for our community
🩺 **HEALTHCARE NAVIGATION** - Finding LGBT+ friendly providers, advocating for yourself
🛡️ **SUBSTANCE & WELLBEING** - Harm reduction, chemsex awareness, healthy relationships with substances
🎭 **DAILY JOY & WELLNESS** - Humor, entertainment, and mental health boosts

Simply tell me which area interests you, or ask a specific health question.

*Remember: This guidance complements but doesn't replace professional medical advice. Always consult healthcare providers for personalized medical care.*"""

MENTAL_HEALTH = """🧠 **MENTAL HEALTH SUPPORT FOR BLACK QUEER MEN**

**Understanding Our Unique Challenges:**
- Black queer men face higher rates of depression, anxiety, and suicidal ideation
- Intersection of racism, homophobia, and minority stress creates additional mental health pressures
- Community resilience and chosen family are crucial protective factors

**🆘 Crisis Support:**
- **Switchboard LGBT+**: 0300 330 0630 (10am-10pm daily)
- **Samaritans**: 116 123 (24/7, free)

**🌱 Building Mental Resilience:**
1. **Community Connection** - Prioritize relationships with people who affirm your identity
2. **Identity Affirmation** - Engage with positive Black queer representation and community
3. **Boundaries** - Protect your energy from environments that don't support your wellbeing
4. **Professional Support** - Seek therapists with cultural competence in LGBTQ+ and racial identity

**Finding Mental Health Support:**
- Ask providers directly: "Do you have experience with LGBTQ+ clients?"
- Look for therapists listed with **Pink Therapy** or **BACP LGBT+ division**
- Consider online therapy platforms with LGBTQ+ specialists

Would you like specific resources for finding mental health professionals, or guidance on a particular mental health challenge?"""

SEXUAL_HEALTH = """💊 **SEXUAL HEALTH & WELLBEING**

**🛡️ HIV/STI Prevention:**
- **PrEP (Pre-Exposure Prophylaxis)** - Highly effective HIV prevention
- Regular STI testing every 3 months for sexually active individuals
- **Post-Exposure Prophylaxis (PEP)** available within 72 hours of exposure

**🏥 Where to Access Services:**
- **56 Dean Street** (London): Walk-in sexual health clinic
- **CliniQ**: Trans-inclusive sexual health services
- Local GUM (Genitourinary Medicine) clinics - NHS funded

**💬 Sexual Health Conversations:**
- Communicate openly with partners about testing status
- Normalize routine testing as part of health maintenance
- Know your rights to confidential, judgment-free care

**🤝 Support Resources:**
- **Antidote** (London): Chemsex support - 020 7833 7606
- **Terrence Higgins Trust**: Sexual health information and support

Need help finding sexual health services in your area, or have specific questions about sexual health and safety?"""

PHYSICAL_HEALTH = """💪 **PHYSICAL HEALTH & FITNESS**

**🏃🏿‍♂️ Fitness & Movement:**
- Find movement that brings you joy - dancing, walking, sports, gym
- **Community fitness groups** can provide social connection alongside physical health
- LGBTQ+ sports clubs offer affirming environments for physical activity

**🥗 Nutrition Considerations:**
- Community gardens and food co-ops may provide affordable fresh options
- Cultural foods can be healthy when prepared mindfully

**⚕️ Preventive Health:**
- Regular check-ups including blood pressure, cholesterol, diabetes screening
- Age-appropriate cancer screenings
- Mental health affects physical health - address both holistically

**📊 Health Inequalities Awareness:**
Black men face higher rates of hypertension and diabetes and need proactive health advocacy.

Would you like help finding healthcare providers, or guidance on specific physical health concerns?"""

HEALTHCARE_NAVIGATION = """🩺 **NAVIGATING HEALTHCARE AS A BLACK QUEER MAN**

**🔍 Research Providers:**
- Ask: "Do you have experience with LGBTQ+ patients?"
- Check if the practice has non-discrimination policies
- Look for inclusive forms and visible signs of LGBTQ+ affirmation

**📝 Preparing for Appointments:**
- Write down questions beforehand
- Be specific about your identity and health needs
- Bring a trusted friend for support if comfortable

**🚩 Red Flags to Watch For:**
- Provider seems uncomfortable with LGBTQ+ identity
- Dismissive of concerns or symptoms
- Assumptions about your relationships or lifestyle

**⚖️ Know Your Rights:**
- Right to confidential care
- Right to bring a support person to appointments
- Right to request a different provider if needed

Need help finding specific providers in your area, or have questions about advocating for yourself in medical settings?"""

SUBSTANCE_HEALTH = """🛡️ **SUBSTANCE USE & HARM REDUCTION**

**🌍 Community Context:**
- LGBTQ+ individuals have higher rates of substance use
- Often related to minority stress, discrimination, and coping

**🤲 Harm Reduction Principles:**
- Reducing harm is more important than total abstinence
- Small changes can make big differences in safety
- No judgment - focus on your wellbeing and safety

**⚠️ Warning Signs:**
- Using alone frequently
- Neglecting responsibilities or relationships
- Unable to enjoy activities without substances

**📞 Getting Support:**
- **Antidote** (London): 020 7833 7606 - Chemsex support
- **Turning Point**: Drug and alcohol services
- **LGBT Foundation**: Community-specific support

Need help finding specific substance use services, or support navigating recovery in an LGBTQ+ affirming environment?"""

JOY_AND_WELLNESS = """🎭 **DAILY JOY & WELLNESS BOOSTS**

**😂 DAILY JOY PRACTICES:**
• **Meme Therapy**: Follow Black queer content creators who make you laugh
• **Dance Breaks**: Put on your favorite song and move your body (even for 30 seconds!)
• **Group Chat Chaos**: Share funny moments with your chosen family

**🧪 HUMOR FOR MENTAL HEALTH:**
Laughter reduces stress hormone levels, releases endorphins and builds community connections.

**🎉 COMMUNITY FUN:**
• **Drag Bingo**: Most cities have queer-friendly venues
• **Comedy Nights**: Look for QTIPOC-centered events
• **Game Nights**: Host virtual or in-person game sessions

**💜 WHEN JOY FEELS HARD:**
Sometimes depression makes joy feel impossible. That's okay! Start micro-small: one funny video, one song you like. Professional support is available when joy feels consistently distant.

Need suggestions for specific types of entertainment, or want help incorporating more joy into your daily routine?"""

# (keywords, advice), checked in order
TOPICS: List[Tuple[List[str], str]] = [
    (["mental health", "depression", "anxiety"], MENTAL_HEALTH),
    (["sexual health", "sti", "hiv", "prep"], SEXUAL_HEALTH),
    (["physical health", "fitness", "exercise"], PHYSICAL_HEALTH),
    (["healthcare", "doctor", "gp", "medical"], HEALTHCARE_NAVIGATION),
    (["substance", "alcohol", "drugs", "chemsex"], SUBSTANCE_HEALTH),
    (["joy", "humor", "entertainment", "fun", "laugh"], JOY_AND_WELLNESS),
]


def advice_for(message: str) -> str:
    for keywords, text in TOPICS:
        if contains_any(message, keywords):
            return text + SOURCE_NOTE
    return TOPICS_MENU


def start(session: Session) -> str:
    session.current_service = SERVICE_HEALTH_ADVICE
    session.current_step = "introduction"
    session.progress = None
    return TOPICS_MENU


def handle(message: str, session: Session) -> ScriptResult:
    if wants_main_menu(message):
        return ReturnToMenu()
    return Reply(advice_for(message))
