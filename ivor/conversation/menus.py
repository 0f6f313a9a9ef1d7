"""
Fixed menu and signposting texts.
"""
from __future__ import annotations

SERVICE_SELECTION = """Hi! I'm I.V.O.R. - your Intelligent Virtual Organizing Resource. I offer both immediate resource support and structured life coaching designed for Black queer liberation and empowerment.

**🚀 Need quick help? Just tell me what you need:**
- Mental health support, therapy
- Housing assistance, accommodation
- Legal help, discrimination issues
- Community events, local connections
- Crisis support, emergency resources

**📚 Want structured coaching? Choose a program:**

🌱 **Wellness & Habit Coaching** - 6-section personalized wellness assessment
🧩 **Strategic Problem Solving** - Mental model frameworks for complex challenges
📖 **Transformational Journaling** - Daily morning/evening rituals for growth
🏥 **Health & Wellbeing Advice** - Health guidance for our community

**Examples:** *"I need therapy resources"* | *"I want wellness coaching"* | *"Help with housing"* | *"Start journaling"* | *"Start problem solving"*

Whether you need immediate resources or want to dive deep into personal development, I'm here to support your liberation journey. What would be most helpful?"""

WELCOME = """Welcome! I'm I.V.O.R. - your Intelligent Virtual Organizing Resource, designed specifically to support Black queer men in the UK.

**I can help you in two ways:**

🚀 **Quick Resource Support** - Immediate help with mental health, housing, legal issues, community connections, crisis support
📚 **Comprehensive Life Coaching** - Structured programs for wellness habits, problem-solving, journaling and health

**For immediate resources, just mention what you need:**
- Mental health, therapy, counseling
- Housing, accommodation support
- Legal help, discrimination issues
- Community events, meetups
- Crisis or emergency support

**For deeper coaching, choose a structured program:**
🌱 **Wellness & Habit Coaching** - 6-section personalized assessment
🧩 **Strategic Problem Solving** - Mental model frameworks
📖 **Transformational Journaling** - Daily growth rituals
🏥 **Health & Wellbeing Advice** - Mental, sexual and physical health guidance

Your liberation and wellbeing matter. What kind of support would be most helpful right now?"""

COMMUNITY_SPACES = """Connecting with community is powerful! Here are spaces for Black queer men:

• **BLKOUT Community Events** - Check blkout.uk/events
• **UK Black Pride** - Annual celebration + year-round events
• **House of Ghetto** - Community gatherings and support
• **QTIPOC meetups** - Manchester, Birmingham, Leeds, London
• **Black Gay Men's Advisory Group** - London-based support

**Upcoming:**
- BLKOUT Healing Circles - Weekly Thursdays 7pm
- Pride events across UK cities
- Community skill-shares and workshops

Which city are you in? I can help you find local QTIPOC spaces and events."""

CAREER_SUPPORT = """Career advancement is key to liberation. Here are supportive resources:

• **Stonewall Workplace Programmes** - LGBTQ+ career support
• **Black Professionals Network** - Career development
• **Diversity Role Models** - Workplace inclusion training
• **Out & Equal** - LGBTQ+ workplace advocacy
• **BLKOUT Cooperative Development** - Alternative economic models

**Immediate support:**
- CV reviews and interview prep
- Workplace discrimination guidance
- Networking opportunities
- Cooperative business development

Are you job searching, dealing with workplace issues, or exploring cooperative alternatives?"""

GENERAL_COMMUNITY_RESOURCES = """**COMMUNITY RESOURCES AVAILABLE**

**🤝 CONNECT WITH THE BLKOUT COMMUNITY:**
• **[BLKOUT EVENTS](https://blkout.uk/events)** - Community gatherings, workshops, and liberation activities
• **[BLKOUT NEWSROOM](https://blkout.uk/newsroom)** - Latest community updates and advocacy news
• **[BLKOUTHUB](https://blkouthub.com)** - Community platform and resources
• **[BLKOUT NEWSLETTER](https://blkout.uk/newsletter)** - Weekly community updates and opportunities

**🛡️ IMMEDIATE SUPPORT RESOURCES:**
🧠 **MENTAL HEALTH** - Culturally competent therapy and crisis support
🏠 **HOUSING** - LGBTQ+ friendly accommodation and emergency help
⚖️ **LEGAL SUPPORT** - Discrimination guidance and civil rights advocacy
🌈 **COMMUNITY** - Local QTIPOC events and support groups
🚨 **CRISIS SUPPORT** - 24/7 helplines and emergency services

**📚 COACHING PROGRAMS:**
🌱 Wellness & Habits | 🧩 Problem-Solving | 📖 Journaling | 🏥 Health Advice

Just tell me what you need - whether it's immediate resources or structured coaching support!"""
