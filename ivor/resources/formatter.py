"""
Turns resource lookups into the reply text shown to the user.
"""
from __future__ import annotations

from typing import List

from .models import Resource

NO_RESOURCES_TEXT = (
    "I don't have specific resources for that request right now, but I'm here to help in other ways. "
    "You can also try contacting general support services like Samaritans (116 123) for immediate support."
)
LEAD_TEXT = "Here are some resources that might help:"
CLOSING_TEXT = (
    "💜 Remember, you're not alone and support is available. "
    "Is there anything specific you'd like to know more about?"
)


def format_resource(resource: Resource) -> str:
    category = f" ({resource.category.name})" if resource.category else ""
    lines = [f"**{resource.title}**{category}", resource.description]
    if resource.phone:
        lines.append(f"📞 {resource.phone}")
    if resource.website_url:
        lines.append(f"🌐 {resource.website_url}")
    if resource.email:
        lines.append(f"📧 {resource.email}")
    if resource.tags:
        lines.append(f"🏷️ {', '.join(resource.tags)}")
    return "\n".join(lines)


def format_resources(resources: List[Resource], intro: str = "") -> str:
    """
    Intro, lead line, one block per resource in the order given, closing line.
    An empty list always yields NO_RESOURCES_TEXT, whatever the intro says.
    """
    if not resources:
        return NO_RESOURCES_TEXT

    parts = []
    if intro:
        parts.append(intro)
    parts.append(LEAD_TEXT)
    parts.extend(format_resource(r) for r in resources)
    parts.append(CLOSING_TEXT)
    return "\n\n".join(parts)
