"""
Resource store adapter: the only way the conversation core reads community
resources.

A backend does the actual querying and is allowed to raise (connection lost,
bad credentials, ...). ResourceStore wraps it so that every lookup returns a
list: "nothing found" and "lookup failed" look the same to the caller.

Usage:
    store = ResourceStore(InMemoryResourceBackend(resources))
    store.by_category("Housing")
    store.search("therapy", limit=3)
    store.crisis_resources()
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Protocol, Sequence

from .models import Category, Resource

logger = logging.getLogger(__name__)

CRISIS_TAGS = ["Crisis", "Emergency", "24/7"]
CRISIS_LIMIT = 3
DEFAULT_LIMIT = 5


class ResourceBackend(Protocol):
    def by_category(self, name: str, limit: int) -> List[Resource]:
        ...

    def search(self, text: str, limit: int) -> List[Resource]:
        ...

    def by_tags(self, tags: Sequence[str], limit: int) -> List[Resource]:
        ...

    def categories(self) -> List[Category]:
        ...


# ---------------------------------------------------------------------------
# In-memory backend
# ---------------------------------------------------------------------------

def _ranked(resources: Iterable[Resource], limit: int) -> List[Resource]:
    active = [r for r in resources if r.is_active]
    # sorted() is stable, so equal priorities keep catalog order
    return sorted(active, key=lambda r: r.priority, reverse=True)[:limit]


def matches_text(resource: Resource, text: str) -> bool:
    q = (text or "").strip().lower()
    if not q:
        return False
    fields = [resource.title, resource.description, resource.content]
    if any(q in (f or "").lower() for f in fields):
        return True
    return any(q in k.lower() for k in resource.keywords)


class InMemoryResourceBackend:
    """Resources held in a list. Used for local runs and tests."""

    def __init__(self, resources: Optional[List[Resource]] = None, categories: Optional[List[Category]] = None):
        self.resources: List[Resource] = list(resources or [])
        self._categories: List[Category] = list(categories or [])

    def by_category(self, name: str, limit: int) -> List[Resource]:
        return _ranked(
            (r for r in self.resources if r.category and r.category.name == name),
            limit,
        )

    def search(self, text: str, limit: int) -> List[Resource]:
        return _ranked((r for r in self.resources if matches_text(r, text)), limit)

    def by_tags(self, tags: Sequence[str], limit: int) -> List[Resource]:
        wanted = set(tags)
        return _ranked((r for r in self.resources if wanted.intersection(r.tags)), limit)

    def categories(self) -> List[Category]:
        if self._categories:
            return sorted(self._categories, key=lambda c: c.name)
        seen = {r.category.name: r.category for r in self.resources if r.category}
        return [seen[name] for name in sorted(seen)]


# ---------------------------------------------------------------------------
# Adapter
# ---------------------------------------------------------------------------

class ResourceStore:
    """Never raises on lookup; a backend failure is logged and returns []."""

    def __init__(self, backend: ResourceBackend, default_limit: int = DEFAULT_LIMIT):
        self.backend = backend
        self.default_limit = default_limit

    def by_category(self, name: str, limit: Optional[int] = None) -> List[Resource]:
        return self._safe("by_category", self.backend.by_category, name, limit or self.default_limit)

    def search(self, text: str, limit: Optional[int] = None) -> List[Resource]:
        return self._safe("search", self.backend.search, text, limit or self.default_limit)

    def by_tags(self, tags: Sequence[str], limit: Optional[int] = None) -> List[Resource]:
        return self._safe("by_tags", self.backend.by_tags, list(tags), limit or self.default_limit)

    def crisis_resources(self) -> List[Resource]:
        return self.by_tags(CRISIS_TAGS, CRISIS_LIMIT)

    def categories(self) -> List[Category]:
        try:
            return list(self.backend.categories())
        except Exception as exc:
            logger.warning("Resource store categories lookup failed: %s", exc)
            return []

    def _safe(self, op: str, fn, arg, limit: int) -> List[Resource]:
        try:
            return list(fn(arg, limit) or [])
        except Exception as exc:
            logger.warning("Resource store %s(%r) failed: %s", op, arg, exc)
            return []
