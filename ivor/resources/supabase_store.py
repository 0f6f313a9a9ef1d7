"""
Supabase (PostgREST) backend for the community resource knowledge base.

Tables:
    ivor_categories(id, name, description, icon, color)
    ivor_resources(id, title, description, content, website_url, phone, email,
                   address, category_id, keywords[], location, is_active, priority)
    ivor_tags(id, name)
    ivor_resource_tags(resource_id, tag_id)

Every query filters is_active = true and orders by priority desc.
Errors are not caught here; ResourceStore turns them into empty results.

Requirements:
    pip install supabase
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional, Sequence

from supabase import Client, create_client

from .models import Category, Resource

logger = logging.getLogger(__name__)

_RESOURCE_FIELDS = """
    id,
    title,
    description,
    content,
    website_url,
    phone,
    email,
    address,
    keywords,
    location,
    is_active,
    priority,
    ivor_categories{cat_join} (
      name,
      icon,
      color
    ),
    ivor_resource_tags{tag_join} (
      ivor_tags{tag_join} (
        name
      )
    )
"""

# Characters with meaning inside a PostgREST or=(...) filter
_FILTER_UNSAFE = re.compile(r"[,(){}*%\"\\]")


def make_client(url: Optional[str], key: Optional[str]) -> Client:
    if not url or not key:
        raise RuntimeError("Missing Supabase settings (SUPABASE_URL / SUPABASE_KEY) for the supabase backend")
    return create_client(url, key)


def _select(cat_inner: bool = False, tag_inner: bool = False) -> str:
    return _RESOURCE_FIELDS.format(
        cat_join="!inner" if cat_inner else "",
        tag_join="!inner" if tag_inner else "",
    )


def row_to_category(row: Dict[str, Any]) -> Category:
    data = {k: v for k, v in row.items() if k in Category.model_fields}
    if data.get("id") is not None:
        data["id"] = str(data["id"])
    return Category(**data)


def row_to_resource(row: Dict[str, Any]) -> Resource:
    """Convert a PostgREST row with embedded category/tags into a Resource."""
    cat = row.get("ivor_categories")
    tags = [
        (rt.get("ivor_tags") or {}).get("name")
        for rt in (row.get("ivor_resource_tags") or [])
    ]
    return Resource(
        id=str(row["id"]) if row.get("id") is not None else None,
        title=row.get("title") or "",
        description=row.get("description") or "",
        content=row.get("content") or "",
        website_url=row.get("website_url"),
        phone=row.get("phone"),
        email=row.get("email"),
        address=row.get("address"),
        category=row_to_category(cat) if cat and cat.get("name") else None,
        keywords=list(row.get("keywords") or []),
        tags=[t for t in tags if t],
        location=row.get("location"),
        is_active=row.get("is_active", True) is not False,
        priority=int(row.get("priority") or 0),
    )


def sanitize_query(text: str) -> str:
    return re.sub(r"\s+", " ", _FILTER_UNSAFE.sub(" ", text or "")).strip()


class SupabaseResourceBackend:
    def __init__(
        self,
        client: Client,
        resources_table: str = "ivor_resources",
        categories_table: str = "ivor_categories",
    ):
        self.client = client
        self.resources_table = resources_table
        self.categories_table = categories_table

    @classmethod
    def from_settings(cls, url: Optional[str], key: Optional[str], **kwargs) -> "SupabaseResourceBackend":
        return cls(make_client(url, key), **kwargs)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def by_category(self, name: str, limit: int) -> List[Resource]:
        query = (
            self.client.table(self.resources_table)
            .select(_select(cat_inner=True))
            .eq("ivor_categories.name", name)
        )
        return self._run(query, limit)

    def search(self, text: str, limit: int) -> List[Resource]:
        q = sanitize_query(text)
        if not q:
            return []
        query = (
            self.client.table(self.resources_table)
            .select(_select())
            .or_(
                f"title.ilike.*{q}*,description.ilike.*{q}*,"
                f"content.ilike.*{q}*,keywords.cs.{{{q}}}"
            )
        )
        return self._run(query, limit)

    def by_tags(self, tags: Sequence[str], limit: int) -> List[Resource]:
        if not tags:
            return []
        query = (
            self.client.table(self.resources_table)
            .select(_select(tag_inner=True))
            .in_("ivor_resource_tags.ivor_tags.name", list(tags))
        )
        return self._run(query, limit)

    def categories(self) -> List[Category]:
        res = self.client.table(self.categories_table).select("*").order("name").execute()
        return [row_to_category(row) for row in (res.data or [])]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _run(self, query, limit: int) -> List[Resource]:
        res = (
            query.eq("is_active", True)
            .order("priority", desc=True)
            .limit(limit)
            .execute()
        )
        rows = res.data or []
        logger.debug("Supabase returned %d resource rows", len(rows))
        return [row_to_resource(r) for r in rows]
