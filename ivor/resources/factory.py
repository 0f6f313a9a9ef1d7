"""
Build a ResourceStore from StoreConfig.
"""
from __future__ import annotations

import logging

from .store import ResourceStore

logger = logging.getLogger(__name__)


def build_store(s) -> ResourceStore:
    backend_name = (s.backend or "memory").lower()

    if backend_name == "supabase":
        from .supabase_store import SupabaseResourceBackend
        backend = SupabaseResourceBackend.from_settings(
            s.supabase_url,
            s.supabase_key,
            resources_table=s.resources_table,
            categories_table=s.categories_table,
        )
    elif backend_name == "memory":
        from .catalog import load_catalog
        backend = load_catalog(s.catalog_path, min_score=s.label_match_score)
    else:
        raise ValueError(f"Unknown resource backend: {s.backend!r} (expected memory | supabase)")

    logger.info("Resource store backend: %s", backend_name)
    return ResourceStore(backend, default_limit=s.default_limit)
