"""
YAML resource catalog -> InMemoryResourceBackend.

Catalog files are hand edited, so category and tag labels on a resource are
snapped onto the declared lists with RapidFuzz ("mental heath" -> "Mental Health").
Labels that match nothing well enough are kept as written and logged.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

import yaml
from rapidfuzz import fuzz, process, utils

from .models import Category, Resource, Tag
from .store import InMemoryResourceBackend

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = os.path.join(os.path.dirname(__file__), "..", "data", "resources.yaml")
DEFAULT_MATCH_SCORE = 80


def normalize_label(label: str, allowed: List[str], min_score: int = DEFAULT_MATCH_SCORE) -> Optional[str]:
    s = (label or "").strip()
    if not s:
        return None
    if s in allowed:
        return s
    match = process.extractOne(s, allowed, scorer=fuzz.WRatio, processor=utils.default_process)
    return match[0] if match and match[1] >= min_score else None


def _resource_from_entry(
    entry: Dict[str, Any],
    categories: Dict[str, Category],
    tag_names: List[str],
    min_score: int,
) -> Resource:
    data = dict(entry)
    title = data.get("title") or ""

    cat_label = data.pop("category", None)
    category = None
    if cat_label:
        name = normalize_label(str(cat_label), list(categories), min_score)
        if name:
            category = categories[name]
        else:
            logger.warning("Unknown category %r on resource %r", cat_label, title)
            category = Category(name=str(cat_label))

    tags = []
    for raw in data.pop("tags", None) or []:
        name = normalize_label(str(raw), tag_names, min_score) if tag_names else str(raw)
        if not name:
            logger.warning("Unknown tag %r on resource %r", raw, title)
            name = str(raw)
        if name not in tags:
            tags.append(name)

    data["keywords"] = [str(k) for k in data.get("keywords") or []]
    for key in ("id", "phone"):
        if data.get(key) is not None:
            data[key] = str(data[key])
    return Resource(category=category, tags=tags, **data)


def load_catalog(path: Optional[str] = None, min_score: int = DEFAULT_MATCH_SCORE) -> InMemoryResourceBackend:
    path = path or DEFAULT_CATALOG_PATH
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    categories = {c["name"]: Category(**c) for c in raw.get("categories") or []}
    tags = [Tag(name=str(t)) for t in raw.get("tags") or []]
    tag_names = [t.name for t in tags]

    resources = []
    for i, entry in enumerate(raw.get("resources") or []):
        res = _resource_from_entry(entry, categories, tag_names, min_score)
        if res.id is None:
            res.id = f"res-{i + 1}"
        resources.append(res)

    logger.info("Loaded %d resources in %d categories from %s", len(resources), len(categories), path)
    return InMemoryResourceBackend(resources, list(categories.values()))
