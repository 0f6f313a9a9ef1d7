"""
Config loader with environment variable override support.

Env vars override YAML values so the same configs/ivor.yaml works both
locally and in deployment. Change the env vars, not the file.

Override keys (all optional):
  IVOR_RESOURCE_BACKEND    memory | supabase
  IVOR_CATALOG_PATH        e.g. /app/data/resources.yaml
  SUPABASE_URL             e.g. https://xyz.supabase.co
  SUPABASE_KEY             service or anon key (SUPABASE_SERVICE_KEY / SUPABASE_ANON_KEY also read)
  IVOR_SESSION_TTL_S       e.g. 3600 (empty string = no expiry)
  IVOR_LOG_CONVERSATIONS   true | false
"""
from __future__ import annotations

import os
from typing import Optional

import yaml
from .config import IvorConfig

_TRUTHY = ("1", "true", "yes", "on")


def _apply_env_overrides(raw: dict) -> dict:
    """Patch raw YAML dict with environment variable values where set."""

    def env(key: str, default=None):
        return os.environ.get(key, default)

    backend = env("IVOR_RESOURCE_BACKEND")
    if backend:
        raw.setdefault("store", {})["backend"] = backend.strip().lower()

    catalog = env("IVOR_CATALOG_PATH")
    if catalog:
        raw.setdefault("store", {})["catalog_path"] = catalog

    # Supabase
    url = env("SUPABASE_URL")
    if url:
        raw.setdefault("store", {})["supabase_url"] = url

    key = env("SUPABASE_KEY") or env("SUPABASE_SERVICE_KEY") or env("SUPABASE_ANON_KEY")
    if key:
        raw.setdefault("store", {})["supabase_key"] = key

    # Sessions
    ttl = env("IVOR_SESSION_TTL_S")
    if ttl is not None:
        raw.setdefault("sessions", {})["ttl_s"] = float(ttl) if ttl.strip() else None

    log_conv = env("IVOR_LOG_CONVERSATIONS")
    if log_conv:
        raw.setdefault("conversation", {})["log_conversations"] = log_conv.strip().lower() in _TRUTHY

    return raw


def load_config(path: Optional[str] = None) -> IvorConfig:
    raw: dict = {}
    if path:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    raw = _apply_env_overrides(raw)
    return IvorConfig.model_validate(raw)
