from __future__ import annotations

import os

import pytest

from ivor.config_loader import load_config

CONFIG_PATH = os.path.join(os.path.dirname(__file__), "..", "configs", "ivor.yaml")

ENV_KEYS = [
    "IVOR_RESOURCE_BACKEND",
    "IVOR_CATALOG_PATH",
    "SUPABASE_URL",
    "SUPABASE_KEY",
    "SUPABASE_SERVICE_KEY",
    "SUPABASE_ANON_KEY",
    "IVOR_SESSION_TTL_S",
    "IVOR_LOG_CONVERSATIONS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_without_file():
    cfg = load_config()
    assert cfg.store.backend == "memory"
    assert cfg.store.catalog_path is None
    assert cfg.sessions.ttl_s is None
    assert cfg.analytics.enabled
    assert not cfg.conversation.log_conversations


def test_bundled_yaml():
    cfg = load_config(CONFIG_PATH)
    assert cfg.store.search_limit == 3
    assert cfg.store.default_limit == 5
    assert cfg.analytics.slow_response_ms == 3000


def test_yaml_values(tmp_path):
    path = tmp_path / "ivor.yaml"
    path.write_text("store:\n  backend: supabase\n  search_limit: 7\nsessions:\n  ttl_s: 900\n", encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg.store.backend == "supabase"
    assert cfg.store.search_limit == 7
    assert cfg.sessions.ttl_s == 900


def test_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)).store.backend == "memory"


def test_env_overrides_yaml(monkeypatch):
    monkeypatch.setenv("IVOR_RESOURCE_BACKEND", " Supabase ")
    monkeypatch.setenv("SUPABASE_URL", "https://xyz.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", "service-key")
    monkeypatch.setenv("IVOR_CATALOG_PATH", "/srv/resources.yaml")
    cfg = load_config(CONFIG_PATH)
    assert cfg.store.backend == "supabase"
    assert cfg.store.supabase_url == "https://xyz.supabase.co"
    assert cfg.store.supabase_key == "service-key"
    assert cfg.store.catalog_path == "/srv/resources.yaml"


def test_supabase_key_preferred_over_fallbacks(monkeypatch):
    monkeypatch.setenv("SUPABASE_KEY", "primary")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
    assert load_config().store.supabase_key == "primary"


@pytest.mark.parametrize("value,expected", [("3600", 3600.0), ("", None), ("  ", None)])
def test_session_ttl(monkeypatch, value, expected):
    monkeypatch.setenv("IVOR_SESSION_TTL_S", value)
    assert load_config().sessions.ttl_s == expected


@pytest.mark.parametrize("value,expected", [("true", True), ("YES", True), ("1", True), ("false", False), ("no", False)])
def test_log_conversations(monkeypatch, value, expected):
    monkeypatch.setenv("IVOR_LOG_CONVERSATIONS", value)
    assert load_config().conversation.log_conversations is expected
