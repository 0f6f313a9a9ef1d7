"""
SupabaseResourceBackend against a recording stand-in for the supabase client.
"""
from __future__ import annotations

from types import SimpleNamespace

import pytest

from ivor.analytics.conversation_log import SupabaseConversationLog
from ivor.resources.store import ResourceStore
from ivor.resources.supabase_store import (
    SupabaseResourceBackend,
    make_client,
    row_to_resource,
    sanitize_query,
)

ROW = {
    "id": 7,
    "title": "Samaritans",
    "description": "24/7 emotional support helpline",
    "content": None,
    "website_url": "https://www.samaritans.org",
    "phone": "116 123",
    "email": None,
    "address": None,
    "keywords": ["crisis", "helpline"],
    "location": None,
    "is_active": True,
    "priority": 10,
    "ivor_categories": {"name": "Crisis Support", "icon": "🚨", "color": "#F44336"},
    "ivor_resource_tags": [{"ivor_tags": {"name": "24/7"}}, {"ivor_tags": {"name": "Crisis"}}],
}


class FakeQuery:
    def __init__(self, client, table):
        self.client = client
        self.calls = [("table", table)]

    def __getattr__(self, name):
        def record(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self
        return record

    def execute(self):
        if self.client.error:
            raise self.client.error
        return SimpleNamespace(data=self.client.rows)


class FakeClient:
    def __init__(self, rows=None, error=None):
        self.rows = rows if rows is not None else [ROW]
        self.error = error
        self.queries = []

    def table(self, name):
        q = FakeQuery(self, name)
        self.queries.append(q)
        return q


def _names(query):
    return [c[0] for c in query.calls]


def _call(query, name):
    return next(c for c in query.calls if c[0] == name)


class TestQueries:
    def test_by_category(self):
        client = FakeClient()
        out = SupabaseResourceBackend(client).by_category("Crisis Support", 5)
        q = client.queries[0]
        assert q.calls[0] == ("table", "ivor_resources")
        assert "!inner" in _call(q, "select")[1][0]
        assert ("eq", ("ivor_categories.name", "Crisis Support"), {}) in q.calls
        assert ("eq", ("is_active", True), {}) in q.calls
        assert ("order", ("priority",), {"desc": True}) in q.calls
        assert ("limit", (5,), {}) in q.calls
        assert [r.title for r in out] == ["Samaritans"]

    def test_search_builds_or_filter(self):
        client = FakeClient()
        SupabaseResourceBackend(client).search("therapy", 3)
        flt = _call(client.queries[0], "or_")[1][0]
        assert flt == (
            "title.ilike.*therapy*,description.ilike.*therapy*,"
            "content.ilike.*therapy*,keywords.cs.{therapy}"
        )

    def test_search_blank_query_skips_request(self):
        client = FakeClient()
        assert SupabaseResourceBackend(client).search("(*)", 3) == []
        assert client.queries == []

    def test_by_tags(self):
        client = FakeClient()
        SupabaseResourceBackend(client).by_tags(["Crisis", "24/7"], 3)
        q = client.queries[0]
        assert ("in_", ("ivor_resource_tags.ivor_tags.name", ["Crisis", "24/7"]), {}) in q.calls
        assert "limit" in _names(q)

    def test_categories(self):
        client = FakeClient(rows=[{"id": 1, "name": "Housing", "icon": "🏠", "created_at": "x"}])
        cats = SupabaseResourceBackend(client).categories()
        assert [c.name for c in cats] == ["Housing"]
        assert cats[0].id == "1"
        assert client.queries[0].calls[0] == ("table", "ivor_categories")

    def test_categories_reach_store_with_numeric_ids(self):
        client = FakeClient(rows=[{"id": 3, "name": "Legal Aid"}, {"id": 4, "name": "Youth Services"}])
        cats = ResourceStore(SupabaseResourceBackend(client)).categories()
        assert [(c.id, c.name) for c in cats] == [("3", "Legal Aid"), ("4", "Youth Services")]

    def test_transport_error_propagates_from_backend(self):
        backend = SupabaseResourceBackend(FakeClient(error=ConnectionError("down")))
        with pytest.raises(ConnectionError):
            backend.by_category("Housing", 5)

    def test_store_turns_transport_error_into_empty(self):
        store = ResourceStore(SupabaseResourceBackend(FakeClient(error=ConnectionError("down"))))
        assert store.by_category("Housing") == []
        assert store.crisis_resources() == []


class TestRowConversion:
    def test_row_to_resource(self):
        r = row_to_resource(ROW)
        assert r.id == "7"
        assert r.content == ""
        assert r.category.name == "Crisis Support"
        assert r.tags == ["24/7", "Crisis"]
        assert r.priority == 10

    def test_embedded_category_numeric_id(self):
        row = dict(ROW, ivor_categories={"id": 9, "name": "Crisis Support"})
        assert row_to_resource(row).category.id == "9"

    def test_row_without_joins(self):
        r = row_to_resource({"id": 1, "title": "Bare"})
        assert r.category is None
        assert r.tags == []
        assert r.is_active is True

    @pytest.mark.parametrize("raw,clean", [
        ("therapy", "therapy"),
        ("a,b", "a b"),
        ("x(y)*z%", "x y z"),
        ("  spaced   out ", "spaced out"),
    ])
    def test_sanitize_query(self, raw, clean):
        assert sanitize_query(raw) == clean


def test_make_client_requires_settings():
    with pytest.raises(RuntimeError):
        make_client(None, "key")
    with pytest.raises(RuntimeError):
        make_client("https://x.supabase.co", "")


class TestConversationLog:
    def test_upserts_latest_exchange(self):
        client = FakeClient()
        SupabaseConversationLog(client).record("conv-1", "hi", "hello")
        q = client.queries[0]
        assert q.calls[0] == ("table", "ivor_conversations")
        row = _call(q, "upsert")[1][0]
        assert row["id"] == "conv-1"
        assert [m["role"] for m in row["messages"]] == ["user", "assistant"]
        assert row["messages"][1]["content"] == "hello"

    def test_write_failure_is_swallowed(self):
        SupabaseConversationLog(FakeClient(error=RuntimeError("boom"))).record("conv-1", "hi", "hello")

    def test_no_conversation_id_no_write(self):
        client = FakeClient()
        SupabaseConversationLog(client).record("", "hi", "hello")
        assert client.queries == []
