"""
Durable record of conversation exchanges.

Write-only from the conversation core: each turn upserts the latest
(user, assistant) pair into the ivor_conversations table keyed by conversation
id. A failed write is logged and dropped; it never changes the reply.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class ConversationLog(Protocol):
    def record(self, conversation_id: str, message: str, reply: str) -> None:
        ...


class NullConversationLog:
    def record(self, conversation_id: str, message: str, reply: str) -> None:
        return None


class SupabaseConversationLog:
    def __init__(self, client, table: str = "ivor_conversations", user_id: Optional[str] = None):
        self.client = client
        self.table = table
        self.user_id = user_id

    @classmethod
    def from_settings(cls, url: Optional[str], key: Optional[str], table: str = "ivor_conversations"):
        from ..resources.supabase_store import make_client
        return cls(make_client(url, key), table=table)

    def record(self, conversation_id: str, message: str, reply: str) -> None:
        if not conversation_id:
            return
        now = datetime.now(timezone.utc).isoformat()
        row = {
            "id": conversation_id,
            "messages": [
                {"role": "user", "content": message, "timestamp": now},
                {"role": "assistant", "content": reply, "timestamp": now},
            ],
            "updated_at": now,
        }
        if self.user_id:
            row["user_id"] = self.user_id
        try:
            self.client.table(self.table).upsert(row).execute()
        except Exception as exc:
            logger.warning("Conversation log write failed for %s: %s", conversation_id, exc)
