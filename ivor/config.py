from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field

class StoreConfig(BaseModel):
    """Where community resources are read from."""
    backend: str = "memory"  # memory | supabase
    # YAML catalog for the memory backend; None = bundled ivor/data/resources.yaml
    catalog_path: Optional[str] = None
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    resources_table: str = "ivor_resources"
    categories_table: str = "ivor_categories"
    default_limit: int = 5
    search_limit: int = 3
    # Minimum RapidFuzz score for mapping catalog labels to declared categories/tags
    label_match_score: int = 80

class SessionConfig(BaseModel):
    # Idle seconds before a session is dropped. None keeps sessions for the life of the process.
    ttl_s: Optional[float] = None
    # Routed turns between sweeps of idle sessions (0 = only on lookup)
    purge_every: int = 100

class ConversationConfig(BaseModel):
    # Hand every (message, reply) pair to the durable conversation log
    log_conversations: bool = False
    conversations_table: str = "ivor_conversations"

class AnalyticsConfig(BaseModel):
    enabled: bool = True
    # Responses slower than this are recorded as a performance gap
    slow_response_ms: int = 3000

class IvorConfig(BaseModel):
    store: StoreConfig = Field(default_factory=StoreConfig)
    sessions: SessionConfig = Field(default_factory=SessionConfig)
    conversation: ConversationConfig = Field(default_factory=ConversationConfig)
    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)
