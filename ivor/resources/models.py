from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, Field

class Category(BaseModel):
    id: Optional[str] = None
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None

class Tag(BaseModel):
    id: Optional[str] = None
    name: str

class Resource(BaseModel):
    """One community-service entry. Read-only from the conversation core."""
    id: Optional[str] = None
    title: str
    description: str = ""
    content: str = ""
    website_url: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    category: Optional[Category] = None
    keywords: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    is_active: bool = True
    # Higher sorts first
    priority: int = 0
