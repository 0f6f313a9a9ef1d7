from __future__ import annotations

from typing import List

import pytest

from ivor.conversation.engine import ConversationEngine
from ivor.conversation.session import InMemorySessionStore, Session
from ivor.resources.models import Category, Resource
from ivor.resources.store import InMemoryResourceBackend, ResourceStore

HOUSING = Category(name="Housing", icon="🏠")
MENTAL = Category(name="Mental Health", icon="🧠")
LEGAL = Category(name="Legal Aid", icon="⚖️")
CRISIS = Category(name="Crisis Support", icon="🚨")


def make_resources() -> List[Resource]:
    return [
        Resource(id="h1", title="Stonewall Housing", description="Specialist LGBTQ+ housing support",
                 category=HOUSING, phone="020 7359 5767", tags=["LGBTQ+", "Housing", "Emergency"],
                 keywords=["housing", "accommodation"], priority=10),
        Resource(id="h2", title="Local Housing Advice", description="Council housing advice",
                 category=HOUSING, priority=4),
        Resource(id="h3", title="Closed Shelter", description="No longer operating",
                 category=HOUSING, keywords=["housing"], priority=99, is_active=False),
        Resource(id="m1", title="Mind LGBTQ+ Support", description="Mental health support",
                 content="Counselling and support groups", category=MENTAL,
                 website_url="https://www.mind.org.uk", tags=["Mental Health", "Counselling"],
                 keywords=["therapy", "counselling"], priority=9),
        Resource(id="c1", title="Samaritans", description="24/7 emotional support helpline",
                 category=CRISIS, phone="116 123", tags=["24/7", "Crisis", "Free"], priority=10),
        Resource(id="c2", title="Switchboard LGBT+", description="LGBTQ+ listening service",
                 category=CRISIS, phone="0300 330 0630", tags=["LGBTQ+", "24/7", "Crisis"], priority=10),
        Resource(id="c3", title="Galop", description="Anti-violence charity",
                 category=LEGAL, tags=["Legal", "Crisis"], priority=9),
        Resource(id="c4", title="Night Line", description="Overnight phone line",
                 category=CRISIS, tags=["24/7"], priority=2),
    ]


@pytest.fixture
def resources() -> List[Resource]:
    return make_resources()


@pytest.fixture
def store(resources) -> ResourceStore:
    return ResourceStore(InMemoryResourceBackend(resources, [HOUSING, MENTAL, LEGAL, CRISIS]))


@pytest.fixture
def empty_store() -> ResourceStore:
    return ResourceStore(InMemoryResourceBackend([]))


@pytest.fixture
def session() -> Session:
    return Session(id="test-session")


@pytest.fixture
def sessions() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def engine(store, sessions) -> ConversationEngine:
    return ConversationEngine(store=store, sessions=sessions)
