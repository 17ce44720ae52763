"""
Shared fixtures: in-memory SQLite store, stub identity service and stub LLM.
"""
import json
import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.agents.llm.base import LLMClient
from app.auth.deps import get_identity_client
from app.auth.identity import Identity
from app.db.base import Base
from app.db.models.roadmap import Roadmap
from app.deps import get_db, get_llm
from app.main import create_app
from app.settings import Settings

USER_ID = uuid.UUID("6f1c2a4e-8d7b-4c55-9a31-0b2f6c7d8e90")
OTHER_USER_ID = uuid.UUID("1d2e3f40-5a6b-4c7d-8e9f-a0b1c2d3e4f5")
VALID_TOKEN = "valid-token"
OTHER_TOKEN = "other-token"

RUST_ROADMAP = {
    "title": "Rust Basics",
    "phases": [
        {
            "title": "Setup",
            "description": "Install toolchain",
            "duration": "1 week",
            "milestones": ["Install compiler", "Run hello world"],
        }
    ],
}


class FakeIdentityClient:
    def __init__(self):
        self.tokens = []

    def resolve(self, token):
        self.tokens.append(token)
        if token == VALID_TOKEN:
            return Identity(id=USER_ID, email="learner@example.com")
        if token == OTHER_TOKEN:
            return Identity(id=OTHER_USER_ID)
        return None


class StubLLM(LLMClient):
    def __init__(self, reply=None):
        self.reply = json.dumps(RUST_ROADMAP) if reply is None else reply
        self.calls = []

    def generate_text(self, *, system, user, json_mode=False):
        self.calls.append({"system": system, "user": user, "json_mode": json_mode})
        return self.reply


def make_settings(**overrides) -> Settings:
    values = dict(
        _env_file=None,
        database_url="sqlite://",
        supabase_url="http://identity.test",
        supabase_anon_key="anon-key",
        LLM_PROVIDER="gateway",
        LOVABLE_API_KEY="gateway-key",
        GATEWAY_BASE_URL="http://gateway.test/v1",
        differentiate_error_status=False,
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def identity():
    return FakeIdentityClient()


@pytest.fixture
def llm():
    return StubLLM()


@pytest.fixture
def make_app(session_factory, identity, llm):
    def _make(settings=None, llm_client=None):
        app = create_app(settings or make_settings())

        def _get_db():
            session = session_factory()
            try:
                yield session
            finally:
                session.close()

        app.dependency_overrides[get_db] = _get_db
        app.dependency_overrides[get_identity_client] = lambda: identity
        app.dependency_overrides[get_llm] = lambda: llm_client or llm
        return app

    return _make


@pytest.fixture
def client(make_app):
    return TestClient(make_app())


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {VALID_TOKEN}"}


@pytest.fixture
def roadmap_count(session_factory):
    def _count():
        with session_factory() as session:
            return session.scalar(select(func.count()).select_from(Roadmap))

    return _count
