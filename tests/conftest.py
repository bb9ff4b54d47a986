import os

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jokebox.core.client import ControllerRegistry, get_registry
from jokebox.database import Base
from jokebox.main import create_app
from jokebox.services.controller import JokeController
from jokebox.services.joke_api import JokeApiClient
from jokebox.services.storage import BrowserStorage

SQLALCHEMY_TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"
API_BASE = "http://jokes.test"
CLIENT_ID = "0123456789abcdef0123456789abcdef"


def joke_body(joke_id=7, setup="S", punchline="P", type="general"):
    return {"id": joke_id, "type": type, "setup": setup, "punchline": punchline}


class FakeProvider:
    """Scripted joke provider; each request pops the next queued reply."""

    def __init__(self):
        self.replies = []
        self.requests = []

    def reply(self, body, status_code=200):
        self.replies.append((status_code, body))

    def fail(self, exc):
        self.replies.append((None, exc))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.replies:
            return httpx.Response(500, json={"message": "nothing queued"})
        status_code, body = self.replies.pop(0)
        if status_code is None:
            raise body
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json=body)


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def api(provider):
    return JokeApiClient(base_url=API_BASE, transport=httpx.MockTransport(provider.handler))


@pytest.fixture
def test_engine():
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def TestingSessionLocal(test_engine):
    return sessionmaker(bind=test_engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def storage(TestingSessionLocal):
    return BrowserStorage(TestingSessionLocal, CLIENT_ID)


@pytest.fixture
def controller(storage, api):
    return JokeController(storage, api)


@pytest.fixture(scope="session")
def app():
    app = create_app()
    return app


@pytest.fixture(autouse=True)
def override_get_registry(app, TestingSessionLocal, api):
    registry = ControllerRegistry(TestingSessionLocal, api)
    app.dependency_overrides[get_registry] = lambda: registry
    yield registry
    app.dependency_overrides.pop(get_registry, None)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac
