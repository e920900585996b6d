"""Shared pytest fixtures for promptbridge tests."""

import json
from typing import Callable, Dict, Generator, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from promptbridge.core.config import Settings
from promptbridge.database import Base, build_session_factory
from promptbridge.main import create_app


@pytest.fixture
def test_settings() -> Settings:
    """외부 API 키와 DB URL 을 테스트 값으로 채운 설정."""
    return Settings(
        DATABASE_URL="sqlite://",
        DALL_E_API_KEY="test-openai-key",
        STABLE_DIFFUSION_API_KEY="test-sd-key",
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """스레드 간에 공유되는 SQLite in-memory 엔진."""
    db_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=db_engine)
    try:
        yield db_engine
    finally:
        db_engine.dispose()


@pytest.fixture
def db_session(engine: Engine) -> Generator[Session, None, None]:
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


class FakeUpstream:
    """httpx.MockTransport 핸들러. 요청을 기록하고 준비된 응답을 돌려준다."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body: object = {"ok": True}
        self.error: Optional[Exception] = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_payload(self) -> Dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def make_client(test_settings: Settings, engine: Engine, upstream: FakeUpstream) -> Generator[Callable[..., TestClient], None, None]:
    """lifespan 을 실행한 TestClient 를 만든다."""
    clients: List[TestClient] = []

    def _make(overrides: Optional[Dict] = None) -> TestClient:
        app = create_app(
            test_settings,
            engine=engine,
            transport=httpx.MockTransport(upstream),
        )
        for dependency, override in (overrides or {}).items():
            app.dependency_overrides[dependency] = override
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    try:
        yield _make
    finally:
        for client in clients:
            client.__exit__(None, None, None)


@pytest.fixture
def test_client(make_client) -> TestClient:
    return make_client()
