"""Test fixtures and configuration."""

from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from eventreg.database import get_db
from eventreg.main import app
from eventreg.models.base import Base
from eventreg.registration.service import RegistrationService
from eventreg.repositories.submission import SubmissionRepository
from eventreg.sms.client import SendResult, SmsGatewayClient, get_sms_client


@pytest_asyncio.fixture
async def db_engine():
    """In-memory SQLite engine with the schema created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def repository(db_session):
    return SubmissionRepository(db_session)


@pytest.fixture
def mock_sms_client():
    """SMS client whose sends always succeed."""
    client = AsyncMock(spec=SmsGatewayClient)
    client.send_sms = AsyncMock(
        return_value=SendResult(ok=True, provider_response={"ErrorCode": "000"})
    )
    return client


@pytest.fixture
def service(repository, mock_sms_client):
    return RegistrationService(repository, mock_sms_client)


@pytest.fixture
def gateway_requests():
    """Requests seen by the mocked SMS gateway."""
    return []


@pytest.fixture
def make_gateway_client(gateway_requests):
    """Build a real SmsGatewayClient backed by an httpx.MockTransport."""

    def _make(handler):
        def _recording_handler(request: httpx.Request) -> httpx.Response:
            gateway_requests.append(request)
            return handler(request)

        return SmsGatewayClient(
            api_url="https://sms.example.test/v3/api.php",
            username="user",
            api_key="key",
            sender_id="RBGTEM",
            template_id="1207000000000000001",
            timeout=10.0,
            transport=httpx.MockTransport(_recording_handler),
        )

    return _make


@pytest.fixture
def gateway_client(make_gateway_client):
    """Gateway client that answers with a JSON success object."""
    return make_gateway_client(
        lambda request: httpx.Response(
            200, json={"ErrorCode": "000", "ErrorMessage": "Done"}
        )
    )


@pytest_asyncio.fixture
async def api_client(session_factory, gateway_client):
    """HTTP client against the app with test database and gateway."""

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_sms_client] = lambda: gateway_client

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
