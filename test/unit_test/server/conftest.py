import json
import time
from typing import Any, AsyncGenerator, Dict, List, Optional, Tuple
from unittest.mock import patch

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from unthink.integrations import FunctionsClient, StorageClient
from unthink.server.core.config import settings
from unthink.server.core.security import AuthenticatedUser

STORAGE_URL = "http://mock-storage"
FUNCTIONS_URL = "http://mock-functions"


def make_token(
    user_id: str,
    *,
    email: Optional[str] = None,
    display_name: Optional[str] = None,
    expires_in: int = 3600,
    secret: Optional[str] = None,
) -> str:
    """Mint an access token shaped like the ones issued by the hosted auth service."""
    claims: Dict[str, Any] = {
        "sub": user_id,
        "aud": settings.auth.jwt_audience,
        "exp": int(time.time()) + expires_in,
        "email": email or f"{user_id}@example.com",
        "user_metadata": {"display_name": display_name} if display_name else {},
    }
    return jwt.encode(claims, secret or settings.auth.jwt_secret, algorithm=settings.auth.jwt_algorithm)


def auth_headers(user_id: str, **kwargs: Any) -> Dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user_id, **kwargs)}"}


def make_user(user_id: str, display_name: Optional[str] = None) -> AuthenticatedUser:
    return AuthenticatedUser(id=user_id, email=f"{user_id}@example.com", display_name=display_name)


class StorageStub:
    """Records storage uploads and answers with a fixed status."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code >= 400:
            return httpx.Response(self.status_code, json={"error": "storage failure"})
        return httpx.Response(self.status_code, json={"Key": request.url.path})


class FunctionsStub:
    """Records function invocations; responses are configured per function name."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        self.responses: Dict[str, Tuple[int, Any]] = {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        name = request.url.path.rsplit("/", 1)[-1]
        self.calls.append((name, json.loads(request.content)))
        status_code, body = self.responses.get(name, (200, {"success": True}))
        return httpx.Response(status_code, json=body)


@pytest.fixture
def storage_stub() -> StorageStub:
    return StorageStub()


@pytest.fixture
def functions_stub() -> FunctionsStub:
    return FunctionsStub()


@pytest_asyncio.fixture
async def storage_client(storage_stub: StorageStub) -> AsyncGenerator[StorageClient, None]:
    client = StorageClient(
        STORAGE_URL,
        service_key="service-role-key",
        client=httpx.AsyncClient(transport=httpx.MockTransport(storage_stub.handler)),
    )
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def functions_client(functions_stub: FunctionsStub) -> AsyncGenerator[FunctionsClient, None]:
    client = FunctionsClient(
        FUNCTIONS_URL,
        service_key="service-role-key",
        client=httpx.AsyncClient(transport=httpx.MockTransport(functions_stub.handler)),
    )
    yield client
    await client.aclose()


@pytest_asyncio.fixture(name="client")
async def client_fixture(
    session: AsyncSession,
    storage_client: StorageClient,
    functions_client: FunctionsClient,
) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with mocked lifespan and overridden dependencies."""
    from unthink.core.database import get_session
    from unthink.server.main import app
    from unthink.server.services.deps import get_functions_client, get_storage_client

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_storage_client] = lambda: storage_client
    app.dependency_overrides[get_functions_client] = lambda: functions_client

    # Mock the lifespan to prevent database initialization during tests
    async def mock_lifespan(app):
        yield

    with patch("unthink.server.main.lifespan", mock_lifespan):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            yield client

    app.dependency_overrides.clear()


@pytest.fixture
def auth():
    """Build an Authorization header for a user id: ``auth("alice")``."""
    return auth_headers


@pytest.fixture
def token_factory():
    return make_token


@pytest.fixture
def user_factory():
    return make_user
