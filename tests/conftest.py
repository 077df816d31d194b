import os
from pathlib import Path
import sys

import httpx
import pytest
from fastapi.testclient import TestClient

os.environ["CLIENT_STORAGE_URL"] = "sqlite:///./test_lab_client_storage.db"
os.environ["LOGIN_API_BASE_URL"] = "https://auth.lab.test/"
os.environ["DASHBOARD_API_BASE_URL"] = "https://inventory.lab.test"
os.environ["DASHBOARD_LOGIN_EMAIL"] = "admin@lab.com"

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from labinventory.api_client import get_http_client  # noqa: E402
from labinventory.database import Base, SessionLocal, engine  # noqa: E402
from labinventory.main import app  # noqa: E402
from labinventory.storage import ClientStorage  # noqa: E402


class FakeLabApi:
    """Stands in for both remote backends; routes on (host, method, path)."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str, str], httpx.Response | Exception] = {}
        self.requests: list[httpx.Request] = []

    def respond(self, host: str, method: str, path: str, response: httpx.Response | Exception) -> None:
        self.routes[(host, method, path)] = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self.routes.get((request.url.host, request.method, request.url.path))
        if outcome is None:
            return httpx.Response(404, json={"error": "Not found"})
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def reset_db() -> None:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture
def lab_api() -> FakeLabApi:
    return FakeLabApi()


@pytest.fixture
def http_client(lab_api: FakeLabApi) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(lab_api))


@pytest.fixture
def storage():
    with SessionLocal() as db:
        yield ClientStorage(db, "test-browser")


@pytest.fixture
def client(lab_api: FakeLabApi):
    async def _override_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(lab_api)) as mocked:
            yield mocked

    app.dependency_overrides[get_http_client] = _override_http_client
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
