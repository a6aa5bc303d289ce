import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio


# Ensure project root is on sys.path so top-level packages import
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


# Explicitly enable pytest-asyncio plugin for async tests/fixtures
pytest_plugins = ("pytest_asyncio",)


# The contacts microservice is imported as a normal module so the tests
# can call its endpoints in-memory without starting a real HTTP server.
from microservices.contacts_service_app import app as contacts_app, reset_store
from network.api_service import ContactsApiService, build_client
from repository.user_repository import UserRepository
from viewmodel.user_viewmodel import UserViewModel

BASE_URL = "http://testserver/api/"


@pytest.fixture(autouse=True)
def clean_store():
    reset_store()
    yield
    reset_store()


def asgi_client_factory():
    """Client factory routing every request into the in-memory contacts app."""
    return lambda: build_client(base_url=BASE_URL, transport=httpx.ASGITransport(app=contacts_app))


def mock_client_factory(handler):
    """Client factory answering every request with `handler(request)`."""
    return lambda: build_client(base_url=BASE_URL, transport=httpx.MockTransport(handler))


@pytest_asyncio.fixture()
async def api_client():
    """Raw async client for the contacts microservice."""
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=contacts_app), base_url=BASE_URL) as ac:
        yield ac


@pytest.fixture()
def api_service():
    return ContactsApiService(client_factory=asgi_client_factory())


@pytest.fixture()
def repository(api_service):
    return UserRepository(api_service)


@pytest.fixture()
def viewmodel(repository):
    return UserViewModel(repository)


@pytest.fixture()
def make_user():
    from models.user import User

    def _make(name="Ana Torres", email="ana@example.com", phone="5512345678", image_url=None):
        return User(name=name, email=email, phone=phone, image_url=image_url)

    return _make


@pytest.fixture()
def mock_repository():
    """Build a UserRepository whose transport is answered by `handler(request)`."""
    def _build(handler):
        return UserRepository(ContactsApiService(client_factory=mock_client_factory(handler)))

    return _build
