"""
pytest configuration and fixtures for the User API test suite
The app runs in-process over httpx; no database is required.
"""

import pytest
import pytest_asyncio
import httpx

from user_api.app import create_app
from user_api.config.settings import DatabaseSettings
from user_api.database.connection import get_db_pool
from user_api.services.users_service import get_users_service

from fakes import FakePool, InMemoryUsersService


@pytest.fixture
def db_settings():
    return DatabaseSettings(host="localhost", user="postgres", password="secret", database="userdb")


@pytest.fixture
def users_service():
    return InMemoryUsersService()


@pytest.fixture
def db_pool():
    return FakePool()


@pytest.fixture
def app(db_settings, users_service, db_pool):
    """Application with the storage dependencies swapped for fakes"""
    application = create_app(db_settings)
    application.dependency_overrides[get_users_service] = lambda: users_service
    application.dependency_overrides[get_db_pool] = lambda: db_pool
    return application


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
