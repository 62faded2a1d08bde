"""Pytest fixtures and configuration"""

from typing import AsyncGenerator
from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from billsplit.main import app


@pytest.fixture
def alice() -> UUID:
    """First participant"""
    return uuid4()


@pytest.fixture
def bob() -> UUID:
    """Second participant"""
    return uuid4()


@pytest.fixture
def carol() -> UUID:
    """Third participant"""
    return uuid4()


@pytest.fixture
def participant_ids(alice: UUID, bob: UUID, carol: UUID) -> list:
    """Three participants in a fixed order"""
    return [alice, bob, carol]


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create test client for the application"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
