"""Shared test fixtures.

Loads .env then .env.test (overriding) so integration tests can target a
real MongoDB; unit tests only use the in-memory datastore.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest
from dotenv import load_dotenv

from application.request_context import RequestContext
from application.user.user_service import UserService
from domain.user.core.entities.user import User
from infrastructure.user.in_memory_datastore import InMemoryDatastore

env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

SAMPLE_EMAIL = "pedro@pedrocelso.com.br"


@pytest.fixture
def datastore() -> InMemoryDatastore:
    """Create fresh in-memory datastore for each test."""
    return InMemoryDatastore()


@pytest.fixture
def ctx(datastore: InMemoryDatastore) -> RequestContext:
    """Request context bound to the in-memory datastore."""
    return RequestContext(datastore=datastore)


@pytest.fixture
def service() -> UserService:
    """Create user service."""
    return UserService()


@pytest.fixture
def sample_users() -> List[User]:
    """Five users: "Pedro <i>" / "pedro@pedrocelso.com.br<i>"."""
    return [User(name=f"Pedro {i}", email=f"{SAMPLE_EMAIL}{i}") for i in range(5)]
