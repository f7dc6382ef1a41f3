# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from src.database import get_db
from src.main import app
from src.models import User
from src.models.base import Base
from src.rbac.permissions import HR_PRIVILEGE, SALES_PRIVILEGE
from src.services import auth_service, rbac_service
from src.services.permission_service import AuthContext
from src.services.rbac_seed_service import seed_rbac_data

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def hr_context() -> AuthContext:
    return AuthContext(
        username="hr", privileges=frozenset({HR_PRIVILEGE, SALES_PRIVILEGE})
    )


@pytest.fixture
def sales_context() -> AuthContext:
    return AuthContext(username="sales", privileges=frozenset({SALES_PRIVILEGE}))


def _create_user_with_role(db_session, username: str, role_name: str) -> User:
    seed_rbac_data(db_session)
    user = User(username=username, email=f"{username}@example.com", is_active=True)
    db_session.add(user)
    db_session.flush()
    role = rbac_service.get_role_by_name(db_session, role_name)
    rbac_service.assign_role_to_user(db_session, user_id=user.id, role_id=role.id)
    db_session.refresh(user)
    return user


@pytest.fixture
def hr_user(db_session) -> User:
    """Create a user holding the HR role."""
    return _create_user_with_role(db_session, "hruser", "HR")


@pytest.fixture
def sales_user(db_session) -> User:
    """Create a user holding the Sales role."""
    return _create_user_with_role(db_session, "salesuser", "Sales")


@pytest.fixture
def hr_client(client, db_session, hr_user):
    """Create a test client authenticated as HR user."""
    token = auth_service.create_session(db_session, hr_user.id)
    client.cookies.set("session", token)
    return client


@pytest.fixture
def sales_client(client, db_session, sales_user):
    """Create a test client authenticated as a plain sales user."""
    token = auth_service.create_session(db_session, sales_user.id)
    client.cookies.set("session", token)
    return client
