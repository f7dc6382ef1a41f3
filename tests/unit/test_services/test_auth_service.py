# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for auth_service."""

from datetime import datetime, timedelta

from src.models import User
from src.models.session import Session as SessionModel
from src.services import auth_service


def create_user(db_session, username: str = "existing") -> User:
    """Helper to create a persisted user."""
    user = User(username=username, email=f"{username}@example.com", is_active=True)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def test_create_and_get_session(db_session):
    user = create_user(db_session)
    token = auth_service.create_session(db_session, user.id)

    session = auth_service.get_session(db_session, token)
    assert session is not None
    assert session.user_id == user.id


def test_get_session_unknown_token(db_session):
    assert auth_service.get_session(db_session, "missing") is None


def test_get_session_expired_is_deleted(db_session):
    user = create_user(db_session)
    db_session.add(
        SessionModel(
            user_id=user.id,
            token="expired",
            expires_at=datetime.utcnow() - timedelta(minutes=1),
        )
    )
    db_session.commit()

    assert auth_service.get_session(db_session, "expired") is None
    assert db_session.query(SessionModel).filter_by(token="expired").first() is None


def test_delete_session(db_session):
    user = create_user(db_session)
    token = auth_service.create_session(db_session, user.id)

    assert auth_service.delete_session(db_session, token) is True
    assert auth_service.delete_session(db_session, token) is False


def test_get_user_lookups(db_session):
    user = create_user(db_session, "lookup")
    assert auth_service.get_user_by_id(db_session, user.id).username == "lookup"
    assert auth_service.get_user_by_username(db_session, "lookup").id == user.id
    assert auth_service.get_user_by_username(db_session, "nobody") is None
