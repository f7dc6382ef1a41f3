# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from fastapi import Cookie, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.config import settings
from src.database import get_db
from src.models import User
from src.services import auth_service, permission_service
from src.services.permission_service import AuthContext

__all__ = ["get_auth_context", "get_current_user", "get_db"]


def get_current_user(
    db: Session = Depends(get_db),
    session: str | None = Cookie(default=None, alias=settings.session_cookie_name),
) -> User:
    """Get current authenticated user from session cookie."""
    if not session:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    session_obj = auth_service.get_session(db, session)
    if not session_obj:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
        )

    user = auth_service.get_user_by_id(db, session_obj.user_id)
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )

    return user


def get_auth_context(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> AuthContext:
    """Privileges of the current user for service calls."""
    return permission_service.build_auth_context(db, current_user)
