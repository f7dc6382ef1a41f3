# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Privilege checks for service calls."""

import logging
import uuid
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from src.exceptions import ForbiddenError
from src.models import User
from src.rbac.permissions import HR_PRIVILEGE
from src.services import rbac_service, sales_person_service

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthContext:
    """Who is calling a service and what they may do.

    ``full`` contexts are used for internal calls and pass every check.
    """

    user_id: uuid.UUID | None = None
    username: str = "system"
    privileges: frozenset[str] = field(default_factory=frozenset)
    full: bool = False

    @classmethod
    def full_authentication(cls, username: str = "system") -> "AuthContext":
        return cls(username=username, full=True)

    def has_privilege(self, privilege: str) -> bool:
        return self.full or privilege in self.privileges


def build_auth_context(db: Session, user: User) -> AuthContext:
    """Collect the privileges of a user into an AuthContext."""
    return AuthContext(
        user_id=user.id,
        username=user.username,
        privileges=frozenset(rbac_service.get_user_permissions(db, user)),
    )


def check_permission(ctx: AuthContext, privilege: str) -> None:
    """Raise ForbiddenError unless the context holds the privilege."""
    if not ctx.has_privilege(privilege):
        logger.warning(f"User {ctx.username} lacks privilege {privilege}")
        raise ForbiddenError(privilege)


def is_sales_person_user(
    db: Session, ctx: AuthContext, sales_person_id: uuid.UUID
) -> bool:
    if ctx.full:
        return True
    if ctx.user_id is None:
        return False
    sales_person = sales_person_service.get_by_user_id(db, ctx.user_id)
    return sales_person is not None and sales_person.id == sales_person_id


def verify_user_is_sales_person(
    db: Session, ctx: AuthContext, sales_person_id: uuid.UUID
) -> None:
    """Raise ForbiddenError unless the caller is linked to the sales person."""
    if not is_sales_person_user(db, ctx, sales_person_id):
        raise ForbiddenError()


def check_hr_or_self(
    db: Session, ctx: AuthContext, sales_person_id: uuid.UUID
) -> None:
    """Allow HR for everybody and every other user for themselves."""
    if ctx.has_privilege(HR_PRIVILEGE):
        return
    verify_user_is_sales_person(db, ctx, sales_person_id)
