# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for permission_service and the seeded roles."""

from datetime import datetime

import pytest

from src.exceptions import ForbiddenError
from src.models import User
from src.rbac.permissions import (
    ADMIN_PRIVILEGE,
    HR_PRIVILEGE,
    SALES_PRIVILEGE,
    SHIFTPLANNER_PRIVILEGE,
)
from src.services import permission_service, rbac_service, sales_person_service
from src.services.permission_service import AuthContext
from src.services.rbac_seed_service import seed_rbac_data
from tests.factories import create_sales_person


def test_seed_is_idempotent(db_session):
    seed_rbac_data(db_session)
    seed_rbac_data(db_session)
    assert rbac_service.get_role_by_name(db_session, "HR") is not None


def test_build_auth_context_for_hr(db_session, hr_user):
    ctx = permission_service.build_auth_context(db_session, hr_user)
    assert ctx.user_id == hr_user.id
    assert ctx.username == "hruser"
    assert ctx.privileges == frozenset({HR_PRIVILEGE, SALES_PRIVILEGE})


def test_global_admin_holds_every_privilege(db_session):
    seed_rbac_data(db_session)
    user = User(username="admin", is_active=True)
    db_session.add(user)
    db_session.commit()
    role = rbac_service.get_role_by_name(db_session, "Global Admin")
    rbac_service.assign_role_to_user(db_session, user.id, role.id)
    db_session.refresh(user)

    ctx = permission_service.build_auth_context(db_session, user)
    assert ctx.privileges == frozenset(
        {HR_PRIVILEGE, SALES_PRIVILEGE, SHIFTPLANNER_PRIVILEGE, ADMIN_PRIVILEGE}
    )


class TestCheckPermission:
    def test_allows_holder(self, hr_context):
        permission_service.check_permission(hr_context, HR_PRIVILEGE)

    def test_rejects_missing_privilege(self, sales_context):
        with pytest.raises(ForbiddenError):
            permission_service.check_permission(sales_context, HR_PRIVILEGE)

    def test_full_authentication_passes(self):
        ctx = AuthContext.full_authentication()
        permission_service.check_permission(ctx, HR_PRIVILEGE)
        assert ctx.username == "system"


class TestHrOrSelf:
    def test_hr_reads_everybody(self, db_session, hr_context):
        sales_person = create_sales_person(db_session)
        permission_service.check_hr_or_self(db_session, hr_context, sales_person.id)

    def test_linked_user(self, db_session, sales_user):
        sales_person = create_sales_person(db_session, user=sales_user)
        ctx = permission_service.build_auth_context(db_session, sales_user)
        assert permission_service.is_sales_person_user(db_session, ctx, sales_person.id)
        permission_service.check_hr_or_self(db_session, ctx, sales_person.id)

    def test_deleted_sales_person_loses_self_access(self, db_session, sales_user):
        sales_person = create_sales_person(db_session, user=sales_user)
        sales_person.deleted = datetime(2024, 1, 1)
        db_session.commit()
        ctx = permission_service.build_auth_context(db_session, sales_user)

        assert sales_person_service.get_by_user_id(db_session, sales_user.id) is None
        with pytest.raises(ForbiddenError):
            permission_service.check_hr_or_self(db_session, ctx, sales_person.id)

    def test_other_user(self, db_session, sales_user, sales_context):
        sales_person = create_sales_person(db_session, user=sales_user)
        with pytest.raises(ForbiddenError):
            permission_service.check_hr_or_self(
                db_session, sales_context, sales_person.id
            )
