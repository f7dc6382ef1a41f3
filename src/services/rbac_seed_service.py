# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import logging

from sqlalchemy.orm import Session

from src.models import Permission, Role, RolePermission
from src.rbac.permissions import CORE_PERMISSIONS
from src.rbac.roles import DEFAULT_ROLES

from . import rbac_service

logger = logging.getLogger(__name__)


def seed_rbac_data(db: Session) -> None:
    """Seeds the database with core privileges and default roles.

    This function is idempotent.
    """
    for perm_data in CORE_PERMISSIONS:
        permission = (
            db.query(Permission).filter(Permission.code == perm_data["code"]).first()
        )
        if not permission:
            rbac_service.register_permission(db, **perm_data)

    for role_data in DEFAULT_ROLES:
        role = rbac_service.get_role_by_name(db, role_data["name"])
        if role:
            continue
        role = Role(
            name=role_data["name"],
            is_system=role_data["is_system"],
            description=role_data["description"],
        )
        db.add(role)
        db.flush()  # Flush to get the role ID
        logger.info(f"Seeded role {role.name}")

        for perm_code in role_data["permissions"]:
            db.add(RolePermission(role_id=role.id, permission_code=perm_code))
    db.commit()
