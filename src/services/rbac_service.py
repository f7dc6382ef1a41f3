# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import uuid

from sqlalchemy.orm import Session

from src.models import Permission, Role, RolePermission, User, UserRole

GLOBAL_ADMIN_ROLE = "Global Admin"


def user_has_permission(db: Session, user: User, permission_code: str) -> bool:
    """Check if a user has a specific permission."""
    if not user.is_active:
        return False
    return permission_code in get_user_permissions(db, user)


def is_global_admin(db: Session, user: User) -> bool:
    """Check for global admin role."""
    global_admin_role = get_role_by_name(db, GLOBAL_ADMIN_ROLE)
    if not global_admin_role:
        return False
    return any(ur.role_id == global_admin_role.id for ur in user.user_roles)


def get_user_permissions(db: Session, user: User) -> set[str]:
    """Get a set of all permission codes for a user.

    Global admins hold every registered permission.
    """
    if is_global_admin(db, user):
        return {p.code for p in db.query(Permission).all()}

    rows = (
        db.query(RolePermission.permission_code)
        .join(UserRole, UserRole.role_id == RolePermission.role_id)
        .filter(UserRole.user_id == user.id)
        .all()
    )
    return {row.permission_code for row in rows}


def assign_role_to_user(
    db: Session,
    user_id: uuid.UUID,
    role_id: uuid.UUID,
    assigned_by: User | None = None,
) -> UserRole:
    """Assign a role to a user."""
    user_role = UserRole(
        user_id=user_id,
        role_id=role_id,
        assigned_by_id=assigned_by.id if assigned_by else None,
    )
    db.add(user_role)
    db.commit()
    return user_role


def get_role_by_name(db: Session, name: str) -> Role | None:
    """Get a role by its name."""
    return db.query(Role).filter(Role.name == name).first()


def register_permission(
    db: Session, code: str, module: str, description: str | None = None
) -> Permission:
    """Register a new permission if it does not already exist."""
    permission = db.query(Permission).filter(Permission.code == code).first()
    if not permission:
        permission = Permission(code=code, module=module, description=description)
        db.add(permission)
        db.commit()
    return permission
