# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
from .permissions import (
    CORE_PERMISSIONS,
    HR_PRIVILEGE,
    SALES_PRIVILEGE,
    SHIFTPLANNER_PRIVILEGE,
)

# Global Admin always gets all core permissions
GLOBAL_ADMIN_PERMISSIONS = [p["code"] for p in CORE_PERMISSIONS]

DEFAULT_ROLES = [
    {
        "name": "Global Admin",
        "is_system": True,
        "description": "Grants all permissions across the entire system.",
        "permissions": GLOBAL_ADMIN_PERMISSIONS,
    },
    {
        "name": "HR",
        "is_system": False,
        "description": "Reads all working hour reports and closes billing periods.",
        "permissions": [HR_PRIVILEGE, SALES_PRIVILEGE],
    },
    {
        "name": "Shift Planner",
        "is_system": False,
        "description": "Plans shifts.",
        "permissions": [SHIFTPLANNER_PRIVILEGE, SALES_PRIVILEGE],
    },
    {
        "name": "Sales",
        "is_system": False,
        "description": "Regular employee with access to own reports.",
        "permissions": [SALES_PRIVILEGE],
    },
]
